"""
Configuration management using Pydantic Settings.

Environment variables:
- WIREFRAME_MIN_AREA: Minimum element area for significance (px²)
- WIREFRAME_MAX_DEPTH: Maximum nesting depth of the wireframe tree
- WIREFRAME_VIEWPORT_AREA_THRESHOLD: Carried on AnalyzerConfig, not read by the
  div rule; see WIREFRAME_LARGE_DIV_RATIO
- WIREFRAME_GRID_ITEM_MIN_AREA: Minimum area of a grid item (px²)
- WIREFRAME_LARGE_DIV_RATIO: Viewport share a plain div needs to count
- WIREFRAME_SIBLING_POLICY: "drop" or "promote" for insignificant containers
- WIREFRAME_TRAVERSAL: "recursive" or "iterative"
"""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.models import AnalyzerConfig


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WIREFRAME_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Significance
    min_area: float = Field(default=10000, ge=0)
    max_depth: int = Field(default=3, ge=0)
    viewport_area_threshold: float = Field(default=0.05, ge=0, le=1)
    large_div_ratio: float = Field(default=0.10, ge=0, le=1)

    # Grid detection
    grid_item_min_area: float = Field(default=2500, ge=0)

    # Tree reduction
    sibling_policy: str = Field(default="drop", pattern="^(drop|promote)$")
    traversal: str = Field(default="recursive", pattern="^(recursive|iterative)$")

    def get_analyzer_config(self) -> AnalyzerConfig:
        """Get analyzer configuration as an AnalyzerConfig value."""
        return AnalyzerConfig(
            min_area=self.min_area,
            max_depth=self.max_depth,
            viewport_area_threshold=self.viewport_area_threshold,
            grid_item_min_area=self.grid_item_min_area,
            large_div_ratio=self.large_div_ratio,
            sibling_policy=self.sibling_policy,
            traversal=self.traversal
        )


# Global settings instance
settings = Settings()
