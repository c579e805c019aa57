"""
Entry points for building wireframe models from captured snapshots.
"""
from typing import Dict, Optional

from api.schemas import PageSnapshot
from config.settings import settings
from core.models import AnalyzerConfig, WireframeModel
from wireframe.analyzer import analyze_page


def wireframe_from_snapshot(
    snapshot: Dict,
    config: Optional[AnalyzerConfig] = None,
    logger=None
) -> WireframeModel:
    """
    Validate a captured page snapshot and build its wireframe model.

    Args:
        snapshot: JSON-like dict with url, viewport, fullPageHeight and root
        config: Analyzer settings (from environment settings when omitted)
        logger: Optional logger

    Returns:
        WireframeModel

    Raises:
        pydantic.ValidationError: If the snapshot is malformed
    """
    page = PageSnapshot.model_validate(snapshot)

    if config is None:
        config = settings.get_analyzer_config()

    if logger:
        logger.info(f"Building wireframe for {page.url or 'snapshot'}")

    return analyze_page(
        page.root.to_element(),
        viewport_width=page.viewport.width,
        viewport_height=page.viewport.height,
        full_page_height=page.full_page_height,
        page_url=page.url,
        config=config,
        captured_at=page.captured_at,
        logger=logger
    )


def wireframe_dict_from_snapshot(
    snapshot: Dict,
    config: Optional[AnalyzerConfig] = None,
    logger=None
) -> Dict:
    """Same as wireframe_from_snapshot, returning the renderer-facing dict."""
    return wireframe_from_snapshot(snapshot, config=config, logger=logger).to_dict()
