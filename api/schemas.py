"""
Pydantic schemas for captured page snapshots.

Validates the JSON handed over by DOM-capture tools before it is converted
into ElementRecord trees.
"""
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from core.models import BoundingBox, ComputedStyle, ElementRecord


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class BoundingBoxSchema(_CamelModel):
    """Bounding box in absolute page coordinates."""
    x: float = 0
    y: float = 0
    width: float = Field(default=0, ge=0)
    height: float = Field(default=0, ge=0)


class StyleSchema(_CamelModel):
    """Computed style values captured per element."""
    display: Optional[str] = None
    visibility: Optional[str] = None
    opacity: Optional[Union[float, str]] = None
    flex_direction: Optional[str] = Field(default=None, alias="flexDirection")


class ElementSnapshot(_CamelModel):
    """One captured element and its children."""
    tag_name: str = Field(alias="tagName", min_length=1)
    id: str = ""
    class_name: str = Field(default="", alias="className")
    role: Optional[str] = None
    bbox: BoundingBoxSchema = Field(default_factory=BoundingBoxSchema)
    style: StyleSchema = Field(default_factory=StyleSchema)
    text_content: str = Field(default="", alias="textContent")
    attributes: Dict[str, str] = Field(default_factory=dict)
    children: List["ElementSnapshot"] = Field(default_factory=list)

    def to_element(self) -> ElementRecord:
        """Convert to an ElementRecord tree."""
        opacity = self.style.opacity
        return ElementRecord(
            tag_name=self.tag_name.lower(),
            bbox=BoundingBox(**self.bbox.model_dump()),
            id=self.id,
            class_name=self.class_name,
            role=self.role,
            children=[child.to_element() for child in self.children],
            style=ComputedStyle(
                display=self.style.display,
                visibility=self.style.visibility,
                opacity=None if opacity is None else str(opacity),
                flex_direction=self.style.flex_direction
            ),
            text_content=self.text_content,
            attributes=dict(self.attributes)
        )


ElementSnapshot.model_rebuild()


class ViewportSchema(_CamelModel):
    """Viewport dimensions at capture time."""
    width: float = Field(gt=0)
    height: float = Field(gt=0)


class PageSnapshot(_CamelModel):
    """Complete captured page."""
    url: str = ""
    viewport: ViewportSchema
    full_page_height: float = Field(alias="fullPageHeight", ge=0)
    captured_at: Optional[str] = Field(default=None, alias="capturedAt")
    root: ElementSnapshot
