"""
Core domain models for wireframe analysis.

These are pure data structures without business logic.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional

from core.constants import CONTENT_MAX_COUNTS, CONTENT_MIN_SIZES


class SemanticType(str, Enum):
    """Semantic classification used for color coding in rendered wireframes."""
    HEADER = "header"
    NAVIGATION = "navigation"
    HERO = "hero"
    CONTENT = "content"
    CARD = "card"
    CTA = "cta"
    FOOTER = "footer"


class ContentType(str, Enum):
    """Content placeholder type."""
    IMAGE = "image"
    BUTTON = "button"
    TEXT = "text"
    ICON = "icon"


SIBLING_POLICIES = ("drop", "promote")
TRAVERSAL_MODES = ("recursive", "iterative")


@dataclass
class BoundingBox:
    """Bounding box in absolute page coordinates."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        """Right edge."""
        return self.x + self.width

    @property
    def bottom(self) -> float:
        """Bottom edge."""
        return self.y + self.height

    @property
    def area(self) -> float:
        """Calculate area."""
        return self.width * self.height

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'x': self.x,
            'y': self.y,
            'width': self.width,
            'height': self.height
        }


@dataclass
class ComputedStyle:
    """Snapshot of the computed style values the analyzer reads.

    Every field is optional; ``None`` means the value was not captured and
    is treated as "not hidden / not flex".
    """
    display: Optional[str] = None
    visibility: Optional[str] = None
    opacity: Optional[str] = None
    flex_direction: Optional[str] = None


@dataclass
class ElementRecord:
    """A captured page element. Treated as read-only by the analyzer."""
    tag_name: str
    bbox: BoundingBox
    id: str = ""
    class_name: str = ""
    role: Optional[str] = None
    children: List['ElementRecord'] = field(default_factory=list)
    style: ComputedStyle = field(default_factory=ComputedStyle)
    text_content: str = ""
    attributes: Dict[str, str] = field(default_factory=dict)

    @property
    def tag(self) -> str:
        """Lowercase tag name."""
        return self.tag_name.lower()

    def get_attribute(self, name: str) -> Optional[str]:
        """Look up an attribute, including the ones stored as fields."""
        if name == 'id':
            return self.id or None
        if name == 'class':
            return self.class_name or None
        if name == 'role':
            return self.role
        return self.attributes.get(name)

    def iter_descendants(self) -> Iterator['ElementRecord']:
        """Yield all descendants in document order (excluding self)."""
        stack = list(reversed(self.children))
        while stack:
            element = stack.pop()
            yield element
            stack.extend(reversed(element.children))


@dataclass
class ContentHint:
    """Placeholder for a content element inside a wireframe node."""
    type: ContentType
    bbox: BoundingBox
    label: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        data = {'type': self.type.value, 'bbox': self.bbox.to_dict()}
        if self.label is not None:
            data['label'] = self.label
        return data


@dataclass
class WireframeNode:
    """A significant page region in the wireframe tree."""
    id: str
    tag_name: str
    label: str
    bbox: BoundingBox
    depth: int
    children: List['WireframeNode'] = field(default_factory=list)
    is_landmark: bool = False
    semantic_type: SemanticType = SemanticType.CONTENT
    content_hints: Optional[List[ContentHint]] = None

    def to_dict(self) -> dict:
        """Convert to the camelCase dictionary consumed by renderers."""
        data = {
            'id': self.id,
            'tagName': self.tag_name,
            'label': self.label,
            'bbox': self.bbox.to_dict(),
            'depth': self.depth,
            'children': [child.to_dict() for child in self.children],
            'isLandmark': self.is_landmark,
            'semanticType': self.semantic_type.value
        }
        if self.content_hints:
            data['contentHints'] = [hint.to_dict() for hint in self.content_hints]
        return data


@dataclass
class WireframeModel:
    """Complete wireframe model for a page."""
    nodes: List[WireframeNode]
    viewport_width: float
    viewport_height: float
    full_page_height: float
    page_url: str = ""
    captured_at: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'nodes': [node.to_dict() for node in self.nodes],
            'viewport': {
                'width': self.viewport_width,
                'height': self.viewport_height
            },
            'fullPageHeight': self.full_page_height,
            'pageUrl': self.page_url,
            'capturedAt': self.captured_at
        }


@dataclass(frozen=True)
class AnalyzerConfig:
    """Analyzer settings. A pure value, safe to share between calls."""
    min_area: float = 10000
    max_depth: int = 3
    # Kept on the config surface; the div rule reads large_div_ratio.
    viewport_area_threshold: float = 0.05
    grid_item_min_area: float = 2500
    large_div_ratio: float = 0.10
    content_min_sizes: Dict[str, Dict[str, float]] = field(
        default_factory=lambda: {k: dict(v) for k, v in CONTENT_MIN_SIZES.items()}
    )
    content_max_counts: Dict[str, int] = field(
        default_factory=lambda: dict(CONTENT_MAX_COUNTS)
    )
    sibling_policy: str = "drop"
    traversal: str = "recursive"

    def __post_init__(self):
        if self.sibling_policy not in SIBLING_POLICIES:
            raise ValueError(
                f"sibling_policy must be one of {SIBLING_POLICIES}, got {self.sibling_policy!r}"
            )
        if self.traversal not in TRAVERSAL_MODES:
            raise ValueError(
                f"traversal must be one of {TRAVERSAL_MODES}, got {self.traversal!r}"
            )
        if self.min_area < 0 or self.grid_item_min_area < 0:
            raise ValueError("area thresholds must be non-negative")
        if self.max_depth < 0:
            raise ValueError("max_depth must be non-negative")

        # Partial hint tables override the defaults per type
        known_types = {t.value for t in ContentType}
        for name in ('content_min_sizes', 'content_max_counts'):
            unknown = set(getattr(self, name)) - known_types
            if unknown:
                raise ValueError(f"{name} has unknown content types: {sorted(unknown)}")

        min_sizes = {k: dict(v) for k, v in CONTENT_MIN_SIZES.items()}
        for content_type, size in self.content_min_sizes.items():
            min_sizes[content_type] = {**min_sizes[content_type], **size}
        object.__setattr__(self, 'content_min_sizes', min_sizes)
        object.__setattr__(
            self, 'content_max_counts', {**CONTENT_MAX_COUNTS, **self.content_max_counts}
        )
