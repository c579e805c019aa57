"""
Geometry and visibility utilities for wireframe analysis.

Handles bounding box math and the visibility checks applied to captured
elements.
"""
from typing import Iterable, List, Optional, Tuple

import numpy as np

from core.constants import (
    FLEX_DISPLAYS,
    GRID_DISPLAYS,
    LANDMARK_ROLES,
    LANDMARK_TAGS,
    ROW_FLEX_DIRECTIONS,
)
from core.models import BoundingBox, ElementRecord


def parse_opacity(value) -> Optional[float]:
    """
    Parse a CSS opacity value.

    Args:
        value: Raw opacity (string, number or None)

    Returns:
        Float opacity, or None if missing or unparseable
    """
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def is_element_visible(element: ElementRecord) -> bool:
    """
    Check whether an element is rendered.

    Hidden means display:none, visibility:hidden, opacity 0, or a box with
    zero width or height. Missing style values count as visible.
    """
    style = element.style
    if style.display == 'none':
        return False
    if style.visibility == 'hidden':
        return False
    if parse_opacity(style.opacity) == 0:
        return False

    bbox = element.bbox
    if bbox.width == 0 or bbox.height == 0:
        return False

    return True


def is_landmark(element: ElementRecord) -> bool:
    """Check whether an element is a landmark by tag or ARIA role."""
    if element.tag in LANDMARK_TAGS:
        return True
    return bool(element.role) and element.role in LANDMARK_ROLES


def is_grid_or_row_flex(element: ElementRecord) -> bool:
    """
    Check if element lays out children as a CSS grid or a row flexbox.

    Column-direction flex is just vertical stacking, not a grid.
    """
    display = element.style.display
    if display in GRID_DISPLAYS:
        return True
    if display in FLEX_DISPLAYS:
        direction = element.style.flex_direction or 'row'
        return direction in ROW_FLEX_DIRECTIONS
    return False


def covers_area(parent: BoundingBox, child: BoundingBox, ratio: float) -> bool:
    """
    Check whether the child box takes up at least ``ratio`` of the parent area.

    Args:
        parent: Parent bounding box
        child: Child bounding box
        ratio: Required share of the parent area (0-1)

    Returns:
        True if child.area >= ratio * parent.area
    """
    return child.area >= parent.area * ratio


def meets_min_size(bbox: BoundingBox, min_size: dict) -> bool:
    """Check a box against a {'width', 'height'} minimum."""
    return bbox.width >= min_size['width'] and bbox.height >= min_size['height']


def union_bbox(boxes: Iterable[BoundingBox]) -> Optional[BoundingBox]:
    """
    Compute the bounding box enclosing all given boxes.

    Returns:
        Enclosing BoundingBox, or None for an empty input
    """
    coords = np.array([[b.x, b.y, b.right, b.bottom] for b in boxes], dtype=float)
    if coords.size == 0:
        return None

    x1, y1 = coords[:, 0].min(), coords[:, 1].min()
    x2, y2 = coords[:, 2].max(), coords[:, 3].max()
    return BoundingBox(x=float(x1), y=float(y1), width=float(x2 - x1), height=float(y2 - y1))


def mean_size(boxes: List[BoundingBox]) -> Tuple[float, float]:
    """Mean width and height of a non-empty list of boxes."""
    sizes = np.array([[b.width, b.height] for b in boxes], dtype=float)
    means = sizes.mean(axis=0)
    return float(means[0]), float(means[1])


def within_size_tolerance(
    bbox: BoundingBox,
    avg_width: float,
    avg_height: float,
    tolerance: float
) -> bool:
    """
    Check both dimensions lie within a relative tolerance of the means.

    Args:
        bbox: Box to test
        avg_width: Mean width of the group
        avg_height: Mean height of the group
        tolerance: Allowed relative deviation (0.3 = 30%)
    """
    if avg_width <= 0 or avg_height <= 0:
        return False
    width_diff = abs(bbox.width - avg_width) / avg_width
    height_diff = abs(bbox.height - avg_height) / avg_height
    return width_diff <= tolerance and height_diff <= tolerance
