"""
Grid Detection Module

Recognizes repeating, similarly-sized sibling groups ("card grids") inside
CSS grid and row-flex containers.
"""
from typing import List, Optional

from core.constants import GRID_DECORATIVE_AREA, GRID_SIZE_TOLERANCE, SKIP_TAGS
from core.models import AnalyzerConfig, ElementRecord
from utils.geometry_utils import (
    is_element_visible,
    is_grid_or_row_flex,
    is_landmark,
    mean_size,
    within_size_tolerance,
)


def get_visible_children(element: ElementRecord) -> List[ElementRecord]:
    """Visible children that could be grid items."""
    return [
        child for child in element.children
        if child.tag not in SKIP_TAGS and is_element_visible(child)
    ]


def filter_similarly_sized(
    children: List[ElementRecord],
    tolerance: float = GRID_SIZE_TOLERANCE
) -> Optional[List[ElementRecord]]:
    """
    Keep children whose dimensions agree with the group.

    Tiny children (likely decorative) are ignored. Children deviating more
    than ``tolerance`` from the mean width or height are dropped as outliers;
    the rest must agree with their own means.

    Args:
        children: Candidate elements
        tolerance: Relative tolerance (0.3 = 30%)

    Returns:
        Similarly-sized children in document order, or None
    """
    significant = [c for c in children if c.bbox.area >= GRID_DECORATIVE_AREA]
    if len(significant) < 2:
        return None

    avg_width, avg_height = mean_size([c.bbox for c in significant])
    similar = [
        c for c in significant
        if within_size_tolerance(c.bbox, avg_width, avg_height, tolerance)
    ]
    if len(similar) < 2:
        return None

    if len(similar) < len(significant):
        avg_width, avg_height = mean_size([c.bbox for c in similar])
        if not all(
            within_size_tolerance(c.bbox, avg_width, avg_height, tolerance)
            for c in similar
        ):
            return None

    return similar


def detect_grid_items(
    element: ElementRecord,
    config: AnalyzerConfig
) -> Optional[List[ElementRecord]]:
    """
    Detect whether an element is a grid of similar items.

    Landmark children are excluded; they are processed as normal nodes.

    Args:
        element: Container element
        config: Analyzer settings (grid_item_min_area)

    Returns:
        Child elements that become grid items, or None if not a grid
    """
    if not is_grid_or_row_flex(element):
        return None

    children = get_visible_children(element)
    if len(children) < 2:
        return None

    non_landmarks = [child for child in children if not is_landmark(child)]
    if len(non_landmarks) < 2:
        return None

    similar = filter_similarly_sized(non_landmarks)
    if similar is None:
        return None

    valid = [c for c in similar if c.bbox.area >= config.grid_item_min_area]
    return valid if len(valid) >= 2 else None
