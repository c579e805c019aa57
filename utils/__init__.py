"""Utilities package - Helper functions for geometry and text processing."""

from .geometry_utils import (
    parse_opacity,
    is_element_visible,
    is_landmark,
    is_grid_or_row_flex,
    covers_area,
    meets_min_size,
    union_bbox,
    mean_size,
    within_size_tolerance,
)

from .text_utils import (
    split_class_tokens,
    humanize_identifier,
    capitalize_tag,
    truncate_label
)

__all__ = [
    # Geometry utils
    'parse_opacity',
    'is_element_visible',
    'is_landmark',
    'is_grid_or_row_flex',
    'covers_area',
    'meets_min_size',
    'union_bbox',
    'mean_size',
    'within_size_tolerance',

    # Text utils
    'split_class_tokens',
    'humanize_identifier',
    'capitalize_tag',
    'truncate_label'
]
