"""
Significance Classifier Module

Decides whether a single element becomes a wireframe node. Rules are
evaluated in priority order; each returns True (accept), False (reject) or
None (no opinion), and the first decision wins.
"""
import re
from typing import Callable, List, Optional

from core.constants import GENERIC_CONTAINER_PATTERNS, SKIP_TAGS
from core.models import AnalyzerConfig, ElementRecord
from utils.geometry_utils import is_landmark
from utils.text_utils import split_class_tokens
from wireframe.label_inference import label_from_class


_GENERIC_PATTERNS = [re.compile(p, re.IGNORECASE) for p in GENERIC_CONTAINER_PATTERNS]

SignificanceRule = Callable[[ElementRecord, float, AnalyzerConfig], Optional[bool]]


def has_only_generic_classes(element: ElementRecord) -> bool:
    """
    Check if every class token is a generic container or utility class.

    An element without classes counts as generic.
    """
    tokens = split_class_tokens(element.class_name)
    if not tokens:
        return True
    return all(
        any(pattern.search(token) for pattern in _GENERIC_PATTERNS)
        for token in tokens
    )


def reject_skip_tags(
    element: ElementRecord,
    viewport_area: float,
    config: AnalyzerConfig
) -> Optional[bool]:
    """Text, inline, media, form, list and table tags are never blocks."""
    return False if element.tag in SKIP_TAGS else None


def reject_small(
    element: ElementRecord,
    viewport_area: float,
    config: AnalyzerConfig
) -> Optional[bool]:
    """Elements under the minimum area are dropped."""
    return False if element.bbox.area < config.min_area else None


def accept_landmarks(
    element: ElementRecord,
    viewport_area: float,
    config: AnalyzerConfig
) -> Optional[bool]:
    """Landmark tags and roles always count."""
    return True if is_landmark(element) else None


def accept_structural_classes(
    element: ElementRecord,
    viewport_area: float,
    config: AnalyzerConfig
) -> Optional[bool]:
    """Elements whose class names a section archetype count."""
    return True if label_from_class(element) is not None else None


def reject_generic_divs(
    element: ElementRecord,
    viewport_area: float,
    config: AnalyzerConfig
) -> Optional[bool]:
    """Divs carrying only layout or utility classes are wrappers."""
    if element.tag == 'div' and has_only_generic_classes(element):
        return False
    return None


def accept_large_divs(
    element: ElementRecord,
    viewport_area: float,
    config: AnalyzerConfig
) -> Optional[bool]:
    """Plain divs only count as major sections above a share of the viewport."""
    if element.tag != 'div':
        return None
    return element.bbox.area > viewport_area * config.large_div_ratio


SIGNIFICANCE_RULES: List[SignificanceRule] = [
    reject_skip_tags,
    reject_small,
    accept_landmarks,
    accept_structural_classes,
    reject_generic_divs,
    accept_large_divs,
]


def is_significant(
    element: ElementRecord,
    viewport_area: float,
    config: AnalyzerConfig
) -> bool:
    """
    Determine if an element should become a wireframe node.

    Args:
        element: Candidate element
        viewport_area: Viewport width * height
        config: Analyzer settings

    Returns:
        Decision of the first rule with an opinion; False if none has one
    """
    for rule in SIGNIFICANCE_RULES:
        decision = rule(element, viewport_area, config)
        if decision is not None:
            return decision
    return False
