"""
Label Inference Module

Derives a human-readable name for an element. Each step of the cascade is a
separate function returning a label or None; LABEL_RULES lists them in
priority order and the first label found wins.
"""
import re
from typing import Callable, List, Optional

from core.constants import (
    CONTENT_LABEL_TAGS,
    HEADING_LABEL_MAX_LENGTH,
    HEADING_LABEL_TAGS,
    HEADING_LABEL_TRUNCATE,
    ROLE_LABELS,
    STRUCTURAL_CLASS_PATTERNS,
    TAG_LABELS,
)
from core.models import ElementRecord
from utils.text_utils import capitalize_tag, humanize_identifier, truncate_label


_COMPILED_PATTERNS = [
    (re.compile(pattern, re.IGNORECASE), label)
    for pattern, label in STRUCTURAL_CLASS_PATTERNS
]


def match_structural_pattern(text: Optional[str]) -> Optional[str]:
    """
    Match text against the section archetype table.

    The whole string is searched, so a pattern can match across class
    boundaries ("blog-card feature" hits "card" before "feature").

    Args:
        text: Class string or id

    Returns:
        Label of the first matching pattern, or None
    """
    if not text:
        return None
    for pattern, label in _COMPILED_PATTERNS:
        if pattern.search(text):
            return label
    return None


def label_from_class(element: ElementRecord) -> Optional[str]:
    """Label from the class attribute."""
    return match_structural_pattern(element.class_name)


def label_from_id(element: ElementRecord) -> Optional[str]:
    """
    Label from the element id.

    Only ids of 3-29 characters are considered. Known archetypes map to
    their label; anything else is humanized.
    """
    element_id = element.id
    if not element_id or not 2 < len(element_id) < 30:
        return None

    pattern_label = match_structural_pattern(element_id)
    if pattern_label:
        return pattern_label

    return humanize_identifier(element_id)


def label_from_role(element: ElementRecord) -> Optional[str]:
    """Label from the ARIA role."""
    if not element.role:
        return None
    return ROLE_LABELS.get(element.role)


def infer_label_from_content(element: ElementRecord) -> Optional[str]:
    """
    Label from the first h1-h3 heading inside the element.

    Helps when sections use utility classes instead of semantic names.
    """
    heading = next(
        (el for el in element.iter_descendants() if el.tag in HEADING_LABEL_TAGS),
        None
    )
    if heading is None or not heading.text_content:
        return None

    text = heading.text_content.strip()
    if 0 < len(text) < HEADING_LABEL_MAX_LENGTH:
        return truncate_label(text, HEADING_LABEL_TRUNCATE)
    return None


def label_from_heading(element: ElementRecord) -> Optional[str]:
    """Heading label, for sections, articles and divs only."""
    if element.tag not in CONTENT_LABEL_TAGS:
        return None
    return infer_label_from_content(element)


def label_from_tag(element: ElementRecord) -> Optional[str]:
    """Label from semantic tag names."""
    return TAG_LABELS.get(element.tag)


def fallback_label(element: ElementRecord) -> str:
    """Final fallback: "Block" for divs, else the capitalized tag."""
    if element.tag == 'div':
        return 'Block'
    return capitalize_tag(element.tag)


LABEL_RULES: List[Callable[[ElementRecord], Optional[str]]] = [
    label_from_class,
    label_from_id,
    label_from_role,
    label_from_heading,
    label_from_tag,
    fallback_label,
]

GRID_ITEM_LABEL_RULES: List[Callable[[ElementRecord], Optional[str]]] = [
    label_from_class,
    infer_label_from_content,
]


def _first_label(
    element: ElementRecord,
    rules: List[Callable[[ElementRecord], Optional[str]]]
) -> Optional[str]:
    for rule in rules:
        label = rule(element)
        if label:
            return label
    return None


def generate_label(element: ElementRecord) -> str:
    """
    Generate a human-readable label for an element.

    Args:
        element: Element to label

    Returns:
        Label from the first matching rule in LABEL_RULES
    """
    return _first_label(element, LABEL_RULES)


def infer_grid_item_label(element: ElementRecord) -> str:
    """Label for a grid item: class pattern, then heading, then "Card"."""
    return _first_label(element, GRID_ITEM_LABEL_RULES) or 'Card'
