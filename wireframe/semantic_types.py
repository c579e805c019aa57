"""
Semantic Type Mapper

Assigns each node one of the fixed semantic categories used for color
coding. Tag and role matches take priority over label patterns.
"""
import re
from typing import Callable, List, Optional

from core.models import ElementRecord, SemanticType


# (tags, roles, type) - exact structural matches
TAG_ROLE_TYPES = [
    (('header',), ('banner',), SemanticType.HEADER),
    (('nav',), ('navigation',), SemanticType.NAVIGATION),
    (('footer',), ('contentinfo',), SemanticType.FOOTER),
]

# (regex, type) - applied to the lowercased label
LABEL_TYPE_PATTERNS = [
    (re.compile(r'hero|banner'), SemanticType.HERO),
    (re.compile(r'card|feature|service|testimonial|team|benefit'), SemanticType.CARD),
    (re.compile(r'cta|call.?to.?action|contact|newsletter'), SemanticType.CTA),
    (re.compile(r'nav|menu'), SemanticType.NAVIGATION),
]


def type_from_tag_or_role(element: ElementRecord, label: str) -> Optional[SemanticType]:
    for tags, roles, semantic_type in TAG_ROLE_TYPES:
        if element.tag in tags or element.role in roles:
            return semantic_type
    return None


def type_from_label(element: ElementRecord, label: str) -> Optional[SemanticType]:
    lower_label = label.lower()
    for pattern, semantic_type in LABEL_TYPE_PATTERNS:
        if pattern.search(lower_label):
            return semantic_type
    return None


SEMANTIC_TYPE_RULES: List[Callable[[ElementRecord, str], Optional[SemanticType]]] = [
    type_from_tag_or_role,
    type_from_label,
]


def classify_semantic_type(element: ElementRecord, label: str) -> SemanticType:
    """
    Classify an element into a semantic type.

    Args:
        element: Source element
        label: Label already inferred for the element

    Returns:
        SemanticType, CONTENT when no rule matches
    """
    for rule in SEMANTIC_TYPE_RULES:
        semantic_type = rule(element, label)
        if semantic_type is not None:
            return semantic_type
    return SemanticType.CONTENT
