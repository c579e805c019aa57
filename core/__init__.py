"""Core package - Domain models and constants."""

from .models import (
    AnalyzerConfig,
    BoundingBox,
    ComputedStyle,
    ContentHint,
    ContentType,
    ElementRecord,
    SemanticType,
    WireframeModel,
    WireframeNode,
)
from .constants import (
    LANDMARK_TAGS,
    LANDMARK_ROLES,
    SKIP_TAGS,
    STRUCTURAL_CLASS_PATTERNS,
    GENERIC_CONTAINER_PATTERNS,
    CONTENT_MIN_SIZES,
    CONTENT_MAX_COUNTS
)

__all__ = [
    'AnalyzerConfig',
    'BoundingBox',
    'ComputedStyle',
    'ContentHint',
    'ContentType',
    'ElementRecord',
    'SemanticType',
    'WireframeModel',
    'WireframeNode',
    'LANDMARK_TAGS',
    'LANDMARK_ROLES',
    'SKIP_TAGS',
    'STRUCTURAL_CLASS_PATTERNS',
    'GENERIC_CONTAINER_PATTERNS',
    'CONTENT_MIN_SIZES',
    'CONTENT_MAX_COUNTS'
]
