"""Wireframe analysis package - Reduces captured element trees to wireframe models."""

from .classifier import (
    SIGNIFICANCE_RULES,
    has_only_generic_classes,
    is_significant,
)

from .label_inference import (
    LABEL_RULES,
    match_structural_pattern,
    infer_label_from_content,
    generate_label,
    infer_grid_item_label,
)

from .semantic_types import (
    SEMANTIC_TYPE_RULES,
    classify_semantic_type,
)

from .grid_detector import (
    get_visible_children,
    filter_similarly_sized,
    detect_grid_items,
)

from .content_hints import (
    is_button_element,
    detect_content_hints,
)

from .tree_reducer import (
    IdGenerator,
    BuildRequest,
    TreeReducer,
)

from .analyzer import (
    analyze_page,
    flatten_nodes,
    collect_section_labels,
    summarize_model,
)

from .entry_points import (
    wireframe_from_snapshot,
    wireframe_dict_from_snapshot,
)

__all__ = [
    # Significance
    'SIGNIFICANCE_RULES',
    'has_only_generic_classes',
    'is_significant',

    # Labels
    'LABEL_RULES',
    'match_structural_pattern',
    'infer_label_from_content',
    'generate_label',
    'infer_grid_item_label',

    # Semantic types
    'SEMANTIC_TYPE_RULES',
    'classify_semantic_type',

    # Grid detection
    'get_visible_children',
    'filter_similarly_sized',
    'detect_grid_items',

    # Content hints
    'is_button_element',
    'detect_content_hints',

    # Tree reduction
    'IdGenerator',
    'BuildRequest',
    'TreeReducer',

    # Page analysis
    'analyze_page',
    'flatten_nodes',
    'collect_section_labels',
    'summarize_model',
    'wireframe_from_snapshot',
    'wireframe_dict_from_snapshot',
]
