"""
Page Analyzer

Builds a WireframeModel from a captured page and provides helpers for
walking and summarizing the result.
"""
from datetime import datetime, timezone
from typing import List, Optional

from core.models import AnalyzerConfig, ElementRecord, WireframeModel, WireframeNode
from wireframe.tree_reducer import TreeReducer


def analyze_page(
    root: ElementRecord,
    viewport_width: float,
    viewport_height: float,
    full_page_height: float,
    page_url: str = "",
    config: Optional[AnalyzerConfig] = None,
    captured_at: Optional[str] = None,
    logger=None
) -> WireframeModel:
    """
    Analyze a captured page and build its wireframe model.

    Each child of the root (the document body) is reduced at depth 0.

    Args:
        root: Body element of the captured tree
        viewport_width: Viewport width at capture time
        viewport_height: Viewport height at capture time
        full_page_height: Total scrollable page height
        page_url: Page URL
        config: Analyzer settings (defaults when omitted)
        captured_at: ISO timestamp of capture (now, when omitted)
        logger: Optional logger

    Returns:
        WireframeModel with root-level nodes in document order
    """
    config = config or AnalyzerConfig()
    viewport_area = viewport_width * viewport_height

    # Fresh reducer per call so id sequences never leak between pages
    reducer = TreeReducer(viewport_area, config, logger=logger)

    nodes: List[WireframeNode] = []
    for child in root.children:
        nodes.extend(reducer.build(child, 0))

    model = WireframeModel(
        nodes=nodes,
        viewport_width=viewport_width,
        viewport_height=viewport_height,
        full_page_height=full_page_height,
        page_url=page_url,
        captured_at=captured_at or datetime.now(timezone.utc).isoformat()
    )

    if logger:
        logger.info(
            f"Analyzed {page_url or 'page'}: {len(nodes)} root nodes, "
            f"{len(flatten_nodes(nodes))} total ({viewport_width}x{viewport_height})"
        )

    return model


def flatten_nodes(nodes: List[WireframeNode]) -> List[WireframeNode]:
    """
    Flatten the tree into a pre-order list of nodes.
    """
    result = []

    def traverse(node: WireframeNode):
        result.append(node)
        for child in node.children:
            traverse(child)

    for node in nodes:
        traverse(node)

    return result


def collect_section_labels(nodes: List[WireframeNode], depth: int = 0) -> List[str]:
    """
    Build an indented outline of node labels.

    Root labels are bare; nested labels are prefixed with "└─" and indented
    two spaces per extra level.
    """
    sections = []
    for node in nodes:
        if node.label:
            if depth > 0:
                sections.append(f"  {'  ' * (depth - 1)}└─ {node.label}")
            else:
                sections.append(node.label)
        sections.extend(collect_section_labels(node.children, depth + 1))
    return sections


def summarize_model(model: WireframeModel) -> str:
    """One-line summary of a model."""
    return (
        f"Generated wireframe with {len(model.nodes)} sections "
        f"({model.viewport_width:g}x{model.full_page_height:g}px)"
    )
