"""
Tree Reducer

Walks a captured element tree depth-first in document order and reduces it
to wireframe nodes: insignificant wrappers disappear, repeating siblings
become cards, and redundant single-child wrappers collapse.

The per-element logic lives in a generator that yields a BuildRequest for
every child it needs and receives the child's nodes back. Two drivers run
it: plain recursion (default) and an explicit work stack for environments
with shallow recursion limits. Both produce identical trees.
"""
import itertools
from dataclasses import dataclass, replace
from typing import Generator, List, Optional

from core.constants import FALLBACK_LABELS, NODE_ID_PREFIX, WRAPPER_COVERAGE_RATIO
from core.models import AnalyzerConfig, ElementRecord, SemanticType, WireframeNode
from utils.geometry_utils import covers_area, is_element_visible, is_landmark
from wireframe.classifier import is_significant
from wireframe.content_hints import detect_content_hints
from wireframe.grid_detector import detect_grid_items
from wireframe.label_inference import generate_label, infer_grid_item_label
from wireframe.semantic_types import classify_semantic_type


class IdGenerator:
    """Sequential node ids, scoped to one analysis run."""

    def __init__(self, prefix: str = NODE_ID_PREFIX):
        self.prefix = prefix
        self._counter = itertools.count(1)

    def next_id(self) -> str:
        return f"{self.prefix}{next(self._counter)}"


@dataclass
class BuildRequest:
    """A pending build of one element."""
    element: ElementRecord
    depth: int
    is_grid_item: bool = False


BuildSteps = Generator[BuildRequest, List[WireframeNode], List[WireframeNode]]


def shift_depth(node: WireframeNode, delta: int):
    """Move a freshly built subtree up or down by delta levels."""
    if delta == 0:
        return
    node.depth += delta
    for child in node.children:
        shift_depth(child, delta)


class TreeReducer:
    """
    Builds wireframe nodes from an element tree.

    One instance owns one id sequence; create a new reducer per page.
    """

    def __init__(
        self,
        viewport_area: float,
        config: Optional[AnalyzerConfig] = None,
        logger=None,
        id_generator: Optional[IdGenerator] = None
    ):
        """
        Initialize tree reducer.

        Args:
            viewport_area: Viewport width * height
            config: Analyzer settings (defaults when omitted)
            logger: Optional logger
            id_generator: Id sequence (fresh one when omitted)
        """
        self.viewport_area = viewport_area
        self.config = config or AnalyzerConfig()
        self.logger = logger
        self.ids = id_generator or IdGenerator()

    def build(
        self,
        element: ElementRecord,
        depth: int = 0,
        is_grid_item: bool = False
    ) -> List[WireframeNode]:
        """
        Build the nodes an element reduces to.

        Args:
            element: Element to process
            depth: Nesting depth the element's node would get
            is_grid_item: Element was detected as a grid item

        Returns:
            Zero or one node, or several when an insignificant container
            promotes its children (sibling_policy="promote")
        """
        request = BuildRequest(element, depth, is_grid_item)
        if self.config.traversal == 'iterative':
            return self._run_iterative(request)
        return self._run_recursive(request)

    def build_node(
        self,
        element: ElementRecord,
        depth: int = 0,
        is_grid_item: bool = False
    ) -> Optional[WireframeNode]:
        """
        Build a single node for an element.

        Returns:
            The node, or None when nothing survives. Use build() to receive
            every promoted sibling under sibling_policy="promote".
        """
        nodes = self.build(element, depth, is_grid_item)
        return nodes[0] if len(nodes) == 1 else None

    def _run_recursive(self, request: BuildRequest) -> List[WireframeNode]:
        steps = self._steps(request)
        try:
            child_request = next(steps)
            while True:
                child_request = steps.send(self._run_recursive(child_request))
        except StopIteration as stop:
            return stop.value or []

    def _run_iterative(self, request: BuildRequest) -> List[WireframeNode]:
        stack = [self._steps(request)]
        result: Optional[List[WireframeNode]] = None

        while stack:
            try:
                child_request = stack[-1].send(result)
            except StopIteration as stop:
                stack.pop()
                result = stop.value or []
                continue
            stack.append(self._steps(child_request))
            result = None

        return result or []

    def _steps(self, request: BuildRequest) -> BuildSteps:
        element, depth, is_grid_item = request.element, request.depth, request.is_grid_item
        config = self.config

        # Grid items are leaves and may sit one level below max_depth
        if depth > config.max_depth and not is_grid_item:
            return []
        if not is_element_visible(element):
            return []

        significant = is_grid_item or is_significant(element, self.viewport_area, config)
        child_nodes: List[WireframeNode] = []

        grid_items = None
        if significant and not is_grid_item:
            grid_items = detect_grid_items(element, config)

        if grid_items:
            for item in grid_items:
                child_nodes.extend((yield BuildRequest(item, depth + 1, True)))
            # Landmarks were excluded from the grid; process them normally
            for child in element.children:
                if is_landmark(child):
                    child_nodes.extend((yield BuildRequest(child, depth + 1, False)))
        elif not is_grid_item:
            # Insignificant containers do not consume a depth level
            child_depth = depth + 1 if significant else depth
            for child in element.children:
                child_nodes.extend((yield BuildRequest(child, child_depth, False)))

        if not significant:
            if len(child_nodes) == 1 or config.sibling_policy == 'promote':
                return child_nodes
            return []

        if len(child_nodes) == 1 and not grid_items:
            collapsed = self._collapse_wrapper(element, child_nodes[0])
            if collapsed is not None:
                # The child takes the wrapper's place, and its level
                shift_depth(collapsed, depth - collapsed.depth)
                return [collapsed]

        return [self._materialize(element, depth, child_nodes, is_grid_item)]

    def _collapse_wrapper(
        self,
        element: ElementRecord,
        child: WireframeNode
    ) -> Optional[WireframeNode]:
        """
        Return the child when it should replace its wrapper.

        The child must cover most of the wrapper, and either be a landmark
        under a non-landmark, or carry a real label where the wrapper only
        has a fallback one.
        """
        if not covers_area(element.bbox, child.bbox, WRAPPER_COVERAGE_RATIO):
            return None

        if not is_landmark(element) and child.is_landmark:
            return child

        if generate_label(element) in FALLBACK_LABELS and child.label not in FALLBACK_LABELS:
            return child

        return None

    def _materialize(
        self,
        element: ElementRecord,
        depth: int,
        children: List[WireframeNode],
        is_grid_item: bool
    ) -> WireframeNode:
        label = infer_grid_item_label(element) if is_grid_item else generate_label(element)
        if is_grid_item:
            semantic_type = SemanticType.CARD
        else:
            semantic_type = classify_semantic_type(element, label)

        hints = detect_content_hints(element, self.config, self.logger)

        return WireframeNode(
            id=self.ids.next_id(),
            tag_name=element.tag,
            label=label,
            bbox=replace(element.bbox),
            depth=depth,
            children=children,
            is_landmark=is_landmark(element),
            semantic_type=semantic_type,
            content_hints=hints or None
        )
