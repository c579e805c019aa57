"""
Content Hint Detection Module

Finds inner placeholder elements (images, buttons, icons, text blocks)
within a node so renderers can draw crossed boxes, pills and text lines.
"""
import re
from dataclasses import replace
from typing import Dict, List, Optional

from core.constants import (
    BUTTON_CLASS_PATTERN,
    BUTTON_INPUT_TYPES,
    BUTTON_LABEL_MAX_LENGTH,
    ICON_CLASS_PATTERN,
    ICON_FONT_TAGS,
    IMAGE_TAGS,
    SVG_ICON_MAX_AREA,
    TEXT_BLOCK_TAGS,
    TEXT_ELEMENT_MIN_SIZE,
)
from core.models import (
    AnalyzerConfig,
    BoundingBox,
    ContentHint,
    ContentType,
    ElementRecord,
)
from utils.geometry_utils import is_element_visible, meets_min_size, union_bbox


_BUTTON_CLASS_RE = re.compile(BUTTON_CLASS_PATTERN, re.IGNORECASE)
_ICON_CLASS_RE = re.compile(ICON_CLASS_PATTERN, re.IGNORECASE)


def is_button_element(element: ElementRecord) -> bool:
    """
    Check if an element is a button or button-like link.

    Args:
        element: Candidate element

    Returns:
        True for <button>, submit/button inputs, and links with
        role=button or a btn/button/cta class
    """
    tag = element.tag
    if tag == 'button':
        return True
    if tag == 'input':
        return element.get_attribute('type') in BUTTON_INPUT_TYPES
    if tag == 'a':
        if element.role == 'button':
            return True
        return bool(element.class_name) and bool(_BUTTON_CLASS_RE.search(element.class_name))
    return False


def is_svg_icon(element: ElementRecord) -> bool:
    """Small SVGs (area up to 20x20) are icons."""
    return element.tag == 'svg' and element.bbox.area <= SVG_ICON_MAX_AREA


def is_icon_font(element: ElementRecord) -> bool:
    """<i>/<span> carrying an icon-font class."""
    if element.tag not in ICON_FONT_TAGS or not element.class_name:
        return False
    return bool(_ICON_CLASS_RE.search(element.class_name))


class _HintCollector:
    """Accumulates hints while enforcing per-type minimum sizes and caps."""

    def __init__(self, config: AnalyzerConfig):
        self.min_sizes = config.content_min_sizes
        self.max_counts = config.content_max_counts
        self.hints: List[ContentHint] = []
        self.counts: Dict[str, int] = {t.value: 0 for t in ContentType}

    def is_full(self, content_type: ContentType) -> bool:
        return self.counts[content_type.value] >= self.max_counts[content_type.value]

    def add(self, content_type: ContentType, bbox: BoundingBox, label: Optional[str] = None):
        if not meets_min_size(bbox, self.min_sizes[content_type.value]):
            return
        if self.is_full(content_type):
            return
        self.hints.append(ContentHint(type=content_type, bbox=replace(bbox), label=label))
        self.counts[content_type.value] += 1


def _collect_images(descendants: List[ElementRecord], collector: _HintCollector):
    for el in descendants:
        if collector.is_full(ContentType.IMAGE):
            return
        is_image = el.tag in IMAGE_TAGS or (
            el.tag == 'svg' and el.bbox.area > SVG_ICON_MAX_AREA
        )
        if is_image and is_element_visible(el):
            collector.add(ContentType.IMAGE, el.bbox)


def _collect_buttons(descendants: List[ElementRecord], collector: _HintCollector):
    for el in descendants:
        if collector.is_full(ContentType.BUTTON):
            return
        if not is_button_element(el) or not is_element_visible(el):
            continue
        text = (el.text_content or '').strip()
        label = text[:BUTTON_LABEL_MAX_LENGTH] or None
        collector.add(ContentType.BUTTON, el.bbox, label)


def _collect_icons(descendants: List[ElementRecord], collector: _HintCollector):
    for el in descendants:
        if collector.is_full(ContentType.ICON):
            return
        if (is_svg_icon(el) or is_icon_font(el)) and is_element_visible(el):
            collector.add(ContentType.ICON, el.bbox)


def _collect_text(descendants: List[ElementRecord], collector: _HintCollector):
    # All paragraphs and headings collapse into a single text hint
    text_boxes = [
        el.bbox for el in descendants
        if el.tag in TEXT_BLOCK_TAGS
        and is_element_visible(el)
        and meets_min_size(el.bbox, TEXT_ELEMENT_MIN_SIZE)
    ]
    bbox = union_bbox(text_boxes)
    if bbox is not None:
        collector.add(ContentType.TEXT, bbox)


def detect_content_hints_unsafe(
    element: ElementRecord,
    config: AnalyzerConfig
) -> List[ContentHint]:
    """
    Scan an element's descendants for content placeholders.

    Hints are grouped by type (images, buttons, icons, text), each group in
    document order. May raise on malformed input; see detect_content_hints.
    """
    collector = _HintCollector(config)
    descendants = list(element.iter_descendants())

    _collect_images(descendants, collector)
    _collect_buttons(descendants, collector)
    _collect_icons(descendants, collector)
    _collect_text(descendants, collector)

    return collector.hints


def detect_content_hints(
    element: ElementRecord,
    config: AnalyzerConfig,
    logger=None
) -> List[ContentHint]:
    """
    Detect content elements within a node.

    Failures never break node creation; they degrade to an empty list.

    Args:
        element: Node element to scan
        config: Analyzer settings (hint minimum sizes and caps)
        logger: Optional logger

    Returns:
        List of ContentHint (possibly empty)
    """
    try:
        return detect_content_hints_unsafe(element, config)
    except Exception as e:
        if logger:
            logger.warning(f"detect_content_hints failed for <{element.tag_name}>: {e}")
        else:
            print(f"Warning: detect_content_hints failed for <{element.tag_name}>: {e}")
        return []
