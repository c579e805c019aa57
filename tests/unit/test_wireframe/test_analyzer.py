"""
Unit tests for wireframe.analyzer module.
"""
from datetime import datetime
from unittest.mock import MagicMock

from core.models import AnalyzerConfig, BoundingBox, WireframeModel, WireframeNode
from wireframe.analyzer import (
    analyze_page,
    collect_section_labels,
    flatten_nodes,
    summarize_model,
)


def _node(label, children=None, depth=0):
    return WireframeNode(
        id=label.lower(), tag_name='section', label=label,
        bbox=BoundingBox(0, 0, 10, 10), depth=depth, children=children or []
    )


def _body(el, page_header):
    hero = el('section', box=(0, 80, 1280, 600), class_name='hero')
    footer = el('footer', box=(0, 680, 1280, 200))
    return el('body', box=(0, 0, 1280, 880), children=[page_header, hero, footer])


class TestAnalyzePage:
    """Tests for analyze_page function."""

    def test_root_nodes(self, el, page_header):
        model = analyze_page(_body(el, page_header), 1280, 800, 880,
                             page_url='https://example.com', captured_at='2024-05-01T10:00:00Z')

        assert [n.label for n in model.nodes] == ['Header', 'Hero', 'Footer']
        assert all(n.depth == 0 for n in model.nodes)
        assert model.viewport_width == 1280
        assert model.viewport_height == 800
        assert model.full_page_height == 880
        assert model.page_url == 'https://example.com'
        assert model.captured_at == '2024-05-01T10:00:00Z'

    def test_ids_unique(self, el, page_header):
        model = analyze_page(_body(el, page_header), 1280, 800, 880)

        ids = [n.id for n in flatten_nodes(model.nodes)]
        assert len(ids) == len(set(ids))

    def test_ids_restart_per_call(self, el, page_header):
        """Test two analyses of the same page number nodes identically."""
        first = analyze_page(_body(el, page_header), 1280, 800, 880, captured_at='t')
        second = analyze_page(_body(el, page_header), 1280, 800, 880, captured_at='t')

        assert first.to_dict() == second.to_dict()

    def test_default_timestamp(self, el):
        model = analyze_page(el('body'), 1280, 800, 800)

        assert datetime.fromisoformat(model.captured_at).tzinfo is not None
        assert model.nodes == []

    def test_config_applied(self, el, page_header):
        model = analyze_page(_body(el, page_header), 1280, 800, 880,
                             config=AnalyzerConfig(max_depth=0))

        assert model.nodes[0].children == []

    def test_logger(self, el, page_header):
        logger = MagicMock()

        analyze_page(_body(el, page_header), 1280, 800, 880, page_url='https://example.com',
                     logger=logger)

        logger.info.assert_called_once()
        assert 'https://example.com' in logger.info.call_args[0][0]


class TestFlattenNodes:
    """Tests for flatten_nodes function."""

    def test_pre_order(self):
        tree = [_node('A', [_node('B', [_node('C')]), _node('D')]), _node('E')]

        assert [n.label for n in flatten_nodes(tree)] == ['A', 'B', 'C', 'D', 'E']

    def test_empty(self):
        assert flatten_nodes([]) == []


class TestCollectSectionLabels:
    """Tests for collect_section_labels function."""

    def test_outline(self):
        tree = [_node('Header', [_node('Navigation', [_node('Menu')])]), _node('Footer')]

        assert collect_section_labels(tree) == [
            'Header',
            '  └─ Navigation',
            '    └─ Menu',
            'Footer',
        ]


class TestSummarizeModel:
    """Tests for summarize_model function."""

    def test_summary(self):
        model = WireframeModel(nodes=[_node('A'), _node('B')], viewport_width=1280.0,
                               viewport_height=800, full_page_height=3000.0)

        assert summarize_model(model) == 'Generated wireframe with 2 sections (1280x3000px)'
