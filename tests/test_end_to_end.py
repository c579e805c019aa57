"""
End-to-end tests: captured pages through analyze_page to renderer output.
"""
import pytest

from core.models import AnalyzerConfig, SemanticType
from wireframe import analyze_page, collect_section_labels, flatten_nodes, summarize_model


def _landing_page(el, card_row, page_header):
    """A typical landing page: header, hero, feature grid, call to action, footer."""
    hero = el('section', box=(0, 80, 1280, 600), class_name='hero-section', children=[
        el('h1', box=(100, 200, 600, 60), text='Build faster'),
        el('p', box=(100, 280, 600, 40), text='Everything you need.'),
        el('a', box=(100, 360, 160, 48), class_name='btn btn-primary', text='Get started'),
        el('img', box=(760, 140, 420, 420)),
    ])
    features = el('div', box=(0, 680, 1280, 400), class_name='features', display='grid',
                  children=card_row)
    cta = el('div', box=(0, 1080, 1280, 200), class_name='cta-banner', children=[
        el('input', box=(400, 1150, 300, 40), attributes={'type': 'submit'}),
    ])
    hidden = el('section', box=(0, 1280, 1280, 300), display='none')
    footer = el('footer', box=(0, 1280, 1280, 200))
    wrapper = el('div', box=(0, 0, 1280, 1480), class_name='container',
                 children=[hero, features, cta, hidden, footer])
    return el('body', box=(0, 0, 1280, 1480), children=[page_header, wrapper])


def _analyze(page, **kwargs):
    return analyze_page(page, 1280, 800, 1480, page_url='https://example.com',
                        captured_at='2024-05-01T10:00:00Z', config=AnalyzerConfig(**kwargs))


class TestNavigationBar:
    """Header > nav > button link."""

    def test_header_nav_button(self, el, page_header):
        body = el('body', box=(0, 0, 1280, 800), children=[page_header])

        model = _analyze(body)

        assert len(model.nodes) == 1
        header = model.nodes[0]
        assert header.label == 'Header'
        assert header.semantic_type == SemanticType.HEADER

        nav = header.children[0]
        assert nav.label == 'Navigation'
        assert nav.semantic_type == SemanticType.NAVIGATION
        button = nav.content_hints[0]
        assert button.type == 'button'
        assert button.label == 'Contact'
        assert button.bbox.to_dict() == {'x': 1100, 'y': 20, 'width': 120, 'height': 40}


class TestLandingPage:
    """Whole-page behavior."""

    def test_sections_in_document_order(self, el, card_row, page_header):
        model = _analyze(_landing_page(el, card_row, page_header), sibling_policy='promote')

        assert [n.label for n in model.nodes] == [
            'Header', 'Hero', 'Feature', 'CTA', 'Footer'
        ]
        assert [n.semantic_type for n in model.nodes] == [
            SemanticType.HEADER, SemanticType.HERO, SemanticType.CARD,
            SemanticType.CTA, SemanticType.FOOTER
        ]

    def test_wrapper_siblings_dropped_by_default(self, el, card_row, page_header):
        """Test a plain wrapper with several sections loses them under the drop policy."""
        model = _analyze(_landing_page(el, card_row, page_header))

        assert [n.label for n in model.nodes] == ['Header']

    def test_hero_hints(self, el, card_row, page_header):
        model = _analyze(_landing_page(el, card_row, page_header), sibling_policy='promote')
        hero = model.nodes[1]

        assert [h.type for h in hero.content_hints] == ['image', 'button', 'text']
        assert hero.content_hints[1].label == 'Get started'

    def test_feature_cards(self, el, card_row, page_header):
        """Test the grid inside the features block becomes four cards."""
        model = _analyze(_landing_page(el, card_row, page_header), sibling_policy='promote')
        features = model.nodes[2]

        assert [c.label for c in features.children] == ['Card'] * 4
        assert all(c.children == [] for c in features.children)

    def test_depth_monotonic(self, el, card_row, page_header):
        model = _analyze(_landing_page(el, card_row, page_header), sibling_policy='promote')

        def check(node):
            for child in node.children:
                assert child.depth == node.depth + 1
                check(child)

        for node in model.nodes:
            assert node.depth == 0
            check(node)

    def test_ids_unique_and_prefixed(self, el, card_row, page_header):
        model = _analyze(_landing_page(el, card_row, page_header), sibling_policy='promote')
        ids = [n.id for n in flatten_nodes(model.nodes)]

        assert len(ids) == len(set(ids))
        assert all(i.startswith('wf-node-') for i in ids)

    def test_idempotent(self, el, card_row, page_header, without_ids):
        page = _landing_page(el, card_row, page_header)

        first = _analyze(page, sibling_policy='promote').to_dict()
        second = _analyze(page, sibling_policy='promote').to_dict()

        assert first == second
        assert ([without_ids(n) for n in first['nodes']]
                == [without_ids(n) for n in second['nodes']])

    @pytest.mark.parametrize('policy', ['drop', 'promote'])
    def test_traversal_modes_agree(self, el, card_row, page_header, policy):
        page = _landing_page(el, card_row, page_header)

        recursive = _analyze(page, sibling_policy=policy, traversal='recursive')
        iterative = _analyze(page, sibling_policy=policy, traversal='iterative')

        assert recursive.to_dict() == iterative.to_dict()

    def test_narrow_sibling_keeps_grid(self, el, card_row, page_header):
        """Test adding a narrow fifth card does not change the detected cards."""
        base = _analyze(_landing_page(el, card_row, page_header), sibling_policy='promote')
        narrow = el('div', box=(1200, 700, 100, 200))
        extended = _analyze(_landing_page(el, card_row + [narrow], page_header),
                            sibling_policy='promote')

        base_cards = [c.bbox for c in base.nodes[2].children]
        extended_cards = [c.bbox for c in extended.nodes[2].children]
        assert extended_cards == base_cards

    def test_summary_and_outline(self, el, card_row, page_header):
        model = _analyze(_landing_page(el, card_row, page_header), sibling_policy='promote')

        assert summarize_model(model) == 'Generated wireframe with 5 sections (1280x1480px)'
        outline = collect_section_labels(model.nodes)
        assert outline[:2] == ['Header', '  └─ Navigation']
