"""
Pytest configuration and global fixtures.
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.models import AnalyzerConfig, BoundingBox, ComputedStyle, ElementRecord


VIEWPORT_WIDTH = 1280
VIEWPORT_HEIGHT = 800


def make_element(
    tag,
    box=(0, 0, 100, 100),
    children=None,
    id="",
    class_name="",
    role=None,
    text="",
    display=None,
    visibility=None,
    opacity=None,
    flex_direction=None,
    attributes=None
):
    """Build an ElementRecord from compact arguments."""
    x, y, width, height = box
    return ElementRecord(
        tag_name=tag,
        bbox=BoundingBox(x=x, y=y, width=width, height=height),
        id=id,
        class_name=class_name,
        role=role,
        children=list(children or []),
        style=ComputedStyle(
            display=display,
            visibility=visibility,
            opacity=opacity,
            flex_direction=flex_direction
        ),
        text_content=text,
        attributes=dict(attributes or {})
    )


def strip_ids(node_dict):
    """Remove ids from a node dict tree for structural comparison."""
    return {
        **{k: v for k, v in node_dict.items() if k not in ('id', 'children')},
        'children': [strip_ids(child) for child in node_dict['children']]
    }


@pytest.fixture
def el():
    """Element factory."""
    return make_element


@pytest.fixture
def config():
    """Default analyzer configuration."""
    return AnalyzerConfig()


@pytest.fixture
def viewport_area():
    """Area of the default 1280x800 viewport."""
    return VIEWPORT_WIDTH * VIEWPORT_HEIGHT


@pytest.fixture
def card_row():
    """Four similarly-sized cards (about 280x200, within 5%) in a row."""
    sizes = [(280, 200), (290, 205), (270, 195), (285, 210)]
    return [
        make_element('div', box=(i * 300, 100, w, h))
        for i, (w, h) in enumerate(sizes)
    ]


@pytest.fixture
def page_header():
    """Header > nav > a.btn, the canonical navigation bar."""
    link = make_element('a', box=(1100, 20, 120, 40), class_name='btn', text='Contact')
    nav = make_element('nav', box=(0, 0, 1280, 80), role='navigation', children=[link])
    return make_element('header', box=(0, 0, 1280, 80), id='header', children=[nav])


@pytest.fixture
def without_ids():
    """Function stripping ids from serialized node trees."""
    return strip_ids
