"""
Shared fixtures for Gearbox Layout Editor tests.

Provides layouts with common arrangements, a canvas controller, and helpers
for building items with specific params.
"""
import sys
import os
import pytest

# Ensure editor/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'editor', 'src'))

# Widgets are created without a display
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')


# ── Item helpers ─────────────────────────────────────────────────────────

def make_gear(item_id, x, y, teeth, module=4.0, component_type='SPUR'):
    """Gear item with a given tooth count and module"""
    from models.component import create_item
    return create_item(component_type, x, y, item_id=item_id).with_params(teeth=teeth, module=module)


def make_item(item_id, component_type, x, y, **params):
    from models.component import create_item
    return create_item(component_type, x, y, item_id=item_id).with_params(**params)


def make_shaft(item_id, x, y, lengths=(50, 150, 50), diameter=20.0):
    """Shaft item with one segment per length"""
    from models.component import ShaftSegment, create_item
    segments = tuple(ShaftSegment(f"{item_id}-seg{i}", length, diameter) for i, length in enumerate(lengths))
    return create_item('SHAFT', x, y, item_id=item_id).with_params(segments=segments)


def layout_of(*items):
    """Layout holding the given items in order"""
    from models.layout import Layout
    layout = Layout()
    for item in items:
        layout.insert_item(item)
    return layout


# ── Fixtures ─────────────────────────────────────────────────────────────

@pytest.fixture
def layout():
    """Empty layout"""
    from models.layout import Layout
    return Layout()


@pytest.fixture
def mounted_layout():
    """Shaft [50,150,50] at origin with a bearing on it and a coupling beyond its reach"""
    return layout_of(
        make_shaft('shaft', 0, 0),
        make_item('bearing', 'BEARING', 40, 0),
        make_item('coupling', 'COUPLING', 300, 0),
    )


@pytest.fixture
def mesh_layout():
    """Spur gear 'g1' (40T, m4) at origin and 'g2' (30T, m4) far below it"""
    return layout_of(
        make_gear('g1', 0, 0, teeth=40),
        make_gear('g2', 0, 500, teeth=30),
    )


@pytest.fixture
def controller(layout):
    """Canvas controller on an empty layout with the viewport origin at world (0, 0)"""
    from components.canvas_widgets.canvas_controller import CanvasController
    from models.viewport import Viewport
    return CanvasController(layout, Viewport(0.0, 0.0, 1.0))
