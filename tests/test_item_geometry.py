"""
Tests for item footprints and hit testing.
"""
import pytest
from models.component import create_item
from models.transform import Vec2
from components.canvas_widgets.item_geometry import footprint, hit_test

from conftest import make_gear, make_item, make_shaft


# ══════════════════════════════════════════════════════════════════════════
# Footprints
# ══════════════════════════════════════════════════════════════════════════

class TestFootprint:

    def test_gear(self):
        gear = make_gear('g', 0, 0, teeth=40).with_params(thickness=20)
        assert footprint(gear) == Vec2(10, 80)

    def test_shaft(self):
        assert footprint(make_shaft('s', 0, 0)) == Vec2(125, 10)

    def test_housing(self):
        assert footprint(create_item('HOUSING', 0, 0)) == Vec2(200, 150)

    @pytest.mark.parametrize("rotation", [90, 270])
    def test_quarter_turn_swaps_axes(self, rotation):
        housing = create_item('HOUSING', 0, 0).with_rotation(rotation)
        assert footprint(housing) == Vec2(150, 200)

    def test_half_turn_keeps_axes(self):
        housing = create_item('HOUSING', 0, 0).with_rotation(180)
        assert footprint(housing) == Vec2(200, 150)


# ══════════════════════════════════════════════════════════════════════════
# Hit testing
# ══════════════════════════════════════════════════════════════════════════

class TestHitTest:

    def test_miss(self):
        assert hit_test([make_item('b', 'BEARING', 0, 0)], Vec2(500, 500)) is None

    def test_hit_inside(self):
        assert hit_test([make_shaft('s', 0, 0)], Vec2(100, 5)) == 's'

    def test_topmost_wins(self):
        items = [make_shaft('s', 0, 0), make_item('b', 'BEARING', 40, 0)]
        assert hit_test(items, Vec2(40, 0)) == 'b'
        assert hit_test(list(reversed(items)), Vec2(40, 0)) == 's'

    def test_thin_part_minimum_grab_box(self):
        circlip = make_item('c', 'CIRCLIP', 0, 0)
        # 2mm wide, but still grabbable 9mm off centre
        assert hit_test([circlip], Vec2(9, 0)) == 'c'
        assert hit_test([circlip], Vec2(11, 0)) is None

    def test_housing_border_only(self):
        housing = create_item('HOUSING', 0, 0, item_id='h')
        assert hit_test([housing], Vec2(0, 0)) is None
        assert hit_test([housing], Vec2(200, 0)) == 'h'
        assert hit_test([housing], Vec2(204, 0)) == 'h'
        assert hit_test([housing], Vec2(210, 0)) is None

    def test_housing_border_scales_with_zoom(self):
        housing = create_item('HOUSING', 0, 0, item_id='h')
        assert hit_test([housing], Vec2(210, 0), zoom=0.5) == 'h'
        assert hit_test([housing], Vec2(204, 0), zoom=2.0) is None

    def test_part_inside_housing_reachable(self):
        items = [create_item('HOUSING', 0, 0, item_id='h'), make_item('b', 'BEARING', 0, 0)]
        assert hit_test(items, Vec2(0, 0)) == 'b'
