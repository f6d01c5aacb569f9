"""
Tests for the Layout item store.

Verifies:
- add/remove/lookup and insertion order
- commit_position with omitted axes, missing ids and linked movement
- update_item for rotation and params
- Shaft segment editing
- Listener notification
"""
import pytest
from models.component import ComponentType
from models.layout import Layout
from models.transform import Vec2

from conftest import make_item, make_shaft, layout_of


# ══════════════════════════════════════════════════════════════════════════
# Creation and lookup
# ══════════════════════════════════════════════════════════════════════════

class TestAddRemove:

    def test_add_item_returns_id(self, layout):
        item_id = layout.add_item(ComponentType.SPUR, 10, 20)
        item = layout.get_item(item_id)
        assert item.type is ComponentType.SPUR
        assert item.pos == Vec2(10, 20)
        assert layout.last_added_id == item_id

    def test_add_item_unknown_type(self, layout):
        with pytest.raises(ValueError):
            layout.add_item('FLYWHEEL', 0, 0)
        assert layout.count() == 0

    def test_insertion_order(self, layout):
        ids = [layout.add_item(t, 0, 0) for t in ('SHAFT', 'SPUR', 'HOUSING')]
        assert [item.id for item in layout.items()] == ids

    def test_insert_duplicate_rejected(self):
        layout = layout_of(make_item('a', 'SPACER', 0, 0))
        with pytest.raises(ValueError):
            layout.insert_item(make_item('a', 'SPACER', 10, 0))

    def test_remove_item(self, layout):
        item_id = layout.add_item('BEARING', 0, 0)
        assert layout.remove_item(item_id)
        assert not layout.has_item(item_id)
        assert item_id not in layout
        assert len(layout) == 0

    def test_remove_missing(self, layout):
        assert layout.remove_item('nope') is False

    def test_get_missing(self, layout):
        assert layout.get_item('nope') is None

    def test_clear(self, layout):
        layout.add_item('SPUR', 0, 0)
        layout.add_item('SHAFT', 0, 0)
        layout.clear()
        assert layout.count() == 0
        assert layout.last_added_id is None

    def test_items_snapshot_is_detached(self, layout):
        item_id = layout.add_item('SPUR', 0, 0)
        snapshot = layout.items()
        layout.commit_position(item_id, 50, 50)
        assert snapshot[0].pos == Vec2(0, 0)


# ══════════════════════════════════════════════════════════════════════════
# Position commits
# ══════════════════════════════════════════════════════════════════════════

class TestCommitPosition:

    def test_both_axes(self, layout):
        item_id = layout.add_item('SPUR', 0, 0)
        assert layout.commit_position(item_id, 30, 40)
        assert layout.get_item(item_id).pos == Vec2(30, 40)

    def test_omitted_axis_kept(self, layout):
        item_id = layout.add_item('SPUR', 5, 6)
        layout.commit_position(item_id, y=60)
        assert layout.get_item(item_id).pos == Vec2(5, 60)

    def test_missing_item(self, layout):
        assert layout.commit_position('nope', 1, 1) is False

    def test_shaft_carries_mounted_parts(self, mounted_layout):
        mounted_layout.commit_position('shaft', 10, 20)
        assert mounted_layout.get_item('shaft').pos == Vec2(10, 20)
        assert mounted_layout.get_item('bearing').pos == Vec2(50, 20)
        assert mounted_layout.get_item('coupling').pos == Vec2(300, 0)

    def test_shaft_move_keeps_order(self, mounted_layout):
        mounted_layout.commit_position('shaft', 10, 20)
        assert [item.id for item in mounted_layout.items()] == ['shaft', 'bearing', 'coupling']

    def test_shaft_x_only_does_not_carry(self, mounted_layout):
        mounted_layout.commit_position('shaft', x=30)
        assert mounted_layout.get_item('shaft').pos == Vec2(30, 0)
        assert mounted_layout.get_item('bearing').pos == Vec2(40, 0)

    def test_moving_part_does_not_move_shaft(self, mounted_layout):
        mounted_layout.commit_position('bearing', 60, 0)
        assert mounted_layout.get_item('shaft').pos == Vec2(0, 0)

    def test_repeated_moves_keep_parts_attached(self, mounted_layout):
        for y in (10, 20, 30, 40):
            mounted_layout.commit_position('shaft', 0, y)
        assert mounted_layout.get_item('bearing').pos == Vec2(40, 40)

    def test_unchanged_position_no_notification(self, layout):
        item_id = layout.add_item('SPUR', 10, 10)
        calls = []
        layout.add_listener(lambda: calls.append(1))
        assert layout.commit_position(item_id, 10, 10)
        assert calls == []


# ══════════════════════════════════════════════════════════════════════════
# Non-positional edits
# ══════════════════════════════════════════════════════════════════════════

class TestUpdateItem:

    def test_params(self, layout):
        item_id = layout.add_item('SPUR', 0, 0)
        assert layout.update_item(item_id, teeth=24, module=2.5)
        params = layout.get_item(item_id).params
        assert (params.teeth, params.module) == (24, 2.5)

    def test_rotation(self, layout):
        item_id = layout.add_item('BEARING', 0, 0)
        layout.update_item(item_id, rotation=90)
        assert layout.get_item(item_id).rotation == 90

    def test_invalid_value_leaves_item(self, layout):
        item_id = layout.add_item('SPUR', 0, 0)
        with pytest.raises(ValueError):
            layout.update_item(item_id, teeth=2)
        assert layout.get_item(item_id).params.teeth == 40

    def test_missing_item(self, layout):
        assert layout.update_item('nope', teeth=20) is False

    def test_position_unchanged(self, layout):
        item_id = layout.add_item('SPUR', 10, 20)
        layout.update_item(item_id, rotation=180, thickness=12)
        assert layout.get_item(item_id).pos == Vec2(10, 20)


class TestShaftSegments:

    def test_add_segment(self):
        layout = layout_of(make_shaft('s', 0, 0))
        segment_id = layout.add_shaft_segment('s')
        segments = layout.get_item('s').params.segments
        assert len(segments) == 4
        assert segments[-1].id == segment_id
        assert layout.get_item('s').params.total_length == 300

    def test_update_segment(self):
        layout = layout_of(make_shaft('s', 0, 0))
        assert layout.update_shaft_segment('s', 's-seg1', length=100)
        segment = layout.get_item('s').params.get_segment('s-seg1')
        assert (segment.length, segment.diameter) == (100, 20.0)

    def test_update_unknown_segment(self):
        layout = layout_of(make_shaft('s', 0, 0))
        with pytest.raises(ValueError):
            layout.update_shaft_segment('s', 'nope', length=10)

    def test_remove_segment(self):
        layout = layout_of(make_shaft('s', 0, 0))
        assert layout.remove_shaft_segment('s', 's-seg0')
        assert [seg.id for seg in layout.get_item('s').params.segments] == ['s-seg1', 's-seg2']

    def test_last_segment_kept(self):
        layout = layout_of(make_shaft('s', 0, 0, lengths=(100,)))
        assert layout.remove_shaft_segment('s', 's-seg0') is False
        assert len(layout.get_item('s').params.segments) == 1

    def test_segment_ops_need_shaft(self):
        layout = layout_of(make_item('g', 'SPUR', 0, 0))
        with pytest.raises(TypeError):
            layout.add_shaft_segment('g')

    def test_missing_shaft(self, layout):
        assert layout.add_shaft_segment('nope') is None
        assert layout.remove_shaft_segment('nope', 'x') is False


# ══════════════════════════════════════════════════════════════════════════
# Listeners
# ══════════════════════════════════════════════════════════════════════════

class TestListeners:

    def test_notified_on_every_mutation(self, layout):
        calls = []
        layout.add_listener(lambda: calls.append(1))
        item_id = layout.add_item('SPUR', 0, 0)
        layout.commit_position(item_id, 10, 0)
        layout.update_item(item_id, teeth=30)
        layout.remove_item(item_id)
        layout.clear()
        assert len(calls) == 5

    def test_remove_listener(self, layout):
        calls = []
        listener = lambda: calls.append(1)
        layout.add_listener(listener)
        layout.add_listener(listener)
        layout.add_item('SPUR', 0, 0)
        layout.remove_listener(listener)
        layout.add_item('SPUR', 0, 0)
        assert calls == [1]
