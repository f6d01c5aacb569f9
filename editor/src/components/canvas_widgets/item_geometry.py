"""Plan-view footprints and hit testing for canvas items.

A footprint is the half-extent (half width along x, half height along y) of
the outline drawn for an item, in world units, before rotation. Rotations of
90/270 swap the two.
"""
from typing import Callable, Dict, Optional, Sequence

from models.component import ComponentType, Item, check_exhaustive
from models.transform import Vec2
from constants import MIN_HIT_HALF_SIZE, HOUSING_BORDER_HIT_PX


def _gear_extent(item):
    return Vec2(item.params.thickness / 2, item.params.pitch_diameter / 2)


def _worm_extent(item):
    return Vec2(item.params.length / 2, item.params.diameter / 2)


def _shaft_extent(item):
    return Vec2(item.params.total_length / 2, item.params.max_diameter / 2)


def _ring_extent(item):
    return Vec2(item.params.width / 2, item.params.outer_diameter / 2)


def _housing_extent(item):
    return Vec2(item.params.width / 2, item.params.height / 2)


EXTENTS: Dict[ComponentType, Callable[[Item], Vec2]] = {
    ComponentType.SPUR: _gear_extent,
    ComponentType.HELICAL: _gear_extent,
    ComponentType.BEVEL: _gear_extent,
    ComponentType.WORM: _worm_extent,
    ComponentType.SHAFT: _shaft_extent,
    ComponentType.BEARING: _ring_extent,
    ComponentType.HOUSING: _housing_extent,
    ComponentType.COUPLING: _ring_extent,
    ComponentType.SPACER: _ring_extent,
    ComponentType.CIRCLIP: _ring_extent,
}
check_exhaustive(EXTENTS, 'EXTENTS')


def footprint(item: Item) -> Vec2:
    """Half extents of the item's outline with its rotation applied."""
    extent = EXTENTS[item.type](item)
    if item.rotation in (90, 270):
        return Vec2(extent.y, extent.x)
    return extent


def hit_test(items: Sequence[Item], world_pos: Vec2, zoom: float = 1.0) -> Optional[str]:
    """Return the id of the topmost item under world_pos.

    Args:
        items: Items in paint order (last painted is on top)
        world_pos: Pointer position in world units
        zoom: Current zoom, used for the housing border band

    Housings are only hit near their border so parts inside stay reachable.
    Thin parts get at least a MIN_HIT_HALF_SIZE grab box.
    """
    border = HOUSING_BORDER_HIT_PX / zoom
    for item in reversed(items):
        half = footprint(item)
        dx = abs(world_pos.x - item.x)
        dy = abs(world_pos.y - item.y)
        if item.type is ComponentType.HOUSING:
            inside_outer = dx <= half.x + border and dy <= half.y + border
            inside_inner = dx < half.x - border and dy < half.y - border
            if inside_outer and not inside_inner:
                return item.id
            continue
        if dx <= max(half.x, MIN_HIT_HALF_SIZE) and dy <= max(half.y, MIN_HIT_HALF_SIZE):
            return item.id
    return None
