"""Linked movement: parts mounted on a shaft follow it when it moves.

A part is mounted on a shaft when, before the move, it sat on the shaft's
centreline (|part.y - old_y| < LINK_ALIGN_TOLERANCE) and its x fell within the
shaft's axial span widened by LINK_SPAN_MARGIN at both ends. Mounted parts
are translated by exactly the shaft's (dx, dy). Shafts and housings are never
carried along; they only move when dragged themselves.

The test uses the shaft's *old* record: by the time this runs the store
already holds the shaft at its new position.
"""
import logging
from typing import Iterable, List

from models.component import ComponentType, Item, check_exhaustive
from constants import LINK_ALIGN_TOLERANCE, LINK_SPAN_MARGIN

logger = logging.getLogger(__name__)


# Which component types ride along with a moving shaft
CARRIED_BY_SHAFT = {
    ComponentType.SPUR: True,
    ComponentType.HELICAL: True,
    ComponentType.BEVEL: True,
    ComponentType.WORM: True,
    ComponentType.SHAFT: False,
    ComponentType.BEARING: True,
    ComponentType.HOUSING: False,
    ComponentType.COUPLING: True,
    ComponentType.SPACER: True,
    ComponentType.CIRCLIP: True,
}
check_exhaustive(CARRIED_BY_SHAFT, 'CARRIED_BY_SHAFT')


def shaft_span(shaft: Item, margin: float = 0.0):
    """Axial extent (min_x, max_x) of a shaft, widened by margin on both sides.

    A shaft without segments collapses to the point at its x.
    """
    half_length = shaft.params.total_length / 2
    return shaft.x - half_length - margin, shaft.x + half_length + margin


def is_mounted_on(item: Item, shaft: Item) -> bool:
    """True if item sits on shaft's centreline within its (margined) span."""
    if item.id == shaft.id or not CARRIED_BY_SHAFT[item.type]:
        return False
    if abs(item.y - shaft.y) >= LINK_ALIGN_TOLERANCE:
        return False
    min_x, max_x = shaft_span(shaft, LINK_SPAN_MARGIN)
    return min_x <= item.x <= max_x


def propagate_shaft_move(old_shaft: Item, new_shaft: Item, items: Iterable[Item]) -> List[Item]:
    """Return items with every part mounted on old_shaft moved by the shaft's delta.

    Args:
        old_shaft: Shaft record before the move
        new_shaft: Shaft record after the move
        items: Current item list (already holding new_shaft)

    Returns:
        New list in the same order. Untouched items are the same objects.
    """
    if old_shaft.type is not ComponentType.SHAFT:
        raise TypeError(f"Linked movement needs a SHAFT, got {old_shaft.type.value}")

    dx = new_shaft.x - old_shaft.x
    dy = new_shaft.y - old_shaft.y

    result = []
    moved = 0
    for item in items:
        if is_mounted_on(item, old_shaft):
            result.append(item.translated(dx, dy))
            moved += 1
        else:
            result.append(item)

    if moved:
        logger.debug(f"Shaft {old_shaft.id} moved by ({dx}, {dy}), carried {moved} part(s)")
    return result
