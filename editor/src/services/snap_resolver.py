"""Position snapping for items being dragged.

resolve() takes the raw candidate position of a dragged item and returns the
corrected position plus the guide lines to draw. It reads the item list and
never mutates it.

Policy by type:
- SHAFT: both axes to the base grid.
- HOUSING: both axes to twice the base grid.
- Everything else: x to the base grid; y from the first source that fires,
  in priority order
    1. gear mesh distance (toothed gears only)
    2. alignment with a shaft centreline
    3. base grid

Thresholds are screen pixels divided by zoom. When several neighbours are in
range, the last one in list order wins. This is deterministic but not a
nearest-match search.
"""
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from models.component import ComponentType, Item, check_exhaustive, mesh_distance
from models.transform import Vec2, quantize
from constants import (
    SNAP_GRID, HOUSING_GRID_MULTIPLIER,
    MESH_SNAP_DISTANCE_PX, SHAFT_SNAP_DISTANCE_PX,
    MESH_GUIDE_LABEL_FORMAT,
)


@dataclass(frozen=True)
class MeshGuide:
    y: float
    distance: float
    label: str


@dataclass(frozen=True)
class SnapGuides:
    """Guide lines produced by one resolve() call.

    alignment_y: y of the shaft the item snapped to, or None
    mesh: mesh guide for a gear snapped to a mesh distance, or None
    """
    alignment_y: Optional[float] = None
    mesh: Optional[MeshGuide] = None

    @property
    def is_empty(self) -> bool:
        return self.alignment_y is None and self.mesh is None


NO_GUIDES = SnapGuides()


@dataclass(frozen=True)
class SnapResult:
    position: Vec2
    guides: SnapGuides = NO_GUIDES


def format_distance(value: float) -> str:
    """Render a distance without a trailing '.0' (140.0 -> '140', 70.5 -> '70.5')."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return f"{value:.10g}"


def mesh_label(distance: float) -> str:
    return MESH_GUIDE_LABEL_FORMAT.format(distance=format_distance(distance))


# ========================================
# Snap sources
# ========================================

def find_mesh_snap(candidate_y: float, moving_item: Item, items: Iterable[Item],
                   threshold: float) -> Optional[MeshGuide]:
    """Mesh-distance snap for a toothed gear.

    For every other gear, the two y values at which the pair would mesh are
    other.y - D and other.y + D with D the sum of pitch radii. The one above
    is checked first.
    """
    if not moving_item.is_gear:
        return None

    found = None
    for other in items:
        if other.id == moving_item.id or not other.is_gear:
            continue
        distance = mesh_distance(moving_item, other)
        above = other.y - distance
        below = other.y + distance
        if abs(candidate_y - above) < threshold:
            found = MeshGuide(above, distance, mesh_label(distance))
        elif abs(candidate_y - below) < threshold:
            found = MeshGuide(below, distance, mesh_label(distance))
    return found


def find_shaft_alignment(candidate_y: float, moving_item: Item, items: Iterable[Item],
                         threshold: float) -> Optional[float]:
    """y of the last shaft whose centreline is within threshold, or None."""
    found = None
    for other in items:
        if other.type is not ComponentType.SHAFT or other.id == moving_item.id:
            continue
        if abs(candidate_y - other.y) < threshold:
            found = other.y
    return found


# ========================================
# Policies
# ========================================

def snap_to_grid(candidate, moving_item, items, zoom):
    return SnapResult(Vec2(quantize(candidate.x, SNAP_GRID), quantize(candidate.y, SNAP_GRID)))


def snap_to_housing_grid(candidate, moving_item, items, zoom):
    step = SNAP_GRID * HOUSING_GRID_MULTIPLIER
    return SnapResult(Vec2(quantize(candidate.x, step), quantize(candidate.y, step)))


def snap_part(candidate, moving_item, items, zoom):
    """Gears and shaft-mounted parts: mesh beats shaft alignment beats grid."""
    items = tuple(items)
    x = quantize(candidate.x, SNAP_GRID)

    mesh = find_mesh_snap(candidate.y, moving_item, items, MESH_SNAP_DISTANCE_PX / zoom)
    if mesh is not None:
        return SnapResult(Vec2(x, mesh.y), SnapGuides(mesh=mesh))

    shaft_y = find_shaft_alignment(candidate.y, moving_item, items, SHAFT_SNAP_DISTANCE_PX / zoom)
    if shaft_y is not None:
        return SnapResult(Vec2(x, shaft_y), SnapGuides(alignment_y=shaft_y))

    return SnapResult(Vec2(x, quantize(candidate.y, SNAP_GRID)))


SnapPolicy = Callable[[Vec2, Item, Iterable[Item], float], SnapResult]

SNAP_POLICIES: Dict[ComponentType, SnapPolicy] = {
    ComponentType.SHAFT: snap_to_grid,
    ComponentType.HOUSING: snap_to_housing_grid,
    ComponentType.SPUR: snap_part,
    ComponentType.HELICAL: snap_part,
    ComponentType.BEVEL: snap_part,
    ComponentType.WORM: snap_part,
    ComponentType.BEARING: snap_part,
    ComponentType.COUPLING: snap_part,
    ComponentType.SPACER: snap_part,
    ComponentType.CIRCLIP: snap_part,
}
check_exhaustive(SNAP_POLICIES, 'SNAP_POLICIES')


def resolve(candidate: Vec2, moving_item: Item, items: Iterable[Item], zoom: float,
            enabled: bool = True) -> SnapResult:
    """Resolve the snapped position of a dragged item.

    Args:
        candidate: Raw world position (pointer minus grab offset)
        moving_item: The item being dragged (its stored record)
        items: Snapshot of every item, moving_item included
        zoom: Current viewport zoom, used to scale thresholds
        enabled: False commits the candidate untouched

    Returns:
        SnapResult with the position to commit and the guides to show
    """
    if not enabled:
        return SnapResult(Vec2(float(candidate.x), float(candidate.y)))
    return SNAP_POLICIES[moving_item.type](candidate, moving_item, items, zoom)
