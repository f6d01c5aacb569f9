"""
Gearbox Layout Editor - Component Model

Every part on the canvas is an Item: an immutable id, a ComponentType
discriminant fixed for the item's lifetime, a world position, a rotation and a
params record whose class is determined by the type:

    SPUR / HELICAL / BEVEL  -> GearParams
    WORM                    -> WormParams
    SHAFT                   -> ShaftParams (ordered ShaftSegment tuple)
    BEARING                 -> BearingParams
    HOUSING                 -> HousingParams
    COUPLING / SPACER / CIRCLIP -> SimplePartParams

Items and params are frozen dataclasses. Edits produce new records
(Item.moved_to, Item.with_params) so a snapshot handed to the snap resolver or
the linked movement pass can never change underneath it.

Tables keyed by ComponentType are checked with check_exhaustive() at import
time, so adding a type without handling it everywhere fails loudly.

Usage:
    shaft = create_item(ComponentType.SHAFT, 0, 0)
    shaft.params.total_length        # 250.0
    gear = create_item('SPUR', 40, 0).with_params(teeth=30)
    pitch_radius(gear)               # 60.0
"""

import uuid as uuid_module
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Optional, Tuple, Union

from models.transform import Vec2
from constants import (
    VALID_ROTATIONS, DEFAULT_ROTATION, MIN_GEAR_TEETH,
    DEFAULT_SPUR, DEFAULT_HELICAL, DEFAULT_BEVEL, DEFAULT_WORM,
    DEFAULT_SHAFT_SEGMENTS, DEFAULT_SHAFT_COLOR,
    DEFAULT_BEARING, DEFAULT_HOUSING,
    DEFAULT_COUPLING, DEFAULT_SPACER, DEFAULT_CIRCLIP,
)


class ComponentType(str, Enum):
    SPUR = 'SPUR'
    HELICAL = 'HELICAL'
    BEVEL = 'BEVEL'
    WORM = 'WORM'
    SHAFT = 'SHAFT'
    BEARING = 'BEARING'
    HOUSING = 'HOUSING'
    COUPLING = 'COUPLING'
    SPACER = 'SPACER'
    CIRCLIP = 'CIRCLIP'


class BearingType(str, Enum):
    DEEP_GROOVE = 'DEEP_GROOVE'
    ANGULAR_CONTACT = 'ANGULAR_CONTACT'
    CYLINDRICAL_ROLLER = 'CYLINDRICAL_ROLLER'
    TAPERED_ROLLER = 'TAPERED_ROLLER'
    SELF_ALIGNING = 'SELF_ALIGNING'
    THRUST = 'THRUST'


# Toothed gears that mesh by pitch radius. Worms carry no tooth count.
GEAR_TYPES = frozenset({ComponentType.SPUR, ComponentType.HELICAL, ComponentType.BEVEL})


def check_exhaustive(table, name):
    """Raise if a ComponentType-keyed table misses any type."""
    missing = [t.value for t in ComponentType if t not in table]
    if missing:
        raise RuntimeError(f"{name} does not handle component types: {', '.join(missing)}")


def _require_positive(owner, **values):
    for name, value in values.items():
        if value is None or value <= 0:
            raise ValueError(f"{owner}.{name} must be > 0, got {value!r}")


# ========================================
# Params records
# ========================================

@dataclass(frozen=True)
class GearParams:
    teeth: int
    module: float
    thickness: float
    pressure_angle: float = 20.0
    hole_diameter: float = 20.0
    helix_angle: Optional[float] = None
    color: str = DEFAULT_SPUR['color']

    def __post_init__(self):
        if int(self.teeth) != self.teeth or self.teeth < MIN_GEAR_TEETH:
            raise ValueError(f"GearParams.teeth must be an integer >= {MIN_GEAR_TEETH}, got {self.teeth!r}")
        object.__setattr__(self, 'teeth', int(self.teeth))
        _require_positive('GearParams', module=self.module, thickness=self.thickness)

    @property
    def pitch_diameter(self) -> float:
        return self.teeth * self.module

    @property
    def pitch_radius(self) -> float:
        return self.pitch_diameter / 2


@dataclass(frozen=True)
class WormParams:
    length: float
    diameter: float
    module: float
    color: str = DEFAULT_WORM['color']

    def __post_init__(self):
        _require_positive('WormParams', length=self.length, diameter=self.diameter, module=self.module)


@dataclass(frozen=True)
class ShaftSegment:
    id: str
    length: float
    diameter: float

    def __post_init__(self):
        _require_positive('ShaftSegment', length=self.length, diameter=self.diameter)

    @classmethod
    def new(cls, length: float, diameter: float) -> 'ShaftSegment':
        return cls(str(uuid_module.uuid4()), length, diameter)


@dataclass(frozen=True)
class ShaftParams:
    segments: Tuple[ShaftSegment, ...] = ()
    color: str = DEFAULT_SHAFT_COLOR

    def __post_init__(self):
        segments = tuple(self.segments)
        for segment in segments:
            if not isinstance(segment, ShaftSegment):
                raise TypeError(f"ShaftParams.segments must hold ShaftSegment, got {type(segment).__name__}")
        object.__setattr__(self, 'segments', segments)

    @property
    def total_length(self) -> float:
        return sum(segment.length for segment in self.segments)

    @property
    def max_diameter(self) -> float:
        return max((segment.diameter for segment in self.segments), default=0.0)

    def get_segment(self, segment_id: str) -> Optional[ShaftSegment]:
        for segment in self.segments:
            if segment.id == segment_id:
                return segment
        return None


@dataclass(frozen=True)
class BearingParams:
    width: float
    outer_diameter: float
    inner_diameter: float
    subtype: BearingType = BearingType.DEEP_GROOVE
    color: str = DEFAULT_BEARING['color']

    def __post_init__(self):
        object.__setattr__(self, 'subtype', BearingType(self.subtype))
        _require_positive('BearingParams', width=self.width,
                          outer_diameter=self.outer_diameter, inner_diameter=self.inner_diameter)


@dataclass(frozen=True)
class HousingParams:
    width: float
    height: float
    color: str = DEFAULT_HOUSING['color']

    def __post_init__(self):
        _require_positive('HousingParams', width=self.width, height=self.height)


@dataclass(frozen=True)
class SimplePartParams:
    """Coupling, spacer or circlip: an axial width and a ring cross-section."""
    width: float
    outer_diameter: float
    inner_diameter: float
    color: str = DEFAULT_SPACER['color']

    def __post_init__(self):
        _require_positive('SimplePartParams', width=self.width,
                          outer_diameter=self.outer_diameter, inner_diameter=self.inner_diameter)


ItemParams = Union[GearParams, WormParams, ShaftParams, BearingParams, HousingParams, SimplePartParams]

PARAMS_BY_TYPE: Dict[ComponentType, type] = {
    ComponentType.SPUR: GearParams,
    ComponentType.HELICAL: GearParams,
    ComponentType.BEVEL: GearParams,
    ComponentType.WORM: WormParams,
    ComponentType.SHAFT: ShaftParams,
    ComponentType.BEARING: BearingParams,
    ComponentType.HOUSING: HousingParams,
    ComponentType.COUPLING: SimplePartParams,
    ComponentType.SPACER: SimplePartParams,
    ComponentType.CIRCLIP: SimplePartParams,
}
check_exhaustive(PARAMS_BY_TYPE, 'PARAMS_BY_TYPE')


# ========================================
# Item
# ========================================

@dataclass(frozen=True)
class Item:
    """A positioned component.

    Attributes:
        id: Unique id, immutable after creation
        type: ComponentType discriminant, fixed for the item's lifetime
        pos: World position (x axial, y transverse)
        params: Params record matching PARAMS_BY_TYPE[type]
        rotation: Degrees, one of 0/90/180/270
    """
    id: str
    type: ComponentType
    pos: Vec2
    params: ItemParams
    rotation: int = DEFAULT_ROTATION

    def __post_init__(self):
        object.__setattr__(self, 'type', ComponentType(self.type))
        expected = PARAMS_BY_TYPE[self.type]
        if not isinstance(self.params, expected):
            raise TypeError(
                f"{self.type.value} items need {expected.__name__}, got {type(self.params).__name__}"
            )
        if self.rotation not in VALID_ROTATIONS:
            raise ValueError(f"rotation must be one of {VALID_ROTATIONS}, got {self.rotation!r}")
        object.__setattr__(self, 'rotation', int(self.rotation))

    @property
    def x(self) -> float:
        return self.pos.x

    @property
    def y(self) -> float:
        return self.pos.y

    @property
    def is_gear(self) -> bool:
        return self.type in GEAR_TYPES

    def moved_to(self, x: Optional[float] = None, y: Optional[float] = None) -> 'Item':
        """Copy with x and/or y replaced; omitted axes keep their value."""
        new_x = self.pos.x if x is None else float(x)
        new_y = self.pos.y if y is None else float(y)
        return replace(self, pos=Vec2(new_x, new_y))

    def translated(self, dx: float, dy: float) -> 'Item':
        return replace(self, pos=Vec2(self.pos.x + dx, self.pos.y + dy))

    def with_params(self, **changes) -> 'Item':
        """Copy with selected params fields replaced and re-validated."""
        if not changes:
            return self
        return replace(self, params=replace(self.params, **changes))

    def with_rotation(self, rotation: int) -> 'Item':
        return replace(self, rotation=rotation)


# ========================================
# Factory and derived geometry
# ========================================

def default_params(component_type) -> ItemParams:
    """Build the creation-time params for a component type."""
    component_type = ComponentType(component_type)
    if component_type is ComponentType.SPUR:
        return GearParams(**DEFAULT_SPUR)
    if component_type is ComponentType.HELICAL:
        return GearParams(**DEFAULT_HELICAL)
    if component_type is ComponentType.BEVEL:
        return GearParams(**DEFAULT_BEVEL)
    if component_type is ComponentType.WORM:
        return WormParams(**DEFAULT_WORM)
    if component_type is ComponentType.SHAFT:
        segments = tuple(ShaftSegment.new(length, diameter) for length, diameter in DEFAULT_SHAFT_SEGMENTS)
        return ShaftParams(segments=segments, color=DEFAULT_SHAFT_COLOR)
    if component_type is ComponentType.BEARING:
        return BearingParams(**DEFAULT_BEARING)
    if component_type is ComponentType.HOUSING:
        return HousingParams(**DEFAULT_HOUSING)
    if component_type is ComponentType.COUPLING:
        return SimplePartParams(**DEFAULT_COUPLING)
    if component_type is ComponentType.SPACER:
        return SimplePartParams(**DEFAULT_SPACER)
    if component_type is ComponentType.CIRCLIP:
        return SimplePartParams(**DEFAULT_CIRCLIP)
    raise ValueError(f"Unhandled component type: {component_type}")


def create_item(component_type, x: float, y: float, item_id: Optional[str] = None) -> Item:
    """Construct a new item with default params at (x, y)."""
    component_type = ComponentType(component_type)
    return Item(
        id=item_id or str(uuid_module.uuid4()),
        type=component_type,
        pos=Vec2(float(x), float(y)),
        params=default_params(component_type),
    )


def pitch_radius(item: Item) -> float:
    """Pitch radius (teeth * module / 2) of a toothed gear."""
    if not item.is_gear:
        raise TypeError(f"{item.type.value} has no pitch radius")
    return item.params.pitch_radius


def mesh_distance(a: Item, b: Item) -> float:
    """Centre distance at which two gears mesh: the sum of their pitch radii."""
    return pitch_radius(a) + pitch_radius(b)
