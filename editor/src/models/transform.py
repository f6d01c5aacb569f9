"""Transform data structures for coordinate representation."""
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """2D vector for coordinate pairs.

    Used for any x/y coordinate pair across different spaces:
    - Device pixels (pointer positions, wheel deltas)
    - World units (item positions, grab offsets)

    World x is the axial direction of a shaft, world y the transverse one.
    """
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = vec2"""
        return iter((self.x, self.y))

    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y)


def quantize(value, step):
    """Round value to the nearest multiple of step, halves rounding up.

    Python's round() rounds halves to even, which would make -15 and 15 land
    on different sides of the grid; floor(v + 0.5) keeps snapping symmetric
    with how the pointer moves.
    """
    return float(math.floor(value / step + 0.5) * step)
