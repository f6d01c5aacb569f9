"""Viewport: pan offset and zoom of the plan-view canvas.

Device coordinates are widget pixels (top-left origin, y down). World
coordinates are millimetres. The mapping is pan-then-scale:

    world = device / zoom + (viewport.x, viewport.y)

so (viewport.x, viewport.y) is the world point shown at the widget's top-left
corner. Zoom is always kept inside [ZOOM_MIN, ZOOM_MAX]; out-of-range
requests are clamped, never rejected.
"""
from dataclasses import dataclass

from models.transform import Vec2
from constants import (
    ZOOM_MIN, ZOOM_MAX, ZOOM_BUTTON_STEP,
    DEFAULT_VIEWPORT_X, DEFAULT_VIEWPORT_Y, DEFAULT_ZOOM,
)


def clamp_zoom(zoom: float) -> float:
    return max(ZOOM_MIN, min(ZOOM_MAX, zoom))


@dataclass
class Viewport:
    x: float = DEFAULT_VIEWPORT_X
    y: float = DEFAULT_VIEWPORT_Y
    zoom: float = DEFAULT_ZOOM

    def __post_init__(self):
        self.zoom = clamp_zoom(self.zoom)

    # ========================================
    # Coordinate conversion
    # ========================================

    def to_world(self, device_x: float, device_y: float) -> Vec2:
        """Convert device pixels to world coordinates."""
        return Vec2(device_x / self.zoom + self.x, device_y / self.zoom + self.y)

    def to_device(self, world_x: float, world_y: float) -> Vec2:
        """Convert world coordinates to device pixels (inverse of to_world)."""
        return Vec2((world_x - self.x) * self.zoom, (world_y - self.y) * self.zoom)

    # ========================================
    # Navigation
    # ========================================

    def pan(self, dx: float, dy: float):
        """Move the view by a device-pixel delta.

        The offset is divided by zoom so a drag of N pixels always slides the
        picture N pixels on screen.
        """
        self.x -= dx / self.zoom
        self.y -= dy / self.zoom

    def zoom_by(self, amount: float):
        """Add amount to zoom (wheel input passes -deltaY * WHEEL_ZOOM_FACTOR).

        Zoom is anchored at the viewport origin, not the cursor.
        """
        self.zoom = clamp_zoom(self.zoom + amount)

    def set_zoom(self, zoom: float):
        self.zoom = clamp_zoom(zoom)

    def zoom_in(self):
        self.zoom = clamp_zoom(self.zoom * ZOOM_BUTTON_STEP)

    def zoom_out(self):
        self.zoom = clamp_zoom(self.zoom / ZOOM_BUTTON_STEP)

    def reset(self):
        """Restore the startup view."""
        self.x = DEFAULT_VIEWPORT_X
        self.y = DEFAULT_VIEWPORT_Y
        self.zoom = DEFAULT_ZOOM

    @property
    def zoom_percent(self) -> int:
        return int(round(self.zoom * 100))
