"""Mixin translating Qt pointer and wheel events for the layout canvas.

Provides viewport navigation and item dragging including:
- Zoom in/out/reset and Ctrl/Cmd+wheel zoom
- Pan with empty-canvas drag or plain wheel
- Item drag with snapping (delegated to CanvasController)
- Grid display toggle
"""

from PyQt5.QtCore import Qt

from .drag_session import PointerButton
from .item_geometry import hit_test
from constants import WHEEL_ANGLE_PER_NOTCH, WHEEL_PIXELS_PER_NOTCH


_BUTTONS = {
    Qt.LeftButton: PointerButton.PRIMARY,
    Qt.MiddleButton: PointerButton.MIDDLE,
    Qt.RightButton: PointerButton.SECONDARY,
}


def modifier_names(modifiers):
    """Convert Qt keyboard modifiers to the names the controller understands."""
    names = set()
    if modifiers & Qt.ShiftModifier:
        names.add('shift')
    if modifiers & Qt.ControlModifier:
        names.add('ctrl')
    if modifiers & Qt.AltModifier:
        names.add('alt')
    if modifiers & Qt.MetaModifier:
        names.add('meta')
    return frozenset(names)


class CanvasZoomPanMixin:
    """Mixin providing zoom, pan and drag input handling for canvas."""

    # Expected state variables (initialized in main class):
    # - controller: CanvasController
    # - show_grid: bool
    # - viewChanged: pyqtSignal emitted after any viewport change

    def zoom_in(self):
        """Zoom in by one toolbar step."""
        self.controller.zoom_in()
        self._view_changed()

    def zoom_out(self):
        """Zoom out by one toolbar step."""
        self.controller.zoom_out()
        self._view_changed()

    def zoom_reset(self):
        """Restore the default view."""
        self.controller.reset_view()
        self._view_changed()

    def get_zoom_percent(self):
        """Get current zoom percentage."""
        return self.controller.zoom_percent

    def set_show_grid(self, show):
        """Toggle grid visibility."""
        self.show_grid = bool(show)
        self.update()

    def set_snap_enabled(self, enabled):
        self.controller.set_snap_enabled(enabled)

    def _view_changed(self):
        self.update()
        self.viewChanged.emit()

    def item_at(self, device_pos):
        """Id of the topmost item under a device position, or None."""
        viewport = self.controller.viewport
        world = viewport.to_world(device_pos.x(), device_pos.y())
        return hit_test(self.controller.render_items(), world, viewport.zoom)

    # ========================================
    # Mouse Event Handlers
    # ========================================

    def wheelEvent(self, event):
        """Ctrl/Cmd+wheel zooms, plain wheel pans."""
        angle = event.angleDelta()
        # Qt: positive angle scrolls up; controller expects positive delta scrolling down
        delta_x = -angle.x() / WHEEL_ANGLE_PER_NOTCH * WHEEL_PIXELS_PER_NOTCH
        delta_y = -angle.y() / WHEEL_ANGLE_PER_NOTCH * WHEEL_PIXELS_PER_NOTCH
        zoom_modifier = bool(event.modifiers() & (Qt.ControlModifier | Qt.MetaModifier))
        self.controller.wheel(delta_x, delta_y, zoom_modifier)
        self._view_changed()
        event.accept()

    def mousePressEvent(self, event):
        button = _BUTTONS.get(event.button())
        if button is None:
            super().mousePressEvent(event)
            return
        pos = event.pos()
        self.controller.pointer_down(
            pos.x(), pos.y(),
            hit_item_id=self.item_at(pos),
            button=button,
            modifiers=modifier_names(event.modifiers()),
        )
        self.setFocus()
        if self.controller.session.is_panning:
            self.setCursor(Qt.ClosedHandCursor)
        elif self.controller.session.is_dragging_item:
            self.setCursor(Qt.SizeAllCursor)
        self.selectionChanged.emit(self.controller.selected_id or '')
        self.update()
        event.accept()

    def mouseMoveEvent(self, event):
        pos = event.pos()
        if self.controller.session.is_idle:
            self.setCursor(Qt.OpenHandCursor if self.item_at(pos) is None else Qt.SizeAllCursor)
            return
        self.controller.pointer_move(pos.x(), pos.y())
        if self.controller.session.is_panning:
            self._view_changed()
        else:
            self.update()
        event.accept()

    def mouseReleaseEvent(self, event):
        self.controller.pointer_up()
        self.setCursor(Qt.ArrowCursor)
        self.update()
        event.accept()

    def leaveEvent(self, event):
        self.controller.pointer_leave()
        self.setCursor(Qt.ArrowCursor)
        self.update()
        super().leaveEvent(event)

