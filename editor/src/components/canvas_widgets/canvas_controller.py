"""Canvas controller: the pointer/wheel/drop control loop of the layout canvas.

Owns the viewport, the drag session, the current snap guides and the
selection; holds a reference to the Layout model. Every input is processed to
completion before returning:

    event -> Viewport.to_world -> drag state machine -> snap resolver
          -> Layout.commit_position (-> linked movement)

States (DragState):
    IDLE --pointer_down(item)-->  DRAGGING_ITEM   grab offset recorded, item selected
    IDLE --pointer_down(empty)--> PANNING_VIEW    primary press also clears selection
    DRAGGING_ITEM --pointer_move--> resolve + commit every move (no preview/rollback)
    PANNING_VIEW  --pointer_move--> viewport.pan(device delta)
    any --pointer_up / pointer_leave--> IDLE, guides cleared

No Qt imports: the widget translates Qt events into these calls, and the whole
machine can be driven from tests.
"""

import logging
from typing import Iterable, List, Optional

from models.component import ComponentType, Item
from models.layout import Layout
from models.transform import Vec2, quantize
from models.viewport import Viewport
from services.snap_resolver import NO_GUIDES, SnapGuides, resolve
from .drag_session import DragSession, DragState, PointerButton
from constants import SNAP_GRID, WHEEL_ZOOM_FACTOR, DEFAULT_SNAP_ENABLED


class CanvasController:
    """Drives viewport navigation and item dragging for one canvas."""

    def __init__(self, layout: Optional[Layout] = None, viewport: Optional[Viewport] = None):
        self._logger = logging.getLogger('CanvasController')
        self.layout = layout if layout is not None else Layout()
        self.viewport = viewport if viewport is not None else Viewport()
        self.session = DragSession()
        self.guides: SnapGuides = NO_GUIDES
        self.selected_id: Optional[str] = None
        self.snap_enabled = DEFAULT_SNAP_ENABLED

    # ========================================
    # State queries
    # ========================================

    @property
    def state(self) -> DragState:
        return self.session.state

    @property
    def zoom_percent(self) -> int:
        return self.viewport.zoom_percent

    @property
    def selected_item(self) -> Optional[Item]:
        if self.selected_id is None:
            return None
        return self.layout.get_item(self.selected_id)

    def items(self):
        return self.layout.items()

    def render_items(self) -> List[Item]:
        """Items in paint order: housings, shafts, then parts with the selection on top."""
        items = self.layout.items()
        housings = [i for i in items if i.type is ComponentType.HOUSING]
        shafts = [i for i in items if i.type is ComponentType.SHAFT]
        parts = [i for i in items if i.type not in (ComponentType.HOUSING, ComponentType.SHAFT)]
        parts.sort(key=lambda item: item.id == self.selected_id)
        return housings + shafts + parts

    # ========================================
    # Pointer events
    # ========================================

    def pointer_down(self, device_x: float, device_y: float, hit_item_id: Optional[str] = None,
                     button: PointerButton = PointerButton.PRIMARY,
                     modifiers: Iterable[str] = ()):
        """Start a gesture.

        Args:
            device_x, device_y: Pointer position in widget pixels
            hit_item_id: Item under the pointer (hit-tested by the view), or None
            button: Pressed button
            modifiers: Held modifier names ('shift', 'ctrl', 'alt', 'meta')
        """
        modifiers = frozenset(modifiers)
        device_pos = Vec2(device_x, device_y)

        if hit_item_id is not None:
            item = self.layout.get_item(hit_item_id)
            if item is None:
                self._logger.debug(f"pointer_down on missing item {hit_item_id}, ignored")
                return
            world = self.viewport.to_world(device_x, device_y)
            self.session = DragSession.dragging(item.id, world - item.pos, device_pos, modifiers)
            self.selected_id = item.id
            return

        shift = 'shift' in modifiers
        if button is PointerButton.PRIMARY and not shift:
            self.selected_id = None
        # Any primary press on empty canvas deselects and starts a pan in one gesture
        if button in (PointerButton.PRIMARY, PointerButton.MIDDLE) or shift:
            self.session = DragSession.panning(device_pos, modifiers)

    def pointer_move(self, device_x: float, device_y: float):
        if self.session.is_dragging_item:
            self._drag_item(device_x, device_y)
        elif self.session.is_panning:
            last = self.session.last_device_pos
            self.viewport.pan(device_x - last.x, device_y - last.y)
            self.session.last_device_pos = Vec2(device_x, device_y)

    def pointer_up(self):
        self._end_session()

    def pointer_leave(self):
        self._end_session()

    def _end_session(self):
        # Moves were committed as they happened; ending only stops further updates
        self.session = DragSession()
        self.guides = NO_GUIDES

    def _drag_item(self, device_x: float, device_y: float):
        item_id = self.session.dragged_item_id
        item = self.layout.get_item(item_id)
        if item is None:
            self._logger.debug(f"Dragged item {item_id} no longer exists, move dropped")
            self.guides = NO_GUIDES
            return

        world = self.viewport.to_world(device_x, device_y)
        candidate = world - self.session.grab_offset
        result = resolve(candidate, item, self.layout.items(), self.viewport.zoom, self.snap_enabled)
        self.guides = result.guides
        self.layout.commit_position(item_id, result.position.x, result.position.y)

    # ========================================
    # Wheel / drop
    # ========================================

    def wheel(self, delta_x: float, delta_y: float, zoom_modifier: bool = False):
        """Zoom with the zoom modifier held, otherwise pan (not while dragging an item)."""
        if zoom_modifier:
            self.viewport.zoom_by(-delta_y * WHEEL_ZOOM_FACTOR)
        elif not self.session.is_dragging_item:
            self.viewport.pan(delta_x, delta_y)

    def drop(self, component_type, device_x: float, device_y: float) -> Optional[str]:
        """Create a component dropped from the palette at a device position.

        The new item lands on the base grid and becomes the selection.

        Returns:
            The new item id, or None for an unknown component type
        """
        try:
            component_type = ComponentType(component_type)
        except ValueError:
            self._logger.warning(f"Dropped unknown component type {component_type!r}, ignored")
            return None

        world = self.viewport.to_world(device_x, device_y)
        item_id = self.layout.add_item(
            component_type, quantize(world.x, SNAP_GRID), quantize(world.y, SNAP_GRID)
        )
        self.selected_id = item_id
        return item_id

    # ========================================
    # Toolbar actions
    # ========================================

    def zoom_in(self):
        self.viewport.zoom_in()

    def zoom_out(self):
        self.viewport.zoom_out()

    def reset_view(self):
        self.viewport.reset()

    def set_snap_enabled(self, enabled: bool):
        self.snap_enabled = bool(enabled)

    # ========================================
    # Item edits (forwarded to the model)
    # ========================================

    def select(self, item_id: Optional[str]):
        if item_id is not None and not self.layout.has_item(item_id):
            return
        self.selected_id = item_id

    def delete_item(self, item_id: str) -> bool:
        removed = self.layout.remove_item(item_id)
        if removed and self.selected_id == item_id:
            self.selected_id = None
        return removed

    def delete_selected(self) -> bool:
        if self.selected_id is None:
            return False
        return self.delete_item(self.selected_id)

    def update_item(self, item_id: str, rotation: Optional[int] = None, **params) -> bool:
        return self.layout.update_item(item_id, rotation=rotation, **params)
