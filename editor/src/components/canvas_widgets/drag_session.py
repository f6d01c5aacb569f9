"""Drag session state for the layout canvas.

One DragSession lives from pointer-down to pointer-up/leave and is replaced
by a fresh idle session afterwards, so nothing from one gesture leaks into
the next.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from models.transform import Vec2


class DragState(Enum):
    IDLE = 'idle'
    PANNING_VIEW = 'panning_view'
    DRAGGING_ITEM = 'dragging_item'


class PointerButton(Enum):
    PRIMARY = 0
    MIDDLE = 1
    SECONDARY = 2


@dataclass
class DragSession:
    """Transient pointer gesture state.

    state: current DragState
    dragged_item_id: item under the pointer when DRAGGING_ITEM
    grab_offset: pointer world position minus item position at press (world units)
    last_device_pos: last pointer position in device pixels (used for panning)
    modifiers: modifier names held at press ({'shift', 'ctrl', 'alt', 'meta'})
    """
    state: DragState = DragState.IDLE
    dragged_item_id: Optional[str] = None
    grab_offset: Vec2 = Vec2(0.0, 0.0)
    last_device_pos: Optional[Vec2] = None
    modifiers: frozenset = field(default_factory=frozenset)

    @property
    def is_idle(self) -> bool:
        return self.state is DragState.IDLE

    @property
    def is_panning(self) -> bool:
        return self.state is DragState.PANNING_VIEW

    @property
    def is_dragging_item(self) -> bool:
        return self.state is DragState.DRAGGING_ITEM

    @classmethod
    def dragging(cls, item_id: str, grab_offset: Vec2, device_pos: Vec2, modifiers=frozenset()):
        return cls(DragState.DRAGGING_ITEM, item_id, grab_offset, device_pos, frozenset(modifiers))

    @classmethod
    def panning(cls, device_pos: Vec2, modifiers=frozenset()):
        return cls(DragState.PANNING_VIEW, None, Vec2(0.0, 0.0), device_pos, frozenset(modifiers))
