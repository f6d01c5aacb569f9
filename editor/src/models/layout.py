"""
Gearbox Layout Editor - Layout Model

THE MODEL in the MVC architecture. Owns every item on the canvas.

This class handles:
- Item creation with type defaults (add_item)
- Removal and lookup by id
- Position commits, including linked movement of parts mounted on a shaft
- Non-positional edits (rotation, params, shaft segments)
- Change notification for views

The Layout model is INDEPENDENT of UI:
- No Qt imports
- No selection, drag or viewport state (that's CanvasController)

Reads return immutable snapshots (Item records are frozen); every write goes
through a method here.

Usage:
    layout = Layout()
    shaft_id = layout.add_item(ComponentType.SHAFT, 0, 0)
    gear_id = layout.add_item(ComponentType.SPUR, 40, 0)
    layout.commit_position(shaft_id, 10, 20)   # gear follows to (50, 20)
    layout.update_item(gear_id, teeth=30)
"""

import logging
from typing import Callable, Dict, List, Optional, Tuple

from models.component import ComponentType, Item, ShaftSegment, create_item
from services.linked_movement import propagate_shaft_move
from constants import NEW_SEGMENT_LENGTH, NEW_SEGMENT_DIAMETER


class Layout:
    """Item store: the single source of truth for the canvas contents.

    Items keep their insertion order; snap tie-breaks and linked movement
    scan in that order.
    """

    def __init__(self):
        self._logger = logging.getLogger('Layout')
        self._items: Dict[str, Item] = {}
        self._listeners: List[Callable[[], None]] = []
        self._last_added_id = None

    # ========================================
    # Listeners
    # ========================================

    def add_listener(self, callback: Callable[[], None]):
        """Register a callback fired after every mutation"""
        if callback not in self._listeners:
            self._listeners.append(callback)

    def remove_listener(self, callback: Callable[[], None]):
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify(self):
        for callback in list(self._listeners):
            callback()

    # ========================================
    # Queries
    # ========================================

    def items(self) -> Tuple[Item, ...]:
        """Snapshot of all items in insertion order"""
        return tuple(self._items.values())

    def get_item(self, item_id: str) -> Optional[Item]:
        return self._items.get(item_id)

    def has_item(self, item_id: str) -> bool:
        return item_id in self._items

    def count(self) -> int:
        return len(self._items)

    def __len__(self):
        return len(self._items)

    def __contains__(self, item_id):
        return item_id in self._items

    @property
    def last_added_id(self) -> Optional[str]:
        return self._last_added_id

    # ========================================
    # Creation / removal
    # ========================================

    def add_item(self, component_type, x: float, y: float) -> str:
        """Create an item with default params at (x, y).

        Args:
            component_type: ComponentType or its string value
            x: World x (axial)
            y: World y (transverse)

        Returns:
            Id of the new item

        Raises:
            ValueError: If component_type is not a known type
        """
        item = create_item(component_type, x, y)
        self._items[item.id] = item
        self._last_added_id = item.id
        self._logger.debug(f"Added {item.type.value} {item.id} at ({item.x}, {item.y})")
        self._notify()
        return item.id

    def insert_item(self, item: Item):
        """Insert a fully built item (used by tests and programmatic layouts)

        Raises:
            ValueError: If an item with the same id exists
        """
        if item.id in self._items:
            raise ValueError(f"Item with id '{item.id}' already exists")
        self._items[item.id] = item
        self._last_added_id = item.id
        self._notify()

    def remove_item(self, item_id: str) -> bool:
        """Remove item by id. Returns False if it was not present."""
        if self._items.pop(item_id, None) is None:
            self._logger.debug(f"remove_item: no item {item_id}")
            return False
        self._logger.debug(f"Removed item {item_id}")
        self._notify()
        return True

    def clear(self):
        self._items.clear()
        self._last_added_id = None
        self._notify()

    # ========================================
    # Position commits
    # ========================================

    def commit_position(self, item_id: str, x: Optional[float] = None,
                        y: Optional[float] = None) -> bool:
        """Move an item. Omitted axes keep their value.

        When a shaft is moved with y in the update, the parts mounted on it
        (judged against the shaft's pre-move record) move by the same delta.

        Returns:
            False if the item does not exist, True otherwise
        """
        old = self._items.get(item_id)
        if old is None:
            self._logger.debug(f"commit_position: no item {item_id}")
            return False

        new = old.moved_to(x, y)
        if new.pos == old.pos:
            return True
        self._items[item_id] = new

        if old.type is ComponentType.SHAFT and y is not None:
            updated = propagate_shaft_move(old, new, self._items.values())
            self._items = {item.id: item for item in updated}

        self._notify()
        return True

    # ========================================
    # Non-positional edits
    # ========================================

    def update_item(self, item_id: str, rotation: Optional[int] = None, **params) -> bool:
        """Apply rotation and/or params field changes.

        Args:
            item_id: Item id
            rotation: New rotation in degrees (0/90/180/270), or None to keep
            **params: Params fields to replace, e.g. teeth=30

        Returns:
            False if the item does not exist, True otherwise

        Raises:
            ValueError: If a new value breaks an item invariant
            TypeError: If a params field does not exist for this type
        """
        item = self._items.get(item_id)
        if item is None:
            self._logger.debug(f"update_item: no item {item_id}")
            return False

        updated = item.with_params(**params)
        if rotation is not None:
            updated = updated.with_rotation(rotation)
        self._items[item_id] = updated
        self._notify()
        return True

    # ========================================
    # Shaft segments
    # ========================================

    def _get_shaft(self, shaft_id: str) -> Optional[Item]:
        item = self._items.get(shaft_id)
        if item is None:
            self._logger.debug(f"no shaft {shaft_id}")
            return None
        if item.type is not ComponentType.SHAFT:
            raise TypeError(f"Item {shaft_id} is a {item.type.value}, not a SHAFT")
        return item

    def add_shaft_segment(self, shaft_id: str, length: float = NEW_SEGMENT_LENGTH,
                          diameter: float = NEW_SEGMENT_DIAMETER) -> Optional[str]:
        """Append a segment to the shaft's right end. Returns the segment id."""
        shaft = self._get_shaft(shaft_id)
        if shaft is None:
            return None
        segment = ShaftSegment.new(length, diameter)
        self._items[shaft_id] = shaft.with_params(segments=shaft.params.segments + (segment,))
        self._notify()
        return segment.id

    def update_shaft_segment(self, shaft_id: str, segment_id: str,
                             length: Optional[float] = None,
                             diameter: Optional[float] = None) -> bool:
        shaft = self._get_shaft(shaft_id)
        if shaft is None:
            return False
        segment = shaft.params.get_segment(segment_id)
        if segment is None:
            raise ValueError(f"Shaft {shaft_id} has no segment '{segment_id}'")
        replacement = ShaftSegment(
            segment.id,
            segment.length if length is None else length,
            segment.diameter if diameter is None else diameter,
        )
        segments = tuple(replacement if s.id == segment_id else s for s in shaft.params.segments)
        self._items[shaft_id] = shaft.with_params(segments=segments)
        self._notify()
        return True

    def remove_shaft_segment(self, shaft_id: str, segment_id: str) -> bool:
        """Remove a segment. A shaft always keeps at least one segment.

        Returns:
            True if removed, False if the shaft is missing or it is the last segment
        """
        shaft = self._get_shaft(shaft_id)
        if shaft is None:
            return False
        segments = shaft.params.segments
        if shaft.params.get_segment(segment_id) is None:
            raise ValueError(f"Shaft {shaft_id} has no segment '{segment_id}'")
        if len(segments) <= 1:
            self._logger.debug(f"Refusing to remove last segment of shaft {shaft_id}")
            return False
        self._items[shaft_id] = shaft.with_params(
            segments=tuple(s for s in segments if s.id != segment_id)
        )
        self._notify()
        return True
