"""
Gearbox Layout Editor - Data Models

This is the MODEL in MVC architecture. Nothing in here imports Qt.

Public API:
- Item, ComponentType and the params records: models.component
- Viewport: pan/zoom state and world/device conversion
- Vec2, quantize: models.transform
- Layout (the item store) lives in models.layout; it depends on
  services.linked_movement, which itself imports models.component, so it is
  not re-exported here.
"""

from .transform import Vec2, quantize
from .component import ComponentType, Item, create_item
from .viewport import Viewport

__all__ = ['Vec2', 'quantize', 'ComponentType', 'Item', 'create_item', 'Viewport']
