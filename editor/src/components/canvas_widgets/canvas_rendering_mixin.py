"""Canvas rendering mixin: QPainter drawing of the plan view.

Draws the grid, the items (as schematic outlines) and the snap guides. Items
are drawn in world units under a painter transform built from the viewport,
so outlines scale with zoom while pens stay one device pixel wide.
"""

import math

from PyQt5.QtCore import Qt, QRectF, QPointF
from PyQt5.QtGui import QPainter, QPen, QColor, QBrush

from models.component import ComponentType
from .item_geometry import footprint
from constants import (
    SNAP_GRID, GRID_MAJOR_EVERY,
    CANVAS_BACKGROUND, GRID_MINOR_COLOR, GRID_MAJOR_COLOR, AXIS_COLOR,
    ITEM_STROKE_COLOR, ITEM_SELECTED_STROKE_COLOR, HOUSING_STROKE_COLOR,
    SHAFT_CENTERLINE_COLOR, ALIGN_GUIDE_COLOR, MESH_GUIDE_COLOR,
    LINK_SPAN_MARGIN,
)

# Skip the minor grid when its lines would be closer than this (pixels)
MIN_GRID_SPACING_PX = 4


def _pen(color, width=1.0, style=Qt.SolidLine):
    pen = QPen(QColor(color))
    pen.setWidthF(width)
    pen.setStyle(style)
    pen.setCosmetic(True)
    return pen


class CanvasRenderingMixin:
    """Mixin providing paint routines for the layout canvas.

    Requires from the parent class:
    - self.controller (CanvasController)
    - self.show_grid (bool)
    - self.width(), self.height()
    """

    def _paint_canvas(self, painter):
        painter.setRenderHint(QPainter.Antialiasing)
        painter.fillRect(self.rect(), QColor(CANVAS_BACKGROUND))

        if self.show_grid:
            self._paint_grid(painter)

        selected_id = self.controller.selected_id
        for item in self.controller.render_items():
            self._paint_item(painter, item, item.id == selected_id)

        self._paint_guides(painter)

    # ========================================
    # Grid
    # ========================================

    def _paint_grid(self, painter):
        viewport = self.controller.viewport
        world_left = viewport.x
        world_top = viewport.y
        world_right = viewport.x + self.width() / viewport.zoom
        world_bottom = viewport.y + self.height() / viewport.zoom

        step = SNAP_GRID
        if step * viewport.zoom < MIN_GRID_SPACING_PX:
            step = SNAP_GRID * GRID_MAJOR_EVERY
        major = SNAP_GRID * GRID_MAJOR_EVERY

        minor_pen = _pen(GRID_MINOR_COLOR, 0.5)
        major_pen = _pen(GRID_MAJOR_COLOR, 1.0)

        x = math.floor(world_left / step) * step
        while x <= world_right:
            painter.setPen(major_pen if x % major == 0 else minor_pen)
            device_x = (x - viewport.x) * viewport.zoom
            painter.drawLine(QPointF(device_x, 0), QPointF(device_x, self.height()))
            x += step

        y = math.floor(world_top / step) * step
        while y <= world_bottom:
            painter.setPen(major_pen if y % major == 0 else minor_pen)
            device_y = (y - viewport.y) * viewport.zoom
            painter.drawLine(QPointF(0, device_y), QPointF(self.width(), device_y))
            y += step

        # World axes
        origin = viewport.to_device(0, 0)
        painter.setPen(_pen(AXIS_COLOR, 2.0))
        painter.drawLine(QPointF(0, origin.y), QPointF(self.width(), origin.y))
        painter.drawLine(QPointF(origin.x, 0), QPointF(origin.x, self.height()))

    # ========================================
    # Items
    # ========================================

    def _paint_item(self, painter, item, selected):
        viewport = self.controller.viewport
        device = viewport.to_device(item.x, item.y)

        painter.save()
        painter.translate(device.x, device.y)
        painter.scale(viewport.zoom, viewport.zoom)
        painter.rotate(item.rotation)

        stroke = ITEM_SELECTED_STROKE_COLOR if selected else ITEM_STROKE_COLOR
        stroke_width = 2.5 if selected else 1.5

        if item.type is ComponentType.SHAFT:
            self._paint_shaft(painter, item, stroke, stroke_width)
        elif item.type is ComponentType.HOUSING:
            color = ITEM_SELECTED_STROKE_COLOR if selected else HOUSING_STROKE_COLOR
            self._paint_housing(painter, item, color)
        else:
            self._paint_part(painter, item, stroke, stroke_width)

        painter.restore()

    def _paint_shaft(self, painter, item, stroke, stroke_width):
        total = item.params.total_length
        painter.setPen(_pen(stroke, stroke_width))
        painter.setBrush(QBrush(QColor(item.params.color)))
        x = -total / 2
        for segment in item.params.segments:
            painter.drawRect(QRectF(x, -segment.diameter / 2, segment.length, segment.diameter))
            x += segment.length

        painter.setPen(_pen(SHAFT_CENTERLINE_COLOR, 1.0, Qt.DashDotLine))
        painter.drawLine(QPointF(-total / 2 - LINK_SPAN_MARGIN, 0), QPointF(total / 2 + LINK_SPAN_MARGIN, 0))

    def _paint_housing(self, painter, item, color):
        width = item.params.width
        height = item.params.height
        painter.setPen(_pen(color, 2.0, Qt.DashLine))
        painter.setBrush(Qt.NoBrush)
        painter.drawRect(QRectF(-width / 2, -height / 2, width, height))
        painter.drawText(QPointF(-width / 2 + 10, -height / 2 + 20), "HOUSING BOUNDARY")

    def _paint_part(self, painter, item, stroke, stroke_width):
        # Rotation is already applied to the painter, so use the unrotated extent
        half = footprint(item.with_rotation(0))
        rect = QRectF(-half.x, -half.y, half.x * 2, half.y * 2)
        painter.setPen(_pen(stroke, stroke_width))
        painter.setBrush(QBrush(QColor(item.params.color)))
        painter.drawRect(rect)

        if item.is_gear:
            # Pitch line
            painter.setPen(_pen('#ffffff', 1.0, Qt.DashLine))
            painter.drawLine(QPointF(-half.x, 0), QPointF(half.x, 0))

    # ========================================
    # Guides
    # ========================================

    def _paint_guides(self, painter):
        guides = self.controller.guides
        viewport = self.controller.viewport

        if guides.alignment_y is not None:
            y = viewport.to_device(0, guides.alignment_y).y
            painter.setPen(_pen(ALIGN_GUIDE_COLOR, 1.0, Qt.DashLine))
            painter.drawLine(QPointF(0, y), QPointF(self.width(), y))

        if guides.mesh is not None:
            y = viewport.to_device(0, guides.mesh.y).y
            painter.setPen(_pen(MESH_GUIDE_COLOR, 1.5, Qt.DotLine))
            painter.drawLine(QPointF(0, y), QPointF(self.width(), y))
            painter.drawText(QPointF(20, y - 5), guides.mesh.label)
