"""Layout canvas widget: plan view of the gearbox items.

Event translation lives in CanvasZoomPanMixin, drawing in
CanvasRenderingMixin. All state changes go through the CanvasController.
"""
import logging

from PyQt5.QtWidgets import QWidget, QSizePolicy
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QPainter

from models.layout import Layout
from components.canvas_widgets.canvas_controller import CanvasController
from components.canvas_widgets.canvas_rendering_mixin import CanvasRenderingMixin
from components.canvas_widgets.canvas_zoom_pan_mixin import CanvasZoomPanMixin
from constants import COMPONENT_MIME_TYPE, DEFAULT_SHOW_GRID


class LayoutCanvas(CanvasRenderingMixin, CanvasZoomPanMixin, QWidget):
    """Interactive canvas for placing and dragging gearbox components"""

    viewChanged = pyqtSignal()
    selectionChanged = pyqtSignal(str)  # selected item id, '' when cleared

    def __init__(self, layout: Layout = None, parent=None):
        super().__init__(parent)
        self._logger = logging.getLogger('LayoutCanvas')

        self.controller = CanvasController(layout)
        self.controller.layout.add_listener(self.update)
        self.show_grid = DEFAULT_SHOW_GRID

        self.setMouseTracking(True)
        self.setAcceptDrops(True)
        self.setFocusPolicy(Qt.StrongFocus)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setMinimumSize(400, 300)

    @property
    def layout_model(self) -> Layout:
        return self.controller.layout

    def paintEvent(self, event):
        painter = QPainter(self)
        try:
            self._paint_canvas(painter)
        finally:
            painter.end()

    # ========================================
    # Palette drops
    # ========================================

    def dragEnterEvent(self, event):
        if event.mimeData().hasFormat(COMPONENT_MIME_TYPE):
            event.setDropAction(Qt.CopyAction)
            event.accept()
        else:
            event.ignore()

    def dragMoveEvent(self, event):
        if event.mimeData().hasFormat(COMPONENT_MIME_TYPE):
            event.setDropAction(Qt.CopyAction)
            event.accept()
        else:
            event.ignore()

    def dropEvent(self, event):
        if not event.mimeData().hasFormat(COMPONENT_MIME_TYPE):
            event.ignore()
            return
        component_type = bytes(event.mimeData().data(COMPONENT_MIME_TYPE)).decode('utf-8')
        pos = event.pos()
        item_id = self.controller.drop(component_type, pos.x(), pos.y())
        if item_id is None:
            event.ignore()
            return
        event.setDropAction(Qt.CopyAction)
        event.accept()
        self.selectionChanged.emit(item_id)

    # ========================================
    # Keyboard
    # ========================================

    def keyPressEvent(self, event):
        if event.key() in (Qt.Key_Delete, Qt.Key_Backspace) and self.controller.session.is_idle:
            if self.controller.delete_selected():
                self.selectionChanged.emit('')
            event.accept()
            return
        super().keyPressEvent(event)
