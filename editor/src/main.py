import sys
import os
import argparse
import logging

# Add editor/src to path so imports work when running directly
if __name__ == "__main__":
    current_dir = os.path.dirname(os.path.abspath(__file__))
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

# PyQt5 import/s
from PyQt5 import QtWidgets
from PyQt5.QtWidgets import QMainWindow, QWidget, QHBoxLayout, QVBoxLayout, QSplitter, QLabel
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QPalette, QColor, QKeySequence

# Component imports
from components.canvas_widget import LayoutCanvas
from components.component_palette import ComponentPalette
from components.zoom_toolbar import ZoomToolbar

from models.layout import Layout

# Utility imports
from utils.logger import set_main_window

# Mixin imports
from main_window.config_mixin import ConfigMixin


def configure_logging(verbose=False):
    """Console logging; warnings and errors only unless verbose"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


class GearboxEditor(ConfigMixin, QMainWindow):
    def __init__(self, layout=None, config_dir=None):
        super().__init__()
        self.setWindowTitle("Gearbox Studio")
        self.resize(1280, 720)
        self._logger = logging.getLogger('GearboxEditor')

        # Layout model (single source of truth for all item data)
        self.layout_model = layout if layout is not None else Layout()

        self._init_config_paths(config_dir)
        self._load_config()

        set_main_window(self)

        self.setup_ui()
        self._apply_config()

    # ============= UI Setup =============

    def setup_ui(self):
        self._create_menu_bar()

        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QHBoxLayout(central_widget)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        splitter = QSplitter(Qt.Horizontal)

        # Left: component palette
        self.component_palette = ComponentPalette(self)
        splitter.addWidget(self.component_palette)

        # Center: toolbar above canvas
        canvas_area = QWidget()
        canvas_layout = QVBoxLayout(canvas_area)
        canvas_layout.setContentsMargins(4, 4, 4, 4)
        canvas_layout.setSpacing(4)

        self.zoom_toolbar = ZoomToolbar(self)
        canvas_layout.addWidget(self.zoom_toolbar)

        self.canvas = LayoutCanvas(self.layout_model, self)
        canvas_layout.addWidget(self.canvas, 1)
        splitter.addWidget(canvas_area)

        splitter.setSizes([220, 1060])
        splitter.setCollapsible(0, False)
        splitter.setCollapsible(1, False)
        main_layout.addWidget(splitter)

        # Toolbar -> canvas
        self.zoom_toolbar.zoom_in_requested.connect(self.canvas.zoom_in)
        self.zoom_toolbar.zoom_out_requested.connect(self.canvas.zoom_out)
        self.zoom_toolbar.reset_requested.connect(self.canvas.zoom_reset)
        self.zoom_toolbar.snap_toggled.connect(self._on_snap_toggled)
        self.zoom_toolbar.grid_toggled.connect(self._on_grid_toggled)

        # Canvas -> toolbar / status bar
        self.canvas.viewChanged.connect(self._on_view_changed)
        self.canvas.selectionChanged.connect(lambda _item_id: self._update_status_bar())
        self.layout_model.add_listener(self._update_status_bar)

        self.status_left = QLabel("Ready")
        self.status_right = QLabel("")
        self.statusBar().addWidget(self.status_left, 1)
        self.statusBar().addPermanentWidget(self.status_right)

        self._update_status_bar()

    def _create_menu_bar(self):
        menubar = self.menuBar()

        edit_menu = menubar.addMenu("&Edit")
        self.delete_action = edit_menu.addAction("Delete Selected")
        self.delete_action.setShortcut(QKeySequence.Delete)
        self.delete_action.triggered.connect(self._delete_selected)
        clear_action = edit_menu.addAction("Clear Layout")
        clear_action.triggered.connect(self.layout_model.clear)

        view_menu = menubar.addMenu("&View")
        zoom_in_action = view_menu.addAction("Zoom In")
        zoom_in_action.setShortcut(QKeySequence.ZoomIn)
        zoom_in_action.triggered.connect(lambda: self.canvas.zoom_in())
        zoom_out_action = view_menu.addAction("Zoom Out")
        zoom_out_action.setShortcut(QKeySequence.ZoomOut)
        zoom_out_action.triggered.connect(lambda: self.canvas.zoom_out())
        reset_action = view_menu.addAction("Reset View")
        reset_action.setShortcut("Ctrl+0")
        reset_action.triggered.connect(lambda: self.canvas.zoom_reset())

    def _apply_config(self):
        """Push loaded preferences into canvas and toolbar"""
        self.canvas.set_snap_enabled(self.snap_enabled)
        self.canvas.set_show_grid(self.show_grid)
        self.zoom_toolbar.set_snap_checked(self.snap_enabled)
        self.zoom_toolbar.set_grid_checked(self.show_grid)

    # ============= Event Handlers =============

    def _on_snap_toggled(self, enabled):
        self.snap_enabled = bool(enabled)
        self.canvas.set_snap_enabled(self.snap_enabled)
        self._save_config()

    def _on_grid_toggled(self, show):
        self.show_grid = bool(show)
        self.canvas.set_show_grid(self.show_grid)
        self._save_config()

    def _on_view_changed(self):
        self.zoom_toolbar.set_zoom_percent(self.canvas.get_zoom_percent())

    def _delete_selected(self):
        if self.canvas.controller.delete_selected():
            self.canvas.selectionChanged.emit('')

    def _update_status_bar(self):
        """Update status bar with item count and selection"""
        if not hasattr(self, 'status_right'):
            return
        count = self.layout_model.count()
        selected = self.canvas.controller.selected_item
        if selected is not None:
            self.status_left.setText(f"Selected: {selected.type.value} at ({selected.x:g}, {selected.y:g})")
        else:
            self.status_left.setText("Ready")
        self.status_right.setText(f"Items: {count}")

    def closeEvent(self, event):
        """Save config before closing"""
        self._save_config()
        self.layout_model.remove_listener(self._update_status_bar)
        event.accept()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Gearbox Studio layout editor")
    parser.add_argument('--verbose', action='store_true', help="enable debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for the Gearbox Studio layout editor"""
    args = parse_args(argv)
    configure_logging(args.verbose)

    app = QtWidgets.QApplication(sys.argv[:1])
    app.setStyle("Fusion")

    light_palette = QPalette()
    light_palette.setColor(QPalette.Window, QColor(241, 245, 249))
    light_palette.setColor(QPalette.Base, QColor(255, 255, 255))
    light_palette.setColor(QPalette.Highlight, QColor(37, 99, 235))
    light_palette.setColor(QPalette.HighlightedText, Qt.white)
    app.setPalette(light_palette)

    window = GearboxEditor()
    window.show()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
