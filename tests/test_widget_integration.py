"""
Widget integration tests (pytest-qt).

Covers:
- LayoutCanvas mouse/wheel event translation
- Palette drops via the canvas mime type
- ZoomToolbar signals and readout
- GearboxEditor wiring: toolbar -> canvas, status bar, config persistence
"""
import json

import pytest
from PyQt5.QtCore import Qt, QEvent, QPoint, QPointF, QMimeData, QByteArray
from PyQt5.QtGui import QWheelEvent, QDropEvent, QMouseEvent

from components.canvas_widget import LayoutCanvas
from components.component_palette import ComponentPalette
from components.zoom_toolbar import ZoomToolbar
from components.canvas_widgets.drag_session import DragState
from models.component import ComponentType
from models.transform import Vec2
from models.viewport import Viewport
from constants import COMPONENT_MIME_TYPE

from conftest import make_item, layout_of


def _canvas(qtbot, layout=None):
    canvas = LayoutCanvas(layout)
    canvas.controller.viewport = Viewport(0.0, 0.0, 1.0)
    canvas.resize(800, 600)
    qtbot.addWidget(canvas)
    canvas.show()
    return canvas


def _wheel(canvas, angle_y, modifiers=Qt.NoModifier):
    pos = QPointF(100, 100)
    event = QWheelEvent(pos, QPointF(canvas.mapToGlobal(pos.toPoint())), QPoint(0, 0), QPoint(0, angle_y),
                        Qt.NoButton, modifiers, Qt.NoScrollPhase, False)
    canvas.wheelEvent(event)


# ══════════════════════════════════════════════════════════════════════════
# Canvas
# ══════════════════════════════════════════════════════════════════════════

class TestLayoutCanvas:

    def test_item_drag_with_mouse(self, qtbot):
        canvas = _canvas(qtbot, layout_of(make_item('b', 'BEARING', 40, 0)))
        qtbot.mousePress(canvas, Qt.LeftButton, pos=QPoint(40, 0))
        assert canvas.controller.state is DragState.DRAGGING_ITEM
        canvas.mouseMoveEvent(QMouseEvent(QEvent.MouseMove, QPointF(101, 52), Qt.LeftButton, Qt.LeftButton, Qt.NoModifier))
        qtbot.mouseRelease(canvas, Qt.LeftButton, pos=QPoint(101, 52))
        assert canvas.controller.state is DragState.IDLE
        assert canvas.layout_model.get_item('b').pos == Vec2(100, 50)

    def test_press_on_empty_clears_selection(self, qtbot):
        canvas = _canvas(qtbot, layout_of(make_item('b', 'BEARING', 40, 0)))
        canvas.controller.select('b')
        with qtbot.waitSignal(canvas.selectionChanged) as blocker:
            qtbot.mousePress(canvas, Qt.LeftButton, pos=QPoint(400, 400))
        assert blocker.args == ['']
        assert canvas.controller.state is DragState.PANNING_VIEW

    def test_wheel_pans(self, qtbot):
        canvas = _canvas(qtbot)
        with qtbot.waitSignal(canvas.viewChanged):
            _wheel(canvas, -120)
        # One notch down scrolls 100px down
        assert canvas.controller.viewport.y == -100

    def test_ctrl_wheel_zooms(self, qtbot):
        canvas = _canvas(qtbot)
        _wheel(canvas, 120, Qt.ControlModifier)
        assert canvas.get_zoom_percent() == 120

    def test_drop_creates_item(self, qtbot):
        canvas = _canvas(qtbot)
        mime = QMimeData()
        mime.setData(COMPONENT_MIME_TYPE, QByteArray(b'SHAFT'))
        event = QDropEvent(QPointF(123, 87), Qt.CopyAction, mime, Qt.LeftButton, Qt.NoModifier)
        with qtbot.waitSignal(canvas.selectionChanged) as blocker:
            canvas.dropEvent(event)
        item = canvas.layout_model.get_item(blocker.args[0])
        assert item.type is ComponentType.SHAFT
        assert item.pos == Vec2(120, 90)

    def test_drop_unknown_type_ignored(self, qtbot):
        canvas = _canvas(qtbot)
        mime = QMimeData()
        mime.setData(COMPONENT_MIME_TYPE, QByteArray(b'FLYWHEEL'))
        event = QDropEvent(QPointF(0, 0), Qt.CopyAction, mime, Qt.LeftButton, Qt.NoModifier)
        canvas.dropEvent(event)
        assert canvas.layout_model.count() == 0

    def test_delete_key(self, qtbot):
        canvas = _canvas(qtbot, layout_of(make_item('b', 'BEARING', 40, 0)))
        canvas.controller.select('b')
        qtbot.keyClick(canvas, Qt.Key_Delete)
        assert canvas.layout_model.count() == 0

    def test_zoom_buttons(self, qtbot):
        canvas = _canvas(qtbot)
        canvas.zoom_in()
        assert canvas.get_zoom_percent() == 120
        canvas.zoom_reset()
        assert canvas.get_zoom_percent() == 100

    def test_paints_without_error(self, qtbot):
        layout = layout_of(make_item('h', 'HOUSING', 100, 100), make_item('g', 'SPUR', 100, 100))
        canvas = _canvas(qtbot, layout)
        canvas.controller.select('g')
        canvas.grab()


# ══════════════════════════════════════════════════════════════════════════
# Palette and toolbar
# ══════════════════════════════════════════════════════════════════════════

class TestPalette:

    def test_lists_every_type(self, qtbot):
        palette = ComponentPalette()
        qtbot.addWidget(palette)
        assert sorted(palette.component_types()) == sorted(t.value for t in ComponentType)

    def test_mime_payload(self, qtbot):
        palette = ComponentPalette()
        qtbot.addWidget(palette)
        mime = palette.mime_data_for('WORM')
        assert bytes(mime.data(COMPONENT_MIME_TYPE)) == b'WORM'


class TestZoomToolbar:

    def test_buttons_emit(self, qtbot):
        toolbar = ZoomToolbar()
        qtbot.addWidget(toolbar)
        with qtbot.waitSignal(toolbar.zoom_in_requested):
            toolbar.zoom_in_btn.click()
        with qtbot.waitSignal(toolbar.reset_requested):
            toolbar.reset_btn.click()

    def test_snap_toggle(self, qtbot):
        toolbar = ZoomToolbar()
        qtbot.addWidget(toolbar)
        with qtbot.waitSignal(toolbar.snap_toggled) as blocker:
            toolbar.snap_btn.click()
        assert blocker.args == [False]

    def test_set_checked_is_silent(self, qtbot):
        toolbar = ZoomToolbar()
        qtbot.addWidget(toolbar)
        with qtbot.assertNotEmitted(toolbar.grid_toggled):
            toolbar.set_grid_checked(False)
        assert not toolbar.grid_btn.isChecked()

    def test_zoom_readout(self, qtbot):
        toolbar = ZoomToolbar()
        qtbot.addWidget(toolbar)
        toolbar.set_zoom_percent(250)
        assert toolbar.get_zoom_percent() == 250


# ══════════════════════════════════════════════════════════════════════════
# Main window
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def editor(qtbot, tmp_path):
    from main import GearboxEditor
    window = GearboxEditor(config_dir=str(tmp_path))
    qtbot.addWidget(window)
    return window


class TestGearboxEditor:

    def test_toolbar_zoom_updates_readout(self, editor, qtbot):
        editor.zoom_toolbar.zoom_in_btn.click()
        assert editor.canvas.get_zoom_percent() == 120
        assert editor.zoom_toolbar.zoom_label.text() == "120%"

    def test_status_bar_counts_items(self, editor):
        editor.layout_model.add_item('SPUR', 0, 0)
        editor.layout_model.add_item('SHAFT', 0, 0)
        assert editor.status_right.text() == "Items: 2"

    def test_snap_toggle_persists(self, editor, qtbot, tmp_path):
        editor.zoom_toolbar.snap_btn.click()
        assert editor.canvas.controller.snap_enabled is False
        config = json.loads((tmp_path / 'config.json').read_text(encoding='utf-8'))
        assert config == {'snap_enabled': False, 'show_grid': True}

    def test_config_loaded_on_start(self, qtbot, tmp_path):
        from main import GearboxEditor
        (tmp_path / 'config.json').write_text(json.dumps({'snap_enabled': False, 'show_grid': False}))
        window = GearboxEditor(config_dir=str(tmp_path))
        qtbot.addWidget(window)
        assert window.canvas.controller.snap_enabled is False
        assert window.canvas.show_grid is False
        assert not window.zoom_toolbar.snap_btn.isChecked()

    def test_missing_keys_use_defaults(self, qtbot, tmp_path):
        from main import GearboxEditor
        (tmp_path / 'config.json').write_text('{}')
        window = GearboxEditor(config_dir=str(tmp_path))
        qtbot.addWidget(window)
        assert window.snap_enabled is True
        assert window.show_grid is True

    def test_parse_args_verbose(self):
        from main import parse_args
        assert parse_args(['--verbose']).verbose is True
        assert parse_args([]).verbose is False
