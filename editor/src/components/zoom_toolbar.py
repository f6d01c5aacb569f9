"""Zoom toolbar widget with zoom, view reset and snapping controls."""

from PyQt5.QtWidgets import QWidget, QHBoxLayout, QToolButton, QLabel
from PyQt5.QtCore import pyqtSignal, Qt


class ZoomToolbar(QWidget):
	"""Toolbar with zoom in/out buttons, zoom readout, reset, snap and grid toggles"""

	zoom_in_requested = pyqtSignal()
	zoom_out_requested = pyqtSignal()
	reset_requested = pyqtSignal()
	snap_toggled = pyqtSignal(bool)
	grid_toggled = pyqtSignal(bool)

	def __init__(self, parent=None):
		super().__init__(parent)

		layout = QHBoxLayout()
		layout.setContentsMargins(0, 0, 0, 0)
		layout.setSpacing(4)

		# Zoom out button
		self.zoom_out_btn = QToolButton()
		self.zoom_out_btn.setText("−")
		self.zoom_out_btn.setToolTip("Zoom Out")
		self.zoom_out_btn.clicked.connect(lambda: self.zoom_out_requested.emit())
		layout.addWidget(self.zoom_out_btn)

		# Zoom percentage readout
		self.zoom_label = QLabel("100%")
		self.zoom_label.setMinimumWidth(50)
		self.zoom_label.setAlignment(Qt.AlignCenter)
		layout.addWidget(self.zoom_label)

		# Zoom in button
		self.zoom_in_btn = QToolButton()
		self.zoom_in_btn.setText("+")
		self.zoom_in_btn.setToolTip("Zoom In")
		self.zoom_in_btn.clicked.connect(lambda: self.zoom_in_requested.emit())
		layout.addWidget(self.zoom_in_btn)

		# Reset view
		self.reset_btn = QToolButton()
		self.reset_btn.setText("⟲")
		self.reset_btn.setToolTip("Reset View")
		self.reset_btn.clicked.connect(lambda: self.reset_requested.emit())
		layout.addWidget(self.reset_btn)

		# Snapping on/off
		self.snap_btn = QToolButton()
		self.snap_btn.setText("Snap")
		self.snap_btn.setToolTip("Toggle automatic snapping")
		self.snap_btn.setCheckable(True)
		self.snap_btn.setChecked(True)
		self.snap_btn.toggled.connect(self.snap_toggled)
		layout.addWidget(self.snap_btn)

		# Grid on/off
		self.grid_btn = QToolButton()
		self.grid_btn.setText("Grid")
		self.grid_btn.setToolTip("Toggle grid")
		self.grid_btn.setCheckable(True)
		self.grid_btn.setChecked(True)
		self.grid_btn.toggled.connect(self.grid_toggled)
		layout.addWidget(self.grid_btn)

		layout.addStretch()
		self.setLayout(layout)

	def set_zoom_percent(self, percent):
		"""Update the zoom readout"""
		self.zoom_label.setText(f"{percent}%")

	def get_zoom_percent(self):
		"""Get the zoom percentage currently shown"""
		return int(self.zoom_label.text().rstrip('%'))

	def set_snap_checked(self, checked):
		"""Set snap toggle state without emitting snap_toggled"""
		self.snap_btn.blockSignals(True)
		self.snap_btn.setChecked(checked)
		self.snap_btn.blockSignals(False)

	def set_grid_checked(self, checked):
		"""Set grid toggle state without emitting grid_toggled"""
		self.grid_btn.blockSignals(True)
		self.grid_btn.setChecked(checked)
		self.grid_btn.blockSignals(False)
