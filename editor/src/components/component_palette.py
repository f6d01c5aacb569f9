"""Component palette: a list of part types that can be dragged onto the canvas."""

from PyQt5.QtWidgets import QListWidget, QListWidgetItem, QAbstractItemView
from PyQt5.QtCore import Qt, QMimeData, QByteArray
from PyQt5.QtGui import QDrag, QFont

from models.component import ComponentType
from constants import COMPONENT_MIME_TYPE


# (section title, [(type, label), ...]) in display order
PALETTE_SECTIONS = [
	("Rotating", [
		(ComponentType.SPUR, "Spur Gear"),
		(ComponentType.HELICAL, "Helical Gear"),
		(ComponentType.BEVEL, "Bevel Gear"),
		(ComponentType.WORM, "Worm"),
		(ComponentType.SHAFT, "Stepped Shaft"),
	]),
	("Support", [
		(ComponentType.BEARING, "Bearing"),
		(ComponentType.HOUSING, "Housing"),
	]),
	("Hardware", [
		(ComponentType.COUPLING, "Coupling"),
		(ComponentType.SPACER, "Spacer"),
		(ComponentType.CIRCLIP, "Circlip"),
	]),
]

TYPE_ROLE = Qt.UserRole


class ComponentPalette(QListWidget):
	"""Drag source listing every component type, grouped by section"""

	def __init__(self, parent=None):
		super().__init__(parent)
		self.setDragEnabled(True)
		self.setDragDropMode(QAbstractItemView.DragOnly)
		self.setSelectionMode(QAbstractItemView.SingleSelection)
		self.setMinimumWidth(180)
		self.setMaximumWidth(240)
		self._populate()

	def _populate(self):
		header_font = QFont()
		header_font.setBold(True)
		for title, entries in PALETTE_SECTIONS:
			header = QListWidgetItem(title.upper())
			header.setFlags(Qt.NoItemFlags)
			header.setFont(header_font)
			self.addItem(header)
			for component_type, label in entries:
				entry = QListWidgetItem(label)
				entry.setData(TYPE_ROLE, component_type.value)
				entry.setFlags(Qt.ItemIsEnabled | Qt.ItemIsSelectable | Qt.ItemIsDragEnabled)
				self.addItem(entry)

	def component_types(self):
		"""Component type values in display order"""
		types = []
		for row in range(self.count()):
			value = self.item(row).data(TYPE_ROLE)
			if value:
				types.append(value)
		return types

	def mime_data_for(self, component_type):
		"""Build the drag payload for a component type"""
		mime_data = QMimeData()
		mime_data.setData(COMPONENT_MIME_TYPE, QByteArray(ComponentType(component_type).value.encode('utf-8')))
		return mime_data

	def startDrag(self, supported_actions):
		"""Start a copy drag carrying the selected component type"""
		item = self.currentItem()
		if item is None or not item.data(TYPE_ROLE):
			return
		drag = QDrag(self)
		drag.setMimeData(self.mime_data_for(item.data(TYPE_ROLE)))
		drag.exec_(Qt.CopyAction)
