"""Asset sidebar - hat and frame pickers"""

# PyQt5 imports
from PyQt5.QtWidgets import QFrame, QVBoxLayout, QGridLayout, QLabel, QPushButton, QButtonGroup
from PyQt5.QtCore import QSize, pyqtSignal
from PyQt5.QtGui import QIcon

from pfp_editor.constants import ASSET_THUMBNAIL_SIZE, ADORNMENT_KEYS, OVERLAY_KEYS
from pfp_editor.utils.qt_image import pil_to_qpixmap

# Sentinel key for the "No Hat" / "No Frame" buttons
NONE_KEY = ''


class AssetPickerGroup(QFrame):
	"""Titled grid of exclusive picker buttons with a leading "none" option"""

	# Emits the picked key, or None for the "none" button
	picked = pyqtSignal(object)

	def __init__(self, title, none_label, parent=None):
		super().__init__(parent)
		self.none_label = none_label
		self.buttons = {}  # key -> QPushButton ('' for none)
		self.button_group = QButtonGroup(self)
		self.button_group.setExclusive(True)

		layout = QVBoxLayout(self)
		layout.setContentsMargins(0, 0, 0, 0)
		title_label = QLabel(title)
		title_label.setStyleSheet("font-weight: bold; padding: 4px 0;")
		layout.addWidget(title_label)

		self.grid = QGridLayout()
		self.grid.setSpacing(4)
		layout.addLayout(self.grid)

		self.set_images({})

	def set_images(self, images, ordered_keys=None):
		"""Rebuild buttons for a dict of key -> PIL.Image."""
		for button in self.buttons.values():
			self.button_group.removeButton(button)
			button.deleteLater()
		self.buttons = {}

		self._add_button(NONE_KEY, self.none_label, None)
		keys = ordered_keys if ordered_keys is not None else sorted(images)
		for key in keys:
			if key in images:
				self._add_button(key, "", images[key])

	def _add_button(self, key, text, image):
		button = QPushButton(text)
		button.setCheckable(True)
		button.setFixedSize(ASSET_THUMBNAIL_SIZE + 8, ASSET_THUMBNAIL_SIZE + 8)
		button.setToolTip(key or self.none_label)
		if image is not None:
			thumbnail = image.copy()
			thumbnail.thumbnail((ASSET_THUMBNAIL_SIZE, ASSET_THUMBNAIL_SIZE))
			button.setIcon(QIcon(pil_to_qpixmap(thumbnail)))
			button.setIconSize(QSize(ASSET_THUMBNAIL_SIZE, ASSET_THUMBNAIL_SIZE))
		button.clicked.connect(lambda checked, k=key: self.picked.emit(k or None))

		index = len(self.buttons)
		self.grid.addWidget(button, index // 3, index % 3)
		self.button_group.addButton(button)
		self.buttons[key] = button

	def set_checked(self, key):
		"""Reflect the current selection without emitting picked."""
		button = self.buttons.get(key or NONE_KEY)
		if button is not None and not button.isChecked():
			button.setChecked(True)


class AssetSidebar(QFrame):
	"""Left sidebar for choosing the hat and the frame"""

	def __init__(self, state, parent=None):
		super().__init__(parent)
		self.state = state
		self._assets_shown = None

		self.setMinimumWidth(240)
		self.setMaximumWidth(320)

		layout = QVBoxLayout(self)
		self.hat_picker = AssetPickerGroup("Choose Your Hat", "No Hat")
		self.frame_picker = AssetPickerGroup("Choose Your Frame", "No Frame")
		layout.addWidget(self.hat_picker)
		layout.addWidget(self.frame_picker)
		layout.addStretch()

		self.hat_picker.picked.connect(self.state.select_adornment)
		self.frame_picker.picked.connect(self.state.select_overlay)

		self.state.add_listener(self._on_state_changed)
		self._on_state_changed()

	def _on_state_changed(self):
		# Rebuild thumbnails only when the asset set itself changes
		if self._assets_shown is not self.state.adornment_images:
			self.hat_picker.set_images(self.state.adornment_images, ADORNMENT_KEYS)
			self.frame_picker.set_images(self.state.overlay_images, OVERLAY_KEYS)
			self._assets_shown = self.state.adornment_images

		self.hat_picker.set_checked(self.state.selected_adornment)
		self.frame_picker.set_checked(self.state.selected_overlay)
