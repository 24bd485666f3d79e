# PyQt5 imports
from PyQt5.QtWidgets import QFrame, QVBoxLayout, QGroupBox, QCheckBox

from pfp_editor.utils.ui_utils import NumberSliderWidget
from pfp_editor.models.transform import clamp
from pfp_editor.constants import (
	SLIDER_ADORNMENT_SCALE_MIN, SLIDER_ADORNMENT_SCALE_MAX,
	SLIDER_ROTATION_MIN, SLIDER_ROTATION_MAX,
	OVERLAY_SIZE_MIN, OVERLAY_SIZE_MAX, OVERLAY_OPACITY_MIN, OVERLAY_OPACITY_MAX,
)


class PropertySidebar(QFrame):
	"""Right sidebar with numeric hat and frame controls"""

	def __init__(self, state, parent=None):
		super().__init__(parent)
		self.state = state
		self.setMinimumWidth(250)
		self.setMaximumWidth(400)
		self._setup_ui()

		self.state.add_listener(self.refresh)
		self.refresh()

	def _setup_ui(self):
		layout = QVBoxLayout(self)

		# Hat controls
		self.hat_group = QGroupBox("Hat")
		hat_layout = QVBoxLayout(self.hat_group)
		self.hat_size_slider = NumberSliderWidget(
			"Size", 100, SLIDER_ADORNMENT_SCALE_MIN, SLIDER_ADORNMENT_SCALE_MAX, suffix="%")
		self.hat_rotation_slider = NumberSliderWidget(
			"Rotation", 0, SLIDER_ROTATION_MIN, SLIDER_ROTATION_MAX, suffix="°")
		hat_layout.addWidget(self.hat_size_slider)
		hat_layout.addWidget(self.hat_rotation_slider)
		layout.addWidget(self.hat_group)

		# Frame controls
		self.frame_group = QGroupBox("Frame")
		frame_layout = QVBoxLayout(self.frame_group)
		self.frame_size_slider = NumberSliderWidget(
			"Size", 100, OVERLAY_SIZE_MIN, OVERLAY_SIZE_MAX, suffix="%")
		self.frame_opacity_slider = NumberSliderWidget(
			"Opacity", 80, OVERLAY_OPACITY_MIN, OVERLAY_OPACITY_MAX, suffix="%")
		self.frame_rotation_slider = NumberSliderWidget(
			"Rotation", 0, SLIDER_ROTATION_MIN, SLIDER_ROTATION_MAX, suffix="°")
		self.animate_checkbox = QCheckBox("Animated Rotation")
		frame_layout.addWidget(self.frame_size_slider)
		frame_layout.addWidget(self.frame_opacity_slider)
		frame_layout.addWidget(self.frame_rotation_slider)
		frame_layout.addWidget(self.animate_checkbox)
		layout.addWidget(self.frame_group)

		layout.addStretch()

		# Writes go straight to the state
		self.hat_size_slider.valueChanged.connect(
			lambda v: self.state.update_adornment(scale=v / 100.0))
		self.hat_rotation_slider.valueChanged.connect(
			lambda v: self.state.update_adornment(rotation=float(v)))
		self.frame_size_slider.valueChanged.connect(
			lambda v: self.state.update_overlay(size_percent=v))
		self.frame_opacity_slider.valueChanged.connect(
			lambda v: self.state.update_overlay(opacity_percent=v))
		self.frame_rotation_slider.valueChanged.connect(
			lambda v: self.state.update_overlay(rotation=float(v)))
		self.animate_checkbox.toggled.connect(
			lambda checked: self.state.update_overlay(animating=checked))

	def refresh(self):
		"""Sync control values and group visibility from the state.

		Gesture edits land here too, so the hat sliders follow drags on the canvas.
		"""
		self.hat_group.setVisible(self.state.has_adornment)
		self.frame_group.setVisible(self.state.overlay_image is not None)

		transform = self.state.adornment_transform
		self.hat_size_slider.setValue(clamp(
			transform.scale * 100, SLIDER_ADORNMENT_SCALE_MIN, SLIDER_ADORNMENT_SCALE_MAX))
		self.hat_rotation_slider.setValue(transform.rotation % 360)

		settings = self.state.overlay_settings
		self.frame_size_slider.setValue(settings.size_percent)
		self.frame_opacity_slider.setValue(settings.opacity_percent)
		self.frame_rotation_slider.setValue(settings.rotation % 360)
		if self.animate_checkbox.isChecked() != settings.animating:
			self.animate_checkbox.blockSignals(True)
			self.animate_checkbox.setChecked(settings.animating)
			self.animate_checkbox.blockSignals(False)
