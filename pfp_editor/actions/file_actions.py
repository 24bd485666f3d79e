"""File operations for the main window - open picture, export PNG"""
import os
import logging

from PyQt5.QtWidgets import QFileDialog, QMessageBox

from pfp_editor.services.file_operations import default_export_path, ensure_png_extension

logger = logging.getLogger(__name__)

IMAGE_FILE_FILTER = "Images (*.png *.jpg *.jpeg *.gif *.bmp *.webp);;All Files (*)"
PNG_FILE_FILTER = "PNG Files (*.png);;All Files (*)"


class FileActions:
	"""Handles the open and export buttons"""

	def __init__(self, main_window):
		"""Initialize with reference to main window

		Args:
			main_window: The PfpEditor main window instance
		"""
		self.main_window = main_window

	@property
	def canvas(self):
		return self.main_window.canvas_widget

	def open_image(self):
		"""Pick a base picture from disk"""
		filename, _ = QFileDialog.getOpenFileName(
			self.main_window,
			"Open Picture",
			self.main_window.last_open_dir or "",
			IMAGE_FILE_FILTER
		)
		if not filename:
			return False
		return self.open_image_file(filename)

	def open_image_file(self, filename):
		"""Load a picture into the editor, reporting failures in the status bar"""
		if not self.canvas.load_picture(filename):
			self.main_window.status_left.setText(f"Could not open {os.path.basename(filename)}")
			return False

		self.main_window.last_open_dir = os.path.dirname(filename)
		self.main_window._save_config()
		return True

	def export_png(self):
		"""Export the composited picture as PNG"""
		filename, _ = QFileDialog.getSaveFileName(
			self.main_window,
			"Export as PNG",
			default_export_path(self.main_window.last_export_dir),
			PNG_FILE_FILTER
		)
		if not filename:
			return None
		return self.export_to_file(filename)

	def export_to_file(self, filename):
		"""Write the last rendered frame to filename (.png appended if missing)"""
		filename = ensure_png_extension(filename)
		try:
			written = self.canvas.export_to_png(filename)
		except ValueError as e:
			QMessageBox.warning(self.main_window, "Export Failed", str(e))
			return None
		except OSError as e:
			logger.exception("Export to %s failed", filename)
			QMessageBox.critical(
				self.main_window,
				"Export Error",
				f"Failed to export PNG: {str(e)}"
			)
			return None

		self.main_window.last_export_dir = os.path.dirname(written)
		self.main_window._save_config()
		self.main_window.status_left.setText(f"Exported to {os.path.basename(written)}")
		return written
