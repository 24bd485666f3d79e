"""
Canvas Widget - Live preview of the composited profile picture

Provides:
- Rendering of the editor state through the compositor on every change
- Mouse and single-touch input normalized into PointerEvents for the
  gesture state machine
- Drag-and-drop of the base picture
- A repeating redraw timer while the frame animates
"""

import logging

from PyQt5.QtWidgets import QWidget, QSizePolicy
from PyQt5.QtCore import Qt, QTimer, QRectF, QEvent, pyqtSignal
from PyQt5.QtGui import QPainter, QColor

from pfp_editor.components.transform_widgets import GestureStateMachine
from pfp_editor.constants import CANVAS_SIZE, CANVAS_WIDGET_MIN_SIZE, ANIMATION_FRAME_INTERVAL_MS
from pfp_editor.models.pointer_event import (
	PointerEvent, POINTER_DOWN, POINTER_MOVE, POINTER_UP, POINTER_LEAVE
)
from pfp_editor.models.transform import Rect
from pfp_editor.services.compositor import render_state, wall_clock_ms
from pfp_editor.services.file_operations import load_base_image, export_png
from pfp_editor.utils.geometry import to_canvas_space
from pfp_editor.utils.qt_image import pil_to_qpixmap

logger = logging.getLogger(__name__)


class CanvasWidget(QWidget):
	"""Interactive 400x400 canvas scaled to fit the widget"""

	# Signals
	frameRendered = pyqtSignal()  # Emitted after every successful render
	baseImageLoaded = pyqtSignal(str)  # Path of an accepted picture

	def __init__(self, state, parent=None, clock=None):
		"""
		Args:
			state: EditorState to render and manipulate
			parent: Parent widget
			clock: Callable returning wall-clock ms (injectable for tests)
		"""
		super().__init__(parent)
		self.state = state
		self.gesture = GestureStateMachine(state)
		self.clock = clock or wall_clock_ms

		# Last composited frame (PIL.Image) - what export writes
		self.last_frame = None
		self._pixmap = None

		self.setMinimumSize(CANVAS_WIDGET_MIN_SIZE, CANVAS_WIDGET_MIN_SIZE)
		self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
		self.setMouseTracking(True)
		self.setAcceptDrops(True)
		self.setAttribute(Qt.WA_AcceptTouchEvents, True)

		# Redraw loop while the frame animates; each tick re-checks the flag
		self.animation_timer = QTimer(self)
		self.animation_timer.setInterval(ANIMATION_FRAME_INTERVAL_MS)
		self.animation_timer.timeout.connect(self._on_animation_tick)

		self.state.add_listener(self._on_state_changed)
		self._on_state_changed()

	# ------------------------------------------------------------------
	# Rendering
	# ------------------------------------------------------------------

	def render_frame(self):
		"""Composite the current state. Skipped until assets and picture are ready.

		Returns:
			PIL.Image or None
		"""
		frame = render_state(self.state, now_ms=self.clock())
		if frame is None:
			self.last_frame = None
			self._pixmap = None
			self.update()
			return None

		self.last_frame = frame
		self._pixmap = pil_to_qpixmap(frame)
		self.update()
		self.frameRendered.emit()
		return frame

	def _on_state_changed(self):
		"""Any state write: drop stale drags, redraw, start/stop animation."""
		if not self.state.has_adornment:
			self.gesture.cancel()
		self.render_frame()
		self._sync_animation()

	def _should_animate(self):
		return (self.state.overlay_settings.animating
		        and self.state.overlay_image is not None
		        and self.state.can_render)

	def _sync_animation(self):
		if self._should_animate():
			if not self.animation_timer.isActive():
				self.animation_timer.start()
		elif self.animation_timer.isActive():
			self.animation_timer.stop()

	def _on_animation_tick(self):
		# Flag cleared since the last tick - stop issuing redraws
		if not self._should_animate():
			self.animation_timer.stop()
			return
		self.render_frame()

	@property
	def is_animating(self):
		return self.animation_timer.isActive()

	def shutdown(self):
		"""Stop the redraw loop and detach from the state (teardown)."""
		self.animation_timer.stop()
		self.gesture.cancel()
		self.state.remove_listener(self._on_state_changed)

	def closeEvent(self, event):
		self.shutdown()
		super().closeEvent(event)

	# ------------------------------------------------------------------
	# Geometry
	# ------------------------------------------------------------------

	def canvas_rect(self):
		"""Square area (widget pixels) the 400x400 canvas is drawn into."""
		size = min(self.width(), self.height())
		left = (self.width() - size) / 2
		top = (self.height() - size) / 2
		return QRectF(left, top, size, size)

	def bounding_box(self):
		rect = self.canvas_rect()
		return Rect(rect.left(), rect.top(), rect.width(), rect.height())

	# ------------------------------------------------------------------
	# Painting
	# ------------------------------------------------------------------

	def paintEvent(self, event):
		painter = QPainter(self)
		painter.setRenderHint(QPainter.SmoothPixmapTransform)
		rect = self.canvas_rect()

		if self._pixmap is None:
			painter.fillRect(rect, QColor(240, 240, 240))
			painter.setPen(QColor(120, 120, 120))
			if not self.state.assets_ready:
				message = "Loading assets..."
			else:
				message = "Drag & drop or open a picture to start\n(recommended: 400x400)"
			painter.drawText(rect, Qt.AlignCenter, message)
		else:
			painter.drawPixmap(rect, self._pixmap, QRectF(0, 0, CANVAS_SIZE, CANVAS_SIZE))
		painter.end()

	# ------------------------------------------------------------------
	# Pointer input
	# ------------------------------------------------------------------

	def _dispatch(self, kind, x=0.0, y=0.0, touches=()):
		event = PointerEvent(kind, x, y, tuple(touches))
		return self.gesture.handle_event(event, self.bounding_box())

	def _update_cursor(self, x, y):
		point = to_canvas_space(PointerEvent(POINTER_MOVE, x, y), self.bounding_box())
		handle = self.gesture.hover_handle(point)
		self.setCursor(handle.get_cursor() if handle is not None else Qt.ArrowCursor)

	def mousePressEvent(self, event):
		if event.button() == Qt.LeftButton:
			if self._dispatch(POINTER_DOWN, event.pos().x(), event.pos().y()):
				event.accept()
				return
		super().mousePressEvent(event)

	def mouseMoveEvent(self, event):
		if self.gesture.is_dragging:
			self._dispatch(POINTER_MOVE, event.pos().x(), event.pos().y())
			event.accept()
			return
		self._update_cursor(event.pos().x(), event.pos().y())
		super().mouseMoveEvent(event)

	def mouseReleaseEvent(self, event):
		if event.button() == Qt.LeftButton and self._dispatch(POINTER_UP):
			event.accept()
			return
		super().mouseReleaseEvent(event)

	def leaveEvent(self, event):
		self._dispatch(POINTER_LEAVE)
		self.setCursor(Qt.ArrowCursor)
		super().leaveEvent(event)

	def event(self, event):
		"""Route single-touch input (first touch point only) to the gesture machine."""
		event_type = event.type()
		if event_type in (QEvent.TouchBegin, QEvent.TouchUpdate, QEvent.TouchEnd, QEvent.TouchCancel):
			points = event.touchPoints()
			touches = [(p.pos().x(), p.pos().y()) for p in points[:1]]
			if event_type == QEvent.TouchBegin and touches:
				self._dispatch(POINTER_DOWN, touches=touches)
			elif event_type == QEvent.TouchUpdate and touches:
				self._dispatch(POINTER_MOVE, touches=touches)
			else:
				self._dispatch(POINTER_UP)
			event.accept()
			return True
		return super().event(event)

	# ------------------------------------------------------------------
	# Drag and drop of the base picture
	# ------------------------------------------------------------------

	def dragEnterEvent(self, event):
		if event.mimeData().hasUrls():
			event.acceptProposedAction()
		else:
			event.ignore()

	def dropEvent(self, event):
		urls = event.mimeData().urls()
		if not urls:
			event.ignore()
			return
		path = urls[0].toLocalFile()
		if self.load_picture(path):
			event.acceptProposedAction()
		else:
			event.ignore()

	def load_picture(self, path, mime_type=None):
		"""Decode and install a base picture. Non-images are silently ignored.

		Returns:
			bool: True if the picture was accepted
		"""
		image = load_base_image(path, mime_type)
		if image is None:
			return False
		self.state.set_base_image(image)
		self.baseImageLoaded.emit(path)
		return True

	# ------------------------------------------------------------------
	# Export
	# ------------------------------------------------------------------

	def export_to_png(self, filename):
		"""Write the last rendered frame to a PNG file.

		Returns:
			str: Path written

		Raises:
			ValueError: if nothing has been rendered yet
		"""
		return export_png(self.last_frame, filename)
