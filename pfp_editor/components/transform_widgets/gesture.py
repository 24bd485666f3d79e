"""Gesture state machine for direct manipulation of the hat.

States:
    IDLE                 - no drag in progress
    DRAGGING(mode)       - a GestureSession is active

Transitions:
    IDLE --down on button-->  DRAGGING(button mode)
    IDLE --down on hat body-> DRAGGING(MOVE)
    DRAGGING --move-->        DRAGGING (dragged fields rewritten from baseline + delta)
    DRAGGING --up/leave-->    IDLE (the change is kept)
"""

import logging

from .drag_context import GestureSession
from .modes import ControlLayout
from pfp_editor.models.pointer_event import POINTER_DOWN, POINTER_MOVE, POINTER_UP, POINTER_LEAVE
from pfp_editor.utils.geometry import to_canvas_space

logger = logging.getLogger(__name__)


class GestureStateMachine:
	"""Turns press-drag-release sequences into hat transform updates.

	The only writer of the hat transform besides the numeric controls.
	"""

	def __init__(self, state, layout=None):
		"""
		Args:
			state: EditorState to read the hat transform from and write it to
			layout: ControlLayout used for hit-testing (default layout if None)
		"""
		self.state = state
		self.layout = layout if layout is not None else ControlLayout()
		self.session = None

	@property
	def is_dragging(self):
		return self.session is not None

	@property
	def mode(self):
		"""ControlMode of the active drag, or None when idle."""
		return self.session.mode if self.session is not None else None

	def hover_handle(self, point):
		"""Handle under point (for cursor feedback), or None."""
		if not self.state.has_adornment:
			return None
		return self.layout.get_handle_at_pos(point, self.state.adornment_transform)

	def pointer_down(self, point):
		"""Classify a press and start a drag if it landed on the hat or a button.

		Args:
			point: Vec2 in canvas space

		Returns:
			bool: True if a drag session was started
		"""
		# A new press always replaces a stale session
		self.session = None

		handle = self.hover_handle(point)
		if handle is None:
			return False

		self.session = GestureSession(
			handle=handle,
			start_pos=point,
			baseline=self.state.adornment_transform.copy(),
		)
		logger.debug("Drag started: %s at (%.1f, %.1f)", handle.mode.value, point.x, point.y)
		return True

	def pointer_move(self, point):
		"""Apply the active drag for the current pointer position.

		Returns:
			bool: True if the hat transform was updated
		"""
		if self.session is None:
			return False

		changes = self.session.handle.drag(point, self.session.start_pos, self.session.baseline)
		# Only the dragged fields are written; numeric edits to the others survive
		self.state.update_adornment(**changes)
		return True

	def pointer_up(self):
		"""End the drag. State was written live, nothing to commit."""
		if self.session is not None:
			logger.debug("Drag ended: %s", self.session.mode.value)
		self.session = None

	def pointer_leave(self):
		"""Pointer left the canvas - same as release, the change is kept."""
		self.pointer_up()

	def cancel(self):
		"""Drop any session without touching state (e.g. hat deselected)."""
		self.session = None

	def handle_event(self, event, bbox):
		"""Dispatch a normalized PointerEvent.

		Args:
			event: PointerEvent in client coordinates
			bbox: Rect of the displayed canvas in client coordinates

		Returns:
			bool: True if the event was consumed by a drag
		"""
		if event.kind == POINTER_DOWN:
			return self.pointer_down(to_canvas_space(event, bbox))
		if event.kind == POINTER_MOVE:
			return self.pointer_move(to_canvas_space(event, bbox))
		if event.kind == POINTER_UP:
			was_dragging = self.is_dragging
			self.pointer_up()
			return was_dragging
		if event.kind == POINTER_LEAVE:
			was_dragging = self.is_dragging
			self.pointer_leave()
			return was_dragging
		return False
