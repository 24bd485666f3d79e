"""Control layout - the hat's handle set and hit-testing order."""

from .handles import MoveHandle, ResizeHandle, RotateHandle, BodyHandle
from pfp_editor.constants import CONTROL_BUTTON_RADIUS, ADORNMENT_HIT_RADIUS


class ControlLayout:
	"""Move/Resize/Rotate buttons around the hat plus the hat body.

	Buttons are drawn on top of the hat, so they are hit-tested first.
	"""

	def __init__(self, button_radius=CONTROL_BUTTON_RADIUS, body_radius=ADORNMENT_HIT_RADIUS):
		self.handles = {
			'move': MoveHandle(button_radius),
			'resize': ResizeHandle(button_radius),
			'rotate': RotateHandle(button_radius),
			'body': BodyHandle(body_radius),
		}

	def get_control_handles(self):
		"""Button handles in drawing and hit-testing order."""
		return [self.handles['move'], self.handles['resize'], self.handles['rotate']]

	def hit_control(self, point, transform):
		"""First button whose circle contains point, or None."""
		for handle in self.get_control_handles():
			if handle.hit_test(point, transform):
				return handle
		return None

	def get_handle_at_pos(self, point, transform):
		"""Find which handle (if any) is at a canvas-space point.

		Returns:
			Handle object or None
		"""
		# Check order: move -> resize -> rotate -> body
		handle = self.hit_control(point, transform)
		if handle is not None:
			return handle
		if self.handles['body'].hit_test(point, transform):
			return self.handles['body']
		return None

	def control_centers(self, transform):
		"""Canvas-space centers of the buttons, keyed by ControlMode."""
		return {handle.mode: handle.get_canvas_pos(transform) for handle in self.get_control_handles()}


_default_layout = ControlLayout()


def is_inside_adornment(point, transform):
	"""True iff point lies within the hat's circular grab region."""
	return _default_layout.handles['body'].hit_test(point, transform)


def hit_control_affordance(point, transform):
	"""ControlMode of the button under point, or None."""
	handle = _default_layout.hit_control(point, transform)
	return handle.mode if handle is not None else None


def control_centers(transform):
	return _default_layout.control_centers(transform)
