"""Coordinate and measurement helpers for the canvas.

Coordinate spaces:
- Client: widget pixels of the on-screen preview (Y-down)
- Canvas: fixed 400x400 logical space used by hit-testing and rendering (Y-down)
"""
import math

from pfp_editor.constants import CANVAS_SIZE
from pfp_editor.models.transform import Vec2


def to_canvas_space(event, bbox):
	"""Convert a pointer event's client position to canvas coordinates.

	Args:
		event: PointerEvent (mouse, or touch - first touch point only)
		bbox: Rect of the displayed canvas in client pixels

	Returns:
		Vec2 in canvas space (0-400 on both axes inside the canvas)
	"""
	if event.touches:
		client_x, client_y = event.touches[0]
	else:
		client_x, client_y = event.client_x, event.client_y

	if bbox.width <= 0 or bbox.height <= 0:
		return Vec2(0.0, 0.0)

	x = (client_x - bbox.left) / bbox.width * CANVAS_SIZE
	y = (client_y - bbox.top) / bbox.height * CANVAS_SIZE
	return Vec2(x, y)


def distance(p1, p2):
	"""Euclidean distance between two Vec2 points."""
	return math.hypot(p2.x - p1.x, p2.y - p1.y)


def angle_degrees(dx, dy):
	"""Angle of (dx, dy) in degrees.

	Screen convention: Y grows downward, so positive angles turn clockwise
	on screen. 0 points right, 90 points down.
	"""
	return math.degrees(math.atan2(dy, dx))
