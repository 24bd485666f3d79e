"""Transform widget handle system - ABC-based handle architecture.

Each handle type is a class that knows:
- How to draw itself onto the composited canvas
- How to test if a canvas-space point hits it
- How a drag from a baseline transform maps to a new transform
"""

from abc import ABC, abstractmethod
from enum import Enum

from PyQt5.QtCore import Qt

from pfp_editor.constants import (
    ADORNMENT_BASE_SIZE, ADORNMENT_HIT_RADIUS,
    CONTROL_BUTTON_RADIUS, CONTROL_VISUAL_RADIUS_FACTOR,
    CONTROL_BUTTON_GAP, CONTROL_BUTTON_MIN_OFFSET,
    CONTROL_OUTLINE_COLOR, CONTROL_OUTLINE_WIDTH,
    CONTROL_COLOR_MOVE, CONTROL_COLOR_RESIZE, CONTROL_COLOR_ROTATE,
    RESIZE_SCALE_PER_UNIT,
)
from pfp_editor.models.transform import Vec2
from pfp_editor.utils.geometry import distance, angle_degrees


class ControlMode(Enum):
    """What a drag does to the hat."""
    MOVE = 'move'
    RESIZE = 'resize'
    ROTATE = 'rotate'


def control_offset(transform):
    """Distance (per axis) from the hat center to the control buttons.

    Grows with the drawn hat size, with a floor so the buttons never sit on
    top of a small hat.
    """
    visual_radius = ADORNMENT_BASE_SIZE * transform.scale * CONTROL_VISUAL_RADIUS_FACTOR
    return max(visual_radius + CONTROL_BUTTON_GAP, CONTROL_BUTTON_MIN_OFFSET)


class Handle(ABC):
    """Abstract base class for hat handles."""

    mode = None

    @abstractmethod
    def hit_test(self, point, transform) -> bool:
        """Test if a canvas-space point hits this handle.

        Args:
            point: Vec2 in canvas space
            transform: Current AdornmentTransform

        Returns:
            bool: True if the point hits this handle
        """
        pass

    def draw(self, draw, transform):
        """Draw this handle with a PIL ImageDraw. Invisible by default."""
        pass

    @abstractmethod
    def drag(self, point, start_point, baseline):
        """Map a drag to the transform fields this handle owns.

        Always computed from the baseline captured at press time, so repeated
        moves never compound error.

        Args:
            point: Current pointer position in canvas space
            start_point: Pointer position at press time
            baseline: AdornmentTransform snapshot taken at press time

        Returns:
            dict: New values for this handle's fields only (e.g. offset_x and
            offset_y for a move); other fields are left to concurrent writers
        """
        pass

    @abstractmethod
    def get_cursor(self):
        """Qt cursor shape to show while hovering this handle."""
        pass


class ControlButtonHandle(Handle):
    """Filled circular button placed around the hat."""

    color = None

    def __init__(self, radius=CONTROL_BUTTON_RADIUS):
        self.radius = radius

    @abstractmethod
    def get_canvas_pos(self, transform):
        """Button center in canvas space."""
        pass

    def hit_test(self, point, transform):
        return distance(point, self.get_canvas_pos(transform)) <= self.radius

    def draw(self, draw, transform):
        pos = self.get_canvas_pos(transform)
        r = self.radius
        draw.ellipse(
            [pos.x - r, pos.y - r, pos.x + r, pos.y + r],
            fill=self.color,
            outline=CONTROL_OUTLINE_COLOR,
            width=CONTROL_OUTLINE_WIDTH,
        )


class MoveHandle(ControlButtonHandle):
    """Blue button, top-left diagonal. Translates the hat."""

    mode = ControlMode.MOVE
    color = CONTROL_COLOR_MOVE

    def get_canvas_pos(self, transform):
        center = transform.center
        offset = control_offset(transform)
        return Vec2(center.x - offset, center.y - offset)

    def drag(self, point, start_point, baseline):
        delta = point - start_point
        # No bounds clamp - the hat may be dragged off-canvas
        return {'offset_x': baseline.offset_x + delta.x,
                'offset_y': baseline.offset_y + delta.y}

    def get_cursor(self):
        return Qt.SizeAllCursor


class ResizeHandle(ControlButtonHandle):
    """Amber button, top-right diagonal. Grows the hat with drag distance."""

    mode = ControlMode.RESIZE
    color = CONTROL_COLOR_RESIZE

    def get_canvas_pos(self, transform):
        center = transform.center
        offset = control_offset(transform)
        return Vec2(center.x + offset, center.y - offset)

    def drag(self, point, start_point, baseline):
        # Only the magnitude of the displacement matters, not its direction
        travelled = distance(start_point, point)
        return {'scale': baseline.scale + travelled * RESIZE_SCALE_PER_UNIT}

    def get_cursor(self):
        return Qt.SizeFDiagCursor


class RotateHandle(ControlButtonHandle):
    """Green button, bottom-center. Rotates the hat."""

    mode = ControlMode.ROTATE
    color = CONTROL_COLOR_ROTATE

    def get_canvas_pos(self, transform):
        center = transform.center
        return Vec2(center.x, center.y + control_offset(transform))

    def drag(self, point, start_point, baseline):
        # Absolute angle of the drag vector, added to the baseline rotation
        delta = point - start_point
        return {'rotation': baseline.rotation + angle_degrees(delta.x, delta.y)}

    def get_cursor(self):
        return Qt.CrossCursor


class BodyHandle(MoveHandle):
    """Circular grab region over the hat itself - behaves like the move button.

    The region is a circle regardless of the hat image's real silhouette.
    """

    def __init__(self, hit_radius=ADORNMENT_HIT_RADIUS):
        super().__init__()
        self.hit_radius = hit_radius

    def get_canvas_pos(self, transform):
        return transform.center

    def hit_test(self, point, transform):
        return distance(point, transform.center) <= self.hit_radius * transform.scale

    def draw(self, draw, transform):
        # The hat image itself is the visual
        pass
