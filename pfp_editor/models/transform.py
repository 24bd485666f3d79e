"""Transform data structures for the adornment, the overlay and canvas geometry."""
import math
from dataclasses import dataclass, replace

from pfp_editor.constants import (
    CANVAS_CENTER,
    ADORNMENT_SCALE_MIN, ADORNMENT_SCALE_MAX,
    DEFAULT_ADORNMENT_SCALE, DEFAULT_ADORNMENT_ROTATION,
    DEFAULT_ADORNMENT_OFFSET_X, DEFAULT_ADORNMENT_OFFSET_Y,
    OVERLAY_SIZE_MIN, OVERLAY_SIZE_MAX,
    OVERLAY_OPACITY_MIN, OVERLAY_OPACITY_MAX,
    DEFAULT_OVERLAY_SIZE, DEFAULT_OVERLAY_OPACITY, DEFAULT_OVERLAY_ROTATION,
    OVERLAY_ANIMATION_RADIANS_PER_MS,
)


def clamp(value, low, high):
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


@dataclass
class Vec2:
    """2D vector for coordinate pairs.

    Used for canvas-space points (0-400, Y-down) and pointer deltas.
    """
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = vec2"""
        return iter((self.x, self.y))

    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y)

    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)


@dataclass
class Rect:
    """Axis-aligned rectangle in client (widget) pixels."""
    left: float
    top: float
    width: float
    height: float


@dataclass
class AdornmentTransform:
    """Position, scale and rotation of the hat.

    offset_x/offset_y are relative to the canvas center. Scale is clamped to
    [ADORNMENT_SCALE_MIN, ADORNMENT_SCALE_MAX] on every write; rotation is
    left unbounded.
    """
    scale: float = DEFAULT_ADORNMENT_SCALE
    rotation: float = DEFAULT_ADORNMENT_ROTATION
    offset_x: float = DEFAULT_ADORNMENT_OFFSET_X
    offset_y: float = DEFAULT_ADORNMENT_OFFSET_Y

    def __setattr__(self, name, value):
        if name == 'scale':
            value = clamp(float(value), ADORNMENT_SCALE_MIN, ADORNMENT_SCALE_MAX)
        super().__setattr__(name, value)

    @property
    def center(self):
        """Hat center in canvas space."""
        return Vec2(CANVAS_CENTER + self.offset_x, CANVAS_CENTER + self.offset_y)

    def copy(self):
        return replace(self)

    def with_changes(self, **changes):
        """Return a new transform with the given fields replaced (scale clamped)."""
        return replace(self, **changes)


@dataclass
class OverlaySettings:
    """Size, opacity and rotation of the frame.

    When animating is set the drawn rotation follows wall-clock time instead
    of the static rotation value.
    """
    size_percent: int = DEFAULT_OVERLAY_SIZE
    opacity_percent: int = DEFAULT_OVERLAY_OPACITY
    rotation: float = DEFAULT_OVERLAY_ROTATION
    animating: bool = False

    def __setattr__(self, name, value):
        if name == 'size_percent':
            value = int(clamp(round(value), OVERLAY_SIZE_MIN, OVERLAY_SIZE_MAX))
        elif name == 'opacity_percent':
            value = int(clamp(round(value), OVERLAY_OPACITY_MIN, OVERLAY_OPACITY_MAX))
        elif name == 'animating':
            value = bool(value)
        super().__setattr__(name, value)

    def effective_rotation(self, now_ms):
        """Rotation in degrees to draw at wall-clock time now_ms."""
        if self.animating:
            return math.degrees(now_ms * OVERLAY_ANIMATION_RADIANS_PER_MS)
        return self.rotation

    def copy(self):
        return replace(self)

    def with_changes(self, **changes):
        return replace(self, **changes)
