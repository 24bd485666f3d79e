"""Normalized pointer event fed to the gesture state machine."""
from dataclasses import dataclass, field

# Event kinds
POINTER_DOWN = 'down'
POINTER_MOVE = 'move'
POINTER_UP = 'up'
POINTER_LEAVE = 'leave'


@dataclass
class PointerEvent:
    """Mouse or touch event in client (widget pixel) coordinates.

    For touch input, touches holds the (x, y) client positions of the active
    touch points; only the first one is ever used.
    """
    kind: str
    client_x: float = 0.0
    client_y: float = 0.0
    touches: tuple = field(default_factory=tuple)

    @property
    def is_touch(self):
        return len(self.touches) > 0
