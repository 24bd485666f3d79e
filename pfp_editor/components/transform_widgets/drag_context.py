"""Gesture session dataclass for the hat controls.

Exists only between pointer-down and pointer-up/leave.
"""

from dataclasses import dataclass

from pfp_editor.models.transform import Vec2, AdornmentTransform


@dataclass
class GestureSession:
    """Drag state captured at press time.

    baseline is a copy of the hat transform when the drag started; every
    pointer move is computed from it and it is never mutated.
    """
    handle: object  # Handle that was grabbed
    start_pos: Vec2
    baseline: AdornmentTransform

    @property
    def mode(self):
        return self.handle.mode
