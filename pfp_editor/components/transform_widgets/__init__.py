"""
P33L PFP Editor - Hat Control Components

This package contains the direct-manipulation architecture for the hat:
- handles.py: ABC-based handle classes (MoveHandle, ResizeHandle, RotateHandle, BodyHandle)
- modes.py: ControlLayout defining the handle set and hit-testing order
- drag_context.py: GestureSession drag state
- gesture.py: GestureStateMachine turning pointer events into transform updates
"""

from .handles import (
    ControlMode, Handle, ControlButtonHandle,
    MoveHandle, ResizeHandle, RotateHandle, BodyHandle, control_offset
)
from .modes import ControlLayout, is_inside_adornment, hit_control_affordance, control_centers
from .drag_context import GestureSession
from .gesture import GestureStateMachine

__all__ = [
    'ControlMode', 'Handle', 'ControlButtonHandle',
    'MoveHandle', 'ResizeHandle', 'RotateHandle', 'BodyHandle', 'control_offset',
    'ControlLayout', 'is_inside_adornment', 'hit_control_affordance', 'control_centers',
    'GestureSession', 'GestureStateMachine',
]
