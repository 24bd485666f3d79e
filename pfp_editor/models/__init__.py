"""
P33L PFP Editor - Data Models

This module contains the data model classes for the editor.
This is the MODEL in MVC architecture.
"""

from .transform import Vec2, Rect, AdornmentTransform, OverlaySettings, clamp
from .editor_state import EditorState

__all__ = ['Vec2', 'Rect', 'AdornmentTransform', 'OverlaySettings', 'clamp', 'EditorState']
