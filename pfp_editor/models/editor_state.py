"""
P33L PFP Editor - Editor State

Single source of truth for everything the compositor draws:
- Decoded base image and the loaded hat/frame asset sets
- Selection (which hat, which frame)
- Hat transform and frame settings

Numeric controls and the gesture state machine both write through the
mutators below; every mutation notifies listeners so the canvas can redraw.
"""

import logging

from pfp_editor.constants import DEFAULT_OVERLAY_KEY
from pfp_editor.models.transform import AdornmentTransform, OverlaySettings

logger = logging.getLogger(__name__)


class EditorState:
    """Application state shared by the canvas, the sidebars and the renderer."""

    def __init__(self):
        # Decoded images (PIL.Image)
        self.base_image = None
        self.adornment_images = {}
        self.overlay_images = {}
        self.assets_ready = False

        # Selection
        self.selected_adornment = None
        self.selected_overlay = DEFAULT_OVERLAY_KEY

        # Transform data - survives deselection of the hat
        self.adornment_transform = AdornmentTransform()
        self.overlay_settings = OverlaySettings()

        self._listeners = []  # Callbacks to notify on state changes

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def add_listener(self, callback):
        """Register a zero-argument callback fired after every change."""
        if callback not in self._listeners:
            self._listeners.append(callback)

    def remove_listener(self, callback):
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify_listeners(self):
        for callback in list(self._listeners):
            callback()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def can_render(self):
        """True once every asset is decoded and a base image is loaded."""
        return self.assets_ready and self.base_image is not None

    @property
    def adornment_image(self):
        if not self.assets_ready or self.selected_adornment is None:
            return None
        return self.adornment_images.get(self.selected_adornment)

    @property
    def overlay_image(self):
        if not self.assets_ready or self.selected_overlay is None:
            return None
        return self.overlay_images.get(self.selected_overlay)

    @property
    def has_adornment(self):
        return self.adornment_image is not None

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def install_assets(self, adornment_images, overlay_images):
        """Install a fully decoded asset set and flip the ready flag.

        Args:
            adornment_images: Dict mapping hat key -> PIL.Image
            overlay_images: Dict mapping frame key -> PIL.Image
        """
        self.adornment_images = dict(adornment_images)
        self.overlay_images = dict(overlay_images)
        self.assets_ready = True
        logger.info("Assets ready: %d hats, %d frames",
                    len(self.adornment_images), len(self.overlay_images))
        self._notify_listeners()

    def mark_assets_failed(self):
        """Drop any asset set; the editor stays not-ready."""
        self.adornment_images = {}
        self.overlay_images = {}
        self.assets_ready = False
        self._notify_listeners()

    def set_base_image(self, image):
        self.base_image = image
        self._notify_listeners()

    def select_adornment(self, key):
        """Select a hat by key, or None for no hat. The transform is kept."""
        self.selected_adornment = key
        self._notify_listeners()

    def select_overlay(self, key):
        """Select a frame by key, or None for no frame."""
        self.selected_overlay = key
        self._notify_listeners()

    def set_adornment_transform(self, transform):
        self.adornment_transform = transform.copy()
        self._notify_listeners()

    def update_adornment(self, **changes):
        """Out-of-band write of hat transform fields (scale, rotation, offset_x, offset_y)."""
        self.adornment_transform = self.adornment_transform.with_changes(**changes)
        self._notify_listeners()

    def update_overlay(self, **changes):
        """Out-of-band write of frame settings (size_percent, opacity_percent, rotation, animating)."""
        self.overlay_settings = self.overlay_settings.with_changes(**changes)
        self._notify_listeners()
