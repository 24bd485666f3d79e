"""Asset loading for the hat and frame image sets.

All hats and all frames must decode before the editor is ready; the first
failure aborts the whole load and no partial set is ever installed.
Decoding runs on a QThread worker so the window stays responsive.
"""

import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError
from PyQt5.QtCore import QThread, pyqtSignal

from pfp_editor.constants import ADORNMENT_KEYS, OVERLAY_KEYS, ASSET_FILE_EXTENSION

logger = logging.getLogger(__name__)


class AssetLoadError(RuntimeError):
    """Raised when any required asset fails to load or decode."""

    def __init__(self, key, path, reason):
        self.key = key
        self.path = Path(path)
        super().__init__(f"Failed to load asset '{key}' from {path}: {reason}")


def asset_path(assets_dir, key):
    """Well-known path of an asset key (e.g. 'hat1' -> <assets_dir>/hat1.png)."""
    return Path(assets_dir) / f"{key}{ASSET_FILE_EXTENSION}"


def decode_image(path):
    """Open and fully decode an image file as RGBA.

    Raises:
        OSError / UnidentifiedImageError: if the file is missing or not an image
        DecompressionBombError: if the image exceeds Pillow's pixel limit
    """
    with Image.open(path) as img:
        img.load()
        return img.convert('RGBA')


def load_image_set(assets_dir, keys):
    """Decode every key in order.

    Returns:
        dict: key -> PIL.Image (RGBA)

    Raises:
        AssetLoadError: on the first asset that fails
    """
    images = {}
    for key in keys:
        path = asset_path(assets_dir, key)
        try:
            images[key] = decode_image(path)
        except (OSError, UnidentifiedImageError, Image.DecompressionBombError) as e:
            raise AssetLoadError(key, path, e) from e
        logger.debug("Loaded %s (%dx%d)", path.name, images[key].width, images[key].height)
    return images


def load_asset_set(assets_dir, adornment_keys=ADORNMENT_KEYS, overlay_keys=OVERLAY_KEYS):
    """Load every hat, then every frame - all or nothing.

    Args:
        assets_dir: Directory holding hat1.png ... frame2.png

    Returns:
        tuple: (adornment_images, overlay_images) dicts

    Raises:
        AssetLoadError: if any asset fails; nothing is returned in that case
    """
    adornments = load_image_set(assets_dir, adornment_keys)
    overlays = load_image_set(assets_dir, overlay_keys)
    logger.info("Loaded %d hats and %d frames from %s", len(adornments), len(overlays), assets_dir)
    return adornments, overlays


class AssetLoadWorker(QThread):
    """Worker thread that decodes the asset set off the UI thread."""

    loaded = pyqtSignal(bool, str)  # success, message

    def __init__(self, assets_dir, parent=None):
        super().__init__(parent)
        self.assets_dir = Path(assets_dir)
        self.adornment_images = {}
        self.overlay_images = {}
        self.error = None

    def run(self):
        try:
            self.adornment_images, self.overlay_images = load_asset_set(self.assets_dir)
        except AssetLoadError as e:
            logger.error("%s", e)
            self.error = e
            self.adornment_images = {}
            self.overlay_images = {}
            self.loaded.emit(False, str(e))
            return
        self.loaded.emit(True, f"Loaded assets from {self.assets_dir}")

    def install_into(self, state):
        """Hand the decoded set to the editor state (main thread only)."""
        if self.error is not None:
            state.mark_assets_failed()
            return False
        state.install_assets(self.adornment_images, self.overlay_images)
        return True
