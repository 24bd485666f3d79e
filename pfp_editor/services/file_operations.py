"""
P33L PFP Editor - File Operations Service

This module handles file I/O for the editor:
- Validating and decoding the user's base picture
- Exporting the composited canvas as PNG

Separates file operations from UI logic.
"""

import logging
import mimetypes
import os
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from pfp_editor.constants import EXPORT_FILENAME, EXPORT_FORMAT

logger = logging.getLogger(__name__)


def guess_mime_type(filename):
    """MIME type guessed from the file name, or None."""
    mime_type, _ = mimetypes.guess_type(str(filename))
    return mime_type


def is_supported_image(filename, mime_type=None):
    """True if the upload's MIME type is an image/* type.

    Args:
        filename: Path or name of the uploaded file
        mime_type: MIME type reported by the source (drag-drop), if known
    """
    mime_type = mime_type or guess_mime_type(filename)
    return bool(mime_type) and mime_type.startswith('image/')


def load_base_image(filename, mime_type=None):
    """Decode the user's picture.

    Non-image uploads are silently rejected; decode failures are logged.

    Args:
        filename: Path to the picked or dropped file
        mime_type: Optional MIME type reported by the source

    Returns:
        PIL.Image (RGBA), or None if the file was rejected or failed to decode
    """
    if not is_supported_image(filename, mime_type):
        logger.debug("Ignoring non-image upload: %s", filename)
        return None

    try:
        with Image.open(filename) as img:
            img.load()
            image = img.convert('RGBA')
    except (OSError, UnidentifiedImageError, Image.DecompressionBombError) as e:
        logger.error("Failed to load image %s: %s", filename, e)
        return None

    logger.info("Loaded base image %s (%dx%d)", os.path.basename(str(filename)), image.width, image.height)
    return image


def default_export_path(directory=None):
    """Suggested export path: <directory>/p33l_pfp.png"""
    if directory:
        return str(Path(directory) / EXPORT_FILENAME)
    return EXPORT_FILENAME


def ensure_png_extension(filename):
    filename = str(filename)
    if not filename.lower().endswith('.png'):
        filename += '.png'
    return filename


def export_png(image, filename):
    """Write the composited canvas to a PNG file.

    Args:
        image: PIL.Image last drawn by the compositor
        filename: Destination path (.png appended if missing)

    Returns:
        str: Path actually written

    Raises:
        ValueError: if there is no rendered frame to export
        OSError: if the file cannot be written
    """
    if image is None:
        raise ValueError("Nothing to export - load a picture first")

    filename = ensure_png_extension(filename)
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)

    image.save(filename, EXPORT_FORMAT)
    logger.info("Exported %s", filename)
    return filename
