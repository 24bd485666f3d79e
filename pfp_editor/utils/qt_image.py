"""Conversion from PIL images to Qt images for on-screen display."""
import numpy as np
from PyQt5.QtGui import QImage, QPixmap


def pil_to_qimage(image):
    """Convert a PIL image to a QImage that owns its pixel data.

    Args:
        image: PIL.Image (any mode; converted to RGBA)

    Returns:
        QImage in Format_RGBA8888
    """
    pixel_array = np.ascontiguousarray(np.asarray(image.convert('RGBA'), dtype=np.uint8))
    height, width, _ = pixel_array.shape
    qimage = QImage(pixel_array.data, width, height, width * 4, QImage.Format_RGBA8888)
    # Detach from the numpy buffer before it goes out of scope
    return qimage.copy()


def pil_to_qpixmap(image):
    return QPixmap.fromImage(pil_to_qimage(image))
