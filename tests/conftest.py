"""
Shared fixtures for P33L PFP Editor tests.

Provides synthetic Pillow images, a ready EditorState and an on-disk asset
directory with every hat and frame.
"""
import sys
import os
import pytest

# Widgets are created without a display
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

# Ensure the repo root is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from PIL import Image

from pfp_editor.constants import ADORNMENT_KEYS, OVERLAY_KEYS, ASSET_FILE_EXTENSION
from pfp_editor.models.editor_state import EditorState


# ── Synthetic images ───────────────────────────────────────────────────

BASE_COLOR = (200, 30, 30, 255)
HAT_COLOR = (20, 20, 20, 255)
FRAME_COLOR = (250, 200, 0, 255)


def make_solid(size, color):
    return Image.new('RGBA', size, color)


def make_ring(size, color, thickness=20):
    """Square image, transparent except for an opaque border ring."""
    img = Image.new('RGBA', (size, size), color)
    img.paste((0, 0, 0, 0), (thickness, thickness, size - thickness, size - thickness))
    return img


@pytest.fixture
def base_image():
    """Opaque, non-square portrait so the stretch to 400x400 is visible."""
    img = Image.new('RGBA', (300, 200), BASE_COLOR)
    img.paste((30, 30, 200, 255), (0, 0, 150, 200))
    return img


@pytest.fixture
def hat_image():
    return make_solid((120, 120), HAT_COLOR)


@pytest.fixture
def frame_image():
    return make_ring(200, FRAME_COLOR)


@pytest.fixture
def asset_images(hat_image, frame_image):
    adornments = {key: hat_image for key in ADORNMENT_KEYS}
    overlays = {key: frame_image for key in OVERLAY_KEYS}
    return adornments, overlays


# ── Editor state ───────────────────────────────────────────────────────

@pytest.fixture
def state():
    return EditorState()


@pytest.fixture
def ready_state(state, asset_images, base_image):
    """Assets installed, base image loaded, no hat and the default frame selected."""
    adornments, overlays = asset_images
    state.install_assets(adornments, overlays)
    state.set_base_image(base_image)
    return state


@pytest.fixture
def hat_state(ready_state):
    """Ready state with hat1 selected and the frame turned off."""
    ready_state.select_overlay(None)
    ready_state.select_adornment('hat1')
    return ready_state


# ── On-disk assets ─────────────────────────────────────────────────────

@pytest.fixture
def assets_dir(tmp_path, hat_image, frame_image):
    """Directory holding hat1.png ... hat4.png, frame1.png, frame2.png"""
    directory = tmp_path / "assets"
    directory.mkdir()
    for key in ADORNMENT_KEYS:
        hat_image.save(directory / f"{key}{ASSET_FILE_EXTENSION}")
    for key in OVERLAY_KEYS:
        frame_image.save(directory / f"{key}{ASSET_FILE_EXTENSION}")
    return directory
