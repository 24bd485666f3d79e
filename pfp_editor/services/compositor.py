"""Compositing renderer.

Draws the 400x400 canvas on the CPU with Pillow. render_composite is a pure
function of its inputs; calling it twice with the same inputs (and a static
frame rotation) yields pixel-identical images.

Layering order (back to front):
1. Solid #f0f0f0 fill
2. Base image stretched to 400x400
3. Frame - centered, rotated, sized to size% of the canvas, faded to opacity%
4. Hat - centered at (200+offset_x, 200+offset_y), rotated, 120*scale square
5. Move/Resize/Rotate buttons (only while a hat is selected)
"""

import logging
import time

from PIL import Image, ImageDraw

from pfp_editor.components.transform_widgets.modes import ControlLayout
from pfp_editor.constants import (
    CANVAS_SIZE, CANVAS_CENTER, CANVAS_BACKGROUND_COLOR, ADORNMENT_BASE_SIZE,
)

logger = logging.getLogger(__name__)

# Resampling used for every resize/rotate so renders stay deterministic
BASE_RESAMPLE = Image.Resampling.BILINEAR
LAYER_RESAMPLE = Image.Resampling.BICUBIC

_control_layout = ControlLayout()


def wall_clock_ms():
    """Current wall-clock time in milliseconds (drives the frame animation)."""
    return time.time() * 1000.0


def _new_canvas():
    return Image.new('RGBA', (CANVAS_SIZE, CANVAS_SIZE), CANVAS_BACKGROUND_COLOR)


def _apply_opacity(image, opacity):
    """Scale an RGBA image's alpha channel by opacity (0-1)."""
    if opacity >= 1.0:
        return image
    alpha = image.getchannel('A').point(lambda a: int(round(a * opacity)))
    faded = image.copy()
    faded.putalpha(alpha)
    return faded


def _paste_centered(canvas, layer, center_x, center_y):
    """Alpha-composite layer onto canvas with its center at (center_x, center_y).

    Layers may hang off any edge of the canvas; the overhang is clipped.
    """
    left = int(round(center_x - layer.width / 2))
    top = int(round(center_y - layer.height / 2))
    sheet = Image.new('RGBA', canvas.size, (0, 0, 0, 0))
    # Plain paste onto a clear sheet keeps the layer's alpha as-is
    sheet.paste(layer, (left, top))
    return Image.alpha_composite(canvas, sheet)


def _transform_layer(image, size, rotation):
    """Resize image to a size x size square and rotate it clockwise by rotation degrees."""
    side = max(1, int(round(size)))
    layer = image.convert('RGBA').resize((side, side), LAYER_RESAMPLE)
    if rotation % 360 != 0:
        # Canvas rotation is clockwise (Y-down); PIL rotates counter-clockwise
        layer = layer.rotate(-rotation, resample=LAYER_RESAMPLE, expand=True)
    return layer


def draw_base(canvas, base_image):
    """Stage 2: base image stretched to fill the canvas."""
    base = base_image.convert('RGBA').resize((CANVAS_SIZE, CANVAS_SIZE), BASE_RESAMPLE)
    return Image.alpha_composite(canvas, base)


def draw_overlay(canvas, overlay_image, settings, now_ms):
    """Stage 3: decorative frame."""
    size = settings.size_percent / 100 * CANVAS_SIZE
    layer = _transform_layer(overlay_image, size, settings.effective_rotation(now_ms))
    layer = _apply_opacity(layer, settings.opacity_percent / 100)
    return _paste_centered(canvas, layer, CANVAS_CENTER, CANVAS_CENTER)


def draw_adornment(canvas, adornment_image, transform):
    """Stage 4: the hat."""
    layer = _transform_layer(adornment_image, ADORNMENT_BASE_SIZE * transform.scale, transform.rotation)
    center = transform.center
    return _paste_centered(canvas, layer, center.x, center.y)


def draw_controls(canvas, transform, layout=None):
    """Stage 5: Move/Resize/Rotate buttons, drawn in place."""
    layout = layout or _control_layout
    draw = ImageDraw.Draw(canvas)
    for handle in layout.get_control_handles():
        handle.draw(draw, transform)
    return canvas


def render_composite(base_image, overlay_image=None, overlay_settings=None,
                     adornment_image=None, adornment_transform=None,
                     show_controls=True, now_ms=0.0):
    """Composite one frame.

    Args:
        base_image: PIL.Image of the user's picture
        overlay_image: PIL.Image of the selected frame, or None to skip
        overlay_settings: OverlaySettings for the frame
        adornment_image: PIL.Image of the selected hat, or None to skip
        adornment_transform: AdornmentTransform for the hat
        show_controls: Draw the control buttons when a hat is drawn
        now_ms: Wall-clock time in ms, used only while the frame animates

    Returns:
        PIL.Image: RGBA CANVAS_SIZE x CANVAS_SIZE
    """
    canvas = _new_canvas()
    canvas = draw_base(canvas, base_image)

    if overlay_image is not None and overlay_settings is not None:
        canvas = draw_overlay(canvas, overlay_image, overlay_settings, now_ms)

    if adornment_image is not None and adornment_transform is not None:
        canvas = draw_adornment(canvas, adornment_image, adornment_transform)
        if show_controls:
            canvas = draw_controls(canvas, adornment_transform)

    return canvas


def render_state(state, now_ms=None, show_controls=True):
    """Render an EditorState.

    Returns:
        PIL.Image, or None while assets are not ready or no base image is loaded
    """
    if not state.can_render:
        return None
    if now_ms is None:
        now_ms = wall_clock_ms()
    return render_composite(
        state.base_image,
        overlay_image=state.overlay_image,
        overlay_settings=state.overlay_settings,
        adornment_image=state.adornment_image,
        adornment_transform=state.adornment_transform,
        show_controls=show_controls,
        now_ms=now_ms,
    )
