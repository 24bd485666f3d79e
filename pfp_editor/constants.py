"""
P33L PFP Editor - Constants and Configuration

This module contains all constant values used throughout the application:
- Canvas coordinate space
- Adornment (hat) defaults, clamps and hit geometry
- Control button layout and colors
- Decorative overlay (frame) defaults and clamps
- Gesture factors
- Asset names and export settings
"""

# ======================================================================
# CANVAS COORDINATE SPACE
# ======================================================================

# Fixed logical canvas, independent of on-screen size
# X-axis: 0 = left edge, 400 = right edge
# Y-axis: 0 = TOP edge, 400 = BOTTOM edge (Y-down, like Qt)
CANVAS_SIZE = 400
CANVAS_CENTER = CANVAS_SIZE / 2

# Background fill drawn before the base image
CANVAS_BACKGROUND_COLOR = (240, 240, 240, 255)  # #f0f0f0

# ======================================================================
# ADORNMENT (HAT)
# ======================================================================

# Drawn size of the hat at scale 1.0 (square, canvas units)
ADORNMENT_BASE_SIZE = 120

# Circular grab region radius at scale 1.0
ADORNMENT_HIT_RADIUS = 60

# Scale limits, clamped on every write
ADORNMENT_SCALE_MIN = 0.3
ADORNMENT_SCALE_MAX = 10.0

# Defaults for a fresh transform
DEFAULT_ADORNMENT_SCALE = 1.0
DEFAULT_ADORNMENT_ROTATION = 0.0
DEFAULT_ADORNMENT_OFFSET_X = 0.0
DEFAULT_ADORNMENT_OFFSET_Y = -20.0

# ======================================================================
# CONTROL BUTTONS (MOVE / RESIZE / ROTATE)
# ======================================================================

CONTROL_BUTTON_RADIUS = 15

# Buttons sit on the diagonals around the hat:
#   offset = max(hat_size * VISUAL_RADIUS_FACTOR + GAP, MIN_OFFSET)
CONTROL_VISUAL_RADIUS_FACTOR = 0.6
CONTROL_BUTTON_GAP = 25
CONTROL_BUTTON_MIN_OFFSET = 37

CONTROL_OUTLINE_COLOR = (255, 255, 255, 255)
CONTROL_OUTLINE_WIDTH = 2

CONTROL_COLOR_MOVE = '#3b82f6'    # blue
CONTROL_COLOR_RESIZE = '#f59e0b'  # amber
CONTROL_COLOR_ROTATE = '#10b981'  # green

# ======================================================================
# GESTURES
# ======================================================================

# Scale gained per canvas unit of pointer displacement (resize button)
RESIZE_SCALE_PER_UNIT = 0.01

# ======================================================================
# DECORATIVE OVERLAY (FRAME)
# ======================================================================

OVERLAY_SIZE_MIN = 50
OVERLAY_SIZE_MAX = 150
OVERLAY_OPACITY_MIN = 10
OVERLAY_OPACITY_MAX = 100

DEFAULT_OVERLAY_SIZE = 100
DEFAULT_OVERLAY_OPACITY = 80
DEFAULT_OVERLAY_ROTATION = 0.0

# Animated rotation speed: radians per millisecond of wall-clock time
OVERLAY_ANIMATION_RADIANS_PER_MS = 0.002

# Redraw interval while the overlay is animating (~60 fps)
ANIMATION_FRAME_INTERVAL_MS = 16

# ======================================================================
# ASSETS
# ======================================================================

ADORNMENT_KEYS = ['hat1', 'hat2', 'hat3', 'hat4']
OVERLAY_KEYS = ['frame1', 'frame2']
ASSET_FILE_EXTENSION = '.png'

# First frame is selected on startup
DEFAULT_OVERLAY_KEY = OVERLAY_KEYS[0]

# Environment override for the assets directory
ASSETS_DIR_ENV_VAR = 'P33L_ASSETS_DIR'

# ======================================================================
# EXPORT
# ======================================================================

EXPORT_FILENAME = 'p33l_pfp.png'
EXPORT_FORMAT = 'PNG'

# ======================================================================
# UI CONSTRAINTS
# ======================================================================

# Hat size slider works in percent of scale
SLIDER_ADORNMENT_SCALE_MIN = 30
SLIDER_ADORNMENT_SCALE_MAX = 300
SLIDER_ROTATION_MIN = 0
SLIDER_ROTATION_MAX = 360

# Picker thumbnails
ASSET_THUMBNAIL_SIZE = 64

# Minimum on-screen preview size (pixels)
CANVAS_WIDGET_MIN_SIZE = 300

# ======================================================================
# USER CONFIG
# ======================================================================

CONFIG_DIR_NAME = '.p33l_pfp'
CONFIG_FILE_NAME = 'config.json'
