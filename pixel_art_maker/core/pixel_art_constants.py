#!/usr/bin/env python3
"""
Constants for the Pixel Art Maker
Centralizes all magic numbers and configuration values
"""

# ============================================================================
# GRID CONSTANTS
# ============================================================================

# Default grid dimensions
DEFAULT_GRID_WIDTH = 16
DEFAULT_GRID_HEIGHT = 16
MAX_GRID_DIMENSION = 512  # Per side
MAX_GRID_CELLS = 65536  # 256x256 worth of cells

# Size of one grid cell on screen and in exported images
DEFAULT_PIXEL_SIZE = 20
MIN_PIXEL_SCALE = 1
MAX_PIXEL_SCALE = 128

# ============================================================================
# COLOR CONSTANTS
# ============================================================================

RGBA_CHANNELS = 4
OPAQUE_ALPHA = 255

COLOR_WHITE = (255, 255, 255, 255)

DEFAULT_CANVAS_COLOR = COLOR_WHITE

# Default brush colors, the canvas color is appended as the eraser
DEFAULT_PALETTE = [
    (0, 0, 0, 255),  # Black
    (255, 255, 255, 255),  # White
    (231, 76, 60, 255),  # Red
    (230, 126, 34, 255),  # Orange
    (241, 196, 15, 255),  # Yellow
    (46, 204, 113, 255),  # Green
    (26, 188, 156, 255),  # Teal
    (52, 152, 219, 255),  # Blue
    (155, 89, 182, 255),  # Purple
    (236, 112, 160, 255),  # Pink
    (121, 85, 72, 255),  # Brown
    (149, 165, 166, 255),  # Gray
]

# ============================================================================
# THEME CONSTANTS
# ============================================================================

THEME_MAIN_COLOR = (52, 73, 94, 255)
THEME_ACCENT_COLOR = (236, 240, 241, 255)
THEME_BUTTON_TEXT_COLOR = (44, 62, 80, 255)

# ============================================================================
# LAYOUT METRICS
# ============================================================================

METRICS_REGULAR = 10  # Spacing between composed views
PALETTE_COLUMNS = 2
PALETTE_CELL_SIZE = 32
PALETTE_WIDGET_PADDING = 5
PALETTE_SELECTION_BORDER_WIDTH = 3
CONTROL_BUTTON_WIDTH = 80
CONTROL_BUTTON_HEIGHT = 32

# ============================================================================
# HISTORY / FILES
# ============================================================================

DEFAULT_MAX_EDITS = None  # Unbounded history
DEFAULT_SAVE_FILENAME = "pixel_art.png"
SETTINGS_APP_NAME = "pixel_art_maker"
SETTINGS_FILENAME = "settings.json"

# Status bar timeouts (ms)
STATUS_TIMEOUT_SHORT = 1000
STATUS_TIMEOUT_LONG = 3000
