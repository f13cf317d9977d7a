#!/usr/bin/env python3
"""
Common utilities for the pixel art maker
Extracted to avoid duplication between modules
"""

# Standard library imports
import traceback
from datetime import datetime, timezone
from pathlib import Path, PosixPath, WindowsPath
from typing import Any, Optional, Union

from .pixel_art_constants import OPAQUE_ALPHA
from .pixel_art_exceptions import ValidationError

# RGBA color as stored in the grid
Color = tuple[int, int, int, int]

# ================================================================================
# Debug Configuration
# ================================================================================

DEBUG_MODE = True  # Set to False to disable debug logging


# ================================================================================
# Debug Logging Utilities
# ================================================================================


def debug_log(category: str, message: str, level: str = "INFO") -> None:
    """Enhanced debug logging with timestamps and categories

    Args:
        category: Category for the log message (e.g., "GRID", "HISTORY", "EXPORT")
        message: The log message to display
        level: Log level ("INFO", "WARNING", "ERROR", "DEBUG")
    """
    if not DEBUG_MODE:
        return

    timestamp = datetime.now(timezone.utc).strftime("%H:%M:%S.%f")[:-3]
    formatted_msg = f"[{timestamp}] [{category}] [{level}] {message}"

    # Color coding for different log levels
    if level == "ERROR":
        print(f"\033[91m{formatted_msg}\033[0m")  # Red
    elif level == "WARNING":
        print(f"\033[93m{formatted_msg}\033[0m")  # Yellow
    elif level == "DEBUG":
        print(f"\033[94m{formatted_msg}\033[0m")  # Blue
    else:
        print(formatted_msg)


def debug_color(color: Color) -> str:
    """Format color information for debugging

    Args:
        color: RGBA color tuple

    Returns:
        Formatted string with the tuple and its hex form
    """
    return f"RGBA{tuple(color)} ({color_to_hex(color)})"


def debug_exception(category: str, exception: Exception) -> None:
    """Log exceptions with full traceback

    Args:
        category: Category for the log message
        exception: The exception to log
    """
    debug_log(
        category, f"Exception: {type(exception).__name__}: {exception!s}", "ERROR"
    )
    if DEBUG_MODE:
        traceback.print_exc()


# ================================================================================
# Color Utilities
# ================================================================================


def to_rgba(color: Union[tuple, list, str]) -> Color:
    """Normalize a caller-supplied color to an RGBA tuple

    Accepts RGB or RGBA tuples/lists and "#rrggbb" / "#rrggbbaa" strings.
    Alpha defaults to fully opaque.

    Args:
        color: Color in any accepted form

    Returns:
        RGBA tuple of ints in 0-255

    Raises:
        ValidationError: If the color cannot be interpreted
    """
    if isinstance(color, str):
        return _hex_to_rgba(color)

    if not isinstance(color, (tuple, list)) or len(color) not in (3, 4):
        raise ValidationError(f"Expected an RGB or RGBA color, got {color!r}")

    channels = []
    for value in color:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValidationError(f"Color channel must be a number, got {value!r}")
        if not 0 <= value <= 255:
            raise ValidationError(f"Color channel out of range 0-255: {value!r}")
        channels.append(int(value))

    if len(channels) == 3:
        channels.append(OPAQUE_ALPHA)

    return (channels[0], channels[1], channels[2], channels[3])


def _hex_to_rgba(text: str) -> Color:
    digits = text.strip().lstrip("#")
    if len(digits) not in (6, 8):
        raise ValidationError(f"Expected #rrggbb or #rrggbbaa, got {text!r}")
    try:
        values = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
    except ValueError as e:
        raise ValidationError(f"Invalid hex color {text!r}") from e
    return to_rgba(values)


def color_to_hex(color: Color) -> str:
    """Format an RGBA color as "#rrggbbaa" (alpha omitted when opaque)"""
    r, g, b, a = color
    if a == OPAQUE_ALPHA:
        return f"#{r:02x}{g:02x}{b:02x}"
    return f"#{r:02x}{g:02x}{b:02x}{a:02x}"


def get_color_brightness(color: Color) -> float:
    """Calculate the perceived brightness of a color

    Args:
        color: RGB or RGBA color tuple

    Returns:
        Brightness value (0-255)
    """
    r, g, b = color[:3]
    return 0.299 * r + 0.587 * g + 0.114 * b


def should_use_white_text(color: Color) -> bool:
    """Determine if white text or borders read better on a given color"""
    return get_color_brightness(color) < 128


# ================================================================================
# JSON Serialization Utilities
# ================================================================================


def sanitize_for_json(obj: Any) -> Any:
    """Convert non-JSON-serializable objects to JSON-safe types.

    Args:
        obj: Object to sanitize

    Returns:
        JSON-safe version of the object
    """
    if isinstance(obj, (str, int, float, bool, type(None))):
        return obj
    if isinstance(obj, (Path, WindowsPath, PosixPath)):
        return str(obj)
    if isinstance(obj, bytes):
        return obj.decode("utf-8", errors="ignore")
    if isinstance(obj, dict):
        return {k: sanitize_for_json(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [sanitize_for_json(item) for item in obj]
    return str(obj)


def optional_path(value: Optional[Union[str, Path]]) -> Optional[Path]:
    """Expand a user path setting, keeping None and empty strings as None"""
    if not value:
        return None
    return Path(value).expanduser()


# ================================================================================
# Geometry Utilities
# ================================================================================


def get_line_points(x0: int, y0: int, x1: int, y1: int) -> list[tuple[int, int]]:
    """Get all points on a line using Bresenham's algorithm

    Both endpoints are included, starting at (x0, y0).
    """
    points = []

    dx = abs(x1 - x0)
    dy = abs(y1 - y0)

    # Determine direction
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1

    err = dx - dy
    x, y = x0, y0

    while True:
        points.append((x, y))

        if x == x1 and y == y1:
            break

        e2 = 2 * err

        if e2 > -dy:
            err -= dy
            x += sx

        if e2 < dx:
            err += dx
            y += sy

    return points
