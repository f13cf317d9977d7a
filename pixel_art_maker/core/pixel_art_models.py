#!/usr/bin/env python3
"""
Core data models for the pixel art maker
These models handle the business logic without any UI dependencies
"""

# Standard library imports
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

# Third-party imports
import numpy as np

from .pixel_art_constants import (
    DEFAULT_CANVAS_COLOR,
    DEFAULT_GRID_HEIGHT,
    DEFAULT_GRID_WIDTH,
    DEFAULT_PALETTE,
    DEFAULT_PIXEL_SIZE,
    DEFAULT_SAVE_FILENAME,
    MAX_GRID_CELLS,
    MAX_GRID_DIMENSION,
    MAX_PIXEL_SCALE,
    MIN_PIXEL_SCALE,
    RGBA_CHANNELS,
    THEME_ACCENT_COLOR,
    THEME_BUTTON_TEXT_COLOR,
    THEME_MAIN_COLOR,
)
from .pixel_art_exceptions import OutOfBoundsError, PaletteError, ValidationError
from .pixel_art_utils import Color, debug_log, to_rgba


def validate_grid_size(width: int, height: int) -> None:
    """Raise ValidationError unless the dimensions describe a usable grid"""
    if width <= 0 or height <= 0:
        raise ValidationError("Grid dimensions must be positive")
    if width > MAX_GRID_DIMENSION or height > MAX_GRID_DIMENSION:
        raise ValidationError(
            f"Grid dimensions too large (max {MAX_GRID_DIMENSION}x{MAX_GRID_DIMENSION})"
        )
    if width * height > MAX_GRID_CELLS:
        raise ValidationError(f"Grid too large (max {MAX_GRID_CELLS} cells)")


def validate_pixel_scale(scale: int) -> int:
    """Return the scale as an int, raising ValidationError if out of range"""
    if isinstance(scale, bool) or not isinstance(scale, int):
        raise ValidationError(f"Pixel scale must be an integer, got {scale!r}")
    if not MIN_PIXEL_SCALE <= scale <= MAX_PIXEL_SCALE:
        raise ValidationError(
            f"Pixel scale must be between {MIN_PIXEL_SCALE} and {MAX_PIXEL_SCALE}"
        )
    return scale


class PixelGrid:
    """
    Fixed-size 2-D grid of RGBA colors

    The grid is created once with its dimensions and background color and is
    never resized. Cells are stored row-major in a (height, width, 4) uint8
    array. All writes should go through EditHistory so they can be undone.
    """

    def __init__(
        self,
        width: int = DEFAULT_GRID_WIDTH,
        height: int = DEFAULT_GRID_HEIGHT,
        background: Color = DEFAULT_CANVAS_COLOR,
    ) -> None:
        validate_grid_size(width, height)
        self._width = width
        self._height = height
        self._background = to_rgba(background)
        self._cells = np.empty((height, width, RGBA_CHANNELS), dtype=np.uint8)
        self._cells[:, :] = self._background
        debug_log("GRID", f"Created {width}x{height} grid", "DEBUG")

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def background(self) -> Color:
        return self._background

    @property
    def size(self) -> tuple[int, int]:
        return (self._width, self._height)

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether (x, y) addresses a cell of this grid"""
        return 0 <= x < self._width and 0 <= y < self._height

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self._width, self._height)

    def get(self, x: int, y: int) -> Color:
        """Get the color at (x, y)"""
        self._check_bounds(x, y)
        r, g, b, a = self._cells[y, x]
        return (int(r), int(g), int(b), int(a))

    def set(self, x: int, y: int, color: Color) -> None:
        """Overwrite the color at (x, y); writing the current color is allowed"""
        self._check_bounds(x, y)
        self._cells[y, x] = to_rgba(color)

    def to_array(self) -> np.ndarray:
        """Return a read-only copy of the cells as a (height, width, 4) array"""
        snapshot = self._cells.copy()
        snapshot.flags.writeable = False
        return snapshot

    def copy(self) -> "PixelGrid":
        """Return an independent grid with the same contents"""
        clone = PixelGrid(self._width, self._height, self._background)
        clone._cells[:] = self._cells
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelGrid):
            return NotImplemented
        return self.size == other.size and np.array_equal(self._cells, other._cells)

    def __repr__(self) -> str:
        return f"PixelGrid(width={self._width}, height={self._height})"


@dataclass
class PaletteModel:
    """
    Model for the brush palette

    The canvas color is moved to the end of the palette so that it is always
    available as the eraser, and it never appears twice.
    """

    colors: list[Color] = field(default_factory=list)
    selected_index: int = 0

    @classmethod
    def from_colors(cls, colors: list, canvas_color: Color) -> "PaletteModel":
        """Build a palette from caller colors with the canvas color last"""
        canvas = to_rgba(canvas_color)
        brushes = [c for c in (to_rgba(c) for c in colors) if c != canvas]
        model = cls(colors=brushes + [canvas])
        debug_log("PALETTE", f"Palette built with {len(model.colors)} colors")
        return model

    def __post_init__(self) -> None:
        self.colors = [to_rgba(c) for c in self.colors]
        if self.colors and not 0 <= self.selected_index < len(self.colors):
            raise PaletteError(f"Selected index {self.selected_index} out of range")

    def __len__(self) -> int:
        return len(self.colors)

    @property
    def selected_color(self) -> Color:
        """The brush color currently selected"""
        if not self.colors:
            raise PaletteError("Palette is empty")
        return self.colors[self.selected_index]

    def select(self, index: int) -> Color:
        """Select a palette entry and return its color"""
        if not 0 <= index < len(self.colors):
            raise PaletteError(f"Palette index {index} out of range (0-{len(self.colors) - 1})")
        self.selected_index = index
        return self.colors[index]

    def index_of(self, color: Color) -> Optional[int]:
        """Find the palette index of a color, or None"""
        try:
            return self.colors.index(to_rgba(color))
        except ValueError:
            return None


@dataclass(frozen=True)
class Theme:
    """Colors used to style the composed view"""

    main_color: Color = THEME_MAIN_COLOR
    accent_color: Color = THEME_ACCENT_COLOR
    button_text_color: Color = THEME_BUTTON_TEXT_COLOR


@dataclass
class CanvasConfig:
    """
    Everything needed to build a pixel art maker view
    """

    width: int = DEFAULT_GRID_WIDTH
    height: int = DEFAULT_GRID_HEIGHT
    pixel_size: int = DEFAULT_PIXEL_SIZE
    canvas_color: Color = DEFAULT_CANVAS_COLOR
    palette: list[Color] = field(default_factory=lambda: list(DEFAULT_PALETTE))
    theme: Theme = field(default_factory=Theme)
    save_path: Path = field(default_factory=lambda: Path.home() / DEFAULT_SAVE_FILENAME)

    def __post_init__(self) -> None:
        validate_grid_size(self.width, self.height)
        validate_pixel_scale(self.pixel_size)
        self.canvas_color = to_rgba(self.canvas_color)
        self.palette = [to_rgba(c) for c in self.palette]
        self.save_path = Path(self.save_path).expanduser()

    def create_grid(self) -> PixelGrid:
        return PixelGrid(self.width, self.height, self.canvas_color)

    def create_palette(self) -> PaletteModel:
        if not self.palette:
            raise PaletteError("Palette must contain at least one color")
        return PaletteModel.from_colors(self.palette, self.canvas_color)
