"""Custom widgets for the pixel art maker"""

from .color_palette_widget import ColorPaletteWidget

__all__ = ["ColorPaletteWidget"]
