"""Core pixel art maker modules"""

# Make key classes available at package level
from .pixel_art_commands import EditHistory, PixelEdit
from .pixel_art_export import export_png, render
from .pixel_art_models import PixelGrid

__all__ = ["EditHistory", "PixelEdit", "PixelGrid", "export_png", "render"]
