#!/usr/bin/env python3
"""
Controller for the pixel art maker
Handles all business logic and coordinates between models, history and views
"""

# Standard library imports
import os
from pathlib import Path
from typing import Optional, Union

# Third-party imports
from PIL import Image
from PyQt6.QtCore import QObject, pyqtSignal

from .pixel_art_commands import EditHistory, PixelEdit
from .pixel_art_constants import DEFAULT_MAX_EDITS, STATUS_TIMEOUT_LONG, STATUS_TIMEOUT_SHORT
from .pixel_art_exceptions import PaletteError
from .pixel_art_export import render
from .pixel_art_models import CanvasConfig
from .pixel_art_settings import SettingsManager
from .pixel_art_utils import Color, debug_color, debug_log, get_line_points, to_rgba
from .pixel_art_workers import FileSaveWorker


class PixelArtController(QObject):
    """Controller coordinating painting, history and saving"""

    # Signals
    imageChanged = pyqtSignal()
    brushChanged = pyqtSignal(tuple)  # RGBA color
    historyChanged = pyqtSignal(bool, bool)  # can_undo, can_redo
    statusMessage = pyqtSignal(str, int)  # message, timeout
    error = pyqtSignal(str)
    saved = pyqtSignal(str)  # destination path

    def __init__(
        self,
        config: Optional[CanvasConfig] = None,
        settings: Optional[SettingsManager] = None,
        max_edits: Optional[int] = DEFAULT_MAX_EDITS,
        parent=None,
    ):
        super().__init__(parent)

        self.config = config or CanvasConfig()
        self.settings = settings

        # Initialize models
        self.grid = self.config.create_grid()
        self.history = EditHistory(self.grid, max_edits=max_edits)
        self.palette_model = self.config.create_palette()
        self.brush_color: Color = self.palette_model.selected_color

        # Save bookkeeping
        self.save_worker: Optional[FileSaveWorker] = None
        self.save_count = 0

        # Drag state
        self._is_drawing = False
        self._last_cell: Optional[tuple[int, int]] = None

    # Brush operations
    def set_brush_color(self, color: Color) -> None:
        """Set the current brush color

        Raises:
            PaletteError: If the color is not one of the palette colors
        """
        rgba = to_rgba(color)
        index = self.palette_model.index_of(rgba)
        if index is None:
            raise PaletteError(f"Color {debug_color(rgba)} is not in the palette")
        self.palette_model.selected_index = index
        self.brush_color = rgba
        debug_log("CONTROLLER", f"Brush color set to: {debug_color(self.brush_color)}")
        self.brushChanged.emit(self.brush_color)

    def select_palette_index(self, index: int) -> None:
        """Use the palette entry at index as the brush"""
        self.set_brush_color(self.palette_model.select(index))

    # Painting operations
    def paint_at(self, x: int, y: int) -> Optional[PixelEdit]:
        """Paint one cell with the brush color

        Coordinates outside the grid are ignored, so the grid itself only
        ever sees valid cells.
        """
        if not self.grid.in_bounds(x, y):
            debug_log("CONTROLLER", f"Ignoring paint outside grid at ({x}, {y})", "WARNING")
            return None

        edit = self.history.submit_paint(x, y, self.brush_color)
        self.imageChanged.emit()
        self._emit_history_state()
        return edit

    def handle_canvas_press(self, x: int, y: int) -> None:
        """Handle mouse press on canvas"""
        self._is_drawing = True
        self._last_cell = (x, y)
        self.paint_at(x, y)

    def handle_canvas_move(self, x: int, y: int) -> None:
        """Handle mouse move on canvas, painting every cell since the last one"""
        if not self._is_drawing:
            return
        if self._last_cell == (x, y):
            return

        if self._last_cell is None:
            points = [(x, y)]
        else:
            # The first point was painted by the previous event
            points = get_line_points(*self._last_cell, x, y)[1:]

        for px, py in points:
            self.paint_at(px, py)
        self._last_cell = (x, y)

    def handle_canvas_release(self, x: int, y: int) -> None:
        """Handle mouse release on canvas, ending the stroke"""
        if self._is_drawing and self.grid.in_bounds(x, y):
            self.handle_canvas_move(x, y)
        self._is_drawing = False
        self._last_cell = None

    # Undo/Redo operations
    def undo(self) -> bool:
        """Undo the last paint"""
        if self.history.undo():
            self.imageChanged.emit()
            self.statusMessage.emit("Undo", STATUS_TIMEOUT_SHORT)
            self._emit_history_state()
            return True
        self.statusMessage.emit("Nothing to undo", STATUS_TIMEOUT_SHORT)
        return False

    def redo(self) -> bool:
        """Redo the last undone paint"""
        if self.history.redo():
            self.imageChanged.emit()
            self.statusMessage.emit("Redo", STATUS_TIMEOUT_SHORT)
            self._emit_history_state()
            return True
        self.statusMessage.emit("Nothing to redo", STATUS_TIMEOUT_SHORT)
        return False

    def _emit_history_state(self) -> None:
        self.historyChanged.emit(self.history.can_undo, self.history.can_redo)

    # Export operations
    def render_image(self, pixel_scale: Optional[int] = None) -> Image.Image:
        """Render the grid at the given scale (the on-screen pixel size by default)"""
        return render(self.grid, pixel_scale or self.config.pixel_size)

    def is_saving(self) -> bool:
        return self.save_worker is not None and self.save_worker.isRunning()

    def save(self, file_path: Optional[Union[str, Path]] = None) -> bool:
        """Save the drawing as PNG

        The image is rendered here and written by a worker thread. Failures
        are reported through the error signal and leave the grid and history
        untouched.

        Returns:
            True if a save was started
        """
        if self.is_saving():
            self.statusMessage.emit("Save already in progress", STATUS_TIMEOUT_SHORT)
            return False

        destination = Path(file_path).expanduser() if file_path else self.config.save_path
        debug_log("CONTROLLER", f"Saving image: {os.path.basename(destination)}", "INFO")

        self.save_worker = FileSaveWorker(self.render_image(), destination)
        self.save_worker.progress.connect(
            lambda p, msg: debug_log(
                "CONTROLLER", f"Save progress: {p}% - {msg}", "DEBUG"
            )
        )
        self.save_worker.error.connect(self._handle_save_error)
        self.save_worker.saved.connect(self._handle_save_success)

        self.save_worker.start()
        return True

    def _handle_save_error(self, error_msg: str) -> None:
        """Handle file save error"""
        debug_log("CONTROLLER", f"Save error: {error_msg}", "ERROR")
        self.error.emit(error_msg)

    def _handle_save_success(self, file_path: str) -> None:
        """Handle successful file save"""
        self.save_count += 1
        if self.settings is not None:
            self.settings.record_save(file_path)

        self.statusMessage.emit(f"Saved to {file_path}", STATUS_TIMEOUT_LONG)
        self.saved.emit(file_path)
        debug_log("CONTROLLER", f"Successfully saved: {file_path} (save #{self.save_count})")

    # Queries
    def get_image_size(self) -> tuple[int, int]:
        return self.grid.size

    @property
    def pixel_size(self) -> int:
        return self.config.pixel_size
