"""
Worker threads for async file operations in the pixel art maker.

This module provides thread-based workers for handling file I/O operations
asynchronously, preventing UI freezing during long operations.
"""

# Standard library imports
from pathlib import Path
from typing import Optional, Union

# Third-party imports
from PIL import Image
from PyQt6.QtCore import QObject, QThread, pyqtSignal

from .pixel_art_exceptions import FileOperationError, format_error_message
from .pixel_art_export import encode_png, write_atomic
from .pixel_art_utils import debug_exception, debug_log


class BaseWorker(QThread):
    """Base worker class for async operations.

    Signals:
        progress: Emitted with progress percentage (0-100)
        error: Emitted with error message when operation fails
        finished: Emitted when operation completes successfully
    """

    progress = pyqtSignal(int, str)  # Progress percentage 0-100, optional message
    error = pyqtSignal(str)  # Error message
    finished = pyqtSignal()  # Operation completed

    def __init__(
        self,
        file_path: Optional[Union[str, Path]] = None,
        parent: Optional[QObject] = None,
    ):
        """Initialize the base worker.

        Args:
            file_path: Optional file path (string or Path object)
            parent: Parent QObject for proper cleanup
        """
        super().__init__(parent)
        self._file_path: Optional[Path] = None

        if file_path is not None:
            self._file_path = Path(file_path).expanduser()

    @property
    def file_path(self) -> Optional[Path]:
        """Get the file path as a Path object (read-only)."""
        return self._file_path

    def emit_progress(self, value: int, message: str = "") -> None:
        """Emit progress signal."""
        self.progress.emit(value, message)

    def emit_error(self, message: str) -> None:
        """Emit error signal."""
        self.error.emit(message)

    def emit_finished(self) -> None:
        """Emit finished signal."""
        self.finished.emit()


class FileSaveWorker(BaseWorker):
    """Worker for encoding and writing a rendered image.

    The image is rendered on the UI thread before the worker starts, so the
    worker never reads the grid.

    Signals:
        saved: Emitted with the destination path when the file is written
    """

    saved = pyqtSignal(str)  # Saved file path

    def __init__(
        self,
        image: Image.Image,
        file_path: Union[str, Path],
        parent: Optional[QObject] = None,
    ):
        """Initialize the file save worker.

        Args:
            image: Rendered RGBA image to save
            file_path: Destination path (string or Path object)
            parent: Parent QObject for proper cleanup
        """
        super().__init__(file_path, parent)
        self.image = image

    def run(self) -> None:
        """Encode and write the image in the background thread."""
        debug_log("WORKER", f"Starting to save file: {self.file_path}", "DEBUG")

        if self.file_path is None:
            self.emit_error("No file path provided")
            return

        try:
            self.emit_progress(0, "Encoding PNG...")
            data = encode_png(self.image)

            self.emit_progress(50, "Writing to disk...")
            destination = write_atomic(data, self.file_path)
        except FileOperationError as e:
            debug_exception("WORKER", e)
            self.emit_error(format_error_message("save", e))
            return

        self.emit_progress(100, "Save complete!")
        debug_log("WORKER", f"Image saved successfully: {destination}")
        self.saved.emit(str(destination))
        self.emit_finished()
