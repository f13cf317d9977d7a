#!/usr/bin/env python3
"""
Canvas widget for the pixel art maker
Uses the controller's grid instead of maintaining its own state
"""

# Standard library imports
from typing import Optional

# Third-party imports
import numpy as np
from PyQt6.QtCore import QPoint, Qt, pyqtSignal
from PyQt6.QtGui import QImage, QMouseEvent, QPainter
from PyQt6.QtWidgets import QWidget

from .pixel_art_export import scale_image_data


class PixelArtCanvas(QWidget):
    """Canvas that draws the grid at a fixed pixel size and reports cell clicks"""

    # Signals
    pixelPressed = pyqtSignal(int, int)  # x, y in grid space
    pixelMoved = pyqtSignal(int, int)  # x, y in grid space
    pixelReleased = pyqtSignal(int, int)  # x, y in grid space

    def __init__(self, controller, parent=None):
        super().__init__(parent)

        # Store controller reference
        self.controller = controller
        self.pixel_size = controller.pixel_size

        # Interaction state
        self.drawing = False

        # Cached rendering of the grid, rebuilt when the image changes
        self._qimage: Optional[QImage] = None
        self._image_bytes: Optional[bytes] = None

        self.setMouseTracking(True)
        self.setCursor(Qt.CursorShape.CrossCursor)
        self._update_size()

        self.controller.imageChanged.connect(self._on_image_changed)

    def _on_image_changed(self):
        """Handle image change from controller"""
        self._qimage = None
        self.update()

    def _update_size(self):
        """Fix widget size to the grid at the current pixel size"""
        width, height = self.controller.get_image_size()
        self.setFixedSize(width * self.pixel_size, height * self.pixel_size)

    def _get_scaled_qimage(self) -> QImage:
        """Build (or reuse) the upscaled QImage of the grid"""
        if self._qimage is None:
            scaled = scale_image_data(self.controller.grid.to_array(), self.pixel_size)
            scaled = np.ascontiguousarray(scaled)
            height, width = scaled.shape[:2]
            # QImage does not copy, keep the bytes alive alongside it
            self._image_bytes = scaled.tobytes()
            self._qimage = QImage(
                self._image_bytes, width, height, width * 4, QImage.Format.Format_RGBA8888
            )
        return self._qimage

    def paintEvent(self, event):
        """Paint the grid"""
        painter = QPainter(self)
        painter.drawImage(0, 0, self._get_scaled_qimage())
        painter.end()

    def mousePressEvent(self, event: QMouseEvent):
        """Handle mouse press"""
        if event.button() == Qt.MouseButton.LeftButton:
            pos = self._get_pixel_pos(event.position())
            if pos is not None:
                self.drawing = True
                self.pixelPressed.emit(pos.x(), pos.y())

    def mouseMoveEvent(self, event: QMouseEvent):
        """Handle mouse drag"""
        if not self.drawing:
            return
        pos = self._get_pixel_pos(event.position())
        if pos is not None:
            self.pixelMoved.emit(pos.x(), pos.y())

    def mouseReleaseEvent(self, event: QMouseEvent):
        """Handle mouse release"""
        if event.button() == Qt.MouseButton.LeftButton and self.drawing:
            self.drawing = False
            pos = self._get_pixel_pos(event.position())
            if pos is not None:
                self.pixelReleased.emit(pos.x(), pos.y())
            else:
                # Released outside the grid, still end the stroke
                self.pixelReleased.emit(-1, -1)

    def _get_pixel_pos(self, pos) -> Optional[QPoint]:
        """Convert mouse position to grid coordinates, None outside the grid"""
        x = int(pos.x() // self.pixel_size)
        y = int(pos.y() // self.pixel_size)

        width, height = self.controller.get_image_size()
        if 0 <= x < width and 0 <= y < height:
            return QPoint(x, y)
        return None
