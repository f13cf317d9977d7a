#!/usr/bin/env python3
"""
Color palette widget for the pixel art maker
Displays the brush colors as a grid of swatches
"""

# Standard library imports
from typing import Optional

# Third-party imports
from PyQt6.QtCore import QPoint, QRect, Qt, pyqtSignal
from PyQt6.QtGui import QColor, QMouseEvent, QPainter, QPen
from PyQt6.QtWidgets import QWidget

from ..pixel_art_constants import (
    PALETTE_CELL_SIZE,
    PALETTE_COLUMNS,
    PALETTE_SELECTION_BORDER_WIDTH,
    PALETTE_WIDGET_PADDING,
)
from ..pixel_art_utils import Color, color_to_hex, debug_log, should_use_white_text


class ColorPaletteWidget(QWidget):
    """Widget for displaying and selecting colors from the palette"""

    colorSelected = pyqtSignal(int)  # Emits the palette index

    def __init__(
        self,
        colors: list[Color],
        selected_index: int = 0,
        columns: int = PALETTE_COLUMNS,
        parent=None,
    ) -> None:
        super().__init__(parent)
        self.colors = list(colors)
        self.selected_index = selected_index
        self.columns = max(1, columns)
        self.cell_size = PALETTE_CELL_SIZE

        rows = (len(self.colors) + self.columns - 1) // self.columns
        self.setFixedSize(
            self.columns * self.cell_size + PALETTE_WIDGET_PADDING * 2,
            rows * self.cell_size + PALETTE_WIDGET_PADDING * 2,
        )
        self.setCursor(Qt.CursorShape.PointingHandCursor)

    def set_selected_index(self, index: int) -> None:
        """Move the selection border without emitting colorSelected"""
        if 0 <= index < len(self.colors) and index != self.selected_index:
            self.selected_index = index
            self.update()

    def cell_rect(self, index: int) -> QRect:
        """Rectangle of the swatch at index in widget coordinates"""
        row, col = divmod(index, self.columns)
        return QRect(
            PALETTE_WIDGET_PADDING + col * self.cell_size,
            PALETTE_WIDGET_PADDING + row * self.cell_size,
            self.cell_size,
            self.cell_size,
        )

    def index_at(self, pos: QPoint) -> Optional[int]:
        """Palette index under a widget position, or None"""
        col = (pos.x() - PALETTE_WIDGET_PADDING) // self.cell_size
        row = (pos.y() - PALETTE_WIDGET_PADDING) // self.cell_size
        if pos.x() < PALETTE_WIDGET_PADDING or pos.y() < PALETTE_WIDGET_PADDING:
            return None
        if col >= self.columns:
            return None
        index = row * self.columns + col
        if 0 <= index < len(self.colors):
            return index
        return None

    def paintEvent(self, event):
        """Draw the swatches and the selection border"""
        painter = QPainter(self)

        for i, color in enumerate(self.colors):
            rect = self.cell_rect(i)
            painter.fillRect(rect, QColor(*color))
            painter.setPen(QPen(QColor(0, 0, 0), 1))
            painter.drawRect(rect.adjusted(0, 0, -1, -1))

        if 0 <= self.selected_index < len(self.colors):
            selected = self.colors[self.selected_index]
            border = (255, 255, 255) if should_use_white_text(selected) else (0, 0, 0)
            painter.setPen(QPen(QColor(*border), PALETTE_SELECTION_BORDER_WIDTH))
            inset = PALETTE_SELECTION_BORDER_WIDTH
            painter.drawRect(
                self.cell_rect(self.selected_index).adjusted(inset, inset, -inset, -inset)
            )

        painter.end()

    def mousePressEvent(self, event: QMouseEvent):
        """Select the swatch under the cursor"""
        if event.button() != Qt.MouseButton.LeftButton:
            return
        index = self.index_at(event.position().toPoint())
        if index is None:
            return

        self.selected_index = index
        self.update()
        debug_log("PALETTE", f"Selected color {index} ({color_to_hex(self.colors[index])})")
        self.colorSelected.emit(index)
