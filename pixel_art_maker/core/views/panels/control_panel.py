"""
Control center for the pixel art maker
Provides the undo, redo and save buttons
"""

# Third-party imports
from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QHBoxLayout, QPushButton, QWidget

from ...pixel_art_constants import CONTROL_BUTTON_HEIGHT, CONTROL_BUTTON_WIDTH
from ...pixel_art_models import Theme
from ...pixel_art_utils import color_to_hex


class ControlPanel(QWidget):
    """Panel with undo/redo/save buttons"""

    # Signals
    undoPressed = pyqtSignal()
    redoPressed = pyqtSignal()
    savePressed = pyqtSignal()

    def __init__(self, theme: Theme = Theme(), parent=None):
        super().__init__(parent)
        self.theme = theme
        self.init_ui()

    def init_ui(self):
        """Initialize the control panel UI"""
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.undo_btn = self._make_button("Undo", "Undo last paint (Ctrl+Z)")
        self.redo_btn = self._make_button("Redo", "Redo last undone paint (Ctrl+Y)")
        self.save_btn = self._make_button("Save", "Save drawing as PNG (Ctrl+S)")

        self.undo_btn.clicked.connect(self.undoPressed)
        self.redo_btn.clicked.connect(self.redoPressed)
        self.save_btn.clicked.connect(self.savePressed)

        for button in (self.undo_btn, self.redo_btn, self.save_btn):
            layout.addWidget(button)
        layout.addStretch()

        # Nothing to undo or redo on a fresh canvas
        self.set_history_state(False, False)

    def _make_button(self, text: str, tooltip: str) -> QPushButton:
        button = QPushButton(text)
        button.setToolTip(tooltip)
        button.setFixedSize(CONTROL_BUTTON_WIDTH, CONTROL_BUTTON_HEIGHT)
        button.setStyleSheet(
            f"background-color: {color_to_hex(self.theme.accent_color)};"
            f" color: {color_to_hex(self.theme.button_text_color)};"
        )
        return button

    def set_history_state(self, can_undo: bool, can_redo: bool):
        """Enable undo/redo buttons to match the history"""
        self.undo_btn.setEnabled(can_undo)
        self.redo_btn.setEnabled(can_redo)
