#!/usr/bin/env python3
"""
Pixel Art Maker view
Composes the canvas, palette and control center into one widget
"""

# Standard library imports
import sys
from typing import Optional

# Third-party imports
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QApplication,
    QGridLayout,
    QMessageBox,
    QStatusBar,
    QWidget,
)

from .pixel_art_canvas import PixelArtCanvas
from .pixel_art_constants import METRICS_REGULAR
from .pixel_art_controller import PixelArtController
from .pixel_art_exceptions import PixelArtError, format_error_message
from .pixel_art_models import CanvasConfig
from .pixel_art_settings import SettingsManager
from .pixel_art_utils import color_to_hex, debug_exception, debug_log
from .views.panels import ControlPanel
from .widgets import ColorPaletteWidget


class PixelArtMaker(QWidget):
    """The pixel art maker: canvas top-left, controls below, palette on the right"""

    def __init__(
        self,
        config: Optional[CanvasConfig] = None,
        settings: Optional[SettingsManager] = None,
        parent=None,
    ):
        super().__init__(parent)

        # Initialize controller
        self.controller = PixelArtController(config, settings, parent=self)
        self.config = self.controller.config

        self.init_ui()
        self._connect_signals()

    def init_ui(self):
        """Initialize the user interface"""
        self.setWindowTitle("Pixel Art Maker")
        self.setObjectName("PixelArtMaker")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setStyleSheet(
            f"#PixelArtMaker {{ background-color: {color_to_hex(self.config.theme.main_color)}; }}"
        )

        layout = QGridLayout(self)
        layout.setContentsMargins(
            METRICS_REGULAR, METRICS_REGULAR, METRICS_REGULAR, METRICS_REGULAR
        )
        layout.setSpacing(METRICS_REGULAR)

        self.canvas = PixelArtCanvas(self.controller)
        self.control_panel = ControlPanel(self.config.theme)
        self.palette_widget = ColorPaletteWidget(
            self.controller.palette_model.colors,
            self.controller.palette_model.selected_index,
        )
        self.status_bar = QStatusBar()
        self.status_bar.setSizeGripEnabled(False)

        layout.addWidget(self.canvas, 0, 0)
        layout.addWidget(self.control_panel, 1, 0)
        layout.addWidget(self.palette_widget, 0, 1, 2, 1)
        layout.addWidget(self.status_bar, 2, 0, 1, 2)

        self._create_actions()

    def _create_actions(self):
        """Keyboard shortcuts for the control center"""
        undo_action = QAction("Undo", self)
        undo_action.setShortcut(QKeySequence.StandardKey.Undo)
        undo_action.triggered.connect(self.controller.undo)

        redo_action = QAction("Redo", self)
        redo_action.setShortcuts(
            [QKeySequence.StandardKey.Redo, QKeySequence("Ctrl+Y")]
        )
        redo_action.triggered.connect(self.controller.redo)

        save_action = QAction("Save", self)
        save_action.setShortcut(QKeySequence.StandardKey.Save)
        save_action.triggered.connect(self.save)

        for action in (undo_action, redo_action, save_action):
            self.addAction(action)

    def _connect_signals(self):
        """Wire view signals to the controller and controller signals to the view"""
        self.canvas.pixelPressed.connect(self.controller.handle_canvas_press)
        self.canvas.pixelMoved.connect(self.controller.handle_canvas_move)
        self.canvas.pixelReleased.connect(self.controller.handle_canvas_release)

        self.palette_widget.colorSelected.connect(self.controller.select_palette_index)

        self.control_panel.undoPressed.connect(self.controller.undo)
        self.control_panel.redoPressed.connect(self.controller.redo)
        self.control_panel.savePressed.connect(self.save)

        self.controller.brushChanged.connect(self._on_brush_changed)
        self.controller.historyChanged.connect(self.control_panel.set_history_state)
        self.controller.statusMessage.connect(self._show_status_message)
        self.controller.error.connect(self._show_error)

    def save(self):
        """Save to the configured destination"""
        self.controller.save()

    def _on_brush_changed(self, color: tuple):
        self.palette_widget.set_selected_index(self.controller.palette_model.selected_index)

    def _show_status_message(self, message: str, timeout: int):
        """Show status bar message"""
        self.status_bar.showMessage(message, timeout)

    def _show_error(self, message: str):
        """Show error dialog"""
        QMessageBox.critical(self, "Error", message)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point

    Usage: pixel-art-maker [SAVE_PATH]
    """
    argv = sys.argv if argv is None else argv
    app = QApplication(argv)

    settings = SettingsManager()
    save_path = argv[1] if len(argv) > 1 else None
    try:
        config = settings.to_canvas_config(save_path)
    except PixelArtError as e:
        debug_exception("MAIN", e)
        debug_log("MAIN", format_error_message("load settings", e), "WARNING")
        config = CanvasConfig(save_path=save_path) if save_path else CanvasConfig()

    maker = PixelArtMaker(config, settings)
    maker.show()
    debug_log("MAIN", f"Saving to {config.save_path}")

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
