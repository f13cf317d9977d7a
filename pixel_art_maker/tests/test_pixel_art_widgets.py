#!/usr/bin/env python3
"""
Tests for the pixel art maker widgets and their wiring to the controller
"""

from unittest.mock import patch

import pytest
from PyQt6.QtCore import QEvent, QPoint, QPointF, Qt
from PyQt6.QtGui import QMouseEvent

from pixel_art_maker.core.pixel_art_canvas import PixelArtCanvas
from pixel_art_maker.core.pixel_art_constants import PALETTE_CELL_SIZE, PALETTE_WIDGET_PADDING
from pixel_art_maker.core.pixel_art_controller import PixelArtController
from pixel_art_maker.core.pixel_art_editor import PixelArtMaker
from pixel_art_maker.core.views.panels import ControlPanel
from pixel_art_maker.core.widgets import ColorPaletteWidget

from .colors import BLUE, GREEN, RED, WHITE


def swatch_center(index, columns=2):
    row, col = divmod(index, columns)
    half = PALETTE_CELL_SIZE // 2
    return QPoint(
        PALETTE_WIDGET_PADDING + col * PALETTE_CELL_SIZE + half,
        PALETTE_WIDGET_PADDING + row * PALETTE_CELL_SIZE + half,
    )


def drag_to(canvas, pos):
    """Deliver a left-button drag event at pos"""
    point = QPointF(pos)
    canvas.mouseMoveEvent(
        QMouseEvent(
            QEvent.Type.MouseMove,
            point,
            point,
            Qt.MouseButton.NoButton,
            Qt.MouseButton.LeftButton,
            Qt.KeyboardModifier.NoModifier,
        )
    )


@pytest.fixture
def maker(qtbot, canvas_config):
    widget = PixelArtMaker(canvas_config)
    qtbot.addWidget(widget)
    return widget


class TestPixelArtCanvas:
    """Test the canvas widget"""

    def test_size_follows_grid(self, qtbot, canvas_config):
        controller = PixelArtController(canvas_config)
        canvas = PixelArtCanvas(controller)
        qtbot.addWidget(canvas)

        assert (canvas.width(), canvas.height()) == (12, 12)

    def test_click_emits_cell(self, qtbot, canvas_config):
        controller = PixelArtController(canvas_config)
        canvas = PixelArtCanvas(controller)
        qtbot.addWidget(canvas)

        with qtbot.waitSignal(canvas.pixelPressed) as blocker:
            qtbot.mousePress(canvas, Qt.MouseButton.LeftButton, pos=QPoint(7, 10))

        assert blocker.args == [2, 3]

    def test_top_left_cell_is_a_valid_target(self, qtbot, canvas_config):
        controller = PixelArtController(canvas_config)
        canvas = PixelArtCanvas(controller)
        qtbot.addWidget(canvas)
        events = []
        canvas.pixelPressed.connect(lambda x, y: events.append(("press", x, y)))
        canvas.pixelMoved.connect(lambda x, y: events.append(("move", x, y)))
        canvas.pixelReleased.connect(lambda x, y: events.append(("release", x, y)))

        qtbot.mousePress(canvas, Qt.MouseButton.LeftButton, pos=QPoint(1, 1))
        drag_to(canvas, QPoint(4, 1))
        drag_to(canvas, QPoint(1, 1))
        qtbot.mouseRelease(canvas, Qt.MouseButton.LeftButton, pos=QPoint(1, 1))

        assert events == [
            ("press", 0, 0),
            ("move", 1, 0),
            ("move", 0, 0),
            ("release", 0, 0),
        ]
        assert not canvas.drawing

    def test_pixel_pos_outside_grid(self, qtbot, canvas_config):
        controller = PixelArtController(canvas_config)
        canvas = PixelArtCanvas(controller)
        qtbot.addWidget(canvas)

        assert canvas._get_pixel_pos(QPoint(12, 0)) is None
        assert canvas._get_pixel_pos(QPoint(11, 11)) == QPoint(3, 3)


class TestColorPaletteWidget:
    """Test the palette widget"""

    def test_index_at(self, qtbot):
        widget = ColorPaletteWidget([RED, GREEN, BLUE])
        qtbot.addWidget(widget)

        assert widget.index_at(swatch_center(0)) == 0
        assert widget.index_at(swatch_center(2)) == 2
        # Empty slot next to the last swatch
        assert widget.index_at(swatch_center(3)) is None
        assert widget.index_at(QPoint(0, 0)) is None

    def test_click_selects(self, qtbot):
        widget = ColorPaletteWidget([RED, GREEN, BLUE])
        qtbot.addWidget(widget)

        with qtbot.waitSignal(widget.colorSelected) as blocker:
            qtbot.mouseClick(widget, Qt.MouseButton.LeftButton, pos=swatch_center(1))

        assert blocker.args == [1]
        assert widget.selected_index == 1


class TestControlPanel:
    """Test the control center"""

    def test_buttons_emit(self, qtbot):
        panel = ControlPanel()
        qtbot.addWidget(panel)
        panel.set_history_state(True, True)

        with qtbot.waitSignal(panel.undoPressed):
            qtbot.mouseClick(panel.undo_btn, Qt.MouseButton.LeftButton)
        with qtbot.waitSignal(panel.redoPressed):
            qtbot.mouseClick(panel.redo_btn, Qt.MouseButton.LeftButton)
        with qtbot.waitSignal(panel.savePressed):
            qtbot.mouseClick(panel.save_btn, Qt.MouseButton.LeftButton)

    def test_starts_with_history_buttons_disabled(self, qtbot):
        panel = ControlPanel()
        qtbot.addWidget(panel)

        assert not panel.undo_btn.isEnabled()
        assert not panel.redo_btn.isEnabled()
        assert panel.save_btn.isEnabled()


class TestPixelArtMaker:
    """Test the composed view"""

    def test_canvas_paints_through_controller(self, qtbot, maker):
        qtbot.mousePress(maker.canvas, Qt.MouseButton.LeftButton, pos=QPoint(1, 1))
        qtbot.mouseRelease(maker.canvas, Qt.MouseButton.LeftButton, pos=QPoint(1, 1))

        assert maker.controller.grid.get(0, 0) == RED
        assert maker.control_panel.undo_btn.isEnabled()

    def test_drag_into_top_left_cell(self, qtbot, maker):
        maker.controller.select_palette_index(2)

        qtbot.mousePress(maker.canvas, Qt.MouseButton.LeftButton, pos=QPoint(7, 7))
        drag_to(maker.canvas, QPoint(1, 1))
        qtbot.mouseRelease(maker.canvas, Qt.MouseButton.LeftButton, pos=QPoint(1, 1))

        assert maker.controller.grid.get(0, 0) == BLUE
        assert maker.controller.grid.get(2, 2) == BLUE
        assert len(maker.controller.history.undo_stack) == 3

    def test_undo_button(self, qtbot, maker):
        maker.controller.paint_at(0, 0)

        qtbot.mouseClick(maker.control_panel.undo_btn, Qt.MouseButton.LeftButton)

        assert maker.controller.grid.get(0, 0) == WHITE
        assert maker.control_panel.redo_btn.isEnabled()
        assert not maker.control_panel.undo_btn.isEnabled()

    def test_palette_selects_brush(self, qtbot, maker):
        qtbot.mouseClick(
            maker.palette_widget, Qt.MouseButton.LeftButton, pos=swatch_center(2)
        )

        assert maker.controller.brush_color == BLUE

    def test_brush_change_moves_palette_selection(self, maker):
        maker.controller.set_brush_color(GREEN)

        assert maker.palette_widget.selected_index == 1

    def test_save_error_is_shown(self, maker, tmp_path, sync_save):
        with patch("pixel_art_maker.core.pixel_art_editor.QMessageBox.critical") as critical:
            maker.controller.save(tmp_path / "missing" / "art.png")

        critical.assert_called_once()
        assert "Could not write file" in critical.call_args.args[2]
