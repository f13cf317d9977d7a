"""
Safe Qt configuration for pytest that prevents crashes in headless environments.
Provides shared fixtures for pixel art maker tests.
"""

import os
import sys

import pytest

# Detect if we're in a headless environment
IS_HEADLESS = (
    not os.environ.get("DISPLAY")
    or os.environ.get("QT_QPA_PLATFORM") == "offscreen"
    or os.environ.get("CI")
    or (sys.platform == "linux" and "microsoft" in os.uname().release.lower())
)

# Must happen before the QApplication is created
if IS_HEADLESS:
    os.environ["QT_QPA_PLATFORM"] = "offscreen"
    os.environ["QT_LOGGING_RULES"] = "*.debug=false"

from pixel_art_maker.core.pixel_art_commands import EditHistory  # noqa: E402
from pixel_art_maker.core.pixel_art_models import CanvasConfig, PixelGrid  # noqa: E402

from .colors import BLUE, GREEN, RED, WHITE  # noqa: E402


@pytest.fixture
def grid():
    """A 2x2 white grid"""
    return PixelGrid(2, 2, WHITE)


@pytest.fixture
def history(grid):
    """An empty history over the 2x2 grid"""
    return EditHistory(grid)


@pytest.fixture
def canvas_config(tmp_path):
    """Small canvas that saves into the test's temp directory"""
    return CanvasConfig(
        width=4,
        height=4,
        pixel_size=3,
        canvas_color=WHITE,
        palette=[RED, GREEN, BLUE, WHITE],
        save_path=tmp_path / "art.png",
    )


@pytest.fixture
def sync_save(monkeypatch):
    """Run save workers on the calling thread so results arrive immediately"""
    from pixel_art_maker.core.pixel_art_workers import FileSaveWorker

    monkeypatch.setattr(FileSaveWorker, "start", FileSaveWorker.run)
