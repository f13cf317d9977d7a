#!/usr/bin/env python3
"""
Unit tests for the pixel edit history.
Tests PixelEdit and EditHistory undo/redo semantics.
"""

import random
from dataclasses import FrozenInstanceError

import pytest

from pixel_art_maker.core.pixel_art_commands import EditHistory, PixelEdit
from pixel_art_maker.core.pixel_art_exceptions import OutOfBoundsError, ValidationError
from pixel_art_maker.core.pixel_art_models import PixelGrid

from .colors import BLUE, GREEN, RED, WHITE

COLORS = [WHITE, RED, GREEN, BLUE]


def random_paints(rng, grid, count):
    return [
        (rng.randrange(grid.width), rng.randrange(grid.height), rng.choice(COLORS))
        for _ in range(count)
    ]


class TestPixelEdit:
    """Test the PixelEdit command"""

    def test_apply_and_revert(self, grid):
        edit = PixelEdit(1, 1, WHITE, RED)

        edit.apply(grid)
        assert grid.get(1, 1) == RED

        edit.revert(grid)
        assert grid.get(1, 1) == WHITE

    def test_is_immutable(self):
        edit = PixelEdit(0, 0, WHITE, RED)

        with pytest.raises(FrozenInstanceError):
            edit.new_color = BLUE

    def test_is_noop(self):
        assert PixelEdit(0, 0, RED, RED).is_noop
        assert not PixelEdit(0, 0, WHITE, RED).is_noop


class TestEditHistory:
    """Test linear undo/redo over pixel edits"""

    def test_submit_paint_records_previous_color(self, history, grid):
        edit = history.submit_paint(0, 1, RED)

        assert edit == PixelEdit(0, 1, WHITE, RED)
        assert grid.get(0, 1) == RED
        assert history.undo_stack == [edit]
        assert history.redo_stack == []

    def test_paint_then_undo_restores_grid(self, history, grid):
        history.submit_paint(1, 0, RED)
        before = grid.copy()

        history.submit_paint(1, 0, BLUE)
        history.undo()

        assert grid.get(1, 0) == RED
        assert grid == before

    def test_walkthrough(self, history, grid):
        """Paint red then blue, undo past the start, redo to the end"""
        history.submit_paint(0, 0, RED)
        assert grid.get(0, 0) == RED

        history.submit_paint(0, 0, BLUE)
        assert grid.get(0, 0) == BLUE
        assert [e.new_color for e in history.undo_stack] == [RED, BLUE]

        assert history.undo() is True
        assert grid.get(0, 0) == RED
        assert history.undo() is True
        assert grid.get(0, 0) == WHITE

        # Empty undo stack
        assert history.undo() is False
        assert grid.get(0, 0) == WHITE

        assert history.redo() is True
        assert history.redo() is True
        assert grid.get(0, 0) == BLUE
        assert history.redo() is False

    def test_submit_clears_redo(self, history, grid):
        history.submit_paint(0, 0, RED)
        history.submit_paint(1, 1, GREEN)
        history.undo()
        assert history.can_redo

        history.submit_paint(1, 0, BLUE)
        snapshot = grid.copy()

        assert history.redo_stack == []
        assert history.redo() is False
        assert grid == snapshot

    def test_empty_history_is_noop(self, history, grid):
        before = grid.copy()

        assert history.undo() is False
        assert history.redo() is False
        assert grid == before
        assert not history.can_undo
        assert not history.can_redo

    def test_same_color_paint_is_recorded(self, history, grid):
        """Painting over the same color takes an undo step"""
        history.submit_paint(0, 0, WHITE)

        assert len(history.undo_stack) == 1
        assert history.undo_stack[0].is_noop
        assert history.undo() is True
        assert grid.get(0, 0) == WHITE

    def test_out_of_bounds_paint_changes_nothing(self, history, grid):
        history.submit_paint(0, 0, RED)
        history.undo()
        before = grid.copy()

        with pytest.raises(OutOfBoundsError):
            history.submit_paint(2, 0, BLUE)

        assert grid == before
        assert history.undo_stack == []
        assert len(history.redo_stack) == 1

    def test_invalid_color_changes_nothing(self, history, grid):
        with pytest.raises(ValidationError):
            history.submit_paint(0, 0, (300, 0, 0))

        assert grid.get(0, 0) == WHITE
        assert history.undo_stack == []

    def test_round_trip_law(self):
        """Undo everything then redo everything returns to the pre-undo state"""
        rng = random.Random(1234)
        for _ in range(20):
            grid = PixelGrid(3, 3, WHITE)
            history = EditHistory(grid)
            for x, y, color in random_paints(rng, grid, rng.randrange(1, 30)):
                history.submit_paint(x, y, color)
            reached = grid.copy()

            while history.undo():
                pass
            assert grid == PixelGrid(3, 3, WHITE)

            while history.redo():
                pass
            assert grid == reached

    def test_undo_restores_each_step(self):
        """Each undo returns exactly to the grid before the matching paint"""
        rng = random.Random(99)
        grid = PixelGrid(4, 2, WHITE)
        history = EditHistory(grid)
        snapshots = []
        for x, y, color in random_paints(rng, grid, 25):
            snapshots.append(grid.copy())
            history.submit_paint(x, y, color)

        for expected in reversed(snapshots):
            history.undo()
            assert grid == expected

    def test_max_edits_drops_oldest(self, grid):
        history = EditHistory(grid, max_edits=2)
        history.submit_paint(0, 0, RED)
        history.submit_paint(1, 0, GREEN)
        history.submit_paint(0, 1, BLUE)

        assert len(history.undo_stack) == 2
        while history.undo():
            pass
        # The oldest paint can no longer be undone
        assert grid.get(0, 0) == RED
        assert grid.get(1, 0) == WHITE
        assert grid.get(0, 1) == WHITE

    def test_invalid_max_edits(self, grid):
        with pytest.raises(ValidationError):
            EditHistory(grid, max_edits=0)

    def test_clear(self, history, grid):
        history.submit_paint(0, 0, RED)
        history.submit_paint(1, 0, RED)
        history.undo()

        history.clear()

        assert not history.can_undo
        assert not history.can_redo
        assert grid.get(0, 0) == RED

    def test_get_stats(self, history):
        history.submit_paint(0, 0, RED)
        history.submit_paint(0, 0, RED)
        history.submit_paint(1, 1, BLUE)
        history.undo()

        stats = history.get_stats()

        assert stats == {
            "undo_count": 2,
            "redo_count": 1,
            "noop_count": 1,
            "max_edits": None,
            "can_undo": True,
            "can_redo": True,
        }
