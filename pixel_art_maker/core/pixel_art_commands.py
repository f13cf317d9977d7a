"""
Pixel edit history with linear undo/redo.

Every paint action is recorded as a PixelEdit holding the cell, the color it
had before and the color painted over it. EditHistory keeps applied edits on
the undo stack and reverted ones on the redo stack; submitting a new paint
discards everything on the redo stack, so history never branches.
"""

# Standard library imports
from dataclasses import dataclass
from typing import Any, Optional

from .pixel_art_exceptions import ValidationError
from .pixel_art_models import PixelGrid
from .pixel_art_utils import Color, debug_color, debug_log, to_rgba


@dataclass(frozen=True)
class PixelEdit:
    """A single reversible pixel color change.

    ``previous_color`` is the color the cell had immediately before the edit
    was applied, which is what makes the edit exactly undoable.
    """

    x: int
    y: int
    previous_color: Color
    new_color: Color

    def apply(self, grid: PixelGrid) -> None:
        """Write the new color to the grid."""
        grid.set(self.x, self.y, self.new_color)

    def revert(self, grid: PixelGrid) -> None:
        """Restore the previous color on the grid."""
        grid.set(self.x, self.y, self.previous_color)

    @property
    def is_noop(self) -> bool:
        """True when the paint did not change the cell's color."""
        return self.previous_color == self.new_color


class EditHistory:
    """Records pixel edits against a grid and supports linear undo/redo.

    The history holds a reference to the grid it mutates but does not own it.
    Depth is unbounded unless ``max_edits`` is given, in which case the oldest
    applied edits fall off the bottom of the undo stack.
    """

    def __init__(self, grid: PixelGrid, max_edits: Optional[int] = None) -> None:
        """Initialize an empty history.

        Args:
            grid: The grid that edits are applied to
            max_edits: Maximum number of undoable edits to retain, or None
        """
        if max_edits is not None and max_edits < 1:
            raise ValidationError("max_edits must be at least 1")
        self.grid = grid
        self.max_edits = max_edits
        self.undo_stack: list[PixelEdit] = []
        self.redo_stack: list[PixelEdit] = []

    def submit_paint(self, x: int, y: int, new_color: Color) -> PixelEdit:
        """Paint a cell and record the edit.

        Painting a cell with the color it already has is still recorded, so
        it takes one undo step like any other paint.

        Args:
            x: Cell column
            y: Cell row
            new_color: Brush color

        Returns:
            The recorded edit

        Raises:
            OutOfBoundsError: If (x, y) is outside the grid. Nothing is
                recorded and the redo stack is left intact.
        """
        previous = self.grid.get(x, y)
        edit = PixelEdit(x, y, previous, to_rgba(new_color))
        edit.apply(self.grid)

        self.undo_stack.append(edit)
        if self.max_edits is not None and len(self.undo_stack) > self.max_edits:
            self.undo_stack.pop(0)
        self.redo_stack.clear()

        debug_log(
            "HISTORY",
            f"Paint ({x}, {y}) {debug_color(previous)} -> {debug_color(edit.new_color)}",
            "DEBUG",
        )
        return edit

    def undo(self) -> bool:
        """Revert the most recent applied edit.

        Returns:
            True if an edit was reverted, False if there was nothing to undo
        """
        if not self.undo_stack:
            return False

        edit = self.undo_stack[-1]
        edit.revert(self.grid)
        self.redo_stack.append(self.undo_stack.pop())
        return True

    def redo(self) -> bool:
        """Reapply the most recently reverted edit.

        Returns:
            True if an edit was reapplied, False if there was nothing to redo
        """
        if not self.redo_stack:
            return False

        edit = self.redo_stack[-1]
        edit.apply(self.grid)
        self.undo_stack.append(self.redo_stack.pop())
        return True

    @property
    def can_undo(self) -> bool:
        return bool(self.undo_stack)

    @property
    def can_redo(self) -> bool:
        return bool(self.redo_stack)

    def clear(self) -> None:
        """Forget all history without touching the grid."""
        self.undo_stack.clear()
        self.redo_stack.clear()

    def get_stats(self) -> dict[str, Any]:
        """Get a summary of the history state.

        Returns:
            Dictionary with stack sizes and undo/redo availability
        """
        return {
            "undo_count": len(self.undo_stack),
            "redo_count": len(self.redo_stack),
            "noop_count": sum(1 for edit in self.undo_stack if edit.is_noop),
            "max_edits": self.max_edits,
            "can_undo": self.can_undo,
            "can_redo": self.can_redo,
        }
