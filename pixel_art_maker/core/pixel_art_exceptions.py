#!/usr/bin/env python3
"""
Custom exceptions and error handling utilities for the pixel art maker.

This module defines domain-specific exceptions and provides utilities
for consistent error handling across the application.
"""


class PixelArtError(Exception):
    """Base exception for all pixel art maker errors"""
    pass


class OutOfBoundsError(PixelArtError, IndexError):
    """Raised when a grid coordinate lies outside the grid"""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"({x}, {y}) is outside the {width}x{height} grid")
        self.x = x
        self.y = y


class ValidationError(PixelArtError):
    """Raised when input validation fails"""
    pass


class PaletteError(PixelArtError):
    """Raised when palette operations fail"""
    pass


class FileOperationError(PixelArtError):
    """Raised when file operations fail"""
    pass


class EncodingFailedError(FileOperationError):
    """Raised when the rendered image cannot be encoded"""
    pass


class WriteFailedError(FileOperationError):
    """Raised when the encoded image cannot be written to its destination"""
    pass


def format_error_message(operation: str, error: Exception) -> str:
    """
    Format an error message for user display.

    Args:
        operation: Description of the operation that failed
        error: The exception that was raised

    Returns:
        User-friendly error message
    """
    cause = error.__cause__

    if isinstance(error, EncodingFailedError):
        return f"Could not encode image during {operation}: {error}"
    elif isinstance(error, WriteFailedError):
        if isinstance(cause, PermissionError):
            return f"Permission denied during {operation}"
        elif isinstance(cause, OSError) and cause.errno == 28:  # No space left
            return f"Disk full - cannot complete {operation}"
        return f"Could not write file during {operation}: {error}"
    elif isinstance(error, FileNotFoundError):
        return f"File not found during {operation}"
    elif isinstance(error, PermissionError):
        return f"Permission denied during {operation}"
    elif isinstance(error, MemoryError):
        return f"Out of memory during {operation}"
    elif isinstance(error, PaletteError):
        return f"Palette error: {error}"
    elif isinstance(error, ValidationError):
        return f"Invalid input: {error}"
    else:
        return f"Failed to {operation}: {error}"
