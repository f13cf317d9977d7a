#!/usr/bin/env python3
"""
Raster export for the pixel art maker

Renders the grid into an upscaled RGBA image, encodes it as PNG and writes it
atomically to disk.
"""

# Standard library imports
import io
import os
import stat
import tempfile
from pathlib import Path
from typing import Union

# Third-party imports
import numpy as np
from PIL import Image

from .pixel_art_exceptions import EncodingFailedError, WriteFailedError
from .pixel_art_models import PixelGrid, validate_pixel_scale
from .pixel_art_utils import debug_log


def scale_image_data(image_data: np.ndarray, scale: int) -> np.ndarray:
    """Nearest-neighbor upscaling of a (height, width, channels) array"""
    if scale == 1:
        return image_data.copy()

    # Each cell becomes a solid scale x scale block
    scaled_data = np.repeat(image_data, scale, axis=0)
    scaled_data = np.repeat(scaled_data, scale, axis=1)
    return scaled_data


def render(grid: PixelGrid, pixel_scale: int) -> Image.Image:
    """
    Render the grid as an RGBA image of (width * scale, height * scale)

    Pure: the grid is only read, and the same contents and scale always
    produce the same image.
    """
    validate_pixel_scale(pixel_scale)
    scaled = scale_image_data(grid.to_array(), pixel_scale)
    image = Image.fromarray(np.ascontiguousarray(scaled))
    debug_log("EXPORT", f"Rendered {grid.width}x{grid.height} grid at {pixel_scale}x -> {image.size}", "DEBUG")
    return image


def encode_png(image: Image.Image) -> bytes:
    """
    Encode an image as PNG

    Raises:
        EncodingFailedError: If Pillow cannot produce a PNG for the image
    """
    buffer = io.BytesIO()
    try:
        image.save(buffer, format="PNG")
    except (OSError, ValueError, KeyError) as e:
        debug_log("EXPORT", f"PNG encoding failed: {e}", "ERROR")
        raise EncodingFailedError(f"Cannot encode {image.mode} image as PNG: {e}") from e
    return buffer.getvalue()


def _target_mode(destination: Path) -> int:
    """Permission bits for the written file: kept when replacing, umask for new files"""
    try:
        return stat.S_IMODE(os.stat(destination).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_atomic(data: bytes, path: Union[str, Path]) -> Path:
    """
    Write bytes to path so readers see either the old file or the new one

    The data goes to a temporary file in the destination directory which is
    then renamed over the destination.

    Raises:
        WriteFailedError: If the destination cannot be written
    """
    destination = Path(path).expanduser()
    directory = destination.parent

    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{destination.name}.", suffix=".tmp", dir=directory
        )
    except OSError as e:
        raise WriteFailedError(f"Cannot write to directory {directory}: {e}") from e

    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        # mkstemp creates the file as 0600
        os.chmod(tmp_name, _target_mode(destination))
        os.replace(tmp_name, destination)
    except OSError as e:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise WriteFailedError(f"Cannot write {destination}: {e}") from e

    debug_log("EXPORT", f"Wrote {len(data)} bytes to {destination}")
    return destination


def export_png(grid: PixelGrid, path: Union[str, Path], pixel_scale: int) -> Path:
    """Render the grid, encode it as PNG and write it atomically to path"""
    return write_atomic(encode_png(render(grid, pixel_scale)), path)
