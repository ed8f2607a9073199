"""
Compositing: paint a step's colour onto every still-active pixel.

Escaped pixels are never written again, so the colour they received on
their last active step stays on screen without being stored anywhere.
"""

import numpy as np

from .compute import paint_flagged, paint_flagged_rgb
from .errors import GridMismatchError


def _as_grid(pixel_buffer, shape):
    """View a pixel buffer as (height, width[, 3]) without copying."""
    height, width = shape
    if pixel_buffer.ndim == 1:
        if pixel_buffer.size != height * width:
            raise GridMismatchError(
                f"flat buffer has {pixel_buffer.size} pixels, grid has {height * width}")
        grid = pixel_buffer.reshape(shape)
        if not np.shares_memory(grid, pixel_buffer):
            raise GridMismatchError("flat pixel buffer must be contiguous")
        return grid
    if pixel_buffer.shape[:2] != (height, width) or pixel_buffer.ndim > 3:
        raise GridMismatchError(
            f"pixel buffer shape {pixel_buffer.shape} does not match grid {shape}")
    return pixel_buffer


def paint(dirty_flags, colour, pixel_buffer):
    """
    Write colour into pixel_buffer wherever dirty_flags is True.

    Args:
        dirty_flags: (height, width) boolean array from MandelbrotEngine.update
        colour: Native pixel value (int) or an (r, g, b) triple. A triple
            written to a 2D or flat buffer is packed as 0xRRGGBB.
        pixel_buffer: Externally owned array, modified in place. Either
            (height, width), a flat array of height*width pixels, or
            (height, width, 3) uint8.
    """
    dirty_flags = np.asarray(dirty_flags)
    if dirty_flags.ndim != 2:
        raise GridMismatchError(f"flags must be 2D, got shape {dirty_flags.shape}")
    grid = _as_grid(pixel_buffer, dirty_flags.shape)
    flags = dirty_flags.astype(np.bool_, copy=False)

    if grid.ndim == 3:
        if grid.shape[2] != 3:
            raise GridMismatchError(f"RGB buffer needs 3 channels, got {grid.shape[2]}")
        r, g, b = (grid.dtype.type(v) for v in colour)
        paint_flagged_rgb(flags, r, g, b, grid)
    else:
        if not np.isscalar(colour):
            colour = pack_rgb(colour)
        # 32-bit pixel values wrap when the buffer is signed
        native = np.array([int(colour)], dtype=np.int64).astype(grid.dtype)[0]
        paint_flagged(flags, native, grid)


def pack_rgb(colour):
    """Pack an (r, g, b) triple into a 0xRRGGBB integer."""
    r, g, b = (int(v) for v in colour)
    return (r << 16) | (g << 8) | b


def reset_all(dirty_flags):
    """Mark every pixel dirty, so the next paint covers the whole buffer."""
    dirty_flags.fill(True)
