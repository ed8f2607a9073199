"""
Escape-time kernels using Numba JIT compilation.

This module contains the performance-critical per-pixel loops. Every
kernel works in place on arrays shaped (height, width) so the caller owns
all memory:
- Coordinate grid for a region (pixel-centre sampling)
- A single z² + c step over every still-active pixel
- Painting a colour onto flagged pixels (native or RGB buffers)

Pixels are independent of each other, so the outer row loop runs with
prange; each row writes only its own cells.
"""

import numpy as np
from numba import jit, prange


ESCAPE_RADIUS_SQ = 4.0  # |z|² beyond this always diverges


@jit(nopython=True, cache=True)
def pixel_to_complex(r_min, r_max, i_min, i_max, width, height, x, y):
    """Map a (possibly fractional) pixel position to the complex plane."""
    cr = r_min + (x + 0.5) / width * (r_max - r_min)
    ci = i_min + (y + 0.5) / height * (i_max - i_min)
    return cr, ci


@jit(nopython=True, parallel=True, cache=True)
def compute_coordinates(r_min, r_max, i_min, i_max, real, imag):
    """
    Fill the coordinate grids for a region.

    Args:
        r_min, r_max: Real axis bounds
        i_min, i_max: Imaginary axis bounds
        real, imag: (height, width) float64 arrays, modified in place
    """
    height, width = real.shape
    for py in prange(height):
        for px in range(width):
            cr, ci = pixel_to_complex(r_min, r_max, i_min, i_max,
                                      width, height, px, py)
            real[py, px] = cr
            imag[py, px] = ci


@jit(nopython=True, parallel=True, cache=True)
def step_active(zr, zi, cr, ci, active):
    """
    Advance every active pixel by one iteration of z² + c.

    Pixels whose new iterate leaves the escape circle are switched off
    and never touched again until the arrays are reset.

    Args:
        zr, zi: Real and imaginary parts of the iterates (modified in place)
        cr, ci: Fixed pixel coordinates
        active: Boolean flags (modified in place)
    """
    height, width = active.shape
    for py in prange(height):
        for px in range(width):
            if active[py, px]:
                x = zr[py, px]
                y = zi[py, px]
                nr = x * x - y * y + cr[py, px]
                ni = 2.0 * x * y + ci[py, px]
                zr[py, px] = nr
                zi[py, px] = ni
                if nr * nr + ni * ni > ESCAPE_RADIUS_SQ:
                    active[py, px] = False


@jit(nopython=True, parallel=True, cache=True)
def paint_flagged(flags, colour, out):
    """
    Write a native-encoded colour into every flagged pixel.

    Args:
        flags: (height, width) boolean array
        colour: Pixel value, already in the buffer's dtype
        out: (height, width) pixel buffer, may be a strided view
    """
    height, width = flags.shape
    for py in prange(height):
        for px in range(width):
            if flags[py, px]:
                out[py, px] = colour


@jit(nopython=True, parallel=True, cache=True)
def paint_flagged_rgb(flags, r, g, b, out):
    """Same as paint_flagged for an (height, width, 3) uint8 image."""
    height, width = flags.shape
    for py in prange(height):
        for px in range(width):
            if flags[py, px]:
                out[py, px, 0] = r
                out[py, px, 1] = g
                out[py, px, 2] = b


def warmup_jit():
    """
    Warm up JIT compilation with small dummy arrays.

    Call this once at startup to pre-compile the Numba functions,
    avoiding a stall on the first frame.
    """
    real = np.zeros((4, 4), dtype=np.float64)
    imag = np.zeros((4, 4), dtype=np.float64)
    compute_coordinates(-2.0, 1.0, -1.0, 1.0, real, imag)
    zr = np.zeros_like(real)
    zi = np.zeros_like(imag)
    active = np.ones((4, 4), dtype=np.bool_)
    step_active(zr, zi, real, imag, active)
    paint_flagged(active, np.uint32(0), np.zeros((4, 4), dtype=np.uint32))
    paint_flagged_rgb(active, np.uint8(0), np.uint8(0), np.uint8(0),
                      np.zeros((4, 4, 3), dtype=np.uint8))
