"""
Colour tables for the incremental Mandelbrot viewer.

Palettes are built with Dave Green's cubehelix scheme: luminance rises
monotonically from black to white while the hue rotates around the colour
cube, which keeps the ramp readable in greyscale. A palette is indexed by
the engine's step counter, so its length is also the natural step ceiling.

To add a new preset:
1. Pick (start, rotations, hue, gamma) values
2. Add them to the PALETTES dictionary at the bottom of this file
"""

import math

import numpy as np


DEFAULT_LEVELS = 1000  # One colour per step up to the default ceiling


class Palette:
    """
    Immutable table of RGB colours.

    Attributes:
        colours: (nlev, 3) uint8 array, read-only
    """

    def __init__(self, colours):
        colours = np.array(colours, dtype=np.uint8)
        if colours.ndim != 2 or colours.shape[1] != 3 or len(colours) == 0:
            raise ValueError(f"palette must be a non-empty (n, 3) table, got {colours.shape}")
        colours.setflags(write=False)
        self.colours = colours

    def __len__(self):
        return len(self.colours)

    def __eq__(self, other):
        if not isinstance(other, Palette):
            return NotImplemented
        return np.array_equal(self.colours, other.colours)

    __hash__ = None

    def __repr__(self):
        return f"Palette(nlev={len(self)})"

    def colour_at(self, index):
        """
        Colour for a step index, clamped into the table.

        Frame counters may run past the end of the table, so out-of-range
        indices are not an error.
        """
        index = min(max(int(index), 0), len(self.colours) - 1)
        r, g, b = self.colours[index]
        return int(r), int(g), int(b)


def _to_byte(value):
    """Clamp a channel to [0, 1] and round to 0..255."""
    return int(min(1.0, max(0.0, value)) * 255 + 0.5)


def generate_palette(start, rotations, hue, gamma, nlev):
    """
    Build a cubehelix colour ramp.

    Args:
        start: Starting hue angle, in units of thirds of a turn (0..3)
        rotations: Number of R->G->B rotations over the ramp (may be negative)
        hue: Saturation of the helix around the grey diagonal
        gamma: Luminance exponent, > 0 (< 1 brightens the low end)
        nlev: Number of entries, >= 1

    Returns:
        Palette with nlev entries, black first and white last
    """
    if isinstance(nlev, bool) or not isinstance(nlev, (int, np.integer)) or nlev < 1:
        raise ValueError(f"nlev must be an integer >= 1, got {nlev!r}")
    if not gamma > 0:
        raise ValueError(f"gamma must be positive, got {gamma!r}")

    colours = np.zeros((nlev, 3), dtype=np.uint8)
    denom = max(nlev - 1, 1)
    for i in range(nlev):
        x = i / denom
        lum = x ** gamma
        phi = 2.0 * math.pi * (start / 3.0 + 1.0 + rotations * x)
        amp = hue * lum * (1.0 - lum) / 2.0
        cos_phi = math.cos(phi)
        sin_phi = math.sin(phi)

        colours[i, 0] = _to_byte(lum + amp * (-0.14861 * cos_phi + 1.78277 * sin_phi))
        colours[i, 1] = _to_byte(lum + amp * (-0.29227 * cos_phi - 0.90649 * sin_phi))
        colours[i, 2] = _to_byte(lum + amp * (1.97294 * cos_phi))
    return Palette(colours)


def grayscale_palette(nlev=DEFAULT_LEVELS):
    """Linear black -> white ramp."""
    if isinstance(nlev, bool) or not isinstance(nlev, (int, np.integer)) or nlev < 1:
        raise ValueError(f"nlev must be an integer >= 1, got {nlev!r}")
    values = np.array([_to_byte(i / max(nlev - 1, 1)) for i in range(nlev)], dtype=np.uint8)
    return Palette(np.repeat(values[:, None], 3, axis=1))


# Registry of named cubehelix parameter sets: (start, rotations, hue, gamma).
# 'Grayscale' maps to None and is built by grayscale_palette instead.
PALETTES = {
    'Cubehelix': (0.0, 3.0, 1.0, 1.0),
    'Green': (0.5, -1.5, 1.0, 1.0),
    'Sunset': (1.0, 0.5, 1.5, 0.8),
    'Ocean': (2.5, -0.5, 1.2, 1.0),
    'Vivid': (0.0, 5.0, 2.0, 0.7),
    'Grayscale': None,
}


def get_palette(name, nlev=DEFAULT_LEVELS):
    """
    Get a preset palette by name.

    Raises:
        KeyError if name not found
    """
    params = PALETTES[name]
    if params is None:
        return grayscale_palette(nlev)
    start, rotations, hue, gamma = params
    return generate_palette(start, rotations, hue, gamma, nlev)


def get_default_palette(nlev=DEFAULT_LEVELS):
    """Get the default palette (Cubehelix)."""
    return get_palette('Cubehelix', nlev)


def list_palette_names():
    """Get list of available palette names."""
    return list(PALETTES.keys())
