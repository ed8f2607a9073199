"""
Incremental escape-time engine.

Instead of running each pixel to completion, the engine advances the whole
grid by exactly one z² + c step per update() call. Every pixel that is still
active has therefore been iterated exactly step_count times, so no
per-pixel iteration counter is kept: the global counter is the iteration
count of every active pixel, and an escaped pixel simply stops.
"""

import numpy as np

from .compute import step_active
from .region import RegionMapper


class MandelbrotEngine:
    """
    Owns the per-pixel iteration state for a fixed-size grid.

    Usage:
        engine = MandelbrotEngine(640, 480)
        engine.set_region(-1.5, 0.5, -0.75, 0.75)
        while engine.step_count < 1000:
            flags = engine.update()
            # paint this step's colour wherever flags is True

    Attributes:
        zr, zi: (height, width) float64 iterates
        active: (height, width) bool flags, True while a pixel is iterating
        step_count: Steps taken since the last region change or reset
    """

    def __init__(self, width, height):
        """
        Allocate the grid. Dimensions are fixed for the engine's lifetime.

        Args:
            width, height: Grid size in pixels, positive integers
        """
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < 1:
                raise ValueError(f"{name} must be positive, got {value}")

        self.width = int(width)
        self.height = int(height)
        self.mapper = RegionMapper(self.width, self.height)

        self.zr = np.zeros(self.shape, dtype=np.float64)
        self.zi = np.zeros(self.shape, dtype=np.float64)
        self.active = np.ones(self.shape, dtype=np.bool_)
        self.step_count = 0

    @property
    def shape(self):
        """Array shape of every per-pixel container: (height, width)."""
        return (self.height, self.width)

    @property
    def region(self):
        return self.mapper.region

    @property
    def active_count(self):
        """Number of pixels that have not escaped yet."""
        return int(np.count_nonzero(self.active))

    def set_region(self, r_min, r_max, i_min, i_max):
        """
        Move to a new region and start a fresh epoch.

        Raises:
            InvalidRegion: Degenerate or inverted bounds. Region, iterates,
                flags and step counter are all left as they were.
        """
        region = self.mapper.set_region(r_min, r_max, i_min, i_max)
        self.reset()
        return region

    def reset(self):
        """Restart the current region from z = 0 with every pixel active."""
        self.zr.fill(0.0)
        self.zi.fill(0.0)
        self.active.fill(True)
        self.step_count = 0

    def update(self):
        """
        Advance every active pixel by one step.

        Returns:
            The active flags after this step. This is the engine's own
            array, so treat it as read-only.
        """
        if self.mapper.region is None:
            raise RuntimeError("no region set; call set_region before update")
        step_active(self.zr, self.zi, self.mapper.real, self.mapper.imag, self.active)
        self.step_count += 1
        return self.active

    def to_complex(self, x, y):
        """Complex coordinate of pixel (x, y) in the current region."""
        return self.mapper.to_complex(x, y)
