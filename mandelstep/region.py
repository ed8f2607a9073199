"""
Complex-plane regions and the pixel -> complex transform.

A Region is an immutable rectangle in the complex plane. The RegionMapper
ties a region to a fixed pixel grid and caches the coordinate of every
pixel centre, recomputed only when the region changes.
"""

from collections import namedtuple

import numpy as np

from .compute import compute_coordinates, pixel_to_complex
from .errors import InvalidRegion


class Region(namedtuple("Region", ["r_min", "r_max", "i_min", "i_max"])):
    """
    Rectangle in the complex plane: real range x imaginary range.

    Construction does not validate; call validate() (RegionMapper does)
    before using a region that came from user input.
    """

    __slots__ = ()

    @classmethod
    def for_aspect(cls, width, height, r_min=-1.5, r_max=0.5):
        """
        Start-up view for a screen of the given size.

        The real range is fixed and the imaginary range is set to
        +/- height/width so the image is not stretched.
        """
        aspect = float(height) / float(width)
        return cls(float(r_min), float(r_max), -aspect, aspect)

    @property
    def real_span(self):
        return self.r_max - self.r_min

    @property
    def imag_span(self):
        return self.i_max - self.i_min

    @property
    def center(self):
        return ((self.r_min + self.r_max) / 2.0,
                (self.i_min + self.i_max) / 2.0)

    def validate(self):
        """Raise InvalidRegion unless both axes are strictly increasing."""
        # Written as 'not <' so NaN bounds fail too
        if not (self.r_min < self.r_max):
            raise InvalidRegion(
                f"real range is empty or inverted: [{self.r_min}, {self.r_max}]")
        if not (self.i_min < self.i_max):
            raise InvalidRegion(
                f"imaginary range is empty or inverted: [{self.i_min}, {self.i_max}]")
        return self

    def zoomed(self, real, imag, factor):
        """
        Region centred on (real, imag) with both spans scaled by factor.

        factor < 1 zooms in, factor > 1 zooms out. A left click in the
        viewer uses 0.5, a right click 2.0.
        """
        half_r = self.real_span * factor / 2.0
        half_i = self.imag_span * factor / 2.0
        return Region(real - half_r, real + half_r, imag - half_i, imag + half_i)


class RegionMapper:
    """
    Affine pixel -> complex transform for a fixed grid.

    Attributes:
        width, height: Grid dimensions in pixels (fixed)
        region: Current Region, or None before the first set_region
        real, imag: (height, width) float64 pixel-centre coordinates
    """

    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.region = None
        self.real = np.zeros((height, width), dtype=np.float64)
        self.imag = np.zeros((height, width), dtype=np.float64)

    def set_region(self, r_min, r_max, i_min, i_max):
        """
        Replace the current region and recompute the coordinate grids.

        Raises:
            InvalidRegion: min >= max on either axis. The previous region
                and grids are left untouched.
        """
        region = Region(float(r_min), float(r_max), float(i_min), float(i_max))
        region.validate()
        compute_coordinates(region.r_min, region.r_max, region.i_min, region.i_max,
                            self.real, self.imag)
        self.region = region
        return region

    def to_complex(self, x, y):
        """Complex coordinate of pixel (x, y) as a (real, imag) tuple."""
        if self.region is None:
            raise RuntimeError("no region set; call set_region first")
        r_min, r_max, i_min, i_max = self.region
        return pixel_to_complex(r_min, r_max, i_min, i_max,
                                self.width, self.height, float(x), float(y))
