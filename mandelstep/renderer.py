"""
Frame-by-frame Mandelbrot renderer.

The IncrementalRenderer class ties the engine, palette and compositor
together into the per-frame loop:
- One escape-time step per frame, so the image builds up progressively
- The colour for the new step count is painted onto every active pixel
- Escaped pixels keep the colour of the step they escaped on
- A region change restarts the epoch and repaints the background

It knows nothing about the display: the caller hands in the pixel buffer
and, optionally, a function converting RGB to the buffer's native encoding.
"""

import numpy as np

from .colormaps import get_default_palette
from .compositor import paint
from .engine import MandelbrotEngine


class IncrementalRenderer:
    """
    Drives a MandelbrotEngine one step per frame.

    Usage:
        renderer = IncrementalRenderer(800, 600)
        renderer.set_region(*Region.for_aspect(800, 600))
        renderer.clear(buffer, (255, 255, 255))

        # In your game loop:
        renderer.step(buffer, map_colour)

    Attributes:
        engine: The MandelbrotEngine being driven
        palette: Palette indexed by the step counter
        max_steps: Step ceiling; defaults to the palette length
    """

    def __init__(self, width, height, palette=None, max_steps=None):
        """
        Initialize the renderer.

        Args:
            width, height: Grid dimensions in pixels
            palette: Palette to colour steps with (default cubehelix, 1000 levels)
            max_steps: Fixed step ceiling (None = follow the palette length)
        """
        self.engine = MandelbrotEngine(width, height)
        self.palette = palette if palette is not None else get_default_palette()
        self._max_steps = max_steps

    @property
    def width(self):
        return self.engine.width

    @property
    def height(self):
        return self.engine.height

    @property
    def region(self):
        return self.engine.region

    @property
    def step_count(self):
        return self.engine.step_count

    @property
    def max_steps(self):
        if self._max_steps is not None:
            return self._max_steps
        return len(self.palette)

    @property
    def finished(self):
        """True once the ceiling is hit or every pixel has escaped."""
        return self.engine.step_count >= self.max_steps or self.engine.active_count == 0

    def set_palette(self, palette):
        """Swap the colour table. Already painted pixels are not recoloured."""
        self.palette = palette

    def set_region(self, r_min, r_max, i_min, i_max):
        """
        Move to a new region. Raises InvalidRegion and changes nothing
        if the bounds are degenerate.
        """
        return self.engine.set_region(r_min, r_max, i_min, i_max)

    def zoom(self, x, y, factor):
        """
        Re-centre on pixel (x, y) and scale both spans by factor.

        Args:
            x, y: Pixel position (e.g. a mouse click)
            factor: < 1 zooms in, > 1 zooms out

        Returns:
            The new Region
        """
        real, imag = self.engine.to_complex(x, y)
        new_region = self.engine.region.zoomed(real, imag, factor)
        return self.set_region(*new_region)

    def clear(self, pixel_buffer, colour):
        """
        Paint every pixel with a background colour.

        Uses its own mask, so escaped pixels stay frozen in the engine.
        """
        paint(np.ones(self.engine.shape, dtype=np.bool_), colour, pixel_buffer)

    def step(self, pixel_buffer, map_colour=None):
        """
        Advance one step and paint its colour onto the active pixels.

        Args:
            pixel_buffer: Buffer handed to the compositor
            map_colour: Optional callable (r, g, b) -> native pixel value;
                without it 2D buffers receive 0xRRGGBB

        Returns:
            True if a step was taken, False once the ceiling is reached
        """
        if self.engine.step_count >= self.max_steps:
            return False
        flags = self.engine.update()
        colour = self.palette.colour_at(self.engine.step_count)
        if map_colour is not None:
            colour = map_colour(colour)
        paint(flags, colour, pixel_buffer)
        return True


def render(region, width, height, palette=None, steps=None, background=(255, 255, 255)):
    """
    Render a region to an RGB image without a display.

    Args:
        region: Region (or 4-tuple) to render
        width, height: Image size in pixels
        palette: Palette to use (default cubehelix)
        steps: Number of steps (default: palette length)
        background: Colour of pixels before their first step

    Returns:
        (height, width, 3) uint8 array
    """
    renderer = IncrementalRenderer(width, height, palette=palette, max_steps=steps)
    renderer.set_region(*region)
    image = np.zeros((height, width, 3), dtype=np.uint8)
    renderer.clear(image, background)
    while renderer.step(image):
        pass
    return image
