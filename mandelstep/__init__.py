"""
Incremental Mandelbrot Set Viewer Package

An interactive Mandelbrot set explorer that builds the image one
escape-time step per frame, using Pygame for display and Numba for
JIT-compiled per-pixel kernels.

Quick Start:
    from mandelstep import run
    run()

Or from command line:
    python -m mandelstep

Package Structure:
    - compute.py: JIT-compiled per-pixel kernels
    - region.py: Complex-plane regions and the pixel -> complex transform
    - engine.py: Incremental escape-time engine (one step per update)
    - colormaps.py: Cubehelix palette generation and colour lookup
    - compositor.py: Painting step colours into pixel buffers
    - renderer.py: Per-frame orchestration of engine, palette and compositor
    - settings.py: settings.json loading
    - app.py: Main application and event loop

Controls:
    - Left click: Zoom in x2 around the clicked point
    - Right click: Zoom out x2
    - PrintScreen / S: Save mandelbrot_NNN.png
    - ESC: Quit
"""

from .colormaps import (
    PALETTES,
    Palette,
    generate_palette,
    get_palette,
    list_palette_names,
)
from .compositor import paint, reset_all
from .engine import MandelbrotEngine
from .errors import GridMismatchError, InvalidRegion
from .region import Region, RegionMapper
from .renderer import IncrementalRenderer, render


def run(width=None, height=None, settings_path=None):
    """Start the interactive viewer (imports pygame lazily)."""
    from .app import run as _run
    _run(width, height, settings_path)


__version__ = "1.0.0"
__all__ = [
    "run",
    "MandelbrotEngine",
    "IncrementalRenderer",
    "render",
    "Region",
    "RegionMapper",
    "Palette",
    "PALETTES",
    "generate_palette",
    "get_palette",
    "list_palette_names",
    "paint",
    "reset_all",
    "InvalidRegion",
    "GridMismatchError",
]
