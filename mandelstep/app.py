"""
Main application module for the incremental Mandelbrot viewer.

Contains the MandelbrotApp class which handles:
- Window setup and main loop
- User input (click to zoom, screenshots, quit)
- Feeding one engine step per frame into the screen surface
"""

import pygame

from .colormaps import generate_palette
from .compute import warmup_jit
from .errors import InvalidRegion
from .region import Region
from .renderer import IncrementalRenderer
from .screenshot import next_screenshot_path
from .settings import load_settings


class MandelbrotApp:
    """
    Main application class for the Mandelbrot viewer.

    Handles the pygame window and event loop, and paints each engine
    step straight into the display surface.
    """

    CAPTION = "mandelbrot"

    # Zoom factors applied to both spans around the clicked point
    ZOOM_IN_FACTOR = 0.5
    ZOOM_OUT_FACTOR = 2.0

    def __init__(self, width=None, height=None, settings=None):
        """
        Initialize the application.

        Args:
            width: Window width in pixels (overrides settings; 0 = screen size)
            height: Window height in pixels (overrides settings; 0 = screen size)
            settings: Settings dict (default: load_settings())
        """
        self.settings = settings if settings is not None else load_settings()
        if width is not None:
            self.settings["width"] = width
        if height is not None:
            self.settings["height"] = height

        # Pygame state (initialized in run())
        self.screen = None

        self.renderer = None
        self.background = tuple(self.settings["background"])
        self.running = False

    def run(self):
        """Run the application main loop."""
        self._init_pygame()
        self._init_renderer()

        self.running = True
        while self.running:
            self._handle_events()
            if not self.renderer.finished:
                self._paint(self.renderer.step)
            pygame.display.flip()
            pygame.time.wait(self.settings["frame_delay_ms"])

        pygame.quit()

    def _init_pygame(self):
        """Initialize pygame and create the screen surface."""
        pygame.init()
        size = (self.settings["width"], self.settings["height"])
        # An explicit window size always opens a window
        fullscreen = self.settings["fullscreen"] and size == (0, 0)
        flags = pygame.FULLSCREEN if fullscreen else 0
        self.screen = pygame.display.set_mode(size, flags, 32)
        pygame.display.set_caption(self.CAPTION)

    def _init_renderer(self):
        """Build the palette and engine for the actual surface size."""
        pygame.display.set_caption("Compiling (first run only)...")
        warmup_jit()

        width, height = self.screen.get_size()
        params = self.settings["palette"]
        palette = generate_palette(params["start"], params["rotations"],
                                   params["hue"], params["gamma"], params["levels"])
        self.renderer = IncrementalRenderer(width, height, palette=palette,
                                            max_steps=self.settings["max_steps"])
        self.renderer.set_region(*Region.for_aspect(width, height))
        self._clear()
        pygame.display.set_caption(self.CAPTION)

    def _paint(self, paint_pass):
        """
        Run a paint pass against the locked screen pixels.

        The surface stays locked while the pixel array exists, so the
        display never sees a half-written frame.
        """
        pixels = pygame.surfarray.pixels2d(self.screen)
        try:
            # surfarray is indexed [x, y]; the engine grid is [y, x]
            paint_pass(pixels.T, self.screen.map_rgb)
        finally:
            del pixels

    def _clear(self):
        background = self.screen.map_rgb(self.background)
        self._paint(lambda buffer, _: self.renderer.clear(buffer, background))

    def _handle_events(self):
        """Process all pending pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYUP:
                self._handle_key(event)
            elif event.type == pygame.MOUSEBUTTONUP:
                self._handle_click(event)

    def _handle_key(self, event):
        """Handle keyboard input."""
        if event.key == pygame.K_ESCAPE:
            self.running = False
        elif event.key in (pygame.K_PRINTSCREEN, pygame.K_s):
            self._save_screenshot()

    def _handle_click(self, event):
        """Left click zooms in, right click zooms out, anything else is ignored."""
        if event.button == 1:
            factor = self.ZOOM_IN_FACTOR
        elif event.button == 3:
            factor = self.ZOOM_OUT_FACTOR
        else:
            return

        x, y = event.pos
        try:
            self.renderer.zoom(x, y, factor)
        except InvalidRegion as e:
            print(f"Zoom ignored: {e}")
            return
        self._clear()

    def _save_screenshot(self):
        """Save the current screen to the next free mandelbrot_NNN.png."""
        filename = next_screenshot_path(self.settings["screenshot_dir"])
        pygame.image.save(self.screen, filename)
        print(f"Screenshot saved to: {filename}")


def run(width=None, height=None, settings_path=None):
    """
    Run the Mandelbrot viewer.

    Args:
        width: Window width (default from settings; 0 = screen size)
        height: Window height (default from settings; 0 = screen size)
        settings_path: Alternative settings.json to load
    """
    app = MandelbrotApp(width, height, settings=load_settings(settings_path))
    try:
        app.run()
    except KeyboardInterrupt:
        pygame.quit()
