"""Screenshot file naming: mandelbrot_000.png, mandelbrot_001.png, ..."""

import os


SCREENSHOT_PATTERN = "mandelbrot_{:03d}.png"


def screenshot_name(index):
    return SCREENSHOT_PATTERN.format(index)


def next_screenshot_path(directory="."):
    """First name in the sequence that does not exist yet in directory."""
    index = 0
    while os.path.exists(os.path.join(directory, screenshot_name(index))):
        index += 1
    return os.path.join(directory, screenshot_name(index))
