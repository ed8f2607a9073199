import os

from mandelstep.screenshot import next_screenshot_path, screenshot_name


def test_names_are_zero_padded():
    assert screenshot_name(0) == "mandelbrot_000.png"
    assert screenshot_name(42) == "mandelbrot_042.png"


def test_next_path_skips_existing(tmp_path):
    for index in (0, 1):
        (tmp_path / screenshot_name(index)).write_bytes(b"")
    assert next_screenshot_path(str(tmp_path)) == os.path.join(str(tmp_path), "mandelbrot_002.png")


def test_next_path_in_empty_directory(tmp_path):
    assert next_screenshot_path(str(tmp_path)).endswith("mandelbrot_000.png")
