import numpy as np
import pytest

from mandelstep.compositor import pack_rgb, paint, reset_all
from mandelstep.errors import GridMismatchError


def checkerboard(height, width):
    y, x = np.indices((height, width))
    return (x + y) % 2 == 0


def test_unflagged_pixels_are_untouched():
    rng = np.random.default_rng(7)
    buffer = rng.integers(0, 2**32, size=(4, 5), dtype=np.uint32)
    before = buffer.copy()
    flags = checkerboard(4, 5)

    paint(flags, 0xFF00FF, buffer)

    assert np.array_equal(buffer[~flags], before[~flags])
    assert (buffer[flags] == 0xFF00FF).all()


def test_flat_buffer():
    buffer = np.zeros(20, dtype=np.uint32)
    flags = np.zeros((4, 5), dtype=np.bool_)
    flags[1, 2] = True
    paint(flags, 9, buffer)
    assert buffer[1 * 5 + 2] == 9
    assert buffer.sum() == 9


def test_transposed_view_is_written_through():
    # pygame.surfarray hands out [x, y] arrays; the compositor gets the .T view
    surface = np.zeros((5, 4), dtype=np.uint32)
    flags = checkerboard(4, 5)
    paint(flags, 7, surface.T)
    assert (surface.T[flags] == 7).all()
    assert (surface.T[~flags] == 0).all()


def test_rgb_buffer():
    image = np.zeros((3, 3, 3), dtype=np.uint8)
    flags = np.eye(3, dtype=np.bool_)
    paint(flags, (10, 20, 30), image)
    assert image[1, 1].tolist() == [10, 20, 30]
    assert image[0, 1].tolist() == [0, 0, 0]


def test_signed_buffer_wraps_colour():
    buffer = np.zeros((2, 2), dtype=np.int32)
    paint(np.ones((2, 2), dtype=np.bool_), 0xFFFFFFFF, buffer)
    assert (buffer == -1).all()


@pytest.mark.parametrize("buffer", [
    np.zeros((5, 4), dtype=np.uint32),
    np.zeros(19, dtype=np.uint32),
    np.zeros((4, 5, 4), dtype=np.uint8),
])
def test_mismatched_buffer(buffer):
    with pytest.raises(GridMismatchError):
        paint(np.ones((4, 5), dtype=np.bool_), 1, buffer)


def test_reset_all():
    flags = np.zeros((3, 2), dtype=np.bool_)
    reset_all(flags)
    assert flags.all()


def test_rgb_triple_is_packed_for_native_buffer():
    buffer = np.zeros((2, 3), dtype=np.uint32)
    paint(np.ones((2, 3), dtype=np.bool_), (0x12, 0x34, 0x56), buffer)
    assert (buffer == 0x123456).all()
    assert pack_rgb((255, 0, 1)) == 0xFF0001
