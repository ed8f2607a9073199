import math

import numpy as np
import pytest

from mandelstep.errors import InvalidRegion
from mandelstep.region import Region, RegionMapper


def test_corner_pixels_sample_pixel_centres():
    mapper = RegionMapper(8, 4)
    mapper.set_region(-2.0, 1.0, -1.0, 1.0)

    assert mapper.real.shape == (4, 8)
    assert mapper.real[0, 0] == pytest.approx(-2.0 + 3.0 / 16)
    assert mapper.imag[0, 0] == pytest.approx(-1.0 + 2.0 / 8)
    assert mapper.real[3, 7] == pytest.approx(1.0 - 3.0 / 16)
    assert mapper.imag[3, 7] == pytest.approx(1.0 - 2.0 / 8)


def test_to_complex_matches_grid():
    mapper = RegionMapper(5, 3)
    mapper.set_region(-1.5, 0.5, -0.6, 0.6)
    for y in range(3):
        for x in range(5):
            real, imag = mapper.to_complex(x, y)
            assert real == pytest.approx(mapper.real[y, x])
            assert imag == pytest.approx(mapper.imag[y, x])


def test_rows_vary_imaginary_columns_vary_real():
    mapper = RegionMapper(6, 4)
    mapper.set_region(0.0, 6.0, 0.0, 4.0)
    assert np.allclose(mapper.real[0], [0.5, 1.5, 2.5, 3.5, 4.5, 5.5])
    assert np.allclose(mapper.imag[:, 0], [0.5, 1.5, 2.5, 3.5])


@pytest.mark.parametrize("bounds", [
    (1.0, 1.0, 0.0, 1.0),
    (1.0, 0.0, 0.0, 1.0),
    (0.0, 1.0, 0.5, 0.5),
    (0.0, 1.0, 1.0, -1.0),
    (math.nan, 1.0, 0.0, 1.0),
])
def test_invalid_region_leaves_mapper_untouched(bounds):
    mapper = RegionMapper(4, 4)
    mapper.set_region(-2.0, 1.0, -1.0, 1.0)
    real, imag = mapper.real.copy(), mapper.imag.copy()

    with pytest.raises(InvalidRegion):
        mapper.set_region(*bounds)

    assert mapper.region == Region(-2.0, 1.0, -1.0, 1.0)
    assert np.array_equal(mapper.real, real)
    assert np.array_equal(mapper.imag, imag)


def test_invalid_region_is_a_value_error():
    with pytest.raises(ValueError):
        Region(0.0, 0.0, 0.0, 1.0).validate()


def test_to_complex_without_region():
    with pytest.raises(RuntimeError):
        RegionMapper(2, 2).to_complex(0, 0)


def test_for_aspect_keeps_pixels_square():
    region = Region.for_aspect(800, 600)
    assert region == (-1.5, 0.5, -0.75, 0.75)


def test_spans_and_center():
    region = Region(-2.0, 2.0, -1.0, 3.0)
    assert region.real_span == 4.0
    assert region.imag_span == 4.0
    assert region.center == (0.0, 1.0)


def test_zoomed_recentres_and_scales():
    region = Region(-2.0, 2.0, -1.0, 1.0)
    assert region.zoomed(0.5, 0.25, 0.5) == (-0.5, 1.5, -0.25, 0.75)
    assert region.zoomed(0.0, 0.0, 2.0) == (-4.0, 4.0, -2.0, 2.0)
