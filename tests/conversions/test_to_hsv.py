import numpy as np

from chromacss.conversions import rgb_to_hsv, np_rgb_to_hsv, hsl_to_hsv, np_hsl_to_hsv, hsl_to_rgb
from ..samples import samples_rgb_hsv, samples_hsl_rgb


def test_rgb_to_hsv():
    for rgb, hsv_expected in samples_rgb_hsv.items():
        assert rgb_to_hsv(*rgb) == hsv_expected


def test_rgb_to_hsv_numpy():
    the_matrix = np.array(list(samples_rgb_hsv.keys()))
    expected = np.array(list(samples_rgb_hsv.values()))
    assert np.array_equal(np_rgb_to_hsv(the_matrix), expected)


def test_hsl_to_hsv():
    assert hsl_to_hsv(0, 100, 50) == (0, 100, 100)
    assert hsl_to_hsv(240, 100, 50) == (240, 100, 100)
    for hsl in samples_hsl_rgb:
        assert hsl_to_hsv(*hsl) == rgb_to_hsv(*hsl_to_rgb(*hsl))


def test_hsl_to_hsv_numpy():
    the_matrix = np.array(list(samples_hsl_rgb.keys()))
    expected = np.array([hsl_to_hsv(*hsl) for hsl in samples_hsl_rgb])
    assert np.array_equal(np_hsl_to_hsv(the_matrix), expected)
