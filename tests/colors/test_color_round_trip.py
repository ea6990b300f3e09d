import itertools

import numpy as np

from neocolor import Color
from neocolor.conversions import np_pack, np_unpack, np_unit_rgb_to_hsb, np_hsb_to_argb

CHANNELS = range(0, 256, 17)


def test_round_trip_color_hsb():
    """Every opaque color survives RGB -> HSB -> RGB exactly."""
    for r, g, b in itertools.product(CHANNELS, repeat=3):
        color = Color.from_rgb(r, g, b)
        assert color.compute_hsb().to_color() == color


def test_round_trip_color_hsl():
    for r, g, b in itertools.product(CHANNELS, repeat=3):
        color = Color.from_rgb(r, g, b)
        assert color.compute_hsl().to_color() == color


def test_round_trip_transparent_and_hidden():
    for value in (0x00112233, 0x00FFFFFF, 0x00000000):
        color = Color(value)
        assert color.compute_hsb().to_color() == color
        assert color.compute_hsl().to_color() == color


def test_round_trip_numpy_matches_color():
    channels = np.array(list(itertools.product(CHANNELS, repeat=3)))
    packed = np_pack(0xFF, channels[:, 0], channels[:, 1], channels[:, 2])

    argb = np_unpack(packed)
    hsb = np_unit_rgb_to_hsb(argb[:, 1] / 255, argb[:, 2] / 255, argb[:, 3] / 255)
    again = np_hsb_to_argb(hsb[:, 0], hsb[:, 1], hsb[:, 2], 1.0)

    assert again.tolist() == packed.tolist()
    expected = [Color(int(v)).compute_hsb().to_color().value for v in packed]
    assert again.tolist() == expected
