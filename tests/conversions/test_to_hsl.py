import numpy as np

from neocolor.conversions.to_hsl import hsb_to_hsl, np_hsb_to_hsl
from tests.samples import samples_hsb_hsl

tolerance = 1e-9


def test_hsb_to_hsl():
    for (h, s, v), (h_exp, s_exp, l_exp) in samples_hsb_hsl.items():
        h_out, s_out, l_out = hsb_to_hsl(h, s, v)

        assert h_out == h_exp
        assert abs(s_out - s_exp) < tolerance
        assert abs(l_out - l_exp) < tolerance


def test_hsb_to_hsl_black_and_white_have_no_saturation():
    assert hsb_to_hsl(90.0, 0.0, 1.0) == (90.0, 0.0, 1.0)
    assert hsb_to_hsl(90.0, 1.0, 0.0) == (90.0, 0.0, 0.0)


def test_hsb_to_hsl_numpy():
    the_matrix = np.array(list(samples_hsb_hsl.keys()))
    expected = np.array(list(samples_hsb_hsl.values()))
    result = np_hsb_to_hsl(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.allclose(result, expected, atol=tolerance)


def test_hsb_to_hsl_numpy_matches_scalar():
    rng = np.random.default_rng(11)
    hsb = rng.random((300, 3)) * np.array([360.0, 1.0, 1.0])
    result = np_hsb_to_hsl(hsb[:, 0], hsb[:, 1], hsb[:, 2])
    expected = np.array([hsb_to_hsl(*(float(c) for c in row)) for row in hsb])
    np.testing.assert_allclose(result, expected, atol=1e-12)
