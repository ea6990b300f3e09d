import numpy as np

from neocolor.utils.num_utils import round_half_away, np_round_half_away


def test_round_half_away():
    assert round_half_away(2.5) == 3
    assert round_half_away(3.5) == 4
    assert round_half_away(-2.5) == -3
    assert round_half_away(0.49) == 0
    assert round_half_away(127.5) == 128
    assert isinstance(round_half_away(1.2), int)


def test_np_round_half_away():
    values = np.array([2.5, 3.5, -2.5, 0.49, 127.5, 0.0])
    result = np_round_half_away(values)
    assert result.dtype == np.int64
    assert result.tolist() == [3, 4, -3, 0, 128, 0]
