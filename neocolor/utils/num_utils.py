import math
import numpy as np
from numpy import ndarray as NDArray


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


def np_round_half_away(values: NDArray) -> NDArray:
    """Vectorized: round halves away from zero, returning an int64 array."""
    values = np.asarray(values, dtype=float)
    return (np.sign(values) * np.floor(np.abs(values) + 0.5)).astype(np.int64)
