from __future__ import annotations
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import UnitTriple, UnitArray


def hsb_to_hsl(h: float, s: float, v: float) -> UnitTriple:
    """
    HSL from HSB. Hue passes through unchanged.

    Input:
        h ∈ [0, 360), s ∈ [0, 1], v ∈ [0, 1]

    Output:
        h ∈ [0, 360), s ∈ [0, 1], l ∈ [0, 1]

    Saturation is 0 at both ends of the lightness axis (black and white).
    """
    l = (2.0 - s) * v
    if l == 0 or l == 2.0:
        sat = 0.0
    else:
        sat = s * v / (l if l <= 1.0 else 2 - l)
    return h, sat, l * 5 / 10


def np_hsb_to_hsl(h: UnitArray, s: UnitArray, v: UnitArray) -> NDArray:
    h, s, v = np.broadcast_arrays(
        np.asarray(h, dtype=float),
        np.asarray(s, dtype=float),
        np.asarray(v, dtype=float),
    )
    l = (2.0 - s) * v
    degenerate = (l == 0) | (l == 2.0)
    denom = np.where(l <= 1.0, l, 2 - l)
    denom = np.where(degenerate, 1.0, denom)
    sat = np.where(degenerate, 0.0, s * v / denom)
    return np.stack([h, sat, l * 5 / 10], axis=-1)
