from __future__ import annotations
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import UnitTriple, UnitArray


def unit_rgb_to_hsb(r: float, g: float, b: float) -> UnitTriple:
    """
    HSB (HSV) from normalized RGB.

    Input:
        r, g, b ∈ [0, 1]

    Output:
        h ∈ [0, 360)
        s ∈ [0, 1]
        v ∈ [0, 1]

    Black, gray and white have no hue; they return ``(0, 0, v)``. Otherwise
    the hue sector is picked from the smallest channel, checking red first,
    then blue, then green.
    """
    mn = min(r, g, b)
    mx = max(r, g, b)

    # Black-Gray-White
    if mn == mx:
        return 0.0, 0.0, mn

    if mn == r:
        d = g - b
        h = 3
    elif mn == b:
        d = r - g
        h = 1
    else:
        d = b - r
        h = 5

    return 60.0 * (h - d / (mx - mn)), (mx - mn) / mx, mx


def np_unit_rgb_to_hsb(r: UnitArray, g: UnitArray, b: UnitArray) -> NDArray:
    """
    Vectorized: HSB from normalized RGB arrays.

    Returns:
        Array of shape ``broadcast(r, g, b).shape + (3,)`` holding h, s, v.
    """
    r, g, b = np.broadcast_arrays(
        np.asarray(r, dtype=float),
        np.asarray(g, dtype=float),
        np.asarray(b, dtype=float),
    )
    mn = np.minimum(np.minimum(r, g), b)
    mx = np.maximum(np.maximum(r, g), b)
    delta = mx - mn
    achromatic = delta == 0

    min_is_r = mn == r
    min_is_b = ~min_is_r & (mn == b)
    d = np.where(min_is_r, g - b, np.where(min_is_b, r - g, b - r))
    base = np.where(min_is_r, 3.0, np.where(min_is_b, 1.0, 5.0))

    # Achromatic entries are overwritten below; keep the divisions finite.
    safe_delta = np.where(achromatic, 1.0, delta)
    safe_max = np.where(mx == 0, 1.0, mx)

    h = np.where(achromatic, 0.0, 60.0 * (base - d / safe_delta))
    s = np.where(achromatic, 0.0, delta / safe_max)
    return np.stack([h, s, mx], axis=-1)


def hsl_to_hsb(h: float, s: float, l: float) -> UnitTriple:
    """
    HSB from HSL. Hue passes through unchanged.

    Exact inverse of :func:`neocolor.conversions.to_hsl.hsb_to_hsl`.
    """
    t = s * (l if l < 0.5 else 1 - l)
    return h, (2 * t) / (l + t) if t > 0 else 0.0, l + t


def np_hsl_to_hsb(h: UnitArray, s: UnitArray, l: UnitArray) -> NDArray:
    h, s, l = np.broadcast_arrays(
        np.asarray(h, dtype=float),
        np.asarray(s, dtype=float),
        np.asarray(l, dtype=float),
    )
    t = s * np.where(l < 0.5, l, 1 - l)
    positive = t > 0
    denom = np.where(positive, l + t, 1.0)
    s_out = np.where(positive, (2 * t) / denom, 0.0)
    return np.stack([h, s_out, l + t], axis=-1)
