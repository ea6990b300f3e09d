from __future__ import annotations
import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import UnitTriple, UnitArray
from ..types.constants import HUE_360, HUE_SECTORS, CHANNEL_MAX
from ..utils.num_utils import round_half_away, np_round_half_away
from .packing import pack_rgbo, np_pack_rgbo
from .to_hsb import hsl_to_hsb, np_hsl_to_hsb


def _hsb_sector_terms(h: float, s: float, v: float) -> tuple[int, float, float, float]:
    h = (h / HUE_360) * HUE_SECTORS
    hh = math.floor(h)
    b = v * (1 - s)
    c = v * (1 - (h - hh) * s)
    d = v * (1 - (1 - h + hh) * s)
    return hh % HUE_SECTORS, b, c, d


def _select_sector(sector: int, v: float, c: float, b: float, d: float) -> UnitTriple:
    if sector == 0:
        return v, d, b
    if sector == 1:
        return c, v, b
    if sector == 2:
        return b, v, d
    if sector == 3:
        return b, c, v
    if sector == 4:
        return d, b, v
    if sector == 5:
        return v, b, c
    # hh % 6 is always in 0..5; reaching this means the arithmetic above is broken.
    raise AssertionError(f"hue sector {sector!r} outside 0..{HUE_SECTORS - 1}")


def hsb_to_unit_rgb(h: float, s: float, v: float) -> UnitTriple:
    """
    Normalized RGB from HSB (HSV).

    Args:
        h: Hue in degrees. Any value is accepted; the sector wraps modulo 360.
        s: Saturation in [0, 1].
        v: Brightness in [0, 1].

    Returns:
        (r, g, b) in [0, 1].
    """
    sector, b, c, d = _hsb_sector_terms(h, s, v)
    return _select_sector(sector, v, c, b, d)


def hsl_to_unit_rgb(h: float, s: float, l: float) -> UnitTriple:
    """Normalized RGB from HSL, going through HSB."""
    return hsb_to_unit_rgb(*hsl_to_hsb(h, s, l))


def unit_to_byte(channel: float) -> int:
    """Scale a normalized channel to 0..255, rounding halves away from zero."""
    return round_half_away(channel * CHANNEL_MAX)


def hsb_to_argb(h: float, s: float, v: float, opacity: float = 1.0) -> int:
    """Packed ``0xAARRGGBB`` value from HSB and an opacity."""
    r, g, b = hsb_to_unit_rgb(h, s, v)
    return pack_rgbo(unit_to_byte(r), unit_to_byte(g), unit_to_byte(b), opacity)


def hsl_to_argb(h: float, s: float, l: float, opacity: float = 1.0) -> int:
    """Packed ``0xAARRGGBB`` value from HSL and an opacity."""
    return hsb_to_argb(*hsl_to_hsb(h, s, l), opacity)


# ---- Vectorized ----

def np_hsb_to_unit_rgb(h: UnitArray, s: UnitArray, v: UnitArray) -> NDArray:
    """
    Vectorized: normalized RGB from HSB arrays.

    Returns:
        Array of shape ``broadcast(h, s, v).shape + (3,)`` holding r, g, b.
    """
    h, s, v = np.broadcast_arrays(
        np.asarray(h, dtype=float),
        np.asarray(s, dtype=float),
        np.asarray(v, dtype=float),
    )
    h = (h / HUE_360) * HUE_SECTORS
    hh = np.floor(h)
    b = v * (1 - s)
    c = v * (1 - (h - hh) * s)
    d = v * (1 - (1 - h + hh) * s)
    sector = np.mod(hh, HUE_SECTORS).astype(np.int64)

    if np.any((sector < 0) | (sector >= HUE_SECTORS)):
        raise AssertionError(f"hue sector outside 0..{HUE_SECTORS - 1}")

    conditions = [sector == i for i in range(HUE_SECTORS)]
    red = np.select(conditions, [v, c, b, b, d, v])
    green = np.select(conditions, [d, v, v, c, b, b])
    blue = np.select(conditions, [b, b, d, v, v, c])
    return np.stack([red, green, blue], axis=-1)


def np_hsl_to_unit_rgb(h: UnitArray, s: UnitArray, l: UnitArray) -> NDArray:
    hsb = np_hsl_to_hsb(h, s, l)
    return np_hsb_to_unit_rgb(hsb[..., 0], hsb[..., 1], hsb[..., 2])


def np_hsb_to_argb(h: UnitArray, s: UnitArray, v: UnitArray, opacity: UnitArray = 1.0) -> NDArray:
    """Vectorized :func:`hsb_to_argb`, returning a ``uint32`` array."""
    rgb = np_round_half_away(np_hsb_to_unit_rgb(h, s, v) * CHANNEL_MAX)
    return np_pack_rgbo(rgb[..., 0], rgb[..., 1], rgb[..., 2], opacity)
