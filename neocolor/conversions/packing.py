"""
Channel packing between 8-bit ARGB channels and a single 32-bit integer.

Out-of-range input is never rejected. Each channel keeps only its low 8 bits
(``0xAAA`` packs as ``0xAA``), and a floating point opacity is turned into an
alpha byte with ``floor(opacity * 255) & 0xFF``, so ``1.5`` wraps around to
``0x7E`` instead of clamping to ``0xFF``. Both behaviors are part of the
public contract.
"""
from __future__ import annotations
import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import ARGBTuple, ChannelArray, UnitArray
from ..types.constants import (
    ALPHA_SHIFT, RED_SHIFT, GREEN_SHIFT, BLUE_SHIFT,
    CHANNEL_MASK, VALUE_MASK, CHANNEL_MAX,
    ALPHA_OPAQUE, ALPHA_HIDDEN,
)


def mask_value(value: int) -> int:
    """Keep the lower 32 bits of ``value``."""
    return value & VALUE_MASK


def pack(alpha: int, red: int, green: int, blue: int) -> int:
    """
    Pack four channels into a 32-bit ``0xAARRGGBB`` integer.

    Args:
        alpha, red, green, blue: Channel values; only the low 8 bits are used.

    Returns:
        The packed value.
    """
    return (
        ((alpha & CHANNEL_MASK) << ALPHA_SHIFT)
        | ((red & CHANNEL_MASK) << RED_SHIFT)
        | ((green & CHANNEL_MASK) << GREEN_SHIFT)
        | ((blue & CHANNEL_MASK) << BLUE_SHIFT)
    ) & VALUE_MASK


def unpack(value: int) -> ARGBTuple:
    """Split a packed value into ``(alpha, red, green, blue)``."""
    value = mask_value(value)
    return (
        (value >> ALPHA_SHIFT) & CHANNEL_MASK,
        (value >> RED_SHIFT) & CHANNEL_MASK,
        (value >> GREEN_SHIFT) & CHANNEL_MASK,
        (value >> BLUE_SHIFT) & CHANNEL_MASK,
    )


def pack_rgb(red: int, green: int, blue: int) -> int:
    """Pack a fully opaque color."""
    return pack(ALPHA_OPAQUE, red, green, blue)


def opacity_to_alpha(opacity: float) -> int:
    """
    Convert an opacity (``0.0`` transparent, ``1.0`` opaque) to an alpha byte.

    The product is floored and masked, not clamped:

    >>> opacity_to_alpha(0.5)
    127
    >>> opacity_to_alpha(1.5)  # floor(382.5) & 0xFF
    126
    """
    return math.floor(opacity * CHANNEL_MAX) & CHANNEL_MASK


def pack_rgbo(red: int, green: int, blue: int, opacity: float) -> int:
    """Pack three channels with a floating point opacity."""
    return pack(opacity_to_alpha(opacity), red, green, blue)


def is_opaque(alpha: int) -> bool:
    return alpha == ALPHA_OPAQUE


def is_transparent(alpha: int) -> bool:
    return alpha < ALPHA_OPAQUE


def is_visible(alpha: int) -> bool:
    return alpha > ALPHA_HIDDEN


# ---- Vectorized ----

def _as_int64(values: ChannelArray, mask: int) -> NDArray:
    # Plain ints of any size keep their low bits before the int64 cast.
    if isinstance(values, int):
        values = values & mask
    return np.asarray(values, dtype=np.int64) & mask


def np_pack(alpha: ChannelArray, red: ChannelArray, green: ChannelArray, blue: ChannelArray) -> NDArray:
    """
    Vectorized: pack channel arrays into a ``uint32`` array.

    Inputs broadcast against each other. Like :func:`pack`, each channel keeps
    only its low 8 bits. Plain Python ints may be any size; array elements
    must fit in int64.
    """
    a, r, g, b = (_as_int64(c, CHANNEL_MASK) for c in (alpha, red, green, blue))
    packed = (a << ALPHA_SHIFT) | (r << RED_SHIFT) | (g << GREEN_SHIFT) | (b << BLUE_SHIFT)
    return packed.astype(np.uint32)


def np_unpack(values: NDArray) -> NDArray:
    """
    Vectorized: split packed values into channels.

    A plain Python int may be any size; array elements must fit in int64.

    Returns:
        Integer array of shape ``values.shape + (4,)`` ordered A, R, G, B.
    """
    values = _as_int64(values, VALUE_MASK)
    return np.stack([
        (values >> ALPHA_SHIFT) & CHANNEL_MASK,
        (values >> RED_SHIFT) & CHANNEL_MASK,
        (values >> GREEN_SHIFT) & CHANNEL_MASK,
        (values >> BLUE_SHIFT) & CHANNEL_MASK,
    ], axis=-1)


def np_opacity_to_alpha(opacity: UnitArray) -> NDArray:
    """Vectorized :func:`opacity_to_alpha`, with the same wrap-around."""
    scaled = np.floor(np.asarray(opacity, dtype=float) * CHANNEL_MAX).astype(np.int64)
    return scaled & CHANNEL_MASK


def np_pack_rgbo(red: ChannelArray, green: ChannelArray, blue: ChannelArray, opacity: UnitArray) -> NDArray:
    return np_pack(np_opacity_to_alpha(opacity), red, green, blue)
