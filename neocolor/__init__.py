"""
Neocolor - Platform-Independent ARGB Color Values
=================================================

An immutable 32-bit ARGB color type with lossless conversions to and from
Hue-Saturation-Brightness (HSB/HSV) and Hue-Saturation-Lightness (HSL).

Key Features
------------
- Packed ``0xAARRGGBB`` storage, equality and hashing by value
- Construction from packed integers, RGB, ARGB, RGB + opacity, HSB and HSL
- Copy-with-changes helpers (``with_argb``, ``with_rgbo``)
- HSB/HSL computed on demand, never cached
- Vectorized (numpy) versions of every conversion

Quick Start
-----------
>>> from neocolor import Color
>>>
>>> c1 = Color(0xFF42A5F5)
>>> c2 = Color.from_argb(0xFF, 0x42, 0xA5, 0xF5)
>>> c1 == c2
True
>>> c1.compute_hsl().lightness  # doctest: +ELLIPSIS
0.6...

Modules
-------
- colors: the Color value type and the HSB/HSL result records
- conversions: packing and color model conversion functions
"""

from .colors.color import Color
from .colors.results import HSBResult, HSLResult

from .conversions import (
    pack, unpack, pack_rgb, pack_rgbo, opacity_to_alpha,
    unit_rgb_to_hsb, hsb_to_unit_rgb,
    hsb_to_hsl, hsl_to_hsb, hsl_to_unit_rgb,
    np_pack, np_unpack,
    np_unit_rgb_to_hsb, np_hsb_to_unit_rgb,
    np_hsb_to_hsl, np_hsl_to_hsb,
)

__version__ = "1.0.0"

__all__ = [
    'Color', 'HSBResult', 'HSLResult',
    'pack', 'unpack', 'pack_rgb', 'pack_rgbo', 'opacity_to_alpha',
    'unit_rgb_to_hsb', 'hsb_to_unit_rgb',
    'hsb_to_hsl', 'hsl_to_hsb', 'hsl_to_unit_rgb',
    'np_pack', 'np_unpack',
    'np_unit_rgb_to_hsb', 'np_hsb_to_unit_rgb',
    'np_hsb_to_hsl', 'np_hsl_to_hsb',
]
