"""
Neocolor Conversions
====================

Conversion math between packed 32-bit ARGB integers, normalized RGB, HSB
(also called HSV) and HSL, with scalar and vectorized (numpy) versions.

Features
--------
- Bit-exact channel packing with the low-8-bits masking rule
- Wrap-around opacity to alpha conversion (``1.5`` becomes ``0x7E``)
- Bidirectional conversions: RGB ↔ HSB ↔ HSL
- Scalar functions for single colors, ``np_`` functions for arrays

Conversion Functions
-------------------

Packing:
    pack(alpha, red, green, blue) / np_pack(...)
        Four channels to a 32-bit integer
    unpack(value) / np_unpack(values)
        32-bit integer to (alpha, red, green, blue)
    pack_rgb(red, green, blue)
        Fully opaque packing
    pack_rgbo(red, green, blue, opacity) / np_pack_rgbo(...)
        Packing with a floating point opacity
    opacity_to_alpha(opacity) / np_opacity_to_alpha(opacity)
        floor(opacity * 255) & 0xFF

RGB → HSB:
    unit_rgb_to_hsb(r, g, b)
    np_unit_rgb_to_hsb(r, g, b)

HSB → RGB:
    hsb_to_unit_rgb(h, s, v)
    np_hsb_to_unit_rgb(h, s, v)
    hsb_to_argb(h, s, v, opacity=1.0) / np_hsb_to_argb(...)

HSL → RGB:
    hsl_to_unit_rgb(h, s, l)
    np_hsl_to_unit_rgb(h, s, l)
    hsl_to_argb(h, s, l, opacity=1.0)

HSB ↔ HSL:
    hsb_to_hsl(h, s, v) / np_hsb_to_hsl(h, s, v)
    hsl_to_hsb(h, s, l) / np_hsl_to_hsb(h, s, l)

Examples
--------
>>> from neocolor.conversions import unit_rgb_to_hsb, hsb_to_argb
>>> h, s, v = unit_rgb_to_hsb(1.0, 0.5, 0.0)
>>> hex(hsb_to_argb(h, s, v))
'0xffff8000'
"""

# Packing
from .packing import (
    mask_value,
    pack,
    unpack,
    pack_rgb,
    pack_rgbo,
    opacity_to_alpha,
    is_opaque,
    is_transparent,
    is_visible,
    np_pack,
    np_unpack,
    np_pack_rgbo,
    np_opacity_to_alpha,
)

# RGB → HSB, HSL → HSB
from .to_hsb import unit_rgb_to_hsb, np_unit_rgb_to_hsb, hsl_to_hsb, np_hsl_to_hsb

# HSB → HSL
from .to_hsl import hsb_to_hsl, np_hsb_to_hsl

# HSB/HSL → RGB
from .to_rgb import (
    hsb_to_unit_rgb,
    hsl_to_unit_rgb,
    hsb_to_argb,
    hsl_to_argb,
    unit_to_byte,
    np_hsb_to_unit_rgb,
    np_hsl_to_unit_rgb,
    np_hsb_to_argb,
)

__all__ = [
    # Packing
    'mask_value',
    'pack',
    'unpack',
    'pack_rgb',
    'pack_rgbo',
    'opacity_to_alpha',
    'is_opaque',
    'is_transparent',
    'is_visible',
    'np_pack',
    'np_unpack',
    'np_pack_rgbo',
    'np_opacity_to_alpha',

    # RGB → HSB
    'unit_rgb_to_hsb',
    'np_unit_rgb_to_hsb',

    # HSB ↔ HSL
    'hsl_to_hsb',
    'np_hsl_to_hsb',
    'hsb_to_hsl',
    'np_hsb_to_hsl',

    # HSB/HSL → RGB
    'hsb_to_unit_rgb',
    'hsl_to_unit_rgb',
    'hsb_to_argb',
    'hsl_to_argb',
    'unit_to_byte',
    'np_hsb_to_unit_rgb',
    'np_hsl_to_unit_rgb',
    'np_hsb_to_argb',
]
