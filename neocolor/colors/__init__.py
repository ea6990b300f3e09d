"""
Neocolor Color Classes
======================

Immutable, sealed value classes.

Classes
-------
Color
    A 32-bit ARGB color. The packed integer is the only stored state; HSB
    and HSL views are computed on demand.
HSBResult
    Hue, saturation, brightness and opacity computed from a Color.
HSLResult
    Hue, saturation, lightness and opacity computed from a Color.

Usage
-----
>>> from neocolor.colors import Color
>>>
>>> color = Color.from_hsb(165, 0.50, 0.75, opacity=0.5)
>>> color
Color <0x7F60BFA7>
>>> h, s, v, opacity = color.compute_hsb()
>>> color.compute_hsb().to_color() == Color.from_hsb(h, s, v, opacity)
True
>>> color.with_argb(alpha=0xFF)
Color <0xFF60BFA7>

Notes
-----
- Instances are frozen after initialization; assignment raises AttributeError
- Subclassing any of these classes raises TypeError
- HSBResult/HSLResult cannot be constructed directly
"""

from .color import Color
from .results import HSBResult, HSLResult

__all__ = ['Color', 'HSBResult', 'HSLResult']
