from __future__ import annotations
from typing import Optional

from ..conversions.packing import (
    mask_value, unpack, pack, pack_rgb, pack_rgbo,
    is_opaque, is_transparent, is_visible,
)
from ..conversions.to_hsb import unit_rgb_to_hsb
from ..conversions.to_rgb import hsb_to_argb, hsl_to_argb
from ..types.constants import CHANNEL_MAX
from .frozen import Frozen
from .results import HSBResult, HSLResult, make_hsb


class Color(Frozen):
    """
    An immutable 32-bit color value in ARGB format.

    The bits of :attr:`value` are assigned as follows:

    - Bits 24-31 are the alpha value.
    - Bits 16-23 are the red value.
    - Bits 08-15 are the green value.
    - Bits 00-07 are the blue value.

    so a fully opaque orange is ``Color(0xFFFF9000)``.

    ``Color`` is sealed: it cannot be subclassed, and two colors are equal
    exactly when their packed values are equal. Wrap a ``Color`` instead of
    extending it.

    Out-of-range input is never an error. Integers keep their low 32 bits
    (for :attr:`value`) or low 8 bits (per channel), and opacities are
    converted with ``floor(opacity * 255) & 0xFF``, which wraps around
    instead of clamping (``1.5`` gives alpha ``0x7E``).

    >>> Color.from_argb(0xFF, 0x42, 0xA5, 0xF5) == Color.from_rgb(0x42, 0xA5, 0xF5) == Color(0xFF42A5F5)
    True
    """
    __slots__ = ('_value', '_is_frozen')

    def __init__(self, value: int) -> None:
        self._value = mask_value(value)
        self._freeze()

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> Color:
        """Fully opaque color from the lower 8 bits of three integers."""
        return cls(pack_rgb(red, green, blue))

    @classmethod
    def from_argb(cls, alpha: int, red: int, green: int, blue: int) -> Color:
        """Color from the lower 8 bits of four integers."""
        return cls(pack(alpha, red, green, blue))

    @classmethod
    def from_rgbo(cls, red: int, green: int, blue: int, opacity: float) -> Color:
        """
        Color from the lower 8 bits of three integers and an opacity.

        Args:
            red, green, blue: 0 to 255.
            opacity: 0.0 is transparent, 1.0 fully opaque. Values outside
                that range wrap around (see :func:`~neocolor.conversions.opacity_to_alpha`).
        """
        return cls(pack_rgbo(red, green, blue, opacity))

    @classmethod
    def from_hsb(cls, hue: float, saturation: float, brightness: float, opacity: float = 1.0) -> Color:
        """
        Color from Hue-Saturation-Brightness (also called HSV).

        Args:
            hue: Perceived color in degrees (0 to 360).
            saturation: How "colorful" the color is (0.0 to 1.0).
            brightness: Brightness of the color (0.0 to 1.0).
            opacity: Defaults to fully opaque.

        This involves floating point work on every call; keep the result
        around rather than rebuilding the same color in a loop.
        """
        return cls(hsb_to_argb(hue, saturation, brightness, opacity))

    @classmethod
    def from_hsl(cls, hue: float, saturation: float, lightness: float, opacity: float = 1.0) -> Color:
        """
        Color from Hue-Saturation-Lightness.

        Converted to HSB first, which in turn is converted to RGB. See
        :meth:`from_hsb`.
        """
        return cls(hsl_to_argb(hue, saturation, lightness, opacity))

    # ------------------ COPIES ------------------
    def with_argb(
        self,
        alpha: Optional[int] = None,
        red: Optional[int] = None,
        green: Optional[int] = None,
        blue: Optional[int] = None,
    ) -> Color:
        """
        Return a copy with the given channels replaced.

        Same as ``Color.from_argb`` with the current value of every channel
        left as ``None``.
        """
        a, r, g, b = unpack(self._value)
        return Color.from_argb(
            a if alpha is None else alpha,
            r if red is None else red,
            g if green is None else green,
            b if blue is None else blue,
        )

    def with_rgbo(
        self,
        red: Optional[int] = None,
        green: Optional[int] = None,
        blue: Optional[int] = None,
        opacity: Optional[float] = None,
    ) -> Color:
        """
        Return a copy with the given channels replaced.

        Same as ``Color.from_rgbo``; the alpha byte is always re-derived from
        the opacity, even when only a color channel changes.
        """
        return Color.from_rgbo(
            self.red if red is None else red,
            self.green if green is None else green,
            self.blue if blue is None else blue,
            self.opacity if opacity is None else opacity,
        )

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> int:
        return self._value

    @property
    def alpha(self) -> int:
        """Alpha channel, 0 (fully transparent) to 255 (fully opaque)."""
        return unpack(self._value)[0]

    @property
    def red(self) -> int:
        return unpack(self._value)[1]

    @property
    def green(self) -> int:
        return unpack(self._value)[2]

    @property
    def blue(self) -> int:
        return unpack(self._value)[3]

    @property
    def opacity(self) -> float:
        """Alpha channel as a float, 0.0 (fully transparent) to 1.0 (fully opaque)."""
        return self.alpha / CHANNEL_MAX

    @property
    def is_opaque(self) -> bool:
        """Whether alpha is exactly 0xFF."""
        return is_opaque(self.alpha)

    @property
    def is_transparent(self) -> bool:
        """Whether the color is not fully opaque (alpha < 0xFF)."""
        return is_transparent(self.alpha)

    @property
    def is_visible(self) -> bool:
        """Whether the color is not fully transparent (alpha > 0x00)."""
        return is_visible(self.alpha)

    # ------------------ CONVERSIONS ------------------
    def compute_hsb(self) -> HSBResult:
        """Hue, saturation and brightness of this color, computed on every call."""
        _, r, g, b = unpack(self._value)
        h, s, v = unit_rgb_to_hsb(r / CHANNEL_MAX, g / CHANNEL_MAX, b / CHANNEL_MAX)
        return make_hsb(h, s, v, self.opacity)

    def compute_hsl(self) -> HSLResult:
        """Hue, saturation and lightness of this color, computed on every call."""
        return self.compute_hsb().to_hsl()

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __int__(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return f"Color <0x{self._value:08X}>"
