"""
HSB and HSL results computed from a :class:`~neocolor.colors.color.Color`.

Instances are produced only by conversions inside this package
(``Color.compute_hsb()``, ``Color.compute_hsl()``, ``HSBResult.to_hsl()``,
``HSLResult.to_hsb()``), so their values never need bounds checks. Calling
the classes directly raises ``TypeError``.
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Iterator

from ..conversions.to_hsl import hsb_to_hsl
from ..conversions.to_hsb import hsl_to_hsb
from ..conversions.to_rgb import hsb_to_argb
from .frozen import Frozen

if TYPE_CHECKING:
    from .color import Color

_PRODUCER = object()


class HSBResult(Frozen):
    """
    Hue, saturation, brightness and opacity of a color.

    Attributes:
        hue: Perceived color in degrees (0 to 360).
        saturation: How "colorful" the color is (0.0 to 1.0).
        brightness: Brightness of the color (0.0 to 1.0).
        opacity: 0.0 is fully transparent, 1.0 fully opaque.
    """
    __slots__ = ('hue', 'saturation', 'brightness', 'opacity', '_is_frozen')

    hue: float
    saturation: float
    brightness: float
    opacity: float

    def __init__(self, hue: float, saturation: float, brightness: float, opacity: float, *, _token: object = None) -> None:
        if _token is not _PRODUCER:
            raise TypeError("HSBResult is produced by conversions only; use Color.compute_hsb()")
        self.hue = hue
        self.saturation = saturation
        self.brightness = brightness
        self.opacity = opacity
        self._freeze()

    def to_color(self) -> Color:
        """Same as ``Color.from_hsb(hue, saturation, brightness, opacity)``."""
        from .color import Color
        return Color(hsb_to_argb(self.hue, self.saturation, self.brightness, self.opacity))

    def to_hsl(self) -> HSLResult:
        h, s, l = hsb_to_hsl(self.hue, self.saturation, self.brightness)
        return make_hsl(h, s, l, self.opacity)

    def __iter__(self) -> Iterator[float]:
        return iter((self.hue, self.saturation, self.brightness, self.opacity))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HSBResult):
            return NotImplemented
        return tuple(self) == tuple(other)

    def __hash__(self) -> int:
        return hash((HSBResult, *self))

    def __repr__(self) -> str:
        return (
            f"HSBResult(hue={self.hue!r}, saturation={self.saturation!r}, "
            f"brightness={self.brightness!r}, opacity={self.opacity!r})"
        )


class HSLResult(Frozen):
    """
    Hue, saturation, lightness and opacity of a color.

    Attributes:
        hue: Perceived color in degrees (0 to 360).
        saturation: How "colorful" the color is (0.0 to 1.0).
        lightness: Lightness of the color (0.0 to 1.0).
        opacity: 0.0 is fully transparent, 1.0 fully opaque.
    """
    __slots__ = ('hue', 'saturation', 'lightness', 'opacity', '_is_frozen')

    hue: float
    saturation: float
    lightness: float
    opacity: float

    def __init__(self, hue: float, saturation: float, lightness: float, opacity: float, *, _token: object = None) -> None:
        if _token is not _PRODUCER:
            raise TypeError("HSLResult is produced by conversions only; use Color.compute_hsl()")
        self.hue = hue
        self.saturation = saturation
        self.lightness = lightness
        self.opacity = opacity
        self._freeze()

    def to_color(self) -> Color:
        """Same as ``Color.from_hsl(hue, saturation, lightness, opacity)``."""
        return self.to_hsb().to_color()

    def to_hsb(self) -> HSBResult:
        h, s, v = hsl_to_hsb(self.hue, self.saturation, self.lightness)
        return make_hsb(h, s, v, self.opacity)

    def __iter__(self) -> Iterator[float]:
        return iter((self.hue, self.saturation, self.lightness, self.opacity))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HSLResult):
            return NotImplemented
        return tuple(self) == tuple(other)

    def __hash__(self) -> int:
        return hash((HSLResult, *self))

    def __repr__(self) -> str:
        return (
            f"HSLResult(hue={self.hue!r}, saturation={self.saturation!r}, "
            f"lightness={self.lightness!r}, opacity={self.opacity!r})"
        )


def make_hsb(hue: float, saturation: float, brightness: float, opacity: float) -> HSBResult:
    return HSBResult(hue, saturation, brightness, opacity, _token=_PRODUCER)


def make_hsl(hue: float, saturation: float, lightness: float, opacity: float) -> HSLResult:
    return HSLResult(hue, saturation, lightness, opacity, _token=_PRODUCER)
