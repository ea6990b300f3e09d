"""
Basic usage: every constructor below builds the same color.
"""
from neocolor import Color


def main():
    c1 = Color(0xFF42A5F5)
    c2 = Color.from_argb(0xFF, 0x42, 0xA5, 0xF5)
    print(f"{c1} == {c2}: {c1 == c2}")

    c3 = Color.from_argb(255, 66, 165, 245)
    c4 = Color.from_rgbo(66, 165, 245, 1.0)
    print(f"{c3} == {c4}: {c3 == c4}")

    # HSB (sometimes called HSV) and HSL work too
    c5 = Color.from_hsb(206.8, 0.7306, 0.9608)
    c6 = Color.from_hsl(206.8, 0.8990, 0.6100)
    print(f"{c5} == {c6}: {c5 == c6}")

    hsl = c1.compute_hsl()
    print(f"hue={hsl.hue:.1f} saturation={hsl.saturation:.3f} lightness={hsl.lightness:.3f}")

    # Opacity outside [0, 1] wraps around instead of clamping
    print(Color.from_rgbo(0xBB, 0xCC, 0xDD, 1.5))


if __name__ == "__main__":
    main()
