import math
import re
from collections import namedtuple

HSLColor = namedtuple("HSLColor", ["h", "s", "l"])
RGBColor = namedtuple("RGBColor", ["r", "g", "b"])

# Reciprocal of PHI is the weight given to the first color in mix()
PHI = 1.61803398875

# YIQ brightness at or above this reads as a light background
YIQ_LIGHT_THRESHOLD = 128

_HEX_DIGITS = re.compile(r"^[0-9a-fA-F]{6}$")


class FullColor(namedtuple("FullColor", ["hsl", "rgb", "hex"])):
    """One color in HSL, RGB and hex form. HSL is the source of truth."""

    __slots__ = ()

    def to_dict(self):
        return {
            "hsl": dict(self.hsl._asdict()),
            "rgb": dict(self.rgb._asdict()),
            "hex": self.hex,
        }


def round_half_up(value):
    """Round to the nearest integer, .5 going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def _hue_to_channel(p, q, t):
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h, s, l):
    """Convert hue in degrees, saturation and lightness in percent to RGB."""
    h = (h % 360) / 360
    s = s / 100
    l = l / 100

    if s == 0:
        r = g = b = l  # achromatic
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    return RGBColor(
        round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255)
    )


def rgb_to_hsl(r, g, b):
    """Convert 0-255 channels to integer hue, saturation and lightness."""
    r, g, b = r / 255, g / 255, b / 255
    high = max(r, g, b)
    low = min(r, g, b)
    h = s = 0
    l = (high + low) / 2

    if high != low:
        d = high - low
        s = d / (2 - high - low) if l > 0.5 else d / (high + low)
        if high == r:
            h = (g - b) / d + (6 if g < b else 0)
        elif high == g:
            h = (b - r) / d + 2
        else:
            h = (r - g) / d + 4
        h /= 6

    return HSLColor(
        round_half_up(h * 360), round_half_up(s * 100), round_half_up(l * 100)
    )


def rgb_to_hex(r, g, b):
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(hex_color):
    """Parse #rgb / #rrggbb (the '#' is optional).

    Returns None for anything that is not a 3 or 6 digit hex string.
    """
    if not isinstance(hex_color, str) or not hex_color:
        return None

    digits = hex_color[1:] if hex_color.startswith("#") else hex_color
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)

    if not _HEX_DIGITS.match(digits):
        return None

    value = int(digits, 16)
    return RGBColor((value >> 16) & 255, (value >> 8) & 255, value & 255)


def normalize_hex(hex_color):
    """Return the lowercase #rrggbb form of a hex string, or None."""
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return None
    return rgb_to_hex(*rgb)


def format_hsl(hsl):
    return f"hsl({round_half_up(hsl.h)}, {hsl.s}%, {hsl.l}%)"


def format_rgb(rgb):
    return f"rgb({rgb.r}, {rgb.g}, {rgb.b})"


def create_color(hsl):
    """Create a FullColor from an HSL triple, deriving rgb and hex"""
    hsl = HSLColor(*hsl)
    rgb = hsl_to_rgb(*hsl)
    return FullColor(hsl=hsl, rgb=rgb, hex=rgb_to_hex(*rgb))


def color_from_rgb(rgb):
    """Create a FullColor from RGB channels, deriving hsl and hex"""
    rgb = RGBColor(*rgb)
    return FullColor(hsl=rgb_to_hsl(*rgb), rgb=rgb, hex=rgb_to_hex(*rgb))


def relative_luminance(rgb):
    """Calculate relative luminance per WCAG 2.0"""

    def channel(c):
        c = c / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    r, g, b = rgb
    return 0.2126 * channel(r) + 0.7152 * channel(g) + 0.0722 * channel(b)


def contrast_ratio(rgb1, rgb2):
    """Calculate WCAG contrast ratio between two RGB colors (1 to 21)"""
    lum1 = relative_luminance(rgb1)
    lum2 = relative_luminance(rgb2)
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


def yiq_brightness(rgb):
    r, g, b = rgb
    return (r * 299 + g * 587 + b * 114) / 1000


def is_light(rgb):
    """Coarse light/dark test used to pick text color over a background."""
    return yiq_brightness(rgb) >= YIQ_LIGHT_THRESHOLD


def mix(rgb_a, rgb_b):
    """Blend two colors with the golden mean: 1/PHI of A, the rest of B."""
    ratio = 1 / PHI
    return RGBColor(
        *(round_half_up(a * ratio + b * (1 - ratio)) for a, b in zip(rgb_a, rgb_b))
    )


def golden_mean_mixes(palette):
    """Mix the base color with each complementary color of a palette."""
    if not palette:
        return []
    base = palette[0]
    return [color_from_rgb(mix(base.rgb, color.rgb)) for color in palette[1:]]
