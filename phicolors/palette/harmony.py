from ..color import HSLColor, create_color

CURRENT = "current"
NONE = "none"

# Hue offsets in degrees; the first entry keeps the base hue
HUE_OFFSETS = {
    "analogous": (0, 30, -30, 60, -60),
    "triadic": (0, 120, -120, 90, -90),
    "complementary": (0, 180, 30, -30, 150),
    "split-complementary": (0, 150, -150, 120, -120),
}

MONOCHROMATIC = "monochromatic"
LIGHTNESS_OFFSETS = (-40, -20, 0, 20, 40)

HARMONIES = ("analogous", MONOCHROMATIC, "triadic", "complementary", "split-complementary")


def _clamp(value, low=0, high=100):
    return max(low, min(high, value))


def generate_harmony(base_hsl, kind):
    """Generate a five color harmony around base_hsl.

    Hue-based kinds keep saturation and lightness; monochromatic keeps hue and
    saturation and steps lightness instead. Colors come back in table order.

    Returns None for an unknown kind.
    """
    h, s, l = base_hsl

    if kind == MONOCHROMATIC:
        return [
            create_color(HSLColor(h, s, _clamp(l + offset)))
            for offset in LIGHTNESS_OFFSETS
        ]

    offsets = HUE_OFFSETS.get(kind)
    if offsets is None:
        return None

    return [create_color(HSLColor((h + offset + 360) % 360, s, l)) for offset in offsets]


def resolve_palette(palette, kind):
    """Pick the palette to preview: the generated one, or a harmony of its base."""
    if kind in (None, CURRENT, NONE) or not palette:
        return palette
    return generate_harmony(palette[0].hsl, kind)
