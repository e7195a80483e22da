from ..color import HSLColor, create_color
from ..contrast import DEFAULT_TARGET_RATIO, adjust_for_contrast

# 360 / PHI**2 is 137.50776...; generated hues use the rounded value and saved
# palettes depend on it.
GOLDEN_ANGLE = 137.5

MAX_COMPLEMENTARY = 4

DEFAULT_BASE = HSLColor(173, 83, 59)
DEFAULT_COUNT = 3


def generate_hues(base_hue, count):
    """Generate `count` hues by stepping backwards around the wheel by the golden angle.

    The base hue itself is not included.
    """
    hues = []
    current = base_hue
    for _ in range(count):
        current = (current - GOLDEN_ANGLE + 360) % 360
        hues.append(current)
    return hues


def generate_palette(
    base_hsl,
    count=DEFAULT_COUNT,
    auto_adjust=True,
    target_ratio=DEFAULT_TARGET_RATIO,
):
    """Generate a palette from a base color.

    Args:
        base_hsl: Base HSLColor (or any h, s, l triple)
        count: Number of complementary colors (0-4 by convention)
        auto_adjust: Correct complementary lightness for contrast against the base
        target_ratio: Contrast ratio used when auto_adjust is set

    Returns:
        list of FullColor: [base, *complementary]
    """
    base = create_color(base_hsl)

    complementary = []
    for hue in generate_hues(base.hsl.h, count):
        hsl = HSLColor(hue, base.hsl.s, base.hsl.l)
        if auto_adjust:
            hsl = adjust_for_contrast(hsl, base.rgb, target_ratio)
        complementary.append(create_color(hsl))

    return [base] + complementary
