from .color import HSLColor, contrast_ratio, hsl_to_rgb, relative_luminance, round_half_up

# WCAG thresholds
AA_RATIO = 4.5
AAA_RATIO = 7.0
DEFAULT_TARGET_RATIO = AA_RATIO

# Relative luminance of roughly mid-grey. Bases brighter than this count as
# "light" and prefer a darker partner when both directions work.
LIGHT_BASE_LUMINANCE = 0.22

LIGHTER = "lighter"
DARKER = "darker"


def find_lightness(hsl, base_rgb, direction, target_ratio=DEFAULT_TARGET_RATIO):
    """Find the first lightness in one direction that meets target_ratio.

    Hue and saturation are kept. The scan starts one step away from the
    current lightness and includes the 0/100 boundary.

    Returns:
        HSLColor that meets the target, or None if no lightness does
    """
    h, s, l = hsl
    start = round_half_up(l)

    if direction == LIGHTER:
        candidates = range(start + 1, 101)
    elif direction == DARKER:
        candidates = range(start - 1, -1, -1)
    else:
        return None

    for lightness in candidates:
        if contrast_ratio(hsl_to_rgb(h, s, lightness), base_rgb) >= target_ratio:
            return HSLColor(h, s, lightness)

    return None


def adjust_for_contrast(hsl, base_rgb, target_ratio=DEFAULT_TARGET_RATIO):
    """
    Adjust lightness so the color meets target_ratio against base_rgb.

    When both a lighter and a darker solution exist, the base's relative
    luminance decides: a light base gets the darker solution, a dark base the
    lighter one. Returns the input unchanged when it already passes or when no
    lightness can reach the target.
    """
    hsl = HSLColor(*hsl)
    if contrast_ratio(hsl_to_rgb(*hsl), base_rgb) >= target_ratio:
        return hsl

    lighter = find_lightness(hsl, base_rgb, LIGHTER, target_ratio)
    darker = find_lightness(hsl, base_rgb, DARKER, target_ratio)

    if lighter is None and darker is None:
        return hsl
    if darker is None:
        return lighter
    if lighter is None:
        return darker

    base_is_light = relative_luminance(base_rgb) > LIGHT_BASE_LUMINANCE
    return darker if base_is_light else lighter
