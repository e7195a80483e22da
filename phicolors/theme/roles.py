"""Default mapping of a palette onto semantic UI roles.

The mapping is a plain dict keyed by the role names in ROLES (in that order),
with lowercase #rrggbb values. It is only a starting point: callers patch
single roles with override_role() and keep those overrides until the palette
itself changes.
"""

from ..color import is_light, normalize_hex

ROLES = (
    "background",
    "surface",
    "primary",
    "secondary",
    "heading",
    "textOnBackground",
    "textOnSurface",
    "textOnPrimary",
)

DARK_TEXT = "#0f172a"
LIGHT_TEXT = "#f8fafc"

FALLBACK_COLOR_MAP = {
    "background": "#f1f5f9",
    "surface": "#ffffff",
    "primary": "#4f46e5",
    "secondary": "#0ea5e9",
    "heading": "#0f172a",
    "textOnBackground": "#0f172a",
    "textOnSurface": "#0f172a",
    "textOnPrimary": "#ffffff",
}


def text_color_for(rgb):
    """Dark text on light colors, light text on dark ones (YIQ test)."""
    return DARK_TEXT if is_light(rgb) else LIGHT_TEXT


def _pick_secondary(by_lightness, by_saturation, primary, background):
    lightest = by_lightness[-1]
    if lightest.hex not in (primary.hex, background.hex):
        return lightest
    if len(by_saturation) > 1:
        return by_saturation[1]
    return primary


def assign_roles(palette):
    """Assign palette colors to UI roles.

    - background: darkest color
    - surface: second darkest (background again for a single color)
    - primary: most saturated
    - secondary: lightest, unless it is already primary or background, then
      the second most saturated (or primary)
    - heading: same as secondary
    - text roles: light or dark text picked for background, surface, primary

    Returns:
        dict role -> hex; a copy of FALLBACK_COLOR_MAP for an empty palette
    """
    if not palette:
        return dict(FALLBACK_COLOR_MAP)

    # sorted() is stable, ties keep palette order
    by_lightness = sorted(palette, key=lambda c: c.hsl.l)
    by_saturation = sorted(palette, key=lambda c: c.hsl.s, reverse=True)

    background = by_lightness[0]
    surface = by_lightness[1] if len(by_lightness) > 1 else background
    primary = by_saturation[0]
    secondary = _pick_secondary(by_lightness, by_saturation, primary, background)
    heading = secondary

    return {
        "background": background.hex,
        "surface": surface.hex,
        "primary": primary.hex,
        "secondary": secondary.hex,
        "heading": heading.hex,
        "textOnBackground": text_color_for(background.rgb),
        "textOnSurface": text_color_for(surface.rgb),
        "textOnPrimary": text_color_for(primary.rgb),
    }


def override_role(color_map, role, hex_color):
    """Return a copy of color_map with one role reassigned.

    Returns None for an unknown role or an invalid hex value.
    """
    if role not in ROLES:
        return None
    normalized = normalize_hex(hex_color)
    if normalized is None:
        return None
    updated = dict(color_map)
    updated[role] = normalized
    return updated
