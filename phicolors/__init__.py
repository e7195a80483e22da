from .color import (
    PHI,
    FullColor,
    HSLColor,
    RGBColor,
    color_from_rgb,
    contrast_ratio,
    create_color,
    hex_to_rgb,
    hsl_to_rgb,
    mix,
    relative_luminance,
    rgb_to_hex,
    rgb_to_hsl,
)
from .contrast import adjust_for_contrast, find_lightness
from .palette import generate_harmony, generate_hues, generate_palette
from .theme import assign_roles, override_role

__all__ = [
    "PHI",
    "FullColor",
    "HSLColor",
    "RGBColor",
    "color_from_rgb",
    "contrast_ratio",
    "create_color",
    "hex_to_rgb",
    "hsl_to_rgb",
    "mix",
    "relative_luminance",
    "rgb_to_hex",
    "rgb_to_hsl",
    "adjust_for_contrast",
    "find_lightness",
    "generate_harmony",
    "generate_hues",
    "generate_palette",
    "assign_roles",
    "override_role",
]
