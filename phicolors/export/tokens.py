import json
import os
import re

from ..theme.roles import ROLES

TOKEN_NAMESPACE = "phicolors"


def role_to_kebab(role):
    """textOnBackground -> text-on-background"""
    return re.sub(r"([a-z0-9])([A-Z])", r"\1-\2", role).lower()


def _entries(color_map):
    return [(role, color_map[role]) for role in ROLES if role in color_map]


def to_css(color_map):
    """Render the color map as CSS custom properties on :root."""
    variables = "\n".join(
        f"  --{role_to_kebab(role)}: {hex_value};" for role, hex_value in _entries(color_map)
    )
    return f":root {{\n{variables}\n}}"


def to_scss(color_map):
    return "\n".join(
        f"${role_to_kebab(role)}: {hex_value};" for role, hex_value in _entries(color_map)
    )


def to_figma_tokens(color_map):
    """Render the color map as design tokens (Figma Tokens / W3C draft format).

    Returns:
        JSON string of the token data
    """
    tokens = {
        role: {"$value": hex_value, "$type": "color"}
        for role, hex_value in _entries(color_map)
    }
    return json.dumps({TOKEN_NAMESPACE: {"color": tokens}}, indent=2)


def export_tokens(color_map, output_dir, stem):
    """Write the CSS, SCSS and Figma token files for a color map.

    Returns:
        list of written file paths
    """
    outputs = [
        (f"{stem}.css", to_css(color_map)),
        (f"{stem}.scss", to_scss(color_map)),
        (f"{stem}.tokens.json", to_figma_tokens(color_map)),
    ]

    written = []
    for name, content in outputs:
        path = os.path.join(output_dir, name)
        with open(path, "w") as f:
            f.write(content + "\n")
        written.append(path)
    return written
