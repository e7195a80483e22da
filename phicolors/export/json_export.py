import json


def palette_filename(palette, ext):
    """File name for an exported palette, keyed by the base color's hex."""
    return f"phicolors-palette-{palette[0].hex.lstrip('#')}.{ext}"


def palette_to_json(palette):
    """Serialize a palette as a JSON array [base, complementary...]."""
    return json.dumps([color.to_dict() for color in palette], indent=2)


def export_json(palette, filepath):
    """Export palette as JSON.

    Args:
        palette: list of FullColor, base first
        filepath: Output file path
    """
    with open(filepath, "w") as f:
        f.write(palette_to_json(palette))
