from ..color import contrast_ratio, format_hsl, hex_to_rgb
from ..contrast import AA_RATIO, AAA_RATIO
from ..theme.roles import text_color_for

# (text role, background role) pairs shown in the contrast table
TEXT_PAIRS = [
    ("textOnBackground", "background"),
    ("textOnSurface", "surface"),
    ("textOnPrimary", "primary"),
    ("heading", "background"),
    ("heading", "surface"),
]


def _contrast_rows(color_map):
    rows = []
    for fg_role, bg_role in TEXT_PAIRS:
        fg = color_map[fg_role]
        bg = color_map[bg_role]
        ratio = contrast_ratio(hex_to_rgb(fg), hex_to_rgb(bg))
        if ratio >= AAA_RATIO:
            grade = "AAA"
        elif ratio >= AA_RATIO:
            grade = "AA"
        else:
            grade = "fail"
        rows.append(
            f"""<tr>
                <td>{fg_role} on {bg_role}</td>
                <td><span class="chip" style="background: {bg}; color: {fg}">Aa</span></td>
                <td>{ratio:.2f}:1</td>
                <td class="grade-{grade}">{grade}</td>
            </tr>"""
        )
    return "\n".join(rows)


def create_html_preview(palette, color_map, output_path):
    """Create an HTML preview of the palette and its theme mapping"""
    html = """<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>PhiColors Theme Preview</title>
    <style>
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body {
            font-family: system-ui, -apple-system, 'Segoe UI', Roboto, sans-serif;
            background: {background};
            color: {text_on_background};
            padding: 40px;
            min-height: 100vh;
        }
        h1 { margin-bottom: 30px; font-weight: 600; color: {heading}; }
        h2 {
            margin: 30px 0 15px 0;
            font-weight: 500;
            font-size: 14px;
            text-transform: uppercase;
            letter-spacing: 2px;
        }
        .palette-section {
            display: flex;
            flex-wrap: wrap;
            gap: 15px;
        }
        .color-card {
            width: 160px;
            border-radius: 8px;
            overflow: hidden;
            background: {surface};
            color: {text_on_surface};
        }
        .color-swatch {
            height: 80px;
            display: flex;
            align-items: center;
            justify-content: center;
            font-size: 14px;
            font-weight: 500;
        }
        .color-info { padding: 12px; font-size: 11px; }
        .color-name { font-weight: 600; margin-bottom: 4px; }
        .color-value { opacity: 0.7; }
        .surface-card {
            background: {surface};
            color: {text_on_surface};
            border-radius: 12px;
            padding: 25px;
            max-width: 480px;
        }
        .surface-card h3 { color: {heading}; margin-bottom: 10px; }
        .surface-card p { margin-bottom: 20px; }
        .button {
            display: inline-block;
            background: {primary};
            color: {text_on_primary};
            padding: 10px 18px;
            border-radius: 999px;
            font-weight: 600;
        }
        .link { color: {secondary}; margin-left: 15px; }
        table { border-collapse: collapse; margin-top: 10px; }
        td { padding: 6px 14px 6px 0; font-size: 13px; }
        .chip { display: inline-block; padding: 2px 10px; border-radius: 4px; font-weight: 600; }
        .grade-fail { color: #ef4444; }
    </style>
</head>
<body>
    <h1>PhiColors Theme Preview</h1>

    <h2>Palette</h2>
    <div class="palette-section">
        {palette_cards}
    </div>

    <h2>Theme Roles</h2>
    <div class="palette-section">
        {role_cards}
    </div>

    <h2>UI Preview</h2>
    <div class="surface-card">
        <h3>Card heading</h3>
        <p>Body text on the surface color.</p>
        <span class="button">Primary action</span>
        <span class="link">Secondary link</span>
    </div>

    <h2>Text Contrast</h2>
    <table>
        {contrast_rows}
    </table>
</body>
</html>"""

    def make_card(name, hex_value, detail):
        return f"""<div class="color-card">
            <div class="color-swatch" style="background: {hex_value}; color: {text_color_for(hex_to_rgb(hex_value))}">Aa</div>
            <div class="color-info">
                <div class="color-name">{name}</div>
                <div class="color-value">{detail}</div>
            </div>
        </div>"""

    palette_cards = [
        make_card("base" if i == 0 else f"color {i}", color.hex, f"{color.hex} {format_hsl(color.hsl)}")
        for i, color in enumerate(palette)
    ]
    role_cards = [make_card(role, hex_value, hex_value) for role, hex_value in color_map.items()]

    replacements = {
        "{background}": color_map["background"],
        "{surface}": color_map["surface"],
        "{primary}": color_map["primary"],
        "{secondary}": color_map["secondary"],
        "{heading}": color_map["heading"],
        "{text_on_background}": color_map["textOnBackground"],
        "{text_on_surface}": color_map["textOnSurface"],
        "{text_on_primary}": color_map["textOnPrimary"],
    }
    for old, new in replacements.items():
        html = html.replace(old, new)

    html = html.replace("{palette_cards}", "\n".join(palette_cards))
    html = html.replace("{role_cards}", "\n".join(role_cards))
    html = html.replace("{contrast_rows}", _contrast_rows(color_map))

    with open(output_path, "w") as f:
        f.write(html)
