from PIL import Image, ImageDraw, ImageFont

from ..color import golden_mean_mixes

TITLE = "PhiColors Palette"
BG_COLOR = "#f8fafc"
TEXT_COLOR = "#0f172a"

# Sheet geometry (pixels)
PADDING = 50
SWATCH_SIZE = 150
GAP = 30
SECTION_TITLE_MARGIN_BOTTOM = 20
SECTION_GAP = 60
HEX_CODE_MARGIN_TOP = 15
H1_HEIGHT = 40
H2_HEIGHT = 30
HEX_HEIGHT = 20

H1_FONT_SIZE = 32
H2_FONT_SIZE = 24
HEX_FONT_SIZE = 18


def _sections(palette):
    if not palette:
        return []
    sections = [
        ("Base Color", palette[:1]),
        ("Complementary Colors", palette[1:]),
        ("Golden Mean Mixes", golden_mean_mixes(palette)),
    ]
    return [(title, colors) for title, colors in sections if colors]


def sheet_size(palette):
    """Width and height of the swatch sheet for a palette."""
    sections = _sections(palette)
    if not sections:
        return 0, 0

    most = max(len(colors) for _, colors in sections)
    width = PADDING * 2 + most * SWATCH_SIZE + (most - 1) * GAP

    section_height = (
        H2_HEIGHT + SECTION_TITLE_MARGIN_BOTTOM + SWATCH_SIZE + HEX_CODE_MARGIN_TOP + HEX_HEIGHT
    )
    height = (
        PADDING
        + H1_HEIGHT
        + SECTION_GAP
        + len(sections) * section_height
        + (len(sections) - 1) * SECTION_GAP
        + PADDING
    )
    return width, height


def _draw_text(draw, text, font, x, center_y, align="left"):
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    if align == "center":
        x -= (right - left) / 2
    draw.text((x - left, center_y - (bottom - top) / 2 - top), text, font=font, fill=TEXT_COLOR)


def render_swatch_sheet(palette):
    """Render base, complementary and golden-mean mix swatches on one image.

    Returns:
        PIL.Image.Image, or None for an empty palette
    """
    sections = _sections(palette)
    if not sections:
        return None

    width, height = sheet_size(palette)
    img = Image.new("RGB", (width, height), BG_COLOR)
    draw = ImageDraw.Draw(img)

    h1 = ImageFont.load_default(size=H1_FONT_SIZE)
    h2 = ImageFont.load_default(size=H2_FONT_SIZE)
    hex_font = ImageFont.load_default(size=HEX_FONT_SIZE)

    _draw_text(draw, TITLE, h1, width / 2, PADDING + H1_HEIGHT / 2, align="center")

    y = PADDING + H1_HEIGHT + SECTION_GAP
    for title, colors in sections:
        section_width = len(colors) * SWATCH_SIZE + (len(colors) - 1) * GAP
        start_x = (width - section_width) // 2

        _draw_text(draw, title, h2, start_x, y + H2_HEIGHT / 2)
        y += H2_HEIGHT + SECTION_TITLE_MARGIN_BOTTOM

        for i, color in enumerate(colors):
            x = start_x + i * (SWATCH_SIZE + GAP)
            draw.rectangle(
                [x, y, x + SWATCH_SIZE - 1, y + SWATCH_SIZE - 1], fill=tuple(color.rgb)
            )
            _draw_text(
                draw,
                color.hex,
                hex_font,
                x + SWATCH_SIZE / 2,
                y + SWATCH_SIZE + HEX_CODE_MARGIN_TOP + HEX_HEIGHT / 2,
                align="center",
            )

        y += SWATCH_SIZE + HEX_CODE_MARGIN_TOP + HEX_HEIGHT + SECTION_GAP

    return img


def export_swatch_sheet(palette, filepath):
    """Save the swatch sheet as PNG. Returns False when there is nothing to draw."""
    img = render_swatch_sheet(palette)
    if img is None:
        return False
    img.save(filepath, format="PNG")
    return True
