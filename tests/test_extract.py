from PIL import Image

from phicolors.color import rgb_to_hsl
from phicolors.palette.extract import extract_base_color, extract_colors

RED = (200, 40, 40)
BLUE = (40, 40, 200)
GREEN = (40, 160, 40)


def _striped_image(path):
    img = Image.new("RGB", (100, 100), RED)
    img.paste(BLUE, (0, 60, 100, 90))
    img.paste(GREEN, (0, 90, 100, 100))
    img.save(path)
    return path


def test_extract_colors_orders_by_population(tmp_path):
    path = _striped_image(tmp_path / "stripes.png")
    colors = extract_colors(path, n_colors=3)
    assert [c.rgb for c in colors] == [RED, BLUE, GREEN]


def test_extract_base_color_is_dominant_color(tmp_path):
    path = _striped_image(tmp_path / "stripes.png")
    assert extract_base_color(path) == rgb_to_hsl(*RED)


def test_cluster_centers_round_half_up(tmp_path):
    path = tmp_path / "halves.png"
    img = Image.new("RGB", (100, 100), (100, 100, 100))
    img.paste((101, 101, 101), (0, 50, 100, 100))
    img.save(path)

    assert extract_colors(path, n_colors=1)[0].rgb == (101, 101, 101)
