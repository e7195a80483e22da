import pytest

from phicolors.color import (
    HSLColor,
    RGBColor,
    color_from_rgb,
    contrast_ratio,
    create_color,
    format_hsl,
    format_rgb,
    golden_mean_mixes,
    hex_to_rgb,
    hsl_to_rgb,
    is_light,
    mix,
    normalize_hex,
    relative_luminance,
    rgb_to_hex,
    rgb_to_hsl,
    round_half_up,
)

WHITE = RGBColor(255, 255, 255)
BLACK = RGBColor(0, 0, 0)


def _hue_distance(a, b):
    diff = abs(a - b) % 360
    return min(diff, 360 - diff)


@pytest.mark.parametrize(
    "hsl, rgb",
    [
        ((0, 100, 50), (255, 0, 0)),
        ((120, 100, 50), (0, 255, 0)),
        ((240, 100, 50), (0, 0, 255)),
        ((360, 100, 50), (255, 0, 0)),
        ((0, 0, 100), (255, 255, 255)),
        ((0, 0, 0), (0, 0, 0)),
        ((0, 0, 50), (128, 128, 128)),
    ],
)
def test_hsl_to_rgb_known_values(hsl, rgb):
    assert hsl_to_rgb(*hsl) == rgb


def test_rgb_to_hsl_known_values():
    assert rgb_to_hsl(255, 0, 0) == (0, 100, 50)
    assert rgb_to_hsl(0, 0, 255) == (240, 100, 50)
    assert rgb_to_hsl(128, 128, 128) == (0, 0, 50)
    assert rgb_to_hsl(255, 255, 255) == (0, 0, 100)


def test_hsl_rgb_round_trip_within_one_unit():
    for h in range(360):
        for s in (60, 100):
            for l in (40, 50, 60):
                back = rgb_to_hsl(*hsl_to_rgb(h, s, l))
                assert _hue_distance(back.h, h) <= 1, (h, s, l, back)
                assert abs(back.s - s) <= 1, (h, s, l, back)
                assert abs(back.l - l) <= 1, (h, s, l, back)


def test_hex_to_rgb_accepts_short_long_and_any_case():
    assert hex_to_rgb("#FFF") == (255, 255, 255)
    assert hex_to_rgb("abc") == (170, 187, 204)
    assert hex_to_rgb("0f172a") == (15, 23, 42)
    assert hex_to_rgb("#0F172A") == (15, 23, 42)


@pytest.mark.parametrize(
    "value",
    ["", "#", "#ff", "#ffff", "#fffffff", "#ggg", "#12345g", " #fff", "##fff", None, 123],
)
def test_hex_to_rgb_rejects_malformed(value):
    assert hex_to_rgb(value) is None


def test_rgb_to_hex_is_lowercase_and_padded():
    assert rgb_to_hex(15, 23, 42) == "#0f172a"
    assert rgb_to_hex(0, 0, 0) == "#000000"
    assert rgb_to_hex(255, 170, 1) == "#ffaa01"


@pytest.mark.parametrize("value", ["#000000", "#ffffff", "#0f172a", "#4F46E5", "#0ea5e9", "#A1B2C3"])
def test_hex_round_trip(value):
    assert rgb_to_hex(*hex_to_rgb(value)) == value.lower()


def test_normalize_hex():
    assert normalize_hex("#ABC") == "#aabbcc"
    assert normalize_hex("nope") is None


def test_relative_luminance_extremes():
    assert relative_luminance(WHITE) == pytest.approx(1.0)
    assert relative_luminance(BLACK) == 0
    assert relative_luminance(WHITE) > relative_luminance((119, 119, 119)) > relative_luminance(BLACK)


def test_contrast_ratio_range_and_symmetry():
    assert contrast_ratio(WHITE, BLACK) == pytest.approx(21.0)
    pairs = [((64, 237, 217), (15, 23, 42)), ((255, 0, 0), (0, 0, 255)), ((10, 20, 30), WHITE)]
    for a, b in pairs:
        assert contrast_ratio(a, b) == contrast_ratio(b, a)
        assert 1 <= contrast_ratio(a, b) <= 21


def test_contrast_ratio_with_itself_is_one():
    for rgb in (WHITE, BLACK, (64, 237, 217)):
        assert contrast_ratio(rgb, rgb) == 1


def test_mix_uses_golden_mean_weights():
    assert mix(WHITE, BLACK) == (158, 158, 158)
    assert mix(BLACK, WHITE) == (97, 97, 97)
    assert mix(WHITE, BLACK) != mix(BLACK, WHITE)


def test_golden_mean_mixes_pairs_base_with_each_color():
    palette = [color_from_rgb(WHITE), color_from_rgb(BLACK), color_from_rgb((0, 0, 255))]
    mixes = golden_mean_mixes(palette)
    assert [c.rgb for c in mixes] == [mix(WHITE, BLACK), mix(WHITE, (0, 0, 255))]
    assert golden_mean_mixes([]) == []
    assert golden_mean_mixes(palette[:1]) == []


def test_is_light_uses_yiq_threshold():
    assert is_light(WHITE)
    assert not is_light(BLACK)
    assert is_light((128, 128, 128))
    assert not is_light((127, 127, 127))


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(-0.5) == 0
    assert round_half_up(157.6) == 158


def test_create_color_is_consistent():
    color = create_color((173, 83, 59))
    assert color.hsl == HSLColor(173, 83, 59)
    assert color.rgb == hsl_to_rgb(173, 83, 59)
    assert color.hex == rgb_to_hex(*color.rgb)


def test_to_dict_shape():
    data = create_color((10, 20, 30)).to_dict()
    assert data["hsl"] == {"h": 10, "s": 20, "l": 30}
    assert set(data["rgb"]) == {"r", "g", "b"}
    assert data["hex"].startswith("#")


def test_formatting():
    assert format_hsl(HSLColor(35.5, 83, 59)) == "hsl(36, 83%, 59%)"
    assert format_rgb(RGBColor(1, 2, 3)) == "rgb(1, 2, 3)"
