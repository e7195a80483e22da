import pytest

from phicolors.color import HSLColor, contrast_ratio, hsl_to_rgb, relative_luminance
from phicolors.contrast import (
    DARKER,
    LIGHT_BASE_LUMINANCE,
    LIGHTER,
    adjust_for_contrast,
    find_lightness,
)

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
TEAL = hsl_to_rgb(173, 83, 59)


def test_find_lightness_returns_first_passing_value():
    result = find_lightness(HSLColor(0, 0, 10), BLACK, LIGHTER, 4.5)
    assert result == HSLColor(0, 0, 46)
    assert contrast_ratio(hsl_to_rgb(0, 0, 46), BLACK) >= 4.5
    assert contrast_ratio(hsl_to_rgb(0, 0, 45), BLACK) < 4.5


def test_find_lightness_keeps_hue_and_saturation():
    result = find_lightness(HSLColor(210, 60, 90), WHITE, DARKER, 4.5)
    assert result is not None
    assert (result.h, result.s) == (210, 60)
    assert result.l < 90
    assert contrast_ratio(hsl_to_rgb(*result), WHITE) >= 4.5


def test_find_lightness_includes_boundary():
    assert find_lightness(HSLColor(0, 0, 50), BLACK, LIGHTER, 20.5) == HSLColor(0, 0, 100)


def test_find_lightness_not_found():
    assert find_lightness(HSLColor(0, 0, 10), BLACK, DARKER, 4.5) is None


@pytest.mark.parametrize("direction", [LIGHTER, DARKER])
def test_find_lightness_unreachable_target(direction):
    assert find_lightness(HSLColor(200, 50, 50), TEAL, direction, 25) is None


def test_find_lightness_unknown_direction():
    assert find_lightness(HSLColor(200, 50, 50), BLACK, "sideways", 4.5) is None


def test_adjust_keeps_passing_color():
    hsl = HSLColor(0, 0, 95)
    assert adjust_for_contrast(hsl, BLACK, 4.5) == hsl


def test_adjust_uses_only_available_direction():
    hsl = HSLColor(210, 60, 90)
    result = adjust_for_contrast(hsl, WHITE, 4.5)
    assert result == find_lightness(hsl, WHITE, DARKER, 4.5)


def test_adjust_prefers_lighter_on_dark_base():
    base = (128, 128, 128)
    assert relative_luminance(base) <= LIGHT_BASE_LUMINANCE
    hsl = HSLColor(0, 0, 50)
    result = adjust_for_contrast(hsl, base, 1.5)
    assert find_lightness(hsl, base, DARKER, 1.5) is not None
    assert result == find_lightness(hsl, base, LIGHTER, 1.5)
    assert result.l > 50


def test_adjust_prefers_darker_on_light_base():
    base = (140, 140, 140)
    assert relative_luminance(base) > LIGHT_BASE_LUMINANCE
    hsl = HSLColor(0, 0, 55)
    result = adjust_for_contrast(hsl, base, 1.5)
    assert find_lightness(hsl, base, LIGHTER, 1.5) is not None
    assert result == find_lightness(hsl, base, DARKER, 1.5)
    assert result.l < 55


def test_adjust_returns_input_when_unreachable():
    hsl = HSLColor(200, 50, 50)
    assert adjust_for_contrast(hsl, TEAL, 25) == hsl


@pytest.mark.parametrize(
    "hsl, base, target",
    [
        (HSLColor(35.5, 83, 59), TEAL, 4.5),
        (HSLColor(258.0, 83, 59), TEAL, 7.0),
        (HSLColor(0, 0, 50), (128, 128, 128), 1.5),
        (HSLColor(200, 50, 50), TEAL, 25),
    ],
)
def test_adjust_is_idempotent(hsl, base, target):
    once = adjust_for_contrast(hsl, base, target)
    assert adjust_for_contrast(once, base, target) == once
