"""Tests for hex/RGB/HSL conversion, interpolation and palette sequences."""

import random

import pytest

from iconocolor.engine.colormath import (
    RGB,
    generate_gradient_colors,
    generate_repeating_colors,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    interpolate_color,
    is_valid_hex,
    rgb_to_hex,
    rgb_to_hsl,
)


# ---------- Parsing and formatting ----------


class TestHexParsing:
    def test_parses_with_hash(self):
        assert hex_to_rgb("#3B82F6") == RGB(59, 130, 246)

    def test_parses_without_hash(self):
        assert hex_to_rgb("ff8000") == RGB(255, 128, 0)

    @pytest.mark.parametrize("bad", ["", "#FFF", "#GGGGGG", "red", "#1234567", None, 42])
    def test_unparseable_returns_none(self, bad):
        assert hex_to_rgb(bad) is None

    def test_is_valid_hex(self):
        assert is_valid_hex("#abcdef")
        assert not is_valid_hex("#abc")

    def test_rgb_to_hex_is_uppercase(self):
        assert rgb_to_hex(171, 205, 239) == "#ABCDEF"

    def test_rgb_to_hex_clamps_and_rounds(self):
        assert rgb_to_hex(-10, 300, 127.5) == "#00FF80"


# ---------- HSL ----------


class TestHSL:
    def test_primary_red(self):
        h, s, l = rgb_to_hsl(255, 0, 0)
        assert h == pytest.approx(0)
        assert s == pytest.approx(100)
        assert l == pytest.approx(50)

    def test_gray_has_no_saturation(self):
        h, s, l = rgb_to_hsl(128, 128, 128)
        assert s == pytest.approx(0)
        assert l == pytest.approx(128 / 255 * 100)

    def test_hue_wraps(self):
        assert hsl_to_rgb(360, 100, 50) == hsl_to_rgb(0, 100, 50)
        assert hsl_to_hex(480, 100, 50) == hsl_to_hex(120, 100, 50)

    def test_hex_to_hsl_unparseable(self):
        assert hex_to_hsl("nope") is None

    def test_round_trip_random_colors(self):
        rng = random.Random(1234)
        for _ in range(100):
            color = "#{:02X}{:02X}{:02X}".format(rng.randrange(256), rng.randrange(256), rng.randrange(256))
            original = hex_to_rgb(color)
            back = hex_to_rgb(rgb_to_hex(*hsl_to_rgb(*rgb_to_hsl(*original))))
            assert all(abs(a - b) <= 1 for a, b in zip(original, back)), color


# ---------- Interpolation ----------


class TestInterpolate:
    def test_midpoint_black_white(self):
        assert interpolate_color("#000000", "#FFFFFF", 0.5) == "#808080"

    def test_endpoints(self):
        assert interpolate_color("#102030", "#405060", 0) == "#102030"
        assert interpolate_color("#102030", "#405060", 1) == "#405060"

    def test_unparseable_returns_first_color(self):
        assert interpolate_color("oops", "#FFFFFF", 0.5) == "oops"
        assert interpolate_color("#000000", "oops", 0.5) == "#000000"


# ---------- Palette sequences ----------


class TestPaletteSequences:
    def test_repeating(self):
        assert generate_repeating_colors(["#FF0000", "#00FF00"], 5) == [
            "#FF0000", "#00FF00", "#FF0000", "#00FF00", "#FF0000",
        ]

    def test_gradient_interpolates_between_entries(self):
        assert generate_gradient_colors(["#FF0000", "#00FF00"], 3) == [
            "#FF0000",
            interpolate_color("#FF0000", "#00FF00", 0.5),
            "#00FF00",
        ]

    def test_gradient_uses_palette_when_it_fits(self):
        palette = ["#111111", "#222222", "#333333"]
        assert generate_gradient_colors(palette, 2) == ["#111111", "#222222"]
        assert generate_gradient_colors(palette, 3) == palette

    def test_gradient_ends_on_last_color(self):
        colors = generate_gradient_colors(["#000000", "#FF0000", "#FFFFFF"], 7)
        assert len(colors) == 7
        assert colors[0] == "#000000"
        assert colors[3] == "#FF0000"
        assert colors[-1] == "#FFFFFF"

    def test_single_color_palette(self):
        assert generate_gradient_colors(["#ABCDEF"], 3) == ["#ABCDEF"] * 3

    @pytest.mark.parametrize("fn", [generate_gradient_colors, generate_repeating_colors])
    def test_empty_inputs(self, fn):
        assert fn([], 3) == []
        assert fn(["#FF0000"], 0) == []
