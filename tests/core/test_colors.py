"""Tests for configured color parsing."""

import pytest

from fmrl.core.colors import build_style, parse_color


class TestParseColor:
    """Tests for parse_color()."""

    def test_empty_means_default(self):
        assert parse_color("") == ""
        assert parse_color("   ") == ""

    def test_color_names(self):
        assert parse_color("Red") == "red"
        assert parse_color(" bright_magenta ") == "bright_magenta"

    def test_hex(self):
        assert parse_color("#FF8800") == "#ff8800"

    @pytest.mark.parametrize("value", ["#fff", "#ff88000"])
    def test_hex_wrong_length(self, value):
        with pytest.raises(ValueError, match="6 characters"):
            parse_color(value)

    def test_hex_bad_digits(self):
        with pytest.raises(ValueError, match="invalid hex color"):
            parse_color("#gg0000")

    def test_rgb(self):
        assert parse_color("rgb(255, 136, 0)") == "#ff8800"
        assert parse_color("RGB( 0 ,0,  1 )") == "#000001"

    @pytest.mark.parametrize(
        "value",
        ["rgb(256, 0, 0)", "rgb(1, 2)", "rgb(-1, 0, 0)", "rgb 1, 2, 3", "rgb(a, b, c)"],
    )
    def test_rgb_invalid(self, value):
        with pytest.raises(ValueError, match="invalid RGB color"):
            parse_color(value)

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="unknown color"):
            parse_color("not-a-color")


class TestBuildStyle:
    """Tests for build_style()."""

    def test_foreground_only(self):
        assert build_style("red", "") == "red"

    def test_background_only(self):
        assert build_style("", "blue") == "on blue"

    def test_both(self):
        assert build_style("red", "blue") == "red on blue"

    def test_neither(self):
        assert build_style("", "") == ""
