"""Tests for color formatting and the known color table."""

import logging

import pytest

from gvsvg.core.colors import SVG_KNOWN_COLORS, format_color, is_known_color, parse_color
from gvsvg.core.types import RenderError, RGBAColor, StringColor


class TestKnownColors:

    def test_table_is_sorted_and_complete(self):
        assert list(SVG_KNOWN_COLORS) == sorted(SVG_KNOWN_COLORS)
        assert len(SVG_KNOWN_COLORS) == 147
        assert SVG_KNOWN_COLORS[0] == "aliceblue"
        assert SVG_KNOWN_COLORS[-1] == "yellowgreen"

    @pytest.mark.parametrize("name", ["aliceblue", "black", "lightgoldenrodyellow", "yellowgreen"])
    def test_known(self, name):
        assert is_known_color(name)

    @pytest.mark.parametrize("name", ["", "Black", "notacolor", "zzz", "aaa", "#ff0000"])
    def test_unknown(self, name):
        assert not is_known_color(name)


class TestFormatColor:

    def test_string_is_verbatim(self):
        assert format_color(StringColor("cornflowerblue")) == "cornflowerblue"

    def test_rgba_is_lowercase_hex(self):
        assert format_color(RGBAColor(255, 10, 171, 255)) == "#ff0aab"

    def test_alpha_is_ignored_unless_zero(self):
        assert format_color(RGBAColor(1, 2, 3, 128)) == "#010203"

    def test_zero_alpha_is_none(self):
        assert format_color(RGBAColor(255, 255, 255, 0)) == "none"

    def test_untagged_value_raises(self):
        with pytest.raises(RenderError, match="internal error"):
            format_color("red")


class TestParseColor:

    def test_hex(self):
        assert parse_color("#ff0000") == RGBAColor(255, 0, 0, 255)

    def test_hex_with_alpha(self):
        assert parse_color("#fffffe00") == RGBAColor(255, 255, 254, 0)

    @pytest.mark.parametrize("value", ["none", "transparent"])
    def test_transparent(self, value):
        assert format_color(parse_color(value)) == "none"

    def test_names_are_lowercased(self):
        assert parse_color("Red") == StringColor("red")

    def test_unknown_name_passes_through_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="gvsvg.core.colors"):
            color = parse_color("/x11/bogus")

        assert color == StringColor("/x11/bogus")
        assert "Unknown SVG color" in caplog.text
