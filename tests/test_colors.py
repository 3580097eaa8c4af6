# test_colors.py

import re
import logging
import warnings
import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from prismlog.colors import (
    BRIGHT_ADDITIVE, PALETTE, WHITE, Color, Format, palette_color, parse_hex,
    parse_hsl, parse_name, parse_notation, parse_rgb, render, resolve, strip_styling
)
from prismlog.colors.definitions import ANSI_PATTERN
from prismlog.errors import InvalidColorNotation

RED_SGR = "\x1b[38;2;220;40;40m"
RESET = "\x1b[0m"


class TestParseNotation:
    """Notation detection and per-notation parsing."""

    def test_hex_with_hash(self):
        color = parse_notation("#FF0000")
        assert color.format is Format.HEX
        assert color.rgb == (255, 0, 0)

    def test_hex_bare_and_lowercase(self):
        assert parse_notation("00ff7f").rgb == (0, 255, 127)

    def test_rgb(self):
        color = parse_notation("rgb(10,20,30)")
        assert color.format is Format.RGB
        assert color.values == (10, 20, 30)

    def test_rgb_with_spaces(self):
        assert parse_notation("rgb(10, 20, 30)").values == (10, 20, 30)

    def test_hsl_keeps_channels_unconverted(self):
        color = parse_notation("hsl(120, 50%, 50%)")
        assert color.format is Format.HSL
        assert color.values == (120, 50, 50)

    def test_hsl_converts_on_demand(self):
        assert parse_notation("hsl(120, 50%, 50%)").rgb == (64, 191, 64)

    def test_notation_prefix_is_case_insensitive(self):
        assert parse_notation("RGB(1,2,3)").values == (1, 2, 3)
        assert parse_notation("HSL(0,0%,0%)").format is Format.HSL

    @pytest.mark.parametrize("name", sorted(PALETTE))
    def test_palette_names(self, name):
        color = parse_notation(name)
        assert color.format is Format.RGB
        assert color.values == PALETTE[name]
        assert not color.dim

    @pytest.mark.parametrize("name", sorted(PALETTE))
    def test_bright_palette_names(self, name):
        expected = tuple(min(255, v + BRIGHT_ADDITIVE) for v in PALETTE[name])
        assert parse_notation(f"{name}-bright").values == expected

    def test_red_bright_is_clamped(self):
        assert parse_notation("red-bright").values == (255, 100, 100)

    def test_dim_marks_style_without_changing_channels(self):
        color = parse_notation("blue-dim")
        assert color.values == PALETTE["blue"]
        assert color.dim

    def test_unknown_name_falls_back_to_white(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert parse_notation("chartreuse") == WHITE
        assert "chartreuse" in caplog.text

    def test_malformed_notation_falls_back_to_white(self):
        assert parse_notation("rgb(1,2)") == WHITE
        assert parse_notation("#12345") == WHITE


class TestSuffixQuirk:
    """Suffixes are detected on the original string's end but stripped everywhere."""

    def test_bright_then_dim_is_only_dim(self):
        color = parse_name("red-bright-dim")
        assert color.values == PALETTE["red"]
        assert color.dim

    def test_dim_then_bright_is_only_bright(self):
        color = parse_name("red-dim-bright")
        assert color.values == (255, 100, 100)
        assert not color.dim

    def test_repeated_suffixes_are_all_stripped(self):
        color = parse_name("red-bright-dim-bright")
        assert color.values == (255, 100, 100)
        assert not color.dim

    def test_unknown_name_ignores_suffix(self):
        assert parse_name("teal-bright") == WHITE


class TestSoftDefaults:
    """Direct parser calls on partial input default their channels and warn."""

    def test_hsl_defaults(self, caplog):
        with caplog.at_level(logging.WARNING):
            color = parse_hsl("hsl(bad)")
        assert color.values == (0, 50, 100)
        assert "defaulted" in caplog.text

    def test_rgb_defaults(self, caplog):
        with caplog.at_level(logging.WARNING):
            color = parse_rgb("rgb()")
        assert color.values == (255, 255, 255)
        assert "defaulted" in caplog.text

    def test_complete_notation_does_not_warn(self, caplog):
        with caplog.at_level(logging.WARNING):
            parse_rgb("rgb(1,2,3)")
        assert caplog.records == []

    def test_malformed_hex_is_white(self):
        assert parse_hex("#GGGGGG") == WHITE

    def test_palette_color_raises_on_unknown(self):
        with pytest.raises(InvalidColorNotation):
            palette_color("mauve")


class TestColorValue:

    def test_rgb_channels_are_clamped(self):
        assert Color(Format.RGB, (300, -5, 12)).rgb == (255, 0, 12)

    def test_hsl_out_of_range_is_clamped(self):
        assert Color(Format.HSL, (999, 0, 100)).rgb == (255, 255, 255)

    def test_resolve_passes_instances_through(self):
        color = Color(Format.RGB, (1, 2, 3))
        assert resolve(color) is color

    def test_resolve_parses_strings(self):
        assert resolve("rgb(1,2,3)").values == (1, 2, 3)

    def test_resolve_unsupported_reference_is_white(self):
        assert resolve(42) == WHITE


class TestRender:

    def test_render_wraps_with_truecolor_foreground(self):
        assert render("red")("ERROR") == f"{RED_SGR}ERROR{RESET}"

    def test_render_instance(self):
        styled = render(Color(Format.HEX, (255, 0, 0)))("x")
        assert styled == f"\x1b[38;2;255;0;0mx{RESET}"

    def test_render_dim(self):
        assert render("red-dim")("x").startswith("\x1b[2;38;2;220;40;40m")

    def test_render_empty_text(self):
        assert render("red")("") == ""

    @pytest.mark.parametrize("reference", ["red", "#00FF00", "hsl(200, 40%, 60%)", "rgb(1,2,3)", "gray-dim"])
    def test_strip_recovers_rendered_text(self, reference):
        text = "plain text 123"
        assert strip_styling(render(reference)(text)) == text


class TestStripStyling:

    def test_removes_sgr_sequences(self):
        assert strip_styling(f"a {RED_SGR}b{RESET} c") == "a b c"

    def test_removes_c1_csi(self):
        assert strip_styling("\x9b31mred\x9b0m") == "red"

    def test_removes_cursor_sequences(self):
        assert strip_styling("\x1b[2J\x1b[Hhome") == "home"

    def test_sequences_formed_after_removal_are_removed(self):
        text = "\x1b\x1b[31m[31mX"
        assert strip_styling(text) == "X"
        assert strip_styling(strip_styling(text)) == strip_styling(text)

    @pytest.mark.parametrize("text", ["", "plain", f"{RED_SGR}x{RESET}", "é", "\x1b[", "a\x1b[1;2;3mb",
                                      "\x1b\u212a", "\x1b\u037e31m", "x\x1b\u212aY", "e\x1b[0m\u0301"])
    def test_idempotent(self, text):
        once = strip_styling(text)
        assert strip_styling(once) == once

    def test_normalizes_to_nfc(self):
        assert strip_styling("e\u0301") == "\u00e9"

    def test_sequences_composed_by_normalization_are_removed(self):
        # KELVIN SIGN normalizes to K and GREEK QUESTION MARK to ;
        assert strip_styling("x\x1b\u212aY") == "xY"
        assert strip_styling("a\x1b\u037e31mb") == "ab"

    def test_mark_joined_by_stripping_is_composed(self):
        assert strip_styling("e\x1b[0m\u0301") == "\u00e9"

    def test_pattern_compiles_without_warnings(self):
        # ASCII flag bypasses the re cache so the pattern is compiled again
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            re.compile(ANSI_PATTERN.pattern, re.ASCII)
