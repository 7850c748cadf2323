"""Tests for magico.core.mixer – color mixing, hex formatting and darkness."""

from __future__ import annotations

import logging
import re

import pytest

from magico.core.mixer import (
    BLACK,
    DARK_THRESHOLD,
    FALLBACK_HEX,
    WHITE,
    Color,
    clamp_ratio,
    contrast_color,
    is_dark,
    mix,
    ratio_percent,
    to_hex,
)

RED = Color(1.0, 0.0, 0.0)
GREEN = Color(0.0, 1.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)

SAMPLE_COLORS = [
    BLACK,
    WHITE,
    RED,
    GREEN,
    BLUE,
    Color(0.1, 0.2, 0.3),
    Color(0.33, 0.66, 0.99),
    Color(0.5, 0.5, 0.5),
    Color(0.999, 0.001, 0.75),
]

HEX_PATTERN = re.compile(r"^#[0-9A-F]{6}$")


# ===========================================================================
# Color value type
# ===========================================================================

class TestColor:
    def test_equality_is_component_wise(self):
        assert Color(0.2, 0.4, 0.6) == Color(0.2, 0.4, 0.6)
        assert Color(0.2, 0.4, 0.6) != Color(0.2, 0.4, 0.7)

    def test_is_immutable(self):
        c = Color(0.2, 0.4, 0.6)
        with pytest.raises(AttributeError):
            c.red = 1.0  # type: ignore[misc]

    def test_as_tuple(self):
        assert Color(0.2, 0.4, 0.6).as_tuple() == (0.2, 0.4, 0.6)

    def test_from_rgb255(self):
        assert Color.from_rgb255(255, 0, 255) == Color(1.0, 0.0, 1.0)

    def test_from_hex_full(self):
        assert Color.from_hex("#FF0000") == RED

    def test_from_hex_lowercase(self):
        assert Color.from_hex("#0000ff") == BLUE

    def test_from_hex_shorthand(self):
        assert Color.from_hex("#fff") == WHITE

    def test_from_hex_strips_whitespace(self):
        assert Color.from_hex("  #000000 ") == BLACK

    @pytest.mark.parametrize("bad", ["FF0000", "#FF00", "#GGHHII", "", "#"])
    def test_from_hex_invalid(self, bad):
        with pytest.raises(ValueError):
            Color.from_hex(bad)

    def test_from_hex_non_string(self):
        with pytest.raises(ValueError):
            Color.from_hex(0xFF0000)  # type: ignore[arg-type]


# ===========================================================================
# mix
# ===========================================================================

class TestMix:
    def test_ratio_zero_returns_first(self):
        for a in SAMPLE_COLORS:
            for b in SAMPLE_COLORS:
                assert mix(a, b, 0.0) == a

    def test_ratio_one_returns_second(self):
        for a in SAMPLE_COLORS:
            for b in SAMPLE_COLORS:
                assert mix(a, b, 1.0) == b

    @pytest.mark.parametrize("ratio", [0.0, 0.1, 0.25, 0.5, 0.77, 1.0])
    def test_mixing_with_itself_is_invariant(self, ratio):
        for c in SAMPLE_COLORS:
            assert mix(c, c, ratio).as_tuple() == pytest.approx(c.as_tuple())

    def test_red_blue_midpoint(self):
        assert mix(RED, BLUE, 0.5) == Color(0.5, 0.0, 0.5)

    def test_quarter_blend(self):
        result = mix(BLACK, WHITE, 0.25)
        assert result.as_tuple() == pytest.approx((0.25, 0.25, 0.25))

    def test_in_range_inputs_stay_in_range(self):
        ratios = [i / 20 for i in range(21)]
        for a in SAMPLE_COLORS:
            for b in SAMPLE_COLORS:
                for r in ratios:
                    for channel in mix(a, b, r).as_tuple():
                        assert -1e-9 <= channel <= 1.0 + 1e-9

    def test_ratio_is_not_clamped(self):
        # Callers clamp; mix extrapolates.
        assert mix(BLACK, WHITE, 1.5).as_tuple() == pytest.approx((1.5, 1.5, 1.5))
        assert mix(BLACK, WHITE, -0.5).as_tuple() == pytest.approx((-0.5, -0.5, -0.5))

    def test_accepts_channel_tuples(self):
        assert mix((1.0, 0.0, 0.0), (0.0, 0.0, 1.0), 0.5) == Color(0.5, 0.0, 0.5)

    def test_returns_color(self):
        assert isinstance(mix((1, 0, 0), (0, 0, 1), 0.5), Color)


class TestMixFallback:
    @pytest.mark.parametrize(
        "bad",
        [None, "#FF0000", (1.0, 0.0), (1.0, 0.0, 0.0, 1.0), ("x", 0, 0), 42],
    )
    def test_unresolvable_first_returns_black(self, bad):
        assert mix(bad, WHITE, 0.5) == BLACK

    def test_unresolvable_second_returns_black(self):
        assert mix(WHITE, None, 0.5) == BLACK

    def test_non_finite_channel_returns_black(self):
        assert mix(Color(float("nan"), 0.0, 0.0), WHITE, 0.5) == BLACK
        assert mix(WHITE, Color(0.0, float("inf"), 0.0), 0.5) == BLACK

    def test_non_numeric_color_fields_return_black(self):
        assert mix(Color("red", 0.0, 0.0), WHITE, 0.5) == BLACK  # type: ignore[arg-type]

    def test_fallback_is_logged_not_raised(self, caplog):
        with caplog.at_level(logging.WARNING, logger="magico.core.mixer"):
            assert mix(None, None, 0.5) == BLACK
        assert "Cannot resolve color components" in caplog.text


# ===========================================================================
# to_hex
# ===========================================================================

class TestToHex:
    def test_white(self):
        assert to_hex(WHITE) == "#FFFFFF"

    def test_black(self):
        assert to_hex(BLACK) == "#000000"

    def test_primaries(self):
        assert to_hex(RED) == "#FF0000"
        assert to_hex(GREEN) == "#00FF00"
        assert to_hex(BLUE) == "#0000FF"

    def test_truncates_instead_of_rounding(self):
        # 0.5 * 255 = 127.5 -> 127
        assert to_hex(Color(0.5, 0.5, 0.5)) == "#7F7F7F"

    def test_red_blue_midpoint(self):
        assert to_hex(mix(RED, BLUE, 0.5)) == "#7F007F"

    def test_white_black_endpoints(self):
        assert to_hex(mix(WHITE, BLACK, 0.0)) == "#FFFFFF"
        assert to_hex(mix(WHITE, BLACK, 1.0)) == "#000000"

    def test_channel_order_is_rgb(self):
        assert to_hex(Color(1.0, 0.5, 0.0)) == "#FF7F00"

    def test_uppercase_digits(self):
        assert to_hex(Color(0.68, 0.8, 0.94)) == to_hex(Color(0.68, 0.8, 0.94)).upper()

    @pytest.mark.parametrize("color", SAMPLE_COLORS)
    def test_matches_hex_pattern(self, color):
        assert HEX_PATTERN.match(to_hex(color))

    def test_out_of_gamut_is_clamped(self):
        assert to_hex(Color(1.5, -0.5, 0.5)) == "#FF007F"

    def test_huge_channels_do_not_overflow(self):
        assert to_hex(Color(1e308, 0.0, 0.0)) == "#FF0000"
        assert to_hex(Color(0.0, -1e308, 0.0)) == "#000000"

    def test_far_extrapolated_mix_formats(self):
        assert to_hex(mix(BLACK, WHITE, 1e307)) == "#FFFFFF"
        assert to_hex(mix(BLACK, WHITE, -1e307)) == "#000000"

    def test_accepts_channel_tuples(self):
        assert to_hex((1.0, 1.0, 0.0)) == "#FFFF00"


class TestToHexFallback:
    @pytest.mark.parametrize("bad", [None, "white", (0.5,), object()])
    def test_unresolvable_returns_black_hex(self, bad):
        assert to_hex(bad) == FALLBACK_HEX == "#000000"

    def test_nan_channel(self):
        assert to_hex(Color(0.2, float("nan"), 0.2)) == "#000000"


# ===========================================================================
# is_dark / contrast_color
# ===========================================================================

class TestIsDark:
    def test_black_is_dark(self):
        assert is_dark(BLACK) is True

    def test_white_is_light(self):
        assert is_dark(WHITE) is False

    def test_red_is_dark(self):
        # 299 / 1000 = 0.299
        assert is_dark(RED) is True

    def test_green_is_light(self):
        # 587 / 1000 = 0.587
        assert is_dark(GREEN) is False

    def test_blue_is_dark(self):
        assert is_dark(BLUE) is True

    def test_threshold_is_exclusive(self):
        # brightness of mid gray is exactly 0.5
        assert DARK_THRESHOLD == 0.5
        assert is_dark(Color(0.5, 0.5, 0.5)) is False

    def test_just_below_threshold(self):
        assert is_dark(Color(0.49, 0.49, 0.49)) is True

    def test_unresolvable_is_light(self):
        assert is_dark(None) is False
        assert is_dark("#000000") is False
        assert is_dark(Color(float("nan"), 0.0, 0.0)) is False


class TestContrastColor:
    def test_white_text_on_dark(self):
        assert contrast_color(BLACK) == WHITE

    def test_black_text_on_light(self):
        assert contrast_color(WHITE) == BLACK

    def test_unresolvable_uses_black_text(self):
        assert contrast_color(None) == BLACK


# ===========================================================================
# ratio helpers
# ===========================================================================

class TestRatioHelpers:
    @pytest.mark.parametrize(
        "value, expected",
        [(-1.0, 0.0), (0.0, 0.0), (0.3, 0.3), (1.0, 1.0), (2.5, 1.0)],
    )
    def test_clamp_ratio(self, value, expected):
        assert clamp_ratio(value) == expected

    @pytest.mark.parametrize(
        "ratio, expected",
        [(0.0, "0%"), (0.5, "50%"), (1.0, "100%"), (0.257, "25%")],
    )
    def test_ratio_percent(self, ratio, expected):
        assert ratio_percent(ratio) == expected
