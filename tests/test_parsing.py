# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""Tests for text parsing, the parse cache and ColorService."""

import numpy as np
import pytest

from chromakit.errors import ColorInputError, ColorParseError, ColorSyntaxError
from chromakit.runtime.cache import DEFAULT_CACHE_SIZE, ParseCache
from chromakit.runtime.service import ColorService
from chromakit.schema.color import D50, D65, Color, ColorSpace
from chromakit.semantics import css
from chromakit.semantics.parser import TextParser, default_parser
from chromakit.semantics.v1 import is_v1, parse_v1


@pytest.fixture
def parser():
    return default_parser()


@pytest.fixture
def service():
    return ColorService(cache_size=3)


# =============================================================================
# Hex
# =============================================================================


class TestHex:
    """#rgb, #rgba, #rrggbb, #rrggbbaa."""

    def test_six_digits(self):
        color = css.parse_hex("#69ae5d")
        assert color.space is ColorSpace.SRGB
        np.testing.assert_allclose(color.vector, [0x69 / 255, 0xAE / 255, 0x5D / 255])
        assert color.alpha is None

    def test_short_form_expands(self):
        np.testing.assert_allclose(css.parse_hex("#f80").vector, [1.0, 0x88 / 255, 0.0])

    def test_alpha_rounded_to_two_decimals(self):
        assert css.parse_hex("#00000080").alpha == 0.5
        assert css.parse_hex("#0008").alpha == 0.53

    def test_uppercase(self):
        assert css.parse_hex("#69AE5D") == css.parse_hex("#69ae5d")

    @pytest.mark.parametrize("text", ["#", "#12", "#12345", "#1234567", "#ggg"])
    def test_invalid(self, text):
        with pytest.raises(ColorSyntaxError, match="Invalid hex color format"):
            css.parse_hex(text)


# =============================================================================
# CSS functions
# =============================================================================


class TestCSSFunctions:
    """Functional notations."""

    def test_rgb_legacy_commas(self, parser):
        color = parser.parse("rgb(255, 0, 128)")
        np.testing.assert_allclose(color.vector, [1.0, 0.0, 128 / 255])

    def test_rgba_legacy_alpha(self, parser):
        assert parser.parse("rgba(0, 0, 0, 0.25)").alpha == 0.25

    def test_rgb_modern_slash_alpha(self, parser):
        color = parser.parse("rgb(255 0 0 / 50%)")
        np.testing.assert_allclose(color.vector, [1.0, 0.0, 0.0])
        assert color.alpha == pytest.approx(0.5)

    def test_rgb_percentages(self, parser):
        np.testing.assert_allclose(parser.parse("rgb(100% 50% 0%)").vector, [1.0, 0.5, 0.0])

    @pytest.mark.parametrize("text, expected", [
        ("rgb(100%, 100%, 100%)", (1.0, 1.0, 1.0)),
        ("rgba(100%, 0%, 0%, 1)", (1.0, 0.0, 0.0)),
        ("rgb(100% 50% 0%)", (1.0, 0.5, 0.0)),
    ])
    def test_full_percentages_stay_in_range(self, parser, text, expected):
        """100% lands exactly on the channel maximum."""
        assert parser.parse(text).values == expected

    def test_hsl_full_saturation(self, parser):
        assert parser.parse("hsl(0 100% 100%)").values == (0.0, 1.0, 1.0)

    def test_hsl(self, parser):
        color = parser.parse("hsl(120deg 50% 25%)")
        assert color.space is ColorSpace.HSL
        np.testing.assert_allclose(color.vector, [120.0, 0.5, 0.25])

    def test_hsl_hue_wraps(self, parser):
        assert parser.parse("hsl(480, 50%, 50%)").values[0] == pytest.approx(120.0)

    def test_hsl_requires_percent(self, parser):
        with pytest.raises(ColorSyntaxError, match="percentage required"):
            parser.parse("hsl(120, 50, 50%)")

    def test_hwb(self, parser):
        assert parser.parse("hwb(0 20% 30%)").space is ColorSpace.HWB

    def test_hsv(self, parser):
        np.testing.assert_allclose(parser.parse("hsv(60 100% 100%)").vector, [60.0, 1.0, 1.0])

    def test_lab_percent_reference(self, parser):
        color = parser.parse("lab(50% 100% -100%)")
        np.testing.assert_allclose(color.vector, [50.0, 125.0, -125.0])

    def test_lch(self, parser):
        assert parser.parse("lch(52.2 72.2 56.2)").space is ColorSpace.LCH

    def test_oklch_percent_lightness(self, parser):
        color = parser.parse("oklch(63.7% 0.237 25.331)")
        np.testing.assert_allclose(color.vector, [0.637, 0.237, 25.331])

    def test_oklab(self, parser):
        color = parser.parse("oklab(0.5 -0.1 0.1 / 0.2)")
        np.testing.assert_allclose(color.vector, [0.5, -0.1, 0.1])
        assert color.alpha == 0.2

    def test_case_insensitive_name(self, parser):
        assert parser.parse("RGB(0, 0, 0)").space is ColorSpace.SRGB

    def test_mixed_delimiters_rejected(self, parser):
        with pytest.raises(ColorSyntaxError):
            parser.parse("rgb(255, 0 0)")

    def test_missing_paren(self, parser):
        with pytest.raises(ColorSyntaxError, match='missing "\\)"'):
            parser.parse("rgb(255 0 0")

    def test_trailing_text(self, parser):
        with pytest.raises(ColorSyntaxError, match="unexpected text"):
            parser.parse("rgb(255 0 0) x")

    def test_out_of_range(self, parser):
        with pytest.raises(ColorSyntaxError, match="out of range"):
            parser.parse("rgb(300 0 0)")

    def test_negative_rejected(self, parser):
        with pytest.raises(ColorSyntaxError, match="negative"):
            parser.parse("rgb(-1 0 0)")

    def test_unknown_notation(self, parser):
        with pytest.raises(ColorSyntaxError, match="Unsupported color format"):
            parser.parse("cmyk(0 0 0 0)")


class TestColorFunction:
    """CSS color(<space> ...)."""

    def test_xyz_d50(self, parser):
        color = parser.parse("color(xyz-d50 0.2 0.3 0.4)")
        assert color.space is ColorSpace.XYZ
        assert color.illuminant == D50

    def test_xyz_defaults_to_d65(self, parser):
        assert parser.parse("color(xyz 0.2 0.3 0.4)").illuminant == D65

    def test_display_p3(self, parser):
        color = parser.parse("color(display-p3 1 0 0 / 0.5)")
        assert color.space is ColorSpace.P3
        assert color.alpha == 0.5

    def test_srgb_linear(self, parser):
        assert parser.parse("color(srgb-linear 0.5 0.5 0.5)").space is ColorSpace.LRGB

    def test_unsupported_space(self, parser):
        with pytest.raises(ColorSyntaxError, match="Unsupported color\\(\\) space: rec2020"):
            parser.parse("color(rec2020 1 0 0)")


class TestTextParser:
    """Custom parser tables."""

    def test_registration_order_wins(self):
        first = Color(ColorSpace.SRGB, (1, 0, 0))
        second = Color(ColorSpace.SRGB, (0, 1, 0))
        parser = TextParser()
        parser.register(r"thing\(", lambda src: first)
        parser.register(r"thing\(", lambda src: second)
        assert parser.parse("thing(1)") is first

    def test_empty_table_still_reads_hex_and_v1(self):
        parser = TextParser()
        assert parser.parse("#fff").space is ColorSpace.SRGB
        assert parser.parse("ChromaKit|v1 lab 50 0 0").space is ColorSpace.LAB


# =============================================================================
# ChromaKit v1
# =============================================================================


class TestV1:
    """Portable text format."""

    def test_basic(self):
        color = parse_v1("ChromaKit|v1 oklch 0.637 0.237 25.331")
        assert color.space is ColorSpace.OKLCH
        assert color.values == (0.637, 0.237, 25.331)
        assert color.alpha is None

    def test_alpha(self):
        assert parse_v1("ChromaKit|v1 srgb 1 0 0 / 0.5").alpha == 0.5

    def test_tag_case_and_commas(self):
        color = parse_v1("chromakit|V1 srgb 1, 0.5, 0")
        assert color.values == (1.0, 0.5, 0.0)

    def test_xyz_d50(self):
        assert parse_v1("ChromaKit|v1 xyz-d50 0.9 1 0.8").illuminant == D50

    def test_is_v1(self):
        assert is_v1("  CHROMAKIT|v1 srgb 0 0 0")
        assert not is_v1("#000")

    @pytest.mark.parametrize("text", [
        "ChromaKit|v1",
        "ChromaKit|v1 cmyk 0 0 0",
        "ChromaKit|v1 srgb 1 0",
        "ChromaKit|v1 srgb 1 0 0 0",
        "ChromaKit|v1 srgb 1 x 0",
        "ChromaKit|v1 srgb 1 0 0 / 2",
        "ChromaKit|v1 srgb 1 0 0 / 0.5 0.5",
        "ChromaKit|v1 srgb 1 nan 0",
    ])
    def test_invalid(self, text):
        with pytest.raises(ColorSyntaxError, match="Invalid ChromaKit v1 format"):
            parse_v1(text)


# =============================================================================
# Cache
# =============================================================================


class TestParseCache:
    """LRU bookkeeping."""

    def test_default_size(self):
        assert ParseCache().max_size == DEFAULT_CACHE_SIZE == 64

    def test_rejects_zero_capacity(self):
        with pytest.raises(ValueError, match="max_size"):
            ParseCache(0)

    def test_key_format(self):
        assert ParseCache.make_key("#fff", "oklch") == "#fff:oklch"

    def test_eviction_order(self):
        cache = ParseCache(2)
        red = Color(ColorSpace.SRGB, (1, 0, 0))
        cache.put("a", red)
        cache.put("b", red)
        cache.get("a")
        cache.put("c", red)
        assert cache.keys() == ["a", "c"]
        assert "b" not in cache

    def test_stats_and_clear(self):
        cache = ParseCache(5)
        cache.put("a", Color(ColorSpace.SRGB, (1, 0, 0)))
        assert cache.stats() == {"size": 1, "max_size": 5}
        cache.clear()
        assert len(cache) == 0


# =============================================================================
# Service
# =============================================================================


class TestColorService:
    """parse_color with caching."""

    def test_default_target_is_oklch(self, service):
        color = service.parse_color("#ff0000")
        assert color.space is ColorSpace.OKLCH
        assert color.values[0] == pytest.approx(0.628, abs=1e-3)

    def test_explicit_target(self, service):
        assert service.parse_color("#ff0000", "hsl").values == pytest.approx((0.0, 1.0, 0.5))

    def test_color_input_bypasses_cache(self, service):
        color = Color(ColorSpace.SRGB, (1, 0, 0))
        assert service.parse_color(color, "srgb") is color
        assert service.cache_stats()["size"] == 0

    def test_cache_hit_returns_same_object(self, service):
        first = service.parse_color("#69ae5d")
        assert service.parse_color("#69ae5d") is first
        assert service.cache_stats() == {"size": 1, "max_size": 3}

    def test_target_is_part_of_key(self, service):
        service.parse_color("#69ae5d", "oklch")
        service.parse_color("#69ae5d", "srgb")
        assert service.cache.keys() == ["#69ae5d:oklch", "#69ae5d:srgb"]

    def test_lru_eviction(self, service):
        for text in ("#111", "#222", "#333"):
            service.parse_color(text)
        service.parse_color("#111")
        service.parse_color("#444")
        assert service.cache.keys() == ["#333:oklch", "#111:oklch", "#444:oklch"]

    def test_failed_parse_leaves_cache(self, service):
        service.parse_color("#111")
        with pytest.raises(ColorSyntaxError):
            service.parse_color("rgb(1 2")
        assert service.cache.keys() == ["#111:oklch"]

    def test_none_input(self, service):
        with pytest.raises(ColorInputError, match="cannot be null"):
            service.parse_color(None)

    def test_wrong_type(self, service):
        with pytest.raises(ColorInputError, match="string or Color"):
            service.parse_color(42)
        with pytest.raises(TypeError):
            service.parse_color(3.5)

    def test_empty_string(self, service):
        with pytest.raises(ColorSyntaxError, match="cannot be empty"):
            service.parse_color("   ")

    def test_errors_share_a_base(self, service):
        with pytest.raises(ColorParseError):
            service.parse_color("not a color")
        with pytest.raises(ValueError):
            service.parse_color("not a color")

    def test_clear_cache(self, service):
        service.parse_color("#111")
        service.clear_cache()
        assert service.cache_stats()["size"] == 0
