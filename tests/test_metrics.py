# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""Tests for delta-E, contrast, gamut mapping and the optimal-contrast search."""

import numpy as np
import pytest

from chromakit.convert.colorspace import srgb_to_hsl, srgb_to_oklch
from chromakit.errors import UnknownAlgorithmError
from chromakit.metrics import (
    APCA_THRESHOLDS,
    CONTRAST_ALGORITHMS,
    DELTA_E_ALGORITHMS,
    WCAG21_THRESHOLDS,
    OptimalContrastConfig,
    check_apca_contrast,
    check_wcag21_contrast,
    clamp_chroma_to_srgb,
    clip_to_srgb,
    contrast,
    contrast_apca,
    contrast_michelson,
    contrast_wcag21,
    contrast_weber,
    delta_e,
    delta_e_2000,
    delta_e_76,
    delta_e_cmc,
    delta_e_ok,
    delta_e_ok_scaled,
    gamut_map_min_delta_e,
    get_optimal_color_for_contrast,
    in_srgb_gamut,
    is_apca_compliant,
    is_wcag21_compliant,
    relative_luminance,
)
from chromakit.runtime.service import ColorService
from chromakit.schema.color import Color, ColorSpace

BLACK = Color(ColorSpace.SRGB, (0.0, 0.0, 0.0))
WHITE = Color(ColorSpace.SRGB, (1.0, 1.0, 1.0))


def _gray(v, alpha=None):
    return Color(ColorSpace.SRGB, (v, v, v), alpha=alpha)


def _lab(L, a, b):
    return Color(ColorSpace.LAB, (L, a, b))


@pytest.fixture
def service():
    return ColorService()


# =============================================================================
# Delta-E
# =============================================================================


class TestDeltaEFormulas:
    """Formula functions on pre-converted colors."""

    def test_cie76(self):
        assert delta_e_76(_lab(50, 0, 0), _lab(53, 4, 0)) == pytest.approx(5.0)

    @pytest.mark.parametrize("lab1, lab2, expected", [
        ((50.0, 2.6772, -79.7751), (50.0, 0.0, -82.7485), 2.0425),
        ((50.0, 0.0, 0.0), (50.0, -1.0, 2.0), 2.3669),
        ((50.0, 2.5, 0.0), (73.0, 25.0, -18.0), 27.1492),
    ])
    def test_ciede2000_reference_pairs(self, lab1, lab2, expected):
        """Sharma, Wu and Dalal test data."""
        assert delta_e_2000(_lab(*lab1), _lab(*lab2)) == pytest.approx(expected, abs=1e-4)

    def test_ciede2000_symmetric(self):
        a, b = _lab(40, 20, -30), _lab(60, -10, 25)
        assert delta_e_2000(a, b) == pytest.approx(delta_e_2000(b, a))

    def test_cmc_reference_is_first(self):
        a = Color(ColorSpace.LCH, (50.0, 30.0, 40.0))
        b = Color(ColorSpace.LCH, (60.0, 10.0, 200.0))
        assert delta_e_cmc(a, a) == 0.0
        assert delta_e_cmc(a, b) != pytest.approx(delta_e_cmc(b, a))

    def test_ok_and_scaled(self):
        a = Color(ColorSpace.OKLAB, (0.5, 0.1, 0.0))
        b = Color(ColorSpace.OKLAB, (0.5, 0.0, 0.0))
        assert delta_e_ok(a, b) == pytest.approx(0.1)
        assert delta_e_ok_scaled(a, b) == pytest.approx(0.2)
        assert delta_e_ok_scaled(a, b, scale=3.0) == pytest.approx(0.3)

    def test_scaled_leaves_lightness(self):
        a = Color(ColorSpace.OKLAB, (0.6, 0.0, 0.0))
        b = Color(ColorSpace.OKLAB, (0.5, 0.0, 0.0))
        assert delta_e_ok_scaled(a, b) == pytest.approx(0.1)

    def test_wrong_space(self):
        with pytest.raises(ValueError, match="Expected a lab color"):
            delta_e_2000(BLACK, WHITE)


class TestDeltaEDispatcher:
    """delta_e(color, sample, algorithm)."""

    @pytest.mark.parametrize("algorithm", list(DELTA_E_ALGORITHMS))
    def test_identical_is_zero(self, service, algorithm):
        assert delta_e("#69ae5d", "#69ae5d", algorithm, service=service) == pytest.approx(0.0, abs=1e-9)

    @pytest.mark.parametrize("algorithm", list(DELTA_E_ALGORITHMS))
    def test_different_is_positive(self, service, algorithm):
        assert delta_e("#ff0000", "#00ff00", algorithm, service=service) > 0.0

    def test_default_is_2000(self, service):
        red = service.parse_color("#ff0000", "lab")
        green = service.parse_color("#00ff00", "lab")
        assert delta_e("#ff0000", "#00ff00", service=service) == pytest.approx(delta_e_2000(red, green))

    def test_accepts_colors(self, service):
        assert delta_e(BLACK, WHITE, "Euclidean", service=service) == pytest.approx(100.0, abs=1e-3)

    def test_unknown(self, service):
        with pytest.raises(UnknownAlgorithmError, match="Unknown algorithm: Manhattan"):
            delta_e("#000", "#fff", "Manhattan", service=service)


# =============================================================================
# Contrast
# =============================================================================


class TestAPCA:
    """Signed Lc values."""

    def test_black_on_white(self):
        assert contrast_apca(BLACK, WHITE) == pytest.approx(106.04, abs=0.1)

    def test_white_on_black(self):
        assert contrast_apca(WHITE, BLACK) == pytest.approx(-107.88, abs=0.1)

    def test_same_color_is_zero(self):
        assert contrast_apca(_gray(0.5), _gray(0.5)) == 0.0

    def test_low_contrast_clips_to_zero(self):
        assert contrast_apca(_gray(0.95), WHITE) == 0.0

    def test_transparent_text_disappears(self):
        assert contrast_apca(_gray(0.0, alpha=0.0), WHITE) == 0.0

    def test_alpha_reduces_contrast(self):
        assert 0.0 < contrast_apca(_gray(0.0, alpha=0.5), WHITE) < contrast_apca(BLACK, WHITE)


class TestLuminanceContrast:
    """WCAG 2.1, Weber, Michelson."""

    def test_luminance_endpoints(self):
        assert relative_luminance(BLACK) == 0.0
        assert relative_luminance(WHITE) == pytest.approx(1.0, abs=1e-4)

    def test_wcag_black_white(self):
        assert contrast_wcag21(BLACK, WHITE) == pytest.approx(21.0, abs=1e-2)
        assert contrast_wcag21(WHITE, BLACK) == pytest.approx(21.0, abs=1e-2)

    def test_wcag_identical(self):
        assert contrast_wcag21(_gray(0.3), _gray(0.3)) == pytest.approx(1.0)

    def test_weber_clamps_on_black(self):
        assert contrast_weber(WHITE, BLACK) == 5000.0

    def test_michelson(self):
        assert contrast_michelson(BLACK, WHITE) == pytest.approx(1.0)
        assert contrast_michelson(BLACK, BLACK) == 0.0


class TestContrastDispatcher:
    """contrast(foreground, background, algorithm)."""

    @pytest.mark.parametrize("algorithm", list(CONTRAST_ALGORITHMS))
    def test_identical_is_zero(self, service, algorithm):
        assert contrast("#69ae5d", "rgb(105, 174, 93)", algorithm, service=service) == 0.0

    def test_default_is_apca(self, service):
        assert contrast("#000", "#fff", service=service) == pytest.approx(106.04, abs=0.1)

    def test_delta_l_star(self, service):
        assert contrast("#000", "#fff", "DeltaL*", service=service) == pytest.approx(100.0, abs=1e-3)

    def test_delta_phi_star(self, service):
        value = contrast("#000", "#fff", "DeltaPhi*", service=service)
        assert value == pytest.approx(100.0 * np.sqrt(2.0) - 40.0, abs=1e-2)

    def test_delta_phi_star_clip(self, service):
        assert contrast("#777", "#787878", "DeltaPhi*", service=service) == 0.0

    def test_unknown(self, service):
        with pytest.raises(UnknownAlgorithmError, match="Unknown algorithm: Luma"):
            contrast("#000", "#fff", "Luma", service=service)


class TestCompliance:
    """WCAG 2.1 and APCA minimums per content type."""

    @pytest.mark.parametrize("content", list(WCAG21_THRESHOLDS))
    def test_wcag_threshold_is_inclusive(self, content):
        minimum = WCAG21_THRESHOLDS[content]
        assert is_wcag21_compliant(minimum, content)
        assert is_wcag21_compliant(minimum + 0.1, content)
        assert not is_wcag21_compliant(minimum - 0.1, content)

    def test_wcag_levels(self):
        assert WCAG21_THRESHOLDS == {"AANormal": 4.5, "AALarge": 3.0, "AAANormal": 7.0, "AAALarge": 4.5}
        assert is_wcag21_compliant(5.0, "AANormal")
        assert not is_wcag21_compliant(5.0, "AAANormal")

    @pytest.mark.parametrize("content", list(APCA_THRESHOLDS))
    def test_apca_either_polarity(self, content):
        minimum = APCA_THRESHOLDS[content]
        assert is_apca_compliant(minimum, content)
        assert is_apca_compliant(-minimum, content)
        assert not is_apca_compliant(minimum - 0.1, content)

    def test_apca_ui_controls_match_body_text(self):
        assert APCA_THRESHOLDS["UIControls"] == APCA_THRESHOLDS["BodyText"] == 60.0
        assert APCA_THRESHOLDS["LargeText"] == 45.0
        assert APCA_THRESHOLDS["NonEssentialText"] == 30.0

    def test_unknown_content(self):
        with pytest.raises(ValueError, match="Unknown content type: Caption"):
            is_wcag21_compliant(4.5, "Caption")
        with pytest.raises(ValueError, match="Unknown content type: Caption"):
            is_apca_compliant(60, "Caption")

    @pytest.mark.parametrize("content", list(WCAG21_THRESHOLDS))
    def test_black_white_passes_every_wcag_level(self, service, content):
        assert check_wcag21_contrast("#000", "#fff", content, service=service)
        assert check_wcag21_contrast("#fff", "#000", content, service=service)

    def test_close_grays_fail(self, service):
        assert not check_wcag21_contrast("#777", "#888", "AALarge", service=service)
        assert not check_apca_contrast("#777", "#888", "NonEssentialText", service=service)

    @pytest.mark.parametrize("content", list(APCA_THRESHOLDS))
    def test_black_white_passes_every_apca_level(self, service, content):
        assert check_apca_contrast("#000", "#fff", content, service=service)
        assert check_apca_contrast("#fff", "#000", content, service=service)


# =============================================================================
# Gamut
# =============================================================================


class TestGamut:
    """In-gamut checks and mapping."""

    VIVID = Color(ColorSpace.OKLCH, (0.55, 0.45, 330.0), alpha=0.7)

    def test_srgb_check(self):
        assert in_srgb_gamut(_gray(0.5))
        assert not in_srgb_gamut(Color(ColorSpace.SRGB, (1.2, 0.0, 0.0)))

    def test_tolerance(self):
        assert in_srgb_gamut(Color(ColorSpace.SRGB, (1.0000001, 0.0, 0.0)))

    def test_oklch_check(self):
        assert not in_srgb_gamut(self.VIVID)

    def test_other_spaces_use_service(self, service):
        assert in_srgb_gamut(_lab(50, 0, 0), service=service)
        assert not in_srgb_gamut(Color(ColorSpace.P3, (1.0, 0.0, 0.0)), service=service)

    def test_clip(self):
        assert clip_to_srgb(Color(ColorSpace.SRGB, (1.2, -0.1, 0.5))).values == (1.0, 0.0, 0.5)
        with pytest.raises(ValueError, match="srgb"):
            clip_to_srgb(self.VIVID)

    def test_clamp_keeps_lightness_hue_alpha(self):
        clamped = clamp_chroma_to_srgb(self.VIVID)
        L, c, h = clamped.values
        assert in_srgb_gamut(clamped)
        assert L == 0.55 and h == 330.0
        assert 0.0 < c < 0.45
        assert clamped.alpha == 0.7

    def test_clamp_is_minimal(self):
        clamped = clamp_chroma_to_srgb(self.VIVID, step=0.01)
        bigger = clamped.with_values((0.55, clamped.values[1] + 0.01, 330.0))
        assert not in_srgb_gamut(bigger)

    def test_in_gamut_returned_unchanged(self):
        color = Color(ColorSpace.OKLCH, (0.7, 0.05, 150.0))
        assert clamp_chroma_to_srgb(color) is color

    def test_clamp_rejects_bad_input(self):
        with pytest.raises(ValueError, match="oklch"):
            clamp_chroma_to_srgb(WHITE)
        with pytest.raises(ValueError, match="step"):
            clamp_chroma_to_srgb(self.VIVID, step=0.0)

    def test_default_tolerance_is_small(self):
        assert not in_srgb_gamut(Color(ColorSpace.SRGB, (1.00001, 0.0, 0.0)))
        assert not in_srgb_gamut(Color(ColorSpace.SRGB, (1.0000001, 0.0, 0.0)), tolerance=0.0)

    def test_clamp_with_zero_tolerance_is_exactly_in_range(self):
        clamped = clamp_chroma_to_srgb(self.VIVID, tolerance=0.0)
        assert in_srgb_gamut(clamped, tolerance=0.0)
        assert clamped.values[1] <= clamp_chroma_to_srgb(self.VIVID).values[1]


class TestMinDeltaEGamutMapping:
    """Chroma bisection with a just-noticeable-difference stop."""

    def test_lightness_above_one_is_white(self):
        mapped = gamut_map_min_delta_e(Color(ColorSpace.OKLCH, (1.1, 0.2, 30.0), alpha=0.5))
        assert mapped.space is ColorSpace.SRGB
        np.testing.assert_allclose(mapped.vector, [1.0, 1.0, 1.0], atol=1e-3)
        assert mapped.alpha == 0.5

    def test_lightness_below_zero_is_black(self):
        mapped = gamut_map_min_delta_e(Color(ColorSpace.OKLCH, (-0.1, 0.2, 30.0), alpha=0.7))
        np.testing.assert_allclose(mapped.vector, [0.0, 0.0, 0.0], atol=1e-9)
        assert mapped.alpha == 0.7

    def test_in_gamut_color_converted_as_is(self, service):
        color = Color(ColorSpace.OKLCH, (0.5, 0.1, 30.0))
        mapped = gamut_map_min_delta_e(color)
        np.testing.assert_allclose(mapped.vector, service.convert(color, ColorSpace.SRGB).vector, atol=1e-9)

    def test_out_of_gamut_keeps_lightness_and_hue(self):
        color = Color(ColorSpace.OKLCH, (0.7, 0.4, 30.0))
        assert not in_srgb_gamut(color)
        mapped = gamut_map_min_delta_e(color)
        assert in_srgb_gamut(mapped, tolerance=0.0)
        L, c, h = srgb_to_oklch(mapped.vector)
        assert L == pytest.approx(0.6831, abs=0.05)
        assert h == pytest.approx(30.1816, abs=0.5)
        assert c < 0.4

    def test_result_close_to_chroma_reduced_color(self):
        color = Color(ColorSpace.OKLCH, (0.6, 0.35, 260.0))
        mapped = gamut_map_min_delta_e(color)
        clamped = clamp_chroma_to_srgb(color, step=0.001)
        assert srgb_to_oklch(mapped.vector)[1] >= clamped.values[1] - 0.02

    def test_rejects_other_spaces(self):
        with pytest.raises(ValueError, match="oklch"):
            gamut_map_min_delta_e(WHITE)


# =============================================================================
# Optimal contrast
# =============================================================================


class TestOptimalContrast:
    """Binary search on HSL lightness."""

    def test_gray_on_white(self, service):
        result = get_optimal_color_for_contrast("#888888", "#ffffff", 60, service=service)
        assert result.space is ColorSpace.SRGB
        assert contrast_apca(result, WHITE) == pytest.approx(60, abs=5)

    def test_hue_and_saturation_kept(self, service):
        result = get_optimal_color_for_contrast("#ff0000", "#ffffff", 60, service=service)
        hsl = srgb_to_hsl(result.vector)
        assert hsl[0] == pytest.approx(0.0, abs=1e-6)
        assert hsl[1] == pytest.approx(1.0, abs=1e-6)

    def test_light_text_on_black(self, service):
        result = get_optimal_color_for_contrast("#888888", "#000000", -60, service=service)
        assert contrast_apca(result, BLACK) == pytest.approx(-60, abs=5)

    def test_wcag_increases_contrast(self, service):
        fg, bg = _gray(0.02), _gray(0.10)
        result = get_optimal_color_for_contrast(fg, bg, 4.5, "WCAG21", service=service)
        assert contrast_wcag21(result, bg) > contrast_wcag21(fg, bg)
        assert contrast_wcag21(result, bg) == pytest.approx(4.5, abs=0.1)

    def test_result_is_opaque(self, service):
        result = get_optimal_color_for_contrast(_gray(0.5, alpha=0.3), WHITE, 60, service=service)
        assert result.alpha is None

    def test_unknown_method(self, service):
        with pytest.raises(UnknownAlgorithmError, match="Unknown contrast algorithm: Weber"):
            get_optimal_color_for_contrast("#000", "#fff", 4.5, "Weber", service=service)

    def test_config_validation(self):
        with pytest.raises(ValueError, match="max_iterations"):
            OptimalContrastConfig(max_iterations=0)
        with pytest.raises(ValueError, match="epsilon"):
            OptimalContrastConfig(epsilon=0.0)
