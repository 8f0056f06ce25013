# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""Tests for the pairwise color space formulas."""

import numpy as np
import pytest

from chromakit.convert.colorspace import (
    hex_to_srgb,
    hsl_to_hsv,
    hsl_to_srgb,
    hsv_to_hsl,
    hsv_to_srgb,
    hwb_to_srgb,
    jzazbz_to_xyz,
    lab_to_xyz,
    linear_rgb_to_xyz,
    linear_to_srgb,
    oklab_to_oklch,
    oklab_to_xyz,
    oklch_to_oklab,
    oklch_to_srgb,
    p3_to_xyz,
    srgb_to_hex,
    srgb_to_hsl,
    srgb_to_hsv,
    srgb_to_hwb,
    srgb_to_linear,
    srgb_to_oklch,
    xyz_to_jzazbz,
    xyz_to_lab,
    xyz_to_linear_rgb,
    xyz_to_oklab,
    xyz_to_p3,
)
from chromakit.schema.color import D50, D65


class TestSRGBLinearRoundtrip:
    """sRGB ↔ Linear RGB conversions must roundtrip accurately."""

    def test_roundtrip_mid_gray(self):
        srgb = np.array([0.5, 0.5, 0.5])
        np.testing.assert_allclose(linear_to_srgb(srgb_to_linear(srgb)), srgb, atol=1e-10)

    def test_gamma_threshold(self):
        """Values below 0.04045 use linear segment."""
        linear = srgb_to_linear(np.array([0.03]))
        assert float(linear[0]) == pytest.approx(0.03 / 12.92, abs=1e-10)

    def test_negative_values_mirror(self):
        """Extended-range input keeps its sign instead of being clipped."""
        srgb = np.array([-0.5, 0.5, 1.2])
        linear = srgb_to_linear(srgb)
        assert linear[0] == pytest.approx(-linear[1])
        assert linear[2] > 1.0
        np.testing.assert_allclose(linear_to_srgb(linear), srgb, atol=1e-10)

    def test_batch_roundtrip(self):
        srgb = np.random.RandomState(42).random((100, 3))
        np.testing.assert_allclose(linear_to_srgb(srgb_to_linear(srgb)), srgb, atol=1e-10)


class TestXYZ:
    """Linear RGB ↔ XYZ (D65)."""

    def test_white_is_d65(self):
        xyz = linear_rgb_to_xyz(np.array([1.0, 1.0, 1.0]))
        np.testing.assert_allclose(xyz, D65.white, atol=1e-4)

    def test_roundtrip(self):
        rgb = np.random.RandomState(7).random((50, 3))
        np.testing.assert_allclose(xyz_to_linear_rgb(linear_rgb_to_xyz(rgb)), rgb, atol=1e-10)

    def test_p3_white_matches_srgb_white(self):
        np.testing.assert_allclose(p3_to_xyz(np.array([1.0, 1.0, 1.0])), D65.white, atol=1e-4)

    def test_p3_roundtrip(self):
        p3 = np.array([0.2, 0.6, 0.9])
        np.testing.assert_allclose(xyz_to_p3(p3_to_xyz(p3)), p3, atol=1e-9)

    def test_srgb_red_is_inside_p3(self):
        xyz = linear_rgb_to_xyz(np.array([1.0, 0.0, 0.0]))
        p3 = xyz_to_p3(xyz)
        assert np.all(p3 >= -1e-9) and np.all(p3 <= 1.0 + 1e-9)


class TestOKLab:
    """XYZ ↔ OKLab ↔ OKLCh."""

    def test_white(self):
        lab = xyz_to_oklab(D65.white)
        assert lab[0] == pytest.approx(1.0, abs=1e-3)
        assert abs(lab[1]) < 1e-3
        assert abs(lab[2]) < 1e-3

    def test_black(self):
        np.testing.assert_allclose(xyz_to_oklab(np.zeros(3)), np.zeros(3), atol=1e-10)

    def test_roundtrip(self):
        xyz = np.random.RandomState(3).random((50, 3)) * 0.9
        np.testing.assert_allclose(oklab_to_xyz(xyz_to_oklab(xyz)), xyz, atol=1e-9)

    def test_polar_hue_range(self):
        lab = np.array([[0.5, 0.1, -0.1], [0.5, -0.1, -0.1], [0.5, -0.1, 0.1]])
        lch = oklab_to_oklch(lab)
        assert np.all(lch[:, 2] >= 0.0) and np.all(lch[:, 2] < 360.0)

    def test_polar_roundtrip(self):
        lch = np.array([0.637, 0.237, 25.331])
        np.testing.assert_allclose(oklab_to_oklch(oklch_to_oklab(lch)), lch, atol=1e-10)

    def test_srgb_red_reference(self):
        """Reference values from Björn Ottosson's OKLab post."""
        lch = srgb_to_oklch(np.array([1.0, 0.0, 0.0]))
        assert lch[0] == pytest.approx(0.628, abs=1e-3)
        assert lch[1] == pytest.approx(0.258, abs=1e-3)
        assert lch[2] == pytest.approx(29.23, abs=0.1)

    def test_full_chain_roundtrip(self):
        srgb = np.array([0.4118, 0.6824, 0.3647])
        np.testing.assert_allclose(oklch_to_srgb(srgb_to_oklch(srgb)), srgb, atol=1e-9)

    def test_oklch_to_srgb_clip(self):
        vivid = np.array([0.55, 0.45, 330.0])
        assert np.any(oklch_to_srgb(vivid) > 1.0) or np.any(oklch_to_srgb(vivid) < 0.0)
        clipped = oklch_to_srgb(vivid, clip=True)
        assert np.all(clipped >= 0.0) and np.all(clipped <= 1.0)


class TestLab:
    """XYZ ↔ CIE Lab relative to a white point."""

    def test_white_is_l100(self):
        lab = xyz_to_lab(D65.white, D65.white)
        np.testing.assert_allclose(lab, [100.0, 0.0, 0.0], atol=1e-9)

    def test_d50_white_relative_to_d50(self):
        lab = xyz_to_lab(D50.white, D50.white)
        np.testing.assert_allclose(lab, [100.0, 0.0, 0.0], atol=1e-9)

    def test_roundtrip_dark_and_light(self):
        xyz = np.array([[0.001, 0.002, 0.001], [0.4, 0.35, 0.2]])
        np.testing.assert_allclose(lab_to_xyz(xyz_to_lab(xyz, D65.white), D65.white), xyz, atol=1e-12)


class TestJzAzBz:
    """XYZ ↔ JzAzBz."""

    def test_black_is_zero(self):
        jab = xyz_to_jzazbz(np.zeros(3))
        assert abs(jab[0]) < 1e-9

    def test_white_lightness(self):
        jab = xyz_to_jzazbz(D65.white)
        assert jab[0] == pytest.approx(0.2220, abs=2e-3)

    def test_roundtrip(self):
        xyz = np.array([0.2, 0.3, 0.4])
        np.testing.assert_allclose(jzazbz_to_xyz(xyz_to_jzazbz(xyz)), xyz, atol=1e-7)


class TestCylindricalRGB:
    """sRGB ↔ HSL / HSV / HWB."""

    def test_pure_red_hsl(self):
        np.testing.assert_allclose(srgb_to_hsl(np.array([1.0, 0.0, 0.0])), [0.0, 1.0, 0.5])

    def test_green_hsv(self):
        np.testing.assert_allclose(srgb_to_hsv(np.array([0.0, 1.0, 0.0])), [120.0, 1.0, 1.0])

    def test_gray_has_no_hue(self):
        hsl = srgb_to_hsl(np.array([0.5, 0.5, 0.5]))
        assert hsl[0] == 0.0
        assert hsl[1] == 0.0

    def test_hsl_roundtrip(self):
        rgb = np.random.RandomState(11).random((50, 3))
        np.testing.assert_allclose(hsl_to_srgb(srgb_to_hsl(rgb)), rgb, atol=1e-10)

    def test_hsv_roundtrip(self):
        rgb = np.random.RandomState(12).random((50, 3))
        np.testing.assert_allclose(hsv_to_srgb(srgb_to_hsv(rgb)), rgb, atol=1e-10)

    def test_hwb_roundtrip(self):
        rgb = np.random.RandomState(13).random((50, 3))
        np.testing.assert_allclose(hwb_to_srgb(srgb_to_hwb(rgb)), rgb, atol=1e-10)

    def test_hwb_overflow_is_gray(self):
        rgb = hwb_to_srgb(np.array([200.0, 0.6, 0.6]))
        np.testing.assert_allclose(rgb, [0.5, 0.5, 0.5])

    def test_hsl_hsv_direct(self):
        hsl = np.array([210.0, 0.4, 0.3])
        np.testing.assert_allclose(hsv_to_hsl(hsl_to_hsv(hsl)), hsl, atol=1e-10)
        np.testing.assert_allclose(hsv_to_srgb(hsl_to_hsv(hsl)), hsl_to_srgb(hsl), atol=1e-10)


class TestHexConversion:
    """Hex helpers."""

    def test_to_hex(self):
        assert srgb_to_hex(np.array([0.4118, 0.6824, 0.3647])) == "#69ae5d"

    def test_to_hex_clips(self):
        assert srgb_to_hex(np.array([1.2, -0.1, 0.5])) == "#ff0080"

    def test_to_hex_alpha(self):
        assert srgb_to_hex(np.array([0.0, 0.0, 0.0]), alpha=0.5) == "#00000080"
        assert srgb_to_hex(np.array([0.0, 0.0, 0.0]), alpha=1.0) == "#000000"

    def test_from_hex(self):
        np.testing.assert_allclose(hex_to_srgb("#ff8000"), [1.0, 128 / 255, 0.0])
