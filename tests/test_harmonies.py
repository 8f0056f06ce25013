# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""Tests for hue-wheel color harmonies."""

import numpy as np
import pytest

from chromakit.errors import UnknownAlgorithmError
from chromakit.metrics.harmonies import (
    HARMONY_HUE_SHIFTS,
    HARMONY_TYPES,
    build_harmony,
    harmony,
    monochromatics,
)
from chromakit.runtime.service import ColorService
from chromakit.schema.color import Color, ColorSpace

BASE = Color(ColorSpace.HSL, (120.0, 0.5, 0.6))


@pytest.fixture
def service():
    return ColorService()


# =============================================================================
# Hue shifts
# =============================================================================


class TestBuildHarmony:
    """Fixed hue-shift sets on an HSL base."""

    def test_shifts_hue_only(self):
        colors = build_harmony(BASE, (0.0, 30.0, 60.0))
        assert [c.values for c in colors] == [
            (120.0, 0.5, 0.6),
            (150.0, 0.5, 0.6),
            (180.0, 0.5, 0.6),
        ]
        assert all(c.space is ColorSpace.HSL for c in colors)

    def test_negative_shift_wraps(self):
        assert build_harmony(BASE, (-150.0,))[0].values[0] == 330.0

    def test_keeps_alpha(self):
        colors = build_harmony(BASE.with_alpha(0.8), (0.0, 90.0))
        assert [c.alpha for c in colors] == [0.8, 0.8]

    @pytest.mark.parametrize("name, hues", [
        ("Analogous", [90.0, 120.0, 150.0]),
        ("Complementary", [120.0, 300.0]),
        ("SplitComplementary", [330.0, 10.0, 50.0, 190.0, 230.0]),
        ("DoubleSplitComplementary", [90.0, 120.0, 150.0, 270.0, 330.0]),
        ("Square", [120.0, 180.0, 300.0, 0.0]),
        ("Tetradic", [120.0, 210.0, 300.0, 30.0]),
        ("Triadic", [120.0, 240.0, 0.0]),
    ])
    def test_named_sets(self, name, hues):
        colors = build_harmony(BASE, HARMONY_HUE_SHIFTS[name])
        assert [c.values[0] for c in colors] == hues

    def test_requires_hsl(self):
        with pytest.raises(ValueError, match="hsl"):
            build_harmony(Color(ColorSpace.SRGB, (1.0, 0.0, 0.0)), (0.0,))


class TestMonochromatics:
    """Lightness spread around the base."""

    def test_four_levels_around_base(self):
        colors = monochromatics(BASE)
        np.testing.assert_allclose([c.values[2] for c in colors], [0.48, 0.56, 0.64, 0.72])
        assert all(c.values[:2] == (120.0, 0.5) for c in colors)

    @pytest.mark.parametrize("lightness", [0.0, 1.0])
    def test_extremes_collapse(self, lightness):
        colors = monochromatics(BASE.with_values((120.0, 0.5, lightness)))
        assert [c.values[2] for c in colors] == [lightness] * 4


# =============================================================================
# Entry point
# =============================================================================


class TestHarmony:
    """harmony(color, type, output_space)."""

    def test_complementary_of_red(self, service):
        colors = harmony("#ff0000", "Complementary", "srgb", service=service)
        np.testing.assert_allclose(colors[0].vector, [1.0, 0.0, 0.0], atol=1e-9)
        np.testing.assert_allclose(colors[1].vector, [0.0, 1.0, 1.0], atol=1e-9)

    def test_default_output_is_oklch(self, service):
        colors = harmony("#69ae5d", "Triadic", service=service)
        assert len(colors) == 3
        assert all(c.space is ColorSpace.OKLCH for c in colors)

    @pytest.mark.parametrize("name", HARMONY_TYPES)
    def test_every_type(self, service, name):
        colors = harmony(BASE, name, "hsl", service=service)
        expected = 4 if name == "Monochromatic" else len(HARMONY_HUE_SHIFTS[name])
        assert len(colors) == expected

    def test_unknown(self, service):
        with pytest.raises(UnknownAlgorithmError, match="Unknown harmony: Pentadic"):
            harmony("#69ae5d", "Pentadic", service=service)
