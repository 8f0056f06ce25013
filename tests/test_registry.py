# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""Tests for the conversion registry and router."""

import numpy as np
import pytest

from chromakit.convert.registry import ConversionRegistry, register_all_conversions
from chromakit.errors import RoutingError
from chromakit.schema.color import D50, D65, Color, ColorSpace


@pytest.fixture
def registry():
    return register_all_conversions(ConversionRegistry())


class TestRegistryGraph:
    """Edge bookkeeping."""

    def test_bootstrap_edge_count(self, registry):
        assert len(registry) == 26

    def test_bootstrap_covers_every_space(self, registry):
        assert registry.spaces == set(ColorSpace)

    def test_starts_empty(self):
        assert len(ConversionRegistry()) == 0

    def test_register_accepts_names(self):
        reg = ConversionRegistry()
        reg.register("rgb", "hsl", lambda c: c)
        assert reg.has_edge(ColorSpace.SRGB, ColorSpace.HSL)
        assert not reg.has_edge(ColorSpace.HSL, ColorSpace.SRGB)

    def test_register_overwrites(self):
        reg = ConversionRegistry()
        first = Color(ColorSpace.HSL, (1, 0, 0))
        second = Color(ColorSpace.HSL, (2, 0, 0))
        reg.register(ColorSpace.SRGB, ColorSpace.HSL, lambda c: first)
        reg.register(ColorSpace.SRGB, ColorSpace.HSL, lambda c: second)
        assert len(reg) == 1
        assert reg.convert(Color(ColorSpace.SRGB, (0, 0, 0)), "hsl") is second


class TestFindPath:
    """Breadth-first routing."""

    def test_same_space_is_empty(self, registry):
        assert registry.find_path(ColorSpace.OKLCH, ColorSpace.OKLCH) == []

    def test_direct_edge(self, registry):
        assert registry.find_path(ColorSpace.LAB, ColorSpace.LCH) == [(ColorSpace.LAB, ColorSpace.LCH)]

    def test_shortest_chain(self, registry):
        S = ColorSpace
        assert registry.find_path(S.SRGB, S.OKLCH) == [
            (S.SRGB, S.LRGB), (S.LRGB, S.XYZ), (S.XYZ, S.OKLAB), (S.OKLAB, S.OKLCH),
        ]

    def test_unconnected_is_none(self):
        reg = ConversionRegistry()
        reg.register(ColorSpace.SRGB, ColorSpace.HSL, lambda c: c)
        assert reg.find_path(ColorSpace.HSL, ColorSpace.SRGB) is None


class TestConvert:
    """Applying routes to colors."""

    @pytest.mark.parametrize("space", list(ColorSpace))
    def test_identity_returns_same_object(self, registry, space):
        color = Color(space, (0.1, 0.2, 0.3))
        assert registry.convert(color, space) is color

    def test_empty_registry_raises(self):
        with pytest.raises(RoutingError, match="No conversion path could be found from srgb to oklch"):
            ConversionRegistry().convert(Color(ColorSpace.SRGB, (1, 0, 0)), "oklch")

    def test_routing_error_is_lookup_error(self):
        with pytest.raises(LookupError):
            ConversionRegistry().convert(Color(ColorSpace.SRGB, (1, 0, 0)), "lab")

    def test_alpha_carried_through_chain(self, registry):
        color = Color(ColorSpace.HSL, (200.0, 0.5, 0.4), alpha=0.3)
        assert registry.convert(color, "jzczhz").alpha == 0.3

    def test_unspecified_alpha_stays_none(self, registry):
        assert registry.convert(Color(ColorSpace.SRGB, (1, 0, 0)), "oklch").alpha is None

    def test_white_to_oklch(self, registry):
        white = registry.convert(Color(ColorSpace.SRGB, (1, 1, 1)), "oklch")
        assert white.values[0] == pytest.approx(1.0, abs=2e-4)
        assert white.values[1] == pytest.approx(0.0, abs=2e-4)

    def test_hsl_to_lch_roundtrip(self, registry):
        color = Color(ColorSpace.HSL, (120.0, 0.5, 0.5))
        back = registry.convert(registry.convert(color, "lch"), "hsl")
        np.testing.assert_allclose(back.vector, color.vector, atol=1e-8)

    def test_xyz_d50_is_adapted_before_lab(self, registry):
        """D50 white is white once re-expressed under D65."""
        white = Color(ColorSpace.XYZ, tuple(D50.white), illuminant=D50)
        lab = registry.convert(white, "lab")
        assert lab.values[0] == pytest.approx(100.0, abs=0.1)
        assert abs(lab.values[1]) < 0.1
        assert abs(lab.values[2]) < 0.1

    def test_into_xyz_is_d65(self, registry):
        xyz = registry.convert(Color(ColorSpace.SRGB, (0.2, 0.4, 0.6)), "xyz")
        assert xyz.illuminant == D65

    def test_p3_to_srgb(self, registry):
        red = registry.convert(Color(ColorSpace.P3, (1.0, 0.0, 0.0)), "srgb")
        assert red.values[0] > 1.0
        assert red.values[1] < 0.0
