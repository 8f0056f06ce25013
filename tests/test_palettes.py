# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""Tests for the reference catalogs, family matching and palette generation."""

import json

import pytest

from chromakit.errors import ColorParseError, UnknownGeneratorError
from chromakit.metrics.contrast import contrast_apca
from chromakit.metrics.gamut import in_srgb_gamut
from chromakit.palettes import (
    RADIX_UI,
    TAILWIND_V4,
    GeneratorConfig,
    find_closest,
    find_closest_radix,
    generate_palette,
    generate_radix_palette,
    generate_tailwind_palette,
    radix_catalog,
    radix_contrast_averages,
    radix_family,
    tailwind_catalog,
    tailwind_contrast_averages,
    tailwind_family,
)
from chromakit.palettes import generator
from chromakit.palettes.data import TAILWIND_SHADES
from chromakit.runtime.service import ColorService
from chromakit.schema.color import Color, ColorSpace
from chromakit.schema.palette import (
    RADIX_CATEGORIES,
    GeneratedPalette,
    PaletteFamily,
    RadixGeneratedPalette,
    ReferenceShade,
)

WHITE = Color(ColorSpace.SRGB, (1.0, 1.0, 1.0))
SEED = "#69AE5D"


def _oklch(L, c, h, alpha=None):
    return Color(ColorSpace.OKLCH, (L, c, h), alpha=alpha)


@pytest.fixture
def service():
    return ColorService()


@pytest.fixture(scope="module")
def tailwind():
    return generate_palette(SEED, service=ColorService())


@pytest.fixture(scope="module")
def radix():
    return generate_palette(SEED, family=RADIX_UI, service=ColorService())


# =============================================================================
# Catalogs
# =============================================================================


class TestCatalogs:
    """Static reference data."""

    def test_tailwind_generator_catalog_skips_neutrals(self):
        names = [f.name for f in tailwind_catalog()]
        assert len(names) == 17
        assert "Gray" not in names and "Stone" not in names
        assert names[0] == "Red"

    def test_tailwind_full_catalog(self):
        catalog = tailwind_catalog(include_excluded=True)
        assert len(catalog) == 22
        assert all(f.shade_ids == TAILWIND_SHADES for f in catalog)

    def test_tailwind_family(self):
        assert tailwind_family("Red").shade(500).color.values == (0.637, 0.237, 25.331)
        with pytest.raises(KeyError, match="Unknown Tailwind family"):
            tailwind_family("Mauve")

    def test_radix_catalog_is_family_major(self):
        catalog = radix_catalog()
        assert [(f.name, f.category) for f in catalog[:4]] == [
            ("Amber", category) for category in RADIX_CATEGORIES
        ]
        assert not {"Black", "White", "Slate"} & {f.name for f in catalog}

    def test_radix_full_catalog(self):
        catalog = radix_catalog(include_excluded=True)
        assert len(catalog) == 33 * 4
        assert all(f.shade_ids == tuple(range(1, 13)) for f in catalog)

    def test_radix_alpha_variants_carry_alpha(self):
        assert radix_family("Amber", "light_alpha").shade(1).color.alpha == 0.016
        assert radix_family("Amber", "light").shade(1).color.alpha is None

    def test_radix_family_errors(self):
        with pytest.raises(KeyError, match="Unknown Radix category"):
            radix_family("Amber", "sepia")
        with pytest.raises(KeyError, match="Unknown Radix family"):
            radix_family("Chartreuse", "light")

    def test_contrast_averages(self):
        averages = tailwind_contrast_averages()
        assert tuple(averages) == TAILWIND_SHADES
        assert averages[50].on_white == 0.0
        assert averages[950].on_black == 0.0
        for category in RADIX_CATEGORIES:
            assert tuple(radix_contrast_averages(category)) == tuple(range(1, 13))


# =============================================================================
# Matching
# =============================================================================


class TestFindClosest:
    """Nearest family by scaled OKLab distance."""

    @pytest.mark.parametrize("values, expected", [
        ((0.7, 0.2068, 139.76), "Lime"),
        ((0.5941, 0.1911, 29.23), "Orange"),
        ((0.4941, 0.2507, 264.052), "Blue"),
        ((0.4941, 0.2131, 311.29), "Purple"),
    ])
    def test_tailwind(self, values, expected):
        assert find_closest(_oklch(*values), tailwind_catalog()).family == expected

    def test_exact_reference_has_zero_delta(self):
        match = find_closest(tailwind_family("Green").shade(500).color, tailwind_catalog())
        assert (match.family, match.shade, match.delta) == ("Green", 500, 0.0)
        assert match.category is None

    @pytest.mark.parametrize("color, expected", [
        (_oklch(0.183564, 0.012647, 77.267509), "Amber"),
        (_oklch(0.993194, 0.003287, 247.643574), "Blue"),
        (_oklch(0.586109, 0.263637, 14.747349, alpha=0.083), "Crimson"),
        (_oklch(0.904317, 0.19678, 148.259541, alpha=0.358), "Grass"),
    ])
    def test_radix(self, color, expected):
        match = find_closest_radix(color, radix_catalog(include_excluded=True))
        assert match.family == expected
        assert match.delta == pytest.approx(0.0, abs=1e-12)

    def test_radix_reports_category(self):
        match = find_closest_radix(_oklch(0.183564, 0.012647, 77.267509))
        assert (match.family, match.category, match.shade) == ("Amber", "dark", 1)

    def test_tie_goes_to_earlier_family(self):
        shades = (ReferenceShade(1, _oklch(0.5, 0.1, 30.0)),)
        catalog = (PaletteFamily("First", shades), PaletteFamily("Second", shades))
        assert find_closest(_oklch(0.6, 0.1, 30.0), catalog).family == "First"

    def test_alpha_ignored(self):
        opaque = find_closest(_oklch(0.6, 0.15, 200.0), tailwind_catalog())
        faded = find_closest(_oklch(0.6, 0.15, 200.0, alpha=0.1), tailwind_catalog())
        assert (opaque.family, opaque.shade, opaque.delta) == (faded.family, faded.shade, faded.delta)

    def test_empty_catalog(self):
        with pytest.raises(ValueError, match="empty catalog"):
            find_closest(_oklch(0.5, 0.1, 30.0), ())

    def test_requires_oklch(self):
        with pytest.raises(ValueError, match="oklch"):
            find_closest(WHITE, tailwind_catalog())


# =============================================================================
# Tailwind generation
# =============================================================================


class TestTailwindGeneration:
    """11-shade ramps."""

    def test_shape(self, tailwind):
        assert isinstance(tailwind, GeneratedPalette)
        assert tailwind.generator == TAILWIND_V4
        assert tuple(tailwind) == TAILWIND_SHADES
        assert [s.shade for s in tailwind.array_values] == list(TAILWIND_SHADES)

    def test_exactly_one_seed_slot(self, tailwind):
        seeds = [s.shade for s in tailwind.array_values if s.is_seed]
        assert seeds == [tailwind.seed_shade]

    def test_seed_preserved(self, service):
        seed = service.parse_color(SEED)
        palette = generate_tailwind_palette(seed, service=service)
        assert palette.seed.color is seed
        assert palette.seed.rgb == "#69ae5d"

    def test_reference_seed_round_trips(self, service):
        reference = tailwind_family("Green").shade(500).color
        palette = generate_palette(reference, service=service)
        assert palette.family == "Green"
        assert palette.seed_shade == 500
        assert palette[500].oklch == reference.css

    def test_all_generated_shades_in_gamut(self, tailwind):
        for shade in tailwind.array_values:
            assert in_srgb_gamut(shade.color), shade.shade

    def test_rendered_rgb_is_exactly_in_range(self, tailwind, service):
        for shade in tailwind.array_values:
            rgb = service.parse_color(shade.rgb, ColorSpace.SRGB)
            assert in_srgb_gamut(rgb, tolerance=0.0), shade.shade

    def test_dark_shades_contrast_more_on_white(self, tailwind):
        def on_white(shade):
            rgb = ColorService().parse_color(tailwind[shade].rgb, "srgb")
            return contrast_apca(rgb, WHITE)

        assert on_white(950) > on_white(50)
        assert on_white(900) > on_white(500) > on_white(100)

    def test_strings_match_color(self, tailwind):
        for shade in tailwind.array_values:
            assert shade.oklch == shade.color.css
            assert shade.chromakit == shade.color.to_v1()
            assert shade.chromakit.startswith("ChromaKit|v1 oklch ")

    def test_deterministic(self, tailwind):
        again = generate_palette(SEED, service=ColorService())
        assert again.to_dict() == tailwind.to_dict()

    def test_without_preservation(self, service):
        seed = service.parse_color(SEED)
        palette = generate_tailwind_palette(seed, ensure_seed_preserved=False, service=service)
        assert palette.seed.is_seed
        assert palette.seed.color is not seed

    def test_without_contrast_adjustment_keeps_reference_lightness(self, service):
        seed = service.parse_color(SEED)
        palette = generate_tailwind_palette(seed, adjust_contrast=False, service=service)
        reference = tailwind_family(palette.family)
        for shade in palette.array_values:
            if not shade.is_seed:
                assert shade.color.values[0] == reference.shade(shade.shade).color.values[0]

    def test_translucent_seed_keeps_alpha_in_its_slot(self, service):
        palette = generate_palette("rgba(105, 174, 93, 0.5)", service=service)
        assert palette.seed.color.alpha == 0.5

    def test_json(self, tailwind):
        data = json.loads(tailwind.to_json())
        assert data["generator"] == "Tailwind v4"
        assert len(data["shades"]) == 11


# =============================================================================
# Hue/chroma transplant
# =============================================================================


class TestTransplant:
    """Shades synthesized without seed pass-through or contrast retarget."""

    @staticmethod
    def _plain(seed, service):
        return generate_tailwind_palette(
            seed, adjust_contrast=False, ensure_seed_preserved=False, service=service,
        )

    def test_operate_mode_shifts_hue_and_scales_chroma(self, service):
        seed = service.parse_color(SEED)
        match = find_closest(seed, tailwind_catalog())
        _, seed_c, seed_h = seed.values
        _, match_c, match_h = match.palette.shade(match.shade).color.values
        hue_shift = ((seed_h - match_h) % 360.0 + 360.0) % 360.0
        ratio = seed_c / match_c
        assert hue_shift != 0.0

        palette = self._plain(seed, service)
        for shade in palette.array_values:
            ref_L, ref_c, ref_h = match.palette.shade(shade.shade).color.values
            L, c, h = shade.color.values
            expected = _oklch(ref_L, ref_c * ratio, (ref_h + hue_shift) % 360.0)
            assert L == ref_L
            assert h == pytest.approx(expected.values[2], abs=1e-9), shade.shade
            if in_srgb_gamut(expected):
                assert c == pytest.approx(expected.values[1], abs=1e-12), shade.shade
            else:
                assert c < expected.values[1], shade.shade

    def test_replace_mode_copies_reference_hue(self, service):
        reference = tailwind_family("Green").shade(500).color
        palette = self._plain(reference, service)
        assert palette.family == "Green"
        for shade in palette.array_values:
            assert shade.color.values[2] == reference.values[2], shade.shade

    def test_tailwind_near_white_skips_retarget(self, service):
        seed = service.parse_color(SEED)
        plain = self._plain(seed, service)
        adjusted = generate_tailwind_palette(seed, ensure_seed_preserved=False, service=service)
        assert adjusted[50].color == plain[50].color
        assert any(
            adjusted[shade].color != plain[shade].color for shade in TAILWIND_SHADES[1:]
        )

    def test_radix_retarget_side_follows_category(self, service, monkeypatch):
        calls = []

        def record(color, average, against_black, config, service):
            calls.append(against_black)
            return color

        monkeypatch.setattr(generator, "_retarget", record)
        generate_radix_palette(service.parse_color(SEED), ensure_seed_preserved=False, service=service)
        # shades 11 and 12 of each category, in category order
        expected = [True, True, False, False, True, True, False, False]
        assert RADIX_CATEGORIES == ("light", "dark", "light_alpha", "dark_alpha")
        assert calls == expected

    def test_radix_near_white_skips_retarget(self, service):
        seed = service.parse_color(SEED)
        plain = generate_radix_palette(
            seed, adjust_contrast=False, ensure_seed_preserved=False, service=service,
        )
        adjusted = generate_radix_palette(seed, ensure_seed_preserved=False, service=service)
        for category in RADIX_CATEGORIES:
            for shade in range(1, 11):
                assert adjusted[category][shade].color == plain[category][shade].color, (
                    category, shade,
                )


# =============================================================================
# Radix generation
# =============================================================================


class TestRadixGeneration:
    """Four 12-shade ramps."""

    def test_shape(self, radix):
        assert isinstance(radix, RadixGeneratedPalette)
        assert radix.generator == RADIX_UI
        for category in RADIX_CATEGORIES:
            ramp = radix[category]
            assert ramp.category == category
            assert tuple(ramp) == tuple(range(1, 13))
            assert ramp.family == radix.family

    def test_same_seed_slot_everywhere(self, radix):
        slots = {radix[category].seed_shade for category in RADIX_CATEGORIES}
        assert len(slots) == 1

    def test_seed_in_every_category(self, radix, service):
        seed = service.parse_color(SEED)
        for category in RADIX_CATEGORIES:
            assert radix[category].seed.color == seed

    def test_alpha_categories_keep_reference_alpha(self, radix):
        ramp = radix["light_alpha"]
        reference = radix_family(radix.family, "light_alpha")
        shade = 1 if ramp.seed_shade != 1 else 2
        assert ramp[shade].color.alpha == reference.shade(shade).color.alpha

    def test_all_in_gamut(self, radix):
        for category in RADIX_CATEGORIES:
            for shade in radix[category].array_values:
                assert in_srgb_gamut(shade.color), (category, shade.shade)

    def test_direct_call_matches_dispatch(self, radix, service):
        direct = generate_radix_palette(service.parse_color(SEED), service=service)
        assert direct.to_dict() == radix.to_dict()


# =============================================================================
# Dispatch and configuration
# =============================================================================


class TestGeneratePalette:
    """Entry point."""

    def test_unknown_family(self):
        with pytest.raises(UnknownGeneratorError, match="Unknown generator family: Unknown Family"):
            generate_palette(SEED, family="Unknown Family")

    def test_family_checked_before_parsing(self):
        with pytest.raises(UnknownGeneratorError):
            generate_palette("not a color", family="Unknown Family")

    def test_bad_seed(self, service):
        with pytest.raises(ColorParseError):
            generate_palette("not a color", service=service)

    def test_config_validation(self):
        with pytest.raises(ValueError, match="chroma_step"):
            GeneratorConfig(chroma_step=0.0)
        with pytest.raises(ValueError, match="contrast_method"):
            GeneratorConfig(contrast_method="Weber")

    def test_wcag_search(self, service):
        config = GeneratorConfig(contrast_method="WCAG21")
        palette = generate_palette(SEED, config=config, service=service)
        assert len(palette) == 11
