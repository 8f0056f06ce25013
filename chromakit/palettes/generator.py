# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""
Contrast-aware palette synthesis from a single seed color.

Pipeline per generated shade:

1. Seed pass-through: the matched slot carries the seed unchanged
2. Hue/chroma transplant from the seed onto the reference shade
3. Chroma clamp into sRGB
4. APCA retarget toward the catalog's average contrast for that slot
5. Render rgb / oklch / v1 strings

Usage::

    from chromakit import generate_palette

    palette = generate_palette("#69ae5d")
    palette[500].rgb                 # "#..."
    [s.oklch for s in palette.array_values]

    radix = generate_palette("#69ae5d", family="Radix UI")
    radix["dark"][9].rgb
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional, Union

import numpy as np

from chromakit.errors import UnknownGeneratorError
from chromakit.metrics.gamut import clamp_chroma_to_srgb
from chromakit.metrics.optimal import (
    OPTIMAL_CONTRAST_METHODS,
    OptimalContrastConfig,
    search_optimal_color,
)
from chromakit.palettes.catalog import (
    radix_contrast_averages,
    radix_family,
    tailwind_catalog,
    tailwind_contrast_averages,
)
from chromakit.palettes.matcher import find_closest, find_closest_radix
from chromakit.schema.color import Color, ColorSpace
from chromakit.schema.palette import (
    RADIX_CATEGORIES,
    FamilyMatch,
    GeneratedPalette,
    GeneratedShade,
    PaletteFamily,
    RadixGeneratedPalette,
    ShadeContrastAverage,
)

logger = logging.getLogger(__name__)

TAILWIND_V4 = "Tailwind v4"
RADIX_UI = "Radix UI"
GENERATOR_FAMILIES = (TAILWIND_V4, RADIX_UI)

BLACK = Color(ColorSpace.SRGB, (0.0, 0.0, 0.0))
WHITE = Color(ColorSpace.SRGB, (1.0, 1.0, 1.0))


# =============================================================================
# Configuration
# =============================================================================


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """
    Tuning knobs for palette synthesis.

    Attributes:
        chroma_step: OKLCh chroma decrement of the gamut clamp loop
        contrast_method: Contrast function the retarget search optimizes.
            The bundled averages are APCA Lc values.
        tailwind_near_white: Tailwind shades at or below this id are not
            retargeted
        radix_near_white: Radix shades at or below this id are not
            retargeted
        tailwind_dark_from: First Tailwind shade retargeted against white
            (lighter shades are retargeted against black)
        search: Bounds of the optimal-contrast binary search
    """
    chroma_step: float = 0.002
    contrast_method: str = "APCA"
    tailwind_near_white: int = 50
    radix_near_white: int = 10
    tailwind_dark_from: int = 500
    search: OptimalContrastConfig = field(default_factory=OptimalContrastConfig)

    def __post_init__(self) -> None:
        if self.chroma_step <= 0.0:
            raise ValueError(f"chroma_step must be > 0, got {self.chroma_step}")
        if self.contrast_method not in OPTIMAL_CONTRAST_METHODS:
            raise ValueError(
                f"contrast_method must be one of {tuple(OPTIMAL_CONTRAST_METHODS)}, "
                f"got {self.contrast_method!r}"
            )


DEFAULT_GENERATOR_CONFIG = GeneratorConfig()


# =============================================================================
# Shade Synthesis
# =============================================================================


@dataclass(frozen=True, slots=True)
class _Transplant:
    """Hue shift and chroma ratio carried from the seed onto a ramp."""
    hue_shift: float
    replace_hue: Optional[float]
    chroma_ratio: float

    @classmethod
    def between(cls, seed: Color, reference: Color) -> _Transplant:
        _, seed_c, seed_h = seed.values
        _, ref_c, ref_h = reference.values
        shift = ((seed_h - ref_h) % 360.0 + 360.0) % 360.0
        ratio = seed_c / ref_c if ref_c != 0.0 else 0.0
        # Seed already sits on the reference hue: copy that hue everywhere
        replace = ref_h if shift == 0.0 else None
        return cls(hue_shift=shift, replace_hue=replace, chroma_ratio=ratio)

    def apply(self, base: Color) -> Color:
        L, c, h = base.values
        hue = self.replace_hue if self.replace_hue is not None else (h + self.hue_shift) % 360.0
        return base.with_values((L, c * self.chroma_ratio, hue))


def _render(shade: int, color: Color, is_seed: bool, service) -> GeneratedShade:
    return GeneratedShade(
        shade=shade,
        color=color,
        rgb=service.convert(color, ColorSpace.SRGB).css,
        oklch=color.css,
        chromakit=color.to_v1(),
        is_seed=is_seed,
    )


def _retarget(
    candidate: Color,
    average: ShadeContrastAverage,
    against_black: bool,
    config: GeneratorConfig,
    service,
) -> Color:
    """Search the tone of ``candidate`` that hits the average contrast against black or white."""
    anchor, target = (BLACK, average.on_black) if against_black else (WHITE, average.on_white)
    rgb = service.convert(candidate, ColorSpace.SRGB)
    opaque = Color(ColorSpace.SRGB, np.clip(rgb.vector, 0.0, 1.0))
    found = search_optimal_color(
        opaque,
        anchor,
        target,
        OPTIMAL_CONTRAST_METHODS[config.contrast_method],
        config.search,
    )
    return service.convert(found.with_alpha(candidate.alpha), ColorSpace.OKLCH)


def _synthesize(
    seed: Color,
    match: FamilyMatch,
    ramp: PaletteFamily,
    averages: Mapping[int, ShadeContrastAverage],
    near_white: int,
    against_black: Callable[[int], bool],
    generator: str,
    adjust_contrast: bool,
    ensure_seed_preserved: bool,
    config: GeneratorConfig,
    service,
) -> GeneratedPalette:
    transplant = _Transplant.between(seed, ramp.shade(match.shade).color)
    logger.debug(
        "[Generator] %s %s%s: hue %s %.3f, chroma x%.4f",
        generator,
        ramp.name,
        f"/{ramp.category}" if ramp.category else "",
        "replace" if transplant.replace_hue is not None else "shift",
        transplant.replace_hue if transplant.replace_hue is not None else transplant.hue_shift,
        transplant.chroma_ratio,
    )

    shades = []
    for reference in ramp.shades:
        is_seed = reference.shade == match.shade
        if ensure_seed_preserved and is_seed:
            shades.append(_render(reference.shade, seed, True, service))
            continue

        color = clamp_chroma_to_srgb(transplant.apply(reference.color), step=config.chroma_step)
        if adjust_contrast and reference.shade > near_white:
            color = _retarget(
                color,
                averages[reference.shade],
                against_black(reference.shade),
                config,
                service,
            )
        shades.append(_render(reference.shade, color, is_seed, service))

    return GeneratedPalette(
        generator=generator,
        family=ramp.name,
        seed_shade=match.shade,
        shades=tuple(shades),
        category=ramp.category,
    )


# =============================================================================
# Generators
# =============================================================================


def generate_tailwind_palette(
    seed: Color,
    adjust_contrast: bool = True,
    ensure_seed_preserved: bool = True,
    *,
    config: GeneratorConfig = DEFAULT_GENERATOR_CONFIG,
    service=None,
) -> GeneratedPalette:
    """
    Build an 11-shade Tailwind v4 ramp (50..950) around an OKLCh seed.

    Shades lighter than ``config.tailwind_dark_from`` are retargeted
    against black, the rest against white.
    """
    service = _service(service)
    match = find_closest(seed, tailwind_catalog())
    return _synthesize(
        seed,
        match,
        match.palette,
        tailwind_contrast_averages(),
        config.tailwind_near_white,
        lambda shade: shade < config.tailwind_dark_from,
        TAILWIND_V4,
        adjust_contrast,
        ensure_seed_preserved,
        config,
        service,
    )


def generate_radix_palette(
    seed: Color,
    adjust_contrast: bool = True,
    ensure_seed_preserved: bool = True,
    *,
    config: GeneratorConfig = DEFAULT_GENERATOR_CONFIG,
    service=None,
) -> RadixGeneratedPalette:
    """
    Build Radix ramps (1..12) for all four categories around an OKLCh seed.

    The seed is matched across every category; each category is then
    synthesized from its own reference shades, alpha and contrast table.
    Light categories are retargeted against black, dark ones against white.
    """
    service = _service(service)
    match = find_closest_radix(seed)
    ramps = {}
    for category in RADIX_CATEGORIES:
        ramps[category] = _synthesize(
            seed,
            match,
            radix_family(match.family, category),
            radix_contrast_averages(category),
            config.radix_near_white,
            lambda shade, category=category: "light" in category,
            RADIX_UI,
            adjust_contrast,
            ensure_seed_preserved,
            config,
            service,
        )
    return RadixGeneratedPalette(**ramps)


def generate_palette(
    color_or_text: Union[str, Color],
    adjust_contrast: bool = True,
    ensure_seed_preserved: bool = True,
    family: str = TAILWIND_V4,
    *,
    config: GeneratorConfig = DEFAULT_GENERATOR_CONFIG,
    service=None,
) -> Union[GeneratedPalette, RadixGeneratedPalette]:
    """
    Generate a palette from a seed color.

    Args:
        color_or_text: Seed as text (any parseable notation) or Color
        adjust_contrast: Retarget synthesized shades toward the catalog's
            average APCA contrast
        ensure_seed_preserved: Put the seed, unchanged, in its matched slot
        family: "Tailwind v4" or "Radix UI"
        config: Synthesis tuning
        service: ColorService used for parsing/conversion

    Returns:
        GeneratedPalette for Tailwind, RadixGeneratedPalette for Radix.

    Raises:
        UnknownGeneratorError: Unsupported ``family``.
        ColorParseError: Unparseable seed.
    """
    if family not in GENERATOR_FAMILIES:
        raise UnknownGeneratorError(family)
    service = _service(service)
    seed = service.parse_color(color_or_text, ColorSpace.OKLCH)
    if family == RADIX_UI:
        return generate_radix_palette(
            seed, adjust_contrast, ensure_seed_preserved, config=config, service=service,
        )
    return generate_tailwind_palette(
        seed, adjust_contrast, ensure_seed_preserved, config=config, service=service,
    )


def _service(service):
    if service is not None:
        return service
    from chromakit.runtime.service import default_service
    return default_service()
