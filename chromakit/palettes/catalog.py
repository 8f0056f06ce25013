# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""
Reference catalogs built from the static palette data.

Catalogs are tuples of PaletteFamily in publication order. Matching
breaks ties by that order, so it is part of the contract.

Generator catalogs leave out families that make poor seeds:
- Tailwind: Slate, Gray, Zinc, Neutral, Stone (near-neutral grays)
- Radix: Black, White (pure overlays) and Slate
"""

from __future__ import annotations

from functools import lru_cache

from chromakit.palettes.data import (
    RADIX_COLORS,
    RADIX_CONTRAST_AVERAGES,
    TAILWIND_COLORS,
    TAILWIND_CONTRAST_AVERAGES,
)
from chromakit.schema.color import Color, ColorSpace
from chromakit.schema.palette import (
    RADIX_CATEGORIES,
    PaletteFamily,
    ReferenceShade,
    ShadeContrastAverage,
)

TAILWIND_EXCLUDED = frozenset({"Slate", "Gray", "Zinc", "Neutral", "Stone"})
RADIX_EXCLUDED = frozenset({"Black", "White", "Slate"})


def _oklch(values: tuple[float, ...]) -> Color:
    alpha = values[3] if len(values) > 3 else None
    return Color(ColorSpace.OKLCH, values[:3], alpha=alpha)


# =============================================================================
# Tailwind
# =============================================================================


@lru_cache(maxsize=None)
def tailwind_catalog(include_excluded: bool = False) -> tuple[PaletteFamily, ...]:
    """
    Tailwind v4 families.

    Args:
        include_excluded: Keep the neutral families the generator skips.
    """
    return tuple(
        PaletteFamily(
            name=name,
            shades=tuple(ReferenceShade(shade, _oklch(v)) for shade, v in shades.items()),
        )
        for name, shades in TAILWIND_COLORS.items()
        if include_excluded or name not in TAILWIND_EXCLUDED
    )


def tailwind_family(name: str) -> PaletteFamily:
    """
    Look up one Tailwind family by name (case-sensitive).

    Raises:
        KeyError: Unknown family.
    """
    for family in tailwind_catalog(include_excluded=True):
        if family.name == name:
            return family
    raise KeyError(f"Unknown Tailwind family: {name}")


# =============================================================================
# Radix
# =============================================================================


@lru_cache(maxsize=None)
def radix_catalog(include_excluded: bool = False) -> tuple[PaletteFamily, ...]:
    """
    Radix ramps, one PaletteFamily per (family, category).

    Ordered family-major: Amber/light, Amber/dark, Amber/light_alpha,
    Amber/dark_alpha, Blue/light, ...
    """
    families = []
    for name, shades in RADIX_COLORS.items():
        if not include_excluded and name in RADIX_EXCLUDED:
            continue
        for category in RADIX_CATEGORIES:
            families.append(PaletteFamily(
                name=name,
                shades=tuple(
                    ReferenceShade(shade, _oklch(variants[category]))
                    for shade, variants in shades.items()
                ),
                category=category,
            ))
    return tuple(families)


def radix_family(name: str, category: str) -> PaletteFamily:
    """
    Look up one Radix ramp.

    Raises:
        KeyError: Unknown family or category.
    """
    if category not in RADIX_CATEGORIES:
        raise KeyError(f"Unknown Radix category: {category}")
    for family in radix_catalog(include_excluded=True):
        if family.name == name and family.category == category:
            return family
    raise KeyError(f"Unknown Radix family: {name}")


# =============================================================================
# Contrast Averages
# =============================================================================


def _averages(rows) -> dict[int, ShadeContrastAverage]:
    return {shade: ShadeContrastAverage(shade, on_white, on_black) for shade, on_white, on_black in rows}


@lru_cache(maxsize=None)
def tailwind_contrast_averages() -> dict[int, ShadeContrastAverage]:
    """Shade id → Tailwind catalog-wide APCA averages."""
    return _averages(TAILWIND_CONTRAST_AVERAGES)


@lru_cache(maxsize=None)
def radix_contrast_averages(category: str) -> dict[int, ShadeContrastAverage]:
    """
    Shade id → Radix catalog-wide APCA averages for one category.

    Raises:
        KeyError: Unknown category.
    """
    return _averages(RADIX_CONTRAST_AVERAGES[category])
