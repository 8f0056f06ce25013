# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""
Palette records: reference families, match results and generated ramps.

Shade ids:
- Tailwind: 50, 100, 200, ..., 900, 950
- Radix: 1..12, per category (light, dark, light_alpha, dark_alpha)

Every record is immutable. A GeneratedPalette is created fresh per
``generate_palette`` call and never mutated afterwards.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Iterator, Optional

from chromakit.schema.color import Color, ColorSpace

RADIX_CATEGORIES = ("light", "dark", "light_alpha", "dark_alpha")


# =============================================================================
# Reference Data
# =============================================================================


@dataclass(frozen=True, slots=True)
class ReferenceShade:
    """One catalog shade: id plus its OKLCh color."""
    shade: int
    color: Color

    def __post_init__(self) -> None:
        if self.color.space is not ColorSpace.OKLCH:
            raise ValueError(f"Reference shade {self.shade} must be oklch, got {self.color.space.value}")


@dataclass(frozen=True, slots=True)
class PaletteFamily:
    """
    A named, ordered ramp of reference shades.

    Attributes:
        name: Family name as published ("Green", "Amber")
        shades: Reference shades, lightest first
        category: Radix category the ramp belongs to, None for Tailwind
    """
    name: str
    shades: tuple[ReferenceShade, ...]
    category: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.shades:
            raise ValueError(f"Palette family {self.name} has no shades")
        if self.category is not None and self.category not in RADIX_CATEGORIES:
            raise ValueError(f"Unknown palette category: {self.category}")

    @property
    def shade_ids(self) -> tuple[int, ...]:
        return tuple(s.shade for s in self.shades)

    def shade(self, shade: int) -> ReferenceShade:
        """
        Look up a reference shade by id.

        Raises:
            KeyError: If the family has no such shade.
        """
        for ref in self.shades:
            if ref.shade == shade:
                return ref
        raise KeyError(f"{self.name} has no shade {shade}")

    def __iter__(self) -> Iterator[ReferenceShade]:
        return iter(self.shades)

    def __len__(self) -> int:
        return len(self.shades)


@dataclass(frozen=True, slots=True)
class ShadeContrastAverage:
    """
    Average APCA contrast of a shade id across the whole catalog.

    Attributes:
        shade: Shade id
        on_white: Average Lc of the shade against white (text on white)
        on_black: Average Lc of the shade against black
    """
    shade: int
    on_white: float
    on_black: float


@dataclass(frozen=True, slots=True)
class FamilyMatch:
    """
    Result of matching a color against a catalog.

    Attributes:
        family: Name of the closest family
        palette: The matched family's reference ramp
        shade: Id of the closest shade within that family
        delta: Scaled OKLab distance to that shade
        category: Radix category of the match, None for Tailwind
    """
    family: str
    palette: PaletteFamily
    shade: int
    delta: float
    category: Optional[str] = None

    def __post_init__(self) -> None:
        if self.delta < 0.0:
            raise ValueError(f"Match delta must be >= 0, got {self.delta}")

    @property
    def reference(self) -> ReferenceShade:
        """The matched reference shade."""
        return self.palette.shade(self.shade)


# =============================================================================
# Generated Output
# =============================================================================


@dataclass(frozen=True, slots=True)
class GeneratedShade:
    """
    One shade of a generated palette.

    Attributes:
        shade: Shade id
        color: Canonical OKLCh color
        rgb: sRGB CSS string ("#69ae5d" or "rgba(...)")
        oklch: OKLCh CSS string
        chromakit: Portable ``ChromaKit|v1`` string of ``color``
        is_seed: True for the slot the seed matched (it carries the seed
            unchanged when seed preservation is on)
    """
    shade: int
    color: Color
    rgb: str
    oklch: str
    chromakit: str
    is_seed: bool = False

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "shade": self.shade,
            "rgb": self.rgb,
            "oklch": self.oklch,
            "chromakit": self.chromakit,
            "is_seed": self.is_seed,
            "color": self.color.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class GeneratedPalette(Mapping):
    """
    A generated ramp, read-only mapping of shade id → GeneratedShade.

    Attributes:
        generator: Generator that produced it ("Tailwind v4", "Radix UI")
        family: Name of the reference family the seed matched
        seed_shade: Shade id the seed matched
        shades: Shades in ramp order
        category: Radix category, None for Tailwind
    """
    generator: str
    family: str
    seed_shade: int
    shades: tuple[GeneratedShade, ...]
    category: Optional[str] = None

    def __post_init__(self) -> None:
        ids = [s.shade for s in self.shades]
        if len(set(ids)) != len(ids):
            raise ValueError(f"Duplicate shade ids in palette: {ids}")

    def __getitem__(self, shade: int) -> GeneratedShade:
        for s in self.shades:
            if s.shade == shade:
                return s
        raise KeyError(shade)

    def __iter__(self) -> Iterator[int]:
        return (s.shade for s in self.shades)

    def __len__(self) -> int:
        return len(self.shades)

    @property
    def array_values(self) -> tuple[GeneratedShade, ...]:
        """Shades as an ordered tuple, lightest first."""
        return self.shades

    @property
    def seed(self) -> GeneratedShade:
        """The shade in the seed's slot."""
        return self[self.seed_shade]

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        d = {
            "generator": self.generator,
            "family": self.family,
            "seed_shade": self.seed_shade,
            "shades": [s.to_dict() for s in self.shades],
        }
        if self.category is not None:
            d["category"] = self.category
        return d

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)


@dataclass(frozen=True, slots=True)
class RadixGeneratedPalette:
    """
    Radix output: one GeneratedPalette per category.

    Indexing by category name returns that category's ramp::

        palette["dark"][9].rgb
    """
    light: GeneratedPalette
    dark: GeneratedPalette
    light_alpha: GeneratedPalette
    dark_alpha: GeneratedPalette

    def __getitem__(self, category: str) -> GeneratedPalette:
        if category not in RADIX_CATEGORIES:
            raise KeyError(category)
        return getattr(self, category)

    @property
    def generator(self) -> str:
        return self.light.generator

    @property
    def family(self) -> str:
        return self.light.family

    @property
    def categories(self) -> dict[str, GeneratedPalette]:
        """Category name → ramp, in canonical order."""
        return {name: getattr(self, name) for name in RADIX_CATEGORIES}

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {name: p.to_dict() for name, p in self.categories.items()}

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)
