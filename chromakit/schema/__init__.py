# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""
Value types shared by every ChromaKit layer.

All types in this module are immutable (frozen dataclasses).
"""

from chromakit.schema.color import (
    CHANNELS,
    D50,
    D65,
    ILLUMINANTS,
    A,
    Color,
    ColorSpace,
    Illuminant,
)
from chromakit.schema.palette import (
    RADIX_CATEGORIES,
    FamilyMatch,
    GeneratedPalette,
    GeneratedShade,
    PaletteFamily,
    RadixGeneratedPalette,
    ReferenceShade,
    ShadeContrastAverage,
)

__all__ = [
    # Color record
    "Color",
    "ColorSpace",
    "CHANNELS",
    # Illuminants
    "Illuminant",
    "ILLUMINANTS",
    "D50",
    "D65",
    "A",
    # Reference data
    "ReferenceShade",
    "PaletteFamily",
    "ShadeContrastAverage",
    "FamilyMatch",
    "RADIX_CATEGORIES",
    # Generated output
    "GeneratedShade",
    "GeneratedPalette",
    "RadixGeneratedPalette",
]
