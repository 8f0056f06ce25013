# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""
Reference palettes, family matching and palette generation.
"""

from chromakit.palettes.catalog import (
    RADIX_EXCLUDED,
    TAILWIND_EXCLUDED,
    radix_catalog,
    radix_contrast_averages,
    radix_family,
    tailwind_catalog,
    tailwind_contrast_averages,
    tailwind_family,
)
from chromakit.palettes.generator import (
    GENERATOR_FAMILIES,
    RADIX_UI,
    TAILWIND_V4,
    GeneratorConfig,
    generate_palette,
    generate_radix_palette,
    generate_tailwind_palette,
)
from chromakit.palettes.matcher import find_closest, find_closest_radix

__all__ = [
    # Generation
    "generate_palette",
    "generate_tailwind_palette",
    "generate_radix_palette",
    "GeneratorConfig",
    "GENERATOR_FAMILIES",
    "TAILWIND_V4",
    "RADIX_UI",
    # Matching
    "find_closest",
    "find_closest_radix",
    # Catalogs
    "tailwind_catalog",
    "tailwind_family",
    "radix_catalog",
    "radix_family",
    "tailwind_contrast_averages",
    "radix_contrast_averages",
    "TAILWIND_EXCLUDED",
    "RADIX_EXCLUDED",
]
