# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""
ChromaKit -- Color conversion, perceptual metrics and palette generation.

Converts colors between device and perceptual spaces, measures
perceptual difference and contrast, and derives accessible multi-shade
palettes from a single seed color.

Quick start::

    from chromakit import parse_color, convert, generate_palette

    c = parse_color("#69ae5d")            # OKLCh by default
    convert(c, "lab").css                 # "lab(...)"
    generate_palette(c)[900].rgb          # Tailwind-style ramp
"""

from __future__ import annotations

__version__ = "1.0.0"

from chromakit.errors import (
    ChromaKitError,
    ColorInputError,
    ColorParseError,
    ColorSyntaxError,
    RoutingError,
    UnknownAlgorithmError,
    UnknownGeneratorError,
)
from chromakit.metrics import (
    check_apca_contrast,
    check_wcag21_contrast,
    contrast,
    delta_e,
    gamut_map_min_delta_e,
    get_optimal_color_for_contrast,
    harmony,
    in_srgb_gamut,
)
from chromakit.palettes import GeneratorConfig, find_closest, find_closest_radix, generate_palette
from chromakit.runtime import (
    ColorService,
    SerializerFormat,
    clear_color_cache,
    convert,
    get_cache_stats,
    parse_color,
    serialize_v1,
    to_css_string,
    to_css_variables,
    to_palette_json,
)
from chromakit.schema import (
    D50,
    D65,
    Color,
    ColorSpace,
    GeneratedPalette,
    GeneratedShade,
    Illuminant,
    RadixGeneratedPalette,
)

__all__ = [
    # Core API
    "parse_color",
    "convert",
    "ColorService",
    "generate_palette",
    # Types (commonly needed)
    "Color",
    "ColorSpace",
    "Illuminant",
    "D50",
    "D65",
    "GeneratedPalette",
    "GeneratedShade",
    "RadixGeneratedPalette",
    "GeneratorConfig",
    # Metrics
    "delta_e",
    "contrast",
    "get_optimal_color_for_contrast",
    "in_srgb_gamut",
    "gamut_map_min_delta_e",
    "check_wcag21_contrast",
    "check_apca_contrast",
    "harmony",
    # Matching
    "find_closest",
    "find_closest_radix",
    # Serialization
    "SerializerFormat",
    "to_css_string",
    "serialize_v1",
    "to_palette_json",
    "to_css_variables",
    # Cache
    "get_cache_stats",
    "clear_color_cache",
    # Errors
    "ChromaKitError",
    "ColorParseError",
    "ColorInputError",
    "ColorSyntaxError",
    "RoutingError",
    "UnknownAlgorithmError",
    "UnknownGeneratorError",
    # Version
    "__version__",
]
