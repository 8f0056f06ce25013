# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""
Color conversion: pairwise formulas, chromatic adaptation and routing.

Formulas (colorspace):
    srgb_to_linear, linear_rgb_to_xyz, xyz_to_oklab, to_polar, ...

Adaptation:
    BRADFORD, VON_KRIES, XYZ_SCALING
    get_adaptation_matrix, compute_adaptation_matrix, adapt_xyz

Routing:
    ConversionRegistry, register_all_conversions
"""

from __future__ import annotations

from chromakit.convert.adaptation import (
    BRADFORD,
    VON_KRIES,
    XYZ_SCALING,
    ConeResponseModel,
    adapt_xyz,
    compute_adaptation_matrix,
    get_adaptation_matrix,
)
from chromakit.convert.registry import ConversionRegistry, register_all_conversions

__all__ = [
    "ConeResponseModel",
    "BRADFORD",
    "VON_KRIES",
    "XYZ_SCALING",
    "adapt_xyz",
    "compute_adaptation_matrix",
    "get_adaptation_matrix",
    "ConversionRegistry",
    "register_all_conversions",
]
