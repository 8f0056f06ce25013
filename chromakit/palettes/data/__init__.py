# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""Static reference data: Tailwind and Radix palettes plus contrast averages."""

from chromakit.palettes.data.contrast_averages import (
    RADIX_CONTRAST_AVERAGES,
    TAILWIND_CONTRAST_AVERAGES,
)
from chromakit.palettes.data.radix import RADIX_COLORS
from chromakit.palettes.data.tailwind import TAILWIND_COLORS, TAILWIND_SHADES

__all__ = [
    "TAILWIND_COLORS",
    "TAILWIND_SHADES",
    "RADIX_COLORS",
    "TAILWIND_CONTRAST_AVERAGES",
    "RADIX_CONTRAST_AVERAGES",
]
