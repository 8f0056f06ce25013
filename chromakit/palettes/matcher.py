# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""
Closest-family matching.

Distance is scaled OKLab ΔE (a and b doubled) between the input and every
reference shade. Each family keeps its minimum; the global minimum wins
with a strict ``<``, so equal distances resolve to the earlier family in
catalog order. Alpha is ignored.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

import numpy as np

from chromakit.convert.colorspace import oklch_to_oklab
from chromakit.metrics.deltae import APPROXIMATE_OKLAB_SCALING
from chromakit.schema.color import Color, ColorSpace
from chromakit.schema.palette import FamilyMatch, PaletteFamily

logger = logging.getLogger(__name__)

_SCALE = np.array([1.0, APPROXIMATE_OKLAB_SCALING, APPROXIMATE_OKLAB_SCALING])


def _scaled_distances(color: Color, family: PaletteFamily) -> np.ndarray:
    """Scaled OKLab distance from ``color`` to every shade of ``family``."""
    reference = oklch_to_oklab(np.array([s.color.values for s in family.shades]))
    target = oklch_to_oklab(color.vector)
    return np.linalg.norm((reference - target) * _SCALE, axis=-1)


def find_closest(color: Color, catalog: Iterable[PaletteFamily]) -> FamilyMatch:
    """
    Find the reference family and shade closest to an OKLCh color.

    Args:
        color: OKLCh color to match
        catalog: Families to search, in tie-break order

    Returns:
        FamilyMatch for the nearest shade. ``category`` is the matched
        ramp's category (None for Tailwind).

    Raises:
        ValueError: Non-OKLCh input or an empty catalog.
    """
    if color.space is not ColorSpace.OKLCH:
        raise ValueError(f"find_closest expects an oklch color, got {color.space.value}")

    best: Optional[FamilyMatch] = None
    for family in catalog:
        distances = _scaled_distances(color, family)
        index = int(np.argmin(distances))
        delta = float(distances[index])
        if best is None or delta < best.delta:
            best = FamilyMatch(
                family=family.name,
                palette=family,
                shade=family.shades[index].shade,
                delta=delta,
                category=family.category,
            )

    if best is None:
        raise ValueError("Cannot match against an empty catalog")
    logger.debug(
        "[Matcher] %s %s shade %s (delta=%.5f)",
        best.family, best.category or "", best.shade, best.delta,
    )
    return best


def find_closest_radix(color: Color, catalog: Optional[Iterable[PaletteFamily]] = None) -> FamilyMatch:
    """
    Match against Radix ramps across all four categories.

    Args:
        color: OKLCh color to match
        catalog: Radix ramps to search. Defaults to the generator catalog
            (Black, White and Slate excluded).
    """
    if catalog is None:
        from chromakit.palettes.catalog import radix_catalog
        catalog = radix_catalog()
    return find_closest(color, catalog)
