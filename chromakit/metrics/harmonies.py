# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""
Color harmonies on the HSL hue wheel.

Every harmony except "Monochromatic" is a fixed list of hue shifts applied
to the base color; saturation, lightness and alpha are kept. Monochromatic
keeps hue and saturation and spreads four lightness levels around the base.

Usage::

    from chromakit.metrics import harmony

    harmony("#69ae5d", "Triadic")            # three OKLCh colors
    harmony("#69ae5d", "Square", "srgb")
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from chromakit.errors import UnknownAlgorithmError
from chromakit.schema.color import Color, ColorSpace

logger = logging.getLogger(__name__)


HARMONY_HUE_SHIFTS: dict[str, tuple[float, ...]] = {
    "Analogous": (-30.0, 0.0, 30.0),
    "Complementary": (0.0, 180.0),
    "SplitComplementary": (-150.0, -110.0, -70.0, 70.0, 110.0),
    "DoubleSplitComplementary": (-30.0, 0.0, 30.0, 150.0, 210.0),
    "Square": (0.0, 60.0, 180.0, 240.0),
    "Tetradic": (0.0, 90.0, 180.0, 270.0),
    "Triadic": (0.0, 120.0, 240.0),
}

HARMONY_TYPES = tuple(HARMONY_HUE_SHIFTS) + ("Monochromatic",)

# Monochromatic spread: fraction of the distance to black/white, and the
# lightness offsets (in steps) of the four generated colors
MONOCHROMATIC_SPREAD = 0.6
MONOCHROMATIC_OFFSETS = (-1.5, -0.5, 0.5, 1.5)


def _expect_hsl(color: Color) -> None:
    if color.space is not ColorSpace.HSL:
        raise ValueError(f"Harmonies expect an hsl color, got {color.space.value}")


def build_harmony(base: Color, shifts: Sequence[float]) -> list[Color]:
    """
    Apply each hue shift in ``shifts`` to an HSL color.

    Hues wrap into [0, 360); a negative shift is taken around the wheel.

    Raises:
        ValueError: ``base`` is not HSL.
    """
    _expect_hsl(base)
    h, s, light = base.values
    return [base.with_values(((h + shift) % 360.0, s, light)) for shift in shifts]


def monochromatics(base: Color) -> list[Color]:
    """
    Four HSL colors with the base hue and saturation at spread lightness.

    Two are darker and two lighter than the base. The step shrinks toward
    black and white so every level stays in [0, 1].
    """
    _expect_hsl(base)
    h, s, light = base.values
    step = min(light, 1.0 - light) * MONOCHROMATIC_SPREAD / 3.0
    levels = np.clip([light + step * offset for offset in MONOCHROMATIC_OFFSETS], 0.0, 1.0)
    return [base.with_values((h, s, level)) for level in levels]


def harmony(color, harmony_type: str, output_space="oklch", *, service=None) -> list[Color]:
    """
    Generate a harmony from a seed color.

    Args:
        color: Seed as text or Color
        harmony_type: One of HARMONY_TYPES
        output_space: Space the returned colors are converted to
        service: ColorService used for parsing/conversion

    Returns:
        Colors in ``output_space``, in hue-shift order.

    Raises:
        UnknownAlgorithmError: For an unknown ``harmony_type``.
        ColorParseError: Unparseable seed.
    """
    if harmony_type not in HARMONY_TYPES:
        raise UnknownAlgorithmError(f"Unknown harmony: {harmony_type}")
    if service is None:
        from chromakit.runtime.service import default_service
        service = default_service()

    base = service.parse_color(color, ColorSpace.HSL)
    if harmony_type == "Monochromatic":
        colors = monochromatics(base)
    else:
        colors = build_harmony(base, HARMONY_HUE_SHIFTS[harmony_type])
    logger.debug("[Harmony] %s of %s: %d colors", harmony_type, base.css, len(colors))
    return [service.convert(c, output_space) for c in colors]
