# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""
sRGB gamut checks and mapping.

Mapping strategies:
- clip_to_srgb: per-channel clip in sRGB (fast, shifts hue)
- clamp_chroma_to_srgb: reduce OKLCh chroma in fixed steps until the
  color fits, keeping lightness and hue
- gamut_map_min_delta_e: CSS Color 4 binary search on OKLCh chroma,
  accepting a clipped result once it is within one JND of the target

Gamut checks allow DEFAULT_GAMUT_TOLERANCE of slack per channel so that
round-off at the sRGB boundary is not reported as out of gamut. Pass
``tolerance=0.0`` for an exact check.
"""

from __future__ import annotations

import logging

import numpy as np

from chromakit.convert.colorspace import (
    from_polar,
    linear_rgb_to_xyz,
    oklch_to_srgb,
    srgb_to_linear,
    xyz_to_oklab,
)
from chromakit.schema.color import Color, ColorSpace

logger = logging.getLogger(__name__)

DEFAULT_GAMUT_TOLERANCE = 1e-6
DEFAULT_CHROMA_STEP = 0.002

# Just-noticeable OKLab difference and chroma resolution of the min-ΔE search
MIN_DELTA_E_JND = 0.02
MIN_DELTA_E_EPSILON = 0.0001


def in_srgb_gamut(color: Color, tolerance: float = DEFAULT_GAMUT_TOLERANCE, *, service=None) -> bool:
    """
    True if every sRGB channel of ``color`` lies in [0, 1] (± tolerance).

    OKLCh and sRGB colors are checked directly; other spaces go through
    the conversion service.
    """
    if color.space is ColorSpace.SRGB:
        rgb = color.vector
    elif color.space is ColorSpace.OKLCH:
        rgb = oklch_to_srgb(color.vector)
    else:
        if service is None:
            from chromakit.runtime.service import default_service
            service = default_service()
        rgb = service.convert(color, ColorSpace.SRGB).vector
    return bool(np.all(rgb >= -tolerance) and np.all(rgb <= 1.0 + tolerance))


def clip_to_srgb(color: Color) -> Color:
    """Clip an sRGB color's channels to [0, 1]."""
    if color.space is not ColorSpace.SRGB:
        raise ValueError(f"clip_to_srgb expects an srgb color, got {color.space.value}")
    return color.with_values(np.clip(color.vector, 0.0, 1.0))


def clamp_chroma_to_srgb(
    color: Color,
    step: float = DEFAULT_CHROMA_STEP,
    tolerance: float = DEFAULT_GAMUT_TOLERANCE,
) -> Color:
    """
    Bring an OKLCh color into sRGB by lowering chroma.

    While the color is out of gamut and chroma is positive, chroma drops
    by ``step`` (floored at 0). Lightness, hue and alpha are untouched.
    The loop is bounded by ``ceil(C / step)`` iterations.

    Raises:
        ValueError: Non-OKLCh input or a non-positive step.
    """
    if color.space is not ColorSpace.OKLCH:
        raise ValueError(f"clamp_chroma_to_srgb expects an oklch color, got {color.space.value}")
    if step <= 0.0:
        raise ValueError(f"Chroma step must be > 0, got {step}")

    L, c, h = color.values
    start = c
    while c > 0.0 and not in_srgb_gamut(Color(ColorSpace.OKLCH, (L, c, h)), tolerance):
        c = max(c - step, 0.0)

    if c == start:
        return color
    logger.debug("[Gamut] chroma %.4f -> %.4f at L=%.4f H=%.2f", start, c, L, h)
    return color.with_values((L, c, h))


def _clip_distance(lch: np.ndarray) -> tuple[np.ndarray, float]:
    """Clipped sRGB of an OKLCh triple and its OKLab distance from the unclipped color."""
    clipped = oklch_to_srgb(lch, clip=True)
    oklab = xyz_to_oklab(linear_rgb_to_xyz(srgb_to_linear(clipped)))
    return clipped, float(np.linalg.norm(oklab - from_polar(lch)))


def gamut_map_min_delta_e(
    color: Color,
    jnd: float = MIN_DELTA_E_JND,
    epsilon: float = MIN_DELTA_E_EPSILON,
) -> Color:
    """
    Map an OKLCh color into sRGB with the CSS Color 4 minimum-ΔE search.

    Lightness at or beyond 1 (0) maps to white (black). An in-gamut color
    is converted as-is. Otherwise chroma is bisected: a candidate whose
    channel clip lands within ``jnd`` (OKLab ΔE) of it raises the lower
    bound, anything further lowers the upper bound. The search stops once
    the bounds are ``epsilon`` apart or the clip sits just under ``jnd``.

    Args:
        color: OKLCh color
        jnd: Just-noticeable difference in OKLab units
        epsilon: Chroma resolution

    Returns:
        sRGB color with channels in [0, 1] and the input alpha.

    Raises:
        ValueError: Non-OKLCh input.
    """
    if color.space is not ColorSpace.OKLCH:
        raise ValueError(f"gamut_map_min_delta_e expects an oklch color, got {color.space.value}")

    L, c, h = color.values
    if L >= 1.0 or L <= 0.0:
        anchor = np.array([1.0 if L >= 1.0 else 0.0, 0.0, 0.0])
        return Color(ColorSpace.SRGB, oklch_to_srgb(anchor, clip=True), alpha=color.alpha)

    rgb = oklch_to_srgb(color.vector)
    if np.all(rgb >= 0.0) and np.all(rgb <= 1.0):
        return Color(ColorSpace.SRGB, rgb, alpha=color.alpha)

    clipped, delta = _clip_distance(color.vector)
    if delta < jnd:
        return Color(ColorSpace.SRGB, clipped, alpha=color.alpha)

    low, high = 0.0, c
    low_in_gamut = True
    while high - low > epsilon:
        chroma = (low + high) / 2.0
        current = np.array([L, chroma, h])
        candidate = oklch_to_srgb(current)
        if low_in_gamut and np.all(candidate >= 0.0) and np.all(candidate <= 1.0):
            clipped = candidate
            low = chroma
            continue
        clipped, delta = _clip_distance(current)
        if delta < jnd:
            if jnd - delta < epsilon:
                break
            low_in_gamut = False
            low = chroma
        else:
            high = chroma

    logger.debug("[Gamut] min-ΔE chroma %.4f -> %.4f at L=%.4f H=%.2f", c, low, L, h)
    return Color(ColorSpace.SRGB, clipped, alpha=color.alpha)
