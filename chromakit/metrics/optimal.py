# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""
Optimal-contrast search.

Given a foreground and a background, find the color with the
foreground's hue and saturation whose contrast against the background is
closest to a target. The search is a bounded binary search on HSL
lightness.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np

from chromakit.convert.colorspace import hsl_to_srgb, srgb_to_hsl
from chromakit.errors import UnknownAlgorithmError
from chromakit.metrics.contrast import contrast_apca, contrast_wcag21
from chromakit.schema.color import Color, ColorSpace

ContrastFn = Callable[[Color, Color], float]

OPTIMAL_CONTRAST_METHODS: dict[str, ContrastFn] = {
    "APCA": contrast_apca,
    "WCAG21": contrast_wcag21,
}


@dataclass(frozen=True, slots=True)
class OptimalContrastConfig:
    """
    Binary search bounds.

    Attributes:
        max_iterations: Hard cap on bisection steps
        epsilon: Stop once the lightness interval is narrower than this
    """
    max_iterations: int = 32
    epsilon: float = 0.001

    def __post_init__(self) -> None:
        if self.max_iterations < 1:
            raise ValueError(f"max_iterations must be >= 1, got {self.max_iterations}")
        if self.epsilon <= 0.0:
            raise ValueError(f"epsilon must be > 0, got {self.epsilon}")


DEFAULT_OPTIMAL_CONTRAST_CONFIG = OptimalContrastConfig()


def _tone(h: float, s: float, lightness: float) -> Color:
    return Color(ColorSpace.SRGB, hsl_to_srgb(np.array([h, s, lightness])))


def search_optimal_color(
    foreground: Color,
    background: Color,
    target: float,
    contrast_fn: ContrastFn,
    config: OptimalContrastConfig = DEFAULT_OPTIMAL_CONTRAST_CONFIG,
) -> Color:
    """
    Bisect HSL lightness toward ``target`` contrast.

    Every candidate is scored by ``||target| - |contrast||`` and the best
    candidate wins, so the result is the closest tone seen even when the
    target is unreachable.

    Args:
        foreground: sRGB foreground whose hue and saturation are kept
        background: sRGB background
        target: Desired contrast (signed for APCA)
        contrast_fn: ``(fg, bg) -> contrast`` on sRGB Colors

    Returns:
        An opaque sRGB Color.
    """
    h, s, _ = srgb_to_hsl(foreground.vector)
    h, s = float(h), float(s)

    low, high = 0.0, 1.0
    closest = low
    min_diff = float("inf")

    for _ in range(config.max_iterations):
        if high - low <= config.epsilon:
            break
        mid = (low + high) / 2.0
        current = contrast_fn(_tone(h, s, mid), background)
        diff = abs(abs(target) - abs(current))
        if diff < min_diff:
            min_diff = diff
            closest = mid

        low_contrast = contrast_fn(_tone(h, s, low), background)
        if current < target:
            if low_contrast < target:
                low = mid
            else:
                high = mid
        elif low_contrast < target:
            high = mid
        else:
            low = mid

    return _tone(h, s, closest)


def get_optimal_color_for_contrast(
    foreground,
    background,
    target: float,
    method: str = "APCA",
    *,
    config: OptimalContrastConfig = DEFAULT_OPTIMAL_CONTRAST_CONFIG,
    service=None,
) -> Color:
    """
    Find the foreground tone closest to ``target`` contrast on ``background``.

    Args:
        foreground: Text color (text or Color); its hue and saturation are kept
        background: Background color (text or Color)
        target: Desired contrast: APCA Lc (signed) or WCAG 2.1 ratio
        method: "APCA" or "WCAG21"
        config: Search bounds
        service: ColorService used for parsing/conversion

    Returns:
        Opaque sRGB Color.

    Raises:
        UnknownAlgorithmError: For any other method.
    """
    if method not in OPTIMAL_CONTRAST_METHODS:
        raise UnknownAlgorithmError(f"Unknown contrast algorithm: {method}")
    if service is None:
        from chromakit.runtime.service import default_service
        service = default_service()
    fg = service.parse_color(foreground, ColorSpace.SRGB)
    bg = service.parse_color(background, ColorSpace.SRGB)
    return search_optimal_color(fg, bg, target, OPTIMAL_CONTRAST_METHODS[method], config)
