# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""
Contrast metrics between a foreground (text) and a background color.

- APCA (0.0.98G constants), signed Lc on a ~±108 scale:
  positive for dark text on a light background, negative for light on dark
- WCAG 2.1 contrast ratio, 1..21
- Weber and Michelson contrast on relative luminance
- ΔL* (Lab lightness difference) and ΔΦ* (golden-ratio lightness contrast)

Formula functions take sRGB or Lab Colors as noted; ``contrast`` accepts
any input and resolves it first.
"""

from __future__ import annotations

import math

import numpy as np

from chromakit.convert.colorspace import linear_rgb_to_xyz, srgb_to_linear
from chromakit.errors import UnknownAlgorithmError
from chromakit.schema.color import Color, ColorSpace


# =============================================================================
# APCA
# =============================================================================

# sRGB → Y coefficients with APCA's simple 2.4 exponent
APCA_RED = 0.2126729
APCA_GREEN = 0.7151522
APCA_BLUE = 0.072175
APCA_TRC = 2.4

APCA_NORM_BG = 0.56
APCA_NORM_TXT = 0.57
APCA_REV_BG = 0.65
APCA_REV_TXT = 0.62

APCA_BLACK_THRESHOLD = 0.022
APCA_BLACK_CLAMP = 1.414
APCA_SCALE = 1.14
APCA_LO_OFFSET = 0.027
APCA_LO_CLIP = 0.1
APCA_DELTA_Y_MIN = 0.0005


def _apca_luminance(rgb) -> float:
    r, g, b = (float(v) for v in rgb)
    return (
        APCA_RED * math.copysign(abs(r) ** APCA_TRC, r)
        + APCA_GREEN * math.copysign(abs(g) ** APCA_TRC, g)
        + APCA_BLUE * math.copysign(abs(b) ** APCA_TRC, b)
    )


def _soft_clamp(y: float) -> float:
    if y > APCA_BLACK_THRESHOLD:
        return y
    return y + (APCA_BLACK_THRESHOLD - y) ** APCA_BLACK_CLAMP


def contrast_apca(foreground: Color, background: Color) -> float:
    """
    APCA lightness contrast (Lc) of sRGB text on an sRGB background.

    A translucent foreground is first composited over the background.

    Returns:
        Signed Lc: positive when the text is darker than the background,
        negative when lighter, 0 below the low-contrast clip.
    """
    fg = _expect_srgb(foreground)
    bg = _expect_srgb(background)

    fg_rgb = fg.vector
    if fg.opacity < 1.0:
        fg_rgb = np.clip(fg_rgb * fg.opacity + bg.vector * (1.0 - fg.opacity), 0.0, 1.0)

    y_txt = _apca_luminance(fg_rgb)
    y_bg = _apca_luminance(bg.vector)
    if not (0.0 <= y_txt <= 1.1 and 0.0 <= y_bg <= 1.1):
        return 0.0

    y_txt = _soft_clamp(y_txt)
    y_bg = _soft_clamp(y_bg)
    if abs(y_bg - y_txt) < APCA_DELTA_Y_MIN:
        return 0.0

    if y_bg > y_txt:
        # Dark text on light background
        sapc = (y_bg ** APCA_NORM_BG - y_txt ** APCA_NORM_TXT) * APCA_SCALE
        lc = 0.0 if sapc < APCA_LO_CLIP else sapc - APCA_LO_OFFSET
    else:
        sapc = (y_bg ** APCA_REV_BG - y_txt ** APCA_REV_TXT) * APCA_SCALE
        lc = 0.0 if sapc > -APCA_LO_CLIP else sapc + APCA_LO_OFFSET
    return lc * 100.0


# =============================================================================
# Luminance-ratio metrics
# =============================================================================


def relative_luminance(color: Color) -> float:
    """WCAG relative luminance (XYZ Y, D65) of an sRGB color."""
    rgb = _expect_srgb(color).vector
    return float(linear_rgb_to_xyz(srgb_to_linear(rgb))[1])


def contrast_wcag21(foreground: Color, background: Color) -> float:
    """WCAG 2.1 contrast ratio, 1 (none) to 21 (black on white). Symmetric."""
    y1 = max(relative_luminance(foreground), 0.0)
    y2 = max(relative_luminance(background), 0.0)
    if y2 > y1:
        y1, y2 = y2, y1
    return (y1 + 0.05) / (y2 + 0.05)


# Returned when the darker luminance is 0 and the ratio is unbounded
WEBER_MAX = 5000.0


def contrast_weber(foreground: Color, background: Color) -> float:
    """Weber contrast (Ymax - Ymin) / Ymin."""
    y1 = max(relative_luminance(foreground), 0.0)
    y2 = max(relative_luminance(background), 0.0)
    if y2 > y1:
        y1, y2 = y2, y1
    return WEBER_MAX if y2 == 0.0 else (y1 - y2) / y2


def contrast_michelson(foreground: Color, background: Color) -> float:
    """Michelson contrast (Ymax - Ymin) / (Ymax + Ymin), in [0, 1]."""
    y1 = max(relative_luminance(foreground), 0.0)
    y2 = max(relative_luminance(background), 0.0)
    if y2 > y1:
        y1, y2 = y2, y1
    denominator = y1 + y2
    return 0.0 if denominator == 0.0 else (y1 - y2) / denominator


# =============================================================================
# Lightness metrics
# =============================================================================

PHI = 1.618033988749895
DELTA_PHI_STAR_CLIP = 7.5


def contrast_delta_l_star(foreground: Color, background: Color) -> float:
    """Absolute CIE L* difference of two Lab colors."""
    _expect(foreground, ColorSpace.LAB)
    _expect(background, ColorSpace.LAB)
    return abs(foreground.values[0] - background.values[0])


def contrast_delta_phi_star(foreground: Color, background: Color) -> float:
    """
    ΔΦ* lightness contrast (Somers), on Lab L*.

    Values under the 7.5 clip count as no contrast.
    """
    _expect(foreground, ColorSpace.LAB)
    _expect(background, ColorSpace.LAB)
    l1 = max(foreground.values[0], 0.0)
    l2 = max(background.values[0], 0.0)
    delta_phi = abs(l1 ** PHI - l2 ** PHI)
    c = delta_phi ** (1.0 / PHI) * math.sqrt(2.0) - 40.0
    return 0.0 if c < DELTA_PHI_STAR_CLIP else c


# =============================================================================
# Dispatcher
# =============================================================================

CONTRAST_ALGORITHMS = {
    "APCA": (ColorSpace.SRGB, contrast_apca),
    "DeltaL*": (ColorSpace.LAB, contrast_delta_l_star),
    "DeltaPhi*": (ColorSpace.LAB, contrast_delta_phi_star),
    "Michelson": (ColorSpace.SRGB, contrast_michelson),
    "WCAG21": (ColorSpace.SRGB, contrast_wcag21),
    "Weber": (ColorSpace.SRGB, contrast_weber),
}


def contrast(foreground, background, algorithm: str = "APCA", *, service=None) -> float:
    """
    Contrast of ``foreground`` against ``background``.

    Args:
        foreground: Text color (text or Color)
        background: Background color (text or Color)
        algorithm: One of "APCA", "DeltaL*", "DeltaPhi*", "Michelson",
            "WCAG21", "Weber"
        service: ColorService used for parsing/conversion

    Returns:
        0 when both colors resolve to the same sRGB values; the metric
        otherwise.

    Raises:
        UnknownAlgorithmError: For any other algorithm name.
    """
    if algorithm not in CONTRAST_ALGORITHMS:
        raise UnknownAlgorithmError(f"Unknown algorithm: {algorithm}")
    space, fn = CONTRAST_ALGORITHMS[algorithm]
    if service is None:
        from chromakit.runtime.service import default_service
        service = default_service()

    fg_rgb = service.parse_color(foreground, ColorSpace.SRGB)
    bg_rgb = service.parse_color(background, ColorSpace.SRGB)
    if fg_rgb.values == bg_rgb.values:
        return 0.0
    if space is ColorSpace.SRGB:
        return fn(fg_rgb, bg_rgb)
    return fn(service.convert(fg_rgb, space), service.convert(bg_rgb, space))


# =============================================================================
# Compliance
# =============================================================================

# WCAG 2.1 minimum ratios; "Large" is at least 18pt, or 14pt bold
WCAG21_THRESHOLDS = {
    "AANormal": 4.5,
    "AALarge": 3.0,
    "AAANormal": 7.0,
    "AAALarge": 4.5,
}

# Minimum |Lc| per APCA content type
APCA_THRESHOLDS = {
    "BodyText": 60.0,
    "LargeText": 45.0,
    "NonEssentialText": 30.0,
    "UIControls": 60.0,
}


def _meets(value: float, content: str, thresholds: dict) -> bool:
    if content not in thresholds:
        raise ValueError(f"Unknown content type: {content}")
    return abs(value) >= thresholds[content]


def is_wcag21_compliant(value: float, content: str) -> bool:
    """
    True if a WCAG 2.1 ratio meets the minimum for ``content``.

    Raises:
        ValueError: ``content`` is not a key of WCAG21_THRESHOLDS.
    """
    return _meets(value, content, WCAG21_THRESHOLDS)


def is_apca_compliant(value: float, content: str) -> bool:
    """
    True if an APCA Lc value (either polarity) meets the minimum for ``content``.

    Raises:
        ValueError: ``content`` is not a key of APCA_THRESHOLDS.
    """
    return _meets(value, content, APCA_THRESHOLDS)


def check_wcag21_contrast(foreground, background, content: str, *, service=None) -> bool:
    """Measure WCAG 2.1 contrast between two colors and check it against ``content``."""
    return is_wcag21_compliant(contrast(foreground, background, "WCAG21", service=service), content)


def check_apca_contrast(foreground, background, content: str, *, service=None) -> bool:
    """Measure APCA contrast between two colors and check it against ``content``."""
    return is_apca_compliant(contrast(foreground, background, "APCA", service=service), content)


def _expect(color: Color, space: ColorSpace) -> None:
    if color.space is not space:
        raise ValueError(f"Expected a {space.value} color, got {color.space.value}")


def _expect_srgb(color: Color) -> Color:
    _expect(color, ColorSpace.SRGB)
    return color
