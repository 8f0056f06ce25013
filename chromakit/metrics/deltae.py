# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""
Color difference (delta-E) metrics.

Formula functions take Colors already in the metric's working space:

    delta_e_76          Lab, Euclidean (CIE 1976)
    delta_e_2000        Lab, CIEDE2000
    delta_e_cmc         LCh, CMC l:c
    delta_e_ok          OKLab, Euclidean
    delta_e_ok_scaled   OKLab, Euclidean with a/b scaled
    delta_e_jz          JzCzHz

``delta_e`` accepts any input (text or Color), resolves both sides into
the right space and dispatches by algorithm name.
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from chromakit.errors import UnknownAlgorithmError
from chromakit.schema.color import Color, ColorSpace


# =============================================================================
# Constants
# =============================================================================

# 25^7
E2000_G_FACTOR = 6103515625.0

# OKLab a/b scaling that brings ΔE OK roughly in line with CIEDE2000 / 100
APPROXIMATE_OKLAB_SCALING = 2.0
COMBVD_OKLAB_SCALING = 2.016
OSAUCS_OKLAB_SCALING = 2.045

OKLAB_DELTAE_SCALING = {
    "approximate": APPROXIMATE_OKLAB_SCALING,
    "combvd": COMBVD_OKLAB_SCALING,
    "osaucs": OSAUCS_OKLAB_SCALING,
}


def _expect(color: Color, space: ColorSpace) -> None:
    if color.space is not space:
        raise ValueError(f"Expected a {space.value} color, got {color.space.value}")


# =============================================================================
# Euclidean metrics
# =============================================================================


def delta_e_76(color: Color, sample: Color) -> float:
    """CIE76: Euclidean distance in Lab."""
    _expect(color, ColorSpace.LAB)
    _expect(sample, ColorSpace.LAB)
    return float(np.linalg.norm(color.vector - sample.vector))


def delta_e_ok(color: Color, sample: Color) -> float:
    """Euclidean distance in OKLab."""
    _expect(color, ColorSpace.OKLAB)
    _expect(sample, ColorSpace.OKLAB)
    return float(np.linalg.norm(color.vector - sample.vector))


def delta_e_ok_scaled(
    color: Color,
    sample: Color,
    scale: float = APPROXIMATE_OKLAB_SCALING,
) -> float:
    """
    OKLab distance with the a and b axes scaled.

    Scaling the opponent axes compensates for OKLab's compressed chroma
    so hue/chroma differences weigh comparably to lightness.
    """
    _expect(color, ColorSpace.OKLAB)
    _expect(sample, ColorSpace.OKLAB)
    diff = color.vector - sample.vector
    diff[1:] *= scale
    return float(np.linalg.norm(diff))


# =============================================================================
# CIEDE2000
# =============================================================================


def delta_e_2000(
    color: Color,
    sample: Color,
    kL: float = 1.0,
    kC: float = 1.0,
    kH: float = 1.0,
) -> float:
    """
    CIEDE2000 difference between two Lab colors.

    Args:
        color, sample: Lab colors
        kL, kC, kH: Parametric weights (1.0 for reference conditions)
    """
    _expect(color, ColorSpace.LAB)
    _expect(sample, ColorSpace.LAB)
    L1, a1, b1 = color.values
    L2, a2, b2 = sample.values

    C1 = math.hypot(a1, b1)
    C2 = math.hypot(a2, b2)
    C_avg7 = ((C1 + C2) / 2.0) ** 7
    G = 0.5 * (1.0 - math.sqrt(C_avg7 / (C_avg7 + E2000_G_FACTOR)))

    a1p = a1 * (1.0 + G)
    a2p = a2 * (1.0 + G)
    C1p = math.hypot(a1p, b1)
    C2p = math.hypot(a2p, b2)
    h1p = math.degrees(math.atan2(b1, a1p)) % 360.0
    h2p = math.degrees(math.atan2(b2, a2p)) % 360.0

    dLp = L2 - L1
    dCp = C2p - C1p

    if C1p * C2p == 0.0:
        dhp = 0.0
    elif abs(h2p - h1p) <= 180.0:
        dhp = h2p - h1p
    elif h2p <= h1p:
        dhp = h2p - h1p + 360.0
    else:
        dhp = h2p - h1p - 360.0
    dHp = 2.0 * math.sqrt(C1p * C2p) * math.sin(math.radians(dhp) / 2.0)

    Lp_avg = (L1 + L2) / 2.0
    Cp_avg = (C1p + C2p) / 2.0

    if C1p * C2p == 0.0:
        hp_avg = h1p + h2p
    elif abs(h1p - h2p) <= 180.0:
        hp_avg = (h1p + h2p) / 2.0
    elif h1p + h2p < 360.0:
        hp_avg = (h1p + h2p + 360.0) / 2.0
    else:
        hp_avg = (h1p + h2p - 360.0) / 2.0

    T = (
        1.0
        - 0.17 * math.cos(math.radians(hp_avg - 30.0))
        + 0.24 * math.cos(math.radians(2.0 * hp_avg))
        + 0.32 * math.cos(math.radians(3.0 * hp_avg + 6.0))
        - 0.20 * math.cos(math.radians(4.0 * hp_avg - 63.0))
    )
    d_theta = 30.0 * math.exp(-(((hp_avg - 275.0) / 25.0) ** 2))
    Cp_avg7 = Cp_avg ** 7
    Rc = 2.0 * math.sqrt(Cp_avg7 / (Cp_avg7 + E2000_G_FACTOR))
    Sl = 1.0 + (0.015 * (Lp_avg - 50.0) ** 2) / math.sqrt(20.0 + (Lp_avg - 50.0) ** 2)
    Sc = 1.0 + 0.045 * Cp_avg
    Sh = 1.0 + 0.015 * Cp_avg * T
    Rt = -math.sin(math.radians(2.0 * d_theta)) * Rc

    l_term = dLp / (kL * Sl)
    c_term = dCp / (kC * Sc)
    h_term = dHp / (kH * Sh)
    return math.sqrt(l_term ** 2 + c_term ** 2 + h_term ** 2 + Rt * c_term * h_term)


# =============================================================================
# CMC l:c
# =============================================================================


def delta_e_cmc(color: Color, sample: Color, l: float = 2.0, c: float = 1.0) -> float:  # noqa: E741
    """
    CMC l:c difference between two LCh colors.

    Not symmetric: ``color`` is the reference.

    Args:
        l, c: Lightness and chroma tolerances (2:1 for acceptability,
            1:1 for perceptibility)
    """
    _expect(color, ColorSpace.LCH)
    _expect(sample, ColorSpace.LCH)
    L1, C1, h1 = color.values
    L2, C2, h2 = sample.values

    dL = L1 - L2
    dC = C1 - C2
    da2_db2 = C1 ** 2 + C2 ** 2 - 2.0 * C1 * C2 * math.cos(math.radians(h1 - h2))
    dH = math.sqrt(max(0.0, da2_db2 - dC ** 2))

    S_L = 0.511 if L1 < 16.0 else (0.040975 * L1) / (1.0 + 0.01765 * L1)
    S_C = (0.0638 * C1) / (1.0 + 0.0131 * C1) + 0.638
    if 164.0 <= h1 <= 345.0:
        T = 0.56 + abs(0.2 * math.cos(math.radians(h1 + 168.0)))
    else:
        T = 0.36 + abs(0.4 * math.cos(math.radians(h1 + 35.0)))
    C1_4 = C1 ** 4
    F = math.sqrt(C1_4 / (C1_4 + 1900.0))
    S_H = S_C * (F * T + 1.0 - F)

    return math.sqrt((dL / (l * S_L)) ** 2 + (dC / (c * S_C)) ** 2 + (dH / S_H) ** 2)


# =============================================================================
# Jz
# =============================================================================


def delta_e_jz(color: Color, sample: Color) -> float:
    """ΔEz in JzCzHz (Safdar et al. 2017)."""
    _expect(color, ColorSpace.JZCZHZ)
    _expect(sample, ColorSpace.JZCZHZ)
    J1, C1, h1 = color.values
    J2, C2, h2 = sample.values

    dJ = J1 - J2
    dC = C1 - C2
    dH = 2.0 * math.sqrt(C1 * C2) * math.sin(math.radians(h1 - h2) / 2.0)
    return math.sqrt(dJ ** 2 + dC ** 2 + dH ** 2)


# =============================================================================
# Dispatcher
# =============================================================================

DELTA_E_ALGORITHMS = {
    "Euclidean": (ColorSpace.LAB, delta_e_76),
    "CMC": (ColorSpace.LCH, delta_e_cmc),
    "2000": (ColorSpace.LAB, delta_e_2000),
    "OKLab": (ColorSpace.OKLAB, delta_e_ok),
    "ScaledOKLab": (ColorSpace.OKLAB, delta_e_ok_scaled),
    "Jz": (ColorSpace.JZCZHZ, delta_e_jz),
}


def delta_e(
    color,
    sample,
    algorithm: str = "2000",
    *,
    service=None,
) -> float:
    """
    Perceptual difference between two colors.

    Args:
        color: Reference color (text or Color)
        sample: Sample color (text or Color)
        algorithm: One of "Euclidean", "CMC", "2000", "OKLab",
            "ScaledOKLab", "Jz"
        service: ColorService used for parsing/conversion
            (default service when omitted)

    Raises:
        UnknownAlgorithmError: For any other algorithm name.
    """
    if algorithm not in DELTA_E_ALGORITHMS:
        raise UnknownAlgorithmError(f"Unknown algorithm: {algorithm}")
    space, fn = DELTA_E_ALGORITHMS[algorithm]
    service = _service(service)
    return fn(service.parse_color(color, space), service.parse_color(sample, space))


def _service(service: Optional[object]):
    if service is not None:
        return service
    from chromakit.runtime.service import default_service
    return default_service()
