# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""
Perceptual metrics: color difference, contrast and accessibility checks,
gamut mapping, harmonies and contrast search.
"""

from chromakit.metrics.contrast import (
    APCA_THRESHOLDS,
    CONTRAST_ALGORITHMS,
    WCAG21_THRESHOLDS,
    check_apca_contrast,
    check_wcag21_contrast,
    contrast,
    contrast_apca,
    contrast_delta_l_star,
    contrast_delta_phi_star,
    contrast_michelson,
    contrast_wcag21,
    contrast_weber,
    is_apca_compliant,
    is_wcag21_compliant,
    relative_luminance,
)
from chromakit.metrics.deltae import (
    DELTA_E_ALGORITHMS,
    delta_e,
    delta_e_2000,
    delta_e_76,
    delta_e_cmc,
    delta_e_jz,
    delta_e_ok,
    delta_e_ok_scaled,
)
from chromakit.metrics.gamut import (
    clamp_chroma_to_srgb,
    clip_to_srgb,
    gamut_map_min_delta_e,
    in_srgb_gamut,
)
from chromakit.metrics.harmonies import (
    HARMONY_HUE_SHIFTS,
    HARMONY_TYPES,
    build_harmony,
    harmony,
    monochromatics,
)
from chromakit.metrics.optimal import (
    OptimalContrastConfig,
    get_optimal_color_for_contrast,
    search_optimal_color,
)

__all__ = [
    # Delta-E
    "delta_e",
    "delta_e_76",
    "delta_e_2000",
    "delta_e_cmc",
    "delta_e_ok",
    "delta_e_ok_scaled",
    "delta_e_jz",
    "DELTA_E_ALGORITHMS",
    # Contrast
    "contrast",
    "contrast_apca",
    "contrast_wcag21",
    "contrast_weber",
    "contrast_michelson",
    "contrast_delta_l_star",
    "contrast_delta_phi_star",
    "relative_luminance",
    "CONTRAST_ALGORITHMS",
    # Accessibility compliance
    "is_wcag21_compliant",
    "is_apca_compliant",
    "check_wcag21_contrast",
    "check_apca_contrast",
    "WCAG21_THRESHOLDS",
    "APCA_THRESHOLDS",
    # Gamut
    "in_srgb_gamut",
    "clip_to_srgb",
    "clamp_chroma_to_srgb",
    "gamut_map_min_delta_e",
    # Harmonies
    "harmony",
    "build_harmony",
    "monochromatics",
    "HARMONY_HUE_SHIFTS",
    "HARMONY_TYPES",
    # Optimal contrast
    "OptimalContrastConfig",
    "get_optimal_color_for_contrast",
    "search_optimal_color",
]
