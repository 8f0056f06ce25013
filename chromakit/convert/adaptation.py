# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""
Chromatic adaptation between reference illuminants.

An adaptation matrix is built in three steps:
1. Map both white points into a cone-response domain (``model.matrix``)
2. Scale each cone channel by the ratio of the two responses
3. Map back to XYZ (``model.inverse``)

The common Bradford D50↔D65 pair is served from a precomputed table.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from chromakit.schema.color import Color, ColorSpace, Illuminant

logger = logging.getLogger(__name__)


# =============================================================================
# Cone Response Models
# =============================================================================


@dataclass(frozen=True, slots=True, eq=False)
class ConeResponseModel:
    """
    A named pair of mutually inverse 3x3 matrices.

    Attributes:
        name: Identifier used in precomputed table keys ("BRADFORD").
        matrix: XYZ → cone response (LMS-like).
        inverse: Cone response → XYZ.
    """
    name: str
    matrix: NDArray[np.float64]
    inverse: NDArray[np.float64]

    def __post_init__(self) -> None:
        """Validate matrix shapes."""
        for label in ("matrix", "inverse"):
            value = np.asarray(getattr(self, label), dtype=np.float64)
            if value.shape != (3, 3):
                raise ValueError(f"{self.name} {label} must be 3x3, got {value.shape}")
            object.__setattr__(self, label, value)


XYZ_SCALING = ConeResponseModel(
    name="XYZ_SCALING",
    matrix=np.eye(3),
    inverse=np.eye(3),
)

_BRADFORD_FORWARD = np.array([
    [0.8951, 0.2664, -0.1614],
    [-0.7502, 1.7135, 0.0367],
    [0.0389, -0.0685, 1.0296],
])

BRADFORD = ConeResponseModel(
    name="BRADFORD",
    matrix=_BRADFORD_FORWARD,
    inverse=np.linalg.inv(_BRADFORD_FORWARD),
)

_VON_KRIES_FORWARD = np.array([
    [0.40024, 0.7076, -0.08081],
    [-0.2263, 1.16532, 0.0457],
    [0.0, 0.0, 0.91822],
])

VON_KRIES = ConeResponseModel(
    name="VONKRIES",
    matrix=_VON_KRIES_FORWARD,
    inverse=np.linalg.inv(_VON_KRIES_FORWARD),
)


# =============================================================================
# Precomputed Matrices
# =============================================================================

BRADFORD_D50_TO_D65 = np.array([
    [0.9555766462451653, -0.023039426634341033, 0.06316369768772678],
    [-0.02828954186718683, 1.0099416772919367, 0.021007612783786933],
    [0.012298152535565432, -0.020483072365186192, 1.3299098368145301],
])

BRADFORD_D65_TO_D50 = np.array([
    [1.0478112719598691, 0.022886525214775758, -0.05012693920986061],
    [0.029542405202826368, 0.9904844613128458, -0.017049121601636838],
    [-0.009234507223803406, 0.015043570198253024, 0.7521316440046968],
])

# Precomputed arrays are shared; mark them read-only
BRADFORD_D50_TO_D65.setflags(write=False)
BRADFORD_D65_TO_D50.setflags(write=False)

PRECOMPUTED: dict[str, NDArray[np.float64]] = {
    "BRADFORD_D50_TO_D65": BRADFORD_D50_TO_D65,
    "BRADFORD_D65_TO_D50": BRADFORD_D65_TO_D50,
}


def table_key(source: Illuminant, target: Illuminant, model: ConeResponseModel) -> str:
    """Key used by the precomputed table, e.g. ``BRADFORD_D50_TO_D65``."""
    return f"{model.name}_{source.name}_TO_{target.name}"


# =============================================================================
# Adaptation
# =============================================================================


def compute_adaptation_matrix(
    source: Illuminant,
    target: Illuminant,
    model: ConeResponseModel = BRADFORD,
) -> NDArray[np.float64]:
    """
    Compute the 3x3 adaptation matrix for a pair of illuminants.

    The diagonal scale is source response divided by target response,
    so ``compute(A, B)`` and ``compute(B, A)`` are inverses of each other.
    Near-zero cone responses are not guarded.

    Args:
        source: Illuminant the input is relative to
        target: Illuminant to adapt to
        model: Cone response model

    Returns:
        (3, 3) array
    """
    lms_source = model.matrix @ source.white
    lms_target = model.matrix @ target.white
    scale = np.diag(lms_source / lms_target)
    return model.inverse @ scale @ model.matrix


def get_adaptation_matrix(
    source: Illuminant,
    target: Illuminant,
    model: ConeResponseModel = BRADFORD,
) -> NDArray[np.float64]:
    """
    Get the adaptation matrix, preferring the precomputed table.

    Table hits are returned as-is (the shared read-only array). Misses
    are computed on every call.
    """
    key = table_key(source, target, model)
    precomputed = PRECOMPUTED.get(key)
    if precomputed is not None:
        return precomputed
    logger.debug("[Adaptation] computing %s", key)
    return compute_adaptation_matrix(source, target, model)


def _transform_matrix(
    source: Illuminant,
    target: Illuminant,
    model: ConeResponseModel,
) -> NDArray[np.float64]:
    # compute(target, source) scales by target/source response, which is
    # what carries a source-relative vector onto the target white
    precomputed = PRECOMPUTED.get(table_key(source, target, model))
    if precomputed is not None:
        return precomputed
    logger.debug("[Adaptation] computing %s", table_key(source, target, model))
    return compute_adaptation_matrix(target, source, model)


def adapt_xyz(
    color: Color,
    target: Illuminant,
    model: ConeResponseModel = BRADFORD,
) -> Color:
    """
    Re-express an XYZ color relative to another illuminant.

    Args:
        color: XYZ color (its illuminant is the source)
        target: Illuminant to adapt to
        model: Cone response model

    Returns:
        New XYZ color carrying ``target``, or ``color`` itself when the
        illuminants already match.

    Raises:
        ValueError: If color is not XYZ.
    """
    if color.space is not ColorSpace.XYZ:
        raise ValueError(f"adapt_xyz expects an xyz color, got {color.space.value}")
    if color.illuminant == target:
        return color
    matrix = _transform_matrix(color.illuminant, target, model)
    return Color(
        ColorSpace.XYZ,
        tuple(matrix @ color.vector),
        alpha=color.alpha,
        illuminant=target,
    )
