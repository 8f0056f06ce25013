# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""
Pairwise color space formulas.

Every function takes and returns arrays of shape (..., 3) so the same
code serves single colors and whole ramps. The conversion registry wraps
these into ``Color -> Color`` edges.

Hub space is CIE XYZ (D65 unless stated otherwise):

    sRGB ↔ Linear RGB ↔ XYZ ↔ OKLab ↔ OKLCh
                         XYZ ↔ Lab ↔ LCh
                         XYZ ↔ JzAzBz ↔ JzCzHz
                         XYZ ↔ Display-P3
    sRGB ↔ HSL / HSV / HWB

References:
- OKLab: https://bottosson.github.io/posts/oklab/
- CSS Color 4: https://www.w3.org/TR/css-color-4/
- JzAzBz: Safdar et al., Optics Express 25(13), 2017

No clipping is applied anywhere in this module: out-of-gamut values
survive so that gamut checks downstream can see them.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def _mul(vectors: NDArray[np.float64], matrix: NDArray[np.float64]) -> NDArray[np.float64]:
    """Apply a 3x3 matrix to every (..., 3) vector."""
    return np.einsum('...j,ij->...i', vectors, matrix)


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert gamma-encoded sRGB to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For |value| <= 0.04045: value/12.92
    - Otherwise: sign(value) * ((|value| + 0.055) / 1.055) ^ 2.4

    The curve is mirrored for negative input so extended-range values
    round-trip.
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    magnitude = np.abs(srgb)
    return np.where(
        magnitude <= 0.04045,
        srgb / 12.92,
        np.sign(srgb) * np.power((magnitude + 0.055) / 1.055, 2.4)
    )


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to gamma-encoded sRGB.

    Inverse of srgb_to_linear. Values outside [0, 1] are kept.
    """
    linear = np.asarray(linear, dtype=np.float64)
    magnitude = np.abs(linear)
    return np.where(
        magnitude <= 0.0031308,
        linear * 12.92,
        np.sign(linear) * (1.055 * np.power(magnitude, 1.0 / 2.4) - 0.055)
    )


# =============================================================================
# Linear RGB ↔ XYZ (D65)
# =============================================================================

_SRGB_TO_XYZ = np.array([
    [0.41239079926595934, 0.357584339383878, 0.1804807884018343],
    [0.21263900587151027, 0.715168678767756, 0.07219231536073371],
    [0.01933081871559182, 0.11919477979462598, 0.9505321522496607],
], dtype=np.float64)

_XYZ_TO_SRGB = np.linalg.inv(_SRGB_TO_XYZ)


def linear_rgb_to_xyz(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert linear sRGB to XYZ (D65)."""
    return _mul(np.asarray(rgb, dtype=np.float64), _SRGB_TO_XYZ)


def xyz_to_linear_rgb(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert XYZ (D65) to linear sRGB."""
    return _mul(np.asarray(xyz, dtype=np.float64), _XYZ_TO_SRGB)


# =============================================================================
# Display-P3 ↔ XYZ (D65)
# =============================================================================

_P3_TO_XYZ = np.array([
    [0.4865709486482162, 0.26566769316909306, 0.1982172852343625],
    [0.2289745640697488, 0.6917385218365064, 0.079286914093745],
    [0.0, 0.04511338185890264, 1.043944368900976],
], dtype=np.float64)

_XYZ_TO_P3 = np.linalg.inv(_P3_TO_XYZ)


def p3_to_xyz(p3: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert gamma-encoded Display-P3 to XYZ (D65). P3 shares the sRGB curve."""
    return _mul(srgb_to_linear(p3), _P3_TO_XYZ)


def xyz_to_p3(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert XYZ (D65) to gamma-encoded Display-P3."""
    return linear_to_srgb(_mul(np.asarray(xyz, dtype=np.float64), _XYZ_TO_P3))


# =============================================================================
# XYZ ↔ OKLab
# =============================================================================

# Matrices from https://bottosson.github.io/posts/oklab/

# XYZ (D65) to LMS (cone responses)
_M1 = np.array([
    [0.8189330101, 0.3618667424, -0.1288597137],
    [0.0329845436, 0.9293118715, 0.0361456387],
    [0.0482003018, 0.2643662691, 0.6338517070],
], dtype=np.float64)

# LMS to OKLab
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

# Inverse matrices
_M1_INV = np.linalg.inv(_M1)
_M2_INV = np.linalg.inv(_M2)


def xyz_to_oklab(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert XYZ (D65) to OKLab.

    Args:
        xyz: Array of shape (..., 3) with XYZ values

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    lms = _mul(np.asarray(xyz, dtype=np.float64), _M1)
    # cbrt keeps the sign for out-of-gamut input
    return _mul(np.cbrt(lms), _M2)


def oklab_to_xyz(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to XYZ (D65).

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with XYZ values
    """
    lms_cbrt = _mul(np.asarray(lab, dtype=np.float64), _M2_INV)
    return _mul(lms_cbrt ** 3, _M1_INV)


# =============================================================================
# Rectangular ↔ Polar (OKLab/OKLCh, Lab/LCh, JzAzBz/JzCzHz)
# =============================================================================


def to_polar(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert an opponent space (L, a, b) to its cylindrical form (L, C, H).

    Hue is in degrees [0, 360). Achromatic input yields H = 0.
    """
    lab = np.asarray(lab, dtype=np.float64)
    L = lab[..., 0]
    a = lab[..., 1]
    b = lab[..., 2]
    C = np.hypot(a, b)
    H = np.degrees(np.arctan2(b, a)) % 360.0
    return np.stack([L, C, H], axis=-1)


def from_polar(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert a cylindrical (L, C, H) triple back to (L, a, b)."""
    lch = np.asarray(lch, dtype=np.float64)
    L = lch[..., 0]
    C = lch[..., 1]
    H_rad = np.radians(lch[..., 2])
    return np.stack([L, C * np.cos(H_rad), C * np.sin(H_rad)], axis=-1)


# OKLab ↔ OKLCh, Lab ↔ LCh and JzAzBz ↔ JzCzHz share the same geometry
oklab_to_oklch = to_polar
oklch_to_oklab = from_polar
lab_to_lch = to_polar
lch_to_lab = from_polar
jzazbz_to_jzczhz = to_polar
jzczhz_to_jzazbz = from_polar


# =============================================================================
# XYZ ↔ CIE Lab
# =============================================================================

LAB_EPSILON = 0.008856451679035631  # (6/29)^3
LAB_KAPPA = 903.2962962962963  # (29/3)^3


def xyz_to_lab(xyz: NDArray[np.float64], white: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert XYZ to CIE Lab relative to a reference white.

    Args:
        xyz: Array of shape (..., 3)
        white: Reference white XYZ, shape (3,)

    Returns:
        Array of shape (..., 3) with L in [0, 100]
    """
    t = np.asarray(xyz, dtype=np.float64) / np.asarray(white, dtype=np.float64)
    f = np.where(t > LAB_EPSILON, np.cbrt(t), (LAB_KAPPA * t + 16.0) / 116.0)
    fx = f[..., 0]
    fy = f[..., 1]
    fz = f[..., 2]
    return np.stack([116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)], axis=-1)


def lab_to_xyz(lab: NDArray[np.float64], white: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert CIE Lab back to XYZ relative to the same reference white."""
    lab = np.asarray(lab, dtype=np.float64)
    L = lab[..., 0]
    fy = (L + 16.0) / 116.0
    fx = fy + lab[..., 1] / 500.0
    fz = fy - lab[..., 2] / 200.0

    xn = np.where(fx ** 3 > LAB_EPSILON, fx ** 3, (116.0 * fx - 16.0) / LAB_KAPPA)
    yn = np.where(L > LAB_KAPPA * LAB_EPSILON, fy ** 3, L / LAB_KAPPA)
    zn = np.where(fz ** 3 > LAB_EPSILON, fz ** 3, (116.0 * fz - 16.0) / LAB_KAPPA)

    return np.stack([xn, yn, zn], axis=-1) * np.asarray(white, dtype=np.float64)


# =============================================================================
# XYZ ↔ JzAzBz
# =============================================================================

JZ_B = 1.15
JZ_G = 0.66
JZ_D = -0.56
JZ_D0 = 1.629549953e-11
JZ_M1 = 0.1593017578125  # 2610 / 2^14
JZ_M2 = 1.7 * 2523 / 32
JZ_C1 = 0.8359375  # 3424 / 2^12
JZ_C2 = 18.8515625  # 2413 / 2^7
JZ_C3 = 18.6875  # 2392 / 2^7

# SDR reference white in cd/m²; relative XYZ is scaled by this
JZ_WHITE_LUMINANCE = 203.0

DEFAULT_PEAK_LUMINANCE = 10000.0

_JZ_XYZ_TO_LMS = np.array([
    [0.41478972, 0.579999, 0.0146480],
    [-0.2015100, 1.120649, 0.0531008],
    [-0.0166008, 0.264800, 0.6684799],
], dtype=np.float64)

_JZ_LMS_TO_IAB = np.array([
    [0.5, 0.5, 0.0],
    [3.524000, -4.066708, 0.542708],
    [0.199076, 1.096799, -1.295875],
], dtype=np.float64)

_JZ_LMS_TO_XYZ = np.linalg.inv(_JZ_XYZ_TO_LMS)
_JZ_IAB_TO_LMS = np.linalg.inv(_JZ_LMS_TO_IAB)


def _pq_encode(values: NDArray[np.float64], peak: float) -> NDArray[np.float64]:
    """Perceptual quantizer (ST 2084) with the JzAzBz exponent."""
    v = np.abs(values / peak) ** JZ_M1
    return np.sign(values) * ((JZ_C1 + JZ_C2 * v) / (1.0 + JZ_C3 * v)) ** JZ_M2


def _pq_decode(values: NDArray[np.float64], peak: float) -> NDArray[np.float64]:
    """Inverse of _pq_encode."""
    v = np.abs(values) ** (1.0 / JZ_M2)
    ratio = np.maximum(v - JZ_C1, 0.0) / (JZ_C2 - JZ_C3 * v)
    return np.sign(values) * peak * ratio ** (1.0 / JZ_M1)


def xyz_to_jzazbz(
    xyz: NDArray[np.float64],
    peak_luminance: float = DEFAULT_PEAK_LUMINANCE,
) -> NDArray[np.float64]:
    """
    Convert relative XYZ (D65) to JzAzBz.

    Args:
        xyz: Array of shape (..., 3), Y = 1.0 for diffuse white
        peak_luminance: Display peak in cd/m² used by the PQ curve

    Returns:
        Array of shape (..., 3) with (Jz, az, bz)
    """
    xyz = np.asarray(xyz, dtype=np.float64) * JZ_WHITE_LUMINANCE
    X = xyz[..., 0]
    Y = xyz[..., 1]
    Z = xyz[..., 2]

    Xm = JZ_B * X - (JZ_B - 1.0) * Z
    Ym = JZ_G * Y - (JZ_G - 1.0) * X

    lms = _mul(np.stack([Xm, Ym, Z], axis=-1), _JZ_XYZ_TO_LMS)
    iab = _mul(_pq_encode(lms, peak_luminance), _JZ_LMS_TO_IAB)

    Iz = iab[..., 0]
    Jz = ((1.0 + JZ_D) * Iz) / (1.0 + JZ_D * Iz) - JZ_D0
    return np.stack([Jz, iab[..., 1], iab[..., 2]], axis=-1)


def jzazbz_to_xyz(
    jab: NDArray[np.float64],
    peak_luminance: float = DEFAULT_PEAK_LUMINANCE,
) -> NDArray[np.float64]:
    """Convert JzAzBz back to relative XYZ (D65)."""
    jab = np.asarray(jab, dtype=np.float64)
    Jz = jab[..., 0] + JZ_D0
    Iz = Jz / (1.0 + JZ_D - JZ_D * Jz)

    pq_lms = _mul(np.stack([Iz, jab[..., 1], jab[..., 2]], axis=-1), _JZ_IAB_TO_LMS)
    xyz_m = _mul(_pq_decode(pq_lms, peak_luminance), _JZ_LMS_TO_XYZ)

    Xm = xyz_m[..., 0]
    Ym = xyz_m[..., 1]
    Z = xyz_m[..., 2]
    X = (Xm + (JZ_B - 1.0) * Z) / JZ_B
    Y = (Ym + (JZ_G - 1.0) * X) / JZ_G

    return np.stack([X, Y, Z], axis=-1) / JZ_WHITE_LUMINANCE


# =============================================================================
# sRGB ↔ HSL / HSV / HWB
# =============================================================================


def _rgb_hue(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Hue angle shared by the HSL, HSV and HWB models (0 for grays)."""
    r = rgb[..., 0]
    g = rgb[..., 1]
    b = rgb[..., 2]
    mx = np.max(rgb, axis=-1)
    delta = mx - np.min(rgb, axis=-1)
    safe = np.where(delta == 0.0, 1.0, delta)

    hue = np.where(
        mx == r,
        ((g - b) / safe) % 6.0,
        np.where(mx == g, (b - r) / safe + 2.0, (r - g) / safe + 4.0),
    )
    return np.where(delta == 0.0, 0.0, hue * 60.0) % 360.0


def srgb_to_hsl(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert sRGB to HSL (h in degrees, s and l in [0, 1])."""
    rgb = np.asarray(rgb, dtype=np.float64)
    mx = np.max(rgb, axis=-1)
    mn = np.min(rgb, axis=-1)
    delta = mx - mn
    L = (mx + mn) / 2.0
    denom = 1.0 - np.abs(2.0 * L - 1.0)
    S = np.where(
        (delta == 0.0) | (denom <= 0.0),
        0.0,
        delta / np.where(denom <= 0.0, 1.0, denom),
    )
    return np.stack([_rgb_hue(rgb), S, L], axis=-1)


def hsl_to_srgb(hsl: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert HSL to sRGB."""
    hsl = np.asarray(hsl, dtype=np.float64)
    H = hsl[..., 0]
    S = hsl[..., 1]
    L = hsl[..., 2]
    a = S * np.minimum(L, 1.0 - L)

    def channel(n: float) -> NDArray[np.float64]:
        k = (n + H / 30.0) % 12.0
        return L - a * np.clip(np.minimum(k - 3.0, 9.0 - k), -1.0, 1.0)

    return np.stack([channel(0.0), channel(8.0), channel(4.0)], axis=-1)


def srgb_to_hsv(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert sRGB to HSV (h in degrees, s and v in [0, 1])."""
    rgb = np.asarray(rgb, dtype=np.float64)
    V = np.max(rgb, axis=-1)
    delta = V - np.min(rgb, axis=-1)
    S = np.where(V == 0.0, 0.0, delta / np.where(V == 0.0, 1.0, V))
    return np.stack([_rgb_hue(rgb), S, V], axis=-1)


def hsv_to_srgb(hsv: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert HSV to sRGB."""
    hsv = np.asarray(hsv, dtype=np.float64)
    H = hsv[..., 0]
    S = hsv[..., 1]
    V = hsv[..., 2]

    def channel(n: float) -> NDArray[np.float64]:
        k = (n + H / 60.0) % 6.0
        return V - V * S * np.clip(np.minimum(k, 4.0 - k), 0.0, 1.0)

    return np.stack([channel(5.0), channel(3.0), channel(1.0)], axis=-1)


def hsl_to_hsv(hsl: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert HSL to HSV without going through RGB."""
    hsl = np.asarray(hsl, dtype=np.float64)
    H = hsl[..., 0]
    L = hsl[..., 2]
    V = L + hsl[..., 1] * np.minimum(L, 1.0 - L)
    S = np.where(V == 0.0, 0.0, 2.0 * (1.0 - L / np.where(V == 0.0, 1.0, V)))
    return np.stack([H, S, V], axis=-1)


def hsv_to_hsl(hsv: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert HSV to HSL without going through RGB."""
    hsv = np.asarray(hsv, dtype=np.float64)
    H = hsv[..., 0]
    V = hsv[..., 2]
    L = V * (1.0 - hsv[..., 1] / 2.0)
    denom = np.minimum(L, 1.0 - L)
    S = np.where(denom <= 0.0, 0.0, (V - L) / np.where(denom <= 0.0, 1.0, denom))
    return np.stack([H, S, L], axis=-1)


def srgb_to_hwb(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert sRGB to HWB (h in degrees, whiteness and blackness in [0, 1])."""
    rgb = np.asarray(rgb, dtype=np.float64)
    W = np.min(rgb, axis=-1)
    B = 1.0 - np.max(rgb, axis=-1)
    return np.stack([_rgb_hue(rgb), W, B], axis=-1)


def hwb_to_srgb(hwb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert HWB to sRGB.

    When whiteness + blackness >= 1 the result is the gray
    w / (w + b), per CSS Color 4.
    """
    hwb = np.asarray(hwb, dtype=np.float64)
    W = np.asarray(hwb[..., 1])
    B = np.asarray(hwb[..., 2])
    total = W + B
    gray = W / np.where(total == 0.0, 1.0, total)

    pure = hsv_to_srgb(np.stack([hwb[..., 0], np.ones_like(W), np.ones_like(W)], axis=-1))
    tinted = pure * (1.0 - W - B)[..., None] + W[..., None]
    return np.where((total >= 1.0)[..., None], gray[..., None] * np.ones_like(pure), tinted)


# =============================================================================
# Hex Helpers
# =============================================================================


def srgb_to_hex(rgb: NDArray[np.float64], alpha: float | None = None) -> str:
    """
    Convert an sRGB triple in [0, 1] to a lowercase hex string.

    Channels are clipped to [0, 1] before quantizing. Alpha below 1 is
    appended as a fourth byte.

    Returns:
        Hex string like "#69ae5d" or "#69ae5d80"
    """
    rgb = np.clip(np.asarray(rgb, dtype=np.float64), 0.0, 1.0)
    r, g, b = (int(round(float(v) * 255)) for v in rgb)
    result = f"#{r:02x}{g:02x}{b:02x}"
    if alpha is not None and alpha < 1.0:
        result += f"{int(round(alpha * 255)):02x}"
    return result


def hex_to_srgb(hex_color: str) -> NDArray[np.float64]:
    """
    Convert a 6-digit hex string to an sRGB (3,) array in [0, 1].

    Use ``chromakit.semantics.css.parse_hex`` for short forms and alpha.
    """
    hex_color = hex_color.lstrip("#")
    return np.array([int(hex_color[i:i + 2], 16) for i in (0, 2, 4)], dtype=np.float64) / 255.0


# =============================================================================
# Convenience Chains
# =============================================================================


def srgb_to_oklch(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to OKLCh.

    Full chain: sRGB → Linear RGB → XYZ → OKLab → OKLCh
    """
    return to_polar(xyz_to_oklab(linear_rgb_to_xyz(srgb_to_linear(srgb))))


def oklch_to_srgb(lch: NDArray[np.float64], clip: bool = False) -> NDArray[np.float64]:
    """
    Convert OKLCh to sRGB.

    Full chain: OKLCh → OKLab → XYZ → Linear RGB → sRGB

    Args:
        lch: Array of shape (..., 3) with OKLCh values (L, C, H)
        clip: Clip the result to [0, 1]. Off by default so gamut checks
            can see out-of-range channels.
    """
    srgb = linear_to_srgb(xyz_to_linear_rgb(oklab_to_xyz(from_polar(lch))))
    if clip:
        return np.clip(srgb, 0.0, 1.0)
    return srgb
