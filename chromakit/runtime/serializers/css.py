# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""
CSS string rendering per color space.

sRGB renders as hex (``#69ae5d``) unless it is translucent, in which case
``rgba(r, g, b, a)`` is used. JzAzBz and JzCzHz have no CSS syntax and
render as ``jzazbz(...)`` / ``jzczhz(...)`` functional forms.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from chromakit.convert.colorspace import srgb_to_hex
from chromakit.schema.color import D50, Color, ColorSpace


def _alpha_suffix(color: Color) -> str:
    return f" / {color.alpha:.3f}" if color.alpha is not None else ""


def _srgb(color: Color) -> str:
    if color.alpha is None or color.alpha >= 1.0:
        return srgb_to_hex(color.vector)
    r, g, b = (int(round(v * 255)) for v in np.clip(color.vector, 0.0, 1.0))
    return f"rgba({r}, {g}, {b}, {color.alpha:.3f})"


def _lrgb(color: Color) -> str:
    r, g, b = color.values
    return f"color(srgb-linear {r:.6f} {g:.6f} {b:.6f}{_alpha_suffix(color)})"


def _p3(color: Color) -> str:
    r, g, b = color.values
    return f"color(display-p3 {r:.3f} {g:.3f} {b:.3f}{_alpha_suffix(color)})"


def _hsl(color: Color) -> str:
    h, s, L = color.values
    return f"hsl({h:.2f} {s * 100:.2f}% {L * 100:.2f}%{_alpha_suffix(color)})"


def _hsv(color: Color) -> str:
    h, s, v = color.values
    return f"hsv({h:.2f} {s * 100:.2f}% {v * 100:.2f}%{_alpha_suffix(color)})"


def _hwb(color: Color) -> str:
    h, w, b = color.values
    return f"hwb({h:.2f} {w * 100:.2f}% {b * 100:.2f}%{_alpha_suffix(color)})"


def _xyz(color: Color) -> str:
    x, y, z = color.values
    ident = "xyz-d50" if color.illuminant == D50 else "xyz-d65"
    return f"color({ident} {x:.6f} {y:.6f} {z:.6f}{_alpha_suffix(color)})"


def _lab(color: Color) -> str:
    L, a, b = color.values
    return f"lab({L:.2f}% {a:.2f} {b:.2f}{_alpha_suffix(color)})"


def _lch(color: Color) -> str:
    L, c, h = color.values
    return f"lch({L:.2f}% {c:.2f} {h:.2f}{_alpha_suffix(color)})"


def _oklab(color: Color) -> str:
    L, a, b = color.values
    return f"oklab({L * 100:.2f}% {a:.4f} {b:.4f}{_alpha_suffix(color)})"


def _oklch(color: Color) -> str:
    L, c, h = color.values
    return f"oklch({L * 100:.2f}% {c:.3f} {h:.3f}{_alpha_suffix(color)})"


def _jzazbz(color: Color) -> str:
    jz, az, bz = color.values
    return f"jzazbz({jz:.6f} {az:.6f} {bz:.6f}{_alpha_suffix(color)})"


def _jzczhz(color: Color) -> str:
    jz, cz, hz = color.values
    return f"jzczhz({jz:.6f} {cz:.6f} {hz:.3f}{_alpha_suffix(color)})"


_FORMATTERS: dict[ColorSpace, Callable[[Color], str]] = {
    ColorSpace.SRGB: _srgb,
    ColorSpace.LRGB: _lrgb,
    ColorSpace.P3: _p3,
    ColorSpace.HSL: _hsl,
    ColorSpace.HSV: _hsv,
    ColorSpace.HWB: _hwb,
    ColorSpace.XYZ: _xyz,
    ColorSpace.LAB: _lab,
    ColorSpace.LCH: _lch,
    ColorSpace.OKLAB: _oklab,
    ColorSpace.OKLCH: _oklch,
    ColorSpace.JZAZBZ: _jzazbz,
    ColorSpace.JZCZHZ: _jzczhz,
}


def to_css_string(color: Color) -> str:
    """
    Render a Color as a CSS string in its own space.

    Examples:
        srgb (opaque)       "#69ae5d"
        srgb (alpha 0.5)    "rgba(105, 174, 93, 0.500)"
        oklch               "oklch(63.70% 0.237 25.331)"
        jzazbz              "jzazbz(0.012345 0.001000 -0.002000)"
    """
    return _FORMATTERS[color.space](color)
