# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""
Parsers for hex and CSS functional color notations.

Each parser takes the full (stripped) input string and returns a Color
in the notation's own space; routing to a target space happens later.

Percent references follow CSS Color 4: 100% is 255 for rgb(), 100 for
Lab L, 125 for Lab a/b, 150 for LCh C, 1 for OKLab L and 0.4 for OKLab
a/b and OKLCh C.
"""

from __future__ import annotations

import re

from chromakit.errors import ColorSyntaxError
from chromakit.schema.color import D50, D65, Color, ColorSpace
from chromakit.semantics.components import ComponentReader

_HEX_RE = re.compile(r"[0-9a-fA-F]+")
_OPEN_RE = re.compile(r"[a-zA-Z-]+\s*\(")


def _reader(src: str) -> ComponentReader:
    match = _OPEN_RE.match(src)
    if match is None:
        raise ColorSyntaxError(f"expected a color function, got {src!r}")
    return ComponentReader(src, match.end())


def _three(
    src: str,
    first: dict,
    second: dict,
    third: dict,
) -> tuple[tuple[float, float, float], float | None]:
    """Read three components plus optional alpha with shared delimiter rules."""
    reader = _reader(src)
    a = reader.read_component(**first)
    reader.determine_delimiter_style()
    b = reader.read_component(**second)
    reader.consume_comma_if_needed()
    c = reader.read_component(**third)
    alpha = reader.parse_optional_alpha()
    reader.check_end()
    return (a, b, c), alpha


# =============================================================================
# Hex
# =============================================================================


def parse_hex(src: str) -> Color:
    """
    Parse ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa``.

    Alpha is rounded to two decimals.

    Raises:
        ColorSyntaxError: For any other length or non-hex digits.
    """
    digits = src.strip()
    if digits.startswith("#"):
        digits = digits[1:]
    if len(digits) not in (3, 4, 6, 8) or not _HEX_RE.fullmatch(digits):
        raise ColorSyntaxError(f"Invalid hex color format: {src}")

    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)

    r, g, b = (int(digits[i:i + 2], 16) / 255 for i in (0, 2, 4))
    alpha = None
    if len(digits) == 8:
        alpha = round(int(digits[6:8], 16) / 255, 2)
    return Color(ColorSpace.SRGB, (r, g, b), alpha=alpha)


# =============================================================================
# RGB family
# =============================================================================


def parse_rgb(src: str) -> Color:
    """Parse ``rgb()`` / ``rgba()`` with 0-255 numbers or percentages."""
    channel = {"lo": 0.0, "hi": 255.0, "percent_ref": 255.0}
    values, alpha = _three(src, channel, channel, channel)
    return Color(ColorSpace.SRGB, tuple(v / 255.0 for v in values), alpha=alpha)


def parse_hsl(src: str) -> Color:
    """Parse ``hsl()`` / ``hsla()``; saturation and lightness must be percentages."""
    pct = {"percent_only": True, "lo": 0.0, "hi": 1.0}
    values, alpha = _three(src, {"hue": True}, pct, pct)
    return Color(ColorSpace.HSL, values, alpha=alpha)


def parse_hsv(src: str) -> Color:
    """Parse ``hsv()``; saturation and value must be percentages."""
    pct = {"percent_only": True, "lo": 0.0, "hi": 1.0}
    values, alpha = _three(src, {"hue": True}, pct, pct)
    return Color(ColorSpace.HSV, values, alpha=alpha)


def parse_hwb(src: str) -> Color:
    """Parse ``hwb()``; whiteness and blackness must be percentages."""
    pct = {"percent_only": True, "lo": 0.0, "hi": 1.0}
    values, alpha = _three(src, {"hue": True}, pct, pct)
    return Color(ColorSpace.HWB, values, alpha=alpha)


# =============================================================================
# CIE / OK
# =============================================================================


def parse_lab(src: str) -> Color:
    """Parse ``lab()``; L is 0-100 (or a percentage)."""
    values, alpha = _three(
        src,
        {"lo": 0.0, "hi": 100.0, "percent_ref": 100.0},
        {"percent_ref": 125.0},
        {"percent_ref": 125.0},
    )
    return Color(ColorSpace.LAB, values, alpha=alpha)


def parse_lch(src: str) -> Color:
    """Parse ``lch()``."""
    values, alpha = _three(
        src,
        {"lo": 0.0, "hi": 100.0, "percent_ref": 100.0},
        {"lo": 0.0, "percent_ref": 150.0},
        {"hue": True},
    )
    return Color(ColorSpace.LCH, values, alpha=alpha)


def parse_oklab(src: str) -> Color:
    """Parse ``oklab()``; L is 0-1 (or a percentage)."""
    values, alpha = _three(
        src,
        {"lo": 0.0, "hi": 1.0},
        {"percent_ref": 0.4},
        {"percent_ref": 0.4},
    )
    return Color(ColorSpace.OKLAB, values, alpha=alpha)


def parse_oklch(src: str) -> Color:
    """Parse ``oklch()``; L is 0-1 (or a percentage)."""
    values, alpha = _three(
        src,
        {"lo": 0.0, "hi": 1.0},
        {"lo": 0.0, "percent_ref": 0.4},
        {"hue": True},
    )
    return Color(ColorSpace.OKLCH, values, alpha=alpha)


# =============================================================================
# color()
# =============================================================================

_COLOR_FUNCTION_SPACES = {
    "xyz": (ColorSpace.XYZ, D65),
    "xyz-d65": (ColorSpace.XYZ, D65),
    "xyz-d50": (ColorSpace.XYZ, D50),
    "srgb": (ColorSpace.SRGB, None),
    "srgb-linear": (ColorSpace.LRGB, None),
    "display-p3": (ColorSpace.P3, None),
}


def parse_color_function(src: str) -> Color:
    """
    Parse CSS Color 4 ``color(<space> c1 c2 c3 [/ alpha])``.

    Supported spaces: xyz, xyz-d65, xyz-d50, srgb, srgb-linear, display-p3.
    Components are always whitespace separated.
    """
    reader = _reader(src)
    ident = reader.read_identifier().lower()
    if ident not in _COLOR_FUNCTION_SPACES:
        raise ColorSyntaxError(f"Unsupported color() space: {ident}")
    space, illuminant = _COLOR_FUNCTION_SPACES[ident]

    values = []
    for _ in range(3):
        if not reader.src[reader.pos:reader.pos + 1].isspace():
            raise ColorSyntaxError("expected <whitespace> between color() components")
        values.append(reader.read_component())
    alpha = reader.parse_optional_alpha()
    reader.check_end()
    return Color(space, tuple(values), alpha=alpha, illuminant=illuminant)
