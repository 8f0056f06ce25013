# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""
ChromaKit v1 portable text format.

Grammar::

    ChromaKit|v1 <space> <n1> <n2> <n3> [/ <alpha>]

- The tag is case-insensitive
- Values may be separated by whitespace, commas, or both
- XYZ values are D65-relative unless written as ``xyz-d50``

Example::

    ChromaKit|v1 oklch 0.637 0.237 25.331 / 0.5
"""

from __future__ import annotations

import math
import re

from chromakit.errors import ColorSyntaxError
from chromakit.schema.color import D50, D65, Color, ColorSpace

V1_TAG = "chromakit|v1"

_SEPARATORS = re.compile(r"[\s,]+")


def is_v1(text: str) -> bool:
    """True if text starts with the v1 tag (case-insensitive)."""
    return text.lstrip()[:len(V1_TAG)].lower() == V1_TAG


def _number(token: str, src: str) -> float:
    try:
        value = float(token)
    except ValueError:
        raise ColorSyntaxError(f"Invalid ChromaKit v1 format: {token!r} is not a number in {src!r}") from None
    if not math.isfinite(value):
        raise ColorSyntaxError(f"Invalid ChromaKit v1 format: {token!r} is not finite in {src!r}")
    return value


def parse_v1(src: str) -> Color:
    """
    Parse a ChromaKit v1 string.

    Raises:
        ColorSyntaxError: Wrong tag, unknown space, wrong value count,
            non-numeric values or alpha outside [0, 1]. Messages start
            with ``Invalid ChromaKit v1 format``.
    """
    text = src.strip().replace("/", " / ")
    tokens = [t for t in _SEPARATORS.split(text) if t]

    if not tokens or tokens[0].lower() != V1_TAG:
        raise ColorSyntaxError(f"Invalid ChromaKit v1 format: missing tag in {src!r}")
    if len(tokens) < 2:
        raise ColorSyntaxError(f"Invalid ChromaKit v1 format: missing color space in {src!r}")

    space_token = tokens[1].lower()
    illuminant = None
    if space_token == "xyz-d50":
        space_token, illuminant = "xyz", D50
    elif space_token in ("xyz", "xyz-d65"):
        space_token, illuminant = "xyz", D65
    try:
        space = ColorSpace.coerce(space_token)
    except ValueError:
        raise ColorSyntaxError(f"Invalid ChromaKit v1 format: unknown color space {tokens[1]!r}") from None

    body = tokens[2:]
    alpha = None
    if "/" in body:
        slash = body.index("/")
        if len(body) != slash + 2:
            raise ColorSyntaxError(f"Invalid ChromaKit v1 format: expected one alpha value after '/' in {src!r}")
        alpha = _number(body[slash + 1], src)
        if not 0.0 <= alpha <= 1.0:
            raise ColorSyntaxError(f"Invalid ChromaKit v1 format: alpha must be between 0 and 1, got {alpha}")
        body = body[:slash]

    if len(body) != 3:
        raise ColorSyntaxError(f"Invalid ChromaKit v1 format: expected 3 values, got {len(body)} in {src!r}")

    values = tuple(_number(t, src) for t in body)
    return Color(space, values, alpha=alpha, illuminant=illuminant)
