# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""
Color text parsing.

Formats:
    hex           #rgb, #rgba, #rrggbb, #rrggbbaa
    CSS           rgb() rgba() hsl() hsla() hsv() hwb() lab() lch()
                  oklab() oklch() color(xyz|xyz-d50|xyz-d65|srgb|srgb-linear|display-p3 ...)
    ChromaKit v1  ChromaKit|v1 <space> <n1> <n2> <n3> [/ alpha]
"""

from __future__ import annotations

from chromakit.semantics.css import parse_color_function, parse_hex
from chromakit.semantics.parser import TextParser, default_parser
from chromakit.semantics.v1 import is_v1, parse_v1

__all__ = [
    "TextParser",
    "default_parser",
    "parse_hex",
    "parse_color_function",
    "parse_v1",
    "is_v1",
]
