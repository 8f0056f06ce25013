# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""
Text → Color dispatch.

Routes an input string to the right format parser by its prefix:
``#`` for hex, the ``ChromaKit|v1`` tag, or a registered CSS function
name. The result stays in the notation's own space.
"""

from __future__ import annotations

import re
from typing import Callable, Pattern, Union

from chromakit.errors import ColorSyntaxError
from chromakit.schema.color import Color
from chromakit.semantics import css
from chromakit.semantics.v1 import is_v1, parse_v1

TextParserFn = Callable[[str], Color]


class TextParser:
    """
    Ordered table of ``(prefix pattern, parser)`` pairs.

    Patterns are tried in registration order; the first match wins.
    """

    def __init__(self) -> None:
        self._parsers: list[tuple[Pattern[str], TextParserFn]] = []

    def register(self, pattern: Union[str, Pattern[str]], parser: TextParserFn) -> None:
        """
        Add a CSS-function parser.

        Args:
            pattern: Regex matched at the start of the input
                (compiled case-insensitive when given as a string).
            parser: Function turning the whole input into a Color.
        """
        if isinstance(pattern, str):
            pattern = re.compile(pattern, re.IGNORECASE)
        self._parsers.append((pattern, parser))

    def parse(self, text: str) -> Color:
        """
        Parse text into a Color in its own notation space.

        Raises:
            ColorSyntaxError: Unknown prefix or malformed input.
        """
        src = text.strip()
        if src.startswith("#"):
            return css.parse_hex(src)
        if is_v1(src):
            return parse_v1(src)
        for pattern, parser in self._parsers:
            if pattern.match(src):
                return parser(src)
        raise ColorSyntaxError(f"Unsupported color format: {text}")


def default_parser() -> TextParser:
    """TextParser with every built-in CSS notation registered."""
    parser = TextParser()
    parser.register(r"rgba?\s*\(", css.parse_rgb)
    parser.register(r"hsla?\s*\(", css.parse_hsl)
    parser.register(r"hsv\s*\(", css.parse_hsv)
    parser.register(r"hwb\s*\(", css.parse_hwb)
    parser.register(r"lab\s*\(", css.parse_lab)
    parser.register(r"lch\s*\(", css.parse_lch)
    parser.register(r"oklab\s*\(", css.parse_oklab)
    parser.register(r"oklch\s*\(", css.parse_oklch)
    parser.register(r"color\s*\(", css.parse_color_function)
    return parser
