# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""
Cursor over the argument list of a CSS color function.

Handles both CSS syntaxes::

    rgb(255, 0, 0, 0.5)      legacy, comma separated
    rgb(255 0 0 / 0.5)       modern, space separated, slash before alpha

The delimiter style is fixed by whatever follows the first component.
"""

from __future__ import annotations

import re
from typing import Optional

from chromakit.errors import ColorSyntaxError

_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_HUE_UNITS = ("deg",)


class ComponentReader:
    """
    Reads numeric components from a CSS color function string.

    Args:
        src: Full input string, e.g. ``"oklch(62% 0.2 30)"``
        start: Index just after the opening parenthesis
    """

    def __init__(self, src: str, start: int) -> None:
        self.src = src
        self.pos = start
        self.comma_syntax = False

    def _peek(self) -> str:
        return self.src[self.pos] if self.pos < len(self.src) else ""

    def skip_ws(self) -> None:
        while self.pos < len(self.src) and self.src[self.pos].isspace():
            self.pos += 1

    def read_component(
        self,
        *,
        hue: bool = False,
        alpha: bool = False,
        percent_only: bool = False,
        number_only: bool = False,
        lo: Optional[float] = None,
        hi: Optional[float] = None,
        percent_ref: float = 1.0,
        scale: float = 1.0,
    ) -> float:
        """
        Read one number, with optional ``%`` or ``deg`` suffix.

        Args:
            hue: Angle in degrees, wrapped into [0, 360). No percentages.
            alpha: Alpha value: number or percentage in [0, 1].
            percent_only: Require a percentage.
            number_only: Reject percentages.
            lo, hi: Inclusive bounds checked after scaling.
            percent_ref: Value that 100% maps to.
            scale: Multiplier for plain numbers.

        Raises:
            ColorSyntaxError: On any violated rule.
        """
        if alpha:
            lo = 0.0 if lo is None else lo
            hi = 1.0 if hi is None else hi

        self.skip_ws()
        match = _NUMBER_RE.match(self.src, self.pos)
        if match is None:
            raise ColorSyntaxError(f"expected a number at position {self.pos} in {self.src!r}")
        text = match.group()
        self.pos = match.end()

        if self._peek() == ".":
            raise ColorSyntaxError('multiple "."')
        if text.startswith("-") and not hue and lo is not None and lo >= 0:
            raise ColorSyntaxError("negative value not allowed")

        value = float(text)
        is_percent = self._peek() == "%"

        if is_percent:
            if number_only:
                raise ColorSyntaxError("percentage not allowed")
            self.pos += 1
        elif percent_only:
            raise ColorSyntaxError("percentage required")

        if hue:
            if is_percent:
                raise ColorSyntaxError("hue cannot be a percentage")
            for unit in _HUE_UNITS:
                if self.src.startswith(unit, self.pos):
                    self.pos += len(unit)
            value %= 360.0
        elif is_percent:
            value = value * (1.0 if alpha else percent_ref) / 100.0
        else:
            value *= scale

        if (lo is not None and value < lo) or (hi is not None and value > hi):
            raise ColorSyntaxError(f"value {value} out of range [{lo}, {hi}]")
        return value

    def determine_delimiter_style(self) -> None:
        """
        Decide between comma and whitespace syntax after the first value.

        Raises:
            ColorSyntaxError: If neither a comma nor whitespace follows.
        """
        saw_ws = False
        self.comma_syntax = False
        while self.pos < len(self.src):
            ch = self.src[self.pos]
            if ch == ",":
                self.comma_syntax = True
                self.pos += 1
                break
            if ch.isspace():
                saw_ws = True
                self.pos += 1
            else:
                break

        if not self.comma_syntax and not saw_ws:
            raise ColorSyntaxError("expected ',' or <whitespace> after first value")

    def consume_comma_if_needed(self) -> None:
        """Require a comma between components in comma syntax."""
        if self.comma_syntax:
            self.skip_ws()
            if self._peek() != ",":
                raise ColorSyntaxError("expected ','")
            self.pos += 1

    def parse_optional_alpha(self) -> Optional[float]:
        """Read ``, alpha`` (comma syntax) or ``/ alpha`` if present."""
        self.skip_ws()
        ch = self._peek()
        if (self.comma_syntax and ch == ",") or ch == "/":
            self.pos += 1
            return self.read_component(alpha=True)
        return None

    def check_end(self) -> None:
        """Require the closing parenthesis and nothing after it."""
        self.skip_ws()
        if self._peek() != ")":
            raise ColorSyntaxError('missing ")"')
        self.pos += 1
        if self.pos != len(self.src):
            raise ColorSyntaxError('unexpected text after ")"')

    def read_identifier(self) -> str:
        """Read a CSS identifier such as ``display-p3``."""
        self.skip_ws()
        start = self.pos
        while self.pos < len(self.src) and (self.src[self.pos].isalnum() or self.src[self.pos] == "-"):
            self.pos += 1
        if start == self.pos:
            raise ColorSyntaxError(f"expected an identifier at position {start} in {self.src!r}")
        return self.src[start:self.pos]
