# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""
Exception hierarchy.

Every error raised by ChromaKit derives from ``ChromaKitError`` and from
the builtin exception a caller would naturally expect, so existing
``except ValueError`` / ``except LookupError`` handlers keep working.

Record validation (``Color``, ``Illuminant``, config dataclasses) raises
plain ``ValueError`` from ``__post_init__``.
"""

from __future__ import annotations


class ChromaKitError(Exception):
    """Base class for all ChromaKit errors."""


# =============================================================================
# Parsing
# =============================================================================


class ColorParseError(ChromaKitError, ValueError):
    """A color input could not be turned into a Color."""


class ColorInputError(ColorParseError, TypeError):
    """The input was missing or of an unsupported type."""


class ColorSyntaxError(ColorParseError):
    """The input text is malformed (hex, CSS function or ChromaKit v1)."""


# =============================================================================
# Conversion
# =============================================================================


class RoutingError(ChromaKitError, LookupError):
    """No registered conversion path connects two color spaces."""

    def __init__(self, source: str, target: str) -> None:
        self.source = source
        self.target = target
        super().__init__(
            f"No conversion path could be found from {source} to {target}"
        )


# =============================================================================
# Domain
# =============================================================================


class UnknownAlgorithmError(ChromaKitError, ValueError):
    """An unknown delta-E or contrast algorithm name was requested."""


class UnknownGeneratorError(ChromaKitError, ValueError):
    """An unknown palette generator family was requested."""

    def __init__(self, family: str) -> None:
        self.family = family
        super().__init__(f"Unknown generator family: {family}")
