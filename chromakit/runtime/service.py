# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""
ColorService: the object that owns the conversion graph and parse cache.

Quick start::

    from chromakit import parse_color, convert

    c = parse_color("#69ae5d")           # OKLCh by default
    convert(c, "srgb").css               # "#69ae5d"

Applications that want isolated state construct their own
``ColorService``; the module-level helpers share one lazily created
default instance. Neither the service nor its cache is thread-safe:
embedders running several threads must serialize access.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from chromakit.convert.registry import ConversionRegistry, register_all_conversions
from chromakit.errors import ChromaKitError, ColorInputError, ColorParseError, ColorSyntaxError
from chromakit.runtime.cache import DEFAULT_CACHE_SIZE, ParseCache
from chromakit.schema.color import Color, ColorSpace
from chromakit.semantics.parser import TextParser, default_parser

logger = logging.getLogger(__name__)

ColorInput = Union[str, Color]
SpaceLike = Union[str, ColorSpace]


class ColorService:
    """
    Conversion registry + text parser + LRU parse cache.

    Args:
        cache_size: Parse cache capacity.
        registry: Pre-built registry. When omitted a new one is created
            and bootstrapped with every built-in conversion.
        parser: Text parser table. Defaults to all built-in notations.
    """

    def __init__(
        self,
        cache_size: int = DEFAULT_CACHE_SIZE,
        registry: Optional[ConversionRegistry] = None,
        parser: Optional[TextParser] = None,
    ) -> None:
        if registry is None:
            registry = register_all_conversions(ConversionRegistry())
        self.registry = registry
        self.parser = parser if parser is not None else default_parser()
        self.cache = ParseCache(cache_size)

    def convert(self, color: Color, target: SpaceLike) -> Color:
        """Route a Color to ``target`` (identity when already there)."""
        return self.registry.convert(color, target)

    def parse_color(self, value: ColorInput, target: SpaceLike = ColorSpace.OKLCH) -> Color:
        """
        Resolve text or a Color into ``target``.

        Color inputs skip the cache. Text inputs are cached under
        ``value + ':' + target``; a failed parse leaves the cache untouched.

        Raises:
            ColorInputError: None or an unsupported input type.
            ColorSyntaxError: Empty or malformed text.
            ColorParseError: Any other failure while parsing.
            RoutingError: No conversion path to ``target``.
        """
        target = ColorSpace.coerce(target)

        if isinstance(value, Color):
            return self.registry.convert(value, target)
        if value is None:
            raise ColorInputError("Color input cannot be null or undefined")
        if not isinstance(value, str):
            raise ColorInputError(
                f"Color input must be a string or Color object, got {type(value).__name__}"
            )
        if not value.strip():
            raise ColorSyntaxError("Color input cannot be empty")

        key = ParseCache.make_key(value, target.value)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("[Parse] cache hit %r", key)
            return cached

        try:
            parsed = self.parser.parse(value)
        except ChromaKitError:
            raise
        except Exception as exc:
            raise ColorParseError(f"Failed to parse color {value!r}: {exc}") from exc

        result = self.registry.convert(parsed, target)
        self.cache.put(key, result)
        return result

    def cache_stats(self) -> dict:
        """``{"size": ..., "max_size": ...}`` for the parse cache."""
        return self.cache.stats()

    def clear_cache(self) -> None:
        """Drop every cached parse result."""
        self.cache.clear()


# =============================================================================
# Default Service
# =============================================================================

_default_service: Optional[ColorService] = None


def default_service() -> ColorService:
    """
    Process-wide service, created on first use.

    Single-threaded access only.
    """
    global _default_service
    if _default_service is None:
        _default_service = ColorService()
        logger.debug("[Service] default service created")
    return _default_service


def parse_color(value: ColorInput, target: SpaceLike = ColorSpace.OKLCH) -> Color:
    """Parse with the default service. See ColorService.parse_color."""
    return default_service().parse_color(value, target)


def convert(color: Color, target: SpaceLike) -> Color:
    """Convert with the default service's registry."""
    return default_service().convert(color, target)


def get_cache_stats() -> dict:
    """Default service cache stats: ``{"size": ..., "max_size": ...}``."""
    return default_service().cache_stats()


def clear_color_cache() -> None:
    """Clear the default service's parse cache."""
    default_service().clear_cache()
