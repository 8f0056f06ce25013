# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""
Runtime layer: the ColorService, its parse cache and serializers.

The module-level helpers share one lazily created default service.
"""

from chromakit.runtime.cache import DEFAULT_CACHE_SIZE, ParseCache
from chromakit.runtime.serializers import (
    SerializerFormat,
    serialize_v1,
    to_css_string,
    to_css_variables,
    to_palette_json,
)
from chromakit.runtime.service import (
    ColorService,
    clear_color_cache,
    convert,
    default_service,
    get_cache_stats,
    parse_color,
)

__all__ = [
    # Service
    "ColorService",
    "default_service",
    "parse_color",
    "convert",
    # Cache
    "ParseCache",
    "DEFAULT_CACHE_SIZE",
    "get_cache_stats",
    "clear_color_cache",
    # Serializers
    "SerializerFormat",
    "to_css_string",
    "serialize_v1",
    "to_palette_json",
    "to_css_variables",
]
