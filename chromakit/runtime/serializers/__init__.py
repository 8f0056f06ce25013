# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""
Serializers for colors and generated palettes.

Serializers render values exactly as computed; none of them converts,
rounds channels before storage or otherwise alters the data.
"""

from chromakit.runtime.serializers.base import SerializerFormat
from chromakit.runtime.serializers.css import to_css_string
from chromakit.runtime.serializers.palette import to_css_variables, to_palette_json
from chromakit.runtime.serializers.v1 import serialize_v1

__all__ = [
    "SerializerFormat",
    "to_css_string",
    "serialize_v1",
    "to_palette_json",
    "to_css_variables",
]
