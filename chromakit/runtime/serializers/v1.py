# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""ChromaKit v1 serializer (inverse of chromakit.semantics.v1.parse_v1)."""

from __future__ import annotations

from chromakit.schema.color import D50, Color, ColorSpace


def serialize_v1(color: Color) -> str:
    """
    Serialize a Color to ``ChromaKit|v1 <space> <n1> <n2> <n3> [/ alpha]``.

    Numbers use ``repr`` so parsing the result gives back bit-identical
    floats. XYZ relative to D50 is written as ``xyz-d50``.

    Returns:
        e.g. "ChromaKit|v1 oklch 0.637 0.237 25.331 / 0.5"
    """
    space = color.space.value
    if color.space is ColorSpace.XYZ and color.illuminant == D50:
        space = "xyz-d50"
    numbers = " ".join(repr(v) for v in color.values)
    text = f"ChromaKit|v1 {space} {numbers}"
    if color.alpha is not None:
        text += f" / {color.alpha!r}"
    return text
