# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""
Palette serializers.

JSON for tooling, CSS custom properties for stylesheets. Both render the
palette exactly as generated; nothing is recomputed here.

Example (to_css_variables, prefix="brand")::

    :root {
      --brand-50: #f1f9ef;
      --brand-100: #e0f2dc;
      ...
    }
"""

from __future__ import annotations

import re
from typing import Union

from chromakit.runtime.serializers.base import SerializerFormat, dump_json
from chromakit.schema.palette import GeneratedPalette, RadixGeneratedPalette

AnyPalette = Union[GeneratedPalette, RadixGeneratedPalette]

_CSS_VALUE_FIELDS = ("rgb", "oklch")
_PREFIX_RE = re.compile(r"[^a-z0-9-]+")


def to_palette_json(
    palette: AnyPalette,
    *,
    format: SerializerFormat = SerializerFormat.JSON,
) -> str:
    """Serialize a generated palette (Tailwind or Radix) as JSON.

    Args:
        palette: The palette to serialize.
        format: Output format (JSON or JSON_PRETTY).

    Returns:
        JSON string of ``palette.to_dict()``.
    """
    return dump_json(palette.to_dict(), format)


def css_prefix(name: str) -> str:
    """Normalize a family name into a CSS identifier fragment ("Light Blue" → "light-blue")."""
    return _PREFIX_RE.sub("-", name.strip().lower()).strip("-")


def to_css_variables(
    palette: AnyPalette,
    prefix: str | None = None,
    *,
    value: str = "rgb",
    selector: str = ":root",
) -> str:
    """Render a palette as CSS custom properties.

    Args:
        palette: The palette to render.
        prefix: Variable name prefix. Defaults to the matched family name.
        value: Which rendering to emit, ``"rgb"`` or ``"oklch"``.
        selector: Rule selector wrapping the declarations.

    Returns:
        A CSS rule. Radix palettes get one variable per category and
        shade (``--amber-dark-alpha-9``).

    Raises:
        ValueError: For an unknown ``value`` field.
    """
    if value not in _CSS_VALUE_FIELDS:
        raise ValueError(f"value must be one of {_CSS_VALUE_FIELDS}, got {value!r}")
    base = css_prefix(prefix if prefix is not None else palette.family)

    if isinstance(palette, RadixGeneratedPalette):
        ramps = [(f"{base}-{css_prefix(name)}", ramp) for name, ramp in palette.categories.items()]
    else:
        ramps = [(base, palette)]

    lines = [f"{selector} {{"]
    for name, ramp in ramps:
        for shade in ramp.array_values:
            lines.append(f"  --{name}-{shade.shade}: {getattr(shade, value)};")
    lines.append("}")
    return "\n".join(lines)
