# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""
Color record: the value type every ChromaKit operation exchanges.

Design principles:
- Immutable: Color and Illuminant are frozen dataclasses
- Tagged: ``space`` alone determines how ``values`` are read
- Alpha-preserving: conversions never touch ``alpha``

Channel layout per space:
- srgb / lrgb / p3: r, g, b in [0, 1] (out-of-gamut values are kept)
- hsl: h (degrees), s, l in [0, 1]
- hsv: h (degrees), s, v in [0, 1]
- hwb: h (degrees), w, b in [0, 1]
- xyz: x, y, z relative to ``illuminant`` (Y = 1.0 for the white point)
- lab: l (0-100), a, b
- lch: l (0-100), c, h (degrees)
- oklab: l (0-1), a, b
- oklch: l (0-1), c, h (degrees)
- jzazbz: jz, az, bz
- jzczhz: jz, cz, hz (degrees)
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union

import numpy as np
from numpy.typing import NDArray


# =============================================================================
# Color Spaces
# =============================================================================


class ColorSpace(Enum):
    """Closed set of supported color spaces."""

    SRGB = "srgb"
    LRGB = "lrgb"
    HSL = "hsl"
    HSV = "hsv"
    HWB = "hwb"
    XYZ = "xyz"
    LAB = "lab"
    LCH = "lch"
    OKLAB = "oklab"
    OKLCH = "oklch"
    JZAZBZ = "jzazbz"
    JZCZHZ = "jzczhz"
    P3 = "p3"

    @classmethod
    def coerce(cls, value: Union[str, ColorSpace]) -> ColorSpace:
        """
        Resolve a space name (case-insensitive, with aliases) to a member.

        Raises:
            ValueError: If the name is not a known space.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Color space must be a string, got {type(value).__name__}")
        key = value.strip().lower()
        key = _SPACE_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown color space: {value}") from None


_SPACE_ALIASES = {
    "rgb": "srgb",
    "srgb-linear": "lrgb",
    "linear-rgb": "lrgb",
    "display-p3": "p3",
}


CHANNELS: dict[ColorSpace, tuple[str, str, str]] = {
    ColorSpace.SRGB: ("r", "g", "b"),
    ColorSpace.LRGB: ("r", "g", "b"),
    ColorSpace.HSL: ("h", "s", "l"),
    ColorSpace.HSV: ("h", "s", "v"),
    ColorSpace.HWB: ("h", "w", "b"),
    ColorSpace.XYZ: ("x", "y", "z"),
    ColorSpace.LAB: ("l", "a", "b"),
    ColorSpace.LCH: ("l", "c", "h"),
    ColorSpace.OKLAB: ("l", "a", "b"),
    ColorSpace.OKLCH: ("l", "c", "h"),
    ColorSpace.JZAZBZ: ("jz", "az", "bz"),
    ColorSpace.JZCZHZ: ("jz", "cz", "hz"),
    ColorSpace.P3: ("r", "g", "b"),
}


# =============================================================================
# Illuminants
# =============================================================================


@dataclass(frozen=True, slots=True)
class Illuminant:
    """
    A reference white point in XYZ (Y normalized to 1.0).

    Attributes:
        name: Short identifier used in adaptation table keys ("D65").
        x, y, z: Tristimulus values of the white point.
    """
    name: str
    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        """Validate the white point is physically meaningful."""
        if not self.name:
            raise ValueError("Illuminant name must not be empty")
        if min(self.x, self.y, self.z) <= 0.0:
            raise ValueError(f"Illuminant {self.name} white point must be positive")

    @property
    def white(self) -> NDArray[np.float64]:
        """White point as a (3,) array."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)


D50 = Illuminant("D50", 0.9642956764295677, 1.0, 0.8251046025104602)
D65 = Illuminant("D65", 0.9504559270516716, 1.0, 1.0890577507598784)
A = Illuminant("A", 1.0985, 1.0, 0.35585)

ILLUMINANTS: dict[str, Illuminant] = {i.name: i for i in (D50, D65, A)}


# =============================================================================
# Color Record
# =============================================================================


@dataclass(frozen=True, slots=True)
class Color:
    """
    A color value tagged with its color space.

    Attributes:
        space: The color space the channel values live in. Strings are
            accepted and coerced (``"oklch"``, ``"rgb"``).
        values: Exactly three channel values, ordered as ``CHANNELS[space]``.
        alpha: Optional opacity in [0, 1]. None means fully opaque and
            "not specified", which serializers render differently from 1.0.
        illuminant: Reference white for XYZ colors (defaults to D65).
            Must be None for every other space.
    """
    space: ColorSpace
    values: tuple[float, float, float]
    alpha: Optional[float] = None
    illuminant: Optional[Illuminant] = None

    def __post_init__(self) -> None:
        """Coerce the space and validate channels, alpha and illuminant."""
        space = ColorSpace.coerce(self.space)
        object.__setattr__(self, "space", space)

        values = tuple(float(v) for v in self.values)
        if len(values) != 3:
            raise ValueError(f"{space.value} color needs 3 channel values, got {len(values)}")
        if not all(math.isfinite(v) for v in values):
            raise ValueError(f"Channel values must be finite, got {values}")
        object.__setattr__(self, "values", values)

        if self.alpha is not None:
            alpha = float(self.alpha)
            if not 0.0 <= alpha <= 1.0:
                raise ValueError(f"Alpha must be 0-1, got {self.alpha}")
            object.__setattr__(self, "alpha", alpha)

        if space is ColorSpace.XYZ:
            if self.illuminant is None:
                object.__setattr__(self, "illuminant", D65)
        elif self.illuminant is not None:
            raise ValueError(f"Only xyz colors carry an illuminant, not {space.value}")

    @property
    def channel_names(self) -> tuple[str, str, str]:
        """Channel names for this color's space."""
        return CHANNELS[self.space]

    @property
    def channels(self) -> dict[str, float]:
        """Channel name → value mapping."""
        return dict(zip(CHANNELS[self.space], self.values))

    def channel(self, name: str) -> float:
        """
        Get a single channel value by name.

        Raises:
            KeyError: If the space has no such channel.
        """
        try:
            return self.values[CHANNELS[self.space].index(name)]
        except ValueError:
            raise KeyError(f"{self.space.value} has no channel {name!r}") from None

    @property
    def vector(self) -> NDArray[np.float64]:
        """Channel values as a (3,) float array."""
        return np.array(self.values, dtype=np.float64)

    @property
    def opacity(self) -> float:
        """Alpha, treating an unspecified alpha as fully opaque."""
        return 1.0 if self.alpha is None else self.alpha

    def with_values(self, values) -> Color:
        """Copy with new channel values, keeping space, alpha and illuminant."""
        return replace(self, values=tuple(float(v) for v in values))

    def with_alpha(self, alpha: Optional[float]) -> Color:
        """Copy with a different alpha."""
        return replace(self, alpha=alpha)

    @property
    def css(self) -> str:
        """
        CSS string for this color, in its own space.

        Returns:
            e.g. "#69ae5d", "oklch(63.70% 0.237 25.331)"
        """
        from chromakit.runtime.serializers.css import to_css_string
        return to_css_string(self)

    def to_v1(self) -> str:
        """Portable ``ChromaKit|v1`` serialization."""
        from chromakit.runtime.serializers.v1 import serialize_v1
        return serialize_v1(self)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        d = {"space": self.space.value, **self.channels}
        if self.alpha is not None:
            d["alpha"] = self.alpha
        if self.space is ColorSpace.XYZ:
            d["illuminant"] = self.illuminant.name
        return d

    @classmethod
    def from_dict(cls, data: dict) -> Color:
        """Deserialize from dictionary."""
        space = ColorSpace.coerce(data["space"])
        illuminant = None
        if space is ColorSpace.XYZ and "illuminant" in data:
            illuminant = ILLUMINANTS[data["illuminant"]]
        return cls(
            space=space,
            values=tuple(data[name] for name in CHANNELS[space]),
            alpha=data.get("alpha"),
            illuminant=illuminant,
        )
