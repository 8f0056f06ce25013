# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""
Conversion registry and router.

The registry is a directed graph: nodes are color spaces, edges are pure
``Color -> Color`` functions. ``convert`` finds the shortest chain of
edges (breadth-first, unweighted) and applies it. No rounding happens
between steps and nothing is cached at this layer.

The graph starts empty. ``register_all_conversions`` is the explicit
bootstrap that wires every built-in formula.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Optional, Union

import numpy as np

from chromakit.convert import colorspace as cs
from chromakit.convert.adaptation import adapt_xyz
from chromakit.errors import RoutingError
from chromakit.schema.color import D65, Color, ColorSpace

logger = logging.getLogger(__name__)

ConversionFn = Callable[[Color], Color]
Edge = tuple[ColorSpace, ColorSpace]


class ConversionRegistry:
    """
    Directed graph of pairwise conversions.

    Edges are kept in registration order, which makes the breadth-first
    search (and therefore the chosen path) deterministic.
    """

    def __init__(self) -> None:
        self._edges: dict[Edge, ConversionFn] = {}
        self._neighbors: dict[ColorSpace, list[ColorSpace]] = {}

    def register(
        self,
        source: Union[str, ColorSpace],
        target: Union[str, ColorSpace],
        fn: ConversionFn,
    ) -> None:
        """
        Add one directed edge. Registering the same pair again replaces
        the previous function.
        """
        source = ColorSpace.coerce(source)
        target = ColorSpace.coerce(target)
        if (source, target) not in self._edges:
            self._neighbors.setdefault(source, []).append(target)
        self._edges[(source, target)] = fn

    def has_edge(self, source: ColorSpace, target: ColorSpace) -> bool:
        """True if a direct conversion is registered."""
        return (source, target) in self._edges

    def __len__(self) -> int:
        return len(self._edges)

    @property
    def spaces(self) -> set[ColorSpace]:
        """Every space that appears in at least one edge."""
        return {space for edge in self._edges for space in edge}

    def find_path(
        self,
        source: ColorSpace,
        target: ColorSpace,
    ) -> Optional[list[Edge]]:
        """
        Shortest path from source to target.

        Returns:
            List of edges to apply in order (empty when source == target),
            or None when the spaces are not connected.
        """
        if source == target:
            return []

        previous: dict[ColorSpace, ColorSpace] = {}
        visited = {source}
        queue = deque([source])

        while queue:
            node = queue.popleft()
            for neighbor in self._neighbors.get(node, ()):
                if neighbor in visited:
                    continue
                visited.add(neighbor)
                previous[neighbor] = node
                if neighbor == target:
                    return self._walk_back(previous, source, target)
                queue.append(neighbor)

        return None

    @staticmethod
    def _walk_back(
        previous: dict[ColorSpace, ColorSpace],
        source: ColorSpace,
        target: ColorSpace,
    ) -> list[Edge]:
        path = []
        node = target
        while node != source:
            parent = previous[node]
            path.append((parent, node))
            node = parent
        path.reverse()
        return path

    def convert(self, color: Color, target: Union[str, ColorSpace]) -> Color:
        """
        Convert a color to another space.

        Args:
            color: Any Color
            target: Target space (member or name)

        Returns:
            ``color`` itself when it is already in ``target``, otherwise a
            new Color in ``target``.

        Raises:
            RoutingError: If no registered path connects the two spaces.
        """
        target = ColorSpace.coerce(target)
        if color.space == target:
            return color

        path = self.find_path(color.space, target)
        if path is None:
            raise RoutingError(color.space.value, target.value)

        logger.debug(
            "[Router] %s -> %s in %d step(s)",
            color.space.value, target.value, len(path),
        )
        result = color
        for edge in path:
            result = self._edges[edge](result)
        return result


# =============================================================================
# Built-in Edges
# =============================================================================


def _edge(target: ColorSpace, formula: Callable[[np.ndarray], np.ndarray]) -> ConversionFn:
    """Wrap an array formula into a Color edge that carries alpha through."""
    def apply(color: Color) -> Color:
        return Color(target, tuple(formula(color.vector)), alpha=color.alpha)
    return apply


def _from_xyz(target: ColorSpace, formula: Callable[[np.ndarray], np.ndarray]) -> ConversionFn:
    """Edge out of XYZ: adapt to D65 first, since every formula is D65-based."""
    def apply(color: Color) -> Color:
        d65 = adapt_xyz(color, D65)
        return Color(target, tuple(formula(d65.vector)), alpha=color.alpha)
    return apply


def _to_xyz(formula: Callable[[np.ndarray], np.ndarray]) -> ConversionFn:
    """Edge into XYZ; results are D65-relative."""
    def apply(color: Color) -> Color:
        return Color(
            ColorSpace.XYZ, tuple(formula(color.vector)),
            alpha=color.alpha, illuminant=D65,
        )
    return apply


def _lab_to_xyz(values: np.ndarray) -> np.ndarray:
    return cs.lab_to_xyz(values, D65.white)


def _xyz_to_lab(values: np.ndarray) -> np.ndarray:
    return cs.xyz_to_lab(values, D65.white)


def register_all_conversions(registry: ConversionRegistry) -> ConversionRegistry:
    """
    Wire every built-in pairwise conversion into ``registry``.

    Returns:
        The same registry, for chaining.
    """
    S = ColorSpace

    # Device RGB
    registry.register(S.SRGB, S.LRGB, _edge(S.LRGB, cs.srgb_to_linear))
    registry.register(S.LRGB, S.SRGB, _edge(S.SRGB, cs.linear_to_srgb))
    registry.register(S.LRGB, S.XYZ, _to_xyz(cs.linear_rgb_to_xyz))
    registry.register(S.XYZ, S.LRGB, _from_xyz(S.LRGB, cs.xyz_to_linear_rgb))
    registry.register(S.P3, S.XYZ, _to_xyz(cs.p3_to_xyz))
    registry.register(S.XYZ, S.P3, _from_xyz(S.P3, cs.xyz_to_p3))

    # Cylindrical RGB models
    registry.register(S.SRGB, S.HSL, _edge(S.HSL, cs.srgb_to_hsl))
    registry.register(S.HSL, S.SRGB, _edge(S.SRGB, cs.hsl_to_srgb))
    registry.register(S.SRGB, S.HSV, _edge(S.HSV, cs.srgb_to_hsv))
    registry.register(S.HSV, S.SRGB, _edge(S.SRGB, cs.hsv_to_srgb))
    registry.register(S.SRGB, S.HWB, _edge(S.HWB, cs.srgb_to_hwb))
    registry.register(S.HWB, S.SRGB, _edge(S.SRGB, cs.hwb_to_srgb))
    registry.register(S.HSL, S.HSV, _edge(S.HSV, cs.hsl_to_hsv))
    registry.register(S.HSV, S.HSL, _edge(S.HSL, cs.hsv_to_hsl))

    # CIE
    registry.register(S.XYZ, S.LAB, _from_xyz(S.LAB, _xyz_to_lab))
    registry.register(S.LAB, S.XYZ, _to_xyz(_lab_to_xyz))
    registry.register(S.LAB, S.LCH, _edge(S.LCH, cs.lab_to_lch))
    registry.register(S.LCH, S.LAB, _edge(S.LAB, cs.lch_to_lab))

    # OK
    registry.register(S.XYZ, S.OKLAB, _from_xyz(S.OKLAB, cs.xyz_to_oklab))
    registry.register(S.OKLAB, S.XYZ, _to_xyz(cs.oklab_to_xyz))
    registry.register(S.OKLAB, S.OKLCH, _edge(S.OKLCH, cs.oklab_to_oklch))
    registry.register(S.OKLCH, S.OKLAB, _edge(S.OKLAB, cs.oklch_to_oklab))

    # HDR
    registry.register(S.XYZ, S.JZAZBZ, _from_xyz(S.JZAZBZ, cs.xyz_to_jzazbz))
    registry.register(S.JZAZBZ, S.XYZ, _to_xyz(cs.jzazbz_to_xyz))
    registry.register(S.JZAZBZ, S.JZCZHZ, _edge(S.JZCZHZ, cs.jzazbz_to_jzczhz))
    registry.register(S.JZCZHZ, S.JZAZBZ, _edge(S.JZAZBZ, cs.jzczhz_to_jzazbz))

    return registry
