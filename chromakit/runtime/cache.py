# Copyright (c) 2026 ChromaKit
# SPDX-License-Identifier: MIT

"""
Least-recently-used cache for parsed colors.

Keys are ``raw_input + ':' + target_space``. Hits move to the
most-recently-used end; inserting past capacity evicts the
least-recently-used entry. No TTL: entries live until evicted or
``clear()`` is called.
"""

from __future__ import annotations

from collections import OrderedDict
from typing import Optional

from chromakit.schema.color import Color

DEFAULT_CACHE_SIZE = 64


class ParseCache:
    """
    Fixed-capacity LRU mapping of cache key → Color.

    Not thread-safe; callers sharing one instance across threads must
    serialize access.
    """

    def __init__(self, max_size: int = DEFAULT_CACHE_SIZE) -> None:
        if max_size < 1:
            raise ValueError(f"max_size must be >= 1, got {max_size}")
        self.max_size = max_size
        self._entries: OrderedDict[str, Color] = OrderedDict()

    @staticmethod
    def make_key(raw: str, target: str) -> str:
        """Cache key for a raw input string and a target space name."""
        return f"{raw}:{target}"

    def get(self, key: str) -> Optional[Color]:
        """Return the cached color and mark it most recently used, or None."""
        color = self._entries.get(key)
        if color is not None:
            self._entries.move_to_end(key)
        return color

    def put(self, key: str, color: Color) -> None:
        """Insert or refresh an entry, evicting the oldest one if full."""
        if key in self._entries:
            self._entries.move_to_end(key)
        self._entries[key] = color
        while len(self._entries) > self.max_size:
            self._entries.popitem(last=False)

    def keys(self) -> list[str]:
        """Keys from least to most recently used."""
        return list(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def stats(self) -> dict:
        """Current size and capacity."""
        return {"size": len(self._entries), "max_size": self.max_size}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries
