"""Bounded LRU cache for parsed colors.

Parsing a color is cheap but happens on every pointer move, and named
colors may be resolved by a slow collaborator. The cache is owned by the
caller (usually one per picker) but is safe to share between pickers.
"""

import logging
from collections import OrderedDict
from threading import Lock
from typing import Hashable, Optional

from huepicker.models import ColorValue

logger = logging.getLogger(__name__)

DEFAULT_CACHE_SIZE = 256


class ColorCache:
    """
    Thread-safe least-recently-used mapping from cache key to ColorValue.

    Example:
        >>> cache = ColorCache(maxsize=2)
        >>> cache.put("a", value_a)
        >>> cache.put("b", value_b)
        >>> cache.get("a")          # "a" is now most recently used
        >>> cache.put("c", value_c) # evicts "b"
    """

    def __init__(self, maxsize: int = DEFAULT_CACHE_SIZE):
        if maxsize < 1:
            raise ValueError(f"maxsize must be at least 1, got {maxsize}")

        self._maxsize = maxsize
        self._entries: "OrderedDict[Hashable, ColorValue]" = OrderedDict()
        self._lock = Lock()
        self.hits = 0
        self.misses = 0

    @property
    def maxsize(self) -> int:
        return self._maxsize

    def get(self, key: Hashable) -> Optional[ColorValue]:
        """Return the cached value and mark it most recently used, or None."""
        with self._lock:
            value = self._entries.get(key)
            if value is None:
                self.misses += 1
                return None
            self._entries.move_to_end(key)
            self.hits += 1
            return value

    def put(self, key: Hashable, value: ColorValue) -> None:
        """Store a value, evicting the least recently used entry when full."""
        with self._lock:
            self._entries[key] = value
            self._entries.move_to_end(key)
            if len(self._entries) > self._maxsize:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug(f"Evicted {evicted!r} from color cache")

    def clear(self) -> None:
        """Drop all entries and reset the hit/miss counters."""
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        return (
            f"ColorCache(size={len(self)}, maxsize={self._maxsize}, "
            f"hits={self.hits}, misses={self.misses})"
        )
