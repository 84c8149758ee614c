"""SimilarityCache: LRU-backed memo of line-pair similarity scores.

Documents repeat lines (blank lines, boilerplate clauses, numbering-only
lines), so the aligner asks for the same pair many times.  The cache keys on
the unordered pair of texts because similarity is symmetric.

Each ``SimilarityCache`` instance maintains its own ``LRUCache``.  There is
no class-level shared state, so two separate instances never interfere
with each other.

Example::

    from line_diff.cache import SimilarityCache

    cache = SimilarityCache(max_size=256)
    cache.similarity("shall apply", "shall applies")   # computed
    cache.similarity("shall applies", "shall apply")   # served from memory
"""

from __future__ import annotations

from cachetools import LRUCache

from line_diff.algorithm.levenshtein import similarity

__all__ = ["SimilarityCache"]


class SimilarityCache:
    """LRU-backed memo around :func:`line_diff.algorithm.levenshtein.similarity`.

    Args:
        max_size: Maximum number of pair scores to hold in memory.
            Defaults to 1024.  When exceeded, the least-recently-used entry
            is silently evicted.
    """

    def __init__(self, max_size: int = 1024) -> None:
        self._cache: LRUCache[tuple[str, str], float] = LRUCache(maxsize=max_size)
        self.hits = 0
        self.misses = 0

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def similarity(self, a: str, b: str) -> float:
        """Return ``similarity(a, b)``, computing it at most once per pair."""
        if a == b:
            return 1.0
        key = (a, b) if a <= b else (b, a)
        cached = self._cache.get(key)
        if cached is not None:
            self.hits += 1
            return cached
        self.misses += 1
        score = similarity(a, b)
        if self._cache.maxsize > 0:
            self._cache[key] = score
        return score
