"""LineDiffer: orchestrator that wires LineAligner + Highlighter + scoring.

This is the central wiring layer between the raw algorithms and the public
API.  It converts two plain string sequences into ``Line`` values, runs the
aligner, attaches highlight markup to every modified pair and computes the
aggregate score.

Score formula::

    score = sum(item.similarity or 0.0 for item in items) / len(items)

ADDED, REMOVED and MOVED items (one side only) contribute 0.  Two empty
inputs score 1.0.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Sequence

from line_diff.algorithm.aligner import LineAligner
from line_diff.algorithm.config import DiffConfig
from line_diff.cache import SimilarityCache
from line_diff.highlight import highlight
from line_diff.lines import Line, to_lines
from line_diff.result import DiffItem, DiffResult

__all__ = ["LineDiffer", "aggregate_score"]

logger = logging.getLogger(__name__)


def aggregate_score(items: Sequence[DiffItem]) -> float:
    """Mean per-item similarity, counting one-sided items as 0."""
    if not items:
        return 1.0
    total = sum(item.similarity or 0.0 for item in items)
    return min(1.0, max(0.0, total / len(items)))


class LineDiffer:
    """Orchestrator for line-level document comparison.

    Each instance owns one ``SimilarityCache``; two instances never share
    cache state.  The cache only speeds up repeated pairs and never changes
    a result.

    Example::

        from line_diff.comparator import LineDiffer

        differ = LineDiffer()
        result = differ.diff(["The quick fox"], ["The quick fix"])
        result.items[0].highlighted_right   # 'The quick **fix**'
    """

    def __init__(
        self,
        config: DiffConfig | None = None,
        max_cache_size: int = 1024,
    ) -> None:
        """Initialise the differ.

        Args:
            config: Comparison parameters.  Defaults to ``DiffConfig()``.
            max_cache_size: Maximum number of pair similarities held in the
                per-instance LRU cache.  This is an infrastructure parameter and
                is NOT part of ``DiffConfig``.
        """
        self._config: DiffConfig = config if config is not None else DiffConfig()
        self._cache = SimilarityCache(max_size=max_cache_size)
        self._aligner = LineAligner(config=self._config, cache=self._cache)

    @property
    def config(self) -> DiffConfig:
        return self._config

    def diff(self, lines_a: Sequence[str], lines_b: Sequence[str]) -> DiffResult:
        """Compare two line sequences.

        Args:
            lines_a: Lines of the earlier version.  Not mutated.
            lines_b: Lines of the later version.  Not mutated.

        Returns:
            A ``DiffResult`` with ordered items and the aggregate score.
        """
        logger.debug(
            "diff start: %d left / %d right lines, threshold=%.3f",
            len(lines_a),
            len(lines_b),
            self._config.threshold,
        )
        left, right = to_lines(lines_a), to_lines(lines_b)
        aligned = self._aligner.align(left, right)
        items = tuple(self._with_markup(item, left, right) for item in aligned)
        score = aggregate_score(items)

        logger.debug(
            "diff complete: %d items, score=%.4f, cache hits=%d misses=%d",
            len(items),
            score,
            self._cache.hits,
            self._cache.misses,
        )
        return DiffResult(score=score, items=items)

    def _with_markup(
        self, item: DiffItem, left: Sequence[Line], right: Sequence[Line]
    ) -> DiffItem:
        """Attach highlight markup to an item whose line changed.

        Two-sided items are marked against each other.  The halves of an
        edited relocation are marked against their partner line: the MOVED
        item gets ``highlighted_right`` and the REMOVED source gets
        ``highlighted_left``.
        """
        granularity = self._config.granularity
        if item.moved_from is not None and item.right_text is not None:
            source = left[item.moved_from].text
            if source == item.right_text:
                return item
            markup = highlight(source, item.right_text, granularity)
            return dataclasses.replace(item, highlighted_right=markup.right)
        if item.moved_to is not None and item.left_text is not None:
            destination = right[item.moved_to].text
            if destination == item.left_text:
                return item
            markup = highlight(item.left_text, destination, granularity)
            return dataclasses.replace(item, highlighted_left=markup.left)
        if (
            item.left_text is None
            or item.right_text is None
            or item.similarity is None
            or item.similarity >= 1.0
        ):
            return item
        markup = highlight(item.left_text, item.right_text, granularity)
        return dataclasses.replace(
            item,
            highlighted_left=markup.left,
            highlighted_right=markup.right,
        )
