"""Public API functions for line-diff.

This module provides the user-facing functions: diff, similarity and
highlight.  Each ``diff`` call creates a fresh ``LineDiffer`` to guarantee
zero global state mutation between calls.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence

from line_diff.algorithm.config import DiffConfig, HighlightGranularity
from line_diff.algorithm.levenshtein import similarity as _similarity
from line_diff.comparator import LineDiffer
from line_diff.highlight import Highlight
from line_diff.highlight import highlight as _highlight
from line_diff.result import DiffResult

__all__ = ["diff", "highlight", "similarity"]


def diff(
    lines_a: Sequence[str],
    lines_b: Sequence[str],
    config: DiffConfig | None = None,
    *,
    threshold: float | None = None,
) -> DiffResult:
    """Compare two versions of a document line by line.

    Args:
        lines_a:   Lines of the earlier version.
        lines_b:   Lines of the later version.
        config:    Comparison parameters.  Defaults to ``DiffConfig()`` when None.
        threshold: Overrides ``config.threshold`` for this call.  Must be in
                   [0.0, 1.0].

    Returns:
        A ``DiffResult`` with the aggregate score and ordered items.

    Raises:
        InvalidArgumentError: ``threshold`` is outside [0, 1].
    """
    config = config if config is not None else DiffConfig()
    if threshold is not None:
        config = dataclasses.replace(config, threshold=threshold)
    return LineDiffer(config=config).diff(lines_a, lines_b)


def similarity(a: str, b: str) -> float:
    """Return the normalised edit-distance similarity of two strings.

    Returns:
        A float in [0.0, 1.0].  1.0 means identical; 0.0 means one string is
        empty (and the other is not) or every character differs.
    """
    return _similarity(a, b)


def highlight(
    a: str,
    b: str,
    granularity: HighlightGranularity = HighlightGranularity.WORD,
) -> Highlight:
    """Return ``Highlight(left, right)`` markup for a pair of lines.

    Removed spans are wrapped in ``~~`` on the left, added spans in ``**`` on
    the right.
    """
    return _highlight(a, b, granularity)
