"""algorithm subpackage — similarity scoring and line alignment.

Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from line_diff.algorithm import DiffConfig, LineAligner
    from line_diff.lines import to_lines

    aligner = LineAligner(DiffConfig(threshold=0.6))
    items = aligner.align(to_lines(["shall apply"]), to_lines(["shall applies"]))
"""

from __future__ import annotations

from line_diff.algorithm.aligner import LineAligner
from line_diff.algorithm.config import (
    AlignmentStrategy,
    DiffConfig,
    HighlightGranularity,
)
from line_diff.algorithm.levenshtein import levenshtein_distance, similarity

__all__ = [
    "AlignmentStrategy",
    "DiffConfig",
    "HighlightGranularity",
    "LineAligner",
    "levenshtein_distance",
    "similarity",
]
