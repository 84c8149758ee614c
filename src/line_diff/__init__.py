"""Line diff - line alignment, change classification and in-line highlighting."""

from __future__ import annotations

from line_diff.algorithm.config import (
    AlignmentStrategy,
    DiffConfig,
    HighlightGranularity,
)
from line_diff.api import diff, highlight, similarity
from line_diff.comparator import LineDiffer
from line_diff.errors import InvalidArgumentError
from line_diff.highlight import Highlight, parse_markup, strip_markup
from line_diff.lines import split_lines
from line_diff.result import DiffItem, DiffItemKind, DiffResult

__version__: str = "0.1.0"
__all__: list[str] = [
    "AlignmentStrategy",
    "DiffConfig",
    "DiffItem",
    "DiffItemKind",
    "DiffResult",
    "Highlight",
    "HighlightGranularity",
    "InvalidArgumentError",
    "LineDiffer",
    "diff",
    "highlight",
    "parse_markup",
    "similarity",
    "split_lines",
    "strip_markup",
]
