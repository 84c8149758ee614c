"""DiffConfig, AlignmentStrategy and HighlightGranularity.

DiffConfig is a frozen (immutable) dataclass holding the per-call
parameters of a comparison.  AlignmentStrategy selects how line pairs are
chosen: greedy nearest-candidate or optimal bipartite assignment.
HighlightGranularity selects the token unit used for in-line markup.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum, auto
from numbers import Real

from line_diff.errors import InvalidArgumentError

DEFAULT_THRESHOLD: float = 0.8


class AlignmentStrategy(StrEnum):
    """How left lines are paired with right lines.

    - GREEDY:  Each left line (in order) takes its best unconsumed right line.
    - OPTIMAL: Maximum total similarity via Hungarian assignment.
    """

    GREEDY = auto()
    OPTIMAL = auto()


class HighlightGranularity(StrEnum):
    """Token unit for in-line highlight markup.

    - WORD:      Runs of whitespace and runs of non-whitespace.
    - CHARACTER: Single code points.
    """

    WORD = auto()
    CHARACTER = auto()


def validate_threshold(threshold: object) -> float:
    """Return ``threshold`` as a float, raising if it is not in [0, 1]."""
    if isinstance(threshold, bool) or not isinstance(threshold, Real):
        msg = f"threshold must be a real number, got {threshold!r}"
        raise InvalidArgumentError(msg)
    value = float(threshold)
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        msg = f"threshold must be in [0, 1], got {threshold}"
        raise InvalidArgumentError(msg)
    return value


@dataclass(frozen=True, slots=True)
class DiffConfig:
    """Immutable configuration for a line comparison.

    Attributes:
        threshold: Minimum similarity in [0, 1] for two lines to be paired.
        strategy: How candidate pairs are chosen.
        granularity: Token unit for highlight markup.
    """

    threshold: float = DEFAULT_THRESHOLD
    strategy: AlignmentStrategy = AlignmentStrategy.GREEDY
    granularity: HighlightGranularity = HighlightGranularity.WORD

    def __post_init__(self) -> None:
        # frozen: bypass __setattr__ to store the normalised float
        object.__setattr__(self, "threshold", validate_threshold(self.threshold))
        try:
            object.__setattr__(self, "strategy", AlignmentStrategy(self.strategy))
        except ValueError:
            msg = f"unknown alignment strategy {self.strategy!r}"
            raise InvalidArgumentError(msg) from None
        try:
            object.__setattr__(
                self, "granularity", HighlightGranularity(self.granularity)
            )
        except ValueError:
            msg = f"unknown highlight granularity {self.granularity!r}"
            raise InvalidArgumentError(msg) from None
