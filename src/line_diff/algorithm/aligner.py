"""LineAligner: pairs lines of two document versions and classifies them.

Architecture:
- A similarity matrix is filled for every (left, right) pair whose length
  ratio could still reach the threshold.  Pairs that cannot are left at
  ``-inf`` without running the edit distance.
- Pairs are chosen either greedily (each left line, in order, takes the best
  unconsumed right line) or optimally (Hungarian assignment).
- Pairs are then walked in left order while tracking the highest right index
  consumed so far.  A pair that points below that mark breaks sequential
  correspondence and becomes a relocation; the others are aligned.
- Aligned pairs are monotonic in both indices and serve as anchors when the
  final sequence is assembled.  Left-only items go before the anchor that
  follows them on the left, right-only items before the anchor that follows
  them on the right, so filtering the output to either side reproduces that
  input in its original order.

A relocation is emitted as two items: a REMOVED item at the source position
(``moved_to`` set) and a MOVED item at the destination (``moved_from`` set).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import NamedTuple

import numpy as np

from line_diff.algorithm.config import AlignmentStrategy, DiffConfig
from line_diff.algorithm.levenshtein import similarity_upper_bound
from line_diff.algorithm.matcher import optimal_pairs
from line_diff.cache import SimilarityCache
from line_diff.lines import Line
from line_diff.result import DiffItem, DiffItemKind

__all__ = ["LineAligner"]

logger = logging.getLogger(__name__)


class _Anchor(NamedTuple):
    left: int
    right: int
    similarity: float


class LineAligner:
    """Greedy (or optimal) line aligner.

    Example::

        from line_diff.algorithm.aligner import LineAligner
        from line_diff.lines import to_lines

        aligner = LineAligner()
        items = aligner.align(to_lines(["a", "b"]), to_lines(["a", "c"]))
        [item.kind for item in items]
        # ['aligned', 'removed', 'added']
    """

    def __init__(
        self,
        config: DiffConfig | None = None,
        cache: SimilarityCache | None = None,
    ) -> None:
        """Initialise the aligner.

        Args:
            config: Comparison parameters.  Defaults to ``DiffConfig()``.
            cache:  Similarity memo.  A private cache is created when None.
        """
        self._config = config if config is not None else DiffConfig()
        self._cache = cache if cache is not None else SimilarityCache()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def align(self, left: Sequence[Line], right: Sequence[Line]) -> list[DiffItem]:
        """Align two line sequences.

        Args:
            left:  Lines of the earlier version.
            right: Lines of the later version.

        Returns:
            Ordered ``DiffItem`` list covering every input line exactly once.
            Items carry no highlight markup; that is added by the caller.
        """
        if not left or not right:
            return [self._removed(line) for line in left] + [
                self._added(line) for line in right
            ]

        sim = self._similarity_matrix(left, right)
        if self._config.strategy == AlignmentStrategy.OPTIMAL:
            pairs = optimal_pairs(sim, self._config.threshold)
        else:
            pairs = self._greedy_pairs(sim)

        logger.debug(
            "aligned %d pairs from %d left / %d right lines (%s)",
            len(pairs),
            len(left),
            len(right),
            self._config.strategy,
        )
        return self._arrange(left, right, pairs, sim)

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------

    def _similarity_matrix(
        self, left: Sequence[Line], right: Sequence[Line]
    ) -> np.ndarray:
        """Return the ``(m, n)`` similarity matrix, ``-inf`` where pruned."""
        threshold = self._config.threshold
        sim = np.full((len(left), len(right)), -np.inf, dtype=float)
        for i, a in enumerate(left):
            for j, b in enumerate(right):
                if similarity_upper_bound(a.text, b.text) < threshold:
                    continue
                sim[i, j] = self._cache.similarity(a.text, b.text)
        return sim

    # ------------------------------------------------------------------
    # Pair selection
    # ------------------------------------------------------------------

    def _greedy_pairs(self, sim: np.ndarray) -> list[tuple[int, int]]:
        """Pick the best unconsumed right line for each left line in order.

        Ties on similarity go to the smallest ``|i - j|``, then to the
        smallest right index.
        """
        threshold = self._config.threshold
        consumed = np.zeros(sim.shape[1], dtype=bool)
        pairs: list[tuple[int, int]] = []

        for i in range(sim.shape[0]):
            row = np.where(consumed, -np.inf, sim[i])
            best = float(row.max())
            if best < threshold:
                continue
            candidates = np.flatnonzero(row == best).tolist()
            j = min(candidates, key=lambda c: (abs(i - c), c))
            consumed[j] = True
            pairs.append((i, j))

        return pairs

    # ------------------------------------------------------------------
    # Classification and ordering
    # ------------------------------------------------------------------

    def _arrange(
        self,
        left: Sequence[Line],
        right: Sequence[Line],
        pairs: list[tuple[int, int]],
        sim: np.ndarray,
    ) -> list[DiffItem]:
        anchors: list[_Anchor] = []
        left_only: dict[int, DiffItem] = {}
        right_only: dict[int, DiffItem] = {}

        highest_right = -1
        for i, j in pairs:
            if j < highest_right:
                left_only[i] = self._removed(left[i], moved_to=right[j].index)
                right_only[j] = DiffItem(
                    kind=DiffItemKind.MOVED,
                    right_text=right[j].text,
                    right_index=right[j].index,
                    moved_from=left[i].index,
                )
                continue
            highest_right = j
            anchors.append(_Anchor(i, j, float(sim[i, j])))

        paired_left = {i for i, _ in pairs}
        paired_right = {j for _, j in pairs}
        for i, line in enumerate(left):
            if i not in paired_left:
                left_only[i] = self._removed(line)
        for j, line in enumerate(right):
            if j not in paired_right:
                right_only[j] = self._added(line)

        left_queue = sorted(left_only)
        right_queue = sorted(right_only)
        lp = rp = 0
        items: list[DiffItem] = []

        for anchor in anchors:
            while lp < len(left_queue) and left_queue[lp] < anchor.left:
                items.append(left_only[left_queue[lp]])
                lp += 1
            while rp < len(right_queue) and right_queue[rp] < anchor.right:
                items.append(right_only[right_queue[rp]])
                rp += 1
            a, b = left[anchor.left], right[anchor.right]
            items.append(
                DiffItem(
                    kind=DiffItemKind.ALIGNED,
                    left_text=a.text,
                    right_text=b.text,
                    left_index=a.index,
                    right_index=b.index,
                    similarity=anchor.similarity,
                )
            )

        items.extend(left_only[i] for i in left_queue[lp:])
        items.extend(right_only[j] for j in right_queue[rp:])

        if len(anchors) < len(pairs):
            logger.debug("%d relocated lines", len(pairs) - len(anchors))
        return items

    @staticmethod
    def _removed(line: Line, moved_to: int | None = None) -> DiffItem:
        return DiffItem(
            kind=DiffItemKind.REMOVED,
            left_text=line.text,
            left_index=line.index,
            moved_to=moved_to,
        )

    @staticmethod
    def _added(line: Line) -> DiffItem:
        return DiffItem(
            kind=DiffItemKind.ADDED,
            right_text=line.text,
            right_index=line.index,
        )
