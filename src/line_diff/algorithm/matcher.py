"""Optimal line pairing via Hungarian assignment with a threshold guard.

Wraps scipy's ``linear_sum_assignment`` so that pairs below the similarity
threshold never survive.  Forbidden cells are replaced by a guard value
larger than any possible sum of allowed costs, which makes the solver pair
as many lines as possible first and only then minimise dissimilarity.
Pairs that landed on forbidden cells are filtered out afterwards.

A tiny positional penalty ``|i - j| * POSITION_EPSILON`` breaks ties between
equally similar candidates in favour of the nearer one.
"""

from __future__ import annotations

import numpy as np
from scipy.optimize import linear_sum_assignment  # type: ignore[import-untyped]

__all__ = ["POSITION_EPSILON", "optimal_pairs"]

POSITION_EPSILON: float = 1e-9


def optimal_pairs(
    similarity_matrix: np.ndarray,
    threshold: float,
) -> list[tuple[int, int]]:
    """Compute an optimal one-to-one pairing of left rows and right columns.

    Args:
        similarity_matrix: 2-D matrix of shape ``(m, n)`` with the pairwise
            similarity of left line ``i`` and right line ``j``.  Entries set
            to ``-np.inf`` are never paired.
        threshold: Minimum similarity for a pair to be admissible.

    Returns:
        ``(left_index, right_index)`` pairs sorted by left index.  Empty when
        no admissible pair exists.
    """
    if similarity_matrix.size == 0:
        return []

    sim = np.asarray(similarity_matrix, dtype=float)
    allowed = sim >= threshold
    if not allowed.any():
        return []

    m, n = sim.shape
    rows = np.arange(m).reshape(-1, 1)
    cols = np.arange(n).reshape(1, -1)
    cost = (1.0 - np.where(allowed, sim, 0.0)) + np.abs(rows - cols) * POSITION_EPSILON

    # Any single forbidden cell outweighs every admissible assignment
    guard_value = float(min(m, n)) * 2.0 + 1.0
    cost = np.where(allowed, cost, guard_value)

    row_ind, col_ind = linear_sum_assignment(cost)
    keep = allowed[row_ind, col_ind]

    return sorted(
        zip(row_ind[keep].tolist(), col_ind[keep].tolist(), strict=True)
    )
