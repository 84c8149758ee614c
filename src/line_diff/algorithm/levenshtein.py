"""Levenshtein edit-distance similarity between two lines.

Similarity is defined as::

    1.0 - levenshtein(a, b) / max(len(a), len(b))

with two empty strings scoring 1.0.  The distance uses unit costs for
insertion, deletion and substitution over Unicode code points.

The rolling-row dynamic programme is vectorised with numpy: substitutions
and deletions are computed for a whole row at once, and the left-to-right
insertion chain is resolved with a running minimum over ``row - offsets``.
"""

from __future__ import annotations

import numpy as np

__all__ = ["levenshtein_distance", "similarity", "similarity_upper_bound"]


def _code_points(text: str) -> np.ndarray:
    return np.fromiter(map(ord, text), dtype=np.int64, count=len(text))


def levenshtein_distance(a: str, b: str) -> int:
    """Compute the Levenshtein (edit) distance between two strings.

    The shorter string is always placed on the row axis to minimise the
    allocation size.

    Args:
        a: First string.
        b: Second string.

    Returns:
        The minimum number of single-character edits (insertions, deletions,
        or substitutions) required to transform ``a`` into ``b``.
    """
    if a == b:
        return 0

    # Swap so that `b` is the shorter string (row allocation)
    if len(a) < len(b):
        a, b = b, a

    if len(b) == 0:
        return len(a)

    codes_b = _code_points(b)
    offsets = np.arange(len(b) + 1, dtype=np.int64)
    prev_row = offsets.copy()

    for i, code_a in enumerate(_code_points(a), start=1):
        mismatch = (codes_b != code_a).astype(np.int64)
        curr_row = np.empty_like(prev_row)
        curr_row[0] = i
        np.minimum(prev_row[1:] + 1, prev_row[:-1] + mismatch, out=curr_row[1:])
        # Insertions: curr[j] = min_k<=j (curr[k] + j - k)
        curr_row = np.minimum.accumulate(curr_row - offsets) + offsets
        prev_row = curr_row

    return int(prev_row[-1])


def similarity(a: str, b: str) -> float:
    """Return the normalised Levenshtein similarity of two strings.

    Args:
        a: First string.
        b: Second string.

    Returns:
        Float in [0.0, 1.0].  1.0 for identical strings (including two empty
        strings); 0.0 when exactly one string is empty or every character
        must be replaced.
    """
    if a == b:
        return 1.0
    longest = max(len(a), len(b))
    if min(len(a), len(b)) == 0:
        return 0.0
    return 1.0 - levenshtein_distance(a, b) / longest


def similarity_upper_bound(a: str, b: str) -> float:
    """Return an upper bound on ``similarity(a, b)`` from the lengths alone.

    The distance is at least ``abs(len(a) - len(b))``.  The bound is evaluated
    with the same floating-point expression as :func:`similarity`, so it never
    rounds below the exact score of a pair that meets the threshold.
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - (longest - min(len(a), len(b))) / longest
