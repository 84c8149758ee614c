"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible line lists. No random values.
Three tiers: 10-line, 100-line and 500-line documents.
Each tier provides both a "similar" (lightly amended) and a "dissimilar"
(unrelated wording) pair generator.
"""

from __future__ import annotations

import pytest

Pair = tuple[list[str], list[str]]


def generate_document(num_lines: int, prefix: str = "Paragraph") -> list[str]:
    """Generate numbered paragraph lines with deterministic wording."""
    return [
        f"{prefix} {i}. The Assembly notes the report of the Secretary-General "
        f"on item {i} and requests further information."
        for i in range(num_lines)
    ]


def _make_similar(num_lines: int) -> Pair:
    """Generate an amended copy: every third line reworded, every tenth dropped.

    A blank line is inserted after every seventh line of the right side so the
    alignment also has to absorb additions.
    """
    left = generate_document(num_lines)
    right: list[str] = []
    for i, line in enumerate(left):
        if i % 10 == 9:
            continue
        if i % 3 == 0:
            line = line.replace("notes", "takes note of").replace("requests", "invites")
        right.append(line)
        if i % 7 == 6:
            right.append("")
    return left, right


def _make_dissimilar(num_lines: int) -> Pair:
    """Generate two documents sharing no paragraph wording."""
    left = generate_document(num_lines)
    right = [
        f"Clause {i}: payment falls due within thirty days of invoice {i * 17}."
        for i in range(num_lines)
    ]
    return left, right


# --- Fixtures for each size tier ---


@pytest.fixture
def pair_10line_similar() -> Pair:
    """10-line amended pair."""
    return _make_similar(10)


@pytest.fixture
def pair_10line_dissimilar() -> Pair:
    """10-line unrelated pair."""
    return _make_dissimilar(10)


@pytest.fixture
def pair_100line_similar() -> Pair:
    """100-line amended pair."""
    return _make_similar(100)


@pytest.fixture
def pair_100line_dissimilar() -> Pair:
    """100-line unrelated pair."""
    return _make_dissimilar(100)


@pytest.fixture
def pair_500line_similar() -> Pair:
    """500-line amended pair."""
    return _make_similar(500)


@pytest.fixture
def pair_500line_dissimilar() -> Pair:
    """500-line unrelated pair."""
    return _make_dissimilar(500)
