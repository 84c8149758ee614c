"""pytest plugin for line-diff.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pytest

from line_diff import DiffConfig, DiffItemKind, diff


@pytest.fixture(scope="session")
def assert_lines_similar() -> Any:
    """Fixture that returns a callable document-similarity asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to diff() which creates a fresh LineDiffer per call).

    Usage in tests::

        def test_render(assert_lines_similar):
            assert_lines_similar(render(doc).splitlines(), expected_lines)

    Returns:
        A callable ``_assert(actual, expected, min_score=0.9, config=None) -> None``
        that raises ``AssertionError`` when the diff score is below ``min_score``.
    """

    def _assert(
        actual: Sequence[str],
        expected: Sequence[str],
        min_score: float = 0.9,
        config: DiffConfig | None = None,
    ) -> None:
        result = diff(actual, expected, config=config)
        if result.score >= min_score:
            return

        counts = result.counts
        changed = [
            item
            for item in result.items
            if item.kind != DiffItemKind.ALIGNED or (item.similarity or 0.0) < 1.0
        ]
        lines = [
            f"{item.kind:>8}: "
            f"{item.highlighted_left or item.left_text or ''!r} -> "
            f"{item.highlighted_right or item.right_text or ''!r}"
            for item in changed[:10]
        ]
        raise AssertionError(
            f"Line sequences not similar: "
            f"score={result.score:.4f} < min_score={min_score}\n"
            f"  aligned={counts[DiffItemKind.ALIGNED]} "
            f"added={counts[DiffItemKind.ADDED]} "
            f"removed={counts[DiffItemKind.REMOVED]} "
            f"moved={counts[DiffItemKind.MOVED]}\n" + "\n".join(lines)
        )

    return _assert
