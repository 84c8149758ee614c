"""Tests for LineAligner: pairing, classification, ordering and coverage.

Covers:
- Empty inputs on either or both sides
- Identical inputs align one-to-one with similarity 1.0
- Threshold gating of modified pairs
- Greedy tie-breaks (similarity, then index distance, then right index)
- Relocation: MOVED at the destination, REMOVED(moved_to) at the source
- Removed-before-added ordering inside a gap
- OPTIMAL strategy pairing where greedy leaves a line unmatched
- Coverage and order reconstruction on a set of fixed cases
"""

from __future__ import annotations

import pytest

from line_diff.algorithm.aligner import LineAligner
from line_diff.algorithm.config import AlignmentStrategy, DiffConfig
from line_diff.algorithm.levenshtein import similarity
from line_diff.cache import SimilarityCache
from line_diff.lines import to_lines
from line_diff.result import DiffItem, DiffItemKind

A = DiffItemKind.ALIGNED
ADD = DiffItemKind.ADDED
REM = DiffItemKind.REMOVED
MOV = DiffItemKind.MOVED

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def align(
    left: list[str],
    right: list[str],
    threshold: float = 0.8,
    strategy: AlignmentStrategy = AlignmentStrategy.GREEDY,
) -> list[DiffItem]:
    aligner = LineAligner(DiffConfig(threshold=threshold, strategy=strategy))
    return aligner.align(to_lines(left), to_lines(right))


def kinds(items: list[DiffItem]) -> list[DiffItemKind]:
    return [item.kind for item in items]


def assert_covers(items: list[DiffItem], left: list[str], right: list[str]) -> None:
    """Every input line appears once and each side keeps its order."""
    assert [i.left_text for i in items if i.has_left] == left
    assert [i.right_text for i in items if i.has_right] == right
    assert [i.left_index for i in items if i.has_left] == list(range(len(left)))
    assert [i.right_index for i in items if i.has_right] == list(range(len(right)))


# ---------------------------------------------------------------------------
# Empty inputs
# ---------------------------------------------------------------------------


class TestEmptyInputs:
    def test_both_empty(self) -> None:
        assert align([], []) == []

    def test_empty_left_all_added(self) -> None:
        items = align([], ["a", "b"])
        assert kinds(items) == [ADD, ADD]
        assert [i.right_text for i in items] == ["a", "b"]
        assert [i.right_index for i in items] == [0, 1]

    def test_empty_right_all_removed(self) -> None:
        items = align(["a", "b"], [])
        assert kinds(items) == [REM, REM]
        assert [i.left_text for i in items] == ["a", "b"]

    def test_one_sided_items_have_no_similarity(self) -> None:
        items = align(["a"], []) + align([], ["b"])
        assert all(item.similarity is None for item in items)


# ---------------------------------------------------------------------------
# Identical and modified lines
# ---------------------------------------------------------------------------


class TestAlignedPairs:
    def test_identical_sequences_all_aligned(self) -> None:
        lines = ["Recalling its resolution 60/1,", "", "Decides to remain seized."]
        items = align(lines, lines)
        assert kinds(items) == [A, A, A]
        assert all(item.similarity == 1.0 for item in items)
        assert [(i.left_index, i.right_index) for i in items] == [(0, 0), (1, 1), (2, 2)]

    def test_modified_line_above_threshold_aligned(self) -> None:
        items = align(["The quick fox"], ["The quick dog"], threshold=0.5)
        assert kinds(items) == [A]
        assert items[0].similarity == pytest.approx(1 - 3 / 13)

    def test_modified_line_below_threshold_split(self) -> None:
        items = align(["The quick fox"], ["The quick dog"])
        assert kinds(items) == [REM, ADD]

    def test_threshold_is_inclusive(self) -> None:
        # similarity("abcd", "abcx") == 0.75 exactly
        assert kinds(align(["abcd"], ["abcx"], threshold=0.75)) == [A]

    @pytest.mark.parametrize(
        ("left", "right"), [("xxx", "xx"), ("xxx", "x"), ("x" * 7, "x" * 3)]
    )
    def test_threshold_equal_to_length_only_score(self, left: str, right: str) -> None:
        # thirds and sevenths are not exactly representable
        threshold = similarity(left, right)
        items = align([left], [right], threshold=threshold)
        assert kinds(items) == [A]
        assert items[0].similarity == threshold

    def test_zero_threshold_pairs_anything(self) -> None:
        items = align(["abc"], ["xyz"], threshold=0.0)
        assert kinds(items) == [A]
        assert items[0].similarity == 0.0

    def test_removed_before_added_in_gap(self) -> None:
        items = align(["a", "old text", "c"], ["a", "new words", "c"])
        assert kinds(items) == [A, REM, ADD, A]
        assert items[1].left_text == "old text"
        assert items[2].right_text == "new words"

    def test_aligner_items_carry_no_markup(self) -> None:
        items = align(["The quick fox"], ["The quick dog"], threshold=0.5)
        assert items[0].highlighted_left is None
        assert items[0].highlighted_right is None


# ---------------------------------------------------------------------------
# Greedy tie-breaks
# ---------------------------------------------------------------------------


class TestGreedySelection:
    def test_highest_similarity_wins(self) -> None:
        items = align(["abcdef"], ["abcdxx", "abcdex"], threshold=0.6)
        assert kinds(items) == [ADD, A]
        assert items[1].right_text == "abcdex"

    def test_tie_broken_by_index_distance(self) -> None:
        items = align(["p", "q", "a"], ["a", "b", "c", "a"])
        aligned = [i for i in items if i.kind == A]
        assert len(aligned) == 1
        assert (aligned[0].left_index, aligned[0].right_index) == (2, 3)

    def test_equal_distance_broken_by_smaller_right_index(self) -> None:
        items = align(["x", "a", "y"], ["a", "z", "a"])
        aligned = [i for i in items if i.kind == A]
        assert (aligned[0].left_index, aligned[0].right_index) == (1, 0)
        assert kinds(items) == [REM, A, REM, ADD, ADD]

    def test_duplicate_lines_pair_in_order(self) -> None:
        items = align(["a", "a"], ["a", "a", "a"])
        assert kinds(items) == [A, A, ADD]
        assert items[2].right_index == 2

    def test_right_line_consumed_once(self) -> None:
        items = align(["same", "same"], ["same"])
        assert kinds(items) == [A, REM]


# ---------------------------------------------------------------------------
# Relocations
# ---------------------------------------------------------------------------


class TestRelocation:
    def test_rotated_lines_yield_one_moved(self) -> None:
        items = align(["x", "y", "z"], ["z", "x", "y"])
        assert kinds(items) == [MOV, A, A, REM]
        assert kinds(items).count(MOV) == 1

    def test_moved_item_links_source(self) -> None:
        items = align(["x", "y", "z"], ["z", "x", "y"])
        moved, source = items[0], items[3]
        assert moved.right_text == "z"
        assert moved.right_index == 0
        assert moved.moved_from == 2
        assert moved.left_text is None
        assert moved.similarity is None
        assert source.left_text == "z"
        assert source.moved_to == 0

    def test_rotated_lines_keep_both_orders(self) -> None:
        left, right = ["x", "y", "z"], ["z", "x", "y"]
        assert_covers(align(left, right), left, right)

    def test_first_line_moved_to_end(self) -> None:
        # Greedy anchors on the first left line; everything it jumps over moves.
        items = align(["a", "b", "c", "d"], ["b", "c", "d", "a"])
        assert kinds(items) == [MOV, MOV, MOV, A, REM, REM, REM]

    def test_plain_removal_has_no_moved_to(self) -> None:
        items = align(["gone"], [])
        assert items[0].moved_to is None


# ---------------------------------------------------------------------------
# OPTIMAL strategy
# ---------------------------------------------------------------------------


class TestOptimalStrategy:
    # similarity matrix: [[0.9, 0.8], [0.8, 0.6]]
    LEFT = ["abcdefghij", "abcdefZZiX"]
    RIGHT = ["abcdefghiX", "abcdefghXY"]

    def test_greedy_leaves_line_unmatched(self) -> None:
        items = align(self.LEFT, self.RIGHT, threshold=0.7)
        assert kinds(items) == [A, REM, ADD]

    def test_optimal_pairs_both_lines(self) -> None:
        items = align(
            self.LEFT, self.RIGHT, threshold=0.7, strategy=AlignmentStrategy.OPTIMAL
        )
        assert kinds(items) == [MOV, A, REM]
        assert items[1].similarity == pytest.approx(0.8)
        assert items[0].moved_from == 1
        assert items[2].moved_to == 0

    def test_optimal_identical_matches_greedy(self) -> None:
        lines = ["one", "two", "three"]
        greedy = align(lines, lines)
        optimal = align(lines, lines, strategy=AlignmentStrategy.OPTIMAL)
        assert greedy == optimal


# ---------------------------------------------------------------------------
# Coverage and order
# ---------------------------------------------------------------------------

CASES = [
    ([], []),
    (["a"], ["a"]),
    (["a", "b"], []),
    ([], ["a", "b"]),
    (["x", "y", "z"], ["z", "x", "y"]),
    (["a", "b", "c", "d"], ["d", "c", "b", "a"]),
    (["same", "same", "other"], ["other", "same"]),
    (
        ["Article 1", "The parties agree.", "Article 2", "Signed."],
        ["Preamble", "Article 1", "The parties agreed.", "Signed.", "Article 2"],
    ),
    (["", "", "text"], ["text", "", ""]),
]


@pytest.mark.parametrize("strategy", list(AlignmentStrategy))
@pytest.mark.parametrize(("left", "right"), CASES)
def test_coverage_and_order(
    left: list[str], right: list[str], strategy: AlignmentStrategy
) -> None:
    items = align(left, right, threshold=0.6, strategy=strategy)
    assert_covers(items, left, right)


@pytest.mark.parametrize(("left", "right"), CASES)
def test_item_count(left: list[str], right: list[str]) -> None:
    items = align(left, right)
    pairs = sum(1 for i in items if i.kind == A)
    # aligned pairs take one item; everything else one item per line
    assert len(items) == len(left) + len(right) - pairs


def test_shared_cache_is_used() -> None:
    cache = SimilarityCache()
    aligner = LineAligner(DiffConfig(threshold=0.5), cache=cache)
    aligner.align(to_lines(["abcd", "abcd"]), to_lines(["abce", "abce"]))
    assert cache.misses == 1
    assert cache.hits == 3


def test_inputs_not_mutated() -> None:
    left = to_lines(["a", "b"])
    right = to_lines(["b", "a"])
    LineAligner().align(left, right)
    assert [line.text for line in left] == ["a", "b"]
    assert [line.text for line in right] == ["b", "a"]
