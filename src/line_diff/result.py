"""DiffItem and DiffResult dataclasses for line comparison output.

``to_dict()`` on both types produces the camelCase wire shape that an HTTP
layer can serialise directly as a response body.  Fields that are absent
for an item's kind are omitted rather than sent as ``null``.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

__all__ = ["DiffItem", "DiffItemKind", "DiffResult"]


class DiffItemKind(StrEnum):
    """Outcome of aligning one line (or one pair of lines).

    - ALIGNED: Both sides present and similar enough; possibly identical.
    - ADDED:   Right-only line with no qualifying left match.
    - REMOVED: Left-only line with no qualifying right match, or the source
               position of a relocated line.
    - MOVED:   Destination of a relocated line whose match breaks the
               sequential order of the pairs found so far.
    """

    ALIGNED = auto()
    ADDED = auto()
    REMOVED = auto()
    MOVED = auto()


_WIRE_NAMES: dict[str, str] = {
    "kind": "kind",
    "left_text": "leftText",
    "right_text": "rightText",
    "left_index": "leftIndex",
    "right_index": "rightIndex",
    "similarity": "similarity",
    "highlighted_left": "highlightedLeft",
    "highlighted_right": "highlightedRight",
    "moved_from": "movedFrom",
    "moved_to": "movedTo",
}


@dataclass(frozen=True, slots=True)
class DiffItem:
    """One entry in a comparison.

    Attributes:
        kind: The alignment outcome.
        left_text: Left line text (ALIGNED, REMOVED).
        right_text: Right line text (ALIGNED, ADDED, MOVED).
        left_index: 0-based position of ``left_text`` in the left input.
        right_index: 0-based position of ``right_text`` in the right input.
        similarity: Pair similarity in [0, 1]; only when both sides present.
        highlighted_left: ``left_text`` with removed spans wrapped in ``~~``.
            Also set on the REMOVED half of an edited relocation.
        highlighted_right: ``right_text`` with added spans wrapped in ``**``.
            Also set on the MOVED half of an edited relocation.
        moved_from: For MOVED items, the left index the line came from.
        moved_to: For the REMOVED half of a relocation, the right index the
            line went to.
    """

    kind: DiffItemKind
    left_text: str | None = None
    right_text: str | None = None
    left_index: int | None = None
    right_index: int | None = None
    similarity: float | None = None
    highlighted_left: str | None = None
    highlighted_right: str | None = None
    moved_from: int | None = None
    moved_to: int | None = None

    @property
    def has_left(self) -> bool:
        return self.left_text is not None

    @property
    def has_right(self) -> bool:
        return self.right_text is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a camelCase dictionary for JSON serialisation."""
        out: dict[str, Any] = {}
        for name, wire_name in _WIRE_NAMES.items():
            value = getattr(self, name)
            if value is None:
                continue
            out[wire_name] = str(value) if name == "kind" else value
        return out


@dataclass(frozen=True, slots=True)
class DiffResult:
    """Result of a ``diff()`` call.

    Attributes:
        score: Aggregate similarity in [0.0, 1.0].  1.0 is identical.
        items: Ordered comparison entries.  Items with a left side, read in
            order, reproduce the left input; items with a right side
            reproduce the right input.
    """

    score: float
    items: tuple[DiffItem, ...] = field(default_factory=tuple)

    @property
    def counts(self) -> dict[DiffItemKind, int]:
        """Number of items of each kind (every kind present, zero if unused)."""
        tally = Counter(item.kind for item in self.items)
        return {kind: tally.get(kind, 0) for kind in DiffItemKind}

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for JSON serialisation."""
        return {
            "score": self.score,
            "items": [item.to_dict() for item in self.items],
        }
