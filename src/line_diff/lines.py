"""Line values and document splitting."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

__all__ = ["Line", "split_lines", "to_lines"]


@dataclass(frozen=True, slots=True)
class Line:
    """An opaque line of text and its 0-based position in its source sequence."""

    index: int
    text: str


def to_lines(texts: Iterable[str]) -> tuple[Line, ...]:
    """Wrap raw strings as ``Line`` values numbered from 0."""
    return tuple(Line(index, text) for index, text in enumerate(texts))


def split_lines(text: str) -> list[str]:
    """Split document text into lines for comparison.

    ``\\r\\n`` and ``\\r`` are normalised to ``\\n``.  Trailing whitespace is
    stripped from every line but leading indentation is kept, and blank lines
    are preserved so that document structure survives.  Empty text gives no
    lines.
    """
    if not text:
        return []
    normalised = text.replace("\r\n", "\n").replace("\r", "\n")
    return [line.rstrip() for line in normalised.split("\n")]
