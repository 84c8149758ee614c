"""Highlighter: in-line change markup for a pair of aligned lines.

Both lines are tokenised (words and whitespace runs, or single characters)
and diffed with diff-match-patch (word tokens are first encoded as single
characters).  The resulting edit script is rendered twice:

- left:  common text as-is, removed runs wrapped as ``~~removed~~``
- right: common text as-is, added runs wrapped as ``**added**``

The delimiters are a parsing contract with rendering layers and are never
escaped.  Text that already contains ``~~`` or ``**`` is passed through
verbatim, so parsing such markup back is ambiguous.
"""

from __future__ import annotations

import re
from enum import StrEnum, auto
from itertools import groupby
from typing import NamedTuple

from diff_match_patch import diff_match_patch  # type: ignore[import-untyped]

from line_diff.algorithm.config import HighlightGranularity

__all__ = [
    "ADDED_MARKER",
    "REMOVED_MARKER",
    "Highlight",
    "Segment",
    "SegmentKind",
    "highlight",
    "parse_markup",
    "strip_markup",
    "tokenize",
]

REMOVED_MARKER = "~~"
ADDED_MARKER = "**"

_WORD_TOKENS = re.compile(r"\s+|\S+")
_MARKUP = re.compile(r"(~~|\*\*)")


class Highlight(NamedTuple):
    """Markup for the left and right side of one line pair."""

    left: str
    right: str


class SegmentKind(StrEnum):
    EQUAL = auto()
    REMOVED = auto()
    ADDED = auto()


class Segment(NamedTuple):
    kind: SegmentKind
    text: str


_OP_KINDS: dict[int, SegmentKind] = {
    diff_match_patch.DIFF_EQUAL: SegmentKind.EQUAL,
    diff_match_patch.DIFF_DELETE: SegmentKind.REMOVED,
    diff_match_patch.DIFF_INSERT: SegmentKind.ADDED,
}

# Token codes start above Latin-1 and skip the surrogate block
_FIRST_TOKEN_CODE = 0x100
_SURROGATES_START = 0xD800
_SURROGATES_END = 0xDFFF


def tokenize(text: str, granularity: HighlightGranularity) -> list[str]:
    """Split ``text`` into tokens whose concatenation is ``text``."""
    if granularity == HighlightGranularity.CHARACTER:
        return list(text)
    return _WORD_TOKENS.findall(text)


def _encode_tokens(
    a: list[str], b: list[str]
) -> tuple[str, str, dict[str, str]]:
    """Map each distinct token to one private character.

    diff-match-patch diffs characters, so word tokens are encoded the way
    ``diff_linesToChars`` encodes lines and decoded again afterwards.
    """
    token_to_char: dict[str, str] = {}
    char_to_token: dict[str, str] = {}
    code = _FIRST_TOKEN_CODE

    def encode(tokens: list[str]) -> str:
        nonlocal code
        chars: list[str] = []
        for token in tokens:
            if token not in token_to_char:
                if _SURROGATES_START <= code <= _SURROGATES_END:
                    code = _SURROGATES_END + 1
                token_to_char[token] = chr(code)
                char_to_token[chr(code)] = token
                code += 1
            chars.append(token_to_char[token])
        return "".join(chars)

    return encode(a), encode(b), char_to_token


def _edit_script(a: str, b: str, granularity: HighlightGranularity) -> list[Segment]:
    """Return the token-level edit script turning ``a`` into ``b``."""
    dmp = diff_match_patch()
    # No timeout: always the minimal diff, never the speed-up heuristics
    dmp.Diff_Timeout = 0

    if granularity == HighlightGranularity.CHARACTER:
        diffs = dmp.diff_main(a, b, False)
        return [Segment(_OP_KINDS[op], text) for op, text in diffs if text]

    left, right, char_to_token = _encode_tokens(
        tokenize(a, granularity), tokenize(b, granularity)
    )
    script: list[Segment] = []
    for op, encoded in dmp.diff_main(left, right, False):
        kind = _OP_KINDS[op]
        script.extend(Segment(kind, char_to_token[char]) for char in encoded)
    return script


def _is_change(segment: Segment) -> bool:
    return segment.kind != SegmentKind.EQUAL


def _fold_whitespace_equalities(script: list[Segment]) -> list[Segment]:
    """Fold whitespace-only common runs that sit between two changes.

    ``"a b"`` against ``"c d"`` otherwise renders as ``~~a~~ ~~b~~``; folding
    the shared space gives ``~~a b~~`` and ``**c d**``.
    """
    folded: list[Segment] = []
    for n, segment in enumerate(script):
        if (
            segment.kind == SegmentKind.EQUAL
            and segment.text.isspace()
            and folded
            and _is_change(folded[-1])
            and n + 1 < len(script)
            and _is_change(script[n + 1])
        ):
            folded.append(Segment(SegmentKind.REMOVED, segment.text))
            folded.append(Segment(SegmentKind.ADDED, segment.text))
        else:
            folded.append(segment)
    return folded


def _render(script: list[Segment], side: SegmentKind, marker: str) -> str:
    parts: list[str] = []
    for kind, group in groupby(script, key=lambda s: s.kind):
        if kind == SegmentKind.EQUAL:
            parts.append("".join(s.text for s in group))
        elif kind == side:
            parts.append(f"{marker}{''.join(s.text for s in group)}{marker}")
    return "".join(parts)


def _interleave(script: list[Segment]) -> list[Segment]:
    """Order each change run as all removals followed by all additions.

    Grouping then yields one removed span and one added span per run.
    """
    ordered: list[Segment] = []
    for is_change, group in groupby(script, key=_is_change):
        run = list(group)
        if is_change:
            ordered.extend(s for s in run if s.kind == SegmentKind.REMOVED)
            ordered.extend(s for s in run if s.kind == SegmentKind.ADDED)
        else:
            ordered.extend(run)
    return ordered


def highlight(
    a: str,
    b: str,
    granularity: HighlightGranularity = HighlightGranularity.WORD,
) -> Highlight:
    """Return change markup for a line pair.

    Args:
        a: Left (earlier) line.
        b: Right (later) line.
        granularity: Token unit for the alignment.  Defaults to words.

    Returns:
        ``Highlight(left, right)``.  With markers stripped, ``left == a`` and
        ``right == b``.  Identical inputs come back unmarked.
    """
    if a == b:
        return Highlight(a, b)

    granularity = HighlightGranularity(granularity)
    script = _edit_script(a, b, granularity)
    script = _interleave(_fold_whitespace_equalities(script))
    return Highlight(
        left=_render(script, SegmentKind.REMOVED, REMOVED_MARKER),
        right=_render(script, SegmentKind.ADDED, ADDED_MARKER),
    )


def parse_markup(text: str) -> list[Segment]:
    """Split highlight markup into segments.

    Each delimiter toggles its span: text between a pair of ``~~`` is
    REMOVED, between a pair of ``**`` is ADDED, everything else EQUAL.  The
    other delimiter inside an open span is plain text.  An unclosed delimiter
    runs to the end of the text.  Adjacent segments of one kind are merged
    and empty segments are dropped.
    """
    segments: list[Segment] = []
    current = SegmentKind.EQUAL
    for part in _MARKUP.split(text):
        if part == REMOVED_MARKER and current != SegmentKind.ADDED:
            current = (
                SegmentKind.EQUAL if current == SegmentKind.REMOVED else SegmentKind.REMOVED
            )
        elif part == ADDED_MARKER and current != SegmentKind.REMOVED:
            current = (
                SegmentKind.EQUAL if current == SegmentKind.ADDED else SegmentKind.ADDED
            )
        elif part and segments and segments[-1].kind == current:
            segments[-1] = Segment(current, segments[-1].text + part)
        elif part:
            segments.append(Segment(current, part))
    return segments


def strip_markup(text: str) -> str:
    """Remove highlight delimiters, returning the underlying line text."""
    return "".join(segment.text for segment in parse_markup(text))
