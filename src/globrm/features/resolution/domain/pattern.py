"""
Summary: Classify input patterns and compile glob segments into matchers.
Why: Keep glob syntax rules independent of filesystem traversal.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from functools import lru_cache
from pathlib import PurePath
from typing import Final

from globrm.shared.errors import InvalidPatternError

WILDCARD_CHARS: Final[frozenset[str]] = frozenset("*?[")
RECURSIVE_SEGMENT: Final[str] = "**"


class PatternKind(StrEnum):
    """How an input argument is interpreted."""

    LITERAL = "literal"
    GLOB = "glob"


def classify(pattern: str) -> PatternKind:
    """Return ``GLOB`` when the pattern contains any wildcard character."""

    if any(char in WILDCARD_CHARS for char in pattern):
        return PatternKind.GLOB
    return PatternKind.LITERAL


def has_wildcard(segment: str) -> bool:
    """Return whether a single path segment needs matching rather than lookup."""

    return any(char in WILDCARD_CHARS for char in segment)


@dataclass(slots=True, frozen=True)
class SegmentMatcher:
    """Compiled matcher for one path segment."""

    source: str
    regex: re.Pattern[str]

    @property
    def is_recursive(self) -> bool:
        """Whether this segment is the ``**`` directory wildcard."""

        return self.source == RECURSIVE_SEGMENT

    @property
    def is_literal(self) -> bool:
        """Whether this segment names one entry without any wildcard."""

        return not has_wildcard(self.source)

    def matches(self, name: str) -> bool:
        """Match a directory entry name, case-sensitively.

        Wildcards never match a leading dot unless the segment itself
        starts with one.
        """
        if name.startswith(".") and not self.source.startswith("."):
            return False
        return self.regex.fullmatch(name) is not None


@lru_cache(maxsize=256)
def compile_segment(segment: str, pattern: str | None = None) -> SegmentMatcher:
    """Translate one glob segment into a case-sensitive regular expression.

    Supports ``*``, ``?`` and bracket classes (``[abc]``, ``[a-z]``,
    ``[!abc]``/``[^abc]``). A ``**`` embedded in a longer segment behaves
    like two ``*``.

    Raises:
        InvalidPatternError: If a bracket expression is left unterminated.
    """
    if segment == RECURSIVE_SEGMENT:
        return SegmentMatcher(source=segment, regex=re.compile(r".*", re.DOTALL))

    parts: list[str] = []
    index = 0
    length = len(segment)
    while index < length:
        char = segment[index]
        index += 1
        if char == "*":
            if not parts or parts[-1] != ".*":
                parts.append(".*")
        elif char == "?":
            parts.append(".")
        elif char == "[":
            end = _find_bracket_end(segment, index)
            if end < 0:
                raise InvalidPatternError(
                    pattern or segment,
                    f"unterminated bracket expression in segment {segment!r}",
                )
            parts.append(_translate_bracket(segment[index:end]))
            index = end + 1
        else:
            parts.append(re.escape(char))

    try:
        regex = re.compile("".join(parts), re.DOTALL)
    except re.error as exc:
        raise InvalidPatternError(pattern or segment, f"invalid segment {segment!r}: {exc}") from exc
    return SegmentMatcher(source=segment, regex=regex)


def _find_bracket_end(segment: str, start: int) -> int:
    """Return the index of the ``]`` closing a class that opened before ``start``."""

    index = start
    if index < len(segment) and segment[index] in "!^":
        index += 1
    # A ``]`` directly after the opening bracket is a literal member.
    if index < len(segment) and segment[index] == "]":
        index += 1
    while index < len(segment) and segment[index] != "]":
        index += 1
    return index if index < len(segment) else -1


def _translate_bracket(body: str) -> str:
    negate = body[:1] in {"!", "^"}
    if negate:
        body = body[1:]
    escaped = body.replace("\\", "\\\\").replace("[", "\\[").replace("]", "\\]")
    escaped = escaped.replace("^", "\\^")
    if not escaped:
        return "(?!)"
    return f"[{'^' if negate else ''}{escaped}]"


def split_pattern(pattern: str) -> tuple[str, list[str]]:
    """Split a pattern into its anchor and the segments below it.

    Relative patterns have an empty anchor. Empty and ``.`` segments are
    dropped.
    """
    pure = PurePath(pattern)
    anchor = pure.anchor
    segments = [part for part in pure.parts if part and part != anchor and part != "."]
    return anchor, segments


def compile_pattern(pattern: str) -> tuple[str, list[SegmentMatcher]]:
    """Compile every segment of ``pattern``.

    Raises:
        InvalidPatternError: If any segment is malformed or the pattern is empty.
    """
    anchor, segments = split_pattern(pattern)
    if not segments:
        raise InvalidPatternError(pattern, "pattern does not name any file")
    matchers = [compile_segment(segment, pattern) for segment in segments]
    # Consecutive ``**`` segments match exactly what a single one does.
    collapsed: list[SegmentMatcher] = []
    for matcher in matchers:
        if matcher.is_recursive and collapsed and collapsed[-1].is_recursive:
            continue
        collapsed.append(matcher)
    # A trailing ``**`` selects every file below it.
    if collapsed[-1].is_recursive:
        collapsed.append(compile_segment("*", pattern))
    return anchor, collapsed


__all__ = [
    "PatternKind",
    "RECURSIVE_SEGMENT",
    "SegmentMatcher",
    "classify",
    "compile_pattern",
    "compile_segment",
    "has_wildcard",
    "split_pattern",
]
