"""
Summary: Validate glob classification and segment compilation rules.
Why: Matching semantics decide which files are deleted, so they must not drift.
"""

from __future__ import annotations

import pytest

from globrm.features.resolution.domain.pattern import (
    PatternKind,
    classify,
    compile_pattern,
    compile_segment,
    split_pattern,
)
from globrm.shared.errors import InvalidPatternError, PatternError


@pytest.mark.parametrize(
    ("pattern", "expected"),
    [
        ("a.txt", PatternKind.LITERAL),
        ("dir/sub/a.txt", PatternKind.LITERAL),
        ("*.txt", PatternKind.GLOB),
        ("file?.log", PatternKind.GLOB),
        ("[ab].txt", PatternKind.GLOB),
        ("dir/**/x", PatternKind.GLOB),
    ],
)
def test_classify(pattern: str, expected: PatternKind) -> None:
    """Any wildcard character makes a pattern a glob."""

    assert classify(pattern) is expected


def test_star_matches_within_segment() -> None:
    """``*`` matches any run of characters, including none."""

    matcher = compile_segment("*.txt")
    assert matcher.matches("a.txt")
    assert matcher.matches("long-name.txt")
    assert not matcher.matches("a.txt.bak")


def test_question_mark_matches_one_character() -> None:
    """``?`` matches exactly one character."""

    matcher = compile_segment("file?.log")
    assert matcher.matches("file1.log")
    assert not matcher.matches("file.log")
    assert not matcher.matches("file12.log")


def test_bracket_classes_and_negation() -> None:
    """Bracket classes support ranges and both negation spellings."""

    assert compile_segment("[a-c]x").matches("bx")
    assert not compile_segment("[a-c]x").matches("dx")
    assert compile_segment("[!a]x").matches("bx")
    assert not compile_segment("[!a]x").matches("ax")
    assert not compile_segment("[^a]x").matches("ax")
    assert compile_segment("[]]").matches("]")


def test_matching_is_case_sensitive() -> None:
    """Case differences never match."""

    matcher = compile_segment("*.TXT")
    assert matcher.matches("A.TXT")
    assert not matcher.matches("a.txt")


def test_wildcards_skip_hidden_names() -> None:
    """Leading dots only match when the segment itself starts with one."""

    assert not compile_segment("*").matches(".env")
    assert not compile_segment("**").matches(".git")
    assert compile_segment(".*").matches(".env")


def test_regex_metacharacters_are_literal() -> None:
    """Characters special to regular expressions match themselves."""

    matcher = compile_segment("a+(b).*")
    assert matcher.matches("a+(b).txt")
    assert not matcher.matches("aa(b).txt")


def test_unterminated_bracket_is_invalid() -> None:
    """A malformed bracket expression is a pattern error, not a silent literal."""

    with pytest.raises(InvalidPatternError) as excinfo:
        _ = compile_pattern("logs/[abc.txt")

    assert isinstance(excinfo.value, PatternError)
    assert excinfo.value.pattern == "logs/[abc.txt"
    assert "unterminated" in excinfo.value.reason


def test_reversed_range_is_invalid() -> None:
    """A bracket range the regex engine rejects surfaces as a pattern error."""

    with pytest.raises(InvalidPatternError):
        _ = compile_segment("[z-a].txt", "[z-a].txt")


def test_split_pattern_relative_and_absolute() -> None:
    """Relative patterns have no anchor and drop ``.`` segments."""

    assert split_pattern("./dir/*.txt") == ("", ["dir", "*.txt"])
    anchor, segments = split_pattern("/var/log/*.log")
    assert anchor == "/"
    assert segments == ["var", "log", "*.log"]


def test_compile_pattern_collapses_and_completes_recursive_segments() -> None:
    """Repeated ``**`` collapse, and a trailing ``**`` selects every file."""

    _, matchers = compile_pattern("a/**/**/b")
    assert [matcher.source for matcher in matchers] == ["a", "**", "b"]

    _, matchers = compile_pattern("build/**")
    assert [matcher.source for matcher in matchers] == ["build", "**", "*"]
