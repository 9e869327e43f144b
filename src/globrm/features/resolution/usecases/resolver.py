"""
Summary: Expand literal paths and glob patterns into an ordered, deduplicated file list.
Why: Walk the filesystem segment by segment so matching stays explicit and finite.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path
from typing import final

from globrm.config.options import TRACE
from globrm.platform.logging import logger as app_logger
from globrm.shared.errors import PatternError

from ..domain.models import ResolutionResult, ResolvedFile
from ..domain.pattern import PatternKind, SegmentMatcher, classify, compile_pattern


@final
class PatternResolver:
    """Resolve input patterns against the filesystem.

    Relative patterns are expanded below ``root``; absolute ones below their
    own anchor. Resolution never mutates the filesystem.
    """

    root: Path
    logger: logging.Logger

    def __init__(self, root: Path | None = None, logger: logging.Logger | None = None) -> None:
        self.root = root if root is not None else Path(".")
        self.logger = logger or app_logger

    def resolve(self, patterns: Iterable[str]) -> ResolutionResult:
        """Resolve every pattern, keeping first-seen order across all of them.

        Args:
            patterns: Input patterns in the order given by the caller.

        Returns:
            ResolutionResult: Files in resolution order plus per-pattern errors.
        """
        result = ResolutionResult()
        seen: set[str] = set()

        for pattern in patterns:
            try:
                matches = self.resolve_pattern(pattern)
            except PatternError as exc:
                result.errors.append(exc)
                self.logger.debug(
                    "Pattern error: %s",
                    exc,
                    extra={
                        "deletion_event": "resolution.pattern.error",
                        "pattern": pattern,
                        "reason": exc.reason,
                    },
                )
                continue

            added = 0
            for resolved in matches:
                key = self._identity(resolved.path)
                if key in seen:
                    self.logger.log(TRACE, "Duplicate match skipped: %s", resolved.path)
                    continue
                seen.add(key)
                result.files.append(resolved)
                added += 1

            if not matches:
                self.logger.debug(
                    "No files matched %r",
                    pattern,
                    extra={"deletion_event": "resolution.pattern.empty", "pattern": pattern},
                )
            else:
                self.logger.debug(
                    "Pattern %r matched %d file(s), %d new",
                    pattern,
                    len(matches),
                    added,
                    extra={
                        "deletion_event": "resolution.pattern.matched",
                        "pattern": pattern,
                        "matches": len(matches),
                    },
                )

        return result

    def resolve_pattern(self, pattern: str) -> list[ResolvedFile]:
        """Resolve a single pattern.

        Raises:
            PatternError: If a literal path is missing or names a directory.
            InvalidPatternError: If a glob pattern is malformed.
        """
        if classify(pattern) is PatternKind.LITERAL:
            return [self._resolve_literal(pattern)]
        return self._expand_glob(pattern)

    def _resolve_literal(self, pattern: str) -> ResolvedFile:
        path = Path(pattern)
        if not path.is_absolute():
            path = self.root / path
        try:
            stat_result = path.lstat()
        except FileNotFoundError as exc:
            raise PatternError(pattern, "no such file") from exc
        except OSError as exc:
            raise PatternError(pattern, exc.strerror or str(exc)) from exc
        if path.is_dir():
            raise PatternError(pattern, "is a directory")
        if _names_directory(pattern):
            raise PatternError(pattern, "not a directory")
        return ResolvedFile(path=path, pattern=pattern, size_bytes=stat_result.st_size)

    def _expand_glob(self, pattern: str) -> list[ResolvedFile]:
        anchor, matchers = compile_pattern(pattern)
        if _names_directory(pattern):
            # Only directories can match, and directories are never selected.
            return []
        base = Path(anchor) if anchor else self.root
        last_index = len(matchers) - 1

        found: dict[str, ResolvedFile] = {}
        stack: list[tuple[Path, int]] = [(base, 0)]
        while stack:
            directory, index = stack.pop()
            matcher = matchers[index]
            is_last = index == last_index

            if matcher.is_recursive:
                # Zero directories at this position, then one level deeper.
                stack.append((directory, index + 1))
                for entry in self._scan(directory):
                    if entry.is_dir(follow_symlinks=False) and matcher.matches(entry.name):
                        stack.append((directory / entry.name, index))
                continue

            if matcher.is_literal:
                self._step_literal(directory, matcher, index, is_last, pattern, stack, found)
                continue

            for entry in self._scan(directory):
                if not matcher.matches(entry.name):
                    continue
                candidate = directory / entry.name
                if not is_last:
                    if entry.is_dir():
                        stack.append((candidate, index + 1))
                    continue
                size_bytes = self._selectable_size(entry)
                if size_bytes is not None:
                    _ = found.setdefault(
                        self._identity(candidate),
                        ResolvedFile(path=candidate, pattern=pattern, size_bytes=size_bytes),
                    )

        return sorted(found.values(), key=lambda resolved: resolved.path.parts)

    def _step_literal(
        self,
        directory: Path,
        matcher: SegmentMatcher,
        index: int,
        is_last: bool,
        pattern: str,
        stack: list[tuple[Path, int]],
        found: dict[str, ResolvedFile],
    ) -> None:
        candidate = directory / matcher.source
        if not is_last:
            if candidate.is_dir():
                stack.append((candidate, index + 1))
            return
        try:
            stat_result = candidate.lstat()
        except OSError:
            return
        if candidate.is_dir():
            return
        _ = found.setdefault(
            self._identity(candidate),
            ResolvedFile(path=candidate, pattern=pattern, size_bytes=stat_result.st_size),
        )

    def _scan(self, directory: Path) -> list[os.DirEntry[str]]:
        """List a directory in name order; unreadable directories yield nothing."""

        try:
            with os.scandir(directory) as entries:
                return sorted(entries, key=lambda entry: entry.name)
        except OSError as exc:
            self.logger.log(TRACE, "Cannot scan %s: %s", directory, exc)
            return []

    @staticmethod
    def _selectable_size(entry: os.DirEntry[str]) -> int | None:
        """Return the size of a deletion target, or ``None`` for directories and vanished entries."""

        try:
            if entry.is_dir() or not (entry.is_file() or entry.is_symlink()):
                return None
            return entry.stat(follow_symlinks=False).st_size
        except OSError:
            return None

    @staticmethod
    def _identity(path: Path) -> str:
        return os.path.normpath(os.path.abspath(path))


def _names_directory(pattern: str) -> bool:
    """Whether the pattern ends in a separator, so it can only name a directory."""

    separators = tuple(sep for sep in (os.sep, os.altsep) if sep)
    return pattern.endswith(separators)


__all__ = ["PatternResolver"]
