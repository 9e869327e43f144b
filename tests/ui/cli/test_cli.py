"""Tests for CLI functionality."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from globrm.ui.cli import CommandProcessor
from globrm.ui.cli.cli import EXIT_INTERRUPTED, EXIT_NOTHING_RESOLVED, EXIT_OK

MakeTree = Callable[[Iterable[str]], Path]


@pytest.fixture
def workdir(make_tree: MakeTree, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a small tree and make it the working directory."""

    root = make_tree(["a.txt", "b.txt", "sub/c.txt", "notes.md"])
    monkeypatch.chdir(root)
    return root


def test_run_deletes_matches_and_exits_zero(
    workdir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """A normal run deletes the matches and prints one line per file."""

    code = CommandProcessor.process_command(["**/*.txt", "-s"])

    assert code == EXIT_OK
    assert sorted(p.name for p in workdir.rglob("*") if p.is_file()) == ["notes.md"]
    out = capsys.readouterr().out
    assert "Deleted: a.txt" in out
    assert "Deleted: sub/c.txt" in out
    assert "3 considered, 3 deleted, 0 failed" in out


def test_dry_run_keeps_files(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Dry run exits zero and touches nothing."""

    code = CommandProcessor.process_command(["--dry-run", "*.txt"])

    assert code == EXIT_OK
    assert (workdir / "a.txt").exists()
    assert "Would delete: a.txt" in capsys.readouterr().out


def test_quiet_run_prints_nothing(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Quiet runs stay silent on success."""

    code = CommandProcessor.process_command(["-q", "-s", "notes.md"])

    assert code == EXIT_OK
    assert not (workdir / "notes.md").exists()
    assert capsys.readouterr().out == ""


def test_failed_deletions_still_exit_zero(
    workdir: Path, mocker: MockerFixture, capsys: pytest.CaptureFixture[str]
) -> None:
    """Per-file failures are reported but do not fail the process."""

    _ = mocker.patch(
        "globrm.features.deletion.adapters.local.LocalFilesystem.remove_file",
        side_effect=PermissionError(13, "Permission denied"),
    )

    code = CommandProcessor.process_command(["a.txt"])

    assert code == EXIT_OK
    assert (workdir / "a.txt").exists()
    assert "Failed: a.txt (Permission denied)" in capsys.readouterr().err


def test_nothing_resolved_exits_one(workdir: Path) -> None:
    """A run where no pattern resolved exits non-zero."""

    assert CommandProcessor.process_command(["*.none", "missing.txt"]) == EXIT_NOTHING_RESOLVED
    assert (workdir / "a.txt").exists()


def test_keyboard_interrupt_exits_130(workdir: Path, mocker: MockerFixture) -> None:
    """Interrupts are reported and mapped to the conventional exit code."""

    del workdir
    _ = mocker.patch(
        "globrm.ui.cli.cli.DeleteCommand.execute",
        side_effect=KeyboardInterrupt,
    )

    assert CommandProcessor.process_command(["a.txt"]) == EXIT_INTERRUPTED


def test_unexpected_error_exits_one(workdir: Path, mocker: MockerFixture) -> None:
    """Unexpected exceptions are logged and exit with status 1."""

    del workdir
    _ = mocker.patch(
        "globrm.ui.cli.cli.DeleteCommand.execute",
        side_effect=RuntimeError("boom"),
    )

    assert CommandProcessor.process_command(["a.txt"]) == 1
