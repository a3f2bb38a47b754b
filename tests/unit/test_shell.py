"""Tests for the subprocess-backed shell."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from jira_workflow.git import SubprocessShell

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="requires a POSIX shell")


def test_capture_returns_stdout(tmp_path: Path) -> None:
    shell = SubprocessShell(cwd=tmp_path)

    assert shell.capture(["echo", "feature/TEST-123"]) == "feature/TEST-123\n"


def test_capture_does_not_expand_globs(tmp_path: Path) -> None:
    (tmp_path / "a.txt").write_text("")

    assert SubprocessShell(cwd=tmp_path).capture(["echo", "*.txt"]) == "*.txt\n"


def test_run_reports_success(tmp_path: Path) -> None:
    shell = SubprocessShell(cwd=tmp_path)

    assert shell.run("true && true") is True
    assert shell.run("true && false") is False


def test_run_short_circuits(tmp_path: Path) -> None:
    marker = tmp_path / "marker"

    assert SubprocessShell(cwd=tmp_path).run(f"false && touch {marker}") is False
    assert not marker.exists()


def test_capture_passes_arguments_verbatim(tmp_path: Path) -> None:
    shell = SubprocessShell(cwd=tmp_path)

    assert shell.capture(["echo", "bob's branch/TEST-123"]) == "bob's branch/TEST-123\n"
