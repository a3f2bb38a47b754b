"""Tests for the git config store against a throwaway repository."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from jira_workflow.config import GitConfigStore, RcConfig, ResolvedConfig
from jira_workflow.errors import ConfigAccessError

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    path = tmp_path / "repo"
    path.mkdir()
    subprocess.run(["git", "init", "--quiet"], cwd=path, check=True)
    return path


@requires_git
def test_set_then_get(repo: Path) -> None:
    resolved = ResolvedConfig(RcConfig({}), GitConfigStore(cwd=repo))

    assert resolved.set("test-key", "test value") is True
    assert resolved.get("test-key") == "test value"

    stored = subprocess.run(
        ["git", "config", "--local", "--get", "jw.test-key"],
        cwd=repo,
        capture_output=True,
        text=True,
        check=True,
    )
    assert stored.stdout.strip() == "test value"


@requires_git
def test_get_nonexistent_value(repo: Path) -> None:
    store = GitConfigStore(cwd=repo)
    assert store.read("jw", "nonexistent-key", scope="local") is None


@requires_git
def test_unset(repo: Path) -> None:
    store = GitConfigStore(cwd=repo)
    store.write("jw", "test-key", "v", scope="local")

    assert store.unset("jw", "test-key", scope="local") is True
    assert store.read("jw", "test-key", scope="local") is None
    assert store.unset("jw", "test-key", scope="local") is False


@requires_git
def test_local_scope_outside_repository_is_an_access_error(tmp_path: Path) -> None:
    outside = tmp_path / "not-a-repo"
    outside.mkdir()
    store = GitConfigStore(cwd=outside)

    with patch.dict("os.environ", {"GIT_CEILING_DIRECTORIES": str(tmp_path)}):
        with pytest.raises(ConfigAccessError):
            store.read("jw", "test-key", scope="local")


def test_invalid_scope_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(ConfigAccessError):
        GitConfigStore(cwd=tmp_path).read("jw", "k", scope="system")


def test_missing_git_binary_is_an_access_error(tmp_path: Path) -> None:
    store = GitConfigStore(cwd=tmp_path, git="definitely-not-git-binary")

    with pytest.raises(ConfigAccessError):
        store.read("jw", "k", scope="local")
