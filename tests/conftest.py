"""Test configuration and fixtures."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import Mock

import pytest

from jira_workflow.config import GitConfigStore, RcConfig, ResolvedConfig
from jira_workflow.git import BranchManager, SubprocessShell


@pytest.fixture
def rc_config() -> RcConfig:
    """Provide an empty rc config."""
    return RcConfig({})


@pytest.fixture
def mock_store() -> Mock:
    """Provide a git config store with nothing set."""
    store = Mock(spec=GitConfigStore)
    store.read.return_value = None
    store.write.return_value = True
    store.unset.return_value = True
    return store


@pytest.fixture
def resolved_config(rc_config: RcConfig, mock_store: Mock) -> ResolvedConfig:
    return ResolvedConfig(rc_config, mock_store)


@pytest.fixture
def mock_shell() -> Mock:
    """Provide a shell where no branch exists and every command succeeds."""
    shell = Mock(spec=SubprocessShell)
    shell.capture.return_value = ""
    shell.run.return_value = True
    return shell


@pytest.fixture
def branch_manager(
    rc_config: RcConfig, resolved_config: ResolvedConfig, mock_shell: Mock
) -> BranchManager:
    return BranchManager(rc_config, resolved_config, shell=mock_shell)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Isolate settings from the developer's environment and `.env` file."""
    for name in (
        "JIRA_WORKFLOW_API_KEY",
        "JIRA_WORKFLOW_URL",
        "JIRA_WORKFLOW_ACCOUNT",
        "JIRA_WORKFLOW_RC",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("JIRA_WORKFLOW_RC", str(tmp_path / "missing-jwrc.yml"))
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """Undo handler changes made by `configure_logging`."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
