"""Configuration layers: rc file snapshot and git-config backed settings."""

from jira_workflow.config.git_store import ConfigStore, GitConfigStore
from jira_workflow.config.rc_config import RcConfig
from jira_workflow.config.resolved import ResolvedConfig

__all__ = [
    "ConfigStore",
    "GitConfigStore",
    "RcConfig",
    "ResolvedConfig",
]
