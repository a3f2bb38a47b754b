"""Jira workflow helper (`jw`).

Bridges a git repository and a Jira site:
- configuration from an optional YAML rc file and `jw.*` git config
- create or resume the branch for an issue key
- issue summaries for commit and PR text
"""

__version__ = "0.1.0"

from jira_workflow.errors import WorkflowError

__all__ = ["__version__", "WorkflowError"]
