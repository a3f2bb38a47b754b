"""Local git operations."""

from jira_workflow.git.branch_manager import BranchManager
from jira_workflow.git.shell import Shell, SubprocessShell

__all__ = [
    "BranchManager",
    "Shell",
    "SubprocessShell",
]
