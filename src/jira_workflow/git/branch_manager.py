"""Create or resume the working branch for an issue.

Given an issue key, the branch is ``<prefix>/<issue-key>``. If it does not
exist yet it is cut from the freshly pulled default branch; if it does, it is
checked out and rebased onto the freshly pulled default branch. Local changes
are stashed around either sequence.

Both sequences run as a single ``&&``-chained shell command so that the first
failing step stops the rest. A failure is logged and reported through the
return value, never raised: a rebase conflict, for example, leaves the user in
their shell to resolve it by hand.
"""

from __future__ import annotations

import logging

from jira_workflow.config.rc_config import RcConfig
from jira_workflow.config.resolved import ResolvedConfig
from jira_workflow.git.shell import Shell, SubprocessShell

logger = logging.getLogger(__name__)

DEFAULT_BRANCH_PREFIX = "feature"
FALLBACK_DEFAULT_BRANCH = "main"
DEFAULT_BRANCH_KEY = "default-branch"

# Markers `git branch` prints in front of the current / worktree branch.
_BRANCH_LIST_MARKERS = "*+ "


class BranchManager:
    def __init__(
        self,
        rc: RcConfig,
        resolved: ResolvedConfig,
        shell: Shell | None = None,
    ) -> None:
        self.rc = rc
        self.resolved = resolved
        self.shell: Shell = shell or SubprocessShell()

    @property
    def prefix(self) -> str:
        prefix = self.rc.git_branch_prefix
        return DEFAULT_BRANCH_PREFIX if prefix is None else prefix

    def branch_name(self, issue_key: str) -> str:
        return f"{self.prefix}/{issue_key}"

    def default_branch(self) -> str:
        """Return the configured `default-branch`, or ``"main"`` when unset or empty."""

        value = self.resolved.get(DEFAULT_BRANCH_KEY)
        if value is None or not value.strip():
            return FALLBACK_DEFAULT_BRANCH
        return value

    def branch_exists(self, branch_name: str) -> bool:
        output = self.shell.capture(["git", "branch", "--list", branch_name])
        for line in output.splitlines():
            if line.strip().lstrip(_BRANCH_LIST_MARKERS) == branch_name:
                return True
        return False

    def create_branch(self, issue_key: str) -> bool:
        """Switch to the issue branch, creating or rebasing it as needed.

        Returns:
            Whether the git command sequence succeeded. Failures are not raised.
        """

        branch_name = self.branch_name(issue_key)
        exists = self.branch_exists(branch_name)

        if not exists:
            command = (
                f"git stash && git checkout {self.default_branch()} && git pull"
                f" && git checkout -b {branch_name} && git stash pop"
            )
        else:
            command = (
                f"git stash && git checkout {self.default_branch()} && git pull"
                f" && git checkout {branch_name} && git rebase {self.default_branch()}"
                " && git stash pop"
            )

        logger.info(
            "Switching to issue branch",
            extra={"issue_key": issue_key, "branch": branch_name, "exists": exists},
        )
        ok = self.shell.run(command)
        if not ok:
            logger.warning(
                "Branch command sequence failed; resolve the repository state manually",
                extra={"branch": branch_name, "command": command},
            )
        return ok
