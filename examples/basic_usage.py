#!/usr/bin/env python3
"""Programmatic usage example.

This demonstrates using the `jw` components directly:

* load settings from the environment / `.env`
* resolve `jw.*` values from git config
* fetch an issue summary and print a commit title
* optionally switch to the issue branch
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from jira_workflow.config import GitConfigStore, RcConfig, ResolvedConfig
from jira_workflow.errors import WorkflowError
from jira_workflow.git import BranchManager
from jira_workflow.jira import parse_issue_key
from jira_workflow.logging import configure_logging
from jira_workflow.main import build_issue_client, format_title
from jira_workflow.settings import WorkflowSettings


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print a commit title for an issue (example).")
    parser.add_argument("issue_key", type=parse_issue_key, help="Issue key, e.g. PROJ-123")
    parser.add_argument(
        "--checkout",
        action="store_true",
        help="Also create or resume the issue branch",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    settings = WorkflowSettings()
    configure_logging(settings.log_level)

    rc = RcConfig.load(settings.rc_file)
    resolved = ResolvedConfig(rc, GitConfigStore())

    try:
        client = build_issue_client(settings, resolved, rc)
        summary = client.get_summary(client.get_issue(args.issue_key))
    except WorkflowError as exc:
        print(f"jw: {exc}", file=sys.stderr)
        return 1

    print(format_title(args.issue_key, summary))

    if args.checkout:
        manager = BranchManager(rc, resolved)
        print(f"Branch: {manager.branch_name(args.issue_key)}")
        return 0 if manager.create_branch(args.issue_key) else 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
