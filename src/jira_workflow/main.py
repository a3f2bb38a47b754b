"""CLI entrypoint for `jw`."""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from jira_workflow import __version__
from jira_workflow.config import GitConfigStore, RcConfig, ResolvedConfig
from jira_workflow.errors import WorkflowError
from jira_workflow.git import BranchManager
from jira_workflow.jira import IssueClient, parse_issue_key
from jira_workflow.logging import configure_logging
from jira_workflow.settings import WorkflowSettings

logger = logging.getLogger(__name__)


def _issue_key(value: str) -> str:
    try:
        return parse_issue_key(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jw",
        description="Jira-aware git workflow helper",
    )
    parser.add_argument("--version", action="version", version=f"jira-workflow {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    branch = subparsers.add_parser(
        "branch",
        help="Create the branch for an issue, or switch to it and rebase it",
    )
    branch.add_argument("issue_key", type=_issue_key, help="Issue key, e.g. PROJ-123")

    summary = subparsers.add_parser("summary", help="Print the summary of an issue")
    summary.add_argument("issue_key", type=_issue_key, help="Issue key, e.g. PROJ-123")

    title = subparsers.add_parser(
        "title", help="Print '<KEY> <summary>' for use as a commit or PR title"
    )
    title.add_argument("issue_key", type=_issue_key, help="Issue key, e.g. PROJ-123")

    config = subparsers.add_parser("config", help="Read or write jw.* git config values")
    config_sub = config.add_subparsers(dest="config_command", required=True)
    config_get = config_sub.add_parser("get", help="Print a value")
    config_get.add_argument("key")
    config_set = config_sub.add_parser("set", help="Store a value")
    config_set.add_argument("key")
    config_set.add_argument("value")
    config_unset = config_sub.add_parser("unset", help="Remove a value")
    config_unset.add_argument("key")

    return parser


def _jira_option(
    resolved: ResolvedConfig, rc: RcConfig, *, key: str, rc_key: str, fallback: str
) -> str:
    """Resolve a Jira option: git config first, then the rc file, then the environment."""

    value = resolved.get(key)
    if value:
        return value
    rc_value = rc[rc_key]
    if rc_value:
        return str(rc_value)
    return fallback


def build_issue_client(
    settings: WorkflowSettings, resolved: ResolvedConfig, rc: RcConfig
) -> IssueClient:
    """Create an :class:`IssueClient` with the Jira URL and account resolved in layer order."""

    return IssueClient(
        base_url=_jira_option(
            resolved, rc, key="jira-url", rc_key="jira_url", fallback=settings.jira_base_url
        ),
        account=_jira_option(
            resolved, rc, key="jira-account", rc_key="jira_account", fallback=settings.jira_account
        ),
        credentials=settings.api_key,
    )


def format_title(issue_key: str, summary: str) -> str:
    return f"{issue_key} {summary.strip()}"


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = WorkflowSettings()
    except ValidationError as e:
        print("Configuration error (check your environment / .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    configure_logging(settings.log_level)

    rc = RcConfig.load(settings.rc_file)
    resolved = ResolvedConfig(rc, GitConfigStore())

    try:
        if args.command == "branch":
            manager = BranchManager(rc, resolved)
            return 0 if manager.create_branch(args.issue_key) else 1

        if args.command in ("summary", "title"):
            client = build_issue_client(settings, resolved, rc)
            summary = client.get_summary(client.get_issue(args.issue_key))
            if args.command == "summary":
                print(summary)
            else:
                print(format_title(args.issue_key, summary))
            return 0

        if args.command == "config":
            if args.config_command == "get":
                value = resolved.get(args.key)
                if value is None:
                    return 2
                print(value)
                return 0
            if args.config_command == "set":
                return 0 if resolved.set(args.key, args.value) else 1
            if args.config_command == "unset":
                return 0 if resolved.unset(args.key) else 1

        logger.error("Unknown command", extra={"command": args.command})
        return 2

    except WorkflowError as e:
        logger.debug("Workflow error", exc_info=True)
        print(f"jw: {e}", file=sys.stderr)
        return 3

    except Exception:
        logger.exception("Command failed")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
