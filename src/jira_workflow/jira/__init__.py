"""Issue tracker integration."""

from jira_workflow.jira.client import Issue, IssueClient, parse_issue_key

__all__ = [
    "Issue",
    "IssueClient",
    "parse_issue_key",
]
