"""Read-only Jira REST client.

Fetches a single issue by key and extracts the fields `jw` needs for branch,
commit and PR text. The HTTP session and the credential lookup are injectable
to keep tests off the network.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import requests

from jira_workflow.errors import RemoteRequestError, ResponseParseError, WorkflowError

logger = logging.getLogger(__name__)

ISSUE_KEY_PATTERN = re.compile(r"[A-Z]+-[0-9]+")

CredentialProvider = Callable[[], str | None]


def parse_issue_key(value: str) -> str:
    """Return `value` if it looks like an issue key (``PROJ-123``)."""

    key = value.strip()
    if not ISSUE_KEY_PATTERN.fullmatch(key):
        raise ValueError(f"Invalid issue key {value!r} (expected e.g. 'PROJ-123')")
    return key


@dataclass(frozen=True, slots=True)
class Issue:
    """Issue key plus the raw `fields` object returned by Jira."""

    key: str
    fields: dict[str, Any] = field(default_factory=dict)

    @property
    def summary(self) -> str | None:
        summary = self.fields.get("summary")
        return summary if isinstance(summary, str) else None


class IssueClient:
    """Small wrapper around the Jira issue endpoint."""

    def __init__(
        self,
        *,
        base_url: str,
        account: str,
        credentials: CredentialProvider,
        session: requests.Session | None = None,
        timeout: float = 30,
    ) -> None:
        self._base_url = base_url.strip().rstrip("/")
        self._account = account
        self._credentials = credentials
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Accept": "application/json",
                "User-Agent": "jira-workflow",
            }
        )

    def _issue_url(self, key: str) -> str:
        return f"{self._base_url}/rest/api/3/issue/{key}"

    def _auth(self) -> tuple[str, str]:
        if not self._base_url:
            raise WorkflowError("Jira base URL is not configured (set jw.jira-url)")
        token = self._credentials()
        if not token:
            raise WorkflowError("JIRA_WORKFLOW_API_KEY is not set")
        return self._account, token

    def get_issue(self, key: str) -> str:
        """Fetch an issue and return the raw response body.

        Raises:
            RemoteRequestError: On a transport failure or a non-2xx response.
        """

        url = self._issue_url(key)
        auth = self._auth()
        logger.debug("Fetching issue", extra={"issue_key": key, "url": url})
        try:
            resp = self._session.get(url, auth=auth, timeout=self._timeout)
        except requests.RequestException as e:
            raise RemoteRequestError(f"Unable to reach Jira for {key}: {e}", body=str(e)) from e

        if not 200 <= resp.status_code < 300:
            logger.warning(
                "Jira request failed", extra={"issue_key": key, "status_code": resp.status_code}
            )
            raise RemoteRequestError(
                f"Jira returned HTTP {resp.status_code} for {key}",
                status_code=resp.status_code,
                body=resp.text,
            )
        return resp.text

    @staticmethod
    def parse_issue(key: str, body: str) -> Issue:
        """Parse a response body into an :class:`Issue`.

        Raises:
            ResponseParseError: If the body is not a JSON object with `fields`.
        """

        try:
            data = json.loads(body)
        except (TypeError, ValueError) as e:
            raise ResponseParseError(
                f"Unable to parse Jira response for {key}", detail=str(e)
            ) from e

        if not isinstance(data, dict):
            raise ResponseParseError(
                f"Unexpected Jira response for {key}", detail="top level is not an object"
            )
        fields = data.get("fields")
        if not isinstance(fields, dict):
            raise ResponseParseError(
                f"Unexpected Jira response for {key}", detail="missing fields object"
            )
        issue_key = data.get("key")
        return Issue(key=issue_key if isinstance(issue_key, str) else key, fields=fields)

    def fetch_issue(self, key: str) -> Issue:
        return self.parse_issue(key, self.get_issue(key))

    @classmethod
    def get_summary(cls, body: str) -> str:
        """Return `fields.summary` from a response body returned by :meth:`get_issue`."""

        issue = cls.parse_issue("issue", body)
        summary = issue.summary
        if summary is None:
            raise ResponseParseError("Jira response has no summary", detail="missing fields.summary")
        return summary
