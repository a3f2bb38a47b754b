"""Application-level errors.

Every failure the user should see is a :class:`WorkflowError`. Subclasses
distinguish "could not fetch" from "could not parse" and keep the details
needed for reporting (HTTP status, response body, parse diagnostic).
"""

from __future__ import annotations


class WorkflowError(Exception):
    """Base error for everything `jw` reports to the user."""


class RemoteRequestError(WorkflowError):
    """The issue tracker could not be reached or answered with a non-2xx status."""

    def __init__(self, message: str, *, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ResponseParseError(WorkflowError):
    """The issue tracker answered, but the body is not the expected JSON shape."""

    def __init__(self, message: str, *, detail: str = "") -> None:
        super().__init__(message)
        self.detail = detail


class ConfigAccessError(WorkflowError):
    """The git configuration store could not be read or written."""
