"""Environment configuration for `jw`.

Loaded from:
- environment variables
- and a local `.env` file (if present)

Per-repository values (default branch, Jira URL, ...) live in git config under
`jw.*` and are handled by :mod:`jira_workflow.config`; this module only covers
what comes from the process environment.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

API_KEY_ENV = "JIRA_WORKFLOW_API_KEY"


class WorkflowSettings(BaseSettings):
    """Settings for the `jw` CLI.

    Environment variables:
    - JIRA_WORKFLOW_API_KEY  (required for issue lookups)
    - JIRA_WORKFLOW_URL      (optional, fallback for jw.jira-url)
    - JIRA_WORKFLOW_ACCOUNT  (optional, fallback for jw.jira-account)
    - JIRA_WORKFLOW_RC       (optional)
    - LOG_LEVEL              (optional)

    Notes:
        Tests can point at a specific env file via
        `WorkflowSettings(_env_file=path_to_env)`.
    """

    jira_api_key: str = Field(
        default="",
        validation_alias=API_KEY_ENV,
        description="API token used for Jira basic authentication",
    )
    jira_base_url: str = Field(
        default="",
        validation_alias="JIRA_WORKFLOW_URL",
        description="Jira site URL, e.g. https://example.atlassian.net",
    )
    jira_account: str = Field(
        default="",
        validation_alias="JIRA_WORKFLOW_ACCOUNT",
        description="Account (email) the API token belongs to",
    )

    rc_path: Path = Field(
        default=Path("~/.jwrc.yml"),
        validation_alias="JIRA_WORKFLOW_RC",
        description="Location of the optional YAML rc file",
    )

    log_level: str = Field(
        default="WARNING",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @property
    def rc_file(self) -> Path:
        """Expanded path of the rc file."""

        return self.rc_path.expanduser()

    def api_key(self) -> str | None:
        """Credential provider for :class:`~jira_workflow.jira.client.IssueClient`."""

        return self.jira_api_key.strip() or None
