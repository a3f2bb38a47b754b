"""Key/value store backed by `git config`."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Protocol

from jira_workflow.errors import ConfigAccessError

logger = logging.getLogger(__name__)

VALID_SCOPES = frozenset({"local", "global"})

# `git config --get` exits with 1 when the key is not set.
_KEY_NOT_FOUND = 1


class ConfigStore(Protocol):
    """Namespaced key/value store used by :class:`ResolvedConfig`."""

    def read(self, namespace: str, key: str, *, scope: str) -> str | None: ...

    def write(self, namespace: str, key: str, value: str, *, scope: str) -> bool: ...

    def unset(self, namespace: str, key: str, *, scope: str) -> bool: ...


class GitConfigStore:
    """Read and write `<namespace>.<key>` entries with the git CLI."""

    def __init__(self, *, cwd: Path | None = None, git: str = "git") -> None:
        self._cwd = cwd
        self._git = git

    def _run(self, scope: str, *args: str) -> subprocess.CompletedProcess[str]:
        if scope not in VALID_SCOPES:
            raise ConfigAccessError(
                f"Invalid config scope {scope!r} (expected one of: {', '.join(sorted(VALID_SCOPES))})"
            )
        cmd = [self._git, "config", f"--{scope}", *args]
        try:
            return subprocess.run(
                cmd,
                cwd=self._cwd,
                capture_output=True,
                text=True,
            )
        except OSError as e:
            raise ConfigAccessError(f"Unable to run git config: {e}") from e

    def read(self, namespace: str, key: str, *, scope: str) -> str | None:
        name = f"{namespace}.{key}"
        result = self._run(scope, "--get", name)
        if result.returncode == 0:
            return result.stdout.rstrip("\n")
        if result.returncode == _KEY_NOT_FOUND:
            logger.debug("Config key not set", extra={"key": name, "scope": scope})
            return None
        raise ConfigAccessError(
            f"git config --{scope} --get {name} failed ({result.returncode}): "
            f"{result.stderr.strip()}"
        )

    def write(self, namespace: str, key: str, value: str, *, scope: str) -> bool:
        name = f"{namespace}.{key}"
        result = self._run(scope, name, value)
        if result.returncode != 0:
            logger.warning(
                "git config write failed",
                extra={"key": name, "scope": scope, "stderr": result.stderr.strip()},
            )
            return False
        logger.info("Config key written", extra={"key": name, "scope": scope})
        return True

    def unset(self, namespace: str, key: str, *, scope: str) -> bool:
        name = f"{namespace}.{key}"
        result = self._run(scope, "--unset", name)
        if result.returncode != 0:
            logger.debug(
                "git config unset failed",
                extra={"key": name, "scope": scope, "returncode": result.returncode},
            )
            return False
        logger.info("Config key removed", extra={"key": name, "scope": scope})
        return True
