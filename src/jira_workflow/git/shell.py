"""Process execution used by the branch workflow."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class Shell(Protocol):
    """Run external commands."""

    def capture(self, args: Sequence[str]) -> str:
        """Run the program given as an argument vector and return its stdout."""
        ...

    def run(self, command: str) -> bool:
        """Run `command` through the shell and return whether it succeeded."""
        ...


class SubprocessShell:
    """:class:`Shell` implementation backed by :mod:`subprocess`.

    `capture` takes an argument vector and never goes through a shell, so
    arguments reach the program verbatim with no quoting, splitting or
    globbing. `run` hands the string to ``/bin/sh`` so that ``&&`` chains
    short-circuit; its output is not captured and stays visible to the user.
    """

    def __init__(self, *, cwd: Path | None = None) -> None:
        self._cwd = cwd

    def capture(self, args: Sequence[str]) -> str:
        logger.debug("Capturing command output", extra={"command": list(args)})
        result = subprocess.run(
            list(args),
            cwd=self._cwd,
            capture_output=True,
            text=True,
        )
        return result.stdout

    def run(self, command: str) -> bool:
        logger.info("Running command", extra={"command": command})
        result = subprocess.run(command, shell=True, cwd=self._cwd)
        if result.returncode != 0:
            logger.debug(
                "Command exited with non-zero status",
                extra={"command": command, "returncode": result.returncode},
            )
        return result.returncode == 0
