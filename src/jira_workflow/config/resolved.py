"""Per-repository / global settings stored in git config under `jw.*`."""

from __future__ import annotations

import logging

from jira_workflow.config.git_store import ConfigStore
from jira_workflow.config.rc_config import RcConfig

logger = logging.getLogger(__name__)

NAMESPACE = "jw"


class ResolvedConfig:
    """Look up `jw.<key>` in the git config scope selected by the rc file.

    The git store is the only source for :meth:`get`; rc values are read from
    :class:`RcConfig` directly by the components that need them.
    """

    def __init__(self, rc: RcConfig, store: ConfigStore) -> None:
        self._rc = rc
        self._store = store

    @property
    def rc(self) -> RcConfig:
        return self._rc

    @property
    def scope(self) -> str:
        return self._rc.config_scope

    def get(self, key: str) -> str | None:
        """Return the stored value, or None when the key is unset.

        Raises:
            ConfigAccessError: If the store itself cannot be read.
        """

        return self._store.read(NAMESPACE, key, scope=self.scope)

    def set(self, key: str, value: str) -> bool:
        """Persist `jw.<key> = value`. Returns whether the write succeeded."""

        logger.debug("Setting config key", extra={"key": key, "scope": self.scope})
        return self._store.write(NAMESPACE, key, value, scope=self.scope)

    def unset(self, key: str) -> bool:
        return self._store.unset(NAMESPACE, key, scope=self.scope)
