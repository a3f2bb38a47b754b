"""Read-only snapshot of the optional `jw` rc file.

The rc file is a YAML mapping, loaded once per invocation. A missing,
unreadable or malformed file yields an empty config rather than an error.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_SCOPE = "local"


def _normalize_key(key: object) -> str:
    if isinstance(key, Enum):
        return str(key.value)
    return str(key)


class RcConfig:
    """Immutable key/value view over the rc file.

    Keys are normalized to strings, so ``config["git_branch_prefix"]``,
    ``config[Key.GIT_BRANCH_PREFIX]`` and ``config.git_branch_prefix`` all read
    the same entry. Absent keys read as ``None``.

    Attribute access only reaches the data for names the class does not
    define: keys named ``get``, ``load`` or ``as_dict`` resolve to the method
    of that name, so read them with ``config["get"]``.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[Any, Any] | None = None) -> None:
        normalized = {_normalize_key(k): v for k, v in (data or {}).items()}
        object.__setattr__(self, "_data", MappingProxyType(normalized))

    @classmethod
    def load(cls, path: str | Path) -> RcConfig:
        """Load the rc file at `path`, or an empty config if it cannot be used."""

        path = Path(path).expanduser()
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            logger.debug("No rc file found", extra={"path": str(path)})
            return cls({})
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Unable to read rc file", extra={"path": str(path), "error": str(e)})
            return cls({})
        except yaml.YAMLError as e:
            logger.warning("Ignoring malformed rc file", extra={"path": str(path), "error": str(e)})
            return cls({})

        # yaml.safe_load returns None for an empty document.
        if data is None:
            return cls({})
        if not isinstance(data, Mapping):
            logger.warning("Ignoring rc file without a top-level mapping", extra={"path": str(path)})
            return cls({})

        logger.debug("Loaded rc file", extra={"path": str(path), "keys": sorted(map(str, data))})
        return cls(data)

    def __getitem__(self, key: object) -> Any:
        return self._data.get(_normalize_key(key))

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return self._data.get(name)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __contains__(self, key: object) -> bool:
        return _normalize_key(key) in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RcConfig):
            return NotImplemented
        return dict(self._data) == dict(other._data)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._data)!r})"

    def get(self, key: object, default: Any = None) -> Any:
        return self._data.get(_normalize_key(key), default)

    def as_dict(self) -> dict[str, Any]:
        return dict(self._data)

    @property
    def config_scope(self) -> str:
        """Git config scope for `jw.*` keys: the rc value, else ``"local"``."""

        scope = self._data.get("config_scope")
        if scope is None:
            return DEFAULT_CONFIG_SCOPE
        return str(scope)

    @property
    def git_branch_prefix(self) -> str | None:
        prefix = self._data.get("git_branch_prefix")
        return None if prefix is None else str(prefix)
