"""
Persistence of session state in a local key-value store.

``LocalStore`` keeps string values in memory and, when given a path,
mirrors them to a single JSON file. ``PersistentBinding`` ties one key to
one piece of state: it decodes the stored JSON once on load and writes the
new value back whenever the state changes.

Reading is forgiving: a missing key, a corrupt document or a value of the
wrong shape all read as "nothing stored" so the caller falls back to its
defaults. Writing is best-effort: failures are logged and dropped.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Generic, Optional, Protocol, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

_UNSET = object()


class KeyValueStore(Protocol):
    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class LocalStore:
    """Process-local string store, optionally mirrored to a JSON file."""

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path) if path is not None else None
        self._data: dict[str, str] = {}
        if self.path is not None:
            self._data = self._read_file(self.path)

    @staticmethod
    def _read_file(path: Path) -> dict[str, str]:
        if not path.exists():
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable store file %s: %s", path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring store file %s: expected a JSON object", path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _flush(self) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(self._data, f, indent=2, sort_keys=True)
        tmp.replace(self.path)

    def get_item(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value
        self._flush()

    def remove_item(self, key: str) -> None:
        if self._data.pop(key, None) is not None:
            self._flush()

    def keys(self) -> list[str]:
        return list(self._data)

    def __contains__(self, key: str) -> bool:
        return key in self._data


class PersistentBinding(Generic[T]):
    """
    Mirror one piece of state into ``store`` under ``key``.

    Args:
        store: Backing key-value store
        key: Storage key
        validate: Optional check run on decoded data. It returns the value
            to use, or raises ``ValueError``/``TypeError`` to reject it.
    """

    def __init__(
        self,
        store: KeyValueStore,
        key: str,
        validate: Callable[[Any], T] | None = None,
    ):
        self.store = store
        self.key = key
        self.validate = validate
        self._last: Any = _UNSET

    def load(self) -> Optional[T]:
        """Return the stored value, or None when absent or unusable."""
        raw = self.store.get_item(self.key)
        if raw is None:
            return None
        try:
            value = json.loads(raw)
        except ValueError:
            logger.debug("Stored %r is not valid JSON; using defaults", self.key)
            return None
        if self.validate is not None:
            try:
                value = self.validate(value)
            except (TypeError, ValueError) as e:
                logger.debug("Stored %r rejected (%s); using defaults", self.key, e)
                return None
        self._last = value
        return value

    def save(self, value: T) -> None:
        """Serialize and write ``value``. Never raises."""
        try:
            payload = json.dumps(value)
        except (TypeError, ValueError) as e:
            logger.warning("Cannot serialize %r for %r: %s", value, self.key, e)
            return
        try:
            self.store.set_item(self.key, payload)
        except OSError as e:
            logger.warning("Skipping save of %r: %s", self.key, e)
            return
        self._last = value
        logger.debug("Saved %r", self.key)

    def sync(self, value: T) -> bool:
        """Save ``value`` if it differs from what was last loaded or saved."""
        if self._last is not _UNSET and self._last == value:
            return False
        self.save(value)
        return True
