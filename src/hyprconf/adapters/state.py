# topmark:header:start
#
#   project      : HyprConf
#   file         : state.py
#   file_relpath : src/hyprconf/adapters/state.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Key-value stores scoped by config file.

The parser and serializer never see this state. It belongs to the editing
adapter, which uses it to remember original values and change history per file
(see `hyprconf.adapters.tracker`). Values must be JSON-serializable.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Protocol

from hyprconf.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

logger = get_logger(__name__)


class KeyValueStore(Protocol):
    """Narrow store interface keyed by ``(file, key)``."""

    def get(self, file: str, key: str) -> Any | None:
        """Return the stored value or None."""
        ...

    def set(self, file: str, key: str, value: Any) -> None:
        """Store ``value`` under ``(file, key)``."""
        ...

    def clear(self, file: str, key: str) -> None:
        """Forget ``(file, key)``; no-op when absent."""
        ...

    def clear_file(self, file: str) -> None:
        """Forget every key of ``file``."""
        ...

    def keys(self, file: str) -> list[str]:
        """Return the keys stored for ``file`` in insertion order."""
        ...


class MemoryStore:
    """In-memory `KeyValueStore`."""

    def __init__(self) -> None:
        self._data: dict[str, dict[str, Any]] = {}

    def get(self, file: str, key: str) -> Any | None:
        return self._data.get(file, {}).get(key)

    def set(self, file: str, key: str, value: Any) -> None:
        self._data.setdefault(file, {})[key] = value

    def clear(self, file: str, key: str) -> None:
        entries = self._data.get(file)
        if entries is not None:
            entries.pop(key, None)
            if not entries:
                del self._data[file]

    def clear_file(self, file: str) -> None:
        self._data.pop(file, None)

    def keys(self, file: str) -> list[str]:
        return list(self._data.get(file, {}))

    def snapshot(self) -> dict[str, dict[str, Any]]:
        """Return a deep-enough copy of all entries (for persistence)."""
        return {file: dict(entries) for file, entries in self._data.items()}


class JsonFileStore(MemoryStore):
    """`KeyValueStore` persisted to a JSON file after every change.

    Failing to load or save is logged as a warning and never raised: losing the
    remembered state must not block editing the config itself.

    Args:
        path (Path): JSON file; created on first save.
    """

    def __init__(self, path: Path) -> None:
        super().__init__()
        self.path = path
        self._load()

    def set(self, file: str, key: str, value: Any) -> None:
        super().set(file, key, value)
        self._save()

    def clear(self, file: str, key: str) -> None:
        super().clear(file, key)
        self._save()

    def clear_file(self, file: str) -> None:
        super().clear_file(file)
        self._save()

    def _load(self) -> None:
        if not self.path.is_file():
            return
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Failed to load state from %s: %s", self.path, exc)
            return
        if not isinstance(data, dict):
            logger.warning("Ignoring state file %s: top level is not an object", self.path)
            return
        for file, entries in data.items():
            if isinstance(entries, dict):
                self._data[str(file)] = dict(entries)

    def _save(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(self.snapshot(), indent=2), encoding="utf-8")
        except (OSError, TypeError, ValueError) as exc:
            logger.warning("Failed to save state to %s: %s", self.path, exc)
