# topmark:header:start
#
#   project      : HyprConf
#   file         : tracker.py
#   file_relpath : src/hyprconf/adapters/tracker.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Remember original values and a change log per config file.

`ChangeTracker` keeps, for each file:

- the original text (so the whole file can be restored);
- for each tracked property, its current and first-seen value and enabled state;
- a chronological list of `ConfigChange` records.

Everything is stored through a `hyprconf.adapters.state.KeyValueStore`, under the
keys ``backup`` and ``state:<property>``.
"""

from __future__ import annotations

import time
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any, Final

from hyprconf.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from hyprconf.adapters.state import KeyValueStore
    from hyprconf.core.nodes import Value

logger = get_logger(__name__)

_BACKUP_KEY: Final[str] = "backup"
_STATE_PREFIX: Final[str] = "state:"


@dataclass(frozen=True)
class ConfigChange:
    """One recorded edit of a property."""

    property: str
    old_value: Value | None
    new_value: Value | None
    was_commented: bool
    is_commented: bool
    timestamp: int


@dataclass(frozen=True)
class PropertyState:
    """Current and original state of a tracked property."""

    value: Value | None
    is_enabled: bool
    original_value: Value | None
    was_originally_enabled: bool

    @property
    def is_modified(self) -> bool:
        """Whether value or enabled state differ from the original."""
        return (
            self.value != self.original_value or self.is_enabled != self.was_originally_enabled
        )


@dataclass(frozen=True)
class ChangeSummary:
    """Counts of modified properties, and of those whose enabled state flipped."""

    modified: int
    enabled: int
    disabled: int


class ChangeTracker:
    """Track property edits on top of a key-value store.

    Args:
        store (KeyValueStore): Where state is kept.
        clock (Callable[[], float]): Returns the current time in seconds.
    """

    def __init__(self, store: KeyValueStore, clock: Callable[[], float] = time.time) -> None:
        self.store = store
        self.clock = clock

    def _now_ms(self) -> int:
        return int(self.clock() * 1000)

    # --- whole-file backup ---

    def create_backup(self, file: str, content: str) -> None:
        """Remember ``content`` as the original text of ``file`` and reset its change log."""
        self.store.set(
            file,
            _BACKUP_KEY,
            {"original_content": content, "timestamp": self._now_ms(), "changes": []},
        )

    def has_backup(self, file: str) -> bool:
        """Whether `create_backup` was called for ``file``."""
        return self.store.get(file, _BACKUP_KEY) is not None

    def restore_file(self, file: str) -> str | None:
        """Return the original text of ``file``, or None when no backup exists."""
        backup = self.store.get(file, _BACKUP_KEY)
        if backup is None:
            return None
        return backup["original_content"]

    def clear_backup(self, file: str) -> None:
        """Forget the backup, the property states and the change log of ``file``."""
        self.store.clear_file(file)

    # --- change log ---

    def track_change(
        self,
        file: str,
        prop: str,
        old_value: Value | None,
        new_value: Value | None,
        was_commented: bool,
        is_commented: bool,
    ) -> None:
        """Append a change record; ignored when ``file`` has no backup."""
        backup = self.store.get(file, _BACKUP_KEY)
        if backup is None:
            logger.debug("No backup for %s; change to %r not recorded", file, prop)
            return
        change = ConfigChange(
            property=prop,
            old_value=old_value,
            new_value=new_value,
            was_commented=was_commented,
            is_commented=is_commented,
            timestamp=self._now_ms(),
        )
        backup = dict(backup)
        backup["changes"] = [*backup.get("changes", []), asdict(change)]
        self.store.set(file, _BACKUP_KEY, backup)

    def get_changes(self, file: str) -> list[ConfigChange]:
        """Return the recorded changes of ``file``, oldest first."""
        backup = self.store.get(file, _BACKUP_KEY)
        if backup is None:
            return []
        return [ConfigChange(**entry) for entry in backup.get("changes", [])]

    # --- per-property state ---

    def set_property_state(
        self, file: str, prop: str, value: Value | None, is_enabled: bool
    ) -> None:
        """Record the state of ``prop``; the first call also fixes its original state."""
        existing = self.get_property_state(file, prop)
        if existing is None:
            state = PropertyState(
                value=value,
                is_enabled=is_enabled,
                original_value=value,
                was_originally_enabled=is_enabled,
            )
        else:
            state = PropertyState(
                value=value,
                is_enabled=is_enabled,
                original_value=existing.original_value,
                was_originally_enabled=existing.was_originally_enabled,
            )
        self._put_state(file, prop, state)

    def update_property_state(
        self,
        file: str,
        prop: str,
        value: Value | None,
        is_enabled: bool,
    ) -> None:
        """Move a tracked property to a new state and log the change.

        Properties that were never registered with `set_property_state` are ignored.
        """
        state = self.get_property_state(file, prop)
        if state is None:
            logger.debug("Property %r of %s is not tracked", prop, file)
            return
        self.track_change(
            file, prop, state.value, value, not state.is_enabled, not is_enabled
        )
        self._put_state(
            file,
            prop,
            PropertyState(
                value=value,
                is_enabled=is_enabled,
                original_value=state.original_value,
                was_originally_enabled=state.was_originally_enabled,
            ),
        )

    def get_property_state(self, file: str, prop: str) -> PropertyState | None:
        """Return the tracked state of ``prop`` or None."""
        raw: dict[str, Any] | None = self.store.get(file, _STATE_PREFIX + prop)
        if raw is None:
            return None
        return PropertyState(**raw)

    def is_property_modified(self, file: str, prop: str) -> bool:
        """Whether ``prop`` differs from its original state."""
        state = self.get_property_state(file, prop)
        return state is not None and state.is_modified

    def restore_property(self, file: str, prop: str) -> tuple[Value | None, bool] | None:
        """Return ``(original_value, was_originally_enabled)`` for ``prop``, or None."""
        state = self.get_property_state(file, prop)
        if state is None:
            return None
        return state.original_value, state.was_originally_enabled

    def tracked_properties(self, file: str) -> list[str]:
        """Return the tracked property names of ``file`` in registration order."""
        return [
            key[len(_STATE_PREFIX) :]
            for key in self.store.keys(file)
            if key.startswith(_STATE_PREFIX)
        ]

    def get_modified_properties(self, file: str) -> list[str]:
        """Return the names of the modified properties of ``file``."""
        return [
            prop for prop in self.tracked_properties(file) if self.is_property_modified(file, prop)
        ]

    def get_change_summary(self, file: str) -> ChangeSummary:
        """Count modified properties and how many were enabled or disabled."""
        modified = enabled = disabled = 0
        for prop in self.tracked_properties(file):
            state = self.get_property_state(file, prop)
            if state is None or not state.is_modified:
                continue
            modified += 1
            if state.is_enabled and not state.was_originally_enabled:
                enabled += 1
            elif not state.is_enabled and state.was_originally_enabled:
                disabled += 1
        return ChangeSummary(modified=modified, enabled=enabled, disabled=disabled)

    def _put_state(self, file: str, prop: str, state: PropertyState) -> None:
        self.store.set(file, _STATE_PREFIX + prop, asdict(state))
