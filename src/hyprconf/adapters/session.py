# topmark:header:start
#
#   project      : HyprConf
#   file         : session.py
#   file_relpath : src/hyprconf/adapters/session.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""One editing session over one config file.

`ConfigSession` is the thin adapter between the pure core and the outside world:
it reads the file, parses it, applies edits addressed by key path
(``input:touchpad:natural_scroll``), renders a diff, and writes the result back,
optionally after a timestamped backup. When a `ChangeTracker` is attached, the
edits are recorded there once `ConfigSession.save` has written the file.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from hyprconf.adapters.files import create_backup, file_exists, read_text, write_text
from hyprconf.config.logging import get_logger
from hyprconf.core.parser import parse
from hyprconf.core.query import (
    find_property_or_commented,
    resolve_block_path,
    set_property_enabled,
    split_key_path,
)
from hyprconf.core.serializer import serialize
from hyprconf.utils.diff import unified_diff

if TYPE_CHECKING:
    from pathlib import Path

    from hyprconf.adapters.tracker import ChangeTracker
    from hyprconf.core.nodes import Config, Container, Value
    from hyprconf.core.query import PropertyLookup

logger = get_logger(__name__)


@dataclass(frozen=True)
class _PendingEdit:
    """State of one setting before and after an edit, waiting for `ConfigSession.save`."""

    key_path: str
    old_value: Value | None
    old_enabled: bool
    new_value: Value | None
    new_enabled: bool


class ConfigSession:
    """Parsed config file plus the text it was read from.

    Args:
        path (Path): File the text belongs to (used for saving and tracking).
        text (str): Original file text.
        tracker (ChangeTracker | None): Optional change tracker.
        preserve_comments (bool): Keep comments when rendering.

    Raises:
        ConfigParseError: If ``text`` cannot be parsed.
    """

    def __init__(
        self,
        path: Path,
        text: str,
        *,
        tracker: ChangeTracker | None = None,
        preserve_comments: bool = True,
    ) -> None:
        self.path = path
        self.original_text = text
        self.tracker = tracker
        self.preserve_comments = preserve_comments
        self.tree: Config = parse(text)
        # Canonical rendering of the untouched tree; blank lines and spacing differ
        # from ``text`` without counting as a change.
        self._baseline = self.render()
        self._pending: list[_PendingEdit] = []

    @classmethod
    def open(
        cls,
        path: Path,
        *,
        tracker: ChangeTracker | None = None,
        preserve_comments: bool = True,
    ) -> ConfigSession:
        """Read and parse ``path``.

        A missing file is treated as empty, so settings can be written to a new file.
        """
        text = read_text(path) if file_exists(path) else ""
        return cls(path, text, tracker=tracker, preserve_comments=preserve_comments)

    @property
    def file_key(self) -> str:
        """Key identifying this file in the tracker's store."""
        return str(self.path)

    # --- queries ---

    def _container(self, blocks: tuple[str, ...], *, create: bool) -> Container | None:
        return resolve_block_path(self.tree, blocks, create=create)

    def lookup(self, key_path: str) -> PropertyLookup | None:
        """Look up a setting; None when one of its blocks does not exist.

        Raises:
            ValueError: If ``key_path`` is malformed.
        """
        blocks, key = split_key_path(key_path)
        container = self._container(blocks, create=False)
        if container is None:
            return None
        return find_property_or_commented(container, key)

    # --- edits ---

    def set_enabled(self, key_path: str, enabled: bool, value: Value | None = None) -> None:
        """Apply `set_property_enabled` to the setting at ``key_path``.

        Missing blocks are created only when the edit can add a property (enabling
        with a value).

        Raises:
            ValueError: If ``key_path`` is malformed.
        """
        blocks, key = split_key_path(key_path)
        container = self._container(blocks, create=enabled and value is not None)
        if container is None:
            logger.debug("No block for %r; nothing to do", key_path)
            return

        # The lookup holds the live nodes, which the edit may change in place.
        before = find_property_or_commented(container, key)
        existed = before.current is not None
        old_value, old_enabled = before.value, before.enabled

        set_property_enabled(container, key, enabled, value)
        after = find_property_or_commented(container, key)
        if after.current is None:
            return
        if existed and (old_value, old_enabled) == (after.value, after.enabled):
            return
        self._pending.append(
            _PendingEdit(
                key_path=key_path,
                old_value=old_value if existed else None,
                old_enabled=old_enabled if existed else False,
                new_value=after.value,
                new_enabled=after.enabled,
            )
        )

    def set_value(self, key_path: str, value: Value) -> None:
        """Enable the setting at ``key_path`` with ``value``, adding it when absent."""
        self.set_enabled(key_path, True, value)

    def enable(self, key_path: str, value: Value | None = None) -> None:
        """Enable the setting at ``key_path`` (uncommenting it when disabled)."""
        self.set_enabled(key_path, True, value)

    def disable(self, key_path: str) -> None:
        """Comment out the setting at ``key_path``."""
        self.set_enabled(key_path, False)

    def _record_pending(self, loaded_text: str) -> None:
        if self.tracker is None:
            self._pending.clear()
            return
        file = self.file_key
        if not self.tracker.has_backup(file):
            self.tracker.create_backup(file, loaded_text)
        for edit in self._pending:
            self.tracker.set_property_state(file, edit.key_path, edit.old_value, edit.old_enabled)
            self.tracker.update_property_state(
                file, edit.key_path, edit.new_value, edit.new_enabled
            )
        logger.debug("Recorded %d edit(s) of %s", len(self._pending), file)
        self._pending.clear()

    # --- output ---

    def render(self) -> str:
        """Serialize the current tree."""
        return serialize(self.tree, self.preserve_comments)

    def diff(self) -> list[str]:
        """Unified diff from the original text to `render`."""
        return unified_diff(self.original_text, self.render(), str(self.path))

    @property
    def has_changes(self) -> bool:
        """Whether the edits changed the rendered text.

        Formatting-only differences from the file (blank lines, spacing) do not count.
        """
        return self.render() != self._baseline

    def save(self, *, backup: bool = True) -> Path | None:
        """Write `render` to the file, then record the edits with the tracker.

        Nothing reaches the tracker when writing fails.

        Args:
            backup (bool): Copy the existing file to a timestamped backup first.

        Returns:
            Path | None: The backup file, if one was made.
        """
        backup_path: Path | None = None
        if backup and file_exists(self.path):
            backup_path = create_backup(self.path)
        text = self.render()
        write_text(self.path, text)
        loaded_text = self.original_text
        self.original_text = text
        self._baseline = text
        self._record_pending(loaded_text)
        return backup_path
