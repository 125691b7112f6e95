# topmark:header:start
#
#   project      : HyprConf
#   file         : files.py
#   file_relpath : src/hyprconf/adapters/files.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File I/O for config documents.

Thin wrappers around `pathlib.Path` that log what they touch. Errors are not
translated: callers receive the usual `OSError` subclasses and `UnicodeDecodeError`.
"""

from __future__ import annotations

import shutil
import time
from pathlib import Path

from hyprconf.config.logging import get_logger
from hyprconf.constants import BACKUP_INFIX

logger = get_logger(__name__)


def read_text(path: Path) -> str:
    """Read a config file as UTF-8 text.

    Line endings are kept as they are on disk (``\\r`` is skipped by the tokenizer).
    """
    logger.debug("Reading %s", path)
    with path.open("r", encoding="utf-8", newline="") as fh:
        return fh.read()


def write_text(path: Path, content: str) -> None:
    """Write ``content`` to ``path`` as UTF-8, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(content)
    logger.info("Wrote %s (%d characters)", path, len(content))


def file_exists(path: Path) -> bool:
    """Return True when ``path`` is an existing regular file."""
    try:
        return path.is_file()
    except OSError:
        return False


def backup_path_for(path: Path, timestamp_ms: int | None = None) -> Path:
    """Return ``<path>.backup.<epoch-ms>`` for ``path``."""
    stamp = int(time.time() * 1000) if timestamp_ms is None else timestamp_ms
    return path.with_name(f"{path.name}{BACKUP_INFIX}{stamp}")


def create_backup(path: Path, timestamp_ms: int | None = None) -> Path:
    """Copy ``path`` next to itself as a timestamped backup.

    Args:
        path (Path): File to back up.
        timestamp_ms (int | None): Timestamp for the backup name; now when None.

    Returns:
        Path: The backup file.
    """
    target = backup_path_for(path, timestamp_ms)
    shutil.copy2(path, target)
    logger.info("Backed up %s to %s", path, target)
    return target


def list_backups(path: Path) -> list[Path]:
    """Return the backups of ``path``, oldest first."""
    prefix = f"{path.name}{BACKUP_INFIX}"
    found: list[tuple[int, Path]] = []
    for candidate in path.parent.glob(f"{prefix}*"):
        stamp = candidate.name[len(prefix) :]
        if stamp.isdigit():
            found.append((int(stamp), candidate))
    return [p for _, p in sorted(found)]
