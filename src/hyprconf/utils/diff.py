# topmark:header:start
#
#   project      : HyprConf
#   file         : diff.py
#   file_relpath : src/hyprconf/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diff generation and colorized preview for config edits."""

from __future__ import annotations

import difflib
from typing import Sequence

from yachalk import chalk

from hyprconf.config.logging import get_logger

logger = get_logger(__name__)


def unified_diff(current: str, updated: str, name: str, context: int = 3) -> list[str]:
    """Return the unified diff from ``current`` to ``updated`` as lines with newlines.

    Args:
        current (str): Text as it is on disk.
        updated (str): Text after editing.
        name (str): File name shown in the ``---``/``+++`` headers.
        context (int): Lines of context around each hunk.

    Returns:
        list[str]: Diff lines; empty when the texts are equal.
    """
    patch_lines = list(
        difflib.unified_diff(
            current.splitlines(keepends=True),
            updated.splitlines(keepends=True),
            fromfile=f"{name} (current)",
            tofile=f"{name} (updated)",
            n=context,
        )
    )
    # difflib leaves the last line without a newline when the text has none.
    patch_lines = [line if line.endswith("\n") else line + "\n" for line in patch_lines]
    logger.trace("Diff for %s: %d lines", name, len(patch_lines))
    return patch_lines


def render_patch(patch: Sequence[str] | str) -> str:
    """Colour a unified diff for the terminal: removals red, additions green, hunks cyan.

    ``patch`` may be the lines from `unified_diff` or the same diff joined into one string.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = [line.rstrip("\n") for line in patch]

    def process_line(line: str) -> str:
        content = line.replace("\r", "\\r")
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.bold.white(content)

    return chalk.gray("".join(f"{process_line(line)}\n" for line in lines))
