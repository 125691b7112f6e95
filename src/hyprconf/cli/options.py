# topmark:header:start
#
#   project      : HyprConf
#   file         : options.py
#   file_relpath : src/hyprconf/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the HyprConf command line.

This module centralizes reusable options (verbosity, color, write control) and
their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from hyprconf.cli.errors import HyprconfUsageError
from hyprconf.config.logging import TRACE_LEVEL, get_logger

P = ParamSpec("P")
R = TypeVar("R")

logger = get_logger(__name__)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from the number of ``-v`` and ``-q`` flags.

    Three or more ``-v`` select TRACE, two DEBUG, one INFO. Any ``-q`` selects
    ERROR. The default is WARNING.

    Raises:
        HyprconfUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise HyprconfUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress status lines such as OK and updated; errors and data still print.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(*, cli_mode: ColorMode | None, stdout_isatty: bool | None = None) -> bool:
    """Determine whether color output should be enabled.

    Honors ``--color``/``--no-color`` first, then the ``FORCE_COLOR`` and ``NO_COLOR``
    environment variables, and finally whether stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` (auto, always, never) and ``--no-color`` to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_write_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--apply`` and ``--no-backup`` to an editing command."""
    f = click.option(
        "--apply",
        "apply_changes",
        is_flag=True,
        help="Write changes to the file (otherwise show a diff and exit 2 when it would change).",
    )(f)
    f = click.option(
        "--no-backup",
        "no_backup",
        is_flag=True,
        help="Do not copy the file to <file>.backup.<ms> before writing.",
    )(f)
    return f
