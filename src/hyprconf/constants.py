# topmark:header:start
#
#   project      : HyprConf
#   file         : constants.py
#   file_relpath : src/hyprconf/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HyprConf Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from pathlib import Path
from typing import Final

HYPRCONF_VERSION: str = get_version("hyprconf")

# Line number given to nodes created by a mutation rather than read from source.
UNPOSITIONED_LINE: Final[int] = -1

INDENT: Final[str] = "  "

# Hyprland spells nested sections as ``input:touchpad:natural_scroll``.
KEY_PATH_SEPARATOR: Final[str] = ":"

DEFAULT_CONFIG_FILE: Path = Path("~/.config/hypr/input.conf")
DEFAULT_STATE_FILE: Path = Path("~/.local/state/hyprconf/state.json")
DEFAULT_SETTINGS_FILE: Path = Path("~/.config/hyprconf/hyprconf.toml")

BACKUP_INFIX: Final[str] = ".backup."

LOG_LEVEL_ENV_VAR: Final[str] = "HYPRCONF_LOG_LEVEL"
CONFIG_FILE_ENV_VAR: Final[str] = "HYPRCONF_CONFIG_FILE"
BACKUP_ENV_VAR: Final[str] = "HYPRCONF_BACKUP"
STATE_FILE_ENV_VAR: Final[str] = "HYPRCONF_STATE_FILE"

VALUE_NOT_SET: str = "<not set>"
