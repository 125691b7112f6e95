# topmark:header:start
#
#   project      : HyprConf
#   file         : settings.py
#   file_relpath : src/hyprconf/config/settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load HyprConf's own settings.

Settings are layered, later sources winning:

1. built-in defaults (`HyprconfSettings()`);
2. a TOML settings file (``~/.config/hyprconf/hyprconf.toml`` unless another path
   is given), parsed with `tomlkit`;
3. environment variables ``HYPRCONF_CONFIG_FILE``, ``HYPRCONF_BACKUP`` and
   ``HYPRCONF_STATE_FILE``.

Example ``hyprconf.toml``:

```toml
config_file = "~/.config/hypr/input.conf"
backup = true
state_file = "~/.local/state/hyprconf/state.json"
preserve_comments = true
```
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from hyprconf.config.logging import get_logger
from hyprconf.constants import (
    BACKUP_ENV_VAR,
    CONFIG_FILE_ENV_VAR,
    DEFAULT_CONFIG_FILE,
    DEFAULT_SETTINGS_FILE,
    DEFAULT_STATE_FILE,
    STATE_FILE_ENV_VAR,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from hyprconf.config.logging import HyprconfLogger

logger: HyprconfLogger = get_logger(__name__)

_TRUTHY: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSY: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})


class SettingsError(RuntimeError):
    """Raised when the settings file exists but cannot be parsed."""


@dataclass(frozen=True)
class HyprconfSettings:
    """Resolved HyprConf settings.

    Attributes:
        config_file (Path): Hyprland config edited when no file is given.
        backup (bool): Copy the file to ``<file>.backup.<ms>`` before writing.
        state_file (Path): JSON file holding tracked property states.
        preserve_comments (bool): Keep comments when writing files.
    """

    config_file: Path = DEFAULT_CONFIG_FILE
    backup: bool = True
    state_file: Path = DEFAULT_STATE_FILE
    preserve_comments: bool = True

    def expanded(self) -> HyprconfSettings:
        """Return a copy with ``~`` expanded in every path."""
        return replace(
            self,
            config_file=self.config_file.expanduser(),
            state_file=self.state_file.expanduser(),
        )


def parse_settings_toml(text: str, base: HyprconfSettings | None = None) -> HyprconfSettings:
    """Apply the keys of a settings TOML document on top of ``base``.

    Unknown keys and values of the wrong type are logged and ignored.

    Raises:
        SettingsError: If ``text`` is not valid TOML.
    """
    try:
        doc: dict[str, Any] = tomlkit.parse(text).unwrap()
    except TomlkitParseError as exc:
        raise SettingsError(f"Error parsing settings TOML: {exc}") from exc

    settings = base or HyprconfSettings()
    changes: dict[str, Any] = {}
    for key, value in doc.items():
        if key in ("config_file", "state_file"):
            if isinstance(value, str) and value:
                changes[key] = Path(value)
            else:
                logger.warning("Ignoring %s: expected a non-empty string, got %r", key, value)
        elif key in ("backup", "preserve_comments"):
            if isinstance(value, bool):
                changes[key] = value
            else:
                logger.warning("Ignoring %s: expected a boolean, got %r", key, value)
        else:
            logger.warning("Ignoring unknown settings key %r", key)
    return replace(settings, **changes)


def _parse_env_bool(name: str, raw: str) -> bool | None:
    v = raw.strip().lower()
    if v in _TRUTHY:
        return True
    if v in _FALSY:
        return False
    logger.warning("Ignoring %s=%r: not a boolean", name, raw)
    return None


def apply_environment(
    settings: HyprconfSettings,
    environ: Mapping[str, str] | None = None,
) -> HyprconfSettings:
    """Override ``settings`` with ``HYPRCONF_*`` environment variables."""
    env = os.environ if environ is None else environ
    changes: dict[str, Any] = {}
    if env.get(CONFIG_FILE_ENV_VAR):
        changes["config_file"] = Path(env[CONFIG_FILE_ENV_VAR])
    if env.get(STATE_FILE_ENV_VAR):
        changes["state_file"] = Path(env[STATE_FILE_ENV_VAR])
    if env.get(BACKUP_ENV_VAR):
        backup = _parse_env_bool(BACKUP_ENV_VAR, env[BACKUP_ENV_VAR])
        if backup is not None:
            changes["backup"] = backup
    return replace(settings, **changes)


def load_settings(
    path: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> HyprconfSettings:
    """Resolve settings from defaults, the settings file and the environment.

    Args:
        path (Path | None): Explicit settings file. When given it must exist; when
            None the default location is used if present.
        environ (Mapping[str, str] | None): Environment to read (defaults to
            ``os.environ``).

    Returns:
        HyprconfSettings: Settings with ``~`` expanded.

    Raises:
        SettingsError: If the settings file is unreadable or malformed.
    """
    settings = HyprconfSettings()
    settings_path = path if path is not None else DEFAULT_SETTINGS_FILE.expanduser()

    if path is not None or settings_path.is_file():
        try:
            text = settings_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SettingsError(f"Cannot read settings file {settings_path}: {exc}") from exc
        logger.debug("Loading settings from %s", settings_path)
        settings = parse_settings_toml(text, settings)

    return apply_environment(settings, environ).expanded()
