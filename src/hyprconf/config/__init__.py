# topmark:header:start
#
#   project      : HyprConf
#   file         : __init__.py
#   file_relpath : src/hyprconf/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HyprConf's own configuration: logging setup and the settings file."""

from __future__ import annotations

from hyprconf.config.settings import HyprconfSettings, SettingsError, load_settings

__all__ = [
    "HyprconfSettings",
    "SettingsError",
    "load_settings",
]
