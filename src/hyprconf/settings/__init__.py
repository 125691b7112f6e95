# topmark:header:start
#
#   project      : HyprConf
#   file         : __init__.py
#   file_relpath : src/hyprconf/settings/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Typed, validated views over well-known Hyprland sections."""

from __future__ import annotations

from hyprconf.settings.input import (
    InputSettings,
    Setting,
    TouchpadSettings,
    ValidationResult,
    apply_input_settings,
    read_input_settings,
    validate_input_settings,
)

__all__ = [
    "InputSettings",
    "Setting",
    "TouchpadSettings",
    "ValidationResult",
    "apply_input_settings",
    "read_input_settings",
    "validate_input_settings",
]
