# topmark:header:start
#
#   project      : HyprConf
#   file         : input.py
#   file_relpath : src/hyprconf/settings/input.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Typed view of Hyprland's ``input`` section.

Reads and writes a fixed set of keyboard, pointer and touchpad settings:

```
input {
  kb_layout = us
  repeat_rate = 40
  # sensitivity = 0.5
  touchpad {
    natural_scroll = true
  }
}
```

Each setting is a `Setting` carrying its value and whether it is enabled (active)
or disabled (commented out). Writing goes through
`hyprconf.core.query.set_property_enabled`, so untouched lines keep their place.
Range checks live here, outside the parser.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import TYPE_CHECKING, Final, Generic, TypeVar

from hyprconf.config.logging import get_logger
from hyprconf.core.query import (
    ensure_block,
    ensure_child_block,
    find_block,
    find_child_block,
    find_property_or_commented,
    set_property_enabled,
)

if TYPE_CHECKING:
    from hyprconf.core.nodes import Block, Config, Value

logger = get_logger(__name__)

INPUT_BLOCK: Final[str] = "input"
TOUCHPAD_BLOCK: Final[str] = "touchpad"

T = TypeVar("T", str, int, float, bool)


@dataclass(frozen=True)
class Setting(Generic[T]):
    """A setting's value and whether it is active."""

    value: T
    enabled: bool = True


@dataclass(frozen=True)
class TouchpadSettings:
    """Settings of the ``input { touchpad { ... } }`` block."""

    natural_scroll: Setting[bool] | None = None
    clickfinger_behavior: Setting[bool] | None = None
    scroll_factor: Setting[float] | None = None


@dataclass(frozen=True)
class InputSettings:
    """Settings of the ``input { ... }`` block.

    ``None`` means "absent" when reading and "leave alone" when writing.
    """

    kb_layout: Setting[str] | None = None
    kb_options: Setting[str] | None = None
    repeat_rate: Setting[int] | None = None
    repeat_delay: Setting[int] | None = None
    sensitivity: Setting[float] | None = None
    touchpad: TouchpadSettings | None = None


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of `validate_input_settings`."""

    valid: bool
    errors: list[str] = field(default_factory=lambda: [])


# name -> (low, high, message)
_RANGES: Final[dict[str, tuple[float, float, str]]] = {
    "repeat_rate": (1, 100, "repeat_rate must be between 1 and 100"),
    "repeat_delay": (100, 2000, "repeat_delay must be between 100 and 2000ms"),
    "sensitivity": (-2, 2, "sensitivity must be between -2 and 2"),
    "scroll_factor": (0.1, 5, "scroll_factor must be between 0.1 and 5"),
}


def _as_str(value: Value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _as_float(value: Value) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(value)
    except ValueError:
        return None


def _as_int(value: Value) -> int | None:
    number = _as_float(value)
    if number is None or not number.is_integer():
        return None
    return int(number)


def _as_bool(value: Value) -> bool | None:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    lowered = value.strip().lower()
    if lowered in ("true", "yes", "on"):
        return True
    if lowered in ("false", "no", "off"):
        return False
    return None


_CONVERTERS = {
    "kb_layout": _as_str,
    "kb_options": _as_str,
    "repeat_rate": _as_int,
    "repeat_delay": _as_int,
    "sensitivity": _as_float,
    "natural_scroll": _as_bool,
    "clickfinger_behavior": _as_bool,
    "scroll_factor": _as_float,
}


def _read_setting(block: Block, key: str) -> Setting | None:  # type: ignore[type-arg]
    lookup = find_property_or_commented(block, key)
    node = lookup.current
    if node is None:
        return None
    converted = _CONVERTERS[key](node.value)
    if converted is None:
        logger.warning("Ignoring %s = %r: unexpected value type", key, node.value)
        return None
    return Setting(value=converted, enabled=lookup.enabled)


def read_input_settings(config: Config) -> InputSettings:
    """Read the ``input`` block (and its ``touchpad`` block) into `InputSettings`."""
    input_block = find_block(config, INPUT_BLOCK)
    if input_block is None:
        return InputSettings()

    touchpad: TouchpadSettings | None = None
    touchpad_block = find_child_block(input_block, TOUCHPAD_BLOCK)
    if touchpad_block is not None:
        touchpad = TouchpadSettings(
            **{f.name: _read_setting(touchpad_block, f.name) for f in fields(TouchpadSettings)}
        )

    top_level = {
        f.name: _read_setting(input_block, f.name)
        for f in fields(InputSettings)
        if f.name != TOUCHPAD_BLOCK
    }
    return InputSettings(**top_level, touchpad=touchpad)


def apply_input_settings(config: Config, settings: InputSettings) -> None:
    """Write every non-None setting of ``settings`` into ``config`` in place.

    The ``input`` block is created when missing, and so is ``touchpad`` when touchpad
    settings are given.
    """
    input_block = ensure_block(config, INPUT_BLOCK)
    for f in fields(InputSettings):
        if f.name == TOUCHPAD_BLOCK:
            continue
        setting: Setting | None = getattr(settings, f.name)  # type: ignore[type-arg]
        if setting is not None:
            set_property_enabled(input_block, f.name, setting.enabled, setting.value)

    if settings.touchpad is not None:
        touchpad_block = ensure_child_block(input_block, TOUCHPAD_BLOCK)
        for f in fields(TouchpadSettings):
            setting = getattr(settings.touchpad, f.name)
            if setting is not None:
                set_property_enabled(touchpad_block, f.name, setting.enabled, setting.value)


def validate_input_settings(settings: InputSettings) -> ValidationResult:
    """Check numeric settings against Hyprland's accepted ranges."""
    candidates: list[tuple[str, Setting | None]] = [  # type: ignore[type-arg]
        ("repeat_rate", settings.repeat_rate),
        ("repeat_delay", settings.repeat_delay),
        ("sensitivity", settings.sensitivity),
    ]
    if settings.touchpad is not None:
        candidates.append(("scroll_factor", settings.touchpad.scroll_factor))

    errors: list[str] = []
    for name, setting in candidates:
        if setting is None:
            continue
        low, high, message = _RANGES[name]
        if not low <= setting.value <= high:
            errors.append(message)
    return ValidationResult(valid=not errors, errors=errors)
