# topmark:header:start
#
#   project      : HyprConf
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the HyprConf test suite.

This file sets up global fixtures and the logging configuration for test runs, and
provides small config-text helpers shared by several test packages.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar, cast

import pytest

from hyprconf.config import logging

F = TypeVar("F", bound=Callable[..., object])

# Type of a decorator that takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_hyprconf_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure HyprConf's runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    HYPRCONF_LOG_LEVEL in their shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture used to manipulate environment variables.
    """
    monkeypatch.delenv("HYPRCONF_LOG_LEVEL", raising=False)


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's own HyprConf settings and state out of test runs."""
    for name in ("HYPRCONF_CONFIG_FILE", "HYPRCONF_BACKUP", "HYPRCONF_STATE_FILE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("HYPRCONF_STATE_FILE", str(tmp_path / "state" / "state.json"))


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level during tests so failures come with the full story.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


INPUT_CONF = """\
# Keyboard and pointer settings
input {
  kb_layout = us
  # kb_options = caps:escape
  repeat_rate = 40
  # repeat_delay = 300
  sensitivity = 0.5 # mouse speed

  touchpad {
    natural_scroll = true
    # scroll_factor = 1.5
  }
}
"""


@pytest.fixture
def input_conf_text() -> str:
    """A small but representative ``input`` config."""
    return INPUT_CONF


@pytest.fixture
def input_conf(tmp_path: Path) -> Path:
    """Write `INPUT_CONF` to a temporary file and return its path."""
    path = tmp_path / "input.conf"
    path.write_text(INPUT_CONF, encoding="utf-8")
    return path
