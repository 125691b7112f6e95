# topmark:header:start
#
#   project      : HyprConf
#   file         : test_diff.py
#   file_relpath : tests/utils/test_diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `hyprconf.utils.diff`."""

from __future__ import annotations

from hyprconf.utils.diff import render_patch, unified_diff


def test_equal_texts_have_no_diff() -> None:
    """No diff lines for identical texts."""
    assert unified_diff("a = 1\n", "a = 1\n", "x.conf") == []


def test_unified_diff_headers_and_lines() -> None:
    """Headers name the file; every line ends with a newline."""
    patch = unified_diff("a = 1\n# b = 2", "a = 1\nb = 2", "x.conf")
    assert patch[0] == "--- x.conf (current)\n"
    assert patch[1] == "+++ x.conf (updated)\n"
    assert "-# b = 2\n" in patch
    assert "+b = 2\n" in patch
    assert all(line.endswith("\n") for line in patch)


def test_render_patch_keeps_content() -> None:
    """The colored preview contains every diff line, from a list or a string."""
    patch = unified_diff("a = 1\n", "a = 2\n", "x.conf")
    rendered = render_patch(patch)
    assert "a = 2" in rendered
    assert render_patch("".join(patch)) == rendered
