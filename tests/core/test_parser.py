# topmark:header:start
#
#   project      : HyprConf
#   file         : test_parser.py
#   file_relpath : tests/core/test_parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `hyprconf.core.parser`."""

from __future__ import annotations

import pytest

from hyprconf.core.errors import ConfigParseError, MissingEqualsError, UnclosedBlockError
from hyprconf.core.nodes import Block, Comment, CommentedProperty, Config, Property
from hyprconf.core.parser import parse, split_commented_property
from tests.conftest import parametrize


def test_empty_text() -> None:
    """Empty or blank text parses to an empty root."""
    assert parse("") == Config(children=[])
    assert parse("\n\n  \n") == Config(children=[])


def test_touchpad_block_with_boolean() -> None:
    """A block with one boolean property."""
    tree = parse("touchpad {\n  natural_scroll = true\n}")
    assert tree == Config(children=[Block("touchpad", [Property("natural_scroll", True)])])
    prop = tree.children[0].children[0]  # type: ignore[union-attr]
    assert prop.value is True


def test_value_types() -> None:
    """Values are typed once, at parse time."""
    tree = parse('a = 40\nb = 0.5\nc = false\nd = us\ne = "40"\nf =\n')
    values = {p.key: p.value for p in tree.children}  # type: ignore[union-attr]
    assert values == {"a": 40, "b": 0.5, "c": False, "d": "us", "e": "40", "f": ""}
    assert isinstance(values["e"], str)


def test_inline_comment() -> None:
    """A trailing comment is attached to the property."""
    tree = parse("sensitivity = 0.5 # mouse speed\n")
    assert tree.children == [Property("sensitivity", 0.5, comment="mouse speed")]


def test_empty_inline_comment_is_none() -> None:
    """A bare ``#`` after a value carries no comment."""
    tree = parse("a = 1 #\n")
    assert tree.children == [Property("a", 1, comment=None)]


def test_line_numbers_are_recorded_but_not_compared() -> None:
    """Nodes remember their source line; equality ignores it."""
    tree = parse("\n\na = 1\n")
    prop = tree.children[0]
    assert prop.line == 3
    assert prop == Property("a", 1)


def test_commented_property() -> None:
    """A comment shaped like ``key = value`` becomes a commented property."""
    tree = parse("# repeat_rate = 40\n")
    assert tree.children == [CommentedProperty("repeat_rate", 40)]


def test_commented_property_with_inline_comment_and_quotes() -> None:
    """Quoted values stay strings and ``#`` inside quotes does not start a comment."""
    tree = parse('# col = "#ff0000" # red\n')
    assert tree.children == [CommentedProperty("col", "#ff0000", comment="red")]


@parametrize(
    "text",
    [
        "# just a note",
        "# two words = 1",
        "# = 1",
        "#",
    ],
)
def test_prose_comments_stay_comments(text: str) -> None:
    """Comments that are not ``key = value`` are kept verbatim as plain comments."""
    tree = parse(text)
    assert len(tree.children) == 1
    assert isinstance(tree.children[0], Comment)
    assert tree.children[0].content == text[1:].strip()


def test_split_commented_property() -> None:
    """The split keeps everything after the first ``=`` as the value."""
    assert split_commented_property("exec = a=b") == ("exec", "a=b", None)
    assert split_commented_property("key =") == ("key", "", None)
    assert split_commented_property("k = 'x' # c") == ("k", "x", "c")
    assert split_commented_property("no equals") is None


def test_nested_blocks_to_arbitrary_depth() -> None:
    """Blocks nest to any depth."""
    depth = 12
    text = "".join(f"b{i} {{\n" for i in range(depth)) + "x = 1\n" + "}\n" * depth
    node = parse(text).children[0]
    for i in range(depth):
        assert isinstance(node, Block)
        assert node.name == f"b{i}"
        node = node.children[0]
    assert node == Property("x", 1)


def test_unclosed_block_raises_at_end_of_input() -> None:
    """A block that is never closed is fatal."""
    with pytest.raises(UnclosedBlockError) as excinfo:
        parse("foo {\n  x = 1\n")
    err = excinfo.value
    assert isinstance(err, ConfigParseError)
    assert (err.line, err.column) == (3, 1)
    assert "end of input" in str(err)
    assert "'foo'" in str(err)


def test_missing_equals_raises() -> None:
    """An identifier followed by neither ``=`` nor ``{`` is fatal."""
    with pytest.raises(MissingEqualsError) as excinfo:
        parse("a = 1\nkey value\n")
    err = excinfo.value
    assert err.reason == "Expected = after property name"
    assert (err.line, err.column) == (2, 5)
    assert str(err) == (
        "Expected = after property name at line 2, column 5. Got IDENTIFIER 'value'"
    )


def test_stray_tokens_are_skipped() -> None:
    """Tokens that cannot start a statement are skipped without error."""
    tree = parse("}\n= 40\na = 1\n")
    assert tree.children == [Property("a", 1)]


def test_comments_inside_blocks_keep_their_order() -> None:
    """Children stay in source order."""
    tree = parse("input {\n  # a\n  x = 1\n  # y = 2\n}\n")
    block = tree.children[0]
    assert isinstance(block, Block)
    assert block.children == [Comment("a"), Property("x", 1), CommentedProperty("y", 2)]


def test_parse_returns_independent_trees() -> None:
    """Two parses of the same text share no nodes."""
    first = parse("a { x = 1 }")
    second = parse("a { x = 1 }")
    assert first == second
    assert first.children[0] is not second.children[0]
