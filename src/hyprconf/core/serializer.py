# topmark:header:start
#
#   project      : HyprConf
#   file         : serializer.py
#   file_relpath : src/hyprconf/core/serializer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render a configuration tree back to text.

Output uses two spaces of indentation per nesting level:

```
# comment
key = value # inline comment
# disabled_key = value
name {
  child = 1
}
```

With ``preserve_comments=False`` plain comments and inline comments are dropped
(without leaving blank lines); commented properties are kept because they carry
settings, not prose.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hyprconf.constants import INDENT
from hyprconf.core.nodes import Block, Comment, CommentedProperty, Config, Property
from hyprconf.core.tokenizer import tokenize
from hyprconf.core.tokens import TokenKind
from hyprconf.core.values import coerce_value, format_number, quote_string

if TYPE_CHECKING:
    from hyprconf.core.nodes import Node, Value


def serialize(tree: Config | Node, preserve_comments: bool = True) -> str:
    """Render ``tree`` as configuration text.

    Args:
        tree (Config | Node): A root (rendered with a trailing newline) or a single node.
        preserve_comments (bool): Keep plain and inline comments.

    Returns:
        str: The rendered text.
    """
    return _render(tree, 0, preserve_comments)


def _render(node: Config | Node, depth: int, preserve_comments: bool) -> str:
    indent = INDENT * depth

    if isinstance(node, Config):
        return _join(node.children, depth, preserve_comments) + "\n"

    if isinstance(node, Comment):
        if not preserve_comments:
            return ""
        return f"{indent}# {node.content}" if node.content else f"{indent}#"

    if isinstance(node, Property):
        return f"{indent}{node.key} = {format_value(node.value)}" + _inline_comment(
            node.comment, preserve_comments
        )

    if isinstance(node, CommentedProperty):
        return f"{indent}# {node.key} = {format_commented_value(node.value)}" + _inline_comment(
            node.comment, preserve_comments
        )

    if isinstance(node, Block):
        body = _join(node.children, depth + 1, preserve_comments)
        return f"{indent}{node.name} {{\n{body}\n{indent}}}"

    raise TypeError(f"Cannot serialize {type(node).__name__}")


def _join(children: list[Node], depth: int, preserve_comments: bool) -> str:
    rendered = (_render(child, depth, preserve_comments) for child in children)
    return "\n".join(text for text in rendered if text)


def _inline_comment(comment: str | None, preserve_comments: bool) -> str:
    if preserve_comments and comment:
        return f" # {comment}"
    return ""


def format_value(value: Value) -> str:
    """Render an active property's value.

    Strings are written bare when they tokenize back to the same single identifier,
    otherwise they are double-quoted.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    if _reads_back_as_identifier(value):
        return value
    return quote_string(value)


def format_commented_value(value: Value) -> str:
    """Render a commented property's value.

    The comment is re-read by splitting its text, not by the tokenizer, so a string
    may stay bare unless it has surrounding spaces, ``#``, quotes or a newline, or
    would coerce to a number or boolean.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    if (
        value
        and value == value.strip()
        and not any(ch in value for ch in "#\"'\n\\")
        and isinstance(coerce_value(value), str)
    ):
        return value
    return quote_string(value)


def _reads_back_as_identifier(text: str) -> bool:
    if not text:
        return False
    tokens = tokenize(text)
    return len(tokens) == 2 and tokens[0].kind is TokenKind.IDENTIFIER and tokens[0].value == text
