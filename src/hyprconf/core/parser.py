# topmark:header:start
#
#   project      : HyprConf
#   file         : parser.py
#   file_relpath : src/hyprconf/core/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Recursive-descent parser building the configuration tree.

Grammar:

```
config             := statement*
statement          := comment | commented_property | property | block
property           := IDENTIFIER '=' value [COMMENT]
block              := IDENTIFIER '{' statement* '}'
commented_property := COMMENT   (when its text splits into "key = value")
```

Newlines between statements are skipped, and so is any token that cannot start a
statement. Only `MissingEqualsError` and `UnclosedBlockError` abort a parse.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hyprconf.config.logging import get_logger
from hyprconf.core.errors import MissingEqualsError, UnclosedBlockError
from hyprconf.core.nodes import Block, Comment, CommentedProperty, Config, Property
from hyprconf.core.tokenizer import tokenize
from hyprconf.core.tokens import Token, TokenKind
from hyprconf.core.values import coerce_value, parse_number, unquote_string

if TYPE_CHECKING:
    from hyprconf.core.nodes import Node, Value

logger = get_logger(__name__)


class Parser:
    """Consumes a token list produced by `hyprconf.core.tokenizer.tokenize`.

    Args:
        tokens (list[Token]): Tokens ending with an ``EOF`` token.
    """

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.current = 0

    def parse_config(self) -> Config:
        """Parse all statements up to end of input into a `Config` root."""
        children: list[Node] = []
        while not self._at_end():
            self._skip_newlines()
            if self._at_end():
                break
            node = self._parse_statement()
            if node is not None:
                children.append(node)
        return Config(children=children)

    # --- statements ---

    def _parse_statement(self) -> Node | None:
        if self._check(TokenKind.COMMENT):
            return parse_comment_token(self._advance())
        if self._check(TokenKind.IDENTIFIER):
            return self._parse_property_or_block()

        skipped = self._advance()
        logger.debug(
            "Skipping %s at line %d, column %d", skipped.describe(), skipped.line, skipped.column
        )
        return None

    def _parse_property_or_block(self) -> Property | Block:
        name = self._advance()
        if self._check(TokenKind.LBRACE):
            return self._parse_block(name)
        return self._parse_property(name)

    def _parse_property(self, key: Token) -> Property:
        if not self._check(TokenKind.EQUALS):
            raise MissingEqualsError("Expected = after property name", self._peek())
        self._advance()

        value: Value = ""
        if self._check(TokenKind.STRING) or self._check(TokenKind.IDENTIFIER):
            value = self._advance().value
        elif self._check(TokenKind.NUMBER):
            value = parse_number(self._advance().value)
        elif self._check(TokenKind.BOOLEAN):
            value = self._advance().value == "true"

        comment: str | None = None
        if self._check(TokenKind.COMMENT):
            comment = self._advance().value or None

        return Property(key=key.value, value=value, comment=comment, line=key.line)

    def _parse_block(self, name: Token) -> Block:
        self._advance()  # '{'
        children: list[Node] = []
        while not self._check(TokenKind.RBRACE) and not self._at_end():
            self._skip_newlines()
            if self._check(TokenKind.RBRACE) or self._at_end():
                break
            node = self._parse_statement()
            if node is not None:
                children.append(node)

        if not self._check(TokenKind.RBRACE):
            raise UnclosedBlockError(
                f"Expected }} to close block {name.value!r} opened at line {name.line}",
                self._peek(),
            )
        self._advance()
        return Block(name=name.value, children=children, line=name.line)

    # --- token cursor ---

    def _skip_newlines(self) -> None:
        while self._check(TokenKind.NEWLINE):
            self._advance()

    def _check(self, kind: TokenKind) -> bool:
        if self._at_end():
            return False
        return self._peek().kind is kind

    def _advance(self) -> Token:
        token = self.tokens[self.current]
        if not self._at_end():
            self.current += 1
        return token

    def _at_end(self) -> bool:
        return self._peek().kind is TokenKind.EOF

    def _peek(self) -> Token:
        return self.tokens[self.current]


def split_commented_property(text: str) -> tuple[str, Value, str | None] | None:
    """Split the text of a comment into ``(key, value, inline_comment)``.

    The text is split on the first ``=``; the remainder is split on the first ``#``
    that is neither escaped nor inside quotes. A fully quoted value is unquoted and
    stays a string; anything else goes through `coerce_value`.

    Args:
        text (str): Comment text without the leading ``#``.

    Returns:
        tuple[str, Value, str | None] | None: The parts, or None when the text does
            not have the shape of a single ``key = value`` setting (no ``=``, an empty
            key, or a key containing whitespace).
    """
    key, sep, remainder = text.partition("=")
    key = key.strip()
    if not sep or not key or any(ch.isspace() for ch in key):
        return None

    raw_value, inline_comment = _split_inline_comment(remainder)
    raw_value = raw_value.strip()
    unquoted = unquote_string(raw_value)
    value: Value = unquoted if unquoted is not None else coerce_value(raw_value)
    return key, value, inline_comment


def _split_inline_comment(remainder: str) -> tuple[str, str | None]:
    quote: str | None = None
    i = 0
    while i < len(remainder):
        ch = remainder[i]
        if ch == "\\":
            i += 2
            continue
        if quote is not None:
            if ch == quote:
                quote = None
        elif ch in "\"'":
            quote = ch
        elif ch == "#":
            return remainder[:i], remainder[i + 1 :].strip() or None
        i += 1
    return remainder, None


def parse_comment_token(token: Token) -> Comment | CommentedProperty:
    """Turn a ``COMMENT`` token into a `CommentedProperty` when possible.

    Falls back to a plain `Comment` whenever the text is not a ``key = value``
    setting; this path never raises.
    """
    if "=" in token.value:
        parts = split_commented_property(token.value)
        if parts is not None:
            key, value, comment = parts
            return CommentedProperty(key=key, value=value, comment=comment, line=token.line)
        logger.trace("Comment at line %d kept as text: %r", token.line, token.value)
    return Comment(content=token.value, line=token.line)


def parse(text: str) -> Config:
    """Parse configuration text into a fresh tree.

    Args:
        text (str): The complete source text.

    Returns:
        Config: The root of an independent tree.

    Raises:
        MissingEqualsError: If a property name is not followed by ``=``.
        UnclosedBlockError: If a block is not closed before end of input.
    """
    tokens = tokenize(text)
    config = Parser(tokens).parse_config()
    logger.debug("Parsed %d top-level nodes", len(config.children))
    return config
