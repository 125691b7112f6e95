# topmark:header:start
#
#   project      : HyprConf
#   file         : tokens.py
#   file_relpath : src/hyprconf/core/tokens.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Token kinds and the token record produced by the tokenizer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Lexical categories recognized by `hyprconf.core.tokenizer.tokenize`."""

    IDENTIFIER = "identifier"
    EQUALS = "equals"
    LBRACE = "lbrace"
    RBRACE = "rbrace"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    COMMENT = "comment"
    NEWLINE = "newline"
    EOF = "eof"


@dataclass(frozen=True)
class Token:
    """One lexical token with its 1-based source position.

    Attributes:
        kind (TokenKind): Lexical category.
        value (str): Literal text. For strings this is the unescaped content, for
            comments the trimmed text after ``#``.
        line (int): Line where the token starts.
        column (int): Column where the token starts.
    """

    kind: TokenKind
    value: str
    line: int
    column: int

    def describe(self) -> str:
        """Return a short human-readable description used in error messages."""
        if self.kind is TokenKind.EOF:
            return "end of input"
        if self.kind is TokenKind.NEWLINE:
            return "newline"
        return f"{self.kind.name} {self.value!r}"
