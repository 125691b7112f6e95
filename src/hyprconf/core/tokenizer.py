# topmark:header:start
#
#   project      : HyprConf
#   file         : tokenizer.py
#   file_relpath : src/hyprconf/core/tokenizer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tokenizer for Hyprland-style configuration text.

`tokenize` scans the complete source text into a flat list of `Token` objects
terminated by an ``EOF`` token. Rules:

- spaces, tabs and carriage returns are skipped;
- ``\\n`` produces a ``NEWLINE`` token;
- ``#`` starts a comment running to end of line (value: trimmed text after ``#``);
- ``{``, ``}`` and ``=`` are single-character tokens;
- ``"`` or ``'`` starts a quoted string; a backslash keeps the next character
  literally and embedded newlines are allowed;
- a run of ASCII alphanumerics, ``-``, ``.``, ``_`` and ``:`` is classified as
  ``BOOLEAN``, ``NUMBER`` or ``IDENTIFIER`` (see `hyprconf.core.values`);
- any other run of characters up to whitespace or ``= { } #`` is a catch-all
  ``IDENTIFIER``.

The tokenizer never raises: unusual input is left for the parser to absorb.
"""

from __future__ import annotations

import string
from typing import Final

from hyprconf.config.logging import get_logger
from hyprconf.core.tokens import Token, TokenKind
from hyprconf.core.values import is_boolean_literal, is_numeric_literal

logger = get_logger(__name__)

_ALNUM: Final[frozenset[str]] = frozenset(string.ascii_letters + string.digits)
_BAREWORD_START: Final[frozenset[str]] = _ALNUM | {"-", "."}
_BAREWORD_CHARS: Final[frozenset[str]] = _ALNUM | {"-", ".", "_", ":"}
_BLANKS: Final[frozenset[str]] = frozenset(" \t\r")
_CATCH_ALL_STOP: Final[frozenset[str]] = frozenset(" \t\r\n={}#")
_QUOTES: Final[frozenset[str]] = frozenset("\"'")

_PUNCTUATION: Final[dict[str, TokenKind]] = {
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "=": TokenKind.EQUALS,
}


class Tokenizer:
    """Single-use scanner over one source text.

    Args:
        text (str): The complete source text.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: list[Token] = []

    def run(self) -> list[Token]:
        """Scan the whole text and return the token list (ending with ``EOF``)."""
        text = self.text
        while self.pos < len(text):
            ch = text[self.pos]
            if ch in _BLANKS:
                self._advance()
            elif ch == "\n":
                self._emit(TokenKind.NEWLINE, "\n", self.line, self.column)
                self.pos += 1
                self.line += 1
                self.column = 1
            elif ch == "#":
                self._scan_comment()
            elif ch in _PUNCTUATION:
                self._emit(_PUNCTUATION[ch], ch, self.line, self.column)
                self._advance()
            elif ch in _QUOTES:
                self._scan_string(ch)
            elif ch in _BAREWORD_START:
                self._scan_bareword()
            else:
                self._scan_catch_all()

        self._emit(TokenKind.EOF, "", self.line, self.column)
        logger.trace("Tokenized %d characters into %d tokens", len(text), len(self.tokens))
        return self.tokens

    def _advance(self, count: int = 1) -> None:
        self.pos += count
        self.column += count

    def _emit(self, kind: TokenKind, value: str, line: int, column: int) -> None:
        self.tokens.append(Token(kind=kind, value=value, line=line, column=column))

    def _scan_comment(self) -> None:
        line, column = self.line, self.column
        end = self.text.find("\n", self.pos)
        if end == -1:
            end = len(self.text)
        raw = self.text[self.pos + 1 : end]
        self._emit(TokenKind.COMMENT, raw.strip(), line, column)
        self._advance(end - self.pos)

    def _scan_string(self, quote: str) -> None:
        line, column = self.line, self.column
        text = self.text
        self._advance()  # opening quote
        chars: list[str] = []
        while self.pos < len(text) and text[self.pos] != quote:
            if text[self.pos] == "\\" and self.pos + 1 < len(text):
                self._advance()
            ch = text[self.pos]
            chars.append(ch)
            if ch == "\n":
                self.pos += 1
                self.line += 1
                self.column = 1
            else:
                self._advance()
        if self.pos < len(text):
            self._advance()  # closing quote
        else:
            logger.debug("Unterminated string starting at line %d, column %d", line, column)
        self._emit(TokenKind.STRING, "".join(chars), line, column)

    def _scan_bareword(self) -> None:
        line, column = self.line, self.column
        start = self.pos
        text = self.text
        while self.pos < len(text) and text[self.pos] in _BAREWORD_CHARS:
            self._advance()
        word = text[start : self.pos]
        self._emit(classify_bareword(word), word, line, column)

    def _scan_catch_all(self) -> None:
        line, column = self.line, self.column
        start = self.pos
        text = self.text
        while self.pos < len(text) and text[self.pos] not in _CATCH_ALL_STOP:
            self._advance()
        word = text[start : self.pos]
        logger.trace("Catch-all token %r at line %d, column %d", word, line, column)
        self._emit(TokenKind.IDENTIFIER, word, line, column)


def classify_bareword(word: str) -> TokenKind:
    """Return ``BOOLEAN``, ``NUMBER`` or ``IDENTIFIER`` for a scanned bareword."""
    if is_boolean_literal(word):
        return TokenKind.BOOLEAN
    if is_numeric_literal(word):
        return TokenKind.NUMBER
    return TokenKind.IDENTIFIER


def tokenize(text: str) -> list[Token]:
    """Scan ``text`` into tokens.

    Args:
        text (str): The complete source text.

    Returns:
        list[Token]: Tokens in source order; the last one is always ``EOF``.
    """
    return Tokenizer(text).run()
