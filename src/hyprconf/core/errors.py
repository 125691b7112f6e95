# topmark:header:start
#
#   project      : HyprConf
#   file         : errors.py
#   file_relpath : src/hyprconf/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Fatal parse errors.

The parser absorbs almost every malformed construct (unknown tokens are skipped,
unparseable commented properties degrade to plain comments). Only two conditions
abort a parse, and both carry the position and the offending token:

- `MissingEqualsError`: an identifier that starts a statement is followed by
  neither ``=`` nor ``{``.
- `UnclosedBlockError`: end of input is reached inside a block.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hyprconf.core.tokens import Token


class ConfigParseError(ValueError):
    """Base class for fatal parse errors.

    Attributes:
        reason (str): What was expected.
        token (Token): The token found instead.
        line (int): 1-based line of ``token``.
        column (int): 1-based column of ``token``.
    """

    def __init__(self, reason: str, token: Token) -> None:
        self.reason = reason
        self.token = token
        self.line = token.line
        self.column = token.column
        super().__init__(
            f"{reason} at line {token.line}, column {token.column}. Got {token.describe()}"
        )


class MissingEqualsError(ConfigParseError):
    """A property name is not followed by ``=``."""


class UnclosedBlockError(ConfigParseError):
    """A block's ``{`` has no matching ``}`` before end of input."""
