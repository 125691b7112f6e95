# topmark:header:start
#
#   project      : HyprConf
#   file         : values.py
#   file_relpath : src/hyprconf/core/values.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scalar value coercion shared by the tokenizer and the parser.

A property value is a ``str``, a number (``int`` or ``float``) or a ``bool``. The
type is decided exactly once, when the text is read, by `coerce_value`:

- ``true`` / ``false`` (exact spelling) become booleans;
- text that passes `is_numeric_literal` becomes a number;
- anything else stays a string.

The numeric test is deliberately permissive. It accepts the literal forms of a
JavaScript ``Number()`` conversion: decimal integers and fractions with optional
sign and exponent, ``Infinity``, and unsigned ``0x``/``0o``/``0b`` integers.
Python-only spellings such as ``1_000``, ``inf`` or ``nan`` are *not* numbers.
A hex colour like ``0xff33ccff`` therefore reads as an integer and is written
back in decimal.
"""

from __future__ import annotations

import math
import re
from typing import Final

# Integers beyond this magnitude keep float semantics (2**53, exact in a double).
_MAX_EXACT_INT: Final[int] = 2**53

_DECIMAL_RE: Final[re.Pattern[str]] = re.compile(
    r"""
    [+-]?
    (?:
        (?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?
      | Infinity
    )
    """,
    re.VERBOSE,
)
_RADIX_RE: Final[re.Pattern[str]] = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")

_RADIX_BASES: Final[dict[str, int]] = {"x": 16, "o": 8, "b": 2}


def is_boolean_literal(text: str) -> bool:
    """Return True when ``text`` is exactly ``true`` or ``false``."""
    return text in ("true", "false")


def is_numeric_literal(text: str) -> bool:
    """Return True when ``text`` reads as a number.

    The empty string is never numeric.

    Args:
        text (str): Candidate literal, already stripped by the caller.

    Returns:
        bool: Whether `parse_number` accepts ``text``.
    """
    if not text:
        return False
    return bool(_DECIMAL_RE.fullmatch(text) or _RADIX_RE.fullmatch(text))


def parse_number(text: str) -> int | float:
    """Convert a numeric literal to ``int`` or ``float``.

    Integral values within the exactly representable range come back as ``int``
    (``"1.0"`` -> ``1``, ``"1e3"`` -> ``1000``); everything else is a ``float``.

    Raises:
        ValueError: If ``text`` is not a numeric literal.
    """
    if _RADIX_RE.fullmatch(text):
        value = int(text[2:], _RADIX_BASES[text[1].lower()])
        if value <= _MAX_EXACT_INT:
            return value
        try:
            return float(value)
        except OverflowError:
            return math.inf
    if not _DECIMAL_RE.fullmatch(text):
        raise ValueError(f"not a numeric literal: {text!r}")

    number = float(text.replace("Infinity", "inf"))
    if math.isfinite(number) and number.is_integer() and abs(number) <= _MAX_EXACT_INT:
        return int(number)
    return number


def coerce_value(text: str) -> str | int | float | bool:
    """Apply the boolean/number/string coercion rule to a raw bareword."""
    if is_boolean_literal(text):
        return text == "true"
    if is_numeric_literal(text):
        return parse_number(text)
    return text


def format_number(number: int | float) -> str:
    """Render a number the way it would be written in a config file."""
    if isinstance(number, int):
        return str(number)
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if math.isnan(number):
        return "NaN"
    if number.is_integer() and abs(number) <= _MAX_EXACT_INT:
        return str(int(number))
    # ``+`` is not a bareword character, so ``1e+22`` would not read back as one token.
    return repr(number).replace("e+", "e")


def quote_string(text: str) -> str:
    """Wrap ``text`` in double quotes, escaping backslashes and quotes."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def unquote_string(text: str) -> str | None:
    """Return the content of a fully quoted string, or None when not quoted.

    The escape rule matches the tokenizer: a backslash keeps the next character.
    """
    if len(text) < 2 or text[0] not in "\"'" or text[-1] != text[0]:
        return None
    quote = text[0]
    out: list[str] = []
    i = 1
    end = len(text) - 1
    while i < end:
        ch = text[i]
        if ch == "\\":
            if i + 1 >= end:
                # The final quote is escaped, so the string never closes.
                return None
            out.append(text[i + 1])
            i += 2
            continue
        if ch == quote:
            # Closing quote before the end: ``"a" "b"`` is not one string.
            return None
        out.append(ch)
        i += 1
    if i != end:
        return None
    return "".join(out)
