"""
Text parsers and formatters for unsigned integers.

Two text forms are understood:

- Hex: a `0x`/`0X` prefix followed by case-insensitive hex digits.
  Leading zero digits are accepted and ignored.
- Decimal: a plain base-10 literal, optionally preceded by `-` so that
  negative inputs can be reported as a range error rather than a syntax one.

The parsers return plain, unbounded integers. Range checks belong to the
`Uint256` constructor and are never repeated here.
"""

from __future__ import annotations

import re

from .exceptions import (
    EmptyHexError,
    InvalidDecimalError,
    InvalidHexDigitsError,
    InvalidMagnitudeError,
    MissingPrefixError,
    short_repr,
)

HEX_PREFIXES = ("0x", "0X")
"""Accepted hex prefixes. Output always uses the lowercase one."""

MAX_DECIMAL_DIGITS = 78
"""Digit count of 2**256 - 1, the widest value a decimal literal may carry."""

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")
_DECIMAL_LITERAL = re.compile(r"-?[0-9]+")


def has_hex_prefix(text: str) -> bool:
    """Check whether `text` starts with a `0x` or `0X` prefix."""
    return text.startswith(HEX_PREFIXES)


def format_hex(value: int) -> str:
    """
    Render a non-negative integer as canonical hex text.

    The output is lowercase, `0x`-prefixed, and has no leading zero digits.
    Zero renders as `0x0`.
    """
    return f"0x{value:x}"


def parse_hex(text: str) -> int:
    """
    Parse `0x`-prefixed hex text into an integer.

    Args:
        text: The hex string. It is not trimmed.

    Returns:
        The parsed value. It may be wider than 256 bits.

    Raises:
        MissingPrefixError: If neither `0x` nor `0X` starts the string.
        EmptyHexError: If nothing follows the prefix.
        InvalidHexDigitsError: If the digits are not all hex characters.
    """
    if not text:
        raise MissingPrefixError("invalid hex string: empty, missing 0x/0X prefix")
    if not has_hex_prefix(text):
        raise MissingPrefixError("invalid hex string: missing 0x/0X prefix")
    if len(text) == 2:
        raise EmptyHexError()

    # An all-zero digit run strips down to nothing; that is the value zero.
    digits = text[2:].lstrip("0") or "0"

    # `int(..., 16)` would also take underscores and surrounding whitespace.
    if _HEX_DIGITS.fullmatch(digits) is None:
        raise InvalidHexDigitsError(digits)
    return int(digits, 16)


def parse_decimal(text: str) -> int:
    """
    Parse a base-10 integer literal.

    Only ASCII digits are accepted, with an optional leading `-`.
    Whitespace, `+`, underscores, and non-ASCII digits are rejected.

    Raises:
        InvalidDecimalError: If `text` is not a plain integer literal.
    """
    if not text:
        raise InvalidDecimalError("invalid decimal string: empty")
    if _DECIMAL_LITERAL.fullmatch(text) is None:
        raise InvalidDecimalError(f"invalid decimal string: {short_repr(text)}")

    negative = text.startswith("-")
    digits = text.lstrip("-").lstrip("0") or "0"

    # `int()` refuses very long decimal strings, and any literal this long
    # is out of range anyway.
    if len(digits) > MAX_DECIMAL_DIGITS:
        raise InvalidMagnitudeError("negative" if negative else "exceeds 256 bits")

    value = int(digits, 10)
    return -value if negative else value


def parse_text(text: str) -> int:
    """
    Parse hex or decimal text, choosing the format by prefix.

    Surrounding whitespace is trimmed first. A `0x`/`0X` prefix selects
    `parse_hex`; anything else goes to `parse_decimal`.
    """
    text = text.strip()
    if not text:
        raise InvalidDecimalError("invalid string: empty")
    if has_hex_prefix(text):
        return parse_hex(text)
    return parse_decimal(text)

