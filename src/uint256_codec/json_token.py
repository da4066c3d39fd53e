"""
Classification of raw JSON tokens.

A uint256 can arrive in JSON either as a string (`"0x1f"`, `"31"`) or as a
bare number (`31`). The decoder only needs to know which of the two it is
holding; the token's first byte decides, so no full JSON parse is needed
for numbers. Strings are unescaped with the standard `json` module.
"""

from __future__ import annotations

import json
import re
from typing import Literal, NamedTuple

from .exceptions import EmptyInputError, MalformedJSONError, NullValueError

JSON_WHITESPACE = " \t\n\r"
"""Insignificant whitespace as defined by RFC 8259."""

_JSON_NUMBER = re.compile(
    r"-?(?:0|[1-9][0-9]*)"
    r"(?P<fraction>\.[0-9]+)?"
    r"(?P<exponent>[eE][+-]?[0-9]+)?"
)


class JSONToken(NamedTuple):
    """A JSON scalar split into its kind and its text."""

    kind: Literal["string", "number"]
    """Whether the token was a quoted string or a bare literal."""

    text: str
    """Unescaped string content, or the literal exactly as written."""


def classify_json_token(token: bytes | bytearray | str) -> JSONToken:
    """
    Split a raw JSON token into a tagged string or number.

    Args:
        token: The raw token, as produced by a JSON tokenizer.

    Raises:
        EmptyInputError: If the token is empty or only whitespace.
        NullValueError: If the token is the `null` literal.
        MalformedJSONError: If the token is not UTF-8, or is quoted but is
            not a valid JSON string.
    """
    if len(token) == 0:
        raise EmptyInputError()

    if isinstance(token, (bytes, bytearray)):
        try:
            token = token.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedJSONError("invalid json value: not valid utf-8") from e

    token = token.strip(JSON_WHITESPACE)
    if not token:
        raise EmptyInputError()
    if token == "null":
        raise NullValueError()

    if token.startswith('"'):
        if len(token) < 2 or not token.endswith('"'):
            raise MalformedJSONError("invalid json string: unterminated string")
        try:
            text = json.loads(token)
        except json.JSONDecodeError as e:
            raise MalformedJSONError(f"invalid json string: {e.msg}") from e
        return JSONToken("string", text)

    return JSONToken("number", token)


def is_fractional_number(literal: str) -> bool:
    """Check whether a JSON number literal carries a fraction or an exponent."""
    match = _JSON_NUMBER.fullmatch(literal)
    if match is None:
        return False
    return match.group("fraction") is not None or match.group("exponent") is not None


def is_integer_number(literal: str) -> bool:
    """Check whether `literal` is a JSON number with no fraction and no exponent."""
    match = _JSON_NUMBER.fullmatch(literal)
    if match is None:
        return False
    return match.group("fraction") is None and match.group("exponent") is None
