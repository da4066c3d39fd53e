"""
Unsigned 256-bit Integer Type.

`Uint256` is a plain `int` restricted to [0, 2**256 - 1] plus the codecs
that move it in and out of its external representations:

- Bytes:   minimal big-endian buffer, zero is a single `0x00` byte.
- Hex:     `0x`-prefixed lowercase text without leading zeros.
- Decimal: input only.
- JSON:    always written as a quoted hex string; read from a quoted hex or
           decimal string, or from a bare integer literal.

Python integers are immutable, so an instance can never be changed through
a value read from it, nor through the value it was built from.
"""

from __future__ import annotations

import json
import sqlite3
from typing import IO, Any, Callable, ClassVar

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema
from typing_extensions import Self

from .exceptions import (
    EmptySourceError,
    InvalidDecimalError,
    InvalidMagnitudeError,
    InvalidSourceError,
    LengthExceededError,
    NotAnIntegerError,
    Uint256CoercionError,
    Uint256Error,
    short_repr,
)
from .json_token import classify_json_token, is_fractional_number, is_integer_number
from .text import format_hex, parse_decimal, parse_hex, parse_text

UINT256_MAX = 2**256 - 1
"""The largest value a uint256 can hold."""

UINT64_MAX = 2**64 - 1
"""The largest value accepted by `Uint256.from_uint64`."""


class Uint256(int):
    """
    A 256-bit unsigned integer (uint256) with strict text, byte and JSON codecs.

    `Uint256()` with no argument is zero.
    """

    BITS: ClassVar[int] = 256
    """The number of bits in the integer."""

    BYTE_LENGTH: ClassVar[int] = 32
    """The maximum number of bytes in the big-endian encoding."""

    def __new__(cls, value: int | None = 0) -> Self:
        """
        Create and validate a new Uint256 from an integer magnitude.

        Raises:
            InvalidMagnitudeError: If `value` is None, negative, or wider than 256 bits.
            Uint256CoercionError: If `value` is not an integer.
        """
        if value is None:
            raise InvalidMagnitudeError("None")
        # bool is an int subclass, but True is not a magnitude.
        if isinstance(value, bool) or not isinstance(value, int):
            raise Uint256CoercionError(type(value).__name__)

        int_value = int(value)
        if int_value < 0:
            raise InvalidMagnitudeError("negative")
        if int_value.bit_length() > cls.BITS:
            raise InvalidMagnitudeError(f"exceeds {cls.BITS} bits")
        return super().__new__(cls, int_value)

    @classmethod
    def from_uint64(cls, value: int) -> Self:
        """
        Create a Uint256 from a uint64.

        Every uint64 fits, so this only fails when `value` is not a uint64.

        Raises:
            Uint256CoercionError: If `value` is not an integer.
            OverflowError: If `value` is outside [0, 2**64 - 1].
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise Uint256CoercionError(type(value).__name__)
        if not (0 <= value <= UINT64_MAX):
            raise OverflowError(f"{value} is out of range for uint64")
        return cls(value)

    @classmethod
    def must(cls, value: int | None) -> Self:
        """
        Create a Uint256 from a magnitude known to be valid.

        Meant for module-level constants. An invalid value is a programming
        error and raises `AssertionError`.
        """
        try:
            return cls(value)
        except Uint256Error as e:
            raise AssertionError(str(e)) from e

    @classmethod
    def must_from_hex(cls, text: str) -> Self:
        """Like `from_hex`, for literals known to be valid. Raises `AssertionError`."""
        try:
            return cls.from_hex(text)
        except Uint256Error as e:
            raise AssertionError(str(e)) from e

    @classmethod
    def zero(cls) -> Self:
        """Return the zero value."""
        return cls()

    @classmethod
    def max_value(cls) -> Self:
        """Return 2**256 - 1."""
        return cls(UINT256_MAX)

    def magnitude(self) -> int:
        """Return the value as a plain `int`, detached from this instance."""
        return int(self)

    # -------------------------------------------------------------------------
    # Bytes
    # -------------------------------------------------------------------------

    def encode_bytes(self) -> bytes:
        """
        Return the minimal big-endian encoding of the value.

        There are no leading zero bytes, except that zero encodes as exactly
        one `0x00` byte. The result is never empty.
        """
        length = max(1, (self.bit_length() + 7) // 8)
        return int(self).to_bytes(length, "big")

    @classmethod
    def decode_bytes(cls, data: Any) -> Self:
        """
        Parse a big-endian byte buffer.

        The length is checked before the bytes are interpreted, so a buffer
        longer than 32 bytes is rejected even if its extra bytes are zeros.
        Leading zero bytes within the limit are ignored.

        Raises:
            InvalidSourceError: If `data` is None or not `bytes`/`bytearray`.
            EmptySourceError: If `data` is empty.
            LengthExceededError: If `data` is longer than 32 bytes.
        """
        if data is None:
            raise InvalidSourceError("invalid source: None")
        if not isinstance(data, (bytes, bytearray)):
            raise InvalidSourceError(f"unsupported source type: {type(data).__name__}")
        if len(data) == 0:
            raise EmptySourceError()
        if len(data) > cls.BYTE_LENGTH:
            raise LengthExceededError(limit=cls.BYTE_LENGTH, actual=len(data))
        return cls(int.from_bytes(data, "big"))

    def __conform__(self, protocol: Any) -> bytes | None:
        """Adapt to a sqlite3 BLOB parameter holding `encode_bytes()`."""
        if protocol is sqlite3.PrepareProtocol:
            return self.encode_bytes()
        return None

    # -------------------------------------------------------------------------
    # Text
    # -------------------------------------------------------------------------

    def hex(self) -> str:
        """Return the canonical `0x`-prefixed lowercase hex form (`0x0` for zero)."""
        return format_hex(int(self))

    def encode_text(self) -> bytes:
        """Return the canonical hex form as ASCII bytes."""
        return self.hex().encode("ascii")

    @classmethod
    def from_hex(cls, text: str) -> Self:
        """
        Parse `0x`/`0X`-prefixed hex text.

        Any number of leading zero digits is accepted. The text is not trimmed.

        Raises:
            MissingPrefixError: If the prefix is missing.
            EmptyHexError: If no digits follow the prefix.
            InvalidHexDigitsError: If a digit is not hex.
            InvalidMagnitudeError: If the value exceeds 256 bits.
        """
        return cls(parse_hex(text))

    @classmethod
    def from_decimal(cls, text: str) -> Self:
        """
        Parse a base-10 literal.

        Raises:
            InvalidDecimalError: If `text` is not a plain digit sequence.
            InvalidMagnitudeError: If the value is negative or exceeds 256 bits.
        """
        return cls(parse_decimal(text))

    @classmethod
    def from_text(cls, text: str | bytes | bytearray) -> Self:
        """
        Parse hex or decimal text after trimming surrounding whitespace.

        A `0x`/`0X` prefix selects hex; anything else is read as decimal.
        """
        if isinstance(text, (bytes, bytearray)):
            try:
                text = text.decode("utf-8")
            except UnicodeDecodeError as e:
                raise InvalidDecimalError("invalid string: not valid utf-8") from e
        return cls(parse_text(text))

    # -------------------------------------------------------------------------
    # JSON
    # -------------------------------------------------------------------------

    def to_json(self) -> str:
        """Return the value as a JSON string token holding the hex form."""
        return json.dumps(self.hex())

    @classmethod
    def from_json(cls, token: bytes | bytearray | str) -> Self:
        """
        Parse a raw JSON token.

        A JSON string is read as hex or decimal text (see `from_text`).
        A JSON number must be a plain integer literal.

        Nested errors keep their class and gain an `invalid json string` or
        `invalid json number` prefix.

        Raises:
            EmptyInputError: If the token is empty.
            NullValueError: If the token is `null`.
            MalformedJSONError: If a quoted token is not a valid JSON string.
            NotAnIntegerError: If a number has a fraction or an exponent.
            InvalidDecimalError: If a bare token is not a JSON integer literal.
        """
        kind, text = classify_json_token(token)
        if kind == "string":
            return cls._decode_in_context("invalid json string", parse_text, text)

        if is_fractional_number(text):
            raise NotAnIntegerError(text).with_context("invalid json number")
        if not is_integer_number(text):
            raise InvalidDecimalError(
                f"invalid decimal string: {short_repr(text)}"
            ).with_context("invalid json number")
        return cls._decode_in_context("invalid json number", parse_decimal, text)

    # -------------------------------------------------------------------------
    # GraphQL scalar
    # -------------------------------------------------------------------------

    def serialize_graphql(self, stream: IO[str]) -> int:
        """
        Write the scalar to `stream` as a quoted hex string.

        Returns:
            The number of characters written.
        """
        return stream.write(self.to_json())

    @classmethod
    def from_graphql(cls, value: Any) -> Self:
        """
        Parse a GraphQL input value.

        Only strings are accepted; they follow the same hex-or-decimal rule
        as `from_text`.

        Raises:
            InvalidSourceError: If `value` is None or not a string.
        """
        if value is None:
            raise InvalidSourceError("invalid graphql value: None")
        if not isinstance(value, str):
            raise InvalidSourceError(f"unsupported graphql value type: {type(value).__name__}")
        return cls._decode_in_context("invalid graphql string", parse_text, value)

    @classmethod
    def _decode_in_context(cls, context: str, parse: Callable[[str], int], text: str) -> Self:
        """Run `parse` and the range check, prefixing any error with `context`."""
        try:
            return cls(parse(text))
        except Uint256Error as e:
            raise e.with_context(context) from e

    # -------------------------------------------------------------------------
    # Pydantic
    # -------------------------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Hook into Pydantic's validation system.

        Python input may be an instance, an int, or hex/decimal text.
        JSON input may be a string or an integer. JSON output is the hex string.
        """

        def validate(value: Any) -> Uint256:
            """Pydantic validation function that routes to the matching constructor."""
            try:
                if isinstance(value, cls):
                    return value
                if isinstance(value, str):
                    return cls.from_text(value)
                return cls(value)
            except Uint256Error as e:
                raise ValueError(str(e)) from e

        json_input = core_schema.union_schema(
            [core_schema.str_schema(strict=True), core_schema.int_schema(strict=True)]
        )

        return core_schema.json_or_python_schema(
            json_schema=core_schema.no_info_after_validator_function(validate, json_input),
            python_schema=core_schema.no_info_plain_validator_function(validate),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda instance: instance.hex(),
                when_used="json",
                return_schema=core_schema.str_schema(),
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        """Hook into Pydantic's JSON Schema generation system."""
        json_schema = handler(core_schema)
        json_schema.update(format=f"uint{cls.BITS}")
        return json_schema

    def __repr__(self) -> str:
        """Return the official string representation of the object."""
        return f"{type(self).__name__}({self.hex()})"

    def __str__(self) -> str:
        """Return the canonical hex form."""
        return self.hex()
