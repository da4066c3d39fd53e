"""Exception hierarchy for the uint256 codecs."""

from __future__ import annotations

from typing_extensions import Self


class Uint256Error(Exception):
    """
    Base exception for all uint256 construction and decoding errors.

    Attributes:
        message: Human-readable error description.
        context: The decoder branch that wrapped this error, if any.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        self.context: str | None = None
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"

    def with_context(self, context: str) -> Self:
        """
        Return a copy of this error with `context` prefixed to its message.

        The copy keeps the original class, so the error kind survives the
        wrapping. Raise it `from` the original error.
        """
        wrapped = self.__class__.__new__(self.__class__)
        wrapped.__dict__.update(self.__dict__)
        wrapped.message = f"{context}: {self.message}"
        wrapped.context = context if self.context is None else f"{context}: {self.context}"
        wrapped.args = (wrapped.message,)
        return wrapped


class Uint256CoercionError(Uint256Error, TypeError):
    """
    Raised when a constructor argument is not an integer at all.

    Attributes:
        actual_type: The name of the type that was supplied.
    """

    def __init__(self, actual_type: str) -> None:
        self.actual_type = actual_type
        super().__init__(f"Expected int, got {actual_type}")


class InvalidMagnitudeError(Uint256Error):
    """
    Raised when a magnitude is absent, negative, or wider than 256 bits.

    Attributes:
        reason: Short description of the violated bound.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"invalid magnitude: {reason}")


class InvalidSourceError(Uint256Error):
    """Raised when a decoder is handed `None` or a carrier of the wrong type."""


class EmptySourceError(Uint256Error):
    """Raised when a byte buffer has zero length."""

    def __init__(self) -> None:
        super().__init__("invalid source: empty bytes")


class LengthExceededError(Uint256Error):
    """
    Raised when a byte buffer is longer than the type allows.

    Attributes:
        limit: The maximum number of bytes accepted.
        actual: The number of bytes received.
    """

    def __init__(self, *, limit: int, actual: int) -> None:
        self.limit = limit
        self.actual = actual
        super().__init__(f"invalid source: exceeds {limit} bytes, got {actual}")


class MissingPrefixError(Uint256Error):
    """Raised when a hex string does not start with `0x` or `0X`."""


class EmptyHexError(Uint256Error):
    """Raised when a hex string holds the prefix and nothing else."""

    def __init__(self) -> None:
        super().__init__("invalid hex string: missing hex digits after 0x/0X prefix")


class InvalidHexDigitsError(Uint256Error):
    """Raised when the digit part of a hex string contains non-hex characters."""

    def __init__(self, digits: str) -> None:
        self.digits = digits
        super().__init__(f"invalid hex string: invalid hex digits {short_repr(digits)}")


class InvalidDecimalError(Uint256Error):
    """Raised when a decimal string is not a plain base-10 integer literal."""


class EmptyInputError(Uint256Error):
    """Raised when a JSON token is empty."""

    def __init__(self) -> None:
        super().__init__("invalid json value: empty")


class NullValueError(Uint256Error):
    """Raised when a JSON token is the `null` literal."""

    def __init__(self) -> None:
        super().__init__("invalid json value: null")


class NotAnIntegerError(Uint256Error):
    """Raised when a JSON number has a fractional part or an exponent."""

    def __init__(self, literal: str) -> None:
        self.literal = literal
        super().__init__(f"not an integer: {short_repr(literal)}")


class MalformedJSONError(Uint256Error):
    """Raised when a quoted JSON token is not a valid JSON string."""


def short_repr(value: str) -> str:
    """Repr `value`, cut down so huge inputs do not flood the message."""
    value_repr = repr(value)
    if len(value_repr) > 50:
        value_repr = value_repr[:47] + "..."
    return value_repr
