"""Fixed-width 256-bit unsigned integers with strict byte, hex, decimal and JSON codecs."""

from .exceptions import (
    EmptyHexError,
    EmptyInputError,
    EmptySourceError,
    InvalidDecimalError,
    InvalidHexDigitsError,
    InvalidMagnitudeError,
    InvalidSourceError,
    LengthExceededError,
    MalformedJSONError,
    MissingPrefixError,
    NotAnIntegerError,
    NullValueError,
    Uint256CoercionError,
    Uint256Error,
)
from .storage import SQLITE_TYPE_NAME, register_sqlite_types
from .uint256 import UINT256_MAX, Uint256

__all__ = [
    # Core type
    "Uint256",
    "UINT256_MAX",
    # Storage
    "SQLITE_TYPE_NAME",
    "register_sqlite_types",
    # Exceptions
    "Uint256Error",
    "Uint256CoercionError",
    "InvalidMagnitudeError",
    "InvalidSourceError",
    "EmptySourceError",
    "LengthExceededError",
    "MissingPrefixError",
    "EmptyHexError",
    "InvalidHexDigitsError",
    "InvalidDecimalError",
    "EmptyInputError",
    "NullValueError",
    "NotAnIntegerError",
    "MalformedJSONError",
]
