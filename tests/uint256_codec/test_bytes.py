"""Tests for the big-endian byte encoding of Uint256."""

from __future__ import annotations

from typing import Any

import pytest

from uint256_codec import (
    UINT256_MAX,
    EmptySourceError,
    InvalidSourceError,
    LengthExceededError,
    Uint256,
)

MAX_HEX = "0x" + "f" * 64


class TestEncodeBytes:
    """Tests for the minimal big-endian encoding."""

    @pytest.mark.parametrize(
        ("x256", "expected"),
        [
            (Uint256(), b"\x00"),
            (Uint256.from_uint64(0), b"\x00"),
            (Uint256(1), b"\x01"),
            (Uint256(0xFF), b"\xff"),
            (Uint256(0x100), b"\x01\x00"),
            (Uint256(UINT256_MAX), b"\xff" * 32),
        ],
    )
    def test_encode(self, x256: Uint256, expected: bytes) -> None:
        """encode_bytes produces minimal big-endian bytes."""
        assert x256.encode_bytes() == expected

    def test_zero_is_never_empty(self) -> None:
        """Zero encodes as exactly one zero byte."""
        encoded = Uint256.from_uint64(0).encode_bytes()
        assert encoded == b"\x00"
        assert len(encoded) == 1

    @pytest.mark.parametrize("bits", [1, 7, 8, 9, 64, 255, 256])
    def test_no_leading_zero_bytes(self, bits: int) -> None:
        """The first byte of a non-zero encoding is never zero."""
        encoded = Uint256(2 ** (bits - 1)).encode_bytes()
        assert encoded[0] != 0
        assert len(encoded) == (bits + 7) // 8


class TestDecodeBytes:
    """Tests for decoding a big-endian byte buffer."""

    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            (b"\x00", "0x0"),
            (b"\x00" * 32, "0x0"),
            (b"\x01", "0x1"),
            (b"\x00" * 31 + b"\x01", "0x1"),
            (b"\xff" * 32, MAX_HEX),
            (bytearray(b"\x01\x00"), "0x100"),
        ],
    )
    def test_decode(self, data: bytes, expected: str) -> None:
        """Buffers of 1 to 32 bytes decode, ignoring leading zero bytes."""
        x256 = Uint256.decode_bytes(data)
        assert isinstance(x256, Uint256)
        assert str(x256) == expected

    @pytest.mark.parametrize(
        ("src", "expected_msg"),
        [
            (None, "invalid source: None"),
            (0, "unsupported source type: int"),
            ("0x0", "unsupported source type: str"),
            ([0x01], "unsupported source type: list"),
            (memoryview(b"\x01"), "unsupported source type: memoryview"),
        ],
    )
    def test_unsupported_sources(self, src: Any, expected_msg: str) -> None:
        """Only bytes and bytearray are accepted as carriers."""
        with pytest.raises(InvalidSourceError, match=expected_msg):
            Uint256.decode_bytes(src)

    @pytest.mark.parametrize("data", [b"", bytearray()])
    def test_empty_source(self, data: bytes) -> None:
        """A zero-length buffer is rejected."""
        with pytest.raises(EmptySourceError, match="invalid source: empty bytes"):
            Uint256.decode_bytes(data)

    @pytest.mark.parametrize(
        "data",
        [
            b"\x01" + b"\x00" * 32,
            b"\x00" * 33,
            b"\x00" * 32 + b"\x01",
            b"\xff" * 64,
        ],
        ids=["one-then-zeros", "all-zeros", "leading-zeros-then-one", "64-bytes"],
    )
    def test_length_checked_before_value(self, data: bytes) -> None:
        """Over-length buffers fail by length, even when the value would fit."""
        with pytest.raises(LengthExceededError, match="invalid source: exceeds 32 bytes") as e:
            Uint256.decode_bytes(data)
        assert e.value.limit == 32
        assert e.value.actual == len(data)

    def test_mutating_the_source_does_not_change_the_value(self) -> None:
        """The decoded value is detached from a mutable source buffer."""
        buffer = bytearray(b"\x01\x02")
        x256 = Uint256.decode_bytes(buffer)
        buffer[0] = 0xFF
        buffer.append(0xFF)
        assert x256 == 0x0102
