"""Tests for the conversion CLI."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest

from uint256_codec.__main__ import ColoredFormatter, convert, decode_byte_dump, main
from uint256_codec.exceptions import EmptySourceError, InvalidSourceError, LengthExceededError

MAX_HEX = "0x" + "f" * 64
MAX_DECIMAL = "115792089237316195423570985008687907853269984665640564039457584007913129639935"


@pytest.fixture(autouse=True)
def restore_root_logger() -> Generator[None, None, None]:
    """Undo the handlers and level that setup_logging installs on the root logger."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestConvert:
    """Tests for the conversion function behind the CLI."""

    @pytest.mark.parametrize(
        ("value", "source", "target", "expected"),
        [
            ("255", "auto", "hex", "0xff"),
            ("0xff", "auto", "decimal", "255"),
            ("0XFF", "hex", "json", '"0xff"'),
            ("0", "decimal", "bytes", "00"),
            ('"0x0100"', "json", "bytes", "0100"),
            (MAX_DECIMAL, "decimal", "hex", MAX_HEX),
            ("ff" * 32, "bytes", "decimal", MAX_DECIMAL),
            ("0x00ff", "bytes", "hex", "0xff"),
        ],
    )
    def test_convert(self, value: str, source: str, target: str, expected: str) -> None:
        """Values are decoded by the source codec and rendered by the target one."""
        assert convert(value, source, target) == expected


class TestDecodeByteDump:
    """Tests for reading hex dumps of raw byte buffers."""

    def test_valid(self) -> None:
        """An even-length hex dump is decoded as big-endian bytes."""
        assert decode_byte_dump("0001") == 1

    def test_not_hex(self) -> None:
        """A dump that is not hex is an invalid source."""
        with pytest.raises(InvalidSourceError, match="invalid byte dump"):
            decode_byte_dump("zz")

    def test_empty(self) -> None:
        """An empty dump is an empty buffer."""
        with pytest.raises(EmptySourceError):
            decode_byte_dump("")

    def test_too_long(self) -> None:
        """A dump of more than 32 bytes is rejected by length."""
        with pytest.raises(LengthExceededError):
            decode_byte_dump("00" * 33)


class TestMain:
    """Tests for the command-line entry point."""

    def test_success_prints_result(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A valid value is printed in the target format with exit status 0."""
        assert main(["0xff", "--to", "decimal", "--no-color"]) == 0
        assert capsys.readouterr().out == "255\n"

    def test_default_target_is_hex(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Without --to the canonical hex form is printed."""
        assert main(["0000255", "--no-color"]) == 0
        assert capsys.readouterr().out == "0xff\n"

    def test_json_input(self, capsys: pytest.CaptureFixture[str]) -> None:
        """JSON tokens can be given on the command line."""
        assert main(['"0x01"', "--from", "json", "--to", "bytes", "--no-color"]) == 0
        assert capsys.readouterr().out == "01\n"

    @pytest.mark.parametrize(
        "argv",
        [
            ["0xg"],
            ["-1"],
            ["1.5", "--from", "json"],
            ["zz", "--from", "bytes"],
        ],
    )
    def test_decode_error_exits_nonzero(
        self,
        argv: list[str],
        capsys: pytest.CaptureFixture[str],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Invalid input is logged as an error and the exit status is 1."""
        with caplog.at_level(logging.ERROR):
            assert main([*argv, "--no-color"]) == 1
        assert capsys.readouterr().out == ""
        assert "Cannot decode" in caplog.text

    def test_verbose_logs_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """--verbose enables debug output from the conversion."""
        with caplog.at_level(logging.DEBUG):
            assert main(["1", "--verbose", "--no-color"]) == 0
        assert "Decoding '1' as auto" in caplog.text

    def test_unknown_format_is_a_usage_error(self) -> None:
        """argparse rejects formats that have no codec."""
        with pytest.raises(SystemExit) as exc_info:
            main(["1", "--to", "octal"])
        assert exc_info.value.code == 2


class TestColoredFormatter:
    """Tests for the colored log formatter."""

    def test_format_includes_parts(self) -> None:
        """The formatted line carries the level, logger name and message."""
        record = logging.LogRecord(
            name="uint256_codec",
            level=logging.ERROR,
            pathname=__file__,
            lineno=1,
            msg="bad %s",
            args=("value",),
            exc_info=None,
        )
        line = ColoredFormatter().format(record)
        assert "ERROR" in line
        assert "uint256_codec" in line
        assert line.endswith("bad value")
