"""
uint256 conversion CLI entry point.

Convert one value between the uint256 representations.

Usage::

    python -m uint256_codec 0xff
    python -m uint256_codec 255 --to json
    python -m uint256_codec '"0x01"' --from json --to decimal
    python -m uint256_codec 00ff --from bytes --to hex

Options:
    --from        Input format: auto, hex, decimal, json, bytes (default: auto)
    --to          Output format: hex, decimal, json, bytes (default: hex)
    -v/--verbose  Enable debug logging
    --no-color    Disable colored logging output

The `bytes` format is the hex dump of the raw big-endian buffer, without a
`0x` prefix. `auto` reads `0x`-prefixed input as hex and anything else as decimal.
"""

from __future__ import annotations

import argparse
import logging
from typing import Callable

from uint256_codec import config
from uint256_codec.exceptions import InvalidSourceError, Uint256Error
from uint256_codec.uint256 import Uint256

logger = logging.getLogger(__name__)


def decode_byte_dump(text: str) -> Uint256:
    """
    Decode a hex dump of a big-endian buffer.

    Raises:
        InvalidSourceError: If `text` is not an even-length run of hex digits.
    """
    try:
        data = bytes.fromhex(text.removeprefix("0x"))
    except ValueError as e:
        raise InvalidSourceError(f"invalid byte dump: {e}") from e
    return Uint256.decode_bytes(data)


DECODERS: dict[str, Callable[[str], Uint256]] = {
    "auto": Uint256.from_text,
    "hex": Uint256.from_hex,
    "decimal": Uint256.from_decimal,
    "json": Uint256.from_json,
    "bytes": decode_byte_dump,
}
"""Input parsers, keyed by the `--from` choice."""

ENCODERS: dict[str, Callable[[Uint256], str]] = {
    "hex": Uint256.hex,
    "decimal": lambda value: str(value.magnitude()),
    "json": Uint256.to_json,
    "bytes": lambda value: value.encode_bytes().hex(),
}
"""Output renderers, keyed by the `--to` choice."""


def convert(value: str, source_format: str, target_format: str) -> str:
    """
    Decode `value` from one representation and render it in another.

    Raises:
        Uint256Error: If `value` is not valid in `source_format`.
    """
    logger.debug("Decoding %r as %s", value, source_format)
    decoded = DECODERS[source_format](value)
    logger.debug("Decoded %r, rendering as %s", decoded, target_format)
    return ENCODERS[target_format](decoded)


class ColoredFormatter(logging.Formatter):
    """Logging formatter with ANSI colors for better readability."""

    # ANSI color codes
    GREY = "\x1b[38;5;244m"
    BLUE = "\x1b[38;5;39m"
    GREEN = "\x1b[38;5;40m"
    YELLOW = "\x1b[38;5;220m"
    RED = "\x1b[38;5;196m"
    CYAN = "\x1b[38;5;51m"
    RESET = "\x1b[0m"

    LEVEL_COLORS = {
        logging.DEBUG: GREY,
        logging.INFO: GREEN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors."""
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)
        timestamp = f"{self.CYAN}{self.formatTime(record, self.datefmt)}{self.RESET}"
        levelname = f"{color}{record.levelname:8}{self.RESET}"
        name = f"{self.BLUE}{record.name}{self.RESET}"
        return f"{timestamp} {levelname} {name}: {record.getMessage()}"


def setup_logging(verbose: bool = False, no_color: bool = False) -> None:
    """Configure logging for the CLI with optional colors."""
    level = "DEBUG" if verbose else config.LOG_LEVEL

    handler = logging.StreamHandler()
    handler.setLevel(level)

    if no_color:
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = ColoredFormatter(datefmt="%Y-%m-%d %H:%M:%S")

    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit status."""
    parser = argparse.ArgumentParser(
        description="Convert a uint256 between representations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("value", help="The value to convert")
    parser.add_argument(
        "--from",
        dest="source_format",
        choices=sorted(DECODERS),
        default="auto",
        help="Input format (default: auto)",
    )
    parser.add_argument(
        "--to",
        dest="target_format",
        choices=sorted(ENCODERS),
        default="hex",
        help="Output format (default: hex)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored logging output",
    )

    args = parser.parse_args(argv)

    setup_logging(args.verbose, args.no_color)

    try:
        output = convert(args.value, args.source_format, args.target_format)
    except Uint256Error as e:
        logger.error("Cannot decode %r as %s: %s", args.value, args.source_format, e)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
