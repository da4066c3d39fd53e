"""
SQLite binding for uint256 columns.

Values are stored as BLOBs holding the minimal big-endian encoding
(`Uint256.encode_bytes`). Writing needs no setup: `Uint256.__conform__`
adapts an instance bound as a query parameter. Reading back as `Uint256`
needs the converter registered here and a connection opened with
`detect_types=sqlite3.PARSE_DECLTYPES` on a column declared `UINT256`.
"""

from __future__ import annotations

import logging
import sqlite3

from .uint256 import Uint256

SQLITE_TYPE_NAME = "UINT256"
"""Declared column type that triggers the uint256 converter."""

logger = logging.getLogger(__name__)


def register_sqlite_types(type_name: str = SQLITE_TYPE_NAME) -> None:
    """
    Register the uint256 converter with the sqlite3 module.

    The registration is process-wide. Calling it again is harmless.

    Args:
        type_name: Declared column type to convert. Matched case-insensitively.
    """
    # NULL never reaches a converter; sqlite3 returns None for it directly.
    sqlite3.register_converter(type_name, Uint256.decode_bytes)
    logger.debug("Registered sqlite3 converter for %s columns", type_name)
