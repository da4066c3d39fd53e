"""
Global configuration for the uint256 tooling.

Settings are read from the environment once, at import time.
"""

import os

_SUPPORTED_LOG_LEVELS: list[str] = ["DEBUG", "INFO", "WARNING", "ERROR"]

LOG_LEVEL = os.environ.get("UINT256_LOG_LEVEL", "INFO").upper()
"""Default CLI log level when `--verbose` is not given. Defaults to 'INFO'."""

if LOG_LEVEL not in _SUPPORTED_LOG_LEVELS:
    raise ValueError(
        f"Invalid UINT256_LOG_LEVEL environment variable: '{LOG_LEVEL}'. "
        f"Supported values: {_SUPPORTED_LOG_LEVELS}"
    )
