# SPDX-License-Identifier: MIT
# Copyright (c) 2025 easyKV contributors

"""easyKV Logging Adapter.

Structured, configurable logging shared by the easyKV backends.

Example:
    >>> from easykv_logging import create_logger
    >>> logger = create_logger(logger_type="stdout", level="INFO", name="easykv_vault")
    >>> logger.info("Fetched values", prefixes=2, values=14)
    >>>
    >>> # Capture logs in memory for tests
    >>> test_logger = create_logger(logger_type="silent")
    >>> test_logger.info("Test message")
"""

__version__ = "0.1.0"

from .factory import create_logger, get_logger, set_default_logger
from .logger import Logger
from .silent_logger import SilentLogger
from .stdout_logger import StdoutLogger

__all__ = [
    "__version__",
    "Logger",
    "StdoutLogger",
    "SilentLogger",
    "create_logger",
    "get_logger",
    "set_default_logger",
]
