# SPDX-License-Identifier: MIT
# Copyright (c) 2025 easyKV contributors

"""Stdout logger implementation with structured JSON output."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from .logger import Logger


class StdoutLogger(Logger):
    """Logger that outputs structured JSON logs to stdout."""

    def __init__(self, level: str = "INFO", name: str | None = None):
        """Initialize stdout logger.

        Args:
            level: Logging level (DEBUG, INFO, WARNING, ERROR)
            name: Optional logger name for identification
        """
        self.level = level.upper()
        self.name = name or "easykv"

        self._level_map = {
            "DEBUG": logging.DEBUG,
            "INFO": logging.INFO,
            "WARNING": logging.WARNING,
            "ERROR": logging.ERROR,
        }

        if self.level not in self._level_map:
            raise ValueError(f"Invalid log level: {level}. Must be one of {list(self._level_map.keys())}")

        # Configure a stdlib logger so caplog and handlers can capture records
        self._stdlib_logger = logging.getLogger(self.name)
        # NOTSET inherits the root level; filtering happens in _log using self.level
        self._stdlib_logger.setLevel(logging.NOTSET)

    def _log(self, level: str, message: str, **kwargs: Any) -> None:
        """Internal method to format and output log message.

        Args:
            level: Log level
            message: The log message
            **kwargs: Additional structured data to log
        """
        if self._level_map[level] < self._level_map[self.level]:
            return

        exc_info = kwargs.pop("exc_info", None)

        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": level,
            "logger": self.name,
            "message": message,
        }

        if kwargs:
            log_entry["extra"] = kwargs

        try:
            json_output = json.dumps(log_entry, default=str)
            print(json_output, file=sys.stdout, flush=True)
        except (TypeError, ValueError) as e:
            # Fallback to plain text if JSON serialization fails
            print(f"{level}: {message} (JSON serialization failed: {e})", file=sys.stderr, flush=True)

        # Also emit via stdlib logging so test harnesses (caplog) can capture
        extra = {"extra": kwargs} if kwargs else None
        self._stdlib_logger.log(self._level_map[level], message, exc_info=exc_info, extra=extra)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log("ERROR", message, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log("DEBUG", message, **kwargs)
