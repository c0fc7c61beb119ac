# SPDX-License-Identifier: MIT
# Copyright (c) 2025 easyKV contributors

"""Factory functions for creating logger instances."""

import os

from .logger import Logger
from .silent_logger import SilentLogger
from .stdout_logger import StdoutLogger

_logger_registry: dict[str, Logger] = {}
_default_logger: Logger | None = None


def _default(value: str | None, env_var: str, fallback: str) -> str:
    """Helper to pick an explicit value, then env var, then fallback."""
    return (value or os.getenv(env_var) or fallback)


def create_logger(
    logger_type: str | None = None,
    level: str | None = None,
    name: str | None = None,
) -> Logger:
    """Factory function to create a logger instance.

    Args:
        logger_type: Type of logger to create. Options: "stdout", "silent".
            Defaults to LOG_TYPE env or "stdout".
        level: Logging level. Options: DEBUG, INFO, WARNING, ERROR.
            Defaults to LOG_LEVEL env or "INFO".
        name: Logger name for identification. Defaults to LOG_NAME env or "easykv".

    Returns:
        Logger instance

    Raises:
        ValueError: If logger_type is not recognized

    Example:
        >>> logger = create_logger(logger_type="stdout", level="DEBUG", name="easykv_vault")
        >>> logger = create_logger(logger_type="silent")
    """
    logger_type = _default(logger_type, "LOG_TYPE", "stdout").lower()
    level = _default(level, "LOG_LEVEL", "INFO").upper()
    name = _default(name, "LOG_NAME", "easykv")

    if logger_type == "stdout":
        return StdoutLogger(level=level, name=name)
    elif logger_type == "silent":
        return SilentLogger(level=level, name=name)
    else:
        raise ValueError(
            f"Unknown logger_type: {logger_type}. "
            f"Must be one of: stdout, silent"
        )


def set_default_logger(logger: Logger) -> None:
    """Install the logger returned by :func:`get_logger` for every name.

    Args:
        logger: Logger instance to use as the process-wide default
    """
    global _default_logger
    _default_logger = logger
    _logger_registry.clear()


def get_logger(name: str) -> Logger:
    """Return a cached logger for ``name``.

    When a default logger has been installed it is returned for every name;
    otherwise a logger is created from the environment and cached.

    Args:
        name: Logger name, usually the module's ``__name__``

    Returns:
        Logger instance
    """
    if name not in _logger_registry:
        _logger_registry[name] = _default_logger or create_logger(name=name)
    return _logger_registry[name]
