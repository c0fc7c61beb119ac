# SPDX-License-Identifier: MIT
# Copyright (c) 2025 easyKV contributors

"""Exceptions for easyKV backends."""


class KVError(Exception):
    """Base exception for key-value backend errors."""
    pass


class ConfigurationError(KVError):
    """Raised when the backend is missing or given invalid configuration."""
    pass


class RemoteError(KVError):
    """Raised when the remote store fails to list, read or authenticate.

    Attributes:
        path: Tree path the failing call targeted, if any
    """

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class NotSupportedError(KVError):
    """Raised when a backend does not implement the requested capability."""
    pass
