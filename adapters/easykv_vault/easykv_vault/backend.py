# SPDX-License-Identifier: MIT
# Copyright (c) 2025 easyKV contributors

"""Base read/watch backend interface."""

from abc import ABC, abstractmethod
from typing import Optional


class ReadWatcher(ABC):
    """Abstract base class for key-value backends consumed by config renderers.

    Implementations expose a remote store as a flat mapping of path to string
    and optionally support watching a prefix for changes.
    """

    @abstractmethod
    def get_values(self, keys: list[str]) -> dict[str, str]:
        """Look up every value below the given prefixes.

        Args:
            keys: Prefixes to fetch; duplicates are ignored

        Returns:
            Mapping of path to string value

        Raises:
            RemoteError: If the remote store fails while fetching
        """
        pass

    @abstractmethod
    def watch_prefix(
        self,
        prefix: str,
        wait_index: int = 0,
        keys: Optional[list[str]] = None,
    ) -> int:
        """Block until something below ``prefix`` changes.

        Args:
            prefix: Prefix to watch
            wait_index: Index returned by the previous call, 0 on first call
            keys: Optional subset of keys of interest

        Returns:
            Index to pass to the next call

        Raises:
            NotSupportedError: If the backend cannot watch
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Release any resources held by this backend."""
        pass

    def __enter__(self) -> "ReadWatcher":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
