# SPDX-License-Identifier: MIT
# Copyright (c) 2025 easyKV contributors

"""HashiCorp Vault read backend."""

from typing import Any, Optional

import hvac
from hvac.exceptions import VaultError
from requests.exceptions import RequestException

from easykv_logging import get_logger

from .auth import AuthType, authenticate, validate_auth_options
from .backend import ReadWatcher
from .exceptions import NotSupportedError, RemoteError
from .flatten import normalize_value
from .options import VaultOptions
from .tls import tls_settings
from .walker import walk_tree

logger = get_logger(__name__)


class VaultClient(ReadWatcher):
    """Backend exposing a Vault tree as a flat mapping of path to string.

    The client authenticates once at construction and reuses the same
    ``hvac.Client`` for every fetch. Every fetch discovers the paths below the
    requested prefixes, reads each one and flattens structured secrets so
    ``{"db": {"user": "a"}}`` stored at ``secret/app`` becomes
    ``secret/app/db/user = a``. A secret stored as ``{"value": "..."}`` is kept
    as a single entry under its own path.

    Example:
        >>> backend = VaultClient(
        ...     "https://vault.example.com:8200",
        ...     "approle",
        ...     VaultOptions(role_id="my-role", secret_id="my-secret"),
        ... )
        >>> backend.get_values(["secret/app"])
        {'secret/app/db/user': 'a', 'secret/app/db/pass': 'b'}

    Attributes:
        address: Vault server URL
        auth_type: Login method used at construction
        client: Authenticated ``hvac.Client``
    """

    def __init__(
        self,
        address: Optional[str],
        auth_type: "str | AuthType",
        options: Optional[VaultOptions] = None,
        client: Any = None,
    ):
        """Validate configuration, build the HTTP client and log in.

        Args:
            address: Vault server URL. When empty, hvac falls back to
                ``VAULT_ADDR`` or its default.
            auth_type: Login method name (see :class:`AuthType`)
            options: Credentials and TLS settings
            client: Pre-built ``hvac.Client`` to authenticate instead of
                creating one

        Raises:
            ConfigurationError: If the auth type or a required option is missing
            RemoteError: If authentication fails
        """
        self.auth_type = AuthType.parse(auth_type)
        self.options = options or VaultOptions()
        validate_auth_options(self.auth_type, self.options)

        self.address = address
        self.client = client if client is not None else self._create_hvac_client(address, self.options)

        authenticate(self.client, self.auth_type, self.options)
        logger.info("Authenticated with Vault", address=address, auth_type=self.auth_type.value)

    @staticmethod
    def _create_hvac_client(address: Optional[str], options: VaultOptions) -> hvac.Client:
        return hvac.Client(url=address or None, timeout=options.timeout, **tls_settings(options))

    def _call(self, operation: str, path: str) -> Any:
        """Run a single ``list`` or ``read`` request, wrapping failures."""
        try:
            return getattr(self.client, operation)(path.lstrip("/"))
        except (VaultError, RequestException) as e:
            logger.exception(f"Vault {operation} failed", path=path)
            raise RemoteError(f"Failed to {operation} '{path}': {e}", path=path) from e

    def _list_children(self, path: str) -> Any:
        response = self._call("list", path)
        if not isinstance(response, dict):
            return None
        data = response.get("data")
        if not isinstance(data, dict):
            return None
        return data.get("keys")

    def _read_value(self, path: str) -> Any:
        response = self._call("read", path)
        if not isinstance(response, dict):
            return None
        return response.get("data")

    def get_values(self, keys: list[str]) -> dict[str, str]:
        """Fetch and flatten every value below ``keys``.

        Args:
            keys: Prefixes to fetch

        Returns:
            Mapping of path to string value

        Raises:
            RemoteError: On the first failed list or read; no partial result
                is returned
        """
        if isinstance(keys, str):
            keys = [keys]

        branches = walk_tree(self._list_children, keys)

        values: dict[str, str] = {}
        for path in sorted(branches):
            data = self._read_value(path)
            if data is None:
                # Branch without a value of its own
                continue
            normalize_value(path, data, values)

        logger.info(
            "Fetched values from Vault",
            prefixes=len(set(keys)),
            paths=len(branches),
            values=len(values),
        )
        return values

    def watch_prefix(
        self,
        prefix: str,
        wait_index: int = 0,
        keys: Optional[list[str]] = None,
    ) -> int:
        """Watching is not available for Vault.

        Raises:
            NotSupportedError: Always
        """
        raise NotSupportedError("watch is not supported by the vault backend")

    def close(self) -> None:
        """Nothing to release; the hvac client holds no per-fetch state."""
        pass
