# SPDX-License-Identifier: MIT
# Copyright (c) 2025 easyKV contributors

"""Factory for creating easyKV backends."""

import dataclasses
from typing import Any, Optional, cast

from easykv_config import ConfigProvider, create_config_provider

from .backend import ReadWatcher
from .client import VaultClient
from .exceptions import ConfigurationError
from .options import load_vault_options


def create_backend(backend_type: str, **kwargs: Any) -> ReadWatcher:
    """Factory function to create read backends.

    Args:
        backend_type: Type of backend to create ("vault")
        **kwargs: Backend-specific configuration

    Returns:
        ReadWatcher instance

    Raises:
        ConfigurationError: If backend_type is unknown

    Example:
        >>> backend = create_backend("vault", address="http://127.0.0.1:8200",
        ...                          auth_type="token", options=VaultOptions(token="s.abc"))
    """
    backends: dict[str, type] = {
        "vault": VaultClient,
    }

    if backend_type not in backends:
        raise ConfigurationError(
            f"Unknown backend type: {backend_type}. "
            f"Available: {', '.join(backends.keys())}"
        )

    return cast(ReadWatcher, backends[backend_type](**kwargs))


def create_vault_client(config: Optional[ConfigProvider] = None, **overrides: Any) -> VaultClient:
    """Create a VaultClient from configuration.

    Reads ``VAULT_ADDR``, ``VAULT_AUTH_TYPE`` and the option keys of
    :func:`load_vault_options` from ``config`` (the process environment by
    default). Keyword overrides win over configured values.

    Args:
        config: Configuration provider
        **overrides: ``address``, ``auth_type``, ``client`` or any
            :class:`VaultOptions` field

    Returns:
        Authenticated VaultClient

    Raises:
        ConfigurationError: If configuration is incomplete or an override is unknown
        RemoteError: If authentication fails
    """
    config = config if config is not None else create_config_provider("env")

    address = overrides.pop("address", None) or config.get("VAULT_ADDR")
    auth_type = overrides.pop("auth_type", None) or config.get("VAULT_AUTH_TYPE")
    client = overrides.pop("client", None)

    options = load_vault_options(config)
    if overrides:
        try:
            options = dataclasses.replace(options, **overrides)
        except TypeError as e:
            raise ConfigurationError(f"Unknown vault option: {e}") from e

    return VaultClient(address, auth_type, options=options, client=client)
