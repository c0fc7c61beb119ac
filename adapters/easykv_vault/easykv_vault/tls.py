# SPDX-License-Identifier: MIT
# Copyright (c) 2025 easyKV contributors

"""TLS settings for the Vault HTTP client."""

from pathlib import Path
from typing import Any

from easykv_logging import get_logger

from .exceptions import ConfigurationError
from .options import VaultOptions

logger = get_logger(__name__)


def _require_file(path: str, description: str) -> str:
    if not Path(path).is_file():
        raise ConfigurationError(f"{description} not found: {path}")
    return path


def tls_settings(options: VaultOptions) -> dict[str, Any]:
    """Translate TLS options into ``hvac.Client`` keyword arguments.

    A client certificate is only presented when both the certificate and the
    key are configured. The CA bundle, when set, replaces the system trust
    store for verifying the server.

    Raises:
        ConfigurationError: If a configured file does not exist
    """
    settings: dict[str, Any] = {"verify": True}

    cert, key = options.get("client_cert"), options.get("client_key")
    if cert and key:
        settings["cert"] = (
            _require_file(cert, "Client certificate"),
            _require_file(key, "Client key"),
        )
    elif cert or key:
        logger.warning("Ignoring client certificate: both certificate and key are required")

    ca_cert = options.get("client_ca_keys")
    if ca_cert:
        settings["verify"] = _require_file(ca_cert, "CA certificate")

    return settings
