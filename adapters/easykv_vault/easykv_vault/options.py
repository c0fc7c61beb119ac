# SPDX-License-Identifier: MIT
# Copyright (c) 2025 easyKV contributors

"""Vault backend options and their environment configuration."""

from dataclasses import dataclass, fields
from typing import Optional

from easykv_config import ConfigProvider

DEFAULT_KUBERNETES_TOKEN_PATH = "/var/run/secrets/kubernetes.io/serviceaccount/token"
DEFAULT_TIMEOUT = 30

# Option field -> configuration key
OPTION_KEYS = {
    "role_id": "VAULT_ROLE_ID",
    "secret_id": "VAULT_SECRET_ID",
    "app_id": "VAULT_APP_ID",
    "user_id": "VAULT_USER_ID",
    "username": "VAULT_USERNAME",
    "password": "VAULT_PASSWORD",
    "token": "VAULT_TOKEN",
    "client_cert": "VAULT_CLIENT_CERT",
    "client_key": "VAULT_CLIENT_KEY",
    "client_ca_keys": "VAULT_CACERT",
    "kubernetes_token_path": "VAULT_KUBERNETES_TOKEN_PATH",
}


@dataclass
class VaultOptions:
    """Credentials and transport settings for the Vault backend.

    Only the fields required by the selected auth method need to be set.

    Attributes:
        role_id: AppRole role ID, also the Kubernetes role name
        secret_id: AppRole secret ID
        app_id: App ID for the app-id method
        user_id: User ID for the app-id method
        username: Username for the userpass method
        password: Password for the userpass method
        token: Vault token (token method) or GitHub personal token (github method)
        client_cert: PEM client certificate path for mutual TLS
        client_key: PEM client key path for mutual TLS
        client_ca_keys: CA bundle path used to verify the Vault server
        kubernetes_token_path: Service account JWT file for the kubernetes method
        timeout: Per-request timeout in seconds
    """

    role_id: Optional[str] = None
    secret_id: Optional[str] = None
    app_id: Optional[str] = None
    user_id: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    token: Optional[str] = None
    client_cert: Optional[str] = None
    client_key: Optional[str] = None
    client_ca_keys: Optional[str] = None
    kubernetes_token_path: str = DEFAULT_KUBERNETES_TOKEN_PATH
    timeout: int = DEFAULT_TIMEOUT

    def get(self, name: str) -> Optional[str]:
        """Return the option value, treating empty strings as unset."""
        return getattr(self, name) or None

    def __repr__(self) -> str:
        # Never render credentials
        set_fields = [f.name for f in fields(self) if getattr(self, f.name)]
        return f"VaultOptions(set={set_fields})"


def load_vault_options(config: ConfigProvider) -> VaultOptions:
    """Build VaultOptions from a configuration provider.

    Args:
        config: Provider holding the ``VAULT_*`` keys listed in ``OPTION_KEYS``
            plus ``VAULT_TIMEOUT``

    Returns:
        VaultOptions with every configured value applied
    """
    values = {}
    for field_name, key in OPTION_KEYS.items():
        value = config.get(key)
        if value:
            values[field_name] = value
    values["timeout"] = config.get_int("VAULT_TIMEOUT", DEFAULT_TIMEOUT)
    return VaultOptions(**values)
