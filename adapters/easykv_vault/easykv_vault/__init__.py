# SPDX-License-Identifier: MIT
# Copyright (c) 2025 easyKV contributors

"""HashiCorp Vault backend for easyKV.

Exposes a Vault tree as a flat mapping of path to string for configuration
templating. Every leaf below the requested prefixes is discovered, read and
flattened.

Example:
    >>> from easykv_vault import create_vault_client
    >>> backend = create_vault_client(address="http://127.0.0.1:8200",
    ...                               auth_type="token", token="s.abc")
    >>> values = backend.get_values(["secret/app"])
"""

from .auth import AuthType
from .backend import ReadWatcher
from .client import VaultClient
from .exceptions import ConfigurationError, KVError, NotSupportedError, RemoteError
from .factory import create_backend, create_vault_client
from .flatten import flatten, is_kv, normalize_value
from .options import VaultOptions, load_vault_options
from .walker import join_path, normalize_path, walk_tree

__all__ = [
    "ReadWatcher",
    "VaultClient",
    "VaultOptions",
    "AuthType",
    "create_backend",
    "create_vault_client",
    "load_vault_options",
    "walk_tree",
    "normalize_path",
    "join_path",
    "is_kv",
    "flatten",
    "normalize_value",
    "KVError",
    "ConfigurationError",
    "RemoteError",
    "NotSupportedError",
]

__version__ = "0.1.0"
