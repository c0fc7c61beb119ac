# SPDX-License-Identifier: MIT
# Copyright (c) 2025 easyKV contributors

"""Vault authentication methods."""

from enum import Enum
from pathlib import Path
from typing import Any, Callable

from hvac.exceptions import VaultError
from requests.exceptions import RequestException

from easykv_logging import get_logger

from .exceptions import ConfigurationError, RemoteError
from .options import VaultOptions

logger = get_logger(__name__)


class AuthType(str, Enum):
    """Supported Vault authentication methods."""

    APPROLE = "approle"
    APP_ID = "app-id"
    GITHUB = "github"
    TOKEN = "token"
    USERPASS = "userpass"
    KUBERNETES = "kubernetes"
    CERT = "cert"

    @classmethod
    def parse(cls, value: "str | AuthType") -> "AuthType":
        """Resolve an auth method name.

        Raises:
            ConfigurationError: If ``value`` is empty or not a known method
        """
        if isinstance(value, cls):
            return value
        if not value:
            raise ConfigurationError("you have to set the auth type when using the vault backend")
        try:
            return cls(value.strip().lower())
        except ValueError as e:
            raise ConfigurationError(
                f"Unknown auth type: {value}. "
                f"Available: {', '.join(member.value for member in cls)}"
            ) from e


# Options each method needs before any request is made
REQUIRED_OPTIONS: dict[AuthType, tuple[str, ...]] = {
    AuthType.APPROLE: ("role_id", "secret_id"),
    AuthType.APP_ID: ("app_id", "user_id"),
    AuthType.GITHUB: ("token",),
    AuthType.TOKEN: ("token",),
    AuthType.USERPASS: ("username", "password"),
    AuthType.KUBERNETES: ("role_id",),
    AuthType.CERT: ("client_cert", "client_key"),
}


def validate_auth_options(auth_type: AuthType, options: VaultOptions) -> None:
    """Check that every option required by ``auth_type`` is set.

    Raises:
        ConfigurationError: Naming all missing options at once
    """
    missing = [name for name in REQUIRED_OPTIONS[auth_type] if not options.get(name)]
    if missing:
        raise ConfigurationError(
            f"{', '.join(missing)} {'is' if len(missing) == 1 else 'are'} missing "
            f"from configuration for auth type '{auth_type.value}'"
        )


def _read_kubernetes_jwt(path: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8").strip()
    except OSError as e:
        raise ConfigurationError(f"Unable to read Kubernetes service account token at {path}: {e}") from e


def _login_approle(client: Any, options: VaultOptions) -> Any:
    return client.auth.approle.login(role_id=options.role_id, secret_id=options.secret_id)


def _login_app_id(client: Any, options: VaultOptions) -> Any:
    return client.login(
        "/v1/auth/app-id/login",
        json={"app_id": options.app_id, "user_id": options.user_id},
    )


def _login_github(client: Any, options: VaultOptions) -> Any:
    return client.auth.github.login(token=options.token)


def _login_token(client: Any, options: VaultOptions) -> Any:
    client.token = options.token
    return client.auth.token.lookup_self()


def _login_userpass(client: Any, options: VaultOptions) -> Any:
    return client.auth.userpass.login(username=options.username, password=options.password)


def _login_kubernetes(client: Any, options: VaultOptions) -> Any:
    jwt = _read_kubernetes_jwt(options.kubernetes_token_path)
    return client.auth.kubernetes.login(role=options.role_id, jwt=jwt)


def _login_cert(client: Any, options: VaultOptions) -> Any:
    # The client certificate is presented by the HTTP session
    return client.login("/v1/auth/cert/login")


_LOGIN_METHODS: dict[AuthType, Callable[[Any, VaultOptions], Any]] = {
    AuthType.APPROLE: _login_approle,
    AuthType.APP_ID: _login_app_id,
    AuthType.GITHUB: _login_github,
    AuthType.TOKEN: _login_token,
    AuthType.USERPASS: _login_userpass,
    AuthType.KUBERNETES: _login_kubernetes,
    AuthType.CERT: _login_cert,
}


def authenticate(client: Any, auth_type: AuthType, options: VaultOptions) -> None:
    """Log in to Vault and leave a usable token on ``client``.

    Options must already have passed :func:`validate_auth_options`.

    Args:
        client: ``hvac.Client`` to authenticate
        auth_type: Login method
        options: Credentials for the method

    Raises:
        ConfigurationError: If local credentials (Kubernetes JWT) are unreadable
        RemoteError: If Vault rejects the login or returns no token
    """
    try:
        response = _LOGIN_METHODS[auth_type](client, options)
    except (VaultError, RequestException) as e:
        raise RemoteError(f"Vault {auth_type.value} authentication failed: {e}") from e

    # Most login methods install the token themselves
    if client.token:
        return

    auth = response.get("auth") if isinstance(response, dict) else None
    token = auth.get("client_token") if isinstance(auth, dict) else None
    if not token:
        raise RemoteError(f"Vault {auth_type.value} login did not return a client token")

    client.token = token
    logger.debug("Installed client token from login response", auth_type=auth_type.value)
