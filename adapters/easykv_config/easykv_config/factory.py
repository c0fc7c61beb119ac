# SPDX-License-Identifier: MIT
# Copyright (c) 2025 easyKV contributors

"""Factory helpers for configuration providers."""

from typing import Any, Optional

from .base import ConfigProvider
from .env_provider import EnvConfigProvider
from .static_provider import StaticConfigProvider


def create_config_provider(provider_type: Optional[str] = None, **kwargs: Any) -> ConfigProvider:
    """Create a configuration provider by type.

    Args:
        provider_type: Type of config provider (required). Options: "env", "static"
        **kwargs: Passed to the provider constructor (``environ`` for "env",
            ``config`` for "static")

    Returns:
        ConfigProvider instance

    Raises:
        ValueError: If provider_type is missing or unknown
    """
    if not provider_type:
        raise ValueError(
            "provider_type parameter is required. "
            "Must be one of: env, static"
        )

    provider_type = provider_type.lower()

    if provider_type == "env":
        return EnvConfigProvider(**kwargs)
    if provider_type == "static":
        return StaticConfigProvider(**kwargs)

    raise ValueError(
        f"Unknown provider_type: {provider_type}. "
        f"Must be one of: env, static"
    )
