# SPDX-License-Identifier: MIT
# Copyright (c) 2025 easyKV contributors

"""easyKV Configuration Adapter.

Configuration providers used to assemble backend settings from the
process environment or from static values.
"""

__version__ = "0.1.0"

from .base import ConfigProvider
from .env_provider import EnvConfigProvider
from .factory import create_config_provider
from .static_provider import StaticConfigProvider

__all__ = [
    "__version__",
    "ConfigProvider",
    "EnvConfigProvider",
    "StaticConfigProvider",
    "create_config_provider",
]
