# SPDX-License-Identifier: MIT
# Copyright (c) 2025 easyKV contributors

"""Test fixtures for the easykv_vault adapter."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest


class FakeHvacClient:
    """In-memory stand-in for ``hvac.Client``.

    ``listings`` maps a path to the ``keys`` returned by LIST and ``secrets``
    maps a path to the ``data`` returned by READ. Paths without an entry
    behave like Vault's 404, which hvac reports as ``None``. Errors registered
    in ``list_errors``/``read_errors`` are raised for that path.
    """

    def __init__(
        self,
        listings: dict[str, Any] | None = None,
        secrets: dict[str, Any] | None = None,
    ):
        self.listings = listings or {}
        self.secrets = secrets or {}
        self.list_errors: dict[str, Exception] = {}
        self.read_errors: dict[str, Exception] = {}
        self.list_calls: list[str] = []
        self.read_calls: list[str] = []
        self.token = "s.test-token"
        self.auth = MagicMock(name="auth")
        self.login = MagicMock(name="login")

    def list(self, path: str) -> dict[str, Any] | None:
        self.list_calls.append(path)
        if path in self.list_errors:
            raise self.list_errors[path]
        if path not in self.listings:
            return None
        return {"data": {"keys": self.listings[path]}}

    def read(self, path: str) -> dict[str, Any] | None:
        self.read_calls.append(path)
        if path in self.read_errors:
            raise self.read_errors[path]
        if path not in self.secrets:
            return None
        return {"data": self.secrets[path]}


@pytest.fixture
def fake_hvac() -> FakeHvacClient:
    """A small tree with a scalar secret, a structured secret and a branch."""
    return FakeHvacClient(
        listings={
            "secret": ["app/", "token"],
            "secret/app": ["db", "config/"],
            "secret/app/config": ["flags"],
        },
        secrets={
            "secret/token": {"value": "hello"},
            "secret/app/db": {"user": "a", "pass": "b"},
            "secret/app/config/flags": {"debug": "true", "retries": 3},
        },
    )


@pytest.fixture
def token_options():
    from easykv_vault import VaultOptions

    return VaultOptions(token="s.test-token")


@pytest.fixture
def make_fake_hvac():
    """Factory for FakeHvacClient instances with custom trees."""
    return FakeHvacClient
