# SPDX-License-Identifier: MIT
# Copyright (c) 2025 easyKV contributors

"""Tests for Vault options and TLS settings."""

import pytest

from easykv_config import StaticConfigProvider
from easykv_vault import ConfigurationError, VaultOptions, load_vault_options
from easykv_vault.options import DEFAULT_KUBERNETES_TOKEN_PATH
from easykv_vault.tls import tls_settings


class TestVaultOptions:
    """Tests for VaultOptions."""

    def test_defaults(self):
        options = VaultOptions()

        assert options.token is None
        assert options.kubernetes_token_path == DEFAULT_KUBERNETES_TOKEN_PATH
        assert options.timeout == 30

    def test_get_treats_empty_as_unset(self):
        options = VaultOptions(token="", username="alice")

        assert options.get("token") is None
        assert options.get("username") == "alice"

    def test_repr_hides_credentials(self):
        options = VaultOptions(token="s.very-secret", password="hunter2")

        assert "s.very-secret" not in repr(options)
        assert "hunter2" not in repr(options)
        assert "token" in repr(options)


class TestLoadVaultOptions:
    """Tests for load_vault_options."""

    def test_reads_configuration_keys(self):
        config = StaticConfigProvider({
            "VAULT_ROLE_ID": "role",
            "VAULT_SECRET_ID": "secret",
            "VAULT_CACERT": "/etc/ssl/vault-ca.pem",
            "VAULT_TIMEOUT": "45",
        })

        options = load_vault_options(config)

        assert options.role_id == "role"
        assert options.secret_id == "secret"
        assert options.client_ca_keys == "/etc/ssl/vault-ca.pem"
        assert options.timeout == 45

    def test_empty_values_keep_defaults(self):
        config = StaticConfigProvider({"VAULT_TOKEN": "", "VAULT_KUBERNETES_TOKEN_PATH": ""})

        options = load_vault_options(config)

        assert options.token is None
        assert options.kubernetes_token_path == DEFAULT_KUBERNETES_TOKEN_PATH
        assert options.timeout == 30


class TestTLSSettings:
    """Tests for tls_settings."""

    @pytest.fixture
    def pem_files(self, tmp_path):
        paths = {}
        for name in ("cert.pem", "key.pem", "ca.pem"):
            path = tmp_path / name
            path.write_text("-----BEGIN-----\n", encoding="utf-8")
            paths[name] = str(path)
        return paths

    def test_defaults_verify_with_system_store(self):
        assert tls_settings(VaultOptions()) == {"verify": True}

    def test_client_certificate_pair(self, pem_files):
        options = VaultOptions(client_cert=pem_files["cert.pem"], client_key=pem_files["key.pem"])

        assert tls_settings(options) == {
            "verify": True,
            "cert": (pem_files["cert.pem"], pem_files["key.pem"]),
        }

    def test_certificate_without_key_is_ignored(self, pem_files):
        options = VaultOptions(client_cert=pem_files["cert.pem"])

        assert tls_settings(options) == {"verify": True}

    def test_ca_bundle(self, pem_files):
        options = VaultOptions(client_ca_keys=pem_files["ca.pem"])

        assert tls_settings(options) == {"verify": pem_files["ca.pem"]}

    def test_missing_file(self, tmp_path, pem_files):
        options = VaultOptions(client_cert=pem_files["cert.pem"], client_key=str(tmp_path / "nope.pem"))

        with pytest.raises(ConfigurationError, match="Client key not found"):
            tls_settings(options)

    def test_missing_ca_bundle(self, tmp_path):
        with pytest.raises(ConfigurationError, match="CA certificate not found"):
            tls_settings(VaultOptions(client_ca_keys=str(tmp_path / "ca.pem")))
