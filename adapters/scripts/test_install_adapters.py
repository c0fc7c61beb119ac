# SPDX-License-Identifier: MIT
# Copyright (c) 2025 easyKV contributors

"""Tests for install_adapters script functions."""

from pathlib import Path
from unittest.mock import patch

import pytest
from install_adapters import (
    get_all_adapter_names,
    main,
    resolve_dependencies,
    sort_by_priority,
)


@pytest.fixture
def adapters_dir(tmp_path):
    """Create a fake adapters directory with three installable adapters."""
    for name in ("easykv_vault", "easykv_config", "easykv_logging"):
        (tmp_path / name).mkdir()
        (tmp_path / name / "setup.py").write_text("from setuptools import setup\nsetup()\n")
    (tmp_path / "scripts").mkdir()
    return tmp_path


class TestResolveDependencies:
    """Test resolve_dependencies()."""

    def test_vault_pulls_in_dependencies(self):
        assert resolve_dependencies(["easykv_vault"]) == [
            "easykv_logging",
            "easykv_config",
            "easykv_vault",
        ]

    def test_leaf_adapter(self):
        assert resolve_dependencies(["easykv_config"]) == ["easykv_config"]

    def test_unknown_adapters_sort_last(self):
        assert resolve_dependencies(["zzz", "easykv_logging"]) == ["easykv_logging", "zzz"]


class TestAdapterDiscovery:
    """Test adapter discovery helpers."""

    def test_only_directories_with_setup_py(self, adapters_dir):
        assert sorted(get_all_adapter_names(adapters_dir)) == [
            "easykv_config",
            "easykv_logging",
            "easykv_vault",
        ]

    def test_sort_by_priority(self):
        assert sort_by_priority(["other", "easykv_vault", "easykv_logging"]) == [
            "easykv_logging",
            "easykv_vault",
            "other",
        ]


class TestMain:
    """Test main() install orchestration."""

    def test_installs_in_order_with_dev_extra(self, adapters_dir):
        with patch("install_adapters.get_adapters_dir", return_value=adapters_dir), \
                patch("install_adapters.install_adapter", return_value=True) as install:
            assert main([]) == 0

        installed = [call.args[0].name for call in install.call_args_list]
        assert installed == ["easykv_logging", "easykv_config", "easykv_vault"]
        assert all(call.kwargs["dev"] is True for call in install.call_args_list)

    def test_no_dev(self, adapters_dir):
        with patch("install_adapters.get_adapters_dir", return_value=adapters_dir), \
                patch("install_adapters.install_adapter", return_value=True) as install:
            assert main(["--no-dev", "easykv_config"]) == 0

        install.assert_called_once_with(Path(adapters_dir) / "easykv_config", dev=False)

    def test_missing_adapter(self, adapters_dir):
        with patch("install_adapters.get_adapters_dir", return_value=adapters_dir), \
                patch("install_adapters.install_adapter") as install:
            assert main(["easykv_etcd"]) == 1

        install.assert_not_called()

    def test_failure_is_reported(self, adapters_dir):
        with patch("install_adapters.get_adapters_dir", return_value=adapters_dir), \
                patch("install_adapters.install_adapter", return_value=False):
            assert main(["easykv_logging"]) == 1
