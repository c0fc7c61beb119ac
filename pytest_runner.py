# SPDX-License-Identifier: MIT
# Copyright (c) 2025 easyKV contributors

"""Run every adapter test suite from a source checkout."""

import pathlib
import sys

# Add all adapters to path
repo_root = pathlib.Path(__file__).parent
adapters_root = repo_root / "adapters"
for adapter_dir in sorted(adapters_root.glob("easykv_*")):
    sys.path.insert(0, str(adapter_dir))
sys.path.insert(0, str(adapters_root / "scripts"))

# Add root
sys.path.insert(0, str(repo_root))

import pytest

sys.exit(pytest.main([
    str(adapters_root),
    *sys.argv[1:],
]))
