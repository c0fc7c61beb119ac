# SPDX-License-Identifier: MIT
# Copyright (c) 2025 easyKV contributors

"""Root conftest.py so adapter packages import from a source checkout."""

import sys
from pathlib import Path

_repo_root = Path(__file__).parent
_adapters = _repo_root / "adapters"

for _path in (
    _repo_root,
    _adapters / "easykv_logging",
    _adapters / "easykv_config",
    _adapters / "easykv_vault",
    _adapters / "scripts",
):
    if str(_path) not in sys.path:
        sys.path.insert(0, str(_path))
