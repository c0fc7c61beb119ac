#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2025 easyKV contributors
"""
Install adapters in dependency order.

Usage:
    # Install all adapters:
    python adapters/scripts/install_adapters.py

    # Install specific adapters only (dependencies are added automatically):
    python adapters/scripts/install_adapters.py easykv_vault

    # Install without the dev extra (pytest, pytest-cov):
    python adapters/scripts/install_adapters.py --no-dev
"""

import argparse
import subprocess
import sys
from pathlib import Path

# Logging and config have no dependencies; the vault backend needs both
PRIORITY_ADAPTERS = [
    "easykv_logging",
    "easykv_config",
    "easykv_vault",
]

# Dependency map - what each adapter depends on
ADAPTER_DEPENDENCIES = {
    "easykv_logging": [],
    "easykv_config": [],
    "easykv_vault": ["easykv_logging", "easykv_config"],
}


def get_adapters_dir():
    """Get the adapters directory relative to this script."""
    # Script is at adapters/scripts/install_adapters.py
    adapters_dir = Path(__file__).parent.parent
    if not adapters_dir.exists():
        raise FileNotFoundError(f"Adapters directory not found: {adapters_dir}")
    return adapters_dir


def get_all_adapter_names(adapters_dir=None):
    """Get all available adapter names."""
    adapters_dir = adapters_dir or get_adapters_dir()
    return [
        item.name
        for item in adapters_dir.iterdir()
        if item.is_dir() and (item / "setup.py").exists()
    ]


def sort_by_priority(adapters):
    """Order adapter names with priority adapters first, then alphabetically."""
    remaining = list(adapters)
    ordered = []
    for adapter in PRIORITY_ADAPTERS:
        if adapter in remaining:
            ordered.append(adapter)
            remaining.remove(adapter)
    ordered.extend(sorted(remaining))
    return ordered


def resolve_dependencies(requested_adapters):
    """Resolve all dependencies for requested adapters in install order.

    Args:
        requested_adapters: List of adapter names to install

    Returns:
        List of adapter names in dependency order
    """
    resolved = []

    def visit(adapter):
        if adapter in resolved:
            return
        for dep in ADAPTER_DEPENDENCIES.get(adapter, []):
            visit(dep)
        resolved.append(adapter)

    for adapter in requested_adapters:
        visit(adapter)

    return sort_by_priority(resolved)


def install_adapter(adapter_path, dev=True):
    """Install a single adapter in editable mode."""
    print(f"Installing adapter: {adapter_path.name}")
    target = f"{adapter_path}[dev]" if dev else str(adapter_path)
    result = subprocess.run(
        [sys.executable, "-m", "pip", "install", "-e", target],
        capture_output=False
    )
    if result.returncode != 0:
        print(f"ERROR: Failed to install {adapter_path.name}", file=sys.stderr)
        return False
    return True


def main(argv=None):
    """Install all adapters or specific adapters in dependency order."""
    parser = argparse.ArgumentParser(
        description="Install adapters in dependency order",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "adapters",
        nargs="*",
        help="Specific adapters to install (installs all if not specified)"
    )
    parser.add_argument(
        "--no-dev",
        action="store_true",
        help="Skip the dev extra"
    )

    args = parser.parse_args(argv)

    adapters_dir = get_adapters_dir()

    if args.adapters:
        print(f"Requested adapters: {', '.join(args.adapters)}")
        to_install = resolve_dependencies(args.adapters)
    else:
        to_install = sort_by_priority(get_all_adapter_names(adapters_dir))

    adapter_paths = [adapters_dir / adapter for adapter in to_install]

    missing = [p for p in adapter_paths if not (p / "setup.py").exists()]
    if missing:
        print(f"ERROR: Adapters not found: {', '.join(p.name for p in missing)}", file=sys.stderr)
        return 1

    if not adapter_paths:
        print("WARNING: No adapters found to install")
        return 0

    print(f"Install order: {', '.join(p.name for p in adapter_paths)}")

    failed = [p.name for p in adapter_paths if not install_adapter(p, dev=not args.no_dev)]
    if failed:
        print(f"\nERROR: Failed to install adapters: {', '.join(failed)}", file=sys.stderr)
        return 1

    print(f"\nSuccessfully installed {len(adapter_paths)} adapters")
    return 0


if __name__ == "__main__":
    sys.exit(main())
