# SPDX-License-Identifier: MIT
# Copyright (c) 2025 easyKV contributors

"""Discovery of every reachable path below a set of prefixes."""

import posixpath
from typing import Any, Callable, Iterable, Optional

from easykv_logging import get_logger

logger = get_logger(__name__)

ListChildren = Callable[[str], Any]


def normalize_path(path: str) -> str:
    """Strip one trailing separator unless it is the only character."""
    if len(path) > 1 and path.endswith("/"):
        return path[:-1]
    return path


def join_path(base: str, name: str) -> str:
    """Join ``name`` onto ``base`` and clean the result.

    Redundant separators collapse, ``.`` and ``..`` segments resolve and the
    trailing separator is dropped. A leading separator on ``name`` does not
    make it absolute, and an empty ``base`` joins onto the root.

    Example:
        >>> join_path("secret/app", "db/")
        'secret/app/db'
        >>> join_path("secret/", "/db")
        'secret/db'
    """
    cleaned = posixpath.normpath(f"{base}/{name}")
    # POSIX keeps a leading "//"; collapse it like every other repeated separator
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def walk_tree(
    list_children: ListChildren,
    prefixes: Iterable[str],
    branches: Optional[set[str]] = None,
) -> set[str]:
    """Collect every branch and leaf path reachable from ``prefixes``.

    Each path is recorded in ``branches`` before its children are listed, so
    a path reachable through several prefixes or through a cross-link is only
    listed once. Nodes whose listing has no usable ``keys`` are leaves.

    Args:
        list_children: Returns the child names listed at a path, or None for a
            leaf. Errors it raises propagate to the caller.
        prefixes: Starting paths
        branches: Optional visited set to extend in place

    Returns:
        The visited set
    """
    if branches is None:
        branches = set()

    pending = [normalize_path(prefix) for prefix in prefixes]
    pending.reverse()

    while pending:
        path = pending.pop()
        if path in branches:
            continue
        branches.add(path)

        children = list_children(path)
        if not isinstance(children, (list, tuple)):
            continue

        joined = []
        for child in children:
            if not isinstance(child, str):
                logger.debug("Skipping non-string child name", path=path, child_type=type(child).__name__)
                continue
            joined.append(join_path(path, child))
        # Depth-first, in listing order
        pending.extend(reversed(joined))

    return branches
