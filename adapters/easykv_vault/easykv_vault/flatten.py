# SPDX-License-Identifier: MIT
# Copyright (c) 2025 easyKV contributors

"""Normalization of secret payloads into flat path -> string entries."""

from typing import Any, MutableMapping, Optional

from .walker import join_path


def is_kv(data: Any) -> Optional[str]:
    """Return the secret text if ``data`` is exactly ``{"value": <str>}``."""
    if isinstance(data, dict) and len(data) == 1:
        value = data.get("value")
        if isinstance(value, str):
            return value
    return None


def flatten(key: str, value: Any, out: MutableMapping[str, str]) -> None:
    """Write every string leaf of ``value`` into ``out`` under its joined path.

    Nested mappings extend the path with their field names. Leaves that are
    neither strings nor mappings (numbers, booleans, lists, null) are omitted.
    """
    if isinstance(value, str):
        out[key] = value
    elif isinstance(value, dict):
        for inner_key, inner_value in value.items():
            flatten(join_path(key, str(inner_key)), inner_value, out)


def normalize_value(path: str, data: Any, out: MutableMapping[str, str]) -> None:
    """Store the payload read at ``path`` into ``out``.

    A scalar secret lands under ``path`` itself. Anything else is flattened
    below ``path`` and leaves no entry at ``path``.
    """
    text = is_kv(data)
    if text is not None:
        out[path] = text
        return

    flatten(path, data, out)
    out.pop(path, None)
