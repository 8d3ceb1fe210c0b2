"""Tool name extraction from a parsed manifest."""

from __future__ import annotations

from typing import Any

# Descriptor keys that may carry the tool name, in priority order
NAME_KEYS = ("name", "tool", "id")


def extract_tool_names(manifest: Any) -> list[str]:
    """
    Extract the tool names declared by a manifest.

    The manifest is either a list of tool descriptors or an object
    with a ``tools`` list; any other shape yields no names. For each
    descriptor the first of ``name``, ``tool``, ``id`` holding a
    non-blank string is used.

    Args:
        manifest: Parsed JSON value.

    Returns:
        Deduplicated names, trimmed and sorted ascending.
    """
    if isinstance(manifest, list):
        tools = manifest
    elif isinstance(manifest, dict) and isinstance(manifest.get("tools"), list):
        tools = manifest["tools"]
    else:
        tools = []

    names: set[str] = set()
    for entry in tools:
        name = _descriptor_name(entry)
        if name:
            names.add(name)

    return sorted(names)


def _descriptor_name(entry: Any) -> str | None:
    if not isinstance(entry, dict):
        return None

    for key in NAME_KEYS:
        value = entry.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()

    return None
