"""Shared utilities for symbol ids."""

from __future__ import annotations


def join_symbol_id(parent_id: str, name: str) -> str:
    """Join a member name onto its parent's symbol id.

    Names already qualified with the parent id are returned unchanged.

    Examples:
        >>> join_symbol_id("tabs", "Tab")
        'tabs.Tab'
        >>> join_symbol_id("tabs", "tabs.Tab")
        'tabs.Tab'
        >>> join_symbol_id("tabs.Tab", "url")
        'tabs.Tab.url'
    """
    if name.startswith(f"{parent_id}."):
        return name
    return f"{parent_id}.{name}"


def symbol_prefixes(symbol_id: str) -> list[str]:
    """Return every dotted prefix of a symbol id, shortest first.

    Examples:
        >>> symbol_prefixes("tabs.Tab.url")
        ['tabs', 'tabs.Tab', 'tabs.Tab.url']
    """
    parts = symbol_id.split(".")
    return [".".join(parts[:i]) for i in range(1, len(parts) + 1)]
