"""Release symbol generation entry points."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rules.config import SymbolsConfig


def generate_release_symbols(
    raw: bytes | str,
    *,
    config: SymbolsConfig | None = None,
) -> bytes:
    """Generate release symbols via lazy import to avoid package import cycles."""
    from artifacts.write import generate_release_symbols as _generate_release_symbols

    return _generate_release_symbols(raw, config=config)


__all__ = ["generate_release_symbols"]
