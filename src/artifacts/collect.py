"""Symbol collection with duplicate and void checks."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from api.models import VOID_TYPE

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from api.models import TypeSpec


class SymbolIntegrityError(Exception):
    """Raised when traversal delivers a symbol that must never appear."""


class SymbolCollector:
    """Records each symbol id exactly once, in traversal order."""

    def __init__(self) -> None:
        self._symbols: dict[str, TypeSpec] = {}

    def observe(self, spec: TypeSpec, symbol_id: str) -> None:
        if not symbol_id:
            msg = "got empty symbol id"
            raise SymbolIntegrityError(msg)

        if symbol_id in self._symbols:
            msg = f"got dup symbol: {symbol_id}"
            raise SymbolIntegrityError(msg)

        # Void only exists as a return type and is never rendered as a symbol.
        if spec.get("type") == VOID_TYPE:
            msg = f"got void symbol: {symbol_id}"
            raise SymbolIntegrityError(msg)

        self._symbols[symbol_id] = spec

    def __len__(self) -> int:
        return len(self._symbols)

    def table(self) -> Mapping[str, TypeSpec]:
        """Read-only view of the collected symbols."""
        return MappingProxyType(self._symbols)


def collect_symbols(pairs: Iterable[tuple[TypeSpec, str]]) -> Mapping[str, TypeSpec]:
    """Consume ``(spec, symbol_id)`` pairs and return the collected table."""
    collector = SymbolCollector()
    for spec, symbol_id in pairs:
        collector.observe(spec, symbol_id)
    return collector.table()


__all__ = ["SymbolCollector", "SymbolIntegrityError", "collect_symbols"]
