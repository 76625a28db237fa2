"""Channel classification and stable-channel filtering."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from api.models import Channel
from artifacts.collect import SymbolIntegrityError
from artifacts.models.artifacts.release_symbols import ReleaseSymbolRecord
from overrides.tags import CHANNEL_TAG

if TYPE_CHECKING:
    from collections.abc import Mapping

    from api.models import Tag, TypeSpec


class TagResolver(Protocol):
    def complete_tags_for(self, spec: TypeSpec, symbol_id: str) -> list[Tag]: ...


class MissingChannelError(SymbolIntegrityError):
    """Raised in strict mode when a symbol resolves without a channel tag."""


@dataclass(frozen=True)
class ClassifyResult:
    symbols: dict[str, ReleaseSymbolRecord] = field(default_factory=dict)
    deprecated_count: int = 0
    skip_count: int = 0


def channel_of(tags: list[Tag], channel_tag: str = CHANNEL_TAG) -> str | None:
    """Return the value of the first channel tag, if any."""
    for tag in tags:
        if tag.name == channel_tag:
            return tag.value
    return None


def classify_and_filter(
    table: Mapping[str, TypeSpec],
    resolver: TagResolver,
    *,
    channel_tag: str = CHANNEL_TAG,
    strict_channel: bool = False,
) -> ClassifyResult:
    """Keep only stable symbols, recording deprecation for each.

    Symbols with no channel tag count as stable unless ``strict_channel`` is
    set, in which case they are rejected. Deprecation is read from the spec,
    not from the resolved tags.
    """
    symbols: dict[str, ReleaseSymbolRecord] = {}
    deprecated_count = 0
    skip_count = 0

    for symbol_id in sorted(table):
        spec = table[symbol_id]
        channel = channel_of(resolver.complete_tags_for(spec, symbol_id), channel_tag)

        if channel is None and strict_channel:
            msg = f"symbol has no {channel_tag} tag: {symbol_id}"
            raise MissingChannelError(msg)

        if channel is not None and channel != Channel.STABLE.value:
            skip_count += 1
            continue

        if spec.get("deprecated"):
            symbols[symbol_id] = ReleaseSymbolRecord(deprecated=True)
            deprecated_count += 1
        else:
            symbols[symbol_id] = ReleaseSymbolRecord()

    return ClassifyResult(
        symbols=symbols,
        deprecated_count=deprecated_count,
        skip_count=skip_count,
    )


__all__ = [
    "ClassifyResult",
    "MissingChannelError",
    "TagResolver",
    "channel_of",
    "classify_and_filter",
]
