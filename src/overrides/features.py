"""Feature availability queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from api.models import channel_rank
from utils import symbol_prefixes

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from api.models import FeatureSpec

PERMISSION_PREFIX = "permission:"


@dataclass(frozen=True)
class Availability:
    """Where a feature (or a chain of features) is available.

    ``channel`` is None when no feature in play names a channel. ``platforms``
    is None when unrestricted.
    """

    channel: str | None = None
    permissions: frozenset[str] = field(default_factory=frozenset)
    platforms: frozenset[str] | None = None
    disallow_service_workers: bool = False
    min_manifest_version: int | None = None

    def restrict(self, other: Availability) -> Availability:
        """Combine with a more specific feature: both must hold."""
        return Availability(
            channel=_least_available(self.channel, other.channel),
            permissions=self.permissions | other.permissions,
            platforms=_intersect(self.platforms, other.platforms),
            disallow_service_workers=(
                self.disallow_service_workers or other.disallow_service_workers
            ),
            min_manifest_version=_max_optional(
                self.min_manifest_version, other.min_manifest_version
            ),
        )


def _least_available(a: str | None, b: str | None) -> str | None:
    if a is None:
        return b
    if b is None:
        return a
    return a if channel_rank(a) >= channel_rank(b) else b


def _intersect(
    a: frozenset[str] | None, b: frozenset[str] | None
) -> frozenset[str] | None:
    if a is None:
        return b
    if b is None:
        return a
    return a & b


def _max_optional(a: int | None, b: int | None) -> int | None:
    if a is None:
        return b
    if b is None:
        return a
    return max(a, b)


def _from_spec(spec: FeatureSpec) -> Availability:
    permissions = frozenset(
        dep[len(PERMISSION_PREFIX) :]
        for dep in spec.dependencies
        if dep.startswith(PERMISSION_PREFIX)
    )
    return Availability(
        channel=spec.channel,
        permissions=permissions,
        platforms=frozenset(spec.platforms) if spec.platforms else None,
        disallow_service_workers=spec.disallow_for_service_workers,
        min_manifest_version=spec.min_manifest_version,
    )


def merge_alternatives(specs: Iterable[FeatureSpec]) -> Availability:
    """Merge alternative definitions of one feature: any one may apply."""
    merged: Availability | None = None
    for spec in specs:
        current = _from_spec(spec)
        if merged is None:
            merged = current
            continue

        channel = merged.channel
        if channel is None or (
            current.channel is not None
            and channel_rank(current.channel) < channel_rank(channel)
        ):
            channel = current.channel

        if merged.platforms is None or current.platforms is None:
            platforms = None
        else:
            platforms = merged.platforms | current.platforms

        if merged.min_manifest_version is None or current.min_manifest_version is None:
            min_manifest_version = None
        else:
            min_manifest_version = min(
                merged.min_manifest_version, current.min_manifest_version
            )

        merged = Availability(
            channel=channel,
            permissions=merged.permissions | current.permissions,
            platforms=platforms,
            disallow_service_workers=(
                merged.disallow_service_workers and current.disallow_service_workers
            ),
            min_manifest_version=min_manifest_version,
        )
    return merged if merged is not None else Availability()


class FeatureQueryAll:
    """Answers availability questions across every defined feature."""

    def __init__(self, features: Mapping[str, FeatureSpec | list[FeatureSpec]]):
        self._features = features
        self._cache: dict[str, Availability | None] = {}

    def availability(self, feature_id: str) -> Availability | None:
        """Availability of exactly ``feature_id``, or None if undefined."""
        if feature_id in self._cache:
            return self._cache[feature_id]

        raw = self._features.get(feature_id)
        if raw is None:
            result = None
        elif isinstance(raw, list):
            result = merge_alternatives(raw)
        else:
            result = merge_alternatives([raw])

        self._cache[feature_id] = result
        return result

    def resolve(self, symbol_id: str) -> Availability:
        """Effective availability of a symbol along its dotted feature chain.

        ``tabs.Tab.url`` is restricted by ``tabs``, ``tabs.Tab`` and
        ``tabs.Tab.url``, in that order.
        """
        result = Availability()
        for prefix in symbol_prefixes(symbol_id):
            found = self.availability(prefix)
            if found is not None:
                result = result.restrict(found)
        return result


__all__ = ["Availability", "FeatureQueryAll", "merge_alternatives"]
