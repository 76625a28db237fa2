"""Tag resolution for rendered symbols."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.models import Tag
from utils import symbol_prefixes

if TYPE_CHECKING:
    from collections.abc import Mapping

    from api.models import NamespaceSpec, TypeSpec
    from overrides.features import FeatureQueryAll

CHANNEL_TAG = "chrome-channel"
PERMISSION_TAG = "chrome-permission"
PLATFORM_TAG = "chrome-platform"
MANIFEST_TAG = "chrome-manifest"
DISALLOW_SERVICE_WORKERS_TAG = "chrome-disallow-service-workers"
DEPRECATED_TAG = "deprecated"


class RenderOverride:
    """Computes the complete tag list for each symbol.

    Feature availability comes from the ``FeatureQueryAll``; deprecation comes
    from the spec itself.
    """

    def __init__(
        self,
        api: Mapping[str, NamespaceSpec],
        feature_query: FeatureQueryAll,
    ) -> None:
        self._api = api
        self._feature_query = feature_query

    def complete_tags_for(self, spec: TypeSpec, symbol_id: str) -> list[Tag]:
        availability = self._feature_query.resolve(symbol_id)
        tags: list[Tag] = []

        if availability.channel is not None:
            tags.append(Tag(name=CHANNEL_TAG, value=availability.channel))

        tags.extend(
            Tag(name=PERMISSION_TAG, value=permission)
            for permission in sorted(availability.permissions)
        )

        if availability.platforms is not None:
            tags.extend(
                Tag(name=PLATFORM_TAG, value=platform)
                for platform in sorted(availability.platforms)
            )

        if availability.min_manifest_version is not None:
            tags.append(
                Tag(name=MANIFEST_TAG, value=f"mv{availability.min_manifest_version}")
            )

        if availability.disallow_service_workers:
            tags.append(Tag(name=DISALLOW_SERVICE_WORKERS_TAG))

        deprecated = spec.get("deprecated")
        if not deprecated:
            # Members of a deprecated namespace inherit its message.
            namespace = self.namespace_for(symbol_id)
            if namespace is not None and namespace is not spec:
                deprecated = namespace.get("deprecated")
        if deprecated:
            message = deprecated if isinstance(deprecated, str) else ""
            tags.append(Tag(name=DEPRECATED_TAG, value=message))

        return tags

    def namespace_for(self, symbol_id: str) -> NamespaceSpec | None:
        """Return the namespace spec owning ``symbol_id``, longest match first."""
        for prefix in reversed(symbol_prefixes(symbol_id)):
            namespace = self._api.get(prefix)
            if namespace is not None:
                return namespace
        return None


__all__ = [
    "CHANNEL_TAG",
    "DEPRECATED_TAG",
    "DISALLOW_SERVICE_WORKERS_TAG",
    "MANIFEST_TAG",
    "PERMISSION_TAG",
    "PLATFORM_TAG",
    "RenderOverride",
]
