"""Traversal of processed API namespaces into (spec, symbol id) pairs."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from api.models import InputError
from utils import join_symbol_id

if TYPE_CHECKING:
    from collections.abc import Iterator

    from api.models import NamespaceSpec, TypeSpec

# Keys whose values are member lists (each member carries a "name").
_MEMBER_LIST_KEYS = ("functions", "events")


def _member_map(spec: TypeSpec, parent_id: str) -> Mapping[str, TypeSpec]:
    members = spec.get("properties") or {}
    if not isinstance(members, Mapping) or not all(
        isinstance(member, Mapping) for member in members.values()
    ):
        msg = f"Malformed members of {parent_id}"
        raise InputError(msg)
    return members


def _member_list(spec: TypeSpec, key: str, parent_id: str) -> list[TypeSpec]:
    members = spec.get(key) or []
    if not isinstance(members, list) or not all(
        isinstance(member, Mapping) for member in members
    ):
        msg = f"Malformed members of {parent_id}"
        raise InputError(msg)
    return members


def _member_name(spec: TypeSpec, parent_id: str) -> str:
    name = spec.get("name") or spec.get("id")
    if not isinstance(name, str) or not name:
        msg = f"Member of {parent_id} has no name"
        raise InputError(msg)
    return name


class RenderContext:
    """Walks every namespace and yields each documented symbol once.

    Namespace members are its ``types``, ``properties``, ``functions`` and
    ``events``. Inline object members (``properties``, ``functions`` and
    ``events`` of a member) are walked recursively. Specs marked ``nodoc``
    are skipped along with everything below them.
    """

    @property
    def name(self) -> str:
        return "render"

    def iter_symbols(
        self, namespaces: Mapping[str, NamespaceSpec]
    ) -> Iterator[tuple[TypeSpec, str]]:
        for namespace_name, namespace in namespaces.items():
            if namespace.get("nodoc"):
                continue
            yield namespace, namespace_name

            for type_spec in _member_list(namespace, "types", namespace_name):
                type_name = _member_name(type_spec, namespace_name)
                type_id = join_symbol_id(namespace_name, type_name)
                yield from self._walk(type_spec, type_id)

            yield from self._walk_members(namespace, namespace_name)

    def _walk(self, spec: TypeSpec, symbol_id: str) -> Iterator[tuple[TypeSpec, str]]:
        if spec.get("nodoc"):
            return
        yield spec, symbol_id
        yield from self._walk_members(spec, symbol_id)

    def _walk_members(
        self, spec: TypeSpec, parent_id: str
    ) -> Iterator[tuple[TypeSpec, str]]:
        for name, child in _member_map(spec, parent_id).items():
            yield from self._walk(child, join_symbol_id(parent_id, name))

        for key in _MEMBER_LIST_KEYS:
            for child in _member_list(spec, key, parent_id):
                child_name = _member_name(child, parent_id)
                yield from self._walk(child, join_symbol_id(parent_id, child_name))


__all__ = ["RenderContext"]
