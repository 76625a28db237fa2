"""Utility functions for artifact serialization."""

from __future__ import annotations

from collections.abc import Mapping

import orjson


def _to_dict(obj: object) -> object:
    """Convert object to dict for JSON serialization.

    Models drop unset optional fields; mappings are converted value by value.
    """
    if hasattr(obj, "model_dump"):
        return obj.model_dump(exclude_none=True)
    if isinstance(obj, Mapping):
        return {key: _to_dict(value) for key, value in obj.items()}
    return obj


def _dump_json(obj: object) -> bytes:
    payload = _to_dict(obj)
    opts = orjson.OPT_SORT_KEYS | orjson.OPT_INDENT_2
    return orjson.dumps(payload, option=opts)
