"""Input models for processed API data.

The payload is produced by an earlier preparation step and describes every
namespace of the API surface together with the feature definitions that
control where each part of it is available.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

import orjson
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# Specs are kept as plain mappings: only a handful of keys are ever read.
TypeSpec = dict[str, Any]
NamespaceSpec = dict[str, Any]

VOID_TYPE = "void"


class Channel(str, Enum):
    """Release channels, most available first."""

    STABLE = "stable"
    BETA = "beta"
    DEV = "dev"
    CANARY = "canary"
    TRUNK = "trunk"


_CHANNEL_ORDER = [channel.value for channel in Channel]


def channel_rank(channel: str) -> int:
    """Rank a channel name; higher is less available.

    Channels outside the known set rank below every known one.
    """
    try:
        return _CHANNEL_ORDER.index(channel)
    except ValueError:
        return len(_CHANNEL_ORDER)


class Tag(BaseModel):
    """A single name/value classification tag for a symbol."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str = ""


class FeatureSpec(BaseModel):
    """One feature definition (a single alternative of a feature)."""

    model_config = ConfigDict(extra="ignore")

    channel: str | None = None
    dependencies: list[str] = Field(default_factory=list)
    platforms: list[str] = Field(default_factory=list)
    disallow_for_service_workers: bool = False
    min_manifest_version: int | None = None


class ProcessedAPIData(BaseModel):
    """The payload read from stdin."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    api: dict[str, NamespaceSpec] = Field(default_factory=dict)
    feature: dict[str, FeatureSpec | list[FeatureSpec]] = Field(
        default_factory=dict
    )
    definitions_revision: str | None = Field(
        default=None, alias="definitionsRevision"
    )


class InputError(Exception):
    """Raised when the input payload cannot be parsed."""


def load_processed_api_data(raw: bytes | str) -> ProcessedAPIData:
    """Parse and validate a raw JSON payload."""
    try:
        data = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        msg = f"Invalid JSON input: {exc}"
        raise InputError(msg) from exc

    if not isinstance(data, dict):
        msg = f"Expected a JSON object, got {type(data).__name__}"
        raise InputError(msg)

    try:
        return ProcessedAPIData.model_validate(data)
    except ValidationError as exc:
        msg = f"Invalid API data: {exc}"
        raise InputError(msg) from exc


__all__ = [
    "VOID_TYPE",
    "Channel",
    "FeatureSpec",
    "InputError",
    "NamespaceSpec",
    "ProcessedAPIData",
    "Tag",
    "TypeSpec",
    "channel_rank",
    "load_processed_api_data",
]
