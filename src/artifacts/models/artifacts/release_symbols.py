"""Release symbol models.

One record per stable symbol. Fields that do not apply are omitted from the
serialized form rather than written as false or null, so that unchanged
symbols produce identical text across revisions.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict


class ReleaseSymbolRecord(BaseModel):
    """A stable symbol and its deprecation status."""

    model_config = ConfigDict(frozen=True)

    deprecated: Literal[True] | None = None


class RunSummary(BaseModel):
    """Counts reported after a run."""

    stable_count: int
    deprecated_count: int
    skip_count: int
    definitions_revision: str | None = None


__all__ = ["ReleaseSymbolRecord", "RunSummary"]
