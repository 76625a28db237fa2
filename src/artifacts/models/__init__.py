"""Model namespace for release symbol artifact schemas."""

from artifacts.models.artifacts.release_symbols import ReleaseSymbolRecord, RunSummary

__all__ = ["ReleaseSymbolRecord", "RunSummary"]
