"""Processed API data: the input side of symbol rendering."""

from api.models import (
    VOID_TYPE,
    Channel,
    FeatureSpec,
    InputError,
    ProcessedAPIData,
    Tag,
    load_processed_api_data,
)

__all__ = [
    "VOID_TYPE",
    "Channel",
    "FeatureSpec",
    "InputError",
    "ProcessedAPIData",
    "Tag",
    "load_processed_api_data",
]
