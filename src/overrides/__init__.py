"""Feature queries and per-symbol tag overrides."""

from overrides.features import Availability, FeatureQueryAll
from overrides.tags import CHANNEL_TAG, RenderOverride

__all__ = [
    "CHANNEL_TAG",
    "Availability",
    "FeatureQueryAll",
    "RenderOverride",
]
