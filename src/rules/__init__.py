"""Configuration for release symbol rendering."""

from rules.config import (
    CONFIG_FILENAME,
    ConfigError,
    SymbolsConfig,
    load_config,
)

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "SymbolsConfig",
    "load_config",
]
