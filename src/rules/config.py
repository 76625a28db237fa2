from __future__ import annotations

from pathlib import Path
from typing import Literal

import tomllib
from pydantic import BaseModel, ConfigDict, Field

from overrides.tags import CHANNEL_TAG

CONFIG_FILENAME = "release-symbols.toml"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class SymbolsConfig(BaseModel):
    """Configuration for release symbol rendering."""

    model_config = ConfigDict(extra="forbid")

    channel_tag: str = Field(
        default=CHANNEL_TAG,
        min_length=1,
        description="Name of the tag carrying a symbol's release channel",
    )
    strict_channel: bool = Field(
        default=False,
        description=(
            "Reject symbols that resolve without a channel tag "
            "(default: treat them as stable)"
        ),
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Log level for diagnostics written to stderr",
    )


class ConfigError(Exception):
    """Raised when config file exists but cannot be parsed."""


def load_config(root: Path, config_path: Path | None = None) -> SymbolsConfig:
    """Load configuration from an explicit path or release-symbols.toml in root.

    An explicit ``config_path`` must exist; the default file is optional.
    """
    if config_path is None:
        config_path = Path(root) / CONFIG_FILENAME
        if not config_path.is_file():
            return SymbolsConfig()
    elif not config_path.is_file():
        msg = f"Config file does not exist: {config_path}"
        raise ConfigError(msg)

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return SymbolsConfig.model_validate(data)
    except Exception as e:
        msg = f"Invalid config in {config_path}: {e}"
        raise ConfigError(msg) from e
