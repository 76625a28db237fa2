from __future__ import annotations

from pathlib import Path

import pytest

from rules.config import CONFIG_FILENAME, ConfigError, SymbolsConfig, load_config


def _write_config(repo_root: Path, toml_content: str) -> Path:
    path = repo_root / CONFIG_FILENAME
    path.write_text(toml_content, encoding="utf-8")
    return path


def test_missing_default_config_uses_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config == SymbolsConfig()
    assert config.channel_tag == "chrome-channel"
    assert config.strict_channel is False
    assert config.log_level == "WARNING"


def test_unknown_top_level_key_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, "bogus_key = true")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_invalid_toml_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, "strict_channel = ")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(tmp_path)


def test_invalid_log_level_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, 'log_level = "LOUD"')

    with pytest.raises(ConfigError, match="Invalid config"):
        load_config(tmp_path)


def test_empty_channel_tag_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, 'channel_tag = ""')

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_valid_config_accepted(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        """
channel_tag = "release-channel"
strict_channel = true
log_level = "DEBUG"
""".strip(),
    )

    config = load_config(tmp_path)

    assert config.channel_tag == "release-channel"
    assert config.strict_channel is True
    assert config.log_level == "DEBUG"


def test_explicit_config_path_overrides_default(tmp_path: Path) -> None:
    _write_config(tmp_path, "strict_channel = true")
    other = tmp_path / "other.toml"
    other.write_text("strict_channel = false", encoding="utf-8")

    assert load_config(tmp_path, other).strict_channel is False


def test_explicit_config_path_must_exist(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="does not exist"):
        load_config(tmp_path, tmp_path / "missing.toml")
