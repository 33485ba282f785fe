"""Configuration file management for spendlog."""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli_w

from spendlog.domain.money import DEFAULT_CURRENCY_SYMBOL
from spendlog.logging_setup import get_logger

logger = get_logger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Immutable runtime settings."""

    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    log_level: str = DEFAULT_LOG_LEVEL


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "spendlog" / "config.toml"


def default_config() -> dict[str, Any]:
    """Return the default configuration as a TOML-ready dictionary."""
    defaults = Settings()
    return {
        "currency_symbol": defaults.currency_symbol,
        "log_level": defaults.log_level,
    }


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    save_config(default_config(), config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If config file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def settings_from_config(config: dict[str, Any]) -> Settings:
    """Build Settings from a config dictionary, ignoring unknown keys.

    Args:
        config: Configuration dictionary (may be partial).

    Returns:
        Settings with defaults for missing or non-string values.
    """
    defaults = Settings()

    symbol = config.get("currency_symbol")
    level = config.get("log_level")

    return Settings(
        currency_symbol=symbol if isinstance(symbol, str) else defaults.currency_symbol,
        log_level=level if isinstance(level, str) else defaults.log_level,
    )


def load_settings(config_path: Path | None = None) -> Settings:
    """Load settings, falling back to defaults when no config file exists.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Settings instance.

    Raises:
        tomllib.TOMLDecodeError: If config file is not valid TOML.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        logger.debug("No config file at %s, using defaults", config_path or get_config_path())
        return Settings()

    return settings_from_config(config)
