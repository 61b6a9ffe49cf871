"""
Configuration management module.

Handles loading configuration from environment variables and an optional
.env file. Indicator defaults (Bollinger window and band width) and logging
settings live here.
"""

import os
from typing import Optional
from dataclasses import dataclass, field

from dotenv import load_dotenv

from .exceptions import ConfigurationError

load_dotenv()  # Load environment variables from .env file


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}")


@dataclass
class IndicatorConfig:
    """Default parameters for the indicator calculators."""

    bollinger_period: int = 20
    bollinger_std_mult: float = 2.0

    @classmethod
    def from_env(cls) -> "IndicatorConfig":
        """Load indicator config from environment variables."""
        return cls(
            bollinger_period=_env_int("BOLLINGER_PERIOD", 20),
            bollinger_std_mult=_env_float("BOLLINGER_STD_MULT", 2.0),
        )


@dataclass
class Config:
    """
    Main configuration class.

    Loads all configuration from environment variables with sensible defaults.
    """

    indicators: IndicatorConfig = field(default_factory=IndicatorConfig.from_env)

    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE"))

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from environment."""
        return cls()


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.load()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() re-reads the environment."""
    global _config
    _config = None
