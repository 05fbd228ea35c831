"""
Configuration management for ipv4calc.

Loads CLI defaults from environment variables or a .env file.
"""

import os
from pathlib import Path
from dataclasses import dataclass

from dotenv import load_dotenv

ENV_LOCATIONS = [
    Path.home() / ".ipv4calc" / ".env",
    Path.home() / ".config" / "ipv4calc" / ".env",
    Path.cwd() / ".env",
]

TRUTHY = {"1", "true", "yes", "on"}
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def load_env_file(locations: list[Path] | None = None) -> Path | None:
    """Load the first .env file found. Existing environment variables win."""
    if locations is None:
        locations = ENV_LOCATIONS
    for env_path in locations:
        if env_path.exists():
            load_dotenv(env_path)
            return env_path
    return None


@dataclass
class CalcConfig:
    """Defaults for the command line front end."""

    log_level: str = "WARNING"
    log_file: str = ""
    output_json: bool = False

    @classmethod
    def from_env(cls) -> "CalcConfig":
        """Load configuration from environment variables."""
        level = os.getenv("IPV4CALC_LOG_LEVEL", "WARNING").strip().upper()
        return cls(
            log_level=level if level in LOG_LEVELS else "WARNING",
            log_file=os.getenv("IPV4CALC_LOG_FILE", ""),
            output_json=os.getenv("IPV4CALC_JSON", "").strip().lower() in TRUTHY,
        )


# Global config instance
_config: CalcConfig | None = None


def get_config() -> CalcConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        load_env_file()
        _config = CalcConfig.from_env()
    return _config


def set_config(config: CalcConfig | None) -> None:
    """Set the global configuration instance. None forces a reload."""
    global _config
    _config = config
