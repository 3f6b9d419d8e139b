# streamta/config.py
"""
Configuration management for the streamta library.

Settings are loaded from environment variables or a .env file.

Optional environment variables:
    LOG_LEVEL        - Logging level (default: INFO)
    STREAMTA_CONFIG  - Default path of a YAML indicator pipeline config, used by
                       run_pipeline when it is given no config

Example .env file:
    LOG_LEVEL=DEBUG
    STREAMTA_CONFIG=pipelines/macd.yaml
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml
from dotenv import load_dotenv

log = logging.getLogger(__name__)

cwd_env = Path.cwd() / ".env"
if cwd_env.exists():
    load_dotenv(dotenv_path=cwd_env)
else:
    # Fallback to standard behavior (searches parents)
    load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """
    Global settings for the streamta library.

    Values are loaded from environment variables on initialization.
    Users can override these programmatically if needed:

        from streamta.config import settings
        settings.log_level = "DEBUG"
    """

    log_level: str = "INFO"
    config_path: str = ""

    def __post_init__(self):
        """
        Refresh values from environment after load_dotenv has run.
        This allows the global 'settings' instance to be populated correctly.
        """
        self.log_level = os.getenv("LOG_LEVEL", self.log_level)
        self.config_path = os.getenv("STREAMTA_CONFIG", self.config_path)

    def validate(self) -> None:
        """
        Validate settings.

        Raises:
            ValueError: If LOG_LEVEL is not a standard logging level
        """
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got '{self.log_level}'"
            )


def load_indicator_config(config_path: str | Path) -> dict:
    """
    Load an indicator pipeline configuration from a YAML file.

    Args:
        config_path: Path to YAML config file

    Returns:
        Dictionary describing the indicator (see ``streamta.factory``)
    """
    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_file) as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

    if config is None:
        raise ValueError(f"Empty config file: {config_path}")
    if not isinstance(config, dict):
        raise ValueError(f"Expected a mapping at the top of {config_path}")

    log.debug("Loaded indicator config from %s", config_file)
    return config


# Global settings instance - loaded when module is imported
settings = Settings()
