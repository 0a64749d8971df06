"""Configuration settings for the FAF SDK."""

import logging
from typing import Optional

from pydantic_settings import BaseSettings
from pydantic import Field


SDK_VERSION = "1.0.1"

# Top-level packages that emit log records
LOGGER_NAMES = ("parsing", "validation", "compression", "discovery")


class Settings(BaseSettings):
    """Global settings for the FAF SDK.

    Settings can be overridden via environment variables with FAF_ prefix or
    a .env file. Example: FAF_LOG_LEVEL=DEBUG

    Only ambient behaviour is configurable here; the search depth, quality
    threshold and token budgets are fixed constants of their modules.
    """

    # Parsing
    encoding: str = Field(
        default="utf-8",
        description="Text encoding used when reading .faf files"
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Level applied to SDK loggers by configure_logging()"
    )

    model_config = {
        "env_prefix": "FAF_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


def configure_logging(level: Optional[str] = None) -> None:
    """Apply a log level to all SDK loggers.

    The SDK never installs handlers on its own; this only adjusts levels so an
    embedding application can turn on debug output for discovery and parsing.
    """
    resolved = (level or settings.log_level).upper()
    for name in LOGGER_NAMES:
        logging.getLogger(name).setLevel(resolved)


# Create singleton instance
settings = Settings()
