"""
Configuration management for Herodotus.

This module provides configuration using Pydantic settings with support for
environment variables and type validation. Two settings classes are defined:

Classes:
    Settings: Options for the library's own diagnostics logging
    LoggerConfig: Per-logger options consumed by HerodotusLogger and
        MultiWriter

Environment Variables:
    Both classes read variables prefixed with ``HERODOTUS_``. Settings uses
    upper-case names (``HERODOTUS_LOG_LEVEL``), LoggerConfig matches field
    names case-insensitively (``HERODOTUS_MAIN=true``,
    ``HERODOTUS_PREFIX_COLOUR='{"system": "bold"}'``).

Example:
    >>> from herodotus.core.config.settings import LoggerConfig
    >>> config = LoggerConfig(main=True, prefix_colour="blue.bold")
    >>> config.prefix_style
    SingleStyle(token='blue.bold')
"""

from typing import Dict, List, Optional, Union

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from herodotus.formatting.styles import PrefixStyle, parse_prefix_style

StyleSpec = Union[str, List[str]]
PrefixColour = Union[str, List[str], Dict[str, StyleSpec], None]

# Level aliases accepted from stdlib naming
_LEVEL_ALIASES = {"WARNING": "WARN", "CRITICAL": "FATAL"}
_LOGGER_LEVELS = ["DEBUG", "INFO", "WARN", "ERROR", "FATAL"]


class Settings(BaseSettings):
    """
    Diagnostics settings with environment variable support.

    These options only affect the messages Herodotus emits about itself
    (registration, main logger election, close failures). Lines written by
    HerodotusLogger instances are never routed through this configuration.

    Attributes:
        ENVIRONMENT: Deployment environment (development/testing/production)
        DEBUG: Enable rich console rendering of diagnostics
        LOG_LEVEL: Diagnostics level (DEBUG/INFO/WARNING/ERROR/CRITICAL)
        LOG_FORMAT: Diagnostics format (json/text)
        LOG_FILE_PATH: Optional file receiving diagnostics
    """

    ENVIRONMENT: str = "production"
    DEBUG: bool = False

    # Logging Configuration
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "text"
    LOG_FILE_PATH: Optional[str] = None

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate logging level is a supported value.

        Ensures the log level is one of the standard Python logging
        levels. Converts to uppercase for consistency.

        Raises:
            ValueError: If log level is not supported
        """
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of: {valid_levels}")
        return v.upper()

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v.lower() not in ("json", "text"):
            raise ValueError("LOG_FORMAT must be 'json' or 'text'")
        return v.lower()

    model_config = SettingsConfigDict(
        env_prefix="HERODOTUS_",
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


class LoggerConfig(BaseSettings):
    """
    Options for a single HerodotusLogger and its MultiWriter.

    Attributes:
        main: Make the logger the broadcast source for correlation and
            scenario ids. The most recently constructed main logger wins.
        display_pid: Include the process id in the line prefix
        prefix_colour: Prefix styling. One of:
            - None: no styling
            - "red" or "blue.bold": a token (dotted tokens are chained)
            - ["red", "underline"]: tokens applied in order
            - {"system": "bold", "level": "red", "overall": "underline"}:
              per-component styles, ``overall`` wraps the rebuilt prefix
        strip_colours_from_files: Remove ANSI styling from every
            MultiWriter target except the console
        level: Minimum level written (DEBUG/INFO/WARN/ERROR/FATAL)
    """

    main: bool = False
    display_pid: bool = False
    prefix_colour: PrefixColour = None
    strip_colours_from_files: bool = True
    level: str = "DEBUG"

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalise the level name, accepting stdlib WARNING/CRITICAL."""
        level = _LEVEL_ALIASES.get(v.upper(), v.upper())
        if level not in _LOGGER_LEVELS:
            raise ValueError(f"level must be one of: {_LOGGER_LEVELS}")
        return level

    @property
    def prefix_style(self) -> PrefixStyle:
        """The prefix_colour value as a PrefixStyle variant."""
        return parse_prefix_style(self.prefix_colour)

    model_config = SettingsConfigDict(
        env_prefix="HERODOTUS_",
        case_sensitive=False,
        extra="ignore",
    )


def get_settings() -> Settings:
    """Get diagnostics settings instance"""
    return Settings()
