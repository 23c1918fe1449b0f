"""
Herodotus - Correlation-aware logging for multi-component test and service runs

Herodotus wraps standard library logging to give every line a prefix that
ties it to a system, a moment and a correlation id shared by all loggers
taking part in the same scenario.

Key Features:
    - Correlation ids synchronised across independently created loggers
    - Main logger election and scenario broadcasts
    - Buffered entries released in their original order
    - Configurable, colourised line prefixes
    - Fan-out writing with ANSI stripping for file targets
    - Per-scenario output files

Modules:
    herodotus_logger: The HerodotusLogger facade
    registry: Logger registry and main logger election
    formatting: Prefix assembly and colouring
    writers: MultiWriter and scenario-aware targets
    core: Configuration, diagnostics logging and exceptions

Example:
    >>> import herodotus
    >>> log = herodotus.logger("checkout", config=herodotus.config(main=True))
    >>> log.new_scenario("guest can pay by card")
    >>> log.info("Basket created")
"""

__version__ = "0.1.0"
__description__ = (
    "Correlation-aware logging facade with scenario synchronisation, "
    "buffered output and colour-aware fan-out writing."
)

from herodotus.core.config.settings import LoggerConfig, Settings
from herodotus.core.exceptions.custom_exceptions import (
    ConfigurationError,
    HerodotusError,
    SinkCloseError,
    SinkError,
)
from herodotus.factory import config, logger
from herodotus.herodotus_logger import HerodotusLogger, LogLevel
from herodotus.registry import LoggerRegistry, default_registry
from herodotus.writers import MultiWriter, ScenarioAware, ScenarioFileWriter

__all__ = [
    "config",
    "logger",
    "HerodotusLogger",
    "LogLevel",
    "LoggerConfig",
    "LoggerRegistry",
    "default_registry",
    "MultiWriter",
    "ScenarioAware",
    "ScenarioFileWriter",
    "Settings",
    "ConfigurationError",
    "HerodotusError",
    "SinkCloseError",
    "SinkError",
]
