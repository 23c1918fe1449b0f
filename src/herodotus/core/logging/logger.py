"""
Diagnostics logging configuration for Herodotus.

Herodotus writes two kinds of output. User-facing lines go through
HerodotusLogger instances to whatever sinks the caller configured. The
library's own diagnostics (logger registration, main logger election,
failures while closing targets) go through this module instead, using
structlog on top of standard library logging, and never reach the
caller's sinks.

Functions:
    setup_logging(): Initialize diagnostics logging configuration
    get_logger(name): Get configured diagnostics logger instance

Configuration:
    Behaviour is controlled by environment variables (see Settings):
    - HERODOTUS_LOG_LEVEL: Minimum level (default: WARNING)
    - HERODOTUS_LOG_FORMAT: Output format (json/text)
    - HERODOTUS_LOG_FILE_PATH: Optional file output path
    - HERODOTUS_DEBUG: Enable rich console rendering

    structlog's global configuration is left to the application. Every
    diagnostics logger is wrapped with its own processor chain instead.

Example:
    >>> from herodotus.core.logging.logger import get_logger
    >>> log = get_logger(__name__)
    >>> log.debug("Logger registered", system_name="api", main=True)
"""

import logging
import sys
from pathlib import Path
from typing import Any, List

import structlog
from rich.console import Console
from rich.logging import RichHandler

from herodotus.core.config.settings import get_settings

_DIAGNOSTICS_LOGGER = "herodotus.diagnostics"

# Shared by every wrapped logger; setup_logging() refills it in place.
_processors: List[Any] = []


def setup_logging() -> None:
    """
    Initialize diagnostics logging configuration.

    Builds the structlog processor chain and attaches handlers to the
    ``herodotus.diagnostics`` stdlib logger. Settings are read again on
    every call. Neither the root logger nor structlog's global
    configuration is touched, so applications keep control over their own
    logging setup.

    Handler selection:
        - Development/debug: Rich console handler on stderr
        - Otherwise: plain stream handler on stderr
        - File: additional file handler when LOG_FILE_PATH is configured
    """
    settings = get_settings()

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="ISO"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    _processors[:] = processors

    handlers = []

    if settings.DEBUG or settings.ENVIRONMENT == "development":
        console = Console(stderr=True)
        rich_handler = RichHandler(
            console=console,
            show_time=False,
            show_level=True,
            show_path=False,
            rich_tracebacks=True,
        )
        handlers.append(rich_handler)
    else:
        handlers.append(logging.StreamHandler(sys.stderr))

    if settings.LOG_FILE_PATH:
        file_path = Path(settings.LOG_FILE_PATH)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(file_path))

    diagnostics = logging.getLogger(_DIAGNOSTICS_LOGGER)
    for handler in diagnostics.handlers:
        handler.close()
    diagnostics.handlers.clear()
    for handler in handlers:
        handler.setLevel(settings.LOG_LEVEL)
        handler.setFormatter(logging.Formatter("%(message)s"))
        diagnostics.addHandler(handler)
    diagnostics.setLevel(settings.LOG_LEVEL)
    diagnostics.propagate = False


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a configured diagnostics logger.

    Module names are nested under ``herodotus.diagnostics`` so every
    diagnostics logger shares the handlers installed by setup_logging().

    Args:
        name (str): Logger name, typically __name__ of the calling module

    Returns:
        structlog.stdlib.BoundLogger: Configured logger instance

    Note:
        If diagnostics logging hasn't been set up yet, this function calls
        setup_logging() first.
    """
    if not _processors:
        setup_logging()
    return structlog.wrap_logger(
        logging.getLogger(f"{_DIAGNOSTICS_LOGGER}.{name}"),
        processors=_processors,
        wrapper_class=structlog.stdlib.BoundLogger,
    )
