"""
Herodotus diagnostics logging.

Structured logging used by the library to report on itself: logger
registration, main logger election and sink close failures. It is kept
apart from the correlation-aware lines that HerodotusLogger writes.

Output Formats:
    - Text: Human-readable key/value lines (default)
    - JSON: One object per line for log aggregation
    - Rich: Coloured console output in debug/development mode

Example:
    >>> from herodotus.core.logging import get_logger
    >>> log = get_logger(__name__)
    >>> log.warning("Target failed to close", target="report.log")
"""

from herodotus.core.logging.logger import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
