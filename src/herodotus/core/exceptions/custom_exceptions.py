"""
Exception hierarchy for Herodotus error handling.

Every error raised by the library carries a human-readable message, a
machine-readable error code and a details dictionary, so callers can log
or inspect failures without parsing strings.

Exception Hierarchy:
    HerodotusError (base)
    ├── ConfigurationError: Malformed prefix colour or level configuration
    └── SinkError: Failures reported by write targets
        └── SinkCloseError: One or more targets failed to close

Failure Semantics:
    - ConfigurationError is a programming fault. It is raised as soon as
      the bad value is used and is never retried.
    - Write failures are not wrapped; the exception raised by the failing
      target reaches the caller unchanged.
    - SinkCloseError is raised only after every closable target was
      attempted, with each individual failure listed in ``details``.

Example:
    >>> try:
    ...     writer.close()
    ... except SinkCloseError as e:
    ...     for failure in e.details["failures"]:
    ...         print(failure["target"], failure["error"])
"""

from typing import Any, Dict, Optional


class HerodotusError(Exception):
    """
    Base exception class for all Herodotus errors.

    Attributes:
        message (str): Human-readable error description
        error_code (str): Machine-readable error identifier, defaults to
            the class name
        details (Dict[str, Any]): Additional contextual information

    Example:
        >>> raise HerodotusError(
        ...     "Unknown prefix component",
        ...     error_code="PREFIX_UNKNOWN_COMPONENT",
        ...     details={"component": "host"},
        ... )
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ConfigurationError(HerodotusError):
    """
    Raised when logger configuration cannot be applied.

    Common scenarios:
        - prefix_colour is not None, a string, a list or a mapping
        - A style token is not a colour or text attribute
        - An unsupported log level name

    Example:
        >>> raise ConfigurationError(
        ...     "Unable to parse style token",
        ...     error_code="STYLE_UNKNOWN_TOKEN",
        ...     details={"token": "sparkly"},
        ... )
    """

    pass


class SinkError(HerodotusError):
    """Raised when a write target fails"""

    pass


class SinkCloseError(SinkError):
    """Raised after closing targets when at least one of them failed"""

    pass
