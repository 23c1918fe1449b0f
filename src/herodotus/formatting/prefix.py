"""
Line prefix assembly and the logging formatter built on it.

Every line written by a HerodotusLogger starts with a prefix of the form::

    [<system> <date> <time> <correlation> <pid>] <LEVEL> -- : <message>

Bracketed components that are None are skipped rather than rendered
empty. ``date`` and ``time`` are read from the wall clock each time a line
is formatted.

Classes:
    PrefixFormatter: Builds and colours the prefix for a set of components
    HerodotusFormatter: logging.Formatter producing complete lines
"""

import logging
import os
from datetime import datetime
from typing import Dict, Optional

from herodotus.core.exceptions.custom_exceptions import ConfigurationError
from herodotus.formatting.colours import colourise
from herodotus.formatting.styles import (
    NoStyle,
    PerComponentStyle,
    PrefixStyle,
    SingleStyle,
    StyleChain,
    parse_prefix_style,
)

BRACKETED_COMPONENTS = ("system", "date", "time", "correlation", "pid")
SEPARATOR = "-- :"
DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"

Components = Dict[str, Optional[str]]


def _now() -> datetime:
    return datetime.now()


class PrefixFormatter:
    """
    Build the bracketed line prefix and apply the configured style.

    Args:
        style: A PrefixStyle variant or any prefix_colour configuration
            value accepted by parse_prefix_style

    Example:
        >>> formatter = PrefixFormatter({"system": "bold"})
        >>> components = formatter.components("api", "1a2b3c4d", "INFO")
        >>> formatter.format(components)
        '[\\x1b[1mapi\\x1b[0m 2024-05-01 09:30:00 1a2b3c4d] INFO -- : '
    """

    def __init__(self, style: Optional[PrefixStyle] = None):
        self.style = parse_prefix_style(style)

    @staticmethod
    def components(
        system: Optional[str],
        correlation: Optional[str],
        level: str,
        display_pid: bool = False,
    ) -> Components:
        """Collect prefix components, reading date and time from the clock."""
        now = _now()
        return {
            "system": system,
            "date": now.strftime(DATE_FORMAT),
            "time": now.strftime(TIME_FORMAT),
            "correlation": correlation,
            "pid": str(os.getpid()) if display_pid else None,
            "level": level,
            "separator": SEPARATOR,
        }

    @staticmethod
    def build(components: Components) -> str:
        """Join the present bracketed components in their fixed order."""
        bracketed = " ".join(
            str(components[name])
            for name in BRACKETED_COMPONENTS
            if components.get(name) is not None
        )
        separator = components.get("separator", SEPARATOR)
        return f"[{bracketed}] {components.get('level')} {separator} "

    def format(self, components: Components) -> str:
        """
        Build the prefix and colour it according to the style variant.

        Raises:
            ConfigurationError: If the style is not a PrefixStyle variant
        """
        style = self.style
        if isinstance(style, NoStyle):
            return self.build(components)
        if isinstance(style, SingleStyle):
            return colourise(self.build(components), style.token)
        if isinstance(style, StyleChain):
            return colourise(self.build(components), style.tokens)
        if isinstance(style, PerComponentStyle):
            return self._format_components(components, style)
        raise ConfigurationError(
            f"Unsupported prefix style: {style!r}",
            error_code="PREFIX_STYLE_INVALID",
            details={"type": type(style).__name__},
        )

    def _format_components(
        self, components: Components, style: PerComponentStyle
    ) -> str:
        styled = dict(components)
        for name, spec in style.components.items():
            if styled.get(name) is None:
                continue
            styled[name] = colourise(str(styled[name]), spec)

        prefix = self.build(styled)
        if style.overall is not None:
            prefix = colourise(prefix, style.overall)
        return prefix


class HerodotusFormatter(logging.Formatter):
    """
    logging.Formatter producing ``prefix + message + newline``.

    The formatter holds a snapshot of the owning logger's identity. It is
    replaced whenever the correlation id changes, so a line is always
    formatted with the ids current at the last refresh.

    The level shown in the prefix is taken from the record's
    ``herodotus_level`` attribute when present, falling back to the stdlib
    level name.
    """

    def __init__(
        self,
        system_name: str,
        correlation_id: str,
        display_pid: bool = False,
        style: Optional[PrefixStyle] = None,
    ):
        super().__init__()
        self.system_name = system_name
        self.correlation_id = correlation_id
        self.display_pid = display_pid
        self.prefix = PrefixFormatter(style)

    def format(self, record: logging.LogRecord) -> str:
        level = getattr(record, "herodotus_level", record.levelname)
        components = self.prefix.components(
            self.system_name, self.correlation_id, level, self.display_pid
        )
        return f"{self.prefix.format(components)}{record.getMessage()}\n"
