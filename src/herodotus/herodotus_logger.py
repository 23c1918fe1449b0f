"""
Correlation-aware logger.

HerodotusLogger writes single-line log entries prefixed with the system
name, date, time and an 8-character correlation id shared by every logger
taking part in the same scenario::

    [checkout 2024-05-01 09:30:00 1a2b3c4d] INFO -- : Basket created

Key Features:
    - Correlation ids synchronised across loggers through a LoggerRegistry
    - Scenarios: ``new_scenario`` rotates the correlation id everywhere
      when a main logger exists
    - Buffered entries released later in their original order
    - Lazy messages: a zero-argument callable is only evaluated when the
      line is actually written
    - Colourised prefixes, stripped again for file targets by MultiWriter

Writing is delegated to a standard library ``logging.Logger`` with one
stream handler on the configured sink. Level filtering is handled there.

Example:
    >>> from herodotus import HerodotusLogger, LoggerConfig
    >>> log = HerodotusLogger("checkout", config=LoggerConfig(main=True))
    >>> log.new_scenario("guest can pay by card")
    >>> log.info("Basket created")
    >>> log.debug(lambda: expensive_dump(), buffered=True)
    >>> log.release_buffered_logs()
"""

import logging
import sys
import threading
import uuid
from collections import deque
from contextlib import nullcontext
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, ContextManager, Deque, Optional, TextIO, Union

from herodotus.core.config.settings import LoggerConfig
from herodotus.formatting.prefix import HerodotusFormatter
from herodotus.formatting.styles import PrefixStyle
from herodotus.registry import LoggerRegistry, default_registry
from herodotus.writers.base import ScenarioAware
from herodotus.writers.multi_writer import MultiWriter

Message = Union[str, Callable[[], Any]]

CORRELATION_ID_LENGTH = 8


class LogLevel(Enum):
    """Severity levels, valued by their standard library equivalents."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR
    FATAL = logging.CRITICAL

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        aliases = {"WARNING": "WARN", "CRITICAL": "FATAL"}
        key = name.upper()
        return cls[aliases.get(key, key)]


@dataclass
class BufferedEntry:
    """A log call held back until release_buffered_logs()."""

    level: LogLevel
    message: Message


def new_correlation_id() -> str:
    """First eight characters of a random UUID."""
    return str(uuid.uuid4())[:CORRELATION_ID_LENGTH]


class _SinkHandler(logging.StreamHandler):
    """Stream handler that lets sink failures reach the caller."""

    terminator = ""

    def handleError(self, record: logging.LogRecord) -> None:
        # Called from inside emit()'s except block.
        raise


class HerodotusLogger:
    """
    Logger facade adding correlation ids, scenarios and buffering.

    Args:
        system_name: Label identifying the subsystem, shown first in the
            prefix
        sink: Writable target, usually a MultiWriter. Defaults to
            ``sys.stdout``.
        config: Logger options. Defaults to a LoggerConfig read from the
            environment.
        registry: Registry to join. Defaults to the process-wide
            ``default_registry``.

    Attributes:
        system_name (str): Subsystem label
        correlation_id (str): Current 8-character correlation id
        scenario_id (Optional[str]): Current scenario, None until one starts
        main (bool): Whether this logger is a broadcast source
        display_pid (bool): Whether the process id is shown in the prefix
        prefix_style (PrefixStyle): Parsed prefix colouring
    """

    def __init__(
        self,
        system_name: str,
        sink: Optional[TextIO] = None,
        config: Optional[LoggerConfig] = None,
        registry: Optional[LoggerRegistry] = None,
    ):
        config = config if config is not None else LoggerConfig()

        self.system_name = system_name
        self.sink = sink if sink is not None else sys.stdout
        self.main = config.main
        self.display_pid = config.display_pid
        self.prefix_style: PrefixStyle = config.prefix_style
        self.registry = registry if registry is not None else default_registry

        self.correlation_id = new_correlation_id()
        self.scenario_id: Optional[str] = None

        self._buffer: Deque[BufferedEntry] = deque()
        self._buffer_lock = threading.Lock()

        self._logger = logging.Logger(f"herodotus.{system_name}")
        self._logger.setLevel(LogLevel.from_name(config.level).value)
        self._logger.propagate = False
        self._handler = _SinkHandler(self.sink)
        self._logger.addHandler(self._handler)
        self.refresh_formatter()

        with self.registry.lock:
            self.registry.register(self)
            if self.registry.main_logger is not None:
                self.registry.broadcast()

    def __repr__(self) -> str:
        return (
            f"HerodotusLogger(system_name={self.system_name!r}, "
            f"correlation_id={self.correlation_id!r}, main={self.main})"
        )

    def refresh_formatter(self) -> None:
        """
        Rebuild the formatter from the current identity.

        Must be called after changing correlation_id or scenario_id
        directly for the change to show in written lines.
        """
        self._handler.setFormatter(
            HerodotusFormatter(
                self.system_name,
                self.correlation_id,
                display_pid=self.display_pid,
                style=self.prefix_style,
            )
        )

    def new_scenario(self, scenario_id: str) -> None:
        """
        Start a new scenario with a fresh correlation id.

        When a main logger is registered every registered logger, this one
        and the main included, converges on the new ids. Called on a
        non-main logger, this also overwrites the main logger's ids.
        """
        with self.registry.lock:
            self.scenario_id = scenario_id
            self.correlation_id = new_correlation_id()
            self.refresh_formatter()
            self.registry.synchronise_from(self)

    def log(self, level: LogLevel, message: Message, buffered: bool = False) -> None:
        """
        Write a line at ``level``, or queue it when ``buffered`` is True.

        ``message`` may be a string or a zero-argument callable. Callables
        are evaluated only when the line is written, and not at all when
        the level is filtered out.
        """
        if buffered:
            with self._buffer_lock:
                self._buffer.append(BufferedEntry(level, message))
            return
        self._write(level, message)

    def _write(self, level: LogLevel, message: Message) -> None:
        if not self._logger.isEnabledFor(level.value):
            return
        text = message() if callable(message) else message
        with self._scenario_scope():
            self._logger.log(
                level.value, "%s", text, extra={"herodotus_level": level.name}
            )

    def _scenario_scope(self) -> ContextManager[Any]:
        # Loggers sharing a MultiWriter may be on different scenarios.
        if isinstance(self.sink, MultiWriter):
            return self.sink.scenario(self.scenario_id)
        if isinstance(self.sink, ScenarioAware):
            self.sink.scenario = self.scenario_id
        return nullcontext()

    def debug(self, message: Message, buffered: bool = False) -> None:
        self.log(LogLevel.DEBUG, message, buffered=buffered)

    def info(self, message: Message, buffered: bool = False) -> None:
        self.log(LogLevel.INFO, message, buffered=buffered)

    def warn(self, message: Message, buffered: bool = False) -> None:
        self.log(LogLevel.WARN, message, buffered=buffered)

    def error(self, message: Message, buffered: bool = False) -> None:
        self.log(LogLevel.ERROR, message, buffered=buffered)

    def fatal(self, message: Message, buffered: bool = False) -> None:
        self.log(LogLevel.FATAL, message, buffered=buffered)

    warning = warn
    critical = fatal

    @property
    def buffered_count(self) -> int:
        with self._buffer_lock:
            return len(self._buffer)

    def release_buffered_logs(self) -> None:
        """
        Write every buffered entry in the order it was queued.

        Lazy messages are evaluated now. Each entry leaves the queue just
        before it is written, so if a write fails the entries after it stay
        queued. Safe to call with an empty buffer.
        """
        while True:
            with self._buffer_lock:
                if not self._buffer:
                    break
                entry = self._buffer.popleft()
            self._write(entry.level, entry.message)
