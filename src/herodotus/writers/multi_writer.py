"""
Fan-out writer for Herodotus loggers.

MultiWriter forwards every write to a fixed list of targets. The console
target receives the payload untouched; every other target receives it
with ANSI styling removed unless ``strip_colours_from_files`` is disabled.
"""

import sys
import threading
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional, TextIO

from herodotus.core.config.settings import LoggerConfig
from herodotus.core.exceptions.custom_exceptions import SinkCloseError
from herodotus.core.logging import get_logger
from herodotus.formatting.colours import strip_colours
from herodotus.writers.base import ScenarioAware

logger = get_logger(__name__)


class MultiWriter:
    """
    Write one payload to several targets.

    Targets are any objects with a ``write(str)`` method. ``flush`` and
    ``close`` are called when the target provides them.

    Args:
        *targets: Write targets, in write order
        config: Logger configuration supplying ``strip_colours_from_files``.
            Defaults to a LoggerConfig read from the environment.
        console: The console target. It is never colour-stripped and never
            closed. Defaults to ``sys.stdout`` at construction time.

    Thread Safety:
        ``write`` and ``flush`` hold an instance lock for the whole
        write-and-flush sequence, so concurrent lines never interleave.
        ``scenario`` holds the same lock while a logger assigns its
        scenario and writes, so a line always lands in the files of the
        scenario it was logged under.

    Example:
        >>> with open("run.log", "a") as log_file:
        ...     writer = MultiWriter(sys.stdout, log_file)
        ...     writer.write("\\x1b[31mfailed\\x1b[0m\\n")
    """

    def __init__(
        self,
        *targets: Any,
        config: Optional[LoggerConfig] = None,
        console: Optional[TextIO] = None,
    ):
        self.targets = tuple(targets)
        self.console = console if console is not None else sys.stdout
        config = config if config is not None else LoggerConfig()
        self.strip_colours_from_files = config.strip_colours_from_files
        self._lock = threading.RLock()

    def _is_console(self, target: Any) -> bool:
        return target is self.console

    def write(self, payload: str) -> int:
        """
        Write payload to every target and flush each one.

        Errors raised by a target propagate to the caller.

        Returns:
            int: Number of characters in the payload
        """
        stripped = None
        with self._lock:
            for target in self.targets:
                if not self._is_console(target) and self.strip_colours_from_files:
                    if stripped is None:
                        stripped = strip_colours(payload)
                    target.write(stripped)
                else:
                    target.write(payload)
                if hasattr(target, "flush"):
                    target.flush()
        return len(payload)

    def flush(self) -> None:
        with self._lock:
            for target in self.targets:
                if hasattr(target, "flush"):
                    target.flush()

    def close(self) -> None:
        """
        Close every target except the console.

        All targets are attempted even when one of them fails.

        Raises:
            SinkCloseError: If any target failed to close, with each
                failure listed in ``details["failures"]``
        """
        failures: List[dict] = []
        for target in self.targets:
            if self._is_console(target) or not hasattr(target, "close"):
                continue
            try:
                target.close()
            except Exception as e:
                logger.warning(
                    "Failed to close write target",
                    target=repr(target),
                    error=str(e),
                )
                failures.append({"target": target, "error": e})

        if failures:
            raise SinkCloseError(
                f"{len(failures)} write target(s) failed to close",
                error_code="SINK_CLOSE_ERROR",
                details={"failures": failures},
            )

    def scenario_targets(self) -> List[ScenarioAware]:
        """Targets implementing ScenarioAware, in target order."""
        return [t for t in self.targets if isinstance(t, ScenarioAware)]

    def propagate_scenario(self, scenario_id: Optional[str]) -> None:
        """Assign scenario_id to every scenario-aware target."""
        with self._lock:
            for target in self.scenario_targets():
                target.scenario = scenario_id

    @contextmanager
    def scenario(self, scenario_id: Optional[str]) -> Iterator["MultiWriter"]:
        """
        Hold the write lock with scenario_id assigned to scenario-aware
        targets.

        Writes made inside the block by the same thread go to the files of
        scenario_id. Other threads wait until the block exits.

        Example:
            >>> with writer.scenario("checkout"):
            ...     writer.write("line\\n")
        """
        with self._lock:
            self.propagate_scenario(scenario_id)
            yield self
