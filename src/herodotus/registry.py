"""
Registry of live HerodotusLogger instances.

The registry is how loggers created independently of each other end up
sharing one correlation id. Every logger registers itself on
construction. At most one registered logger is the *main* logger: the
source whose correlation and scenario ids are broadcast to every other
instance.

Synchronisation Rules:
    - A logger constructed with ``main=True`` replaces any existing main
      (with a warning) and its ids are broadcast immediately.
    - A logger constructed while a main exists adopts the main's ids.
    - ``new_scenario`` on the main broadcasts its new ids.
    - ``new_scenario`` on any other logger, while a main exists, first
      overwrites the main's ids with the caller's new ones (with a
      warning) and then broadcasts, so every instance converges.
    - Without a main, ``new_scenario`` only affects the caller.

Membership is weak: the registry never keeps a logger alive. The main
logger is held strongly until it is replaced, unregistered or the
registry is reset.

Thread Safety:
    Registration, main reassignment, broadcast and scenario
    synchronisation all run under one re-entrant lock, so a broadcast is
    never observed half-applied.
"""

import threading
import weakref
from typing import TYPE_CHECKING, List, Optional

from herodotus.core.logging import get_logger

if TYPE_CHECKING:
    from herodotus.herodotus_logger import HerodotusLogger

logger = get_logger(__name__)


class LoggerRegistry:
    """
    Track HerodotusLogger instances and the current main logger.

    Example:
        >>> registry = LoggerRegistry()
        >>> api = HerodotusLogger("api", registry=registry)
        >>> runner = HerodotusLogger(
        ...     "runner", config=LoggerConfig(main=True), registry=registry
        ... )
        >>> api.correlation_id == runner.correlation_id
        True
    """

    def __init__(self):
        self.lock = threading.RLock()
        self._instances: "weakref.WeakSet[HerodotusLogger]" = weakref.WeakSet()
        self._main_logger: Optional["HerodotusLogger"] = None

    @property
    def main_logger(self) -> Optional["HerodotusLogger"]:
        return self._main_logger

    def instances(self) -> List["HerodotusLogger"]:
        """Snapshot of the live registered loggers."""
        with self.lock:
            return list(self._instances)

    def __contains__(self, item: object) -> bool:
        with self.lock:
            return item in self._instances

    def __len__(self) -> int:
        with self.lock:
            return len(self._instances)

    def register(self, instance: "HerodotusLogger") -> None:
        """
        Add a logger, making it the main logger if it is flagged main.

        Replacing a different main logger is reported as a warning written
        through the new logger.
        """
        with self.lock:
            self._instances.add(instance)
            logger.debug(
                "Logger registered",
                system_name=instance.system_name,
                main=instance.main,
            )
            if not instance.main:
                return

            previous = self._main_logger
            if previous is not None and previous is not instance:
                instance.warn(
                    f"Main logger already set: '{previous.system_name}'. "
                    f"This will be overwritten by '{instance.system_name}'"
                )
            self._main_logger = instance
            logger.info("Main logger elected", system_name=instance.system_name)

    def unregister(self, instance: "HerodotusLogger") -> None:
        """Remove a logger, clearing the main logger if it was the main."""
        with self.lock:
            self._instances.discard(instance)
            if self._main_logger is instance:
                self._main_logger = None

    def broadcast(self) -> None:
        """
        Copy the main logger's ids onto every other registered logger.

        Each updated logger rebuilds its formatter. Does nothing when no
        main logger is set.
        """
        with self.lock:
            main = self._main_logger
            if main is None:
                return
            for instance in list(self._instances):
                if instance is main:
                    continue
                instance.correlation_id = main.correlation_id
                instance.scenario_id = main.scenario_id
                instance.refresh_formatter()

    def synchronise_from(self, source: "HerodotusLogger") -> None:
        """
        Propagate a scenario change made on ``source``.

        If a main logger exists and ``source`` is not it, the main adopts
        ``source``'s ids (with a warning) before the broadcast, so every
        registered logger ends up with ``source``'s new ids.
        """
        with self.lock:
            main = self._main_logger
            if main is None:
                return
            if main is not source:
                source.warn("You are calling new_scenario on a non-main logger.")
                main.correlation_id = source.correlation_id
                main.scenario_id = source.scenario_id
                main.refresh_formatter()
            self.broadcast()

    def reset(self) -> None:
        """Forget every logger and the main logger."""
        with self.lock:
            self._instances = weakref.WeakSet()
            self._main_logger = None


default_registry = LoggerRegistry()
