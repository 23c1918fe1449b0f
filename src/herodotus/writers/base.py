"""
Capability interface for scenario-aware write targets.

A target that wants to know which scenario a line belongs to (for example
to choose an output file per scenario) subclasses ScenarioAware. Before
each write, a HerodotusLogger assigns its current scenario id to every
ScenarioAware target reachable through its MultiWriter.
"""

from abc import ABC, abstractmethod
from typing import Optional


class ScenarioAware(ABC):
    """
    Abstract base class for targets that track the active scenario.

    Implementations must expose a readable and assignable ``scenario``
    property. The value is None until a scenario has been started.

    Example:
        >>> class TaggingWriter(ScenarioAware):
        ...     def __init__(self):
        ...         self._scenario = None
        ...     @property
        ...     def scenario(self):
        ...         return self._scenario
        ...     @scenario.setter
        ...     def scenario(self, value):
        ...         self._scenario = value
        ...     def write(self, text):
        ...         print(f"{self._scenario}: {text}", end="")
    """

    @property
    @abstractmethod
    def scenario(self) -> Optional[str]:
        """The scenario id lines are currently written for."""

    @scenario.setter
    @abstractmethod
    def scenario(self, value: Optional[str]) -> None:
        pass
