"""
Per-scenario file output.
"""

from pathlib import Path
from typing import Callable, Optional, Union

from herodotus.writers.base import ScenarioAware

PathFactory = Callable[[Optional[str]], Union[str, Path]]


class ScenarioFileWriter(ScenarioAware):
    """
    Append each write to a file chosen by the current scenario.

    The path is resolved on every write, so lines logged after a scenario
    change land in that scenario's file. Parent directories are created
    as needed.

    Args:
        path_for: Callable receiving the scenario id (None before the first
            scenario) and returning the file path to append to

    Example:
        >>> writer = ScenarioFileWriter(lambda s: f"logs/{s or 'setup'}.log")
        >>> writer.scenario = "checkout"
        >>> writer.write("line\\n")  # appended to logs/checkout.log
    """

    def __init__(self, path_for: PathFactory):
        self.path_for = path_for
        self._scenario: Optional[str] = None

    @property
    def scenario(self) -> Optional[str]:
        return self._scenario

    @scenario.setter
    def scenario(self, value: Optional[str]) -> None:
        self._scenario = value

    def current_path(self) -> Path:
        return Path(self.path_for(self._scenario))

    def write(self, text: str) -> int:
        path = self.current_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "a", encoding="utf-8") as handle:
            return handle.write(text)

    def close(self) -> None:
        # Files are opened per write; nothing stays open.
        pass
