"""
Convenience constructors for Herodotus loggers.

Functions:
    config(**overrides): Build a LoggerConfig
    logger(system_name, ...): Build a HerodotusLogger writing to stdout and
        any number of additional outputs through a MultiWriter
"""

import os
import sys
from typing import Any, Callable, List, Optional, Sequence, Union

from herodotus.core.config.settings import LoggerConfig
from herodotus.core.exceptions.custom_exceptions import ConfigurationError
from herodotus.herodotus_logger import HerodotusLogger
from herodotus.registry import LoggerRegistry
from herodotus.writers.multi_writer import MultiWriter
from herodotus.writers.scenario_writer import ScenarioFileWriter

OutputPath = Union[str, "os.PathLike[str]", Callable[[Optional[str]], Any]]


def config(**overrides: Any) -> LoggerConfig:
    """
    Build a LoggerConfig from environment defaults and keyword overrides.

    Example:
        >>> cfg = config(main=True, prefix_colour={"system": "bold"})
    """
    return LoggerConfig(**overrides)


def _open_output(output: OutputPath) -> Any:
    if isinstance(output, (str, os.PathLike)):
        path = os.fspath(output)
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        return open(path, "a", encoding="utf-8")
    if callable(output):
        return ScenarioFileWriter(output)
    raise ConfigurationError(
        f"Unsupported output path: {output!r}",
        error_code="OUTPUT_PATH_INVALID",
        details={"type": type(output).__name__},
    )


def logger(
    system_name: str,
    config: Optional[LoggerConfig] = None,
    output_path: Union[OutputPath, Sequence[OutputPath], None] = None,
    registry: Optional[LoggerRegistry] = None,
) -> HerodotusLogger:
    """
    Create a HerodotusLogger writing to stdout plus optional outputs.

    Args:
        system_name: Label identifying the subsystem
        config: Logger options, shared with the MultiWriter
        output_path: Additional outputs. A path is opened for appending; a
            callable receives the current scenario id and returns the path
            to append to. A list may mix both.
        registry: Registry to join, defaults to the process-wide one

    Returns:
        HerodotusLogger: The new logger. Close its ``sink`` to close any
        files opened for it.

    Example:
        >>> log = logger(
        ...     "checkout",
        ...     config=config(main=True),
        ...     output_path=["run.log", lambda s: f"logs/{s}.log"],
        ... )
    """
    config = config if config is not None else LoggerConfig()

    if output_path is None:
        outputs: List[OutputPath] = []
    elif isinstance(output_path, (list, tuple)):
        outputs = list(output_path)
    else:
        outputs = [output_path]

    targets = [sys.stdout] + [_open_output(output) for output in outputs]
    writer = MultiWriter(*targets, config=config, console=sys.stdout)
    return HerodotusLogger(system_name, writer, config=config, registry=registry)
