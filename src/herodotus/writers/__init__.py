"""
Herodotus write targets.

Components:
    - MultiWriter: Fan-out writer with colour stripping for non-console
      targets
    - ScenarioAware: Capability interface for scenario-tracking targets
    - ScenarioFileWriter: Appends to a file chosen per scenario
"""

from herodotus.writers.base import ScenarioAware
from herodotus.writers.multi_writer import MultiWriter
from herodotus.writers.scenario_writer import ScenarioFileWriter

__all__ = ["MultiWriter", "ScenarioAware", "ScenarioFileWriter"]
