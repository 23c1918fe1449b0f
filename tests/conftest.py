"""
Pytest configuration and fixtures for Herodotus tests
"""

import io
import uuid
from datetime import datetime
from typing import Iterator, List
from unittest.mock import patch

import pytest

from herodotus.core.config.settings import LoggerConfig
from herodotus.registry import LoggerRegistry, default_registry

FROZEN_TIME = datetime(2022, 1, 1)

SAMPLE_UUIDS: List[str] = [
    "123e4567-e89b-12d3-a456-426614174000",
    "00112233-4455-6677-8899-aabbccddeeff",
    "e19f77a7-337c-47a8-93a9-c2180040ba03",
    "5f0c6c3e-7d2a-4a51-9a3f-0d7c2b1e8f44",
]


@pytest.fixture(autouse=True)
def clean_default_registry() -> Iterator[None]:
    """Keep the process-wide registry empty between tests"""
    default_registry.reset()
    yield
    default_registry.reset()


@pytest.fixture
def registry() -> LoggerRegistry:
    """Fresh registry isolated from the process-wide one"""
    return LoggerRegistry()


@pytest.fixture
def frozen_clock() -> Iterator[datetime]:
    """Freeze the prefix clock at 2022-01-01 00:00:00"""
    with patch("herodotus.formatting.prefix._now", return_value=FROZEN_TIME):
        yield FROZEN_TIME


@pytest.fixture
def fixed_uuids() -> Iterator[List[str]]:
    """Hand out SAMPLE_UUIDS in order as correlation id sources"""
    with patch(
        "herodotus.herodotus_logger.uuid.uuid4",
        side_effect=[uuid.UUID(u) for u in SAMPLE_UUIDS],
    ):
        yield SAMPLE_UUIDS


@pytest.fixture
def sink() -> io.StringIO:
    """In-memory write target"""
    return io.StringIO()


@pytest.fixture
def main_config() -> LoggerConfig:
    return LoggerConfig(main=True)
