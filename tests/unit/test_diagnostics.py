"""
Unit tests for the library's own diagnostics logging
"""

import logging

import pytest
import structlog

from herodotus.core.config.settings import Settings, get_settings
from herodotus.core.logging import get_logger, setup_logging


@pytest.fixture
def diagnostics_env(monkeypatch):
    """Environment overrides, with diagnostics set up again afterwards"""
    yield monkeypatch
    monkeypatch.undo()
    setup_logging()


class TestDiagnosticsLogging:
    """setup_logging and get_logger"""

    def test_leaves_structlog_global_configuration_alone(self):
        get_logger("tests").debug("registered", system_name="checkout")

        assert not structlog.is_configured()

    def test_handlers_only_on_diagnostics_logger(self):
        setup_logging()

        diagnostics = logging.getLogger("herodotus.diagnostics")
        assert diagnostics.handlers
        assert diagnostics.propagate is False

    def test_level_read_from_environment_on_setup(self, diagnostics_env):
        diagnostics_env.setenv("HERODOTUS_LOG_LEVEL", "error")

        setup_logging()

        assert logging.getLogger("herodotus.diagnostics").level == logging.ERROR

    def test_writes_to_configured_file(self, diagnostics_env, tmp_path):
        path = tmp_path / "diagnostics" / "herodotus.log"
        diagnostics_env.setenv("HERODOTUS_LOG_FILE_PATH", str(path))
        setup_logging()

        get_logger("tests").warning("Failed to close write target", target="run.log")

        content = path.read_text()
        assert "Failed to close write target" in content
        assert "target=run.log" in content

    def test_json_format(self, diagnostics_env, tmp_path):
        path = tmp_path / "herodotus.jsonl"
        diagnostics_env.setenv("HERODOTUS_LOG_FILE_PATH", str(path))
        diagnostics_env.setenv("HERODOTUS_LOG_FORMAT", "json")
        setup_logging()

        get_logger("tests").warning("Main logger replaced", previous="runner")

        content = path.read_text()
        assert '"event": "Main logger replaced"' in content
        assert '"previous": "runner"' in content


def test_get_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("HERODOTUS_LOG_FORMAT", "json")

    settings = get_settings()

    assert isinstance(settings, Settings)
    assert settings.LOG_FORMAT == "json"
