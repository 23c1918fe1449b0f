"""
Unit tests for configuration and the logger factory
"""

import sys

import pytest
from pydantic import ValidationError

import herodotus
from herodotus.core.config.settings import LoggerConfig, Settings
from herodotus.core.exceptions.custom_exceptions import ConfigurationError
from herodotus.formatting.styles import PerComponentStyle, SingleStyle
from herodotus.writers.multi_writer import MultiWriter
from herodotus.writers.scenario_writer import ScenarioFileWriter


class TestLoggerConfig:
    """LoggerConfig defaults, validation and environment loading"""

    def test_defaults(self):
        config = LoggerConfig()

        assert config.main is False
        assert config.display_pid is False
        assert config.prefix_colour is None
        assert config.strip_colours_from_files is True
        assert config.level == "DEBUG"

    def test_level_aliases(self):
        assert LoggerConfig(level="warning").level == "WARN"
        assert LoggerConfig(level="critical").level == "FATAL"

    def test_invalid_level(self):
        with pytest.raises(ValidationError):
            LoggerConfig(level="LOUD")

    def test_invalid_prefix_colour_shape(self):
        with pytest.raises(ValidationError):
            LoggerConfig(prefix_colour=42)

    def test_prefix_style_property(self):
        assert LoggerConfig(prefix_colour="blue.bold").prefix_style == SingleStyle(
            "blue.bold"
        )
        assert isinstance(
            LoggerConfig(prefix_colour={"system": "bold"}).prefix_style,
            PerComponentStyle,
        )

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("HERODOTUS_MAIN", "true")
        monkeypatch.setenv("HERODOTUS_STRIP_COLOURS_FROM_FILES", "false")
        monkeypatch.setenv("HERODOTUS_PREFIX_COLOUR", '{"system": "bold"}')

        config = LoggerConfig()

        assert config.main is True
        assert config.strip_colours_from_files is False
        assert config.prefix_colour == {"system": "bold"}

    def test_config_helper_applies_overrides(self):
        config = herodotus.config(main=True, display_pid=True)

        assert config.main is True
        assert config.display_pid is True


class TestSettings:
    """Diagnostics settings"""

    def test_log_level_normalised(self):
        assert Settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(LOG_LEVEL="VERBOSE")

    def test_invalid_log_format(self):
        with pytest.raises(ValidationError):
            Settings(LOG_FORMAT="xml")


class TestLoggerFactory:
    """herodotus.logger()"""

    def test_writes_to_stdout_by_default(self, capsys, frozen_clock):
        log = herodotus.logger("checkout")

        log.info("hello")

        assert isinstance(log.sink, MultiWriter)
        assert log.sink.targets == (sys.stdout,)
        assert capsys.readouterr().out.endswith("] INFO -- : hello\n")

    def test_joins_default_registry(self):
        log = herodotus.logger("checkout")

        assert log in herodotus.default_registry

    def test_uses_given_registry(self, registry):
        log = herodotus.logger("checkout", registry=registry)

        assert log.registry is registry
        assert log not in herodotus.default_registry

    def test_output_path_file_receives_stripped_lines(self, capsys, tmp_path):
        path = tmp_path / "logs" / "run.log"
        log = herodotus.logger(
            "checkout",
            config=herodotus.config(prefix_colour="red"),
            output_path=str(path),
        )

        log.info("to file")
        log.sink.close()

        content = path.read_text()
        assert content.startswith("[checkout ")
        assert content.endswith("INFO -- : to file\n")
        assert "\x1b[" in capsys.readouterr().out

    def test_callable_output_path_writes_per_scenario(self, capsys, tmp_path):
        log = herodotus.logger(
            "checkout",
            output_path=[tmp_path / "all.log", lambda s: tmp_path / f"{s}.log"],
        )

        log.new_scenario("login")
        log.info("logging in")
        log.new_scenario("logout")
        log.info("logging out")
        log.sink.close()

        assert isinstance(log.sink.targets[2], ScenarioFileWriter)
        assert (tmp_path / "login.log").read_text().endswith("-- : logging in\n")
        assert (tmp_path / "logout.log").read_text().endswith("-- : logging out\n")
        assert len((tmp_path / "all.log").read_text().splitlines()) == 2

    def test_main_flag_elects_main(self):
        plain = herodotus.logger("plain")
        main = herodotus.logger("main", config=herodotus.config(main=True))

        assert herodotus.default_registry.main_logger is main
        assert plain.correlation_id == main.correlation_id

    def test_unsupported_output_path(self):
        with pytest.raises(ConfigurationError):
            herodotus.logger("checkout", output_path=[42])
