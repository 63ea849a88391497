"""
Tests for channel-aware structured logging.
"""

import pytest

import jsonnlp.core.logging as logging_module
from jsonnlp.config.settings import LoggingSettings
from jsonnlp.core.logging import (
    ChannelLogger,
    LogChannel,
    LogLevel,
    configure_from_settings,
    configure_logging,
    get_current_config,
    get_logger,
)
from jsonnlp.model.serialization import decode
from jsonnlp.validate.runner import validate_corpus


@pytest.fixture(autouse=True)
def restore_quiet_logging():
    yield
    configure_logging(level="silent", force=True)


class TestEnums:
    def test_level_from_string(self):
        assert LogLevel.from_string("VERBOSE") is LogLevel.VERBOSE
        assert LogLevel.from_string("warning") is LogLevel.INFO
        assert LogLevel.from_string("nonsense") is LogLevel.INFO

    def test_channel_from_string(self):
        assert LogChannel.from_string("validate") is LogChannel.VALIDATE
        assert LogChannel.from_string("PIPELINE") is None


class TestConfiguration:
    def test_configure_channels(self):
        configure_logging(level="debug", channels=["validate", "bogus"], force=True)
        config = get_current_config()
        assert config["level"] == "DEBUG"
        assert config["channels"] == ["VALIDATE"]

    def test_empty_channels_means_all(self):
        configure_logging(level="info", channels=[], force=True)
        assert len(get_current_config()["channels"]) == len(LogChannel.all())

    def test_not_reconfigured_without_force(self):
        configure_logging(level="debug", force=True)
        configure_logging(level="info")
        assert get_current_config()["level"] == "DEBUG"

    def test_configure_from_settings(self):
        configure_from_settings(LoggingSettings(level="verbose", format="json", channels=["config"]))
        config = get_current_config()
        assert config["level"] == "VERBOSE"
        assert config["format"] == "json"
        assert config["channels"] == ["CONFIG"]


class TestChannelLogger:
    def test_get_logger_by_name(self):
        logger = get_logger("validate")
        assert isinstance(logger, ChannelLogger)
        assert logger.channel is LogChannel.VALIDATE
        assert logger.name == "jsonnlp.validate"

    def test_unknown_channel_falls_back_to_system(self):
        assert get_logger("nope").channel is LogChannel.SYSTEM

    def test_level_gating(self):
        configure_logging(level="info", force=True)
        logger = get_logger(LogChannel.VALIDATE)
        assert logger._should_log(LogLevel.INFO)
        assert not logger._should_log(LogLevel.VERBOSE)

    def test_channel_gating(self):
        configure_logging(level="debug", channels=["config"], force=True)
        assert not get_logger(LogChannel.VALIDATE)._should_log(LogLevel.INFO)
        assert get_logger(LogChannel.CONFIG)._should_log(LogLevel.DEBUG)

    def test_json_output(self, capsys):
        configure_logging(level="info", format="json", force=True)
        get_logger(LogChannel.VALIDATE).info("corpus_validated", problems=0)
        err = capsys.readouterr().err
        assert '"event": "corpus_validated"' in err
        assert '"channel": "VALIDATE"' in err

    def test_silent_suppresses_warnings(self, capsys):
        configure_logging(level="silent", format="json", force=True)
        get_logger(LogChannel.SYSTEM).warning("ignored")
        assert "ignored" not in capsys.readouterr().err


class TestUnconfigured:
    """Before configure_logging() runs, the library writes nothing."""

    @pytest.fixture
    def unconfigured(self, monkeypatch):
        monkeypatch.setitem(logging_module._config, "configured", False)
        monkeypatch.setitem(logging_module._config, "level", LogLevel.DEBUG)

    def test_channels_are_gated(self, unconfigured):
        logger = get_logger(LogChannel.VALIDATE)
        assert not logger._should_log(LogLevel.INFO)
        assert not logger._should_log(LogLevel.DEBUG)

    def test_validate_corpus_keeps_stdout_clean(self, unconfigured, capsys):
        corpus = decode(b'{"meta":{"DC.conformsTo":"1.0"},"documents":[]}')
        assert validate_corpus(corpus) == []
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_warning_is_gated(self, unconfigured, capsys):
        get_logger(LogChannel.SYSTEM).warning("corpus_invalid")
        assert "corpus_invalid" not in capsys.readouterr().out
