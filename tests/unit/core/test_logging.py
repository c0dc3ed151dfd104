"""Tests for the opt-in logging configuration."""

import logging

from runware_client.core.logging import build_logging_config, setup_logging


def test_build_logging_config_reads_level(monkeypatch):
    monkeypatch.setenv("RUNWARE_LOG_LEVEL", "debug")

    config = build_logging_config()

    assert config["root"]["level"] == "DEBUG"
    assert config["handlers"]["console"]["level"] == "DEBUG"
    assert config["loggers"]["httpx"]["level"] == "WARNING"


def test_build_logging_config_ignores_unknown_level(monkeypatch):
    monkeypatch.setenv("RUNWARE_LOG_LEVEL", "chatty")
    monkeypatch.setenv("RUNWARE_LOG_TIME_MS", "yes")

    config = build_logging_config()

    assert config["root"]["level"] == "INFO"
    assert "%(msecs)03d" in config["formatters"]["standard"]["format"]


def test_setup_logging_applies_root_level(monkeypatch):
    root = logging.getLogger()
    previous_level = root.level
    previous_handlers = list(root.handlers)
    monkeypatch.setenv("RUNWARE_LOG_LEVEL", "WARNING")
    try:
        setup_logging(force=True)
        assert root.level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING
    finally:
        for handler in list(root.handlers):
            if handler not in previous_handlers:
                root.removeHandler(handler)
        for handler in previous_handlers:
            if handler not in root.handlers:
                root.addHandler(handler)
        root.setLevel(previous_level)
        logging.captureWarnings(False)
