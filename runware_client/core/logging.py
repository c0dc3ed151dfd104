"""Opt-in logging configuration for applications using the Runware client.

The library itself only creates module loggers; nothing is configured on
import. Applications that want the standard console format call
``setup_logging()`` once at startup.
"""
from __future__ import annotations

import logging
import logging.config
from typing import Dict

from runware_client.core.utils.env import get_env

_LOGGING_CONFIGURED = False

_QUIET_LOGGERS = ("httpx", "httpcore")


def _resolve_level(value: str | None, default: str) -> str:
    value = (value or "").strip().upper()
    if value and isinstance(getattr(logging, value, None), int):
        return value
    return default


def build_logging_config() -> Dict[str, object]:
    """Return the ``dictConfig`` mapping derived from the environment."""

    log_level = _resolve_level(get_env("RUNWARE_LOG_LEVEL", default="INFO"), "INFO")

    use_milliseconds = (
        (get_env("RUNWARE_LOG_TIME_MS", default="false") or "false").lower()
        in {"1", "true", "yes", "on"}
    )
    if use_milliseconds:
        fmt = "%(asctime)s.%(msecs)03d %(levelname)s [%(name)s:%(lineno)d] - %(message)s"
    else:
        fmt = "%(asctime)s %(levelname)s [%(name)s:%(lineno)d] - %(message)s"

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": fmt,
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": log_level,
                "formatter": "standard",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {
            "level": log_level,
            "handlers": ["console"],
        },
        "loggers": {
            name: {"level": "WARNING", "propagate": True} for name in _QUIET_LOGGERS
        },
    }


def setup_logging(force: bool = False) -> None:
    """Configure the root logger for console output."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED and not force:
        return

    logging.config.dictConfig(build_logging_config())
    logging.captureWarnings(True)
    _LOGGING_CONFIGURED = True


__all__ = ["build_logging_config", "setup_logging"]
