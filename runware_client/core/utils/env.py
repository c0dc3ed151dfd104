"""Common environment helpers used across the client."""

from __future__ import annotations

import os

from runware_client.core.exceptions import ConfigurationError

__all__ = ["get_env", "get_env_float"]


def get_env(key: str, default: str | None = None, *, required: bool = False) -> str | None:
    """Return an environment variable and optionally enforce its presence."""

    value = os.getenv(key, default)
    if required and not value:
        raise ConfigurationError(f"Required environment variable {key} not set", key=key)
    return value


def get_env_float(key: str, default: float) -> float:
    """Return a float environment variable, falling back to ``default`` when unset."""

    raw = get_env(key)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"Environment variable {key} must be a number", key=key) from exc
