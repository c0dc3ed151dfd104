"""Utility helpers shared by the client."""

from .env import get_env, get_env_float

__all__ = ["get_env", "get_env_float"]
