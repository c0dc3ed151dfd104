"""Runware image inference configuration."""

from __future__ import annotations

DEFAULT_BASE_URL = "https://api.runware.ai/v1"

# Image inference regularly outlives httpx's 5s default
DEFAULT_TIMEOUT_SECONDS = 60.0

MAX_RESULTS_PER_TASK = 20

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_SECONDS",
    "MAX_RESULTS_PER_TASK",
]
