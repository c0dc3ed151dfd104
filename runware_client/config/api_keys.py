"""API key loading for the Runware provider."""

from __future__ import annotations

import os
from typing import Dict


def load_api_keys() -> Dict[str, str]:
    """Load API keys from the environment with sensible defaults."""

    return {
        "runware": os.getenv("RUNWARE_API_KEY", ""),
    }


__all__ = ["load_api_keys"]
