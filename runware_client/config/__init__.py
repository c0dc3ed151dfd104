"""Configuration exports."""

from . import api_keys, image
from .api_keys import *  # noqa: F401,F403

__all__ = [
    *api_keys.__all__,
    "image",
]
