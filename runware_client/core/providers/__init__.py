"""Provider implementations and their shared interface."""

from .base import BaseImageProvider
from .image import RunwareImageProvider

__all__ = ["BaseImageProvider", "RunwareImageProvider"]
