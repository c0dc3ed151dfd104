"""Image provider implementations."""

from .runware import RunwareImageProvider

__all__ = ["RunwareImageProvider"]
