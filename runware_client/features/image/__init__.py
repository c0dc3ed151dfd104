"""Image generation: option building and the client façade."""

from .builder import build_task_descriptor, build_task_descriptors
from .service import RunwareImageClient

__all__ = ["RunwareImageClient", "build_task_descriptor", "build_task_descriptors"]
