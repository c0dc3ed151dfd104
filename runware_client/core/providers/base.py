"""Base provider interface for batched image generation.

Providers receive already-normalized ``TaskDescriptor`` objects and return
decoded ``GenerationRecord`` objects. Option parsing lives in the request
builder; providers only deal with the wire format and the HTTP exchange.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Sequence

from runware_client.core.pydantic_schemas import GenerationRecord, TaskDescriptor


class BaseImageProvider(ABC):
    """Base interface for image generation providers."""

    provider_name: str

    @abstractmethod
    async def generate_batch(self, tasks: Sequence[TaskDescriptor]) -> List[GenerationRecord]:
        """Submit ``tasks`` in one exchange and return the generated records."""

        raise NotImplementedError


__all__ = ["BaseImageProvider"]
