"""Client façade for Runware image generation."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from runware_client.config.api_keys import load_api_keys
from runware_client.config.image.runware import DEFAULT_TIMEOUT_SECONDS
from runware_client.core.exceptions import ConfigurationError
from runware_client.core.providers.base import BaseImageProvider
from runware_client.core.providers.image import RunwareImageProvider
from runware_client.core.pydantic_schemas import GenerationRecord, TaskDescriptor
from runware_client.core.utils.env import get_env, get_env_float
from .builder import build_task_descriptors

logger = logging.getLogger(__name__)


class RunwareImageClient:
    """Configure a batch of image tasks and submit it to Runware."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        provider: BaseImageProvider | None = None,
    ) -> None:
        self._provider = provider or RunwareImageProvider(api_key, base_url=base_url, timeout=timeout)
        self._tasks: Tuple[TaskDescriptor, ...] = ()

    @classmethod
    def from_env(cls) -> "RunwareImageClient":
        """Build a client from ``RUNWARE_*`` environment variables."""

        api_key = load_api_keys()["runware"]
        if not api_key:
            raise ConfigurationError(
                "Required environment variable RUNWARE_API_KEY not set",
                key="RUNWARE_API_KEY",
            )
        return cls(
            api_key,
            base_url=get_env("RUNWARE_API_BASE_URL"),
            timeout=get_env_float("RUNWARE_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
        )

    @property
    def tasks(self) -> Tuple[TaskDescriptor, ...]:
        """Descriptors from the most recent ``configure`` call."""

        return self._tasks

    def configure(self, options: Sequence[Mapping[str, Any]]) -> "RunwareImageClient":
        """Replace the pending batch with descriptors built from ``options``."""

        self._tasks = tuple(build_task_descriptors(options))
        logger.debug("Configured %d Runware task(s)", len(self._tasks))
        return self

    async def generate(self) -> List[GenerationRecord]:
        """Submit the configured batch and return the generated records."""

        if not self._tasks:
            raise ConfigurationError("No tasks configured; call configure() first", key="tasks")
        return await self._provider.generate_batch(self._tasks)

    async def generate_images(self, options: Sequence[Mapping[str, Any]]) -> List[GenerationRecord]:
        """Configure and submit in one call."""

        return await self.configure(options).generate()

    def match_results(
        self, records: Sequence[GenerationRecord]
    ) -> Dict[str, List[GenerationRecord]]:
        """Group ``records`` by task ID, keyed in configured task order.

        Use this instead of positional matching when a task requests several
        results or when provider ordering cannot be relied on.
        """

        grouped: Dict[str, List[GenerationRecord]] = {task.task_id: [] for task in self._tasks}
        for record in records:
            bucket: Optional[List[GenerationRecord]] = grouped.get(record.task_id)
            if bucket is None:
                logger.warning("Received result for unknown task %s", record.task_id)
                continue
            bucket.append(record)
        return grouped


__all__ = ["RunwareImageClient"]
