"""Runware image inference provider."""

from __future__ import annotations

import logging
from typing import List, Sequence

import httpx

from runware_client.config.image.runware import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS
from runware_client.core.exceptions import ConfigurationError, RunwareAPIError, TransportError
from runware_client.core.providers.base import BaseImageProvider
from runware_client.core.pydantic_schemas import GenerationRecord, TaskDescriptor
from .utils.runware_helpers import build_headers, build_payload, decode_envelope

logger = logging.getLogger(__name__)


class RunwareImageProvider(BaseImageProvider):
    """Submit image inference batches to the Runware REST endpoint."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        if not api_key:
            raise ConfigurationError("Runware API key not configured", key="RUNWARE_API_KEY")

        self.api_key = api_key
        self.base_url = self._validate_base_url(base_url or DEFAULT_BASE_URL)
        self.timeout = DEFAULT_TIMEOUT_SECONDS if timeout is None else timeout
        self.provider_name = "runware"

    @staticmethod
    def _validate_base_url(base_url: str) -> str:
        """Return the normalized base URL or raise ``ConfigurationError``."""

        normalized = str(base_url).strip().rstrip("/")
        try:
            url = httpx.URL(normalized)
        except httpx.InvalidURL as exc:
            raise ConfigurationError(
                f"Invalid Runware base URL: {base_url!r}", key="RUNWARE_API_BASE_URL"
            ) from exc
        if url.scheme not in ("http", "https") or not url.host:
            raise ConfigurationError(
                f"Runware base URL must be an absolute http(s) URL: {base_url!r}",
                key="RUNWARE_API_BASE_URL",
            )
        return normalized

    async def generate_batch(self, tasks: Sequence[TaskDescriptor]) -> List[GenerationRecord]:
        """Send every task in one POST and return the success records in order."""

        payload = build_payload(tasks)
        headers = build_headers(self.api_key)

        logger.info("Submitting Runware batch with %d task(s) to %s", len(payload), self.base_url)

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.base_url, json=payload, headers=headers)
        except httpx.HTTPError as exc:
            logger.error("Runware request failed: %s", exc)
            raise TransportError(
                f"Runware request failed: {exc}",
                provider=self.provider_name,
                original_error=exc,
            ) from exc

        envelope = decode_envelope(response.content, lenient_data=response.status_code >= 400)

        if response.status_code >= 400:
            logger.error(
                "Runware API error %s: %s",
                response.status_code,
                [error.model_dump(by_alias=True, exclude_none=True) for error in envelope.errors],
            )
            raise RunwareAPIError(
                response.status_code,
                errors=envelope.errors,
                partial_results=envelope.data,
                provider=self.provider_name,
            )

        if envelope.errors:
            logger.warning(
                "Runware returned %d error(s) alongside status %s: %s",
                len(envelope.errors),
                response.status_code,
                [error.message for error in envelope.errors],
            )

        logger.info(
            "Runware batch completed",
            extra={"tasks": len(payload), "results": len(envelope.data)},
        )
        return list(envelope.data)


__all__ = ["RunwareImageProvider"]
