"""Helpers for the Runware image provider."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Sequence

from pydantic import ValidationError as PydanticValidationError

from runware_client.core.exceptions import ConfigurationError, TransportError
from runware_client.core.pydantic_schemas import GenerationRecord, ResponseEnvelope, TaskDescriptor

logger = logging.getLogger(__name__)


def build_headers(api_key: str) -> Dict[str, str]:
    """Return the headers every Runware request carries."""

    return {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {api_key}",
    }


def build_payload(tasks: Sequence[TaskDescriptor]) -> List[Dict[str, Any]]:
    """Build the JSON array sent to Runware.

    Every task is serialized before anything is returned, so one bad
    dimension fails the whole batch.
    """

    if not tasks:
        raise ConfigurationError("At least one task is required", key="tasks")

    payload: List[Dict[str, Any]] = []
    for index, task in enumerate(tasks):
        try:
            payload.append(task.to_payload())
        except ConfigurationError as exc:
            logger.error("Task %d (%s) rejected: %s", index, task.task_id, exc.message)
            raise
    return payload


def _lenient_records(items: Any) -> List[GenerationRecord]:
    if not isinstance(items, list):
        if items is not None:
            logger.warning("Dropping non-list Runware data field: %s", type(items).__name__)
        return []

    records: List[GenerationRecord] = []
    for index, item in enumerate(items):
        try:
            records.append(GenerationRecord.model_validate(item))
        except PydanticValidationError as exc:
            logger.warning("Dropping malformed Runware record %d: %s", index, exc.errors()[0].get("msg"))
    return records


def decode_envelope(body: bytes | str, *, lenient_data: bool = False) -> ResponseEnvelope:
    """Decode a Runware response body into a ``ResponseEnvelope``.

    With ``lenient_data`` the success records are validated one by one and
    malformed ones are dropped, so a failed exchange still surfaces its
    error entries. Error entries are always validated strictly.
    """

    try:
        data = json.loads(body)
    except (TypeError, ValueError) as exc:
        raise TransportError(
            "Runware response body is not valid JSON",
            provider="runware",
            original_error=exc,
        ) from exc

    if not isinstance(data, dict):
        raise TransportError(
            f"Runware response must be a JSON object, got {type(data).__name__}",
            provider="runware",
        )

    if lenient_data:
        data = {**data, "data": _lenient_records(data.get("data"))}

    try:
        return ResponseEnvelope.model_validate(data)
    except PydanticValidationError as exc:
        raise TransportError(
            "Runware response does not match the expected envelope",
            provider="runware",
            original_error=exc,
        ) from exc


__all__ = ["build_headers", "build_payload", "decode_envelope"]
