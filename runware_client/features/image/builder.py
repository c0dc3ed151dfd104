"""Turn loosely-typed option mappings into ``TaskDescriptor`` objects."""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, Iterable, List, Mapping, Sequence

from pydantic import ValidationError as PydanticValidationError

from runware_client.config.image.resolutions import resolve_preset
from runware_client.core.exceptions import ConfigurationError
from runware_client.core.pydantic_schemas import TaskDescriptor, new_task_id

logger = logging.getLogger(__name__)

# Accepted option spellings -> TaskDescriptor field
OPTION_KEYS: Dict[str, str] = {
    "taskType": "task_type",
    "task_type": "task_type",
    "taskID": "task_id",
    "taskUUID": "task_id",
    "task_id": "task_id",
    "prompt": "prompt",
    "positivePrompt": "prompt",
    "width": "width",
    "height": "height",
    "model": "model",
    "results": "result_count",
    "resultCount": "result_count",
    "numberOfResults": "result_count",
    "result_count": "result_count",
    "uploadEndpoint": "upload_endpoint",
    "upload_endpoint": "upload_endpoint",
    "checkNSFW": "check_nsfw",
    "check_nsfw": "check_nsfw",
    "includeCost": "include_cost",
    "include_cost": "include_cost",
    "outputType": "output_type",
    "output_type": "output_type",
    "outputFormat": "output_format",
    "output_format": "output_format",
}

SIZE_KEY = "size"

_ALIAS_TO_FIELD = {
    (field.alias or name): name for name, field in TaskDescriptor.model_fields.items()
}


def _error_field(exc: PydanticValidationError) -> str | None:
    for error in exc.errors():
        loc = error.get("loc") or ()
        if loc:
            return _ALIAS_TO_FIELD.get(str(loc[0]), str(loc[0]))
    return None


def build_task_descriptor(options: Mapping[str, Any], index: int = 0) -> TaskDescriptor:
    """Build one descriptor from a single option mapping."""

    if not isinstance(options, Mapping):
        raise ConfigurationError(
            f"Task options at index {index} must be a mapping, got {type(options).__name__}",
            key="options",
        )

    fields: Dict[str, Any] = {}
    option_names: Dict[str, str] = {}
    ignored: List[str] = []

    for key, value in options.items():
        field_name = OPTION_KEYS.get(key)
        if field_name is None:
            if key != SIZE_KEY:
                ignored.append(str(key))
            continue
        if value is None:
            continue
        fields[field_name] = value
        option_names[field_name] = key

    if ignored:
        logger.debug("Ignoring unrecognized task options at index %d: %s", index, ignored)

    size = options.get(SIZE_KEY)
    if size is not None:
        width, height = resolve_preset(size)
        fields.setdefault("width", width)
        fields.setdefault("height", height)

    task_id = fields.get("task_id")
    if isinstance(task_id, uuid.UUID):
        fields["task_id"] = str(task_id)
    elif not task_id:
        fields["task_id"] = new_task_id()

    try:
        return TaskDescriptor.model_validate(fields)
    except PydanticValidationError as exc:
        field_name = _error_field(exc)
        key = option_names.get(field_name, field_name) if field_name else None
        first = exc.errors()[0]
        raise ConfigurationError(
            f"Invalid value for {key or 'task option'} at index {index}: {first.get('msg')}",
            key=key,
        ) from exc


def build_task_descriptors(options: Sequence[Mapping[str, Any]]) -> List[TaskDescriptor]:
    """Build descriptors for every mapping, preserving input order.

    Each call starts from scratch; nothing carries over between batches or
    between tasks of the same batch.
    """

    if not isinstance(options, Iterable) or isinstance(options, (Mapping, str, bytes)):
        raise ConfigurationError("Task options must be a sequence of mappings", key="options")

    return [build_task_descriptor(item, index) for index, item in enumerate(options)]


__all__ = ["OPTION_KEYS", "build_task_descriptor", "build_task_descriptors"]
