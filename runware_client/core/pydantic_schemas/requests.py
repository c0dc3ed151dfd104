"""Request models sent to the Runware image inference endpoint."""

from __future__ import annotations

import uuid
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from runware_client.config.image.resolutions import Resolution, coerce_resolution, resolve_dimension
from runware_client.config.image.runware import MAX_RESULTS_PER_TASK
from .enums import OutputFormat, OutputType, TaskType

_ENUM_FIELDS = {
    "task_type": TaskType,
    "output_type": OutputType,
    "output_format": OutputFormat,
}

_DIMENSION_FIELDS = ("width", "height")


def new_task_id() -> str:
    """Return a fresh random UUID-v4 string."""

    return str(uuid.uuid4())


class TaskDescriptor(BaseModel):
    """One normalized image inference task.

    ``None`` means the caller never supplied the option; such fields are left
    out of the wire payload entirely. The two boolean flags are therefore
    tri-state: unset, ``False`` or ``True``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    task_type: TaskType = Field(default=TaskType.IMAGE_INFERENCE, alias="taskType")
    task_id: str = Field(default_factory=new_task_id, alias="taskUUID", min_length=1)
    prompt: Optional[str] = Field(default=None, alias="positivePrompt")
    width: Optional[Resolution] = None
    height: Optional[Resolution] = None
    model: Optional[str] = None
    result_count: Optional[int] = Field(
        default=None, alias="numberOfResults", ge=1, le=MAX_RESULTS_PER_TASK
    )
    upload_endpoint: Optional[str] = Field(default=None, alias="uploadEndpoint")
    check_nsfw: Optional[bool] = Field(default=None, alias="checkNSFW")
    include_cost: Optional[bool] = Field(default=None, alias="includeCost")
    output_type: Optional[OutputType] = Field(default=None, alias="outputType")
    output_format: Optional[OutputFormat] = Field(default=None, alias="outputFormat")

    @field_validator(*_DIMENSION_FIELDS, mode="before")
    @classmethod
    def _coerce_dimension(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return None
        return coerce_resolution(value, key=info.field_name)

    @field_validator(*_ENUM_FIELDS, mode="before")
    @classmethod
    def _coerce_enum(cls, value: Any, info: ValidationInfo) -> Any:
        if isinstance(value, str):
            return _ENUM_FIELDS[info.field_name](value)
        return value

    def to_payload(self) -> Dict[str, Any]:
        """Return the wire object for this task.

        Unset fields and empty strings are dropped; resolution tags become
        pixel integers. Raises ``ConfigurationError`` for a dimension outside
        the supported grid.
        """

        dumped = self.model_dump(
            by_alias=True,
            exclude_none=True,
            exclude=set(_DIMENSION_FIELDS),
            mode="json",
        )
        payload: Dict[str, Any] = {}
        for name, field in type(self).model_fields.items():
            wire_key = field.alias or name
            if name in _DIMENSION_FIELDS:
                value = getattr(self, name)
                if value is not None:
                    payload[wire_key] = resolve_dimension(value, key=name)
                continue
            if wire_key not in dumped or dumped[wire_key] == "":
                continue
            payload[wire_key] = dumped[wire_key]
        return payload


__all__ = ["TaskDescriptor", "new_task_id"]
