"""Public pydantic schema exports for the Runware wire format."""

from .enums import OutputFormat, OutputType, TaskType
from .requests import TaskDescriptor, new_task_id
from .responses import GenerationRecord, ProviderErrorRecord, ResponseEnvelope

__all__ = [
    "GenerationRecord",
    "OutputFormat",
    "OutputType",
    "ProviderErrorRecord",
    "ResponseEnvelope",
    "TaskDescriptor",
    "TaskType",
    "new_task_id",
]
