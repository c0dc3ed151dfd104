"""Runware image inference client."""

from runware_client.config.image.resolutions import (
    RESOLUTION_PIXELS,
    RESOLUTION_PRESETS,
    Resolution,
    resolve_dimension,
)
from runware_client.core.exceptions import (
    ConfigurationError,
    ProviderError,
    RunwareAPIError,
    ServiceError,
    TransportError,
)
from runware_client.core.pydantic_schemas import (
    GenerationRecord,
    OutputFormat,
    OutputType,
    ProviderErrorRecord,
    TaskDescriptor,
    TaskType,
)
from runware_client.features.image import RunwareImageClient, build_task_descriptors

__all__ = [
    "ConfigurationError",
    "GenerationRecord",
    "OutputFormat",
    "OutputType",
    "ProviderError",
    "ProviderErrorRecord",
    "RESOLUTION_PIXELS",
    "RESOLUTION_PRESETS",
    "Resolution",
    "RunwareAPIError",
    "RunwareImageClient",
    "ServiceError",
    "TaskDescriptor",
    "TaskType",
    "TransportError",
    "build_task_descriptors",
    "resolve_dimension",
]
