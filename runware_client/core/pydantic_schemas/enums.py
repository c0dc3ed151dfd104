"""Enumerations shared by Runware request and response models."""

from __future__ import annotations

from enum import Enum


class _CaseInsensitiveEnum(str, Enum):
    @classmethod
    def _missing_(cls, value: object):
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value.lower() == lowered:
                    return member
        return None


class TaskType(_CaseInsensitiveEnum):
    """Task kinds accepted by the Runware endpoint."""

    IMAGE_INFERENCE = "imageInference"


class OutputType(_CaseInsensitiveEnum):
    """How generated images are delivered back."""

    BASE64_DATA = "base64Data"
    DATA_URI = "dataURI"
    URL = "URL"


class OutputFormat(_CaseInsensitiveEnum):
    """Encoded image format."""

    PNG = "PNG"
    JPEG = "JPEG"
    WEBP = "WEBP"


__all__ = ["OutputFormat", "OutputType", "TaskType"]
