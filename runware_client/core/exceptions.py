"""Custom exception hierarchy for the Runware client.

This module defines a typed exception hierarchy that lets callers tell apart
the three ways a submission can fail.

Exception Handling Flow:
    1. Request builder raises ``ConfigurationError`` for bad options
    2. Provider raises ``TransportError`` when the exchange itself fails
    3. Provider raises ``RunwareAPIError`` when Runware reports errors
    4. Callers inspect ``RunwareAPIError.errors`` for per-parameter details
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Sequence

if TYPE_CHECKING:
    from runware_client.core.pydantic_schemas.responses import (
        GenerationRecord,
        ProviderErrorRecord,
    )


class ServiceError(Exception):
    """Base exception for all client errors."""


class ConfigurationError(ServiceError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, key: str | None = None):
        self.message = message
        self.key = key
        super().__init__(self.message)


class ProviderError(ServiceError):
    """Raised when an external provider fails."""

    def __init__(self, message: str, provider: str | None = None, original_error: Exception | None = None):
        self.message = message
        self.provider = provider
        self.original_error = original_error
        super().__init__(self.message)


class TransportError(ProviderError):
    """Raised when the HTTP exchange fails or the body cannot be decoded."""


class RunwareAPIError(ProviderError):
    """Raised when Runware answers with status >= 400.

    ``errors`` holds the provider's own diagnostics; ``partial_results`` keeps
    any success records that arrived in the same envelope.
    """

    def __init__(
        self,
        status_code: int,
        errors: Sequence["ProviderErrorRecord"] = (),
        partial_results: Sequence["GenerationRecord"] = (),
        provider: str | None = "runware",
    ):
        self.status_code = status_code
        self.errors = list(errors)
        self.partial_results = list(partial_results)
        if self.errors:
            message = json.dumps(self.to_dict(), indent=2, sort_keys=True)
        else:
            message = f"Runware request failed with status {status_code}"
        super().__init__(message, provider=provider)

    def to_dict(self) -> dict[str, Any]:
        """Return the error envelope in wire form."""

        return {
            "status": self.status_code,
            "errors": [error.model_dump(by_alias=True, exclude_none=True) for error in self.errors],
        }

    @property
    def parameters(self) -> list[str]:
        """Names of the request parameters the provider rejected."""

        return [error.parameter for error in self.errors if error.parameter]


__all__ = [
    "ConfigurationError",
    "ProviderError",
    "RunwareAPIError",
    "ServiceError",
    "TransportError",
]
