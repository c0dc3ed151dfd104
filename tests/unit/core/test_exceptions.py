"""Unit tests for the client exception hierarchy."""

import json

from runware_client.core.exceptions import (
    ConfigurationError,
    ProviderError,
    RunwareAPIError,
    ServiceError,
    TransportError,
)
from runware_client.core.pydantic_schemas import GenerationRecord, ProviderErrorRecord


def test_configuration_error_key():
    """ConfigurationError should store the offending key."""

    error = ConfigurationError("Unsupported width", key="width")
    assert error.message == "Unsupported width"
    assert error.key == "width"
    assert isinstance(error, ServiceError)


def test_transport_error_is_provider_error():
    """TransportError should retain the original exception."""

    original = OSError("connection refused")
    error = TransportError("Runware request failed", provider="runware", original_error=original)

    assert isinstance(error, ProviderError)
    assert error.original_error is original


def test_runware_api_error_serializes_errors_as_json():
    """RunwareAPIError should render the provider's fields in stable JSON."""

    record = ProviderErrorRecord.model_validate(
        {
            "code": "invalidWidth",
            "message": "bad width",
            "parameter": "width",
            "type": "validation",
            "taskType": "imageInference",
        }
    )
    error = RunwareAPIError(400, errors=[record])

    rendered = json.loads(str(error))
    assert rendered == {
        "status": 400,
        "errors": [
            {
                "code": "invalidWidth",
                "message": "bad width",
                "parameter": "width",
                "type": "validation",
                "taskType": "imageInference",
            }
        ],
    }
    assert error.provider == "runware"
    assert error.parameters == ["width"]


def test_runware_api_error_keeps_partial_results():
    record = GenerationRecord(taskUUID="t-1", imageUUID="i-1")
    error = RunwareAPIError(500, partial_results=[record])

    assert error.partial_results == [record]
    assert error.message == "Runware request failed with status 500"
