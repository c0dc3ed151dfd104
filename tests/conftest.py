"""Test configuration helpers."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Callable

import pytest

# Opt in to the AnyIO plugin explicitly so ``@pytest.mark.anyio`` works even
# when plugin auto-discovery is disabled.
pytest_plugins = ("anyio",)

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def anyio_backend() -> str:
    """Default AnyIO backend used when tests do not override the fixture."""

    return "asyncio"


@pytest.fixture(autouse=True)
def clear_runware_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer credentials out of the test run."""

    for key in (
        "RUNWARE_API_KEY",
        "RUNWARE_API_BASE_URL",
        "RUNWARE_TIMEOUT_SECONDS",
        "RUNWARE_LOG_LEVEL",
        "RUNWARE_LOG_TIME_MS",
    ):
        monkeypatch.delenv(key, raising=False)


class FakeResponse:
    """Minimal stand-in for ``httpx.Response``."""

    def __init__(self, status_code: int, body: Any) -> None:
        self.status_code = status_code
        if isinstance(body, (bytes, str)):
            self.content = body if isinstance(body, bytes) else body.encode()
        else:
            self.content = json.dumps(body).encode()


class RecordingAsyncClient:
    """Records every POST and replays a canned response."""

    def __init__(self, response: FakeResponse | None = None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.init_kwargs: dict[str, Any] = {}
        self.posts: list[dict[str, Any]] = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    async def post(self, url: str, **kwargs: Any):
        self.posts.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response

    @property
    def last_json(self) -> Any:
        return self.posts[-1]["json"] if self.posts else None


@pytest.fixture
def fake_runware(monkeypatch: pytest.MonkeyPatch) -> Callable[..., RecordingAsyncClient]:
    """Patch ``httpx.AsyncClient`` with a recorder returning the given body."""

    def _install(
        body: Any = None,
        status_code: int = 200,
        error: Exception | None = None,
    ) -> RecordingAsyncClient:
        response = FakeResponse(status_code, body if body is not None else {"data": []})
        client = RecordingAsyncClient(response=response, error=error)

        def _factory(*args: Any, **kwargs: Any) -> RecordingAsyncClient:
            client.init_kwargs = kwargs
            return client

        monkeypatch.setattr("httpx.AsyncClient", _factory)
        return client

    return _install


def _echo_success(payload: list[dict[str, Any]], **extra: Any) -> dict[str, Any]:
    data = []
    for index, task in enumerate(payload):
        record = {
            "taskType": task.get("taskType", "imageInference"),
            "taskUUID": task["taskUUID"],
            "imageUUID": f"image-{index}",
        }
        record.update(extra)
        data.append(record)
    return {"data": data}


@pytest.fixture
def echo_success() -> Callable[..., dict[str, Any]]:
    """Build a success envelope echoing the task IDs of a request payload."""

    return _echo_success
