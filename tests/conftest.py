"""
Shared fixtures: an in-process fake of the SmartMemo services built on httpx.MockTransport.
"""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from smartmemo.infrastructure.http.api_client import ApiClient

AUTH_URL = "http://auth.test/api"
MEMO_URL = "http://memo.test/api"

MEMO_RECORD: dict[str, Any] = {
    "id": "abc123",
    "title": "Untitled Recording - 2026-10-17 09:00",
    "transcript": None,
    "translate": None,
    "summary": None,
    "tags": ["work"],
    "duration": "00:05",
    "created_at": "2026-10-17T09:00:00Z",
    "audio_blob": [1, 2, 3],
}


class BrokenStream(httpx.AsyncByteStream):
    """Response body that fails while being read."""

    async def __aiter__(self):
        raise httpx.ReadError("connection reset while reading body")
        yield b""  # pragma: no cover


Responder = Callable[[httpx.Request], httpx.Response]


class FakeService:
    """
    Answers requests from a route table keyed by (method, path below /api/).

    A route holds a list of responders used in order; the last one repeats.
    Every request is recorded in `requests`.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], list[Responder]] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        status: int = 200,
        json_body: Any = None,
        text: str | None = None,
        stream: httpx.AsyncByteStream | None = None,
    ) -> "FakeService":
        def respond(request: httpx.Request) -> httpx.Response:
            if stream is not None:
                return httpx.Response(status, stream=stream)
            if text is not None:
                return httpx.Response(status, text=text)
            if json_body is not None:
                return httpx.Response(status, json=json_body)
            return httpx.Response(status)

        self.routes.setdefault((method, path), []).append(respond)
        return self

    def fail_with(self, method: str, path: str, exc: Exception) -> "FakeService":
        def respond(request: httpx.Request) -> httpx.Response:
            raise exc

        self.routes.setdefault((method, path), []).append(respond)
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.split("/api/", 1)[-1]
        responders = self.routes.get((request.method, path))
        if not responders:
            return httpx.Response(500, text=f"no route for {request.method} {path}")
        respond = responders.pop(0) if len(responders) > 1 else responders[0]
        return respond(request)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def api(self, base_url: str = MEMO_URL) -> ApiClient:
        return ApiClient(base_url, transport=self.transport())

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [
            r for r in self.requests
            if r.method == method and r.url.path.split("/api/", 1)[-1] == path
        ]

    @staticmethod
    def body(request: httpx.Request) -> Any:
        return json.loads(request.content)


@pytest.fixture
def service() -> FakeService:
    return FakeService()


@pytest.fixture
def memo_api(service: FakeService) -> ApiClient:
    return service.api(MEMO_URL)


@pytest.fixture
def auth_api(service: FakeService) -> ApiClient:
    return service.api(AUTH_URL)


@pytest.fixture
def memo_record() -> dict[str, Any]:
    return dict(MEMO_RECORD)


@pytest.fixture
def broken_stream() -> BrokenStream:
    return BrokenStream()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in (
        "SMARTMEMO_AUTH_API_URL",
        "SMARTMEMO_MEMO_API_URL",
        "SMARTMEMO_HTTP_TIMEOUT",
        "SMARTMEMO_LOG_LEVEL",
        "SMARTMEMO_LOG_FILE",
    ):
        monkeypatch.delenv(key, raising=False)
