"""
Async HTTP client shared by every SmartMemo service wrapper.

Each call opens its own httpx.AsyncClient, sends one request and closes it.
There is no retry and no connection reuse across calls.
"""

from __future__ import annotations

from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from smartmemo.infrastructure.http.errors import (
    UNKNOWN_ERROR_BODY,
    DecodeError,
    StatusError,
    TransportError,
)
from smartmemo.utils.config import http_timeout
from smartmemo.utils.logger import get_logger

logger = get_logger()

T = TypeVar("T")

_MAX_LOGGED_BODY_CHARS = 500


def bearer_headers(token: str | None) -> dict[str, str]:
    headers = {"Accept": "application/json"}
    if token is not None:
        headers["Authorization"] = f"Bearer {token}"
    return headers


async def _read_error_body(response: httpx.Response, unknown_body: str = UNKNOWN_ERROR_BODY) -> str:
    """Best-effort body text of a failed response; `unknown_body` when it cannot be read."""
    try:
        await response.aread()
        return response.text
    except (httpx.HTTPError, httpx.StreamError, UnicodeDecodeError) as e:
        logger.debug("Could not read error body (%s): %s", type(e).__name__, e)
        return unknown_body


class ApiClient:
    """
    Sends JSON requests to one base URL and maps failures to ApiError subclasses.

    Args:
        base_url: Service root, e.g. "http://localhost:4000/api".
        timeout: Seconds per request. None falls back to SMARTMEMO_HTTP_TIMEOUT,
            and when that is unset too requests wait indefinitely.
        transport: Optional httpx transport (tests pass httpx.MockTransport).
    """

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout if timeout is not None else http_timeout()
        self._transport = transport

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def send(
        self,
        method: str,
        path: str,
        token: str | None = None,
        json_body: Any = None,
        allow_not_found: bool = False,
        unknown_body: str = UNKNOWN_ERROR_BODY,
    ) -> httpx.Response | None:
        """
        Send one request and return the fully read 2xx response.

        Returns None only when allow_not_found is set and the service answered 404.
        `unknown_body` stands in for an error body that cannot be read.

        Raises:
            StatusError: Any other non-2xx status.
            TransportError: The request could not be completed.
        """
        url = self.url_for(path)
        logger.debug("%s %s", method, url)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                request = client.build_request(
                    method,
                    url,
                    headers=bearer_headers(token),
                    json=json_body,
                )
                response = await client.send(request, stream=True)
                try:
                    if allow_not_found and response.status_code == 404:
                        logger.debug("%s %s -> 404 (not found)", method, path)
                        return None
                    if not response.is_success:
                        body = await _read_error_body(response, unknown_body)
                        logger.warning(
                            "%s %s failed with status %s: %s",
                            method,
                            path,
                            response.status_code,
                            body[:_MAX_LOGGED_BODY_CHARS],
                        )
                        raise StatusError(response.status_code, body, method=method, path=path)
                    await response.aread()
                finally:
                    await response.aclose()
        except httpx.HTTPError as e:
            logger.exception("%s %s request failed: %s (%s)", method, path, e, type(e).__name__)
            raise TransportError(f"Request to {url} failed: {e}", e) from e
        return response

    async def request_json(
        self,
        method: str,
        path: str,
        shape: type[T] | Any,
        token: str | None = None,
        json_body: Any = None,
        allow_not_found: bool = False,
        unknown_body: str = UNKNOWN_ERROR_BODY,
    ) -> Any:
        """Send a request and validate the JSON body against `shape` (a model or type like list[Memo])."""
        response = await self.send(method, path, token, json_body, allow_not_found, unknown_body)
        if response is None:
            return None
        return decode_body(response.content, shape, path)

    async def request_text(
        self,
        method: str,
        path: str,
        token: str | None = None,
        json_body: Any = None,
    ) -> str:
        """Send a request and return the body text verbatim."""
        response = await self.send(method, path, token, json_body)
        if response is None:
            raise StatusError(404, UNKNOWN_ERROR_BODY, method=method, path=path)
        return response.text

    async def request_empty(
        self,
        method: str,
        path: str,
        token: str | None = None,
        json_body: Any = None,
    ) -> None:
        """Send a request whose success body is not needed."""
        await self.send(method, path, token, json_body)


def decode_body(content: bytes, shape: type[T] | Any, path: str = "") -> Any:
    """
    Validate raw JSON bytes against a pydantic model or type.

    Raises:
        DecodeError: Invalid JSON or a shape mismatch.
    """
    try:
        return TypeAdapter(shape).validate_json(content)
    except ValidationError as e:
        logger.warning("Unexpected response shape from %s: %s", path or "service", e)
        raise DecodeError(f"error decoding response body from {path or 'service'}: {e}", e) from e
