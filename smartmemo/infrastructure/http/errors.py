"""
Error taxonomy for calls to the SmartMemo services.

Domain code raises these; only the command surface flattens them to text.
"""

from __future__ import annotations

UNKNOWN_ERROR_BODY = "Unknown error"


class SmartMemoError(Exception):
    """Base class for every error raised by this package."""


class ApiError(SmartMemoError):
    """A remote call failed."""


class TransportError(ApiError):
    """Connection, timeout, DNS or body-read failure. The httpx error is the __cause__."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


class StatusError(ApiError):
    """The service answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str, method: str = "", path: str = "") -> None:
        super().__init__(f"API Error: {body}")
        self.status_code = status_code
        self.body = body
        self.method = method
        self.path = path


class DecodeError(ApiError):
    """The response body did not match the expected shape."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


class InputError(SmartMemoError):
    """Caller input rejected before any network call."""


class LocalIOError(SmartMemoError):
    """Temporary file handling failed."""


class MemoInconsistencyError(SmartMemoError):
    """A memo just written could not be read back from the service."""

    def __init__(self, memo_id: str, operation: str) -> None:
        super().__init__(f"Memo {memo_id} should exist immediately after {operation}")
        self.memo_id = memo_id
        self.operation = operation
