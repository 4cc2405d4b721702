"""HTTP transport for the SmartMemo services."""

from smartmemo.infrastructure.http.api_client import ApiClient
from smartmemo.infrastructure.http.errors import (
    ApiError,
    DecodeError,
    InputError,
    LocalIOError,
    MemoInconsistencyError,
    SmartMemoError,
    StatusError,
    TransportError,
)

__all__ = [
    "ApiClient",
    "ApiError",
    "DecodeError",
    "InputError",
    "LocalIOError",
    "MemoInconsistencyError",
    "SmartMemoError",
    "StatusError",
    "TransportError",
]
