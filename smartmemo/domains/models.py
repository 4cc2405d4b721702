"""
Wire records exchanged with the SmartMemo services.

These mirror the JSON the services send and accept. Nothing here is cached;
every instance is a request-scoped copy of remote state.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class WireModel(BaseModel):
    """Base for service records: accept field names or wire aliases, ignore extra keys."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Memo(WireModel):
    """A recorded-audio entry with optional derived text and tags."""

    id: str
    title: str
    transcript: Optional[str] = None
    translation: Optional[str] = Field(default=None, alias="translate")
    summary: Optional[str] = None
    tags: Optional[List[str]] = None
    duration: str
    created_at: str
    audio_blob: Optional[bytes] = None

    @field_validator("audio_blob", mode="before")
    @classmethod
    def _audio_from_byte_list(cls, v: Any) -> Any:
        # The service encodes audio as a JSON array of byte values.
        if isinstance(v, list):
            try:
                return bytes(v)
            except (TypeError, ValueError) as e:
                raise ValueError(f"audio_blob must be a list of byte values: {e}") from e
        return v

    @field_serializer("audio_blob")
    def _audio_to_byte_list(self, v: Optional[bytes]) -> Optional[List[int]]:
        return list(v) if v is not None else None


class SignupResponse(WireModel):
    message: str
    user_id: str


class LoginResponse(WireModel):
    message: str
    token: str


class MemoMutationResponse(WireModel):
    """Body returned by save_memo and update_memo."""

    message: str
    memo_id: str


class MessageResponse(WireModel):
    message: str


class ApiKeySettings(WireModel):
    """Secrets stored for the authenticated user."""

    gemini_api_key: Optional[str] = None
    elevenlabs_api_key: Optional[str] = None
    message: str = ""


class HelperStatus(WireModel):
    status: bool
    message: str = ""
