"""
Command surface consumed by the host UI.

One coroutine per command. Each returns a JSON-friendly dict:
{"success": True, "data": ...} or {"success": False, "error": "<display text>", "error_type": "..."}.
Errors are flattened to text only here; everything below raises SmartMemoError subclasses.
"""

from __future__ import annotations

import asyncio
import tempfile
import uuid
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional, Protocol

from pydantic import BaseModel

from smartmemo.domains.ai_ops import AiClient
from smartmemo.domains.auth import AuthClient
from smartmemo.domains.events import EventSink, NullEventSink, publish_memo_updated
from smartmemo.domains.memos import MemoClient
from smartmemo.domains.models import Memo
from smartmemo.domains.settings import SettingsClient
from smartmemo.infrastructure.http.errors import InputError, LocalIOError, SmartMemoError
from smartmemo.utils.logger import get_logger

logger = get_logger()

CommandResult = dict[str, Any]


class HelperWindow(Protocol):
    """The floating helper surface owned by the host UI."""

    def show(self) -> None:
        ...

    def hide(self) -> None:
        ...

    def focus(self) -> None:
        ...

    def is_visible(self) -> bool:
        ...


class HelperWindowError(SmartMemoError):
    """The helper window is missing or refused a show/hide/focus call."""


def to_jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    return value


def ok(data: Any = None) -> CommandResult:
    return {"success": True, "data": to_jsonable(data)}


def fail(exc: BaseException) -> CommandResult:
    return {"success": False, "error": str(exc), "error_type": type(exc).__name__}


def audio_bytes(audio_blob: bytes | list[int]) -> bytes:
    """Audio as sent by the UI (bytes or a list of byte values) to bytes."""
    try:
        return bytes(audio_blob)
    except (TypeError, ValueError) as e:
        raise InputError(f"Audio must be a sequence of byte values (0-255): {e}") from e


class CommandSurface:
    def __init__(
        self,
        auth: AuthClient | None = None,
        memos: MemoClient | None = None,
        ai: AiClient | None = None,
        settings: SettingsClient | None = None,
        events: EventSink | None = None,
        helper_window: HelperWindow | None = None,
        temp_dir: Path | None = None,
    ) -> None:
        self.events = events or NullEventSink()
        self.auth = auth or AuthClient()
        self.memos = memos or MemoClient(events=self.events)
        self.ai = ai or AiClient()
        self.settings = settings or SettingsClient()
        self.helper_window = helper_window
        self.temp_dir = Path(temp_dir) if temp_dir else Path(tempfile.gettempdir())

    async def _run(self, command: str, call: Awaitable[Any]) -> CommandResult:
        try:
            result = await call
        except SmartMemoError as e:
            logger.warning("%s failed: %s", command, e)
            return fail(e)
        return ok(result)

    # --- auth ---

    async def signup_command(self, username: str, email: str, password: str) -> CommandResult:
        return await self._run("signup", self.auth.signup(username, email, password))

    async def login_command(self, email: str, password: str) -> CommandResult:
        return await self._run("login", self.auth.login(email, password))

    # --- memos ---

    async def _save_audio(
        self, token: str, audio_blob: bytes | list[int], duration: str, tags: list[str]
    ) -> Memo:
        return await self.memos.create(token, audio_bytes(audio_blob), duration, tags)

    async def save_audio_command(
        self, token: str, audio_blob: bytes | list[int], duration: str, tags: list[str]
    ) -> CommandResult:
        return await self._run("save_audio", self._save_audio(token, audio_blob, duration, tags))

    async def save_memo_command(
        self,
        token: str,
        id: str,
        name: str,
        transcription: Optional[str] = None,
        translate: Optional[str] = None,
        summary: Optional[str] = None,
        tags: Optional[list[str]] = None,
    ) -> CommandResult:
        return await self._run(
            "save_memo",
            self.memos.update(token, id, name, transcription, translate, summary, tags),
        )

    async def get_memos_command(self, token: str) -> CommandResult:
        return await self._run("get_memos", self.memos.list(token))

    async def get_memo_command(self, token: str, id: str) -> CommandResult:
        return await self._run("get_memo", self.memos.get(token, id))

    async def delete_memo_command(self, token: str, id: str) -> CommandResult:
        return await self._run("delete_memo", self.memos.delete(token, id))

    async def clear_all_memos(self, token: str) -> CommandResult:
        return await self._run("clear_all_memos", self.memos.delete_all(token))

    # --- AI ---

    async def _transcribe_bytes(self, token: str, audio_blob: bytes | list[int]) -> str:
        audio = audio_bytes(audio_blob)
        path = self.temp_dir / f"{uuid.uuid4()}.tmp"
        try:
            await asyncio.to_thread(path.write_bytes, audio)
        except OSError as e:
            raise LocalIOError(f"Could not write temporary audio file {path}: {e}") from e
        try:
            return await self.ai.transcribe(path, token)
        finally:
            try:
                await asyncio.to_thread(path.unlink, missing_ok=True)
            except OSError as e:
                logger.warning("Could not remove temporary audio file %s: %s", path, e)

    async def transcribe_audio_command(self, token: str, audio_blob: bytes | list[int]) -> CommandResult:
        return await self._run("transcribe_audio", self._transcribe_bytes(token, audio_blob))

    async def translate_text_command(self, token: str, text: str, target_language: str) -> CommandResult:
        return await self._run("translate_text", self.ai.translate(text, target_language, token))

    async def summarize_text_command(self, token: str, text: str) -> CommandResult:
        return await self._run("summarize_text", self.ai.summarize(text, token))

    async def generate_memo_name_command(self, token: str, transcription: str) -> CommandResult:
        return await self._run("generate_memo_name", self.ai.generate_title(transcription, token))

    # --- API keys ---

    async def save_api_key_command(self, token: str, gemini_key: str) -> CommandResult:
        return await self._run("save_api_key", self.settings.save_key(token, gemini_key))

    async def get_api_key_command(self, token: str) -> CommandResult:
        return await self._run("get_api_key", self.settings.get_key(token))

    async def get_api_key_settings_command(self, token: str) -> CommandResult:
        return await self._run("get_api_key_settings", self.settings.get_key_settings(token))

    async def delete_gemini_api_key_command(self, token: str) -> CommandResult:
        return await self._run("delete_gemini_api_key", self.settings.delete_gemini_key(token))

    async def delete_elevenlabs_api_key_command(self, token: str) -> CommandResult:
        return await self._run("delete_elevenlabs_api_key", self.settings.delete_elevenlabs_key(token))

    # --- helper window ---

    async def _toggle_helper(self, token: str, enabled: bool) -> None:
        await self.settings.set_helper_enabled(token, enabled)
        window = self.helper_window
        if window is None:
            raise HelperWindowError("Helper window not found")
        try:
            if enabled:
                window.show()
                window.focus()
            else:
                window.hide()
        except Exception as e:
            raise HelperWindowError(str(e)) from e

    async def _helper_state(self, token: str) -> bool:
        remote = await self.settings.get_helper_enabled(token)
        window = self.helper_window
        if window is None:
            return False
        try:
            visible = window.is_visible()
        except Exception as e:
            raise HelperWindowError(str(e)) from e
        return remote and visible

    async def toggle_helper_window_command(self, token: str, enabled: bool) -> CommandResult:
        return await self._run("toggle_helper_window", self._toggle_helper(token, enabled))

    async def get_helper_window_state_command(self, token: str) -> CommandResult:
        return await self._run("get_helper_window_state", self._helper_state(token))

    # --- diagnostics ---

    async def test_event_emission(self) -> CommandResult:
        err = publish_memo_updated(self.events, "test_payload")
        if err is None:
            return ok("Event emitted successfully")
        return {"success": False, "error": f"Failed to emit event: {err}", "error_type": "EventError"}

    def commands(self) -> dict[str, Callable[..., Awaitable[CommandResult]]]:
        """Name -> coroutine function, for registration with the host runtime."""
        names = [
            "signup_command",
            "login_command",
            "save_audio_command",
            "save_memo_command",
            "get_memos_command",
            "get_memo_command",
            "delete_memo_command",
            "clear_all_memos",
            "transcribe_audio_command",
            "translate_text_command",
            "summarize_text_command",
            "generate_memo_name_command",
            "save_api_key_command",
            "get_api_key_command",
            "get_api_key_settings_command",
            "delete_gemini_api_key_command",
            "delete_elevenlabs_api_key_command",
            "toggle_helper_window_command",
            "get_helper_window_state_command",
            "test_event_emission",
        ]
        return {name: getattr(self, name) for name in names}
