"""
Transcription, translation, summarization and title generation.

The service replies with plain text, returned verbatim (not JSON-decoded).
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from smartmemo.infrastructure.http.api_client import ApiClient
from smartmemo.infrastructure.http.errors import InputError, LocalIOError
from smartmemo.utils.config import memo_api_url
from smartmemo.utils.logger import get_logger

logger = get_logger()


class AiClient:
    def __init__(self, api: ApiClient | None = None) -> None:
        self._api = api or ApiClient(memo_api_url())

    async def transcribe(self, audio_path: str | Path, token: str) -> str:
        """
        Transcribe a local audio file.

        The file is read fully and uploaded as a JSON array of byte values.

        Raises:
            LocalIOError: The file could not be read.
            InputError: The file is empty. Nothing is sent in that case.
        """
        path = Path(audio_path)
        try:
            audio = await asyncio.to_thread(path.read_bytes)
        except OSError as e:
            raise LocalIOError(f"Could not read audio file {path}: {e}") from e
        if not audio:
            raise InputError("No audio data provided")

        logger.info("Transcribing %d bytes of audio", len(audio))
        return await self._api.request_text(
            "POST", "transcribe", token=token, json_body={"audio_bytes": list(audio)}
        )

    async def translate(self, text: str, target_language: str, token: str) -> str:
        return await self._api.request_text(
            "POST", "translate", token=token, json_body={"text": text, "lang": target_language}
        )

    async def summarize(self, text: str, token: str) -> str:
        return await self._api.request_text("POST", "summary", token=token, json_body={"text": text})

    async def generate_title(self, transcript: str, token: str) -> str:
        """Ask the service for a short memo title based on its transcript."""
        return await self._api.request_text(
            "POST", "generate_memo_name", token=token, json_body={"transcript": transcript}
        )
