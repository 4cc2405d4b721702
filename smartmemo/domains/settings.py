"""
Per-user API keys and the helper-window flag, stored by the auth service.
"""

from __future__ import annotations

from typing import Optional

from smartmemo.domains.models import ApiKeySettings, HelperStatus
from smartmemo.infrastructure.http.api_client import ApiClient
from smartmemo.utils.config import auth_api_url
from smartmemo.utils.logger import get_logger

logger = get_logger()


class SettingsClient:
    def __init__(self, api: ApiClient | None = None) -> None:
        self._api = api or ApiClient(auth_api_url())

    async def save_key(self, token: str, gemini_key: str) -> None:
        await self._api.request_empty(
            "POST", "api_keys/save", token=token, json_body={"gemini_api_key": gemini_key}
        )
        logger.info("Gemini API key saved")

    async def get_key_settings(self, token: str) -> Optional[ApiKeySettings]:
        """Full key record (Gemini and ElevenLabs); None when the user has none."""
        settings = await self._api.request_json(
            "GET", "api_keys/get", ApiKeySettings, token=token, allow_not_found=True
        )
        if settings is not None:
            logger.debug(
                "API keys: %s (gemini set: %s, elevenlabs set: %s)",
                settings.message,
                settings.gemini_api_key is not None,
                settings.elevenlabs_api_key is not None,
            )
        return settings

    async def get_key(self, token: str) -> Optional[str]:
        """The stored Gemini key, or None."""
        settings = await self.get_key_settings(token)
        return settings.gemini_api_key if settings is not None else None

    async def delete_gemini_key(self, token: str) -> None:
        await self._api.request_empty("DELETE", "api_keys/gemini", token=token)

    async def delete_elevenlabs_key(self, token: str) -> None:
        await self._api.request_empty("DELETE", "api_keys/elevenlabs", token=token)

    async def set_helper_enabled(self, token: str, enabled: bool) -> None:
        await self._api.request_empty("POST", "helper/status", token=token, json_body={"status": enabled})

    async def get_helper_enabled(self, token: str) -> bool:
        status = await self._api.request_json("GET", "helper/status", HelperStatus, token=token)
        logger.debug("Helper window status: %s (%s)", status.status, status.message)
        return status.status
