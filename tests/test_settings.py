"""
Tests for SettingsClient: API keys and the helper flag.
"""

from __future__ import annotations

import asyncio

import pytest

from smartmemo.domains.settings import SettingsClient
from smartmemo.infrastructure.http.errors import StatusError


@pytest.fixture
def client(auth_api) -> SettingsClient:
    return SettingsClient(auth_api)


def test_save_key(service, client: SettingsClient) -> None:
    service.add("POST", "api_keys/save", json_body={"message": "saved"})
    asyncio.run(client.save_key("t", "gm-123"))
    assert service.body(service.requests[0]) == {"gemini_api_key": "gm-123"}


def test_get_key_not_found_is_none(service, client: SettingsClient) -> None:
    service.add("GET", "api_keys/get", status=404, text="No keys")
    assert asyncio.run(client.get_key("t")) is None
    assert asyncio.run(client.get_key_settings("t")) is None


def test_get_key_and_companion_secret(service, client: SettingsClient) -> None:
    service.add(
        "GET",
        "api_keys/get",
        json_body={"gemini_api_key": "gm-123", "elevenlabs_api_key": "el-9", "message": "ok"},
    )
    assert asyncio.run(client.get_key("t")) == "gm-123"
    settings = asyncio.run(client.get_key_settings("t"))
    assert settings.elevenlabs_api_key == "el-9"
    assert settings.message == "ok"


def test_get_key_absent_field(service, client: SettingsClient) -> None:
    service.add("GET", "api_keys/get", json_body={"gemini_api_key": None, "message": "ok"})
    assert asyncio.run(client.get_key("t")) is None


def test_get_key_server_error(service, client: SettingsClient) -> None:
    service.add("GET", "api_keys/get", status=500, text="db down")
    with pytest.raises(StatusError, match="db down"):
        asyncio.run(client.get_key("t"))


def test_delete_keys(service, client: SettingsClient) -> None:
    service.add("DELETE", "api_keys/gemini", json_body={"message": "deleted"})
    service.add("DELETE", "api_keys/elevenlabs", json_body={"message": "deleted"})
    asyncio.run(client.delete_gemini_key("t"))
    asyncio.run(client.delete_elevenlabs_key("t"))
    assert [r.url.path for r in service.requests] == ["/api/api_keys/gemini", "/api/api_keys/elevenlabs"]


def test_helper_flag_round_trip(service, client: SettingsClient) -> None:
    service.add("POST", "helper/status", json_body={"message": "updated"})
    service.add("GET", "helper/status", json_body={"status": True, "message": "ok"})
    asyncio.run(client.set_helper_enabled("t", True))
    assert service.body(service.requests[0]) == {"status": True}
    assert asyncio.run(client.get_helper_enabled("t")) is True
