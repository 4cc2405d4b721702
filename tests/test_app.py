"""
Tests for create_app wiring.
"""

from __future__ import annotations

import asyncio

import pytest

from smartmemo.app import create_app
from smartmemo.domains.events import CallbackEventSink
from smartmemo.services.commands import CommandSurface


def test_create_app_uses_configured_urls(service, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SMARTMEMO_AUTH_API_URL", "http://auth.test/api")
    monkeypatch.setenv("SMARTMEMO_MEMO_API_URL", "http://memo.test/api")
    service.add("POST", "login", json_body={"message": "ok", "token": "jwt"})
    service.add("GET", "get_memos", json_body=[])

    app = create_app(transport=service.transport())

    assert isinstance(app, CommandSurface)
    assert asyncio.run(app.login_command("a@b.c", "pw"))["data"]["token"] == "jwt"
    assert asyncio.run(app.get_memos_command("t")) == {"success": True, "data": []}
    assert [str(r.url) for r in service.requests] == [
        "http://auth.test/api/login",
        "http://memo.test/api/get_memos",
    ]


def test_create_app_routes_events_to_sink(service, memo_record) -> None:
    seen: list[str] = []
    sink = CallbackEventSink()
    sink.subscribe(lambda event, payload: seen.append(event))
    service.add("DELETE", "delete_memo/abc123", json_body={"message": "deleted"})

    app = create_app(
        events=sink,
        auth_url="http://auth.test/api",
        memo_url="http://memo.test/api",
        transport=service.transport(),
    )

    assert asyncio.run(app.delete_memo_command("t", "abc123"))["success"] is True
    assert seen == ["memo:updated"]
