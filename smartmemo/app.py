"""
SmartMemo backend entry point: wires config, logging, clients and the command surface.
"""

from __future__ import annotations

import httpx

from smartmemo.domains.ai_ops import AiClient
from smartmemo.domains.auth import AuthClient
from smartmemo.domains.events import EventSink, LoggingEventSink
from smartmemo.domains.memos import MemoClient
from smartmemo.domains.settings import SettingsClient
from smartmemo.infrastructure.http.api_client import ApiClient
from smartmemo.services.commands import CommandSurface, HelperWindow
from smartmemo.utils.config import auth_api_url, load_config, log_file, log_level, memo_api_url
from smartmemo.utils.logger import LOGGER_NAME, setup_logger


def create_app(
    events: EventSink | None = None,
    helper_window: HelperWindow | None = None,
    auth_url: str | None = None,
    memo_url: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> CommandSurface:
    """
    Build the command surface the host UI registers.

    Args:
        events: Where memo:updated notifications go. Defaults to logging them.
        helper_window: Host handle for the helper window, if the host has one.
        auth_url: Override for SMARTMEMO_AUTH_API_URL.
        memo_url: Override for SMARTMEMO_MEMO_API_URL.
        transport: Optional httpx transport shared by every client.
    """
    load_config()
    log = setup_logger(LOGGER_NAME, level=log_level(), log_file=log_file())

    auth_api = ApiClient(auth_url or auth_api_url(), transport=transport)
    memo_api = ApiClient(memo_url or memo_api_url(), transport=transport)
    sink = events or LoggingEventSink()

    surface = CommandSurface(
        auth=AuthClient(auth_api),
        memos=MemoClient(memo_api, events=sink),
        ai=AiClient(memo_api),
        settings=SettingsClient(auth_api),
        events=sink,
        helper_window=helper_window,
    )
    log.info("App setup completed (auth=%s, memo=%s)", auth_api.base_url, memo_api.base_url)
    return surface
