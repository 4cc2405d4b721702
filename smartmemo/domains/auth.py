"""
Account signup and login against the auth service.
"""

from __future__ import annotations

from smartmemo.domains.models import LoginResponse, SignupResponse
from smartmemo.infrastructure.http.api_client import ApiClient
from smartmemo.utils.config import auth_api_url
from smartmemo.utils.logger import get_logger

logger = get_logger()

UNKNOWN_SIGNUP_ERROR = "Unknown signup error"
UNKNOWN_LOGIN_ERROR = "Unknown login error"


class AuthClient:
    """No client-side validation; the service decides what a valid account is."""

    def __init__(self, api: ApiClient | None = None) -> None:
        self._api = api or ApiClient(auth_api_url())

    async def signup(self, username: str, email: str, password: str) -> SignupResponse:
        payload = {"username": username, "email": email, "password": password}
        out = await self._api.request_json(
            "POST", "signup", SignupResponse, json_body=payload, unknown_body=UNKNOWN_SIGNUP_ERROR
        )
        logger.info("Signed up user %s", out.user_id)
        return out

    async def login(self, email: str, password: str) -> LoginResponse:
        """
        Log in and return the bearer token the caller must pass to later calls.

        The token is not stored here.
        """
        payload = {"email": email, "password": password}
        out = await self._api.request_json(
            "POST", "login", LoginResponse, json_body=payload, unknown_body=UNKNOWN_LOGIN_ERROR
        )
        logger.info("Login succeeded: %s", out.message)
        return out
