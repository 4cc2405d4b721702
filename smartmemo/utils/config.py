"""Load and validate environment variables. Uses python-dotenv.

This module is intentionally thin and side-effect free except for loading `.env`.
Callers should use the accessor functions below rather than reading `os.environ`
directly, to keep environment handling consistent.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_AUTH_API_URL = "http://localhost:4000/api"
DEFAULT_MEMO_API_URL = "https://smartmemo-backend-rust.onrender.com/api"


def _project_root() -> Path:
    """Resolve project root (the directory holding the smartmemo package)."""
    return Path(__file__).resolve().parent.parent.parent


def load_config() -> None:
    """
    Load .env from project root. Idempotent; safe to call multiple times.
    Uses override=True to ensure .env values take precedence over existing env vars.
    """
    env_path = _project_root() / ".env"
    load_dotenv(env_path, override=True)


def get_optional(key: str, default: str = "") -> str:
    """Get optional env var; return default if missing or empty."""
    load_config()
    val = os.getenv(key, "").strip()
    return val if val else default


def get_optional_float(key: str, default: float | None = None) -> float | None:
    """Get optional env var as float; return default if missing or invalid."""
    raw = get_optional(key)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


# --- Public config accessors ---

def _strip_slash(url: str) -> str:
    return url.rstrip("/")


def auth_api_url() -> str:
    """Base URL of the auth/settings service (signup, login, API keys, helper state)."""
    return _strip_slash(get_optional("SMARTMEMO_AUTH_API_URL", DEFAULT_AUTH_API_URL))


def memo_api_url() -> str:
    """Base URL of the hosted memo and AI service."""
    return _strip_slash(get_optional("SMARTMEMO_MEMO_API_URL", DEFAULT_MEMO_API_URL))


def http_timeout() -> float | None:
    """Optional: per-request timeout in seconds. Unset means wait indefinitely."""
    value = get_optional_float("SMARTMEMO_HTTP_TIMEOUT")
    if value is not None and value <= 0:
        return None
    return value


def log_level() -> int:
    """Optional: logging level name (DEBUG, INFO, ...). Default INFO."""
    name = get_optional("SMARTMEMO_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def log_file() -> Path | None:
    """Optional: path of a log file in addition to stderr."""
    val = get_optional("SMARTMEMO_LOG_FILE", "")
    return Path(val) if val else None
