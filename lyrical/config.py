"""Configuration management for Lyrical."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
_project_root = Path(__file__).parent.parent
load_dotenv(_project_root / ".env")

DEFAULT_API_URL = "https://lrclib.net/api"
DEFAULT_USER_AGENT = "Lyrical/0.1.0 (https://github.com/lyrical/lyrical)"
DEFAULT_TIMEOUT = 30.0


def get_lrclib_config() -> dict:
    """Return LRCLIB API configuration from environment variables."""
    api_url = os.getenv("LRCLIB_API_URL") or DEFAULT_API_URL
    user_agent = os.getenv("LRCLIB_USER_AGENT") or DEFAULT_USER_AGENT
    raw_timeout = os.getenv("LRCLIB_TIMEOUT")

    timeout = DEFAULT_TIMEOUT
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            timeout = None
        if timeout is None or not timeout > 0:
            raise ValueError(
                f"LRCLIB_TIMEOUT must be a positive number of seconds, got {raw_timeout!r}"
            )

    return {
        "api_url": api_url.rstrip("/"),
        "user_agent": user_agent,
        "timeout": timeout,
    }


def get_log_level() -> str:
    """Return the log level name from LYRICAL_LOG_LEVEL (default: WARNING)."""
    return (os.getenv("LYRICAL_LOG_LEVEL") or "WARNING").upper()
