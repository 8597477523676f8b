"""
Runtime configuration for the bot.

Values come from the environment (optionally loaded from a .env file).

Server address priority:
1. CYCLES_SERVER_URL
2. CYCLES_HOST / CYCLES_PORT (default localhost:50051)
"""

import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 50051
DEFAULT_REQUEST_TIMEOUT = 10.0
DEFAULT_POLL_TIMEOUT = 60.0
DEFAULT_LOG_LEVEL = "INFO"


def _get_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


def get_server_url() -> str:
    """Base URL of the game server, without a trailing slash."""
    server_url = os.getenv("CYCLES_SERVER_URL")
    if server_url:
        return server_url.strip().rstrip("/")

    host = os.getenv("CYCLES_HOST", DEFAULT_HOST).strip()
    port = _get_number("CYCLES_PORT", DEFAULT_PORT, int)
    return f"http://{host}:{port}"


def get_request_timeout() -> float:
    return _get_number("CYCLES_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT, float)


def get_poll_timeout() -> float:
    """Read timeout for the state long-poll; a turn can take a while to arrive."""
    return _get_number("CYCLES_POLL_TIMEOUT", DEFAULT_POLL_TIMEOUT, float)


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()


def get_seed() -> Optional[int]:
    """Optional fixed seed for reproducible runs; None means OS entropy."""
    return _get_number("BOT_SEED", None, int)
