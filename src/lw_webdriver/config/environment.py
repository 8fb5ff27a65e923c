"""Environment configuration and validation."""

import os
from typing import Optional

from dotenv import load_dotenv, find_dotenv

from ..constants import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_REQUEST_TIMEOUT_SECS,
    DEFAULT_DRIVER_DIR,
    DEFAULT_SPAWN_GRACE_SECS,
    DEFAULT_SUPPRESS_CLICK_INTERCEPTED,
)

import logging
logger = logging.getLogger(__name__)

load_dotenv(find_dotenv(filename=".env", usecwd=True))


_TRUTHY = ("1", "true", "True", "yes", "Yes")
_FALSY = ("0", "false", "False", "no", "No")


def _read_number(name: str, default: float, cast=float):
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return cast(raw)
    except ValueError:
        raise EnvironmentError(f"{name} must be a number, got {raw!r}.")


def _read_flag(name: str, default: bool) -> bool:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    raise EnvironmentError(f"{name} must be a boolean flag (1/0), got {raw!r}.")


def get_env_config() -> dict:
    """
    Read environment variables and validate them.

    Optional:   WEBDRIVER_HOST (default 'localhost')
                WEBDRIVER_PORT (default 4444)
                WEBDRIVER_REQUEST_TIMEOUT (seconds, default 60)
                WEBDRIVER_DRIVER_DIR (default '.', where geckodriver/chromedriver live)
                WEBDRIVER_SPAWN_GRACE_SECS (default 2.0)
                WEBDRIVER_SUPPRESS_CLICK_INTERCEPTED (default 1)

    The endpoint is resolved once here; the wire client never re-resolves it per call.
    """
    host = (os.getenv("WEBDRIVER_HOST") or "").strip() or DEFAULT_HOST
    port = _read_number("WEBDRIVER_PORT", DEFAULT_PORT, cast=int)
    if not 0 < port < 65536:
        raise EnvironmentError(f"WEBDRIVER_PORT out of range: {port}")

    request_timeout = _read_number("WEBDRIVER_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT_SECS)
    spawn_grace = _read_number("WEBDRIVER_SPAWN_GRACE_SECS", DEFAULT_SPAWN_GRACE_SECS)
    driver_dir = (os.getenv("WEBDRIVER_DRIVER_DIR") or "").strip() or DEFAULT_DRIVER_DIR

    return {
        "host": host,
        "port": port,
        "request_timeout": request_timeout,
        "driver_dir": driver_dir,
        "spawn_grace_secs": spawn_grace,
        "suppress_click_intercepted": _read_flag(
            "WEBDRIVER_SUPPRESS_CLICK_INTERCEPTED", DEFAULT_SUPPRESS_CLICK_INTERCEPTED
        ),
    }


def base_url(config: Optional[dict] = None) -> str:
    """Base URL of the driver server, e.g. 'http://localhost:4444'."""
    if config is None:
        config = get_env_config()
    return f"http://{config['host']}:{config['port']}"
