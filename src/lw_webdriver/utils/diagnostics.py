"""Diagnostics and debugging information utility functions."""

import sys
import platform
from typing import Optional

import selenium

from ..client.wire import WireClient
from ..config.environment import get_env_config
from ..config.paths import driver_executable_path
from ..enums import Browser, Platform


def collect_diagnostics(
    exc: Optional[Exception] = None,
    config: Optional[dict] = None,
    client: Optional[WireClient] = None,
    session_id: Optional[str] = None,
) -> str:
    """
    Collect diagnostic information about the driver endpoint and environment.

    Args:
        exc: Exception that occurred (can be None)
        config: Configuration dictionary (read from the environment if None)
        client: Wire client in use, for its endpoint
        session_id: Remote session id, if one exists

    Returns:
        str: Formatted diagnostic information
    """
    if config is None:
        config = get_env_config()

    endpoint = client.base_url if client else f"http://{config.get('host')}:{config.get('port')}"

    parts = [
        f"OS                : {platform.system()} {platform.release()}",
        f"Platform name     : {Platform.current().value}",
        f"Python            : {sys.version.split()[0]}",
        f"Selenium          : {getattr(selenium, '__version__', '?')}",
        f"Driver endpoint   : {endpoint}",
        f"Request timeout   : {client.timeout if client else config.get('request_timeout')}",
        f"Geckodriver path  : {driver_executable_path(Browser.FIREFOX, config)}",
        f"Chromedriver path : {driver_executable_path(Browser.CHROME, config)}",
        f"Session id        : {session_id or '<none>'}",
    ]

    if exc:
        parts += [
            "---- ERROR ----",
            f"Error type        : {type(exc).__name__}",
            f"Error message     : {exc}",
        ]
        kind = getattr(exc, "kind", None)
        if kind is not None:
            parts.append(f"Error kind        : {kind.name}")

    return "\n".join(parts)


__all__ = ['collect_diagnostics']
