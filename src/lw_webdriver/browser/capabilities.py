"""Capability negotiation payloads."""

from typing import Optional

from ..enums import Browser, Platform
from ..errors import UnsupportedPlatform


_HEADLESS_OPTIONS = {
    Browser.FIREFOX: ("moz:firefoxOptions", ["-headless"]),
    Browser.CHROME: ("goog:chromeOptions", ["--headless"]),
}


def build_capabilities(browser: Browser, headless: bool = False, platform: Optional[Platform] = None) -> dict:
    """
    Build the body of a new-session request.

    Args:
        browser: Browser to automate
        headless: Run without a visible window
        platform: Host platform (detected when omitted)

    Returns:
        dict: ``{"capabilities": {"alwaysMatch": {...}}}``

    Raises:
        UnsupportedPlatform: the host platform is unknown
    """
    if platform is None:
        platform = Platform.current()
    if platform is Platform.UNKNOWN:
        raise UnsupportedPlatform("Cannot express capabilities for an unknown platform")

    always_match = {
        "platformName": platform.value,
        "browserName": browser.value,
    }
    if headless:
        key, args = _HEADLESS_OPTIONS[browser]
        always_match[key] = {"args": list(args)}

    return {"capabilities": {"alwaysMatch": always_match}}


__all__ = ["build_capabilities"]
