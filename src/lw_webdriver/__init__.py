"""
Drive a web browser through the W3C WebDriver protocol.

A Session talks to geckodriver or chromedriver (http://localhost:4444 by
default). Tabs are opened or discovered from the session, elements are found
in tabs. Every tab and element operation first makes sure its own tab is the
driver's active window.

    from lw_webdriver import Session, Browser, Selector

    with Session.create(Browser.FIREFOX, headless=True) as session:
        tab = session.tabs[0]
        tab.navigate("http://example.com/")
        link = tab.find(Selector.CSS, "a")
        if link is not None:
            link.click()
"""

from .cookies import Cookie
from .element import Element
from .enums import Browser, Platform, Selector
from .errors import (
    BrowserError,
    ErrorKind,
    InvalidResponse,
    TransportFailure,
    UnsupportedPlatform,
    WebdriverError,
)
from .rect import Rect
from .session import Session
from .tab import Tab
from .timeouts import Timeouts

__all__ = [
    "Session",
    "Tab",
    "Element",
    "Browser",
    "Platform",
    "Selector",
    "Timeouts",
    "Cookie",
    "Rect",
    "ErrorKind",
    "WebdriverError",
    "TransportFailure",
    "InvalidResponse",
    "BrowserError",
    "UnsupportedPlatform",
]
