"""
One function per WebDriver endpoint.

Each function issues a single command through a WireClient and checks the
shape of the returned value, raising InvalidResponse when the driver answers
with something this client does not understand.
"""

from typing import Any, List, Optional
from urllib.parse import quote

from ..constants import ELEMENT_KEY
from ..cookies import Cookie
from ..enums import Selector
from ..errors import InvalidResponse
from ..rect import Rect
from ..timeouts import Timeouts
from .wire import WireClient

import logging
logger = logging.getLogger(__name__)


def _not_understood(what: str, value: Any) -> InvalidResponse:
    logger.error(f"response to {what} request was not understood: {value!r}")
    return InvalidResponse(f"Response to {what} request was not understood: {value!r}")


def _expect_null(what: str, value: Any) -> None:
    if value is not None:
        raise _not_understood(what, value)


def _expect_str(what: str, value: Any) -> str:
    if not isinstance(value, str):
        raise _not_understood(what, value)
    return value


def _element_id(what: str, value: Any) -> str:
    if isinstance(value, dict) and isinstance(value.get(ELEMENT_KEY), str):
        return value[ELEMENT_KEY]
    raise _not_understood(what, value)


# ============================================================================
# Sessions
# ============================================================================

def new_session(client: WireClient, capabilities: dict) -> str:
    """Create a session and return its id."""
    logger.debug(f"session creation request with capabilities {capabilities}")
    value = client.execute("POST", "/session", capabilities)
    if isinstance(value, dict) and isinstance(value.get("sessionId"), str):
        logger.debug(f"session created (id: {value['sessionId']})")
        return value["sessionId"]
    raise _not_understood("session creation", value)


def delete_session(client: WireClient, session_id: str) -> None:
    client.execute("DELETE", f"/session/{session_id}")


def get_timeouts(client: WireClient, session_id: str) -> Timeouts:
    value = client.execute("GET", f"/session/{session_id}/timeouts")
    timeouts = Timeouts.from_json(value)
    if timeouts is None:
        raise _not_understood("timeouts", value)
    return timeouts


def set_timeouts(client: WireClient, session_id: str, timeouts: Timeouts) -> None:
    logger.debug(f"setting timeouts to {timeouts} on session {session_id}")
    _expect_null("timeouts change", client.execute("POST", f"/session/{session_id}/timeouts", timeouts.to_json()))


# ============================================================================
# Windows
# ============================================================================

def new_tab(client: WireClient, session_id: str) -> str:
    """Open a tab and return its handle."""
    value = client.execute("POST", f"/session/{session_id}/window/new", {})
    if isinstance(value, dict) and isinstance(value.get("handle"), str):
        logger.debug(f"tab created (id: {value['handle']})")
        return value["handle"]
    raise _not_understood("tab creation", value)


def get_open_tabs(client: WireClient, session_id: str) -> List[str]:
    value = client.execute("GET", f"/session/{session_id}/window/handles")
    if not isinstance(value, list) or not all(isinstance(h, str) for h in value):
        raise _not_understood("open tab ids", value)
    return value


def get_selected_tab(client: WireClient, session_id: str) -> str:
    return _expect_str("selected tab id", client.execute("GET", f"/session/{session_id}/window"))


def select_tab(client: WireClient, session_id: str, tab_id: str) -> None:
    logger.debug(f"selecting tab {tab_id} on session {session_id}")
    _expect_null("tab selection", client.execute("POST", f"/session/{session_id}/window", {"handle": tab_id}))


def close_active_tab(client: WireClient, session_id: str) -> List[str]:
    """Close the active tab; returns the handles still open."""
    value = client.execute("DELETE", f"/session/{session_id}/window")
    if value is None:
        return []
    if isinstance(value, list):
        return value
    raise _not_understood("tab close", value)


def switch_to_frame(client: WireClient, session_id: str, frame: Optional[dict]) -> None:
    """Switch to a frame element (its JSON wrapper), or to the top-level browsing context with None."""
    _expect_null("frame switch", client.execute("POST", f"/session/{session_id}/frame", {"id": frame}))


# ============================================================================
# Navigation
# ============================================================================

def navigate(client: WireClient, session_id: str, url: str) -> None:
    logger.debug(f"navigating to {url} on session {session_id}")
    _expect_null("navigation", client.execute("POST", f"/session/{session_id}/url", {"url": url}))


def get_url(client: WireClient, session_id: str) -> str:
    return _expect_str("url", client.execute("GET", f"/session/{session_id}/url"))


def get_title(client: WireClient, session_id: str) -> str:
    return _expect_str("title", client.execute("GET", f"/session/{session_id}/title"))


def back(client: WireClient, session_id: str) -> None:
    _expect_null("back", client.execute("POST", f"/session/{session_id}/back", {}))


def forward(client: WireClient, session_id: str) -> None:
    _expect_null("forward", client.execute("POST", f"/session/{session_id}/forward", {}))


def refresh(client: WireClient, session_id: str) -> None:
    _expect_null("refresh", client.execute("POST", f"/session/{session_id}/refresh", {}))


def get_page_source(client: WireClient, session_id: str) -> str:
    return _expect_str("page source", client.execute("GET", f"/session/{session_id}/source"))


def execute_script_sync(client: WireClient, session_id: str, script: str, args: Optional[list] = None) -> Any:
    """Run a synchronous script in the active tab and return its result."""
    logger.debug(f"executing script on session {session_id}")
    return client.execute("POST", f"/session/{session_id}/execute/sync", {"script": script, "args": list(args or [])})


# ============================================================================
# Elements
# ============================================================================

def find_element(client: WireClient, session_id: str, selector: Selector, value: str) -> str:
    """Return the id of the first element matching the locator."""
    logger.debug(f"finding element by {selector.value} with value {value} on session {session_id}")
    found = client.execute("POST", f"/session/{session_id}/element", {"using": selector.value, "value": value})
    return _element_id("element search", found)


def find_elements(client: WireClient, session_id: str, selector: Selector, value: str) -> List[str]:
    found = client.execute("POST", f"/session/{session_id}/elements", {"using": selector.value, "value": value})
    if not isinstance(found, list):
        raise _not_understood("elements search", found)
    return [_element_id("elements search", item) for item in found]


def click_element(client: WireClient, session_id: str, element_id: str) -> None:
    logger.debug(f"clicking on element {element_id} on session {session_id}")
    _expect_null("click", client.execute("POST", f"/session/{session_id}/element/{element_id}/click", {}))


def get_element_text(client: WireClient, session_id: str, element_id: str) -> str:
    return _expect_str("element text", client.execute("GET", f"/session/{session_id}/element/{element_id}/text"))


def send_text_to_element(client: WireClient, session_id: str, element_id: str, text: str) -> None:
    value = client.execute("POST", f"/session/{session_id}/element/{element_id}/value", {"text": text})
    _expect_null("send text", value)


def get_element_attribute(client: WireClient, session_id: str, element_id: str, name: str) -> Optional[str]:
    """Attribute value, or None when the element has no such attribute."""
    value = client.execute("GET", f"/session/{session_id}/element/{element_id}/attribute/{quote(name, safe='')}")
    if value is None:
        return None
    return _expect_str("element attribute", value)


def get_element_property(client: WireClient, session_id: str, element_id: str, name: str) -> Any:
    return client.execute("GET", f"/session/{session_id}/element/{element_id}/property/{quote(name, safe='')}")


def get_element_css_value(client: WireClient, session_id: str, element_id: str, name: str) -> str:
    return _expect_str("element css value", client.execute("GET", f"/session/{session_id}/element/{element_id}/css/{quote(name, safe='')}"))


def get_element_tag_name(client: WireClient, session_id: str, element_id: str) -> str:
    return _expect_str("element tag name", client.execute("GET", f"/session/{session_id}/element/{element_id}/name"))


def get_element_rect(client: WireClient, session_id: str, element_id: str) -> Rect:
    value = client.execute("GET", f"/session/{session_id}/element/{element_id}/rect")
    fields = ("x", "y", "width", "height")
    if not isinstance(value, dict) or not all(
        isinstance(value.get(f), (int, float)) and not isinstance(value.get(f), bool) for f in fields
    ):
        raise _not_understood("element rect", value)
    return Rect(*(float(value[f]) for f in fields))


def is_element_enabled(client: WireClient, session_id: str, element_id: str) -> bool:
    value = client.execute("GET", f"/session/{session_id}/element/{element_id}/enabled")
    if not isinstance(value, bool):
        raise _not_understood("element enabled", value)
    return value


# ============================================================================
# Cookies
# ============================================================================

def get_all_cookies(client: WireClient, session_id: str) -> List[Cookie]:
    value = client.execute("GET", f"/session/{session_id}/cookie")
    if not isinstance(value, list):
        raise _not_understood("cookies", value)
    cookies = []
    for item in value:
        cookie = Cookie.from_json(item)
        if cookie is None:
            logger.warning(f"a cookie was invalid and is skipped: {item!r}")
            continue
        cookies.append(cookie)
    return cookies


def set_cookie(client: WireClient, session_id: str, cookie: Cookie) -> None:
    logger.debug(f"setting cookie {cookie.name} on session {session_id}")
    _expect_null("add cookie", client.execute("POST", f"/session/{session_id}/cookie", {"cookie": cookie.to_json()}))


def delete_cookie(client: WireClient, session_id: str, name: str) -> None:
    _expect_null("delete cookie", client.execute("DELETE", f"/session/{session_id}/cookie/{quote(name, safe='')}"))


def delete_all_cookies(client: WireClient, session_id: str) -> None:
    _expect_null("delete cookies", client.execute("DELETE", f"/session/{session_id}/cookie"))


__all__ = [
    "new_session",
    "delete_session",
    "get_timeouts",
    "set_timeouts",
    "new_tab",
    "get_open_tabs",
    "get_selected_tab",
    "select_tab",
    "close_active_tab",
    "switch_to_frame",
    "navigate",
    "get_url",
    "get_title",
    "back",
    "forward",
    "refresh",
    "get_page_source",
    "execute_script_sync",
    "find_element",
    "find_elements",
    "click_element",
    "get_element_text",
    "send_text_to_element",
    "get_element_attribute",
    "get_element_property",
    "get_element_css_value",
    "get_element_tag_name",
    "get_element_rect",
    "is_element_enabled",
    "get_all_cookies",
    "set_cookie",
    "delete_cookie",
    "delete_all_cookies",
]
