"""Tabs: load pages, run scripts, find elements and manage cookies."""

from typing import Any, Iterable, List, Optional, Union

from .client import commands
from .cookies import Cookie
from .decorators import ensure_selected, ensure_tab_selected
from .element import Element
from .enums import Selector
from .errors import BrowserError, ErrorKind, WebdriverError
from .handles import SessionHandle, TabId

import logging
logger = logging.getLogger(__name__)


def _as_selector(selector: Union[Selector, str]) -> Selector:
    if isinstance(selector, Selector):
        return selector
    parsed = Selector.parse(selector)
    if parsed is None:
        raise ValueError(f"Unsupported selector type: {selector}")
    return parsed


class Tab:
    """
    One browsing context (tab or window) of a session.

    Every method touching page state selects this tab first, because WebDriver
    commands act on whichever tab the driver considers active.

    Attributes:
        id: Window handle assigned by the driver
        close_on_drop: True for tabs this client opened; only those are closed
            by close(). Tabs discovered by enumeration are never closed here.
    """

    def __init__(self, id: str, session: SessionHandle, close_on_drop: bool = False):
        self.id = TabId(id)
        self._session = session
        self.close_on_drop = close_on_drop
        self.closed = False

    @property
    def session_id(self) -> str:
        return self._session.id

    def select(self) -> None:
        """
        Make this tab the active one on the driver.

        No select command is sent when the tab is already active.
        """
        ensure_selected(self._session, self.id)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    @ensure_tab_selected
    def navigate(self, url: str) -> None:
        """Load a page."""
        commands.navigate(self._session.client, self._session.id, url)

    @ensure_tab_selected
    def get_url(self) -> str:
        return commands.get_url(self._session.client, self._session.id)

    @ensure_tab_selected
    def get_title(self) -> str:
        return commands.get_title(self._session.client, self._session.id)

    @ensure_tab_selected
    def back(self) -> None:
        commands.back(self._session.client, self._session.id)

    @ensure_tab_selected
    def forward(self) -> None:
        commands.forward(self._session.client, self._session.id)

    @ensure_tab_selected
    def refresh(self) -> None:
        commands.refresh(self._session.client, self._session.id)

    @ensure_tab_selected
    def get_page_source(self) -> str:
        return commands.get_page_source(self._session.client, self._session.id)

    @ensure_tab_selected
    def switch_to_default_frame(self) -> None:
        """Leave any frame entered with Element.switch_to_frame()."""
        commands.switch_to_frame(self._session.client, self._session.id, None)

    # ------------------------------------------------------------------
    # Scripts and elements
    # ------------------------------------------------------------------

    @ensure_tab_selected
    def execute_script(self, script: str, args: Optional[Iterable[Any]] = None) -> Any:
        """
        Run a synchronous script in this tab and return its result.

        Elements can be passed in ``args``; they are sent as web element references.
        """
        wire_args = [a.as_json_object() if isinstance(a, Element) else a for a in (args or [])]
        return commands.execute_script_sync(self._session.client, self._session.id, script, wire_args)

    @ensure_tab_selected
    def find(self, selector: Union[Selector, str], value: str) -> Optional[Element]:
        """
        Find the first element matching a locator.

        Returns:
            Element, or None when the search ran and matched nothing

        Raises:
            WebdriverError: the search itself failed
        """
        selector = _as_selector(selector)
        try:
            element_id = commands.find_element(self._session.client, self._session.id, selector, value)
        except BrowserError as e:
            if e.kind is ErrorKind.NO_SUCH_ELEMENT:
                return None
            raise
        return Element(element_id, self._session, self.id)

    @ensure_tab_selected
    def find_all(self, selector: Union[Selector, str], value: str) -> List[Element]:
        """Find every element matching a locator; empty when nothing matches."""
        selector = _as_selector(selector)
        try:
            ids = commands.find_elements(self._session.client, self._session.id, selector, value)
        except BrowserError as e:
            # conforming drivers answer a miss with []; some older ones report no such element
            if e.kind is ErrorKind.NO_SUCH_ELEMENT:
                return []
            raise
        return [Element(element_id, self._session, self.id) for element_id in ids]

    # ------------------------------------------------------------------
    # Cookies
    # ------------------------------------------------------------------

    @ensure_tab_selected
    def get_cookies(self) -> List[Cookie]:
        """
        Cookies visible to the current page.

        Entries without a string name and value are skipped and logged as a
        warning instead of failing the whole read.
        """
        return commands.get_all_cookies(self._session.client, self._session.id)

    @ensure_tab_selected
    def set_cookie(self, cookie: Cookie) -> None:
        commands.set_cookie(self._session.client, self._session.id, cookie)

    @ensure_tab_selected
    def set_cookies(self, cookies: Iterable[Cookie]) -> None:
        """Set several cookies; stops at the first failure."""
        for cookie in cookies:
            commands.set_cookie(self._session.client, self._session.id, cookie)

    @ensure_tab_selected
    def delete_cookie(self, name: str) -> None:
        commands.delete_cookie(self._session.client, self._session.id, name)

    @ensure_tab_selected
    def delete_all_cookies(self) -> None:
        commands.delete_all_cookies(self._session.client, self._session.id)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> bool:
        """
        Close the tab if this client owns it.

        Only tabs opened with Session.open_tab() are closed, and only after they
        were successfully selected. Errors are raised.

        Returns:
            bool: True if a close command was sent
        """
        if not self.close_on_drop or self.closed:
            return False
        self.select()
        commands.close_active_tab(self._session.client, self._session.id)
        self.closed = True
        logger.debug(f"tab {self.id} closed")
        return True

    def release(self) -> bool:
        """close() for teardown paths: errors are logged, not raised."""
        try:
            return self.close()
        except WebdriverError as e:
            logger.warning(f"Failed to close tab {self.id}: {e!r}")
            return False

    def __enter__(self) -> "Tab":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Tab):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Tab(id={self.id!r}, close_on_drop={self.close_on_drop})"


__all__ = ["Tab"]
