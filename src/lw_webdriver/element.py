"""Elements found in a tab."""

from typing import Any, Optional

from .client import commands
from .constants import CLICK_SCRIPT, ELEMENT_KEY, SCROLL_INTO_VIEW_SCRIPT
from .decorators import ensure_selected, ensure_tab_selected
from .errors import BrowserError, ErrorKind, WebdriverError
from .handles import ElementId, SessionHandle, TabId
from .rect import Rect

import logging
logger = logging.getLogger(__name__)


_SUPPRESSED_CLICK_ERRORS = (
    ErrorKind.ELEMENT_NOT_INTERACTABLE,
    ErrorKind.ELEMENT_CLICK_INTERCEPTED,
)


class Element:
    """
    A located DOM node.

    The element belongs to the tab it was found in; every operation selects that
    tab first. Navigation, reload or DOM mutation makes the reference stale and
    the driver then reports ``stale element reference``, which is raised as is.
    """

    def __init__(self, id: str, session: SessionHandle, tab_id: TabId):
        self.id = ElementId(id)
        self._session = session
        self.tab_id = tab_id

    @property
    def session_id(self) -> str:
        return self._session.id

    def select(self) -> None:
        """Select the tab owning this element."""
        ensure_selected(self._session, self.tab_id)

    def as_json_object(self) -> dict:
        """The web element reference, as passed in script arguments and frame switches."""
        return {ELEMENT_KEY: self.id}

    @ensure_tab_selected
    def click(self, suppress_interception: Optional[bool] = None) -> None:
        """
        Click the element.

        The click is first performed by script, because the native click command
        fails silently on some browser versions. A script that runs without error
        counts as a successful click, even though this does not prove the page's
        click handler ran. If the script fails, the native click command is used.

        Args:
            suppress_interception: Treat 'element not interactable' and 'element
                click intercepted' from the native click as success. Defaults to
                the WEBDRIVER_SUPPRESS_CLICK_INTERCEPTED setting. The driver often
                reports these although the click landed, so suppressing them
                trades false negatives for false positives.
        """
        client, sid = self._session.client, self._session.id
        try:
            commands.execute_script_sync(client, sid, CLICK_SCRIPT, [self.as_json_object()])
            return
        except WebdriverError as e:
            logger.warning(f"script click on element {self.id} failed, falling back to native click: {e!r}")

        if suppress_interception is None:
            suppress_interception = self._session.config.get("suppress_click_intercepted", True)

        try:
            commands.click_element(client, sid, self.id)
        except BrowserError as e:
            if suppress_interception and e.kind in _SUPPRESSED_CLICK_ERRORS:
                logger.warning(f"native click on element {self.id} reported '{e.error}', assuming it landed")
                return
            raise

    @ensure_tab_selected
    def get_text(self) -> str:
        return commands.get_element_text(self._session.client, self._session.id, self.id)

    @ensure_tab_selected
    def type_text(self, text: str) -> None:
        """Send keystrokes to the element."""
        commands.send_text_to_element(self._session.client, self._session.id, self.id, text)

    @ensure_tab_selected
    def get_attribute(self, name: str) -> Optional[str]:
        return commands.get_element_attribute(self._session.client, self._session.id, self.id, name)

    @ensure_tab_selected
    def get_property(self, name: str) -> Any:
        return commands.get_element_property(self._session.client, self._session.id, self.id, name)

    @ensure_tab_selected
    def get_css_value(self, name: str) -> str:
        return commands.get_element_css_value(self._session.client, self._session.id, self.id, name)

    @ensure_tab_selected
    def get_tag_name(self) -> str:
        return commands.get_element_tag_name(self._session.client, self._session.id, self.id)

    @ensure_tab_selected
    def get_rect(self) -> Rect:
        return commands.get_element_rect(self._session.client, self._session.id, self.id)

    @ensure_tab_selected
    def is_enabled(self) -> bool:
        return commands.is_element_enabled(self._session.client, self._session.id, self.id)

    @ensure_tab_selected
    def switch_to_frame(self) -> None:
        """Make this (i)frame element the current browsing context of its tab."""
        commands.switch_to_frame(self._session.client, self._session.id, self.as_json_object())

    @ensure_tab_selected
    def scroll_into_view(self) -> None:
        commands.execute_script_sync(
            self._session.client, self._session.id, SCROLL_INTO_VIEW_SCRIPT, [self.as_json_object()]
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Element(id={self.id!r}, tab_id={self.tab_id!r})"


__all__ = ["Element"]
