"""
Browser sessions.

A Session owns one remote WebDriver session. Tabs are created from it and
elements are found in tabs; all of them share the session's handle.

## Threading

Everything here is synchronous and lock-free. The driver has a single active
window per session, and each Tab/Element operation checks it and then
selects its own tab. Two threads using tabs of the same session can interleave
between that check and the command, so callers must serialize all use of one
session (one thread per Session, not per Tab).

Usage:
    from lw_webdriver import Session, Browser

    with Session.create(Browser.FIREFOX) as session:
        session.tabs[0].navigate("http://example.com/")
        tab = session.open_tab()
        tab.navigate("https://www.mozilla.org/")
"""

import subprocess
from typing import List, Optional

from .browser.capabilities import build_capabilities
from .browser.driver_process import (
    build_driver_command,
    can_spawn_driver,
    launch_driver_process,
    terminate_driver_process,
)
from .client import commands
from .client.wire import WireClient
from .config.environment import get_env_config
from .enums import Browser
from .errors import TransportFailure, WebdriverError
from .handles import SessionHandle, SessionId
from .tab import Tab
from .timeouts import Timeouts
from .utils.diagnostics import collect_diagnostics

import logging
logger = logging.getLogger(__name__)


class Session:
    """
    One running browser under automation.

    Attributes:
        tabs: Tabs known to this client. Starts with the tabs open at creation;
            grows with open_tab(); picks up tabs opened by pages only when
            update_tabs() is called.
        browser: Browser the session drives
    """

    def __init__(self, handle: SessionHandle, browser: Browser):
        self._handle = handle
        self.browser = browser
        self.tabs: List[Tab] = []
        self._driver_process: Optional[subprocess.Popen] = None

    @property
    def id(self) -> SessionId:
        return self._handle.id

    @property
    def closed(self) -> bool:
        return self._handle.closed

    @property
    def driver_process(self) -> Optional[subprocess.Popen]:
        """Driver process spawned by this session, if any."""
        return self._driver_process

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------

    @classmethod
    def create(
        cls,
        browser: Browser,
        headless: bool = False,
        config: Optional[dict] = None,
        client: Optional[WireClient] = None,
    ) -> "Session":
        """
        Create a session on the configured driver (http://localhost:4444 by default).

        If no driver answers and the host is unix-like, the matching driver
        executable (./geckodriver or ./chromedriver) is started and creation is
        retried once. The spawned process is killed when the session closes.

        Raises:
            UnsupportedPlatform: the host platform is unknown (no request is sent)
            TransportFailure: no driver is reachable and none could be started
            BrowserError / InvalidResponse: the driver refused the session
        """
        if config is None:
            config = get_env_config()
        if client is None:
            client = WireClient(config=config)

        capabilities = build_capabilities(browser, headless)

        logger.info("Creating a session...")
        proc = None
        try:
            session_id = commands.new_session(client, capabilities)
        except TransportFailure as e:
            if not can_spawn_driver():
                logger.error(f"No webdriver reachable at {client.base_url}; launch it manually. ({e})")
                raise
            logger.warning(f"No webdriver reachable at {client.base_url}.")
            proc, session_id = cls._spawn_and_create(browser, capabilities, config, client, e)

        session = cls(SessionHandle(SessionId(session_id), client, config), browser)
        session._driver_process = proc
        try:
            session.update_tabs()
        except WebdriverError as e:
            logger.error(f"Failed to list the tabs of new session {session_id}: {e!r}")
            session._discard()
            raise

        logger.info("Session created successfully.")
        return session

    @classmethod
    def _spawn_and_create(cls, browser, capabilities, config, client, cause: TransportFailure):
        """Start the driver executable and retry session creation once; returns (process, session id)."""
        cmd = build_driver_command(browser, config)
        try:
            proc = launch_driver_process(cmd, config.get("spawn_grace_secs", 2.0))
        except OSError as e:
            logger.error(f"Failed to start {cmd[0]}: {e}")
            raise TransportFailure(f"No webdriver reachable at {client.base_url} and {cmd[0]} could not be started: {e}") from cause

        try:
            session_id = commands.new_session(client, capabilities)
        except WebdriverError as e:
            logger.error(f"Failed to create session. error: {e!r}\n{collect_diagnostics(exc=e, config=config, client=client)}")
            terminate_driver_process(proc)
            raise

        return proc, session_id

    def _discard(self) -> None:
        """Delete the remote session and kill a spawned driver; failures are logged."""
        try:
            commands.delete_session(self._handle.client, self._handle.id)
        except WebdriverError as e:
            logger.warning(f"Failed to delete session {self._handle.id}: {e!r}")
        self._handle.closed = True
        if self._driver_process is not None:
            terminate_driver_process(self._driver_process)
            self._driver_process = None

    # ------------------------------------------------------------------
    # Tabs
    # ------------------------------------------------------------------

    def open_tab(self) -> Tab:
        """
        Open a new tab owned by this session.

        The tab is appended to ``tabs`` (no update_tabs() needed) and is closed
        when released.
        """
        self._handle.check_open()
        tab_id = commands.new_tab(self._handle.client, self._handle.id)
        tab = Tab(tab_id, self._handle, close_on_drop=True)
        self.tabs.append(tab)
        return tab

    def enumerate_tabs(self) -> List[Tab]:
        """
        Every tab currently open on the driver, as observed (not owned) tabs.

        Closing or dropping these never closes the remote tab.
        """
        self._handle.check_open()
        return [
            Tab(tab_id, self._handle, close_on_drop=False)
            for tab_id in commands.get_open_tabs(self._handle.client, self._handle.id)
        ]

    def update_tabs(self) -> List[Tab]:
        """
        Synchronize ``tabs`` with the tabs open on the driver.

        Tabs opened by pages become visible here. Known tabs keep their object
        (and ownership), tabs that disappeared are dropped, new ones are
        appended as observed tabs.
        """
        open_tabs = self.enumerate_tabs()
        known = {tab.id: tab for tab in self.tabs if not tab.closed}
        self.tabs = [known.get(tab.id, tab) for tab in open_tabs]
        return self.tabs

    def release_tab(self, tab: Tab) -> bool:
        """
        Forget a tab and close it if this session owns it.

        Returns:
            bool: True if a close command was sent
        """
        if tab in self.tabs:
            self.tabs.remove(tab)
        return tab.release()

    # ------------------------------------------------------------------
    # Timeouts
    # ------------------------------------------------------------------

    def get_timeouts(self) -> Timeouts:
        self._handle.check_open()
        return commands.get_timeouts(self._handle.client, self._handle.id)

    def set_timeouts(self, timeouts: Timeouts) -> None:
        self._handle.check_open()
        commands.set_timeouts(self._handle.client, self._handle.id, timeouts)

    # ------------------------------------------------------------------
    # Teardown
    # ------------------------------------------------------------------

    def close(self) -> None:
        """
        Close owned tabs, delete the remote session and kill a spawned driver.

        Never raises; failures are logged. Calling it again is a no-op.
        """
        if self._handle.closed:
            return

        for tab in list(self.tabs):
            tab.release()

        self._discard()

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Session):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Session(id={self.id!r}, browser={self.browser.value!r}, tabs={len(self.tabs)})"


__all__ = ["Session"]
