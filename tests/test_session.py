"""Tests for session creation, tabs bookkeeping, timeouts and teardown."""

import os
from unittest.mock import MagicMock

import pytest

import lw_webdriver.session as session_module
from lw_webdriver import Browser, Session, Timeouts
from lw_webdriver.errors import (
    BrowserError,
    ErrorKind,
    TransportFailure,
    UnsupportedPlatform,
)

from _utils import FakeDriver, TEST_CONFIG


OPENS_TAB = "http://test.local/open_tab.html"


def spawn_path(name):
    return f".{os.sep}{name}"


@pytest.fixture
def driver():
    return FakeDriver(pages={
        OPENS_TAB: {"title": "opener", "opens_tab": True},
    })


@pytest.fixture
def session(driver):
    return Session.create(Browser.FIREFOX, config=TEST_CONFIG, client=driver)


@pytest.fixture
def spawn(monkeypatch):
    """Replace process handling in the session module; records launches and kills."""
    state = {"launched": [], "terminated": [], "can_spawn": True, "launch_error": None}
    proc = MagicMock(name="driver-process", pid=4242)

    def fake_launch(cmd, grace_secs):
        if state["launch_error"] is not None:
            raise state["launch_error"]
        state["launched"].append((cmd, grace_secs))
        return proc

    monkeypatch.setattr(session_module, "launch_driver_process", fake_launch)
    monkeypatch.setattr(session_module, "terminate_driver_process", lambda p: state["terminated"].append(p))
    monkeypatch.setattr(session_module, "can_spawn_driver", lambda: state["can_spawn"])
    state["proc"] = proc
    return state


# ------------------------------------------------------------------
# Creation
# ------------------------------------------------------------------

def test_create_sends_capabilities_and_lists_existing_tabs(session, driver):
    caps = driver.capabilities["capabilities"]["alwaysMatch"]
    assert caps["browserName"] == "firefox"
    assert caps["platformName"] in ("linux", "mac", "windows")
    assert "moz:firefoxOptions" not in caps

    assert session.id == "session-1"
    assert [t.id for t in session.tabs] == ["tab-0"]
    assert session.tabs[0].close_on_drop is False
    assert driver.calls[0][:2] == ("POST", "/session")
    assert driver.calls[1][:2] == ("GET", "/session/session-1/window/handles")


def test_create_headless_chrome(driver):
    Session.create(Browser.CHROME, headless=True, config=TEST_CONFIG, client=driver)
    caps = driver.capabilities["capabilities"]["alwaysMatch"]
    assert caps["browserName"] == "chrome"
    assert caps["goog:chromeOptions"] == {"args": ["--headless"]}


def test_unknown_platform_fails_before_any_request(monkeypatch, driver):
    monkeypatch.setattr("lw_webdriver.enums.platform.system", lambda: "Plan9")
    with pytest.raises(UnsupportedPlatform):
        Session.create(Browser.FIREFOX, config=TEST_CONFIG, client=driver)
    assert driver.calls == []


def test_spawns_geckodriver_when_nothing_listens(driver, spawn):
    driver.script("POST", "/session", TransportFailure("connection refused"))

    session = Session.create(Browser.FIREFOX, config=TEST_CONFIG, client=driver)

    assert spawn["launched"] == [([spawn_path("geckodriver"), "--port=4444"], 0.0)]
    assert session.driver_process is spawn["proc"]
    assert driver.count("POST", "/session") == 2


def test_spawns_chromedriver_on_the_configured_port(driver, spawn):
    driver.script("POST", "/session", TransportFailure("connection refused"))
    Session.create(Browser.CHROME, config=TEST_CONFIG, client=driver)
    assert spawn["launched"][0][0] == [spawn_path("chromedriver"), "--port=4444"]


def test_spawn_retry_happens_once_and_kills_the_process(driver, spawn):
    driver.script("POST", "/session", TransportFailure("refused"), TransportFailure("still refused"))

    with pytest.raises(TransportFailure):
        Session.create(Browser.FIREFOX, config=TEST_CONFIG, client=driver)

    assert len(spawn["launched"]) == 1
    assert spawn["terminated"] == [spawn["proc"]]
    assert driver.count("POST", "/session") == 2


def test_no_spawn_on_non_unix(driver, spawn):
    spawn["can_spawn"] = False
    driver.script("POST", "/session", TransportFailure("refused"))

    with pytest.raises(TransportFailure):
        Session.create(Browser.FIREFOX, config=TEST_CONFIG, client=driver)
    assert spawn["launched"] == []


def test_missing_driver_executable_is_transport_failure(driver, spawn):
    spawn["launch_error"] = FileNotFoundError(2, "No such file", "./geckodriver")
    driver.script("POST", "/session", TransportFailure("refused"))

    with pytest.raises(TransportFailure) as info:
        Session.create(Browser.FIREFOX, config=TEST_CONFIG, client=driver)
    assert "could not be started" in info.value.msg


def test_browser_errors_are_not_retried(driver, spawn):
    driver.script("POST", "/session", BrowserError("session not created", "no firefox binary"))

    with pytest.raises(BrowserError) as info:
        Session.create(Browser.FIREFOX, config=TEST_CONFIG, client=driver)

    assert info.value.kind is ErrorKind.SESSION_NOT_CREATED
    assert spawn["launched"] == []


def test_tab_listing_failure_after_creation_does_not_spawn(driver, spawn):
    driver.script("GET", "/window/handles", TransportFailure("connection reset"))

    with pytest.raises(TransportFailure):
        Session.create(Browser.FIREFOX, config=TEST_CONFIG, client=driver)

    assert spawn["launched"] == []
    assert driver.count("POST", "/session") == 1
    assert driver.count("DELETE", "/session/session-1") == 1


def test_tab_listing_failure_after_spawn_cleans_up(driver, spawn):
    driver.script("POST", "/session", TransportFailure("refused"))
    driver.script("GET", "/window/handles", BrowserError("unknown error", "browser crashed"))

    with pytest.raises(BrowserError):
        Session.create(Browser.FIREFOX, config=TEST_CONFIG, client=driver)

    assert len(spawn["launched"]) == 1
    assert driver.count("POST", "/session") == 2
    assert driver.deleted
    assert spawn["terminated"] == [spawn["proc"]]


# ------------------------------------------------------------------
# Tabs
# ------------------------------------------------------------------

def test_open_tab_is_owned_and_tracked(session, driver):
    tab = session.open_tab()
    assert tab.close_on_drop is True
    assert session.tabs[-1] is tab
    assert tab.id in driver.handles


def test_enumerate_tabs_are_observed_and_not_tracked(session):
    session.open_tab()
    tabs = session.enumerate_tabs()
    assert len(tabs) == 2
    assert all(t.close_on_drop is False for t in tabs)
    assert len(session.tabs) == 2


def test_owned_tab_is_closed_when_released(session, driver):
    tab = session.open_tab()
    assert session.release_tab(tab) is True
    assert tab not in session.tabs
    assert tab.id not in driver.handles
    assert driver.count("DELETE", "/session/session-1/window") == 1


def test_enumerated_tab_is_never_closed_when_released(session, driver):
    session.open_tab()
    for tab in session.enumerate_tabs():
        with tab:
            pass
        assert session.release_tab(tab) is False
    assert driver.count("DELETE", "/session/session-1/window") == 0
    assert len(driver.handles) == 2


def test_context_manager_closes_owned_tab(session, driver):
    with session.open_tab() as tab:
        tab.navigate("http://example.com/")
    assert tab.closed
    assert tab.id not in driver.handles


def test_page_opened_tabs_show_up_only_after_update(session, driver):
    tab = session.open_tab()
    assert len(session.tabs) == 2

    tab.navigate(OPENS_TAB)
    assert len(session.tabs) == 2
    assert len(driver.handles) == 3

    tabs = session.update_tabs()
    assert tabs is session.tabs
    assert len(session.tabs) == 3
    # known tabs keep their object and ownership
    assert session.tabs[1] is tab
    assert session.tabs[1].close_on_drop is True
    assert session.tabs[2].close_on_drop is False


def test_update_tabs_drops_vanished_tabs(session, driver):
    tab = session.open_tab()
    driver.handles.remove(tab.id)
    session.update_tabs()
    assert [t.id for t in session.tabs] == ["tab-0"]


# ------------------------------------------------------------------
# Timeouts
# ------------------------------------------------------------------

def test_timeouts_defaults(session):
    assert session.get_timeouts() == Timeouts(script=30000, page_load=300000, implicit=0)


def test_timeouts_round_trip(session, driver):
    session.set_timeouts(Timeouts(script=None, page_load=299_999, implicit=1))

    assert driver.calls[-1] == (
        "POST", "/session/session-1/timeouts", {"script": None, "pageLoad": 299_999, "implicit": 1},
    )
    assert session.get_timeouts() == Timeouts(script=None, page_load=299_999, implicit=1)


# ------------------------------------------------------------------
# Teardown
# ------------------------------------------------------------------

def test_close_closes_owned_tabs_and_deletes_session(session, driver):
    owned = session.open_tab()
    session.close()

    assert owned.closed
    assert "tab-0" in driver.handles
    assert driver.deleted
    assert session.closed

    calls = len(driver.calls)
    session.close()
    assert len(driver.calls) == calls


def test_close_kills_spawned_driver(driver, spawn):
    driver.script("POST", "/session", TransportFailure("refused"))
    with Session.create(Browser.FIREFOX, config=TEST_CONFIG, client=driver) as session:
        pass
    assert spawn["terminated"] == [spawn["proc"]]
    assert session.driver_process is None


def test_close_never_raises(session, driver):
    session.open_tab()
    driver.script("GET", "/window", TransportFailure("gone"))
    driver.script("POST", "/window", TransportFailure("gone"))
    driver.script("DELETE", "/session/session-1", TransportFailure("gone"))

    session.close()
    assert session.closed


def test_derived_objects_fail_after_close(session, driver):
    tab = session.tabs[0]
    session.close()
    calls = len(driver.calls)

    with pytest.raises(BrowserError) as info:
        tab.get_url()
    assert info.value.kind is ErrorKind.INVALID_SESSION_ID
    with pytest.raises(BrowserError):
        session.open_tab()
    assert len(driver.calls) == calls


def test_sessions_compare_by_id(driver):
    a = Session.create(Browser.FIREFOX, config=TEST_CONFIG, client=driver)
    b = Session.create(Browser.FIREFOX, config=TEST_CONFIG, client=driver)
    assert a == b
    assert len({a, b}) == 1


