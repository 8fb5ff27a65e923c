"""
End-to-end tests against a real driver and browser.

Skipped unless WEBDRIVER_E2E=1. A driver must listen on WEBDRIVER_HOST:WEBDRIVER_PORT
(default localhost:4444), or ./geckodriver must exist so the session can start it.
Network access to example.com is required.
"""

import os

import pytest
from dotenv import load_dotenv

from lw_webdriver import Browser, ErrorKind, BrowserError, Selector, Session


@pytest.fixture(scope="session", autouse=True)
def load_env():
    load_dotenv()


pytestmark = pytest.mark.skipif(
    os.getenv("WEBDRIVER_E2E") != "1",
    reason="set WEBDRIVER_E2E=1 to run against a real browser",
)

EXAMPLE = "http://example.com/"
IANA_PREFIX = "https://www.iana.org/"


@pytest.fixture
def session():
    with Session.create(Browser.FIREFOX, headless=True) as session:
        yield session


def test_navigate_click_back_forward(session):
    tab = session.tabs[0]

    tab.navigate(EXAMPLE)
    assert tab.get_url() == EXAMPLE
    assert tab.get_title() == "Example Domain"

    link = tab.find(Selector.CSS, "html>body>div>p>a")
    assert link is not None
    link.click()
    assert tab.get_url().startswith(IANA_PREFIX)

    tab.back()
    assert tab.get_url() == EXAMPLE

    tab.forward()
    assert tab.get_url().startswith(IANA_PREFIX)


def test_find_miss_and_stale_reference(session):
    tab = session.tabs[0]
    tab.navigate(EXAMPLE)
    assert tab.find(Selector.CSS, "#does-not-exist") is None

    heading = tab.find(Selector.TAG_NAME, "h1")
    tab.refresh()
    with pytest.raises(BrowserError) as info:
        heading.get_text()
    assert info.value.kind is ErrorKind.STALE_ELEMENT_REFERENCE


def test_second_tab_and_update(session):
    first = session.tabs[0]
    second = session.open_tab()
    assert len(session.tabs) == 2

    first.navigate(EXAMPLE)
    second.execute_script("window.open('about:blank', '_blank');")
    assert len(session.tabs) == 2

    session.update_tabs()
    assert len(session.tabs) == 3
    assert first.get_url() == EXAMPLE

    assert session.release_tab(second) is True
    session.update_tabs()
    assert len(session.tabs) == 2
