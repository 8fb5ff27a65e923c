import pytest

from lw_webdriver.browser.capabilities import build_capabilities
from lw_webdriver.enums import Browser, Platform, Selector
from lw_webdriver.errors import UnsupportedPlatform


def test_firefox_on_linux():
    assert build_capabilities(Browser.FIREFOX, platform=Platform.LINUX) == {
        "capabilities": {"alwaysMatch": {"platformName": "linux", "browserName": "firefox"}}
    }


def test_headless_firefox():
    caps = build_capabilities(Browser.FIREFOX, headless=True, platform=Platform.MAC)
    assert caps["capabilities"]["alwaysMatch"] == {
        "platformName": "mac",
        "browserName": "firefox",
        "moz:firefoxOptions": {"args": ["-headless"]},
    }


def test_headless_chrome_on_windows():
    caps = build_capabilities(Browser.CHROME, headless=True, platform=Platform.WINDOWS)
    always = caps["capabilities"]["alwaysMatch"]
    assert always["platformName"] == "windows"
    assert always["goog:chromeOptions"] == {"args": ["--headless"]}
    assert "moz:firefoxOptions" not in always


def test_unknown_platform():
    with pytest.raises(UnsupportedPlatform):
        build_capabilities(Browser.CHROME, platform=Platform.UNKNOWN)


@pytest.mark.parametrize("system, expected", [
    ("Linux", Platform.LINUX),
    ("Darwin", Platform.MAC),
    ("Windows", Platform.WINDOWS),
    ("SunOS", Platform.UNKNOWN),
])
def test_platform_detection(monkeypatch, system, expected):
    monkeypatch.setattr("lw_webdriver.enums.platform.system", lambda: system)
    assert Platform.current() is expected


@pytest.mark.parametrize("name, expected", [
    ("css", Selector.CSS),
    ("XPath", Selector.XPATH),
    ("tag", Selector.TAG_NAME),
    ("link_text", Selector.LINK_TEXT),
    ("partial link text", Selector.PARTIAL_LINK_TEXT),
    ("css selector", Selector.CSS),
])
def test_selector_parse(name, expected):
    assert Selector.parse(name) is expected


def test_selector_parse_unknown():
    assert Selector.parse("id") is None
    assert Selector.CSS.value == "css selector"
