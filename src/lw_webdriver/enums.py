"""Locator strategies, browsers and host platforms."""

import platform
from enum import Enum
from typing import Optional

from selenium.webdriver.common.by import By


class Selector(str, Enum):
    """W3C locator strategies, spelled the way selenium's ``By`` spells them."""

    CSS = By.CSS_SELECTOR
    XPATH = By.XPATH
    TAG_NAME = By.TAG_NAME
    LINK_TEXT = By.LINK_TEXT
    PARTIAL_LINK_TEXT = By.PARTIAL_LINK_TEXT

    @classmethod
    def parse(cls, selector_type: str) -> Optional["Selector"]:
        """Map a short name ('css', 'xpath', 'tag', ...) or a wire value to a Selector."""
        key = selector_type.strip().lower()
        short = {
            'css': cls.CSS,
            'xpath': cls.XPATH,
            'tag': cls.TAG_NAME,
            'link_text': cls.LINK_TEXT,
            'partial_link_text': cls.PARTIAL_LINK_TEXT,
        }.get(key)
        if short is not None:
            return short
        for member in cls:
            if member.value == key:
                return member
        return None


class Browser(str, Enum):
    FIREFOX = "firefox"
    CHROME = "chrome"


class Platform(str, Enum):
    """Host platform, valued with the W3C ``platformName`` capability."""

    LINUX = "linux"
    MAC = "mac"
    WINDOWS = "windows"
    UNKNOWN = "unknown"

    @classmethod
    def current(cls) -> "Platform":
        system = platform.system()
        if system == "Linux":
            return cls.LINUX
        if system == "Darwin":
            return cls.MAC
        if system == "Windows":
            return cls.WINDOWS
        return cls.UNKNOWN


__all__ = [
    "Selector",
    "Browser",
    "Platform",
]
