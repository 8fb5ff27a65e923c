"""Path utilities for locating driver executables."""

import os
from pathlib import Path

from ..enums import Browser


_DRIVER_EXECUTABLES = {
    Browser.FIREFOX: "geckodriver",
    Browser.CHROME: "chromedriver",
}


def driver_executable_name(browser: Browser) -> str:
    """Executable name of the driver serving this browser."""
    return _DRIVER_EXECUTABLES[browser]


def driver_executable_path(browser: Browser, config: dict) -> str:
    """
    Path of the driver executable, relative to the configured driver directory.

    With the default driver directory this is './geckodriver' or './chromedriver',
    resolved against the current working directory at spawn time.
    """
    driver_dir = config.get("driver_dir") or "."
    name = driver_executable_name(browser)
    if driver_dir == ".":
        return f".{os.sep}{name}"
    return str(Path(driver_dir) / name)
