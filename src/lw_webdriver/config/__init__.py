"""Configuration management for the WebDriver client."""

from .environment import (
    get_env_config,
    base_url,
)

from .paths import (
    driver_executable_name,
    driver_executable_path,
)

__all__ = [
    "get_env_config",
    "base_url",
    "driver_executable_name",
    "driver_executable_path",
]
