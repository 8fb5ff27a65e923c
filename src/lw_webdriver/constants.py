"""
Global constants and configuration defaults.
No dependencies - safe to import from anywhere.
"""

# ============================================================================
# Driver Endpoint
# ============================================================================

DEFAULT_HOST = "localhost"
"""Host the driver server listens on."""

DEFAULT_PORT = 4444
"""Well-known WebDriver port (geckodriver default, chromedriver is pinned to it)."""

DEFAULT_REQUEST_TIMEOUT_SECS = 60.0
"""Per-request timeout enforced by the HTTP transport."""


# ============================================================================
# Driver Process
# ============================================================================

DEFAULT_DRIVER_DIR = "."
"""Directory searched for the geckodriver / chromedriver executables."""

DEFAULT_SPAWN_GRACE_SECS = 2.0
"""How long to wait for a freshly spawned driver to accept connections."""


# ============================================================================
# Protocol
# ============================================================================

ELEMENT_KEY = "element-6066-11e4-a52e-4f735466cecf"
"""Key of the web element reference in its JSON wrapper."""

CLICK_SCRIPT = "arguments[0].click();"
"""Script used for the script-based click."""

SCROLL_INTO_VIEW_SCRIPT = "arguments[0].scrollIntoView();"


# ============================================================================
# Feature Flags
# ============================================================================

DEFAULT_SUPPRESS_CLICK_INTERCEPTED = True
"""Treat 'element not interactable' / 'element click intercepted' on the native click as success."""


__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "DEFAULT_REQUEST_TIMEOUT_SECS",
    "DEFAULT_DRIVER_DIR",
    "DEFAULT_SPAWN_GRACE_SECS",
    "ELEMENT_KEY",
    "CLICK_SCRIPT",
    "SCROLL_INTO_VIEW_SCRIPT",
    "DEFAULT_SUPPRESS_CLICK_INTERCEPTED",
]
