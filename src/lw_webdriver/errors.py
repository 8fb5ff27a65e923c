"""
Error taxonomy of the WebDriver client.

Every error raised by this package derives from ``WebdriverError``, which is a
selenium ``WebDriverException``, so code already written against selenium's
exception hierarchy keeps catching them.

- ``TransportFailure``: the HTTP exchange did not complete.
- ``InvalidResponse``: bytes came back but they are not a WebDriver envelope.
- ``BrowserError``: the driver ran the command and reported a documented failure.
- ``UnsupportedPlatform``: capabilities cannot be expressed for this host.
"""

from enum import Enum
from typing import Optional

from selenium.common.exceptions import WebDriverException


class ErrorKind(Enum):
    """Error codes of the W3C WebDriver protocol, valued with their wire string."""

    ELEMENT_CLICK_INTERCEPTED = "element click intercepted"
    ELEMENT_NOT_INTERACTABLE = "element not interactable"
    INSECURE_CERTIFICATE = "insecure certificate"
    INVALID_ARGUMENT = "invalid argument"
    INVALID_COOKIE_DOMAIN = "invalid cookie domain"
    INVALID_ELEMENT_STATE = "invalid element state"
    INVALID_SELECTOR = "invalid selector"
    INVALID_SESSION_ID = "invalid session id"
    JAVASCRIPT_ERROR = "javascript error"
    MOVE_TARGET_OUT_OF_BOUNDS = "move target out of bounds"
    NO_SUCH_ALERT = "no such alert"
    NO_SUCH_COOKIE = "no such cookie"
    NO_SUCH_ELEMENT = "no such element"
    NO_SUCH_FRAME = "no such frame"
    NO_SUCH_WINDOW = "no such window"
    NO_SUCH_SHADOW_ROOT = "no such shadow root"
    DETACHED_SHADOW_ROOT = "detached shadow root"
    SCRIPT_TIMEOUT = "script timeout"
    SESSION_NOT_CREATED = "session not created"
    STALE_ELEMENT_REFERENCE = "stale element reference"
    TIMEOUT = "timeout"
    UNABLE_TO_SET_COOKIE = "unable to set cookie"
    UNABLE_TO_CAPTURE_SCREEN = "unable to capture screen"
    UNEXPECTED_ALERT_OPEN = "unexpected alert open"
    UNKNOWN_COMMAND = "unknown command"
    UNKNOWN_ERROR = "unknown error"
    UNKNOWN_METHOD = "unknown method"
    UNSUPPORTED_OPERATION = "unsupported operation"
    CUSTOM = None

    @classmethod
    def from_wire(cls, error: str) -> "ErrorKind":
        """Decode a wire error string. Unknown strings decode to CUSTOM, never fail."""
        try:
            kind = cls(error)
        except ValueError:
            return cls.CUSTOM
        return kind


class WebdriverError(WebDriverException):
    """Base class of every error raised by lw_webdriver."""


class TransportFailure(WebdriverError):
    """The HTTP exchange itself did not complete (refused, timed out, I/O error)."""


class InvalidResponse(WebdriverError):
    """The exchange completed but the body is not a ``{"value": ...}`` JSON object."""

    def __init__(self, msg: Optional[str] = None, body: Optional[str] = None):
        super().__init__(msg)
        self.body = body


class UnsupportedPlatform(WebdriverError):
    """No capabilities can be expressed for the host platform."""


class BrowserError(WebdriverError):
    """
    The driver executed the command and reported a documented failure.

    Attributes:
        kind: decoded ErrorKind (CUSTOM when the string is not in the table)
        error: the error string exactly as the driver sent it
    """

    def __init__(self, error: str, message: Optional[str] = None, stacktrace: Optional[str] = None):
        self.kind = ErrorKind.from_wire(error)
        self.error = error
        super().__init__(
            f"{error}: {message}" if message else error,
            stacktrace=stacktrace.splitlines() if stacktrace else None,
        )

    @classmethod
    def of(cls, kind: ErrorKind, message: Optional[str] = None) -> "BrowserError":
        return cls(kind.value, message)

    def __repr__(self) -> str:
        return f"BrowserError(kind={self.kind.name}, error={self.error!r})"


__all__ = [
    "ErrorKind",
    "WebdriverError",
    "TransportFailure",
    "InvalidResponse",
    "UnsupportedPlatform",
    "BrowserError",
]
