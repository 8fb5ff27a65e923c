"""
Remote handle identifiers.

Session, tab and element ids are opaque strings assigned by the driver. Tabs
and elements created under a session all hold the same SessionHandle, so
closing the session is visible to every object derived from it.
"""

from dataclasses import dataclass, field
from typing import NewType

from .client.wire import WireClient
from .errors import BrowserError, ErrorKind

SessionId = NewType("SessionId", str)
TabId = NewType("TabId", str)
ElementId = NewType("ElementId", str)


@dataclass(eq=False)
class SessionHandle:
    """
    State shared by a Session and everything created from it.

    Attributes:
        id: Remote session id, never mutated
        client: Wire client bound to the driver endpoint
        config: Configuration the session was created with
        closed: Set once the remote session has been deleted
    """

    id: SessionId
    client: WireClient
    config: dict = field(default_factory=dict)
    closed: bool = False

    def check_open(self) -> None:
        if self.closed:
            raise BrowserError.of(ErrorKind.INVALID_SESSION_ID, f"session {self.id} was closed")


__all__ = [
    "SessionId",
    "TabId",
    "ElementId",
    "SessionHandle",
]
