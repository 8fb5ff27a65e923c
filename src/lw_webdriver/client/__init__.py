"""Wire-level access to a WebDriver server."""

from .wire import WireClient, parse_response
from . import commands

__all__ = [
    "WireClient",
    "parse_response",
    "commands",
]
