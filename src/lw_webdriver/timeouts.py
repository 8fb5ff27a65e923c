"""Session timeouts, read and written wholesale."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Timeouts:
    """
    Timeouts of a session, in milliseconds.

    Attributes:
        script: script timeout; None means scripts never time out
        page_load: page load timeout
        implicit: implicit wait applied to element searches
    """

    script: Optional[int] = 30_000
    page_load: int = 300_000
    implicit: int = 0

    def to_json(self) -> dict:
        return {
            "script": self.script,
            "pageLoad": self.page_load,
            "implicit": self.implicit,
        }

    @classmethod
    def from_json(cls, value) -> Optional["Timeouts"]:
        """Build from the wire shape; None when pageLoad or implicit is missing."""
        if not isinstance(value, dict):
            return None
        page_load = value.get("pageLoad")
        implicit = value.get("implicit")
        script = value.get("script")
        if not _is_int(page_load) or not _is_int(implicit):
            return None
        if script is not None and not _is_int(script):
            return None
        return cls(
            script=None if script is None else int(script),
            page_load=int(page_load),
            implicit=int(implicit),
        )


def _is_int(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


__all__ = ["Timeouts"]
