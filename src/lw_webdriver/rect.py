"""Element rectangle."""

from typing import NamedTuple


class Rect(NamedTuple):
    x: float
    y: float
    width: float
    height: float


__all__ = ["Rect"]
