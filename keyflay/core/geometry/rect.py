"""Integer rectangle value type used for all key bounds.

Edges follow the usual screen convention:
- left/top are inclusive
- right/bottom are exclusive

Coordinates are plain ints. Callers converting from floats truncate toward
zero with `int()`; this module never rounds.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Rect:
    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    def is_empty(self) -> bool:
        return self.left >= self.right or self.top >= self.bottom

    def contains(self, x: int, y: int) -> bool:
        # Empty rects never contain anything, even a point on their left edge.
        if self.is_empty():
            return False
        return self.left <= x < self.right and self.top <= y < self.bottom

    def contains_rect(self, other: "Rect") -> bool:
        """Return True when *other* lies fully inside this rect (shared edges allowed)."""

        return (
            self.left <= other.left
            and self.top <= other.top
            and other.right <= self.right
            and other.bottom <= self.bottom
        )

    def inset(self, dx: int, dy: int) -> "Rect":
        return Rect(self.left + dx, self.top + dy, self.right - dx, self.bottom - dy)

    def as_xywh(self) -> Tuple[int, int, int, int]:
        return self.left, self.top, self.width, self.height


EMPTY_RECT = Rect()
