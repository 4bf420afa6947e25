from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from keyflay.core.geometry.rect import Rect
from keyflay.core.layout.flay import KeyBounds
from keyflay.core.utils.exceptions import ArrangementError

from .bounds_buffer import BoundsBuffer


@dataclass(frozen=True)
class KeyData:
    """Static description of one key as supplied by the arrangement source.

    Flay defaults: keys shrink when a row overflows but never grow.
    """

    code: int = 0
    type: str = "character"
    label: Optional[str] = None
    width_factor: float = 1.0
    shrink: float = 1.0
    grow: float = 0.0

    def __post_init__(self) -> None:
        for name in ("width_factor", "shrink", "grow"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ArrangementError(
                    f"Key {self.label or self.code!r}: {name} must be a finite number >= 0, got {value}"
                )


class TextKey:
    """A key placed in a keyboard slot.

    Rectangles are not stored on the key; they are read from the keyboard's
    bounds buffer, so a layout pass replaces them all at once.
    """

    __slots__ = ("data", "row", "col", "_buffer", "_index")

    def __init__(self, data: KeyData, *, row: int, col: int, buffer: BoundsBuffer) -> None:
        self.data = data
        self.row = row
        self.col = col
        self._buffer = buffer
        self._index = buffer.index_of(row, col)

    def __repr__(self) -> str:
        return f"TextKey(row={self.row}, col={self.col}, code={self.data.code}, label={self.data.label!r})"

    @property
    def width_factor(self) -> float:
        return self.data.width_factor

    @property
    def shrink(self) -> float:
        return self.data.shrink

    @property
    def grow(self) -> float:
        return self.data.grow

    @property
    def bounds(self) -> KeyBounds:
        return self._buffer.at(self._index)

    @property
    def touch_bounds(self) -> Rect:
        return self.bounds.touch

    @property
    def visible_bounds(self) -> Rect:
        return self.bounds.visible

    @property
    def visible_drawable_bounds(self) -> Rect:
        return self.bounds.drawable

    @property
    def visible_label_bounds(self) -> Rect:
        return self.bounds.label
