"""Reference ("desired") key used to scale and inset every key of a layout pass.

Hosts typically measure a single placeholder key and hand its touch and
visible rectangles over. The touch rect supplies the unit size; the per-side
gaps between touch and visible rect become the fixed margins applied to every
laid-out key.
"""

from __future__ import annotations

from dataclasses import dataclass

from keyflay.core.geometry.rect import Rect
from keyflay.core.utils.exceptions import DesiredKeyError


@dataclass(frozen=True)
class Margins:
    left: int
    top: int
    right: int
    bottom: int


@dataclass(frozen=True)
class DesiredKey:
    touch_bounds: Rect
    visible_bounds: Rect

    def __post_init__(self) -> None:
        if self.touch_bounds.width <= 0 or self.touch_bounds.height <= 0:
            raise DesiredKeyError(f"Desired touch bounds must have a positive size, got {self.touch_bounds}")
        if self.visible_bounds.width < 0 or self.visible_bounds.height < 0:
            raise DesiredKeyError(f"Desired visible bounds are inverted: {self.visible_bounds}")
        if not self.touch_bounds.contains_rect(self.visible_bounds):
            raise DesiredKeyError(
                f"Desired visible bounds {self.visible_bounds} are not inside touch bounds {self.touch_bounds}"
            )

    @classmethod
    def from_size(cls, *, width: int, height: int, margin_h: int = 0, margin_v: int = 0) -> "DesiredKey":
        """Build a desired key anchored at the origin with symmetric margins."""

        touch = Rect(0, 0, int(width), int(height))
        return cls(touch_bounds=touch, visible_bounds=touch.inset(int(margin_h), int(margin_v)))

    @property
    def unit_width(self) -> int:
        return self.touch_bounds.width

    @property
    def unit_height(self) -> int:
        return self.touch_bounds.height

    @property
    def margins(self) -> Margins:
        touch = self.touch_bounds
        visible = self.visible_bounds
        return Margins(
            left=abs(touch.left - visible.left),
            top=abs(touch.top - visible.top),
            right=abs(touch.right - visible.right),
            bottom=abs(touch.bottom - visible.bottom),
        )
