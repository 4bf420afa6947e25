from __future__ import annotations

from dataclasses import dataclass

from .rect import Rect


ICON_INSET_FACTOR = 0.21
LABEL_INSET_FACTOR = 0.28


@dataclass(frozen=True)
class ForegroundFactors:
    """Inset fractions for the icon and label boxes inside a key face.

    Icons use the smaller inset so their box is relatively larger than the
    text label box.
    """

    icon: float = ICON_INSET_FACTOR
    label: float = LABEL_INSET_FACTOR


DEFAULT_FOREGROUND_FACTORS = ForegroundFactors()


def layout_foreground_bounds(visible: Rect, factor: float) -> Rect:
    """Center a square-ish foreground box inside *visible*.

    The shorter axis is inset by ``factor`` of its length. The longer axis is
    inset so the remaining extent matches the short axis result, which keeps
    the box square no matter whether the key is wide or tall.
    """

    w = float(visible.width)
    h = float(visible.height)
    if w < h:
        x_offset = factor * w
        y_offset = (h - (w - 2.0 * x_offset)) / 2.0
    else:
        y_offset = factor * h
        x_offset = (w - (h - 2.0 * y_offset)) / 2.0

    dx = int(x_offset)
    dy = int(y_offset)
    return Rect(visible.left + dx, visible.top + dy, visible.right - dx, visible.bottom - dy)
