from .foreground import (
    DEFAULT_FOREGROUND_FACTORS,
    ICON_INSET_FACTOR,
    LABEL_INSET_FACTOR,
    ForegroundFactors,
    layout_foreground_bounds,
)
from .rect import EMPTY_RECT, Rect

__all__ = [
    "DEFAULT_FOREGROUND_FACTORS",
    "EMPTY_RECT",
    "ICON_INSET_FACTOR",
    "LABEL_INSET_FACTOR",
    "ForegroundFactors",
    "Rect",
    "layout_foreground_bounds",
]
