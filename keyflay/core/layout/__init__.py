from .desired_key import DesiredKey, Margins
from .flay import EMPTY_KEY_BOUNDS, FlayProtocol, KeyBounds, RowPlan, RowSlot, distribute_row, layout_row

__all__ = [
    "DesiredKey",
    "EMPTY_KEY_BOUNDS",
    "FlayProtocol",
    "KeyBounds",
    "Margins",
    "RowPlan",
    "RowSlot",
    "distribute_row",
    "layout_row",
]
