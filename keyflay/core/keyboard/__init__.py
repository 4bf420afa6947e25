from .bounds_buffer import BoundsBuffer
from .keyboard import TextKeyboard
from .keys import KeyData, TextKey
from .mode import KEYBOARD_MODES, require_mode

__all__ = [
    "BoundsBuffer",
    "KEYBOARD_MODES",
    "KeyData",
    "TextKey",
    "TextKeyboard",
    "require_mode",
]
