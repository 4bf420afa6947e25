"""Keyboard modes.

A mode names which family of arrangement a keyboard shows. Values are plain
lowercase strings so they can live in config files and CLI flags unchanged.
"""

from __future__ import annotations

from keyflay.core.utils.exceptions import ArrangementError

CHARACTERS = "characters"
EDITING = "editing"
SYMBOLS = "symbols"
SYMBOLS2 = "symbols2"
NUMERIC = "numeric"
NUMERIC_ADVANCED = "numeric_advanced"
PHONE = "phone"
PHONE2 = "phone2"

KEYBOARD_MODES: tuple[str, ...] = (
    CHARACTERS,
    EDITING,
    SYMBOLS,
    SYMBOLS2,
    NUMERIC,
    NUMERIC_ADVANCED,
    PHONE,
    PHONE2,
)


def require_mode(value: object) -> str:
    """Return the canonical mode for ``value`` or raise ``ArrangementError``.

    Case and surrounding whitespace are ignored.
    """

    v = str(value or "").strip().lower()
    if v not in KEYBOARD_MODES:
        raise ArrangementError(f"Unknown keyboard mode {value!r}; expected one of {', '.join(KEYBOARD_MODES)}")
    return v
