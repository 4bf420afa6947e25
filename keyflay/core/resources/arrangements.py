"""Built-in key arrangements.

The only arrangement shipped here is the placeholder "loading" keyboard shown
while a real layout is still being prepared. It has the usual QWERTY shape
(10/9/9/6 keys) but carries no characters, so it doubles as a realistic
fixture for layout tests and the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from keyflay.core.keyboard.keyboard import TextKeyboard
from keyflay.core.keyboard.keys import KeyData
from keyflay.core.keyboard.mode import CHARACTERS, require_mode


# Codes for the few functional keys the placeholder arrangement needs.
KEYCODE_SPACE = 32
KEYCODE_ENTER = 10
KEYCODE_SHIFT = -1
KEYCODE_DELETE = -5
KEYCODE_VIEW_SYMBOLS = -202

Arrangement = Tuple[Tuple[KeyData, ...], ...]


@dataclass(frozen=True)
class ComputedLayout:
    """An arrangement resolved for one keyboard mode."""

    mode: str
    name: str
    direction: str = "ltr"
    arrangement: Arrangement = field(default_factory=tuple)

    def to_keyboard(self) -> TextKeyboard:
        return TextKeyboard(self.arrangement, mode=self.mode, name=self.name, direction=self.direction)


@dataclass(frozen=True)
class LayoutMeta:
    """Descriptive part of a layout asset, without its key rows.

    Enough to list the layouts available for a language or mode without
    holding every arrangement in memory.
    """

    type: str
    name: str
    label: str
    authors: Tuple[str, ...] = ()
    direction: str = "ltr"
    modifier: Optional[str] = None


@dataclass(frozen=True)
class Layout(LayoutMeta):
    """A layout asset: metadata plus the arrangement it was loaded with."""

    arrangement: Arrangement = field(default_factory=tuple)

    @property
    def meta(self) -> LayoutMeta:
        return LayoutMeta(
            type=self.type,
            name=self.name,
            label=self.label,
            authors=self.authors,
            direction=self.direction,
            modifier=self.modifier,
        )

    def to_computed_layout(self, mode: str) -> ComputedLayout:
        """Resolve this layout for ``mode``.

        Rows given as lists are frozen into tuples. Raises ``ArrangementError``
        for an unknown mode.
        """

        return ComputedLayout(
            mode=require_mode(mode),
            name=self.name,
            direction=self.direction,
            arrangement=_copy_arrangement(self.arrangement),
        )


def _copy_arrangement(rows: Sequence[Sequence[KeyData]]) -> Arrangement:
    return tuple(tuple(row) for row in rows)


def _blank_keys(count: int) -> List[KeyData]:
    return [KeyData(code=0) for _ in range(count)]


def _row(items: Iterable[KeyData]) -> Tuple[KeyData, ...]:
    return tuple(items)


def build_loading_arrangement() -> Arrangement:
    return (
        _row(_blank_keys(10)),
        _row(_blank_keys(9)),
        _row(
            [
                KeyData(code=KEYCODE_SHIFT, type="modifier", label="shift"),
                *_blank_keys(7),
                KeyData(code=KEYCODE_DELETE, type="enter_editing", label="delete"),
            ]
        ),
        _row(
            [
                KeyData(code=KEYCODE_VIEW_SYMBOLS, type="system_gui", label="view_symbols"),
                *_blank_keys(2),
                KeyData(code=KEYCODE_SPACE, label="space"),
                *_blank_keys(1),
                KeyData(code=KEYCODE_ENTER, type="enter_editing", label="enter"),
            ]
        ),
    )


LOADING_KEYBOARD = ComputedLayout(
    mode=CHARACTERS,
    name="__loading_keyboard__",
    direction="ltr",
    arrangement=build_loading_arrangement(),
)
