"""Text keyboard: a fixed arrangement of key rows plus its computed geometry."""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Sequence, Tuple

from keyflay.core.geometry.foreground import DEFAULT_FOREGROUND_FACTORS, ForegroundFactors
from keyflay.core.layout.desired_key import DesiredKey
from keyflay.core.layout.flay import KeyBounds, layout_row
from keyflay.core.utils.exceptions import ArrangementError, LayoutReentryError

from .bounds_buffer import BoundsBuffer
from .keys import KeyData, TextKey
from .mode import CHARACTERS, require_mode


logger = logging.getLogger(__name__)


class TextKeyboard:
    def __init__(
        self,
        arrangement: Sequence[Sequence[KeyData]],
        *,
        mode: str = CHARACTERS,
        name: str = "",
        direction: str = "ltr",
    ) -> None:
        if not arrangement:
            raise ArrangementError("Keyboard arrangement must contain at least one row")
        for r, row in enumerate(arrangement):
            if not row:
                raise ArrangementError(f"Keyboard arrangement row {r} is empty")

        self.mode = require_mode(mode)
        self.name = str(name)
        self.direction = str(direction or "ltr").strip().lower()

        self._buffer = BoundsBuffer([len(row) for row in arrangement])
        self._rows: Tuple[Tuple[TextKey, ...], ...] = tuple(
            tuple(TextKey(data, row=r, col=c, buffer=self._buffer) for c, data in enumerate(row))
            for r, row in enumerate(arrangement)
        )
        self._layout_running = False

    def __len__(self) -> int:
        return len(self._buffer)

    def __repr__(self) -> str:
        return f"TextKeyboard(name={self.name!r}, mode={self.mode!r}, rows={self.row_count}, keys={self.key_count})"

    @property
    def row_count(self) -> int:
        return len(self._rows)

    @property
    def key_count(self) -> int:
        return len(self._buffer)

    def keys(self) -> Iterator[TextKey]:
        """Yield every key in row-major order."""

        for row in self._rows:
            yield from row

    def rows(self) -> Iterator[Tuple[TextKey, ...]]:
        yield from self._rows

    def key_at(self, row: int, col: int) -> TextKey:
        return self._rows[row][col]

    def bounds_for(self, row: int, col: int) -> KeyBounds:
        return self._buffer.get(row, col)

    def get_key_for_pos(self, x: int, y: int) -> Optional[TextKey]:
        for key in self.keys():
            if key.touch_bounds.contains(x, y):
                return key
        return None

    def layout(
        self,
        container_width: int,
        desired_key: DesiredKey,
        *,
        foreground: ForegroundFactors = DEFAULT_FOREGROUND_FACTORS,
    ) -> None:
        """Recompute the bounds of every key for *container_width* pixels.

        Not reentrant: keys are rewritten in place, row by row.
        """

        if self._layout_running:
            raise LayoutReentryError(f"Layout pass already running for {self!r}")

        self._layout_running = True
        try:
            logger.debug(
                "Layout %s: container_width=%s unit=%sx%s",
                self.name or "<unnamed>",
                container_width,
                desired_key.unit_width,
                desired_key.unit_height,
            )
            for r, row in enumerate(self._rows):
                bounds: List[KeyBounds] = layout_row(
                    row,
                    row_index=r,
                    container_width=container_width,
                    desired_key=desired_key,
                    foreground=foreground,
                )
                self._buffer.write_row(r, bounds)
        finally:
            self._layout_running = False
