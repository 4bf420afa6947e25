from __future__ import annotations

from typing import List, Sequence, Tuple

from keyflay.core.layout.flay import EMPTY_KEY_BOUNDS, KeyBounds


class BoundsBuffer:
    """Flat storage of per-key bounds, indexed by (row, col).

    The keyboard owns one buffer; layout writes whole rows into it and keys
    read their rectangles back through their flat index.
    """

    def __init__(self, row_sizes: Sequence[int]) -> None:
        offsets: List[int] = []
        total = 0
        for size in row_sizes:
            offsets.append(total)
            total += int(size)
        self._row_sizes: Tuple[int, ...] = tuple(int(s) for s in row_sizes)
        self._offsets: Tuple[int, ...] = tuple(offsets)
        self._bounds: List[KeyBounds] = [EMPTY_KEY_BOUNDS] * total

    def __len__(self) -> int:
        return len(self._bounds)

    @property
    def row_sizes(self) -> Tuple[int, ...]:
        return self._row_sizes

    def index_of(self, row: int, col: int) -> int:
        if not 0 <= row < len(self._row_sizes):
            raise IndexError(f"row {row} out of range")
        if not 0 <= col < self._row_sizes[row]:
            raise IndexError(f"column {col} out of range for row {row}")
        return self._offsets[row] + col

    def at(self, index: int) -> KeyBounds:
        return self._bounds[index]

    def get(self, row: int, col: int) -> KeyBounds:
        return self._bounds[self.index_of(row, col)]

    def write_row(self, row: int, bounds: Sequence[KeyBounds]) -> None:
        if len(bounds) != self._row_sizes[row]:
            raise ValueError(f"row {row} expects {self._row_sizes[row]} bounds, got {len(bounds)}")
        start = self._offsets[row]
        self._bounds[start : start + len(bounds)] = list(bounds)

    def snapshot(self) -> Tuple[KeyBounds, ...]:
        return tuple(self._bounds)

    def clear(self) -> None:
        self._bounds = [EMPTY_KEY_BOUNDS] * len(self._bounds)
