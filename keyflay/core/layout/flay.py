"""Row distribution ("flay") algorithm.

A row is laid out along a single axis, like a flexible box:

- every key asks for ``width_factor`` reference units
- spare room is handed out by ``grow`` weight
- missing room is taken back by ``shrink`` weight

When no key of a fitting row wants to grow, the spare room is split between
the first and the last key instead, so the row ends up centered. The visible
face of those two keys gives the extra room back as inset, which keeps the
rendered key at its natural size while its touch target reaches the edge.

Everything here is pure: inputs are flay weights plus the desired key, output
is a list of `KeyBounds` in pixels.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Protocol, Sequence

from keyflay.core.geometry.foreground import DEFAULT_FOREGROUND_FACTORS, ForegroundFactors, layout_foreground_bounds
from keyflay.core.geometry.rect import EMPTY_RECT, Rect
from keyflay.core.logging_utils import log_throttled

from .desired_key import DesiredKey


logger = logging.getLogger(__name__)


class FlayProtocol(Protocol):
    @property
    def width_factor(self) -> float: ...

    @property
    def shrink(self) -> float: ...

    @property
    def grow(self) -> float: ...


@dataclass(frozen=True)
class RowSlot:
    """One key's share of a row, in reference units.

    ``leading_slack``/``trailing_slack`` is the part of ``width`` that the
    visible face must give back on its left/right side.
    """

    width: float
    leading_slack: float = 0.0
    trailing_slack: float = 0.0


@dataclass(frozen=True)
class RowPlan:
    slots: List[RowSlot]
    requested_width: float
    available_width: float
    grow_sum: float
    shrink_sum: float

    @property
    def fits(self) -> bool:
        return self.requested_width <= self.available_width

    @property
    def overflow(self) -> float:
        """Units by which the distributed row is still wider than the available width."""

        return max(0.0, sum(s.width for s in self.slots) - self.available_width)


@dataclass(frozen=True)
class KeyBounds:
    touch: Rect = EMPTY_RECT
    visible: Rect = EMPTY_RECT
    drawable: Rect = EMPTY_RECT
    label: Rect = EMPTY_RECT


EMPTY_KEY_BOUNDS = KeyBounds()

# Float sums of grow shares can land a hair above the available width.
_OVERFLOW_EPSILON = 1e-9


def distribute_row(flays: Sequence[FlayProtocol], available_width: float) -> RowPlan:
    requested_width = 0.0
    shrink_sum = 0.0
    grow_sum = 0.0
    for flay in flays:
        requested_width += flay.width_factor
        shrink_sum += flay.shrink
        grow_sum += flay.grow

    slots: List[RowSlot] = []
    if requested_width <= available_width:
        additional_width = available_width - requested_width
        if grow_sum == 0.0:
            half = additional_width / 2.0
            last = len(flays) - 1
            for k, flay in enumerate(flays):
                # A single-key row is both first and last and gets both halves.
                leading = half if k == 0 else 0.0
                trailing = half if k == last else 0.0
                slots.append(RowSlot(flay.width_factor + leading + trailing, leading, trailing))
        else:
            for flay in flays:
                slots.append(RowSlot(flay.width_factor + additional_width * (flay.grow / grow_sum)))
    else:
        clipping_width = requested_width - available_width
        for flay in flays:
            if flay.shrink == 0.0:
                slots.append(RowSlot(flay.width_factor))
            else:
                slots.append(RowSlot(flay.width_factor - clipping_width * (flay.shrink / shrink_sum)))

    return RowPlan(
        slots=slots,
        requested_width=requested_width,
        available_width=available_width,
        grow_sum=grow_sum,
        shrink_sum=shrink_sum,
    )


def layout_row(
    flays: Sequence[FlayProtocol],
    *,
    row_index: int,
    container_width: int,
    desired_key: DesiredKey,
    foreground: ForegroundFactors = DEFAULT_FOREGROUND_FACTORS,
) -> List[KeyBounds]:
    """Compute pixel bounds for every key of one row.

    Keys are packed left to right starting at x=0. Each key's right edge is
    truncated to an int and the next key starts exactly there.
    """

    unit_width = desired_key.unit_width
    row_height = desired_key.unit_height
    pos_y = row_height * row_index
    margins = desired_key.margins

    plan = distribute_row(flays, container_width / unit_width)
    if plan.overflow > _OVERFLOW_EPSILON:
        log_throttled(
            logger,
            f"layout.row_overflow.{row_index}",
            interval_s=60,
            level=logging.DEBUG,
            msg=(
                f"Row {row_index} still overflows by {plan.overflow:.3f} units "
                f"(requested={plan.requested_width:.3f}, available={plan.available_width:.3f})"
            ),
        )

    out: List[KeyBounds] = []
    pos_x = 0
    for slot in plan.slots:
        key_width = unit_width * slot.width
        touch = Rect(pos_x, pos_y, int(pos_x + key_width), pos_y + row_height)
        visible = Rect(
            touch.left + margins.left + int(slot.leading_slack * unit_width),
            touch.top + margins.top,
            touch.right - margins.right - int(slot.trailing_slack * unit_width),
            touch.bottom - margins.bottom,
        )
        out.append(
            KeyBounds(
                touch=touch,
                visible=visible,
                drawable=layout_foreground_bounds(visible, foreground.icon),
                label=layout_foreground_bounds(visible, foreground.label),
            )
        )
        pos_x += touch.width

    return out
