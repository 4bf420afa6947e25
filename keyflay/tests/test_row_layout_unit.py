#!/usr/bin/env python3
"""Unit tests for the row distribution algorithm (core/layout/flay.py)."""

from __future__ import annotations

import logging
from types import SimpleNamespace

import pytest

from keyflay.core.geometry.foreground import ForegroundFactors, layout_foreground_bounds
from keyflay.core.geometry.rect import Rect
from keyflay.core.layout.flay import distribute_row, layout_row


def _flays(widths, *, grow=None, shrink=None):
    grow = grow or [0.0] * len(widths)
    shrink = shrink or [1.0] * len(widths)
    return [
        SimpleNamespace(width_factor=float(w), grow=float(g), shrink=float(s)) for w, g, s in zip(widths, grow, shrink)
    ]


def _touch_widths(bounds):
    return [b.touch.width for b in bounds]


class TestDistributeRow:
    def test_exact_fit_keeps_natural_widths(self) -> None:
        plan = distribute_row(_flays([1, 1, 1]), 3.0)
        assert plan.fits
        assert [s.width for s in plan.slots] == [1.0, 1.0, 1.0]
        assert plan.overflow == 0.0

    def test_slack_goes_to_growing_keys_by_weight(self) -> None:
        plan = distribute_row(_flays([1, 1, 1], grow=[0, 1, 0]), 4.0)
        assert [s.width for s in plan.slots] == [1.0, 2.0, 1.0]

    def test_slack_split_by_grow_ratio(self) -> None:
        plan = distribute_row(_flays([1, 1], grow=[1, 3]), 6.0)
        assert [s.width for s in plan.slots] == [2.0, 4.0]

    def test_no_grow_splits_slack_between_row_ends(self) -> None:
        plan = distribute_row(_flays([1, 1, 1, 1]), 5.0)
        assert [s.width for s in plan.slots] == [1.5, 1.0, 1.0, 1.5]
        assert plan.slots[0].leading_slack == 0.5
        assert plan.slots[0].trailing_slack == 0.0
        assert plan.slots[-1].leading_slack == 0.0
        assert plan.slots[-1].trailing_slack == 0.5

    def test_single_key_row_gets_slack_once(self) -> None:
        plan = distribute_row(_flays([1]), 3.0)
        assert len(plan.slots) == 1
        assert plan.slots[0].width == 3.0
        assert plan.slots[0].leading_slack == 1.0
        assert plan.slots[0].trailing_slack == 1.0

    def test_overflow_shrinks_by_weight(self) -> None:
        plan = distribute_row(_flays([2, 2], shrink=[1, 1]), 3.0)
        assert not plan.fits
        assert [s.width for s in plan.slots] == [1.5, 1.5]

    def test_zero_shrink_key_keeps_natural_width(self) -> None:
        plan = distribute_row(_flays([2, 2], shrink=[0, 1]), 3.0)
        assert [s.width for s in plan.slots] == [2.0, 1.0]

    def test_zero_shrink_sum_leaves_row_overflowing(self) -> None:
        plan = distribute_row(_flays([2, 2], shrink=[0, 0]), 3.0)
        assert [s.width for s in plan.slots] == [2.0, 2.0]
        assert plan.shrink_sum == 0.0
        assert plan.overflow == 1.0

    def test_sums_are_reported(self) -> None:
        plan = distribute_row(_flays([1, 2], grow=[0.5, 0.25], shrink=[1, 2]), 10.0)
        assert plan.requested_width == 3.0
        assert plan.grow_sum == 0.75
        assert plan.shrink_sum == 3.0


class TestLayoutRow:
    def test_three_keys_exact_fit(self, desired_key) -> None:
        bounds = layout_row(_flays([1, 1, 1]), row_index=0, container_width=300, desired_key=desired_key)
        assert [b.touch for b in bounds] == [
            Rect(0, 0, 100, 100),
            Rect(100, 0, 200, 100),
            Rect(200, 0, 300, 100),
        ]

    def test_middle_key_grows(self, desired_key) -> None:
        flays = _flays([1, 1, 1], grow=[0, 1, 0])
        bounds = layout_row(flays, row_index=0, container_width=400, desired_key=desired_key)
        assert _touch_widths(bounds) == [100, 200, 100]
        assert [b.touch.left for b in bounds] == [0, 100, 300]

    def test_two_keys_share_slack_and_recenter_visible(self, desired_key) -> None:
        bounds = layout_row(_flays([1, 1]), row_index=0, container_width=300, desired_key=desired_key)
        assert [b.touch for b in bounds] == [Rect(0, 0, 150, 100), Rect(150, 0, 300, 100)]
        # Visible faces keep the natural 90px width; the slack stays on the outer side.
        assert bounds[0].visible == Rect(55, 10, 145, 90)
        assert bounds[1].visible == Rect(155, 10, 245, 90)

    def test_single_key_row_is_not_double_credited(self, desired_key) -> None:
        bounds = layout_row(_flays([1]), row_index=2, container_width=300, desired_key=desired_key)
        assert bounds[0].touch == Rect(0, 200, 300, 300)
        assert bounds[0].visible == Rect(105, 210, 195, 290)

    def test_overflowing_row_shrinks(self, desired_key) -> None:
        bounds = layout_row(_flays([2, 2], shrink=[1, 1]), row_index=0, container_width=300, desired_key=desired_key)
        assert _touch_widths(bounds) == [150, 150]
        assert bounds[0].visible == Rect(5, 10, 145, 90)

    def test_row_index_offsets_top(self, desired_key) -> None:
        bounds = layout_row(_flays([1, 1, 1]), row_index=1, container_width=300, desired_key=desired_key)
        assert {b.touch.top for b in bounds} == {100}
        assert {b.touch.bottom for b in bounds} == {200}

    def test_positions_accumulate_truncated_widths(self, desired_key) -> None:
        flays = _flays([1, 1, 1], grow=[1, 1, 1])
        bounds = layout_row(flays, row_index=0, container_width=350, desired_key=desired_key)
        assert [b.touch.right for b in bounds] == [116, 232, 348]
        for prev, cur in zip(bounds, bounds[1:]):
            assert cur.touch.left == prev.touch.right
        assert 350 - len(bounds) <= sum(_touch_widths(bounds)) <= 350

    def test_zero_container_width_collapses_keys(self, desired_key) -> None:
        bounds = layout_row(_flays([1, 1, 1]), row_index=0, container_width=0, desired_key=desired_key)
        assert _touch_widths(bounds) == [0, 0, 0]

    def test_foreground_boxes_follow_visible(self, desired_key) -> None:
        factors = ForegroundFactors(icon=0.1, label=0.4)
        bounds = layout_row(
            _flays([1, 2]), row_index=0, container_width=300, desired_key=desired_key, foreground=factors
        )
        for b in bounds:
            assert b.drawable == layout_foreground_bounds(b.visible, 0.1)
            assert b.label == layout_foreground_bounds(b.visible, 0.4)

    def test_overflow_is_logged_once_per_interval(self, desired_key, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="keyflay.core.layout.flay")
        flays = _flays([2, 2], shrink=[0, 0])

        layout_row(flays, row_index=0, container_width=300, desired_key=desired_key)
        layout_row(flays, row_index=0, container_width=300, desired_key=desired_key)

        hits = [r for r in caplog.records if "still overflows" in r.getMessage()]
        assert len(hits) == 1

    def test_fitting_row_does_not_log_overflow(self, desired_key, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="keyflay.core.layout.flay")
        layout_row(_flays([1, 1, 1], grow=[1, 1, 1]), row_index=0, container_width=350, desired_key=desired_key)
        assert not [r for r in caplog.records if "still overflows" in r.getMessage()]


@pytest.mark.parametrize("container_width", [350, 351, 475, 1000, 1999])
def test_growing_rows_fill_the_container(desired_key, container_width) -> None:
    flays = _flays([1, 1.5, 1], grow=[0, 1, 0])
    bounds = layout_row(flays, row_index=0, container_width=container_width, desired_key=desired_key)
    total = sum(_touch_widths(bounds))
    assert container_width - len(bounds) <= total <= container_width
