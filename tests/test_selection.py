"""Tests for sysdash.tui.selection -- selected-index navigation."""

from __future__ import annotations

import pytest

from sysdash.tui.event import EventResult
from sysdash.tui.selection import ScrollDirection, SelectionState


def _at(index: int, num_items: int = 100) -> SelectionState:
    state = SelectionState(num_items)
    state.move_down(index)
    assert state.index() == index
    return state


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_starts_at_zero_scrolling_down(self) -> None:
        state = SelectionState(10)
        assert state.index() == 0
        assert state.num_items() == 10
        assert state.scroll_direction is ScrollDirection.DOWN

    def test_empty_list(self) -> None:
        state = SelectionState(0)
        assert state.index() == 0
        assert state.num_items() == 0

    def test_negative_count_rejected(self) -> None:
        with pytest.raises(ValueError):
            SelectionState(-1)


# ---------------------------------------------------------------------------
# move_down
# ---------------------------------------------------------------------------


class TestMoveDown:
    def test_moves_and_redraws(self) -> None:
        state = SelectionState(10)
        assert state.move_down(1) is EventResult.REDRAW
        assert state.index() == 1
        assert state.scroll_direction is ScrollDirection.DOWN

    def test_multi_step(self) -> None:
        state = SelectionState(10)
        assert state.move_down(9) is EventResult.REDRAW
        assert state.index() == 9

    def test_overshoot_is_rejected_not_clamped(self) -> None:
        state = _at(5, num_items=10)
        assert state.move_down(5) is EventResult.NO_REDRAW
        assert state.index() == 5

    def test_at_last_item(self) -> None:
        state = _at(9, num_items=10)
        assert state.move_down(1) is EventResult.NO_REDRAW
        assert state.index() == 9

    def test_zero_is_noop(self) -> None:
        state = _at(3)
        assert state.move_down(0) is EventResult.NO_REDRAW

    def test_empty_list_is_noop(self) -> None:
        state = SelectionState(0)
        assert state.move_down(1) is EventResult.NO_REDRAW
        assert state.index() == 0

    def test_noop_keeps_direction(self) -> None:
        state = _at(5, num_items=10)
        state.move_up(1)
        assert state.scroll_direction is ScrollDirection.UP
        state.move_down(100)
        assert state.scroll_direction is ScrollDirection.UP

    def test_negative_amount_rejected(self) -> None:
        with pytest.raises(ValueError):
            SelectionState(10).move_down(-1)


# ---------------------------------------------------------------------------
# move_up
# ---------------------------------------------------------------------------


class TestMoveUp:
    def test_moves_and_redraws(self) -> None:
        state = _at(5)
        assert state.move_up(2) is EventResult.REDRAW
        assert state.index() == 3
        assert state.scroll_direction is ScrollDirection.UP

    def test_floors_at_zero(self) -> None:
        state = _at(3)
        assert state.move_up(10) is EventResult.REDRAW
        assert state.index() == 0

    def test_at_top_is_noop(self) -> None:
        state = SelectionState(10)
        assert state.move_up(1) is EventResult.NO_REDRAW
        assert state.scroll_direction is ScrollDirection.DOWN

    def test_empty_list_is_noop(self) -> None:
        assert SelectionState(0).move_up(3) is EventResult.NO_REDRAW


# ---------------------------------------------------------------------------
# Jumps
# ---------------------------------------------------------------------------


class TestJumps:
    def test_jump_top(self) -> None:
        state = _at(42)
        assert state.jump_top() is EventResult.REDRAW
        assert state.index() == 0
        assert state.scroll_direction is ScrollDirection.UP

    def test_jump_top_already_there(self) -> None:
        assert SelectionState(10).jump_top() is EventResult.NO_REDRAW

    def test_jump_bottom(self) -> None:
        state = SelectionState(100)
        assert state.jump_bottom() is EventResult.REDRAW
        assert state.index() == 99
        assert state.scroll_direction is ScrollDirection.DOWN

    def test_jump_bottom_already_there(self) -> None:
        state = _at(99)
        assert state.jump_bottom() is EventResult.NO_REDRAW

    def test_jump_bottom_empty(self) -> None:
        state = SelectionState(0)
        assert state.jump_bottom() is EventResult.NO_REDRAW
        assert state.index() == 0

    def test_jump_bottom_single_item(self) -> None:
        assert SelectionState(1).jump_bottom() is EventResult.NO_REDRAW


# ---------------------------------------------------------------------------
# set_num_items
# ---------------------------------------------------------------------------


class TestSetNumItems:
    def test_shrinking_below_selection_clamps(self) -> None:
        state = _at(50)
        state.set_num_items(5)
        assert state.index() == 4
        assert state.num_items() == 5

    def test_shrinking_to_selection_clamps(self) -> None:
        state = _at(5)
        state.set_num_items(5)
        assert state.index() == 4

    def test_shrinking_to_zero(self) -> None:
        state = _at(7)
        state.set_num_items(0)
        assert state.index() == 0

    def test_growing_keeps_selection(self) -> None:
        state = _at(7, num_items=10)
        state.set_num_items(1000)
        assert state.index() == 7

    def test_clamp_keeps_direction(self) -> None:
        state = _at(50)
        state.set_num_items(5)
        assert state.scroll_direction is ScrollDirection.DOWN

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError):
            SelectionState(10).set_num_items(-3)


class TestIndexInvariant:
    def test_index_stays_in_range(self) -> None:
        state = SelectionState(7)
        ops = [
            lambda: state.move_down(3),
            lambda: state.move_down(10),
            lambda: state.jump_bottom(),
            lambda: state.set_num_items(4),
            lambda: state.move_up(2),
            lambda: state.set_num_items(12),
            lambda: state.move_down(8),
            lambda: state.jump_top(),
            lambda: state.set_num_items(1),
        ]
        for op in ops:
            op()
            assert 0 <= state.index() < state.num_items()
