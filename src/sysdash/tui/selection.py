"""Selected-index state for scrollable lists and tables."""

from __future__ import annotations

from enum import Enum

from sysdash.tui.event import EventResult


class ScrollDirection(Enum):
    UP = "up"
    DOWN = "down"


class SelectionState:
    """The selected index of a list of ``num_items`` rows.

    The index is only changed through the navigation methods, each of which
    returns an ``EventResult`` telling the caller whether anything moved.
    ``scroll_direction`` records the direction of the last real change and
    is what ``ViewportWindow`` uses to decide which edge to pin.
    """

    def __init__(self, num_items: int = 0) -> None:
        if num_items < 0:
            raise ValueError(f"num_items must be non-negative, got {num_items}")
        self._current_index = 0
        self._num_items = num_items
        self._scroll_direction = ScrollDirection.DOWN

    def index(self) -> int:
        """Return the currently selected index."""
        return self._current_index

    def num_items(self) -> int:
        return self._num_items

    @property
    def scroll_direction(self) -> ScrollDirection:
        return self._scroll_direction

    def set_num_items(self, num_items: int) -> None:
        """Update the item count, clamping the selection if the list shrank."""
        if num_items < 0:
            raise ValueError(f"num_items must be non-negative, got {num_items}")
        self._num_items = num_items
        if num_items <= self._current_index:
            self._current_index = max(num_items - 1, 0)

    def _update_index(self, new_index: int) -> None:
        if new_index > self._current_index:
            self._current_index = new_index
            self._scroll_direction = ScrollDirection.DOWN
        elif new_index < self._current_index:
            self._current_index = new_index
            self._scroll_direction = ScrollDirection.UP

    def move_down(self, change_by: int) -> EventResult:
        """Move the selection down by *change_by* rows.

        A move that would run past the last item is rejected as a whole
        rather than clamped.
        """
        if change_by < 0:
            raise ValueError(f"change_by must be non-negative, got {change_by}")
        if self._num_items == 0:
            return EventResult.NO_REDRAW

        new_index = self._current_index + change_by
        if new_index >= self._num_items or new_index == self._current_index:
            return EventResult.NO_REDRAW

        self._update_index(new_index)
        return EventResult.REDRAW

    def move_up(self, change_by: int) -> EventResult:
        """Move the selection up by *change_by* rows, stopping at the top."""
        if change_by < 0:
            raise ValueError(f"change_by must be non-negative, got {change_by}")

        new_index = max(self._current_index - change_by, 0)
        if new_index == self._current_index:
            return EventResult.NO_REDRAW

        self._update_index(new_index)
        return EventResult.REDRAW

    def jump_top(self) -> EventResult:
        if self._current_index == 0:
            return EventResult.NO_REDRAW
        self._update_index(0)
        return EventResult.REDRAW

    def jump_bottom(self) -> EventResult:
        if self._num_items == 0:
            return EventResult.NO_REDRAW

        last_index = self._num_items - 1
        if self._current_index == last_index:
            return EventResult.NO_REDRAW
        self._update_index(last_index)
        return EventResult.REDRAW
