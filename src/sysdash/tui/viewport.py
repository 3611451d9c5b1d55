"""Visible-window computation for scrolled lists.

A list shows a "window" of ``visible_rows`` items that always contains the
selected index. The window start is remembered between frames and only
moved when the selection would otherwise leave it, so stepping through a
list scrolls it one row at a time instead of re-centering on every frame.
The remembered start is discarded whenever the caller passes a different
geometry token (the panel was moved or resized, or this is the first query).
"""

from __future__ import annotations

import logging
from typing import Hashable

from sysdash.tui.selection import ScrollDirection, SelectionState

logger = logging.getLogger(__name__)


class ViewportWindow:
    """Remembers where the visible slice of a list starts."""

    def __init__(self, selection: SelectionState) -> None:
        self._selection = selection
        self._start_index = 0
        self._cached_identity: Hashable | None = None

    @property
    def start_index(self) -> int:
        """The window start computed by the last ``get_window_start`` call."""
        return self._start_index

    def invalidate(self) -> None:
        """Forget the cached geometry so the next query starts from zero."""
        self._cached_identity = None
        self._start_index = 0

    def get_window_start(self, visible_rows: int, identity: Hashable) -> int:
        """Return the index of the first item to draw.

        *identity* is any equality-comparable description of the panel's
        current geometry; it is never interpreted, only compared with the
        value seen on the previous call.
        """
        if identity != self._cached_identity:
            logger.debug(
                "Viewport geometry changed (%r -> %r), resetting window start",
                self._cached_identity,
                identity,
            )
            self._start_index = 0
            self._cached_identity = identity

        if visible_rows <= 0:
            self._start_index = 0
            return 0

        current = self._selection.index()
        start = self._start_index

        if self._selection.scroll_direction is ScrollDirection.DOWN:
            if current < start:
                # The list shrank under the window; keep the selection on
                # the last row.
                start = max(current - visible_rows + 1, 0)
            elif current < start + visible_rows:
                # Still visible from the old start
                pass
            elif current >= visible_rows:
                # Smallest start that keeps the selection as the last row
                start = current - visible_rows + 1
            else:
                start = 0
        else:
            if current <= start:
                start = current
            elif current >= start + visible_rows:
                start = current - visible_rows + 1

        self._start_index = start
        return start

    def selected_row(self) -> int:
        """Return the selection's row offset inside the last computed window."""
        return max(self._selection.index() - self._start_index, 0)
