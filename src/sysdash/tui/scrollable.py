"""A scrollable component meant to be embedded in list and table panels."""

from __future__ import annotations

from sysdash.tui.event import EventResult, KeyEvent, MouseEvent
from sysdash.tui.geometry import Rect
from sysdash.tui.keybindings import ScrollKeybindingsManager
from sysdash.tui.router import InputRouter
from sysdash.tui.selection import ScrollDirection, SelectionState
from sysdash.tui.viewport import ViewportWindow


class Scrollable:
    """Scroll state for one panel.

    Owns the selected index, the visible window and the input routing for a
    list of ``num_items`` rows. The owning panel reports its rectangle with
    ``set_bounds``, feeds it input, and on every frame asks
    ``get_list_start`` where to start drawing and ``selected_row`` which
    drawn row to highlight.
    """

    def __init__(
        self,
        num_items: int,
        keybindings: ScrollKeybindingsManager | None = None,
    ) -> None:
        self._selection = SelectionState(num_items)
        self._window = ViewportWindow(self._selection)
        self._router = InputRouter(self._selection, self._window, keybindings)
        self._bounds = Rect()

    def index(self) -> int:
        """Returns the currently selected index."""
        return self._selection.index()

    def num_items(self) -> int:
        return self._selection.num_items()

    def update_num_items(self, num_items: int) -> None:
        self._selection.set_num_items(num_items)

    @property
    def scroll_direction(self) -> ScrollDirection:
        return self._selection.scroll_direction

    @property
    def router(self) -> InputRouter:
        return self._router

    def get_list_start(self, num_visible_rows: int) -> int:
        """Returns the index of the first row to draw.

        The component's bounds are the geometry token, so moving or resizing
        the panel resets the window.
        """
        return self._window.get_window_start(num_visible_rows, self._bounds)

    def selected_row(self) -> int:
        """Returns the highlighted row's offset from the list start."""
        return self._window.selected_row()

    # Navigation, for panels that drive the selection directly

    def move_down(self, change_by: int = 1) -> EventResult:
        return self._selection.move_down(change_by)

    def move_up(self, change_by: int = 1) -> EventResult:
        return self._selection.move_up(change_by)

    def skip_to_first(self) -> EventResult:
        return self._selection.jump_top()

    def skip_to_last(self) -> EventResult:
        return self._selection.jump_bottom()

    # Component

    def handle_key_event(self, event: KeyEvent) -> EventResult:
        return self._router.handle_key_event(event)

    def handle_mouse_event(self, event: MouseEvent) -> EventResult:
        return self._router.handle_mouse_event(event, self._bounds)

    def handle_input(self, data: str) -> EventResult:
        return self._router.handle_input(data, self._bounds)

    def bounds(self) -> Rect:
        return self._bounds

    def set_bounds(self, new_bounds: Rect) -> None:
        self._bounds = new_bounds
