"""Routing of keyboard and mouse input to selection changes.

``InputRouter`` turns decoded key and mouse events into navigation calls on
a ``SelectionState`` and reports, for every event, whether the panel needs
to be repainted.
"""

from __future__ import annotations

import logging

from sysdash.tui.chord import ChordMatcher, ChordResult
from sysdash.tui.event import (
    EventResult,
    KeyEvent,
    KeyModifiers,
    MouseButton,
    MouseEvent,
    MouseEventKind,
)
from sysdash.tui.geometry import Rect
from sysdash.tui.keybindings import (
    ScrollAction,
    ScrollKeybindingsManager,
    get_scroll_keybindings,
)
from sysdash.tui.keys import key_id, parse_key_event
from sysdash.tui.mouse import is_mouse_sequence, parse_mouse_event
from sysdash.tui.selection import SelectionState
from sysdash.tui.viewport import ViewportWindow

logger = logging.getLogger(__name__)

# Only unmodified and shift-modified keys scroll; anything with ctrl or alt
# is left for other handlers.
_HONORED_MODIFIERS = (KeyModifiers.NONE, KeyModifiers.SHIFT)


class InputRouter:
    def __init__(
        self,
        selection: SelectionState,
        window: ViewportWindow,
        keybindings: ScrollKeybindingsManager | None = None,
    ) -> None:
        self._selection = selection
        self._window = window
        self._chords: list[tuple[ScrollAction, ChordMatcher]] = []
        self.set_keybindings(keybindings or get_scroll_keybindings())

    @property
    def keybindings(self) -> ScrollKeybindingsManager:
        return self._keybindings

    def set_keybindings(self, keybindings: ScrollKeybindingsManager) -> None:
        """Swap in new bindings. Partially typed chords are dropped."""
        self._keybindings = keybindings
        self._chords = [
            (action, ChordMatcher(sequence)) for action, sequence in keybindings.chords()
        ]

    def perform(self, action: ScrollAction) -> EventResult:
        if action == "scrollDown":
            return self._selection.move_down(1)
        if action == "scrollUp":
            return self._selection.move_up(1)
        if action == "jumpTop":
            return self._selection.jump_top()
        if action == "jumpBottom":
            return self._selection.jump_bottom()
        return EventResult.NO_REDRAW

    def handle_key_event(self, event: KeyEvent) -> EventResult:
        if event.kind == "release" or event.modifiers not in _HONORED_MODIFIERS:
            return EventResult.NO_REDRAW

        symbol = key_id(event)

        # Keys that are part of a chord only ever advance chords; other keys
        # leave a half-typed chord alone.
        completed: ScrollAction | None = None
        accepted = False
        for action, matcher in self._chords:
            if symbol not in matcher:
                continue
            result = matcher.input(symbol)
            if result is ChordResult.COMPLETED:
                completed = completed or action
            elif result is ChordResult.ACCEPTED:
                accepted = True
        if completed is not None:
            return self.perform(completed)
        if accepted:
            # a single-key binding for the same symbol waits for the chord
            return EventResult.NO_REDRAW

        action = self._keybindings.action_for(symbol)
        if action is None:
            logger.debug("No scroll action bound to %r", symbol)
            return EventResult.NO_REDRAW
        return self.perform(action)

    def handle_mouse_event(self, event: MouseEvent, bounds: Rect) -> EventResult:
        if not bounds.contains(event.column, event.row):
            return EventResult.NO_REDRAW

        if event.kind is MouseEventKind.DOWN and event.button is MouseButton.LEFT:
            # Rows are relative to the top of the panel; the list is assumed
            # to start there with no gaps.
            target_row = event.row - bounds.top
            selected = self._window.selected_row()
            if target_row > selected:
                return self._selection.move_down(target_row - selected)
            if target_row < selected:
                return self._selection.move_up(selected - target_row)
            return EventResult.NO_REDRAW

        if event.kind is MouseEventKind.SCROLL_DOWN:
            return self._selection.move_down(1)
        if event.kind is MouseEventKind.SCROLL_UP:
            return self._selection.move_up(1)
        return EventResult.NO_REDRAW

    def handle_input(self, data: str, bounds: Rect) -> EventResult:
        """Route one raw terminal sequence."""
        if is_mouse_sequence(data):
            mouse_event = parse_mouse_event(data)
            if mouse_event is None:
                return EventResult.NO_REDRAW
            return self.handle_mouse_event(mouse_event, bounds)

        key_event = parse_key_event(data)
        if key_event is None:
            return EventResult.NO_REDRAW
        return self.handle_key_event(key_event)
