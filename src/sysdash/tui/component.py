"""The interface panels implement to receive input."""

from __future__ import annotations

from typing import Protocol

from sysdash.tui.event import EventResult, KeyEvent, MouseEvent
from sysdash.tui.geometry import Rect


class Component(Protocol):
    """An input-handling piece of the dashboard with a screen rectangle.

    Every handler returns an ``EventResult`` so the host can skip painting
    when nothing changed.
    """

    def handle_key_event(self, event: KeyEvent) -> EventResult:
        ...

    def handle_mouse_event(self, event: MouseEvent) -> EventResult:
        ...

    def bounds(self) -> Rect:
        ...

    def set_bounds(self, new_bounds: Rect) -> None:
        ...


def does_intersect_mouse(component: Component, event: MouseEvent) -> bool:
    """Return ``True`` if the mouse event falls inside *component*'s bounds."""
    return component.bounds().contains(event.column, event.row)
