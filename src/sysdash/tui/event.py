"""Event types shared between the input layer and the render layer.

``EventResult`` is the redraw decision returned for every routed input
event. Key and mouse events are plain frozen dataclasses built by
``sysdash.tui.keys`` and ``sysdash.tui.mouse`` from raw terminal input.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, Flag, auto
from typing import Literal

__all__ = [
    "EventResult",
    "KeyEventKind",
    "KeyModifiers",
    "KeyEvent",
    "MouseButton",
    "MouseEventKind",
    "MouseEvent",
]


class EventResult(Enum):
    """Whether handling an event changed anything visible."""

    REDRAW = "redraw"
    NO_REDRAW = "no_redraw"


class KeyModifiers(Flag):
    NONE = 0
    SHIFT = auto()
    CONTROL = auto()
    ALT = auto()


KeyEventKind = Literal["press", "repeat", "release"]


@dataclass(frozen=True)
class KeyEvent:
    """A decoded keypress.

    ``code`` is either a named key (``"down"``, ``"enter"``, ``"f5"``) or a
    single character. Letters keep their case, so a shifted ``g`` arrives
    as ``code="G"`` with ``KeyModifiers.SHIFT`` set.
    """

    code: str
    modifiers: KeyModifiers = KeyModifiers.NONE
    kind: KeyEventKind = "press"

    @property
    def is_char(self) -> bool:
        return len(self.code) == 1


class MouseButton(Enum):
    LEFT = "left"
    MIDDLE = "middle"
    RIGHT = "right"


class MouseEventKind(Enum):
    DOWN = "down"
    UP = "up"
    DRAG = "drag"
    MOVED = "moved"
    SCROLL_DOWN = "scroll_down"
    SCROLL_UP = "scroll_up"
    SCROLL_LEFT = "scroll_left"
    SCROLL_RIGHT = "scroll_right"


@dataclass(frozen=True)
class MouseEvent:
    """A decoded mouse report. ``column`` and ``row`` are 0-based screen cells."""

    kind: MouseEventKind
    column: int
    row: int
    button: MouseButton | None = None
    modifiers: KeyModifiers = KeyModifiers.NONE
