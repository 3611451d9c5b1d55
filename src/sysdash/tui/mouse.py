"""Mouse report decoding.

Supports the SGR extended encoding (``ESC [ < b ; x ; y M`` for press,
``m`` for release) and the legacy X10 encoding (``ESC [ M b x y`` with each
value offset by 32). Terminal coordinates are 1-based; decoded events are
0-based.
"""

from __future__ import annotations

import re

from sysdash.tui.event import KeyModifiers, MouseButton, MouseEvent, MouseEventKind

_SGR_MOUSE_RE = re.compile(r"\x1b\[<(\d+);(\d+);(\d+)([Mm])$")
_X10_PREFIX = "\x1b[M"

_BUTTONS: dict[int, MouseButton] = {
    0: MouseButton.LEFT,
    1: MouseButton.MIDDLE,
    2: MouseButton.RIGHT,
}

_WHEEL_KINDS: dict[int, MouseEventKind] = {
    0: MouseEventKind.SCROLL_UP,
    1: MouseEventKind.SCROLL_DOWN,
    2: MouseEventKind.SCROLL_LEFT,
    3: MouseEventKind.SCROLL_RIGHT,
}

_SHIFT_BIT = 4
_ALT_BIT = 8
_CTRL_BIT = 16
_MOTION_BIT = 32
_WHEEL_BIT = 64


def is_mouse_sequence(data: str) -> bool:
    return data.startswith("\x1b[<") or (data.startswith(_X10_PREFIX) and len(data) == 6)


def _decode(code: int, column: int, row: int, released: bool) -> MouseEvent:
    modifiers = KeyModifiers.NONE
    if code & _SHIFT_BIT:
        modifiers |= KeyModifiers.SHIFT
    if code & _ALT_BIT:
        modifiers |= KeyModifiers.ALT
    if code & _CTRL_BIT:
        modifiers |= KeyModifiers.CONTROL

    low = code & 0b11
    button = _BUTTONS.get(low)

    if code & _WHEEL_BIT:
        return MouseEvent(_WHEEL_KINDS[low], column, row, None, modifiers)
    if code & _MOTION_BIT:
        kind = MouseEventKind.DRAG if button is not None else MouseEventKind.MOVED
        return MouseEvent(kind, column, row, button, modifiers)
    if released or button is None:
        # X10 reports every release as button 3
        return MouseEvent(MouseEventKind.UP, column, row, button, modifiers)
    return MouseEvent(MouseEventKind.DOWN, column, row, button, modifiers)


def parse_mouse_event(data: str) -> MouseEvent | None:
    """Decode a single mouse report, or return ``None`` if *data* is not one."""
    m = _SGR_MOUSE_RE.match(data)
    if m:
        code = int(m.group(1))
        column = max(int(m.group(2)) - 1, 0)
        row = max(int(m.group(3)) - 1, 0)
        return _decode(code, column, row, released=m.group(4) == "m")

    if data.startswith(_X10_PREFIX) and len(data) == 6:
        code, x, y = (ord(ch) - 32 for ch in data[3:])
        if code < 0:
            return None
        return _decode(code, max(x - 1, 0), max(y - 1, 0), released=False)

    return None
