"""Keyboard input decoding for terminal panels.

Turns one complete raw terminal sequence (as split off by
``sysdash.tui.input_buffer``) into a ``KeyEvent``. Handles plain legacy
sequences, xterm-style modified sequences (``ESC [ 1 ; <mod> A``), the
kitty keyboard protocol's ``CSI u`` form, control characters and
ESC-prefixed alt keys.

``key_id`` gives the string naming used by keybindings: single characters
are named by themselves (shift is implied by case) and named keys carry
``ctrl+``/``shift+``/``alt+`` prefixes, e.g. ``"shift+down"``.
"""

from __future__ import annotations

import re

from sysdash.tui.event import KeyEvent, KeyEventKind, KeyModifiers

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# xterm/kitty modifier parameter is 1 + bitmask
MODIFIER_BITS: dict[int, KeyModifiers] = {
    1: KeyModifiers.SHIFT,
    2: KeyModifiers.ALT,
    4: KeyModifiers.CONTROL,
}

# Caps lock / num lock bits reported by kitty
LOCK_MASK = 64 + 128

EVENT_KINDS: dict[int, KeyEventKind] = {
    1: "press",
    2: "repeat",
    3: "release",
}

LEGACY_KEY_SEQUENCES: dict[str, str] = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1b[H": "home",
    "\x1b[F": "end",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
    "\x1bOH": "home",
    "\x1bOF": "end",
    "\x1bOP": "f1",
    "\x1bOQ": "f2",
    "\x1bOR": "f3",
    "\x1bOS": "f4",
    "\x1b[E": "clear",
}

# Final byte of ``CSI 1 ; <mod> X`` / ``CSI X`` -> key name
_LETTER_KEYS: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
    "H": "home",
    "F": "end",
    "P": "f1",
    "Q": "f2",
    "R": "f3",
    "S": "f4",
}

# Number of ``CSI <n> ~`` -> key name
_TILDE_KEYS: dict[int, str] = {
    1: "home",
    2: "insert",
    3: "delete",
    4: "end",
    5: "pageUp",
    6: "pageDown",
    15: "f5",
    17: "f6",
    18: "f7",
    19: "f8",
    20: "f9",
    21: "f10",
    23: "f11",
    24: "f12",
}

# Named codepoints in kitty ``CSI u`` sequences
_KITTY_CODEPOINT_KEYS: dict[int, str] = {
    9: "tab",
    13: "enter",
    27: "escape",
    32: "space",
    127: "backspace",
    57414: "enter",  # keypad enter
}

_CSI_LETTER_RE = re.compile(r"\x1b\[(?:1;(\d+)(?::(\d+))?)?([ABCDHFPQRS])$")
_CSI_TILDE_RE = re.compile(r"\x1b\[(\d+)(?:;(\d+)(?::(\d+))?)?~$")
_KITTY_CSI_U_RE = re.compile(
    r"\x1b\[(\d+)(?::(\d*)(?::(\d+))?)?(?:;(\d+)(?::(\d+))?)?u$"
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def decode_modifiers(param: int) -> KeyModifiers:
    """Decode an xterm/kitty modifier parameter (``1 + bitmask``)."""
    mask = (param - 1) & ~LOCK_MASK
    modifiers = KeyModifiers.NONE
    for bit, flag in MODIFIER_BITS.items():
        if mask & bit:
            modifiers |= flag
    return modifiers


def _event_kind(param: str | None) -> KeyEventKind:
    if not param:
        return "press"
    return EVENT_KINDS.get(int(param), "press")


def _char_event(ch: str, modifiers: KeyModifiers, kind: KeyEventKind = "press") -> KeyEvent:
    # Letters carry their case; shift on a letter always means uppercase.
    if ch.isalpha():
        if KeyModifiers.SHIFT in modifiers:
            ch = ch.upper()
        elif ch.isupper():
            modifiers |= KeyModifiers.SHIFT
    return KeyEvent(ch, modifiers, kind)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def parse_key_event(data: str) -> KeyEvent | None:  # noqa: C901
    """Decode one raw terminal sequence into a ``KeyEvent``.

    Returns ``None`` for data that is not a recognised key (including mouse
    reports and bracketed-paste markers).
    """
    if not data:
        return None

    # --- Kitty CSI u ---
    m = _KITTY_CSI_U_RE.match(data)
    if m:
        codepoint = int(m.group(1))
        shifted = int(m.group(2)) if m.group(2) else None
        modifiers = decode_modifiers(int(m.group(4))) if m.group(4) else KeyModifiers.NONE
        kind = _event_kind(m.group(5))
        name = _KITTY_CODEPOINT_KEYS.get(codepoint)
        if name is not None:
            return KeyEvent(name, modifiers, kind)
        if KeyModifiers.SHIFT in modifiers and shifted:
            codepoint = shifted
        ch = chr(codepoint)
        if not ch.isprintable():
            return None
        return _char_event(ch, modifiers, kind)

    # --- CSI letter forms, optionally modified ---
    m = _CSI_LETTER_RE.match(data)
    if m:
        modifiers = decode_modifiers(int(m.group(1))) if m.group(1) else KeyModifiers.NONE
        return KeyEvent(_LETTER_KEYS[m.group(3)], modifiers, _event_kind(m.group(2)))

    # --- CSI number ~ forms, optionally modified ---
    m = _CSI_TILDE_RE.match(data)
    if m:
        name = _TILDE_KEYS.get(int(m.group(1)))
        if name is None:
            return None
        modifiers = decode_modifiers(int(m.group(2))) if m.group(2) else KeyModifiers.NONE
        return KeyEvent(name, modifiers, _event_kind(m.group(3)))

    if data in LEGACY_KEY_SEQUENCES:
        return KeyEvent(LEGACY_KEY_SEQUENCES[data])
    if data == "\x1b[Z":
        return KeyEvent("tab", KeyModifiers.SHIFT)

    # --- Single bytes ---
    if data == "\x1b":
        return KeyEvent("escape")
    if data in ("\r", "\n"):
        return KeyEvent("enter")
    if data == "\t":
        return KeyEvent("tab")
    if data == " ":
        return KeyEvent("space")
    if data in ("\x7f", "\x08"):
        return KeyEvent("backspace")
    if data == "\x00":
        return KeyEvent("space", KeyModifiers.CONTROL)
    if len(data) == 1 and 1 <= ord(data) <= 26:
        return KeyEvent(chr(ord(data) + ord("a") - 1), KeyModifiers.CONTROL)

    # --- Alt + key (ESC prefix) ---
    if len(data) == 2 and data[0] == "\x1b":
        inner = parse_key_event(data[1])
        if inner is None:
            return None
        return KeyEvent(inner.code, inner.modifiers | KeyModifiers.ALT)

    if len(data) == 1 and data.isprintable():
        return _char_event(data, KeyModifiers.NONE)

    return None


def key_id(event: KeyEvent) -> str:
    """Return the keybinding name of *event*, e.g. ``"j"``, ``"G"``, ``"ctrl+down"``."""
    modifiers = event.modifiers
    if event.is_char and event.code.isalpha():
        # Case already encodes shift
        modifiers &= ~KeyModifiers.SHIFT

    prefix = ""
    if KeyModifiers.CONTROL in modifiers:
        prefix += "ctrl+"
    if KeyModifiers.SHIFT in modifiers:
        prefix += "shift+"
    if KeyModifiers.ALT in modifiers:
        prefix += "alt+"
    return prefix + event.code
