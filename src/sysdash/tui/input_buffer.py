"""Splitting of raw stdin chunks into complete input sequences.

Terminal reads can end in the middle of an escape sequence (a mouse report
arriving over two reads, for example). ``InputBuffer`` holds such partial
data until the rest arrives, so a half-read sequence is never decoded as
separate keypresses. A lone trailing ESC stays buffered until ``flush`` is
called; the host decides when it has waited long enough.
"""

from __future__ import annotations

from typing import Callable, Literal

ESC = "\x1b"
BRACKETED_PASTE_START = "\x1b[200~"
BRACKETED_PASTE_END = "\x1b[201~"

SequenceStatus = Literal["complete", "incomplete", "not-escape"]


def sequence_status(data: str) -> SequenceStatus:
    """Classify *data* as a complete escape sequence, a prefix of one, or plain text."""
    if not data.startswith(ESC):
        return "not-escape"
    if len(data) == 1:
        return "incomplete"

    introducer = data[1]
    if introducer == "[":
        return _csi_status(data)
    if introducer in "]P_":
        # OSC / DCS / APC run until the string terminator
        if data.endswith(f"{ESC}\\") or (introducer == "]" and data.endswith("\x07")):
            return "complete"
        return "incomplete"
    if introducer == "O":
        return "complete" if len(data) >= 3 else "incomplete"
    # ESC + one character: alt-modified key
    return "complete"


def _csi_status(data: str) -> SequenceStatus:
    if len(data) < 3:
        return "incomplete"

    payload = data[2:]
    if payload.startswith("M"):
        # X10 mouse: three raw bytes follow
        return "complete" if len(data) >= 6 else "incomplete"
    # SGR mouse reports included: the first final byte ends the sequence
    if 0x40 <= ord(payload[-1]) <= 0x7E:
        return "complete"
    return "incomplete"


def split_sequences(buffer: str) -> tuple[list[str], str]:
    """Split *buffer* into complete sequences and an incomplete remainder."""
    sequences: list[str] = []
    pos = 0

    while pos < len(buffer):
        if buffer[pos] != ESC:
            sequences.append(buffer[pos])
            pos += 1
            continue

        end = pos + 1
        while True:
            if end > len(buffer):
                return sequences, buffer[pos:]
            status = sequence_status(buffer[pos:end])
            if status == "incomplete":
                end += 1
                continue
            sequences.append(buffer[pos:end])
            pos = end
            break

    return sequences, ""


class InputBuffer:
    """Accumulates raw input and emits one complete sequence at a time."""

    def __init__(self) -> None:
        self._buffer = ""
        self._paste_buffer: str | None = None

        self._on_data: Callable[[str], None] | None = None
        self._on_paste: Callable[[str], None] | None = None

    def on_data(self, callback: Callable[[str], None]) -> None:
        """Set callback for complete sequences."""
        self._on_data = callback

    def on_paste(self, callback: Callable[[str], None]) -> None:
        """Set callback for bracketed-paste content."""
        self._on_paste = callback

    @property
    def pending(self) -> str:
        """Buffered data that does not yet form a complete sequence."""
        return self._buffer

    def process(self, data: str) -> None:
        """Feed a chunk of raw input."""
        self._buffer += data

        while self._buffer:
            if self._paste_buffer is not None:
                pasted = self._paste_buffer + self._buffer
                end = pasted.find(BRACKETED_PASTE_END)
                if end == -1:
                    self._paste_buffer = pasted
                    self._buffer = ""
                    return
                self._buffer = pasted[end + len(BRACKETED_PASTE_END):]
                pasted = pasted[:end]
                self._paste_buffer = None
                if self._on_paste:
                    self._on_paste(pasted)
                continue

            start = self._buffer.find(BRACKETED_PASTE_START)
            head = self._buffer if start == -1 else self._buffer[:start]
            sequences, remainder = split_sequences(head)
            if start != -1 and remainder:
                # a partial sequence cut short by a paste never completes
                sequences.append(remainder)
            for sequence in sequences:
                if self._on_data:
                    self._on_data(sequence)

            if start == -1:
                self._buffer = remainder
                return
            self._buffer = self._buffer[start + len(BRACKETED_PASTE_START):]
            self._paste_buffer = ""

    def flush(self) -> list[str]:
        """Give up waiting for the rest of a partial sequence and return it."""
        if not self._buffer:
            return []
        sequences = [self._buffer]
        self._buffer = ""
        return sequences

    def clear(self) -> None:
        self._buffer = ""
        self._paste_buffer = None
