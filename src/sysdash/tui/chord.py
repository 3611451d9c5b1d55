"""Detection of multi-key shortcuts such as ``gg``."""

from __future__ import annotations

from enum import Enum
from typing import Sequence


class ChordResult(Enum):
    ACCEPTED = "accepted"
    COMPLETED = "completed"
    REJECTED = "rejected"


class ChordMatcher:
    """Matches an ordered sequence of key symbols typed one at a time.

    A partially typed chord is kept until it is completed or broken; there
    is no timeout. A symbol that breaks the chord but equals its first
    symbol restarts it instead of rejecting.
    """

    def __init__(self, sequence: Sequence[str]) -> None:
        if not sequence:
            raise ValueError("A chord needs at least one key")
        self._sequence = tuple(sequence)
        self._progress = 0

    @property
    def sequence(self) -> tuple[str, ...]:
        return self._sequence

    @property
    def progress(self) -> int:
        """Number of symbols matched so far."""
        return self._progress

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._sequence

    def reset(self) -> None:
        self._progress = 0

    def input(self, symbol: str) -> ChordResult:
        if symbol == self._sequence[self._progress]:
            self._progress += 1
            if self._progress == len(self._sequence):
                self._progress = 0
                return ChordResult.COMPLETED
            return ChordResult.ACCEPTED

        if symbol == self._sequence[0]:
            self._progress = 1
            return ChordResult.ACCEPTED

        self._progress = 0
        return ChordResult.REJECTED
