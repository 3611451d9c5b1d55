"""Screen rectangles."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """A rectangle of terminal cells.

    Instances are frozen and compare by value, so a component's bounds can
    be handed straight to ``ViewportWindow.get_window_start`` as the
    geometry token.
    """

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def contains(self, column: int, row: int) -> bool:
        """Return ``True`` if the cell at (*column*, *row*) lies inside."""
        return self.left <= column < self.right and self.top <= row < self.bottom
