"""ScrollList component: a plain text list driven by ``Scrollable``."""

from __future__ import annotations

from typing import Callable, Protocol

from sysdash.tui.event import EventResult
from sysdash.tui.keybindings import ScrollKeybindingsManager
from sysdash.tui.scrollable import Scrollable
from sysdash.tui.utils import truncate_to_width


class ScrollListTheme(Protocol):
    selected_text: Callable[[str], str]
    scroll_info: Callable[[str], str]
    no_match: Callable[[str], str]


class ScrollList:
    """A list of labels with a highlighted selection and minimal-motion scrolling."""

    def __init__(
        self,
        labels: list[str],
        max_visible: int,
        theme: ScrollListTheme,
        keybindings: ScrollKeybindingsManager | None = None,
    ) -> None:
        self._labels = list(labels)
        self._max_visible = max_visible
        self._theme = theme
        self.scrollable = Scrollable(len(self._labels), keybindings)

    def set_labels(self, labels: list[str]) -> None:
        self._labels = list(labels)
        self.scrollable.update_num_items(len(self._labels))

    def get_selected_label(self) -> str | None:
        if not self._labels:
            return None
        return self._labels[self.scrollable.index()]

    def handle_input(self, data: str) -> EventResult:
        return self.scrollable.handle_input(data)

    def render(self, width: int) -> list[str]:
        if not self._labels:
            return [self._theme.no_match("  No items")]

        start_index = self.scrollable.get_list_start(self._max_visible)
        end_index = min(start_index + self._max_visible, len(self._labels))
        selected_row = self.scrollable.selected_row()

        lines: list[str] = []
        for row, label in enumerate(self._labels[start_index:end_index]):
            if row == selected_row:
                lines.append(
                    self._theme.selected_text(truncate_to_width(f"→ {label}", width, ""))
                )
            else:
                lines.append(truncate_to_width(f"  {label}", width, ""))

        if start_index > 0 or end_index < len(self._labels):
            scroll_text = f"  ({self.scrollable.index() + 1}/{len(self._labels)})"
            lines.append(self._theme.scroll_info(truncate_to_width(scroll_text, width, "")))

        return lines
