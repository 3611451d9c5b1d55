"""Reusable components built on the scroll engine."""

from sysdash.tui.components.scroll_list import ScrollList, ScrollListTheme

__all__ = [
    "ScrollList",
    "ScrollListTheme",
]
