"""sysdash-tui: scrolling and selection engine for dashboard list panels."""

# Chorded shortcuts
from sysdash.tui.chord import ChordMatcher, ChordResult

# Components
from sysdash.tui.component import Component, does_intersect_mouse
from sysdash.tui.components import ScrollList, ScrollListTheme

# Keybinding configuration
from sysdash.tui.config import (
    load_keybindings,
    load_keybindings_config,
    save_keybindings_config,
)

# Events
from sysdash.tui.event import (
    EventResult,
    KeyEvent,
    KeyModifiers,
    MouseButton,
    MouseEvent,
    MouseEventKind,
)
from sysdash.tui.geometry import Rect

# Input buffering
from sysdash.tui.input_buffer import InputBuffer

# Keybindings
from sysdash.tui.keybindings import (
    DEFAULT_SCROLL_KEYBINDINGS,
    ScrollAction,
    ScrollKeybindingsManager,
    get_scroll_keybindings,
    set_scroll_keybindings,
)

# Input decoding
from sysdash.tui.keys import key_id, parse_key_event
from sysdash.tui.mouse import parse_mouse_event

# Scroll engine
from sysdash.tui.router import InputRouter
from sysdash.tui.scrollable import Scrollable
from sysdash.tui.selection import ScrollDirection, SelectionState
from sysdash.tui.viewport import ViewportWindow

# Utilities
from sysdash.tui.utils import truncate_to_width, visible_width

__all__ = [
    # Chords
    "ChordMatcher",
    "ChordResult",
    # Components
    "Component",
    "does_intersect_mouse",
    "ScrollList",
    "ScrollListTheme",
    # Config
    "load_keybindings",
    "load_keybindings_config",
    "save_keybindings_config",
    # Events
    "EventResult",
    "KeyEvent",
    "KeyModifiers",
    "MouseButton",
    "MouseEvent",
    "MouseEventKind",
    "Rect",
    # Input buffer
    "InputBuffer",
    # Keybindings
    "DEFAULT_SCROLL_KEYBINDINGS",
    "ScrollAction",
    "ScrollKeybindingsManager",
    "get_scroll_keybindings",
    "set_scroll_keybindings",
    # Decoding
    "key_id",
    "parse_key_event",
    "parse_mouse_event",
    # Scroll engine
    "InputRouter",
    "Scrollable",
    "ScrollDirection",
    "SelectionState",
    "ViewportWindow",
    # Utilities
    "truncate_to_width",
    "visible_width",
]
