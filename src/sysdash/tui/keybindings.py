"""Scroll keybindings manager."""

from __future__ import annotations

from typing import Iterator, Literal, get_args

from sysdash.tui.event import KeyEvent
from sysdash.tui.keys import key_id

ScrollAction = Literal[
    "scrollDown",
    "scrollUp",
    "jumpTop",
    "jumpBottom",
]

SCROLL_ACTIONS: tuple[ScrollAction, ...] = get_args(ScrollAction)

# A binding is a key id, or several key ids separated by spaces for a chord.
KeyBinding = str

ScrollKeybindingsConfig = dict[ScrollAction, KeyBinding | list[KeyBinding]]

DEFAULT_SCROLL_KEYBINDINGS: dict[ScrollAction, KeyBinding | list[KeyBinding]] = {
    "scrollDown": ["down", "j"],
    "scrollUp": ["up", "k"],
    "jumpTop": "g g",
    "jumpBottom": "G",
}


def is_chord(binding: KeyBinding) -> bool:
    return len(binding.split()) > 1


class ScrollKeybindingsManager:
    """Maps key ids and chords to scroll actions."""

    def __init__(self, config: ScrollKeybindingsConfig | None = None) -> None:
        self._action_to_keys: dict[ScrollAction, list[KeyBinding]] = {}
        self._key_to_action: dict[str, ScrollAction] = {}
        self._build_maps(config or {})

    def _build_maps(self, config: ScrollKeybindingsConfig) -> None:
        self._action_to_keys.clear()
        self._key_to_action.clear()

        for source in (DEFAULT_SCROLL_KEYBINDINGS, config):
            for action, keys in source.items():
                key_array = keys if isinstance(keys, list) else [keys]
                self._action_to_keys[action] = [" ".join(k.split()) for k in key_array]

        for action, keys in self._action_to_keys.items():
            for key in keys:
                if not is_chord(key):
                    self._key_to_action[key] = action

    def action_for(self, key: str | KeyEvent) -> ScrollAction | None:
        """Return the action bound to a single key, if any."""
        if isinstance(key, KeyEvent):
            key = key_id(key)
        return self._key_to_action.get(key)

    def chords(self) -> Iterator[tuple[ScrollAction, list[str]]]:
        """Yield ``(action, key ids)`` for every multi-key binding."""
        for action, keys in self._action_to_keys.items():
            for key in keys:
                if is_chord(key):
                    yield action, key.split()

    def get_keys(self, action: ScrollAction) -> list[KeyBinding]:
        """Get bindings for an action."""
        return self._action_to_keys.get(action, [])

    def set_config(self, config: ScrollKeybindingsConfig) -> None:
        """Update configuration."""
        self._build_maps(config)


_global_scroll_keybindings: ScrollKeybindingsManager | None = None


def get_scroll_keybindings() -> ScrollKeybindingsManager:
    global _global_scroll_keybindings
    if _global_scroll_keybindings is None:
        _global_scroll_keybindings = ScrollKeybindingsManager()
    return _global_scroll_keybindings


def set_scroll_keybindings(manager: ScrollKeybindingsManager) -> None:
    global _global_scroll_keybindings
    _global_scroll_keybindings = manager
