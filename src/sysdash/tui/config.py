"""User keybinding overrides, stored at ~/.sysdash/keybindings.json."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from sysdash.tui.keybindings import (
    SCROLL_ACTIONS,
    ScrollKeybindingsConfig,
    ScrollKeybindingsManager,
)

logger = logging.getLogger(__name__)

KEYBINDINGS_FILE = "keybindings.json"


def get_config_dir() -> Path:
    return Path(os.environ.get("SYSDASH_CONFIG_DIR", Path.home() / ".sysdash"))


def get_keybindings_path() -> Path:
    return get_config_dir() / KEYBINDINGS_FILE


def _valid_binding(value: object) -> bool:
    if isinstance(value, str):
        return bool(value.strip())
    return isinstance(value, list) and all(
        isinstance(v, str) and v.strip() for v in value
    )


def load_keybindings_config(path: Path | None = None) -> ScrollKeybindingsConfig:
    """Read keybinding overrides. Problems are logged and yield no overrides."""
    config_path = path or get_keybindings_path()
    if not config_path.exists():
        return {}
    try:
        data = json.loads(config_path.read_text())
    except (OSError, ValueError) as e:
        logger.warning("Error reading keybindings from %s: %s", config_path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring %s: expected a JSON object", config_path)
        return {}

    config: ScrollKeybindingsConfig = {}
    for action, binding in data.items():
        if action not in SCROLL_ACTIONS:
            logger.warning("Ignoring unknown scroll action %r in %s", action, config_path)
            continue
        if not _valid_binding(binding):
            logger.warning("Ignoring invalid binding for %s: %r", action, binding)
            continue
        config[action] = binding
    return config


def save_keybindings_config(config: ScrollKeybindingsConfig, path: Path | None = None) -> None:
    config_path = path or get_keybindings_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(json.dumps(config, indent=2))


def load_keybindings(path: Path | None = None) -> ScrollKeybindingsManager:
    """Build a keybindings manager from the defaults plus the user's overrides."""
    return ScrollKeybindingsManager(load_keybindings_config(path))
