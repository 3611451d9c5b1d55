import pytest

from sysdash.tui.keybindings import ScrollKeybindingsManager, set_scroll_keybindings


@pytest.fixture(autouse=True)
def default_keybindings():
    """Give every test the default process-wide keybindings."""
    set_scroll_keybindings(ScrollKeybindingsManager())
    yield
    set_scroll_keybindings(ScrollKeybindingsManager())
