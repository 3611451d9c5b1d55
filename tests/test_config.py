"""Tests for sysdash.tui.config -- keybinding overrides on disk."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from sysdash.tui.config import (
    get_keybindings_path,
    load_keybindings,
    load_keybindings_config,
    save_keybindings_config,
)


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("SYSDASH_CONFIG_DIR", str(tmp_path))
    return tmp_path


class TestPaths:
    def test_env_override(self, config_dir: Path) -> None:
        assert get_keybindings_path() == config_dir / "keybindings.json"

    def test_default_under_home(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SYSDASH_CONFIG_DIR", raising=False)
        assert get_keybindings_path() == Path.home() / ".sysdash" / "keybindings.json"


class TestLoad:
    def test_missing_file(self, config_dir: Path) -> None:
        assert load_keybindings_config() == {}

    def test_valid_file(self, config_dir: Path) -> None:
        (config_dir / "keybindings.json").write_text(
            json.dumps({"scrollDown": ["down", "n"], "jumpTop": "t t"})
        )
        assert load_keybindings_config() == {
            "scrollDown": ["down", "n"],
            "jumpTop": "t t",
        }

    def test_invalid_json_logged(
        self, config_dir: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        (config_dir / "keybindings.json").write_text("{not json")
        with caplog.at_level(logging.WARNING, logger="sysdash.tui.config"):
            assert load_keybindings_config() == {}
        assert "Error reading keybindings" in caplog.text

    def test_non_object_ignored(self, config_dir: Path) -> None:
        (config_dir / "keybindings.json").write_text("[1, 2]")
        assert load_keybindings_config() == {}

    def test_unknown_and_invalid_entries_skipped(
        self, config_dir: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        (config_dir / "keybindings.json").write_text(
            json.dumps({"explode": "x", "scrollUp": 7, "jumpBottom": "E"})
        )
        with caplog.at_level(logging.WARNING, logger="sysdash.tui.config"):
            assert load_keybindings_config() == {"jumpBottom": "E"}
        assert "explode" in caplog.text

    def test_explicit_path(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"scrollUp": "p"}))
        assert load_keybindings_config(path) == {"scrollUp": "p"}


class TestSaveAndManager:
    def test_save_then_load(self, config_dir: Path) -> None:
        save_keybindings_config({"jumpBottom": "e"})
        assert json.loads((config_dir / "keybindings.json").read_text()) == {
            "jumpBottom": "e"
        }
        kb = load_keybindings()
        assert kb.action_for("e") == "jumpBottom"
        assert kb.action_for("j") == "scrollDown"

    def test_save_creates_directory(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "dir" / "keybindings.json"
        save_keybindings_config({"scrollUp": "p"}, path)
        assert path.exists()
