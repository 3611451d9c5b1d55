"""Tests for sysdash.tui.utils -- terminal text width helpers."""

from __future__ import annotations

from sysdash.tui.utils import truncate_to_width, visible_width


# ---------------------------------------------------------------------------
# visible_width
# ---------------------------------------------------------------------------


class TestVisibleWidth:
    def test_plain_ascii(self) -> None:
        assert visible_width("sshd") == 4

    def test_empty_string(self) -> None:
        assert visible_width("") == 0

    def test_ansi_codes_do_not_count(self) -> None:
        assert visible_width("\x1b[1m\x1b[31mcpu\x1b[0m") == 3

    def test_wide_cjk_characters_count_as_two(self) -> None:
        assert visible_width("A世B") == 4

    def test_combining_mark_is_zero_width(self) -> None:
        # "e" + combining acute accent
        assert visible_width("e\u0301") == 1

    def test_tab_counts_as_three_spaces(self) -> None:
        assert visible_width("\t") == 3


# ---------------------------------------------------------------------------
# truncate_to_width
# ---------------------------------------------------------------------------


class TestTruncateToWidth:
    def test_fits(self) -> None:
        assert truncate_to_width("htop", 10) == "htop"

    def test_truncates_with_ellipsis(self) -> None:
        assert truncate_to_width("kworker/0:1H", 8) == "kwork..."

    def test_custom_ellipsis(self) -> None:
        assert truncate_to_width("kworker/0:1H", 8, "") == "kworker/"

    def test_zero_width(self) -> None:
        assert truncate_to_width("anything", 0) == ""

    def test_pad(self) -> None:
        assert truncate_to_width("ab", 5, pad=True) == "ab   "

    def test_does_not_split_wide_character(self) -> None:
        # Each CJK character is two columns; 5 columns fit two of them.
        assert truncate_to_width("世世世", 5, "") == "世世"

    def test_keeps_ansi_codes(self) -> None:
        result = truncate_to_width("\x1b[31mprocess\x1b[0m", 4, "")
        assert result.startswith("\x1b[31mproc")
        assert visible_width(result) == 4
