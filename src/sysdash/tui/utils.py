"""Terminal text width helpers.

Measures strings in terminal columns (wide CJK and emoji take two,
combining marks and ANSI escapes take none) and truncates them to a
column budget without splitting grapheme clusters.
"""

from __future__ import annotations

import re
import unicodedata

import grapheme
import wcwidth as _wcwidth

# CSI, OSC 8 hyperlinks and APC sequences never take up columns
_STRIP_RE = re.compile(
    r"\x1b\[[0-9;]*[mGKHJ]"
    r"|\x1b\]8;;[^\x07]*\x07"
    r"|\x1b_[^\x07\x1b]*(?:\x07|\x1b\\)"
)

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _grapheme_width(g: str) -> int:
    """Return the column width of one grapheme cluster."""
    if not g:
        return 0

    first = g[0]
    cp = ord(first)
    if cp < 0x20 or 0x7F <= cp <= 0x9F:
        return 0

    if len(g) > 1:
        for ch in g:
            c = ord(ch)
            # VS16, ZWJ, skin tones and flags all render as a wide emoji
            if c in (0xFE0F, 0x200D) or 0x1F3FB <= c <= 0x1F3FF or 0x1F1E6 <= c <= 0x1F1FF:
                return 2
        if unicodedata.category(first) in ("Mn", "Me", "Mc", "Cf"):
            return 0

    return max(_wcwidth.wcwidth(first), 0)


def visible_width(text: str) -> int:
    """Calculate the visible terminal width of *text*. Tabs count as 3 columns."""
    if not text:
        return 0

    stripped = _STRIP_RE.sub("", text).replace("\t", "   ")
    if stripped.isascii() and stripped.isprintable():
        return len(stripped)

    cached = _width_cache.get(stripped)
    if cached is not None:
        return cached

    total = sum(_grapheme_width(g) for g in grapheme.graphemes(stripped))
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[stripped] = total
    return total


def _take_columns(text: str, max_cols: int) -> str:
    """Return the longest prefix of *text* fitting in *max_cols*, keeping ANSI codes."""
    result: list[str] = []
    cols = 0
    pos = 0

    while pos < len(text):
        m = _STRIP_RE.match(text, pos)
        if m:
            result.append(m.group(0))
            pos = m.end()
            continue

        # Measure up to the next escape as whole graphemes
        next_esc = text.find("\x1b", pos + 1)
        chunk = text[pos:] if next_esc == -1 else text[pos:next_esc]
        for g in grapheme.graphemes(chunk):
            w = _grapheme_width(g)
            if cols + w > max_cols:
                return "".join(result)
            result.append(g)
            cols += w
        pos += len(chunk)

    return "".join(result)


def truncate_to_width(
    text: str,
    max_width: int,
    ellipsis: str = "...",
    pad: bool = False,
) -> str:
    """Truncate *text* to fit within *max_width* visible columns.

    The ellipsis counts towards the width. With *pad*, the result is
    right-padded with spaces to exactly *max_width*.
    """
    if max_width <= 0:
        return ""

    text_width = visible_width(text)
    if text_width <= max_width:
        return text + " " * (max_width - text_width) if pad else text

    target_width = max_width - visible_width(ellipsis)
    if target_width <= 0:
        return _take_columns(ellipsis, max_width)

    result = _take_columns(text, target_width) + ellipsis
    if pad:
        result += " " * (max_width - visible_width(result))
    return result
