"""Display-width aware text measurement and line shaping utilities.

Provides clipping and word wrapping measured in terminal cells.
These helpers keep box borders aligned when wide characters are present.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return display width of ``text`` ignoring ANSI escape sequences."""
    plain = ANSI_ESCAPE_RE.sub("", text)
    col = 0
    for ch in plain:
        col += char_display_width(ch, col)
    return col


def clip_text(text: str, max_cols: int) -> str:
    """Trim plain ``text`` to at most ``max_cols`` display columns.

    Tabs are expanded into spaces so clipping aligns with rendered cells.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch, col)
        if col + w > max_cols:
            break
        out.append(" " * w if ch == "\t" else ch)
        col += w
    return "".join(out)


def _split_long_word(word: str, width: int) -> list[str]:
    pieces: list[str] = []
    chunk: list[str] = []
    col = 0
    for ch in word:
        w = char_display_width(ch, col)
        if col + w > width and chunk:
            pieces.append("".join(chunk))
            chunk = []
            col = 0
        chunk.append(ch)
        col += w
    if chunk:
        pieces.append("".join(chunk))
    return pieces


def wrap_text(text: str, width: int) -> list[str]:
    """Word-wrap plain ``text`` into rows of at most ``width`` columns.

    Existing newlines always start a new row. Words wider than ``width`` are
    broken at the column limit.
    """
    if width <= 0:
        return []

    rows: list[str] = []
    for paragraph in text.expandtabs(TAB_STOP).split("\n"):
        current = ""
        current_width = 0
        for word in paragraph.split(" "):
            word_width = display_width(word)
            if current and current_width + 1 + word_width <= width:
                current += " " + word
                current_width += 1 + word_width
                continue
            if current or current_width:
                rows.append(current)
            if word_width > width:
                pieces = _split_long_word(word, width)
                rows.extend(pieces[:-1])
                current = pieces[-1]
            else:
                current = word
            current_width = display_width(current)
        rows.append(current)
    return rows
