"""Rendering engine for the dictionary browser screen.

Composes one full ANSI frame from ``NavigationState`` and reports the index
list viewport used for mouse mapping. Rendering never mutates navigation
state.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

from .ansi import char_display_width, clip_text, display_width, wrap_text
from .geometry import ViewportGeometry
from .layout import FrameLayout, Rect, compute_frame_layout
from .navigation import NavigationState, list_scroll_offset
from .store import NOT_FOUND_TEXT
from .ui_theme import UITheme

HELP_MESSAGE = "Press Ctrl+C to leave, Ctrl+Y to copy, Left/Right to change dictionaries"


class Canvas:
    """Fixed-size grid of styled cells."""

    def __init__(self, columns: int, rows: int) -> None:
        self.columns = max(0, columns)
        self.rows = max(0, rows)
        self._chars = [[" "] * self.columns for _ in range(self.rows)]
        self._styles = [[""] * self.columns for _ in range(self.rows)]

    def put(self, x: int, y: int, text: str, style: str = "", max_width: int | None = None) -> int:
        """Write ``text`` at ``(x, y)``; return the number of cells used.

        Wide characters take two cells; the trailing cell holds an empty
        placeholder so row output keeps its width.
        """
        if not (0 <= y < self.rows):
            return 0
        limit = self.columns - x if max_width is None else min(max_width, self.columns - x)
        if limit <= 0 or x < 0:
            return 0
        text = clip_text(text, limit)
        col = x
        for ch in text:
            width = char_display_width(ch, col - x)
            if width == 0:
                continue
            self._chars[y][col] = ch
            self._styles[y][col] = style
            for extra in range(1, width):
                self._chars[y][col + extra] = ""
                self._styles[y][col + extra] = style
            col += width
        return col - x

    def fill(self, x: int, y: int, width: int, style: str) -> None:
        """Apply ``style`` to ``width`` cells starting at ``(x, y)``."""
        if not (0 <= y < self.rows):
            return
        for col in range(max(0, x), min(self.columns, x + width)):
            self._styles[y][col] = style

    def plain_lines(self) -> list[str]:
        return ["".join(row) for row in self._chars]

    def ansi_lines(self, reset: str) -> list[str]:
        lines: list[str] = []
        for chars, styles in zip(self._chars, self._styles):
            out: list[str] = []
            active = ""
            for ch, style in zip(chars, styles):
                if style != active:
                    if active and reset:
                        out.append(reset)
                    if style:
                        out.append(style)
                    active = style
                out.append(ch)
            if active and reset:
                out.append(reset)
            lines.append("".join(out))
        return lines


@dataclass(frozen=True)
class RenderedFrame:
    text: str
    lines: list[str]
    index_viewport: ViewportGeometry


def draw_box(canvas: Canvas, rect: Rect, title: str, theme: UITheme) -> None:
    """Draw a titled single-line border around ``rect``."""
    if rect.width < 2 or rect.height < 2:
        return
    horizontal = "─" * (rect.width - 2)
    canvas.put(rect.x, rect.y, f"┌{horizontal}┐", theme.border)
    for row in range(rect.y + 1, rect.bottom - 1):
        canvas.put(rect.x, row, "│", theme.border)
        canvas.put(rect.right - 1, row, "│", theme.border)
    canvas.put(rect.x, rect.bottom - 1, f"└{horizontal}┘", theme.border)
    if title:
        canvas.put(rect.x + 1, rect.y, title, theme.title, max_width=rect.width - 2)


def _inner(rect: Rect) -> Rect:
    return Rect(rect.x + 1, rect.y + 1, max(0, rect.width - 2), max(0, rect.height - 2))


def draw_list(
    canvas: Canvas,
    rect: Rect,
    items: tuple[str, ...],
    selected: int,
    theme: UITheme,
) -> None:
    """Draw a trailing-scroll list inside ``rect`` highlighting ``selected``."""
    inner = _inner(rect)
    if inner.width <= 0 or inner.height <= 0:
        return
    offset = list_scroll_offset(selected, inner.height)
    for row, item_idx in enumerate(range(offset, min(len(items), offset + inner.height))):
        y = inner.y + row
        is_selected = item_idx == selected
        style = theme.highlight if is_selected else ""
        canvas.put(inner.x, y, items[item_idx], style, max_width=inner.width)
        if is_selected:
            canvas.fill(inner.x, y, inner.width, theme.highlight)


def draw_query(canvas: Canvas, rect: Rect, query: str, theme: UITheme) -> None:
    """Draw the query buffer with a caret, keeping its tail visible."""
    inner = _inner(rect)
    if inner.width <= 0 or inner.height <= 0:
        return
    visible = query
    while visible and display_width(visible) + 1 > inner.width:
        visible = visible[1:]
    used = canvas.put(inner.x, inner.y, visible, theme.query, max_width=inner.width)
    canvas.put(inner.x + used, inner.y, " ", theme.caret, max_width=inner.width - used)


def draw_definition(canvas: Canvas, rect: Rect, definition: str, theme: UITheme) -> None:
    inner = _inner(rect)
    if inner.width <= 0 or inner.height <= 0:
        return
    style = theme.not_found if definition == NOT_FOUND_TEXT else theme.definition
    for row, line in enumerate(wrap_text(definition, inner.width)[: inner.height]):
        canvas.put(inner.x, inner.y + row, line, style, max_width=inner.width)


def render_frame(state: NavigationState, theme: UITheme, columns: int, rows: int) -> RenderedFrame:
    """Compose the full screen for ``state`` at the given terminal size."""
    layout: FrameLayout = compute_frame_layout(columns, rows)
    canvas = Canvas(columns, rows)

    if state.status_message:
        canvas.put(layout.help.x, layout.help.y, state.status_message, theme.status, layout.help.width)
    else:
        canvas.put(layout.help.x, layout.help.y, HELP_MESSAGE, theme.help, layout.help.width)

    draw_box(canvas, layout.word, "Word", theme)
    draw_query(canvas, layout.word, state.query_text, theme)

    draw_box(canvas, layout.dictionaries, "Dictionaries", theme)
    draw_list(canvas, layout.dictionaries, state.catalog.names, state.active_dictionary, theme)

    draw_box(canvas, layout.index, "Index", theme)
    draw_list(canvas, layout.index, state.word_index, state.selection, theme)

    draw_box(canvas, layout.definition, "Definition", theme)
    draw_definition(canvas, layout.definition, state.definition, theme)

    lines = canvas.ansi_lines(theme.reset)
    text = "\033[H\033[J" + "\r\n".join(lines)
    return RenderedFrame(text=text, lines=canvas.plain_lines(), index_viewport=layout.index_viewport())


def write_frame(frame: RenderedFrame, fd: int | None = None) -> None:
    target = sys.stdout.fileno() if fd is None else fd
    os.write(target, frame.text.encode("utf-8", errors="replace"))
