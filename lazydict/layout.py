"""Frame layout for the browser screen.

All rectangles here are 0-based cell rectangles. ``FrameLayout.index_viewport``
converts the index list's interior to the 1-based coordinates mouse reports
use.
"""

from __future__ import annotations

from dataclasses import dataclass

from .geometry import ViewportGeometry

FRAME_MARGIN = 2
HELP_ROWS = 1
WORD_BOX_ROWS = 3
DICTIONARY_BOX_ROWS = 5
INDEX_WIDTH_PERCENT = 30


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def right(self) -> int:
        return self.x + self.width


@dataclass(frozen=True)
class FrameLayout:
    help: Rect
    word: Rect
    dictionaries: Rect
    index: Rect
    definition: Rect

    def index_viewport(self) -> ViewportGeometry:
        """Return the index list's row area in 1-based terminal coordinates.

        Rows start below the top border; the border rows themselves are not
        counted in ``height``.
        """
        return ViewportGeometry(
            origin_x=self.index.x + 1,
            origin_y=self.index.y + 2,
            width=max(0, self.index.width - 1),
            height=max(0, self.index.height - 2),
        )


def _stack_rows(area: Rect, lengths: tuple[int, ...]) -> list[Rect]:
    """Split ``area`` top to bottom; the final rect takes the remaining rows."""
    rects: list[Rect] = []
    y = area.y
    remaining = area.height
    for length in lengths:
        height = min(length, remaining)
        rects.append(Rect(area.x, y, area.width, height))
        y += height
        remaining -= height
    rects.append(Rect(area.x, y, area.width, remaining))
    return rects


def compute_frame_layout(columns: int, rows: int, margin: int = FRAME_MARGIN) -> FrameLayout:
    """Lay out help, word, dictionary, index, and definition regions."""
    inner = Rect(
        margin,
        margin,
        max(0, columns - 2 * margin),
        max(0, rows - 2 * margin),
    )
    help_rect, word_rect, dictionaries_rect, body = _stack_rows(
        inner,
        (HELP_ROWS, WORD_BOX_ROWS, DICTIONARY_BOX_ROWS),
    )
    index_width = body.width * INDEX_WIDTH_PERCENT // 100
    index_rect = Rect(body.x, body.y, index_width, body.height)
    definition_rect = Rect(body.x + index_width, body.y, body.width - index_width, body.height)
    return FrameLayout(
        help=help_rect,
        word=word_rect,
        dictionaries=dictionaries_rect,
        index=index_rect,
        definition=definition_rect,
    )
