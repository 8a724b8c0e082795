"""Screen-rectangle hit testing for mouse-to-row mapping."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ViewportGeometry:
    """On-screen rectangle in 1-based terminal cell coordinates.

    Bounds are inclusive on both ends, so the hit area extends one cell past
    ``width`` and ``height``. Clicks on the trailing border still register.
    """

    origin_x: int
    origin_y: int
    width: int
    height: int

    def contains(self, x: int, y: int) -> bool:
        return (
            self.origin_x <= x <= self.origin_x + self.width
            and self.origin_y <= y <= self.origin_y + self.height
        )

    def row_offset(self, y: int) -> int:
        return y - self.origin_y


EMPTY_VIEWPORT = ViewportGeometry(origin_x=0, origin_y=0, width=0, height=0)
