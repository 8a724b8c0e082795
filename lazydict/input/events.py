"""Semantic input events produced from decoded key tokens.

The set of event types is closed: ``InputEvent`` lists every variant the
router must handle.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


class WheelDirection(enum.Enum):
    UP = -1
    DOWN = 1


@dataclass(frozen=True)
class TextChar:
    char: str


@dataclass(frozen=True)
class Backspace:
    pass


@dataclass(frozen=True)
class Submit:
    pass


@dataclass(frozen=True)
class KeyDown:
    pass


@dataclass(frozen=True)
class KeyUp:
    pass


@dataclass(frozen=True)
class PageDown:
    pass


@dataclass(frozen=True)
class PageUp:
    pass


@dataclass(frozen=True)
class MouseWheel:
    direction: WheelDirection


@dataclass(frozen=True)
class MouseClick:
    x: int
    y: int


@dataclass(frozen=True)
class NextDictionary:
    pass


@dataclass(frozen=True)
class PrevDictionary:
    pass


@dataclass(frozen=True)
class Copy:
    pass


@dataclass(frozen=True)
class Quit:
    pass


InputEvent = Union[
    TextChar,
    Backspace,
    Submit,
    KeyDown,
    KeyUp,
    PageDown,
    PageUp,
    MouseWheel,
    MouseClick,
    NextDictionary,
    PrevDictionary,
    Copy,
    Quit,
]


def parse_mouse_col_row(mouse_key: str) -> tuple[int | None, int | None]:
    """Parse ``MOUSE_*:col:row`` key tokens into integer coordinates."""
    parts = mouse_key.split(":")
    if len(parts) < 3:
        return None, None
    try:
        return int(parts[1]), int(parts[2])
    except ValueError:
        return None, None


_KEY_EVENTS: dict[str, InputEvent] = {
    "ENTER": Submit(),
    "BACKSPACE": Backspace(),
    "DOWN": KeyDown(),
    "UP": KeyUp(),
    "PAGE_DOWN": PageDown(),
    "PAGE_UP": PageUp(),
    "RIGHT": NextDictionary(),
    "LEFT": PrevDictionary(),
    "CTRL_Y": Copy(),
    "CTRL_C": Quit(),
}


def decode_key(key: str) -> InputEvent | None:
    """Translate one reader token into a semantic event.

    Tokens with no browser meaning (``ESC``, right clicks, button releases)
    yield ``None``.
    """
    event = _KEY_EVENTS.get(key)
    if event is not None:
        return event

    if key.startswith("MOUSE_WHEEL_UP:"):
        return MouseWheel(WheelDirection.UP)
    if key.startswith("MOUSE_WHEEL_DOWN:"):
        return MouseWheel(WheelDirection.DOWN)
    if key.startswith("MOUSE_LEFT_DOWN:"):
        col, row = parse_mouse_col_row(key)
        if col is None or row is None:
            return None
        return MouseClick(col, row)

    if len(key) == 1 and key.isprintable():
        return TextChar(key)
    return None
