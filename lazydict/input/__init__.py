"""Input-layer public API: key decoding, semantic events, and routing.

Exports are split between low-level terminal decoding (`read_key`), the
token-to-event translation (`decode_key`), and the event router used by the
runtime loop.
"""

from .events import (
    Backspace,
    Copy,
    InputEvent,
    KeyDown,
    KeyUp,
    MouseClick,
    MouseWheel,
    NextDictionary,
    PageDown,
    PageUp,
    PrevDictionary,
    Quit,
    Submit,
    TextChar,
    WheelDirection,
    decode_key,
)
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key
from .router import InputRouter, InputRouterCallbacks

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "decode_key",
    "InputEvent",
    "TextChar",
    "Backspace",
    "Submit",
    "KeyDown",
    "KeyUp",
    "PageDown",
    "PageUp",
    "MouseWheel",
    "MouseClick",
    "NextDictionary",
    "PrevDictionary",
    "Copy",
    "Quit",
    "WheelDirection",
    "InputRouter",
    "InputRouterCallbacks",
]
