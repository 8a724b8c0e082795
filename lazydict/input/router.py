"""Dispatch of semantic input events onto navigation operations."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

from ..geometry import ViewportGeometry
from ..navigation import Direction, NavigationState
from ..store import StoreLookupFailure, StoreOpenFailure
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
)

DEFAULT_PAGE_STEP = 10
STATUS_MESSAGE_SECONDS = 3.0


@dataclass(frozen=True)
class InputRouterCallbacks:
    """Collaborators the router needs beyond the navigation state."""

    index_viewport: Callable[[], ViewportGeometry]
    copy_text_to_clipboard: Callable[[str], bool]
    monotonic: Callable[[], float] = time.monotonic


class InputRouter:
    """Map each event to exactly one ``NavigationState`` operation."""

    def __init__(
        self,
        state: NavigationState,
        callbacks: InputRouterCallbacks,
        page_step: int = DEFAULT_PAGE_STEP,
        status_seconds: float = STATUS_MESSAGE_SECONDS,
    ) -> None:
        self.state = state
        self.callbacks = callbacks
        self.page_step = max(1, page_step)
        self.status_seconds = status_seconds

    def _status(self, message: str) -> None:
        self.state.set_status(message, self.callbacks.monotonic(), self.status_seconds)

    def _switch(self, direction: Direction) -> None:
        state = self.state
        count = len(state.catalog)
        if count == 0:
            return
        target_name = state.catalog.names[(state.active_dictionary + direction.value) % count]
        try:
            state.switch_dictionary(direction)
        except StoreOpenFailure as exc:
            self._status(f"cannot open dictionary {target_name}: {exc.reason}")

    def _copy_definition(self) -> None:
        if not self.state.definition:
            self._status("nothing to copy")
            return
        if self.callbacks.copy_text_to_clipboard(self.state.definition):
            self._status("copied definition")
        else:
            self._status("clipboard unavailable")

    def _click(self, event: MouseClick) -> None:
        viewport = self.callbacks.index_viewport()
        if viewport.contains(event.x, event.y):
            self.state.select_at(viewport.row_offset(event.y), viewport.height)

    def route(self, event: InputEvent) -> bool:
        """Apply ``event`` and return ``True`` when the browser should quit."""
        try:
            return self._dispatch(event)
        except StoreLookupFailure as exc:
            self._status(f"lookup failed: {exc}")
            return False

    def _dispatch(self, event: InputEvent) -> bool:
        state = self.state
        if isinstance(event, TextChar):
            state.push_char(event.char)
        elif isinstance(event, Submit):
            state.submit_query()
        elif isinstance(event, Backspace):
            state.pop_char()
        elif isinstance(event, KeyDown):
            state.move_by(1)
        elif isinstance(event, KeyUp):
            state.move_by(-1)
        elif isinstance(event, MouseWheel):
            state.move_by(event.direction.value)
        elif isinstance(event, PageDown):
            state.move_by(self.page_step)
        elif isinstance(event, PageUp):
            state.move_by(-self.page_step)
        elif isinstance(event, MouseClick):
            self._click(event)
        elif isinstance(event, NextDictionary):
            self._switch(Direction.NEXT)
        elif isinstance(event, PrevDictionary):
            self._switch(Direction.PREV)
        elif isinstance(event, Copy):
            self._copy_definition()
        elif isinstance(event, Quit):
            return True
        else:
            raise TypeError(f"unhandled input event: {event!r}")
        return False
