"""Navigation view-model for the dictionary browser.

``NavigationState`` owns the active store handle, the word index, the
current selection, the query buffer, and the definition on display. Every
public operation leaves ``definition`` consistent with the selection (or with
the last lookup result) before returning.
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from pathlib import Path

from .store import DictionaryCatalog, DictionaryStore, StoreLookupFailure, StoreOpenFailure


class Direction(enum.Enum):
    NEXT = 1
    PREV = -1


def list_scroll_offset(selection: int, viewport_height: int) -> int:
    """Return the first visible row index of a list trailing ``selection``.

    The list stays at the top until the selection moves past one page, then
    keeps the selection on the last visible row.
    """
    if viewport_height <= 0 or selection < viewport_height:
        return 0
    return selection - viewport_height + 1


class NavigationState:
    """Mutable browser state threaded through the event loop."""

    def __init__(
        self,
        catalog: DictionaryCatalog,
        open_store: Callable[[Path], DictionaryStore] = DictionaryStore.open,
    ) -> None:
        self.catalog = catalog
        self._open_store = open_store
        self.store: DictionaryStore | None = None
        self.active_dictionary = 0
        self.word_index: tuple[str, ...] = ()
        self.selection = 0
        self.definition = ""
        self.query: list[str] = []
        self.status_message = ""
        self.status_message_until = 0.0
        self.dirty = True

    @property
    def query_text(self) -> str:
        return "".join(self.query)

    @property
    def active_name(self) -> str:
        return self.catalog.names[self.active_dictionary]

    def load_dictionary(self, index: int) -> None:
        """Make dictionary ``index`` active and select its first word.

        The new store is opened before the old one is released, so a
        ``StoreOpenFailure`` leaves the previous dictionary fully intact.
        """
        path = self.catalog.path_for(index)
        store = self._open_store(path)
        try:
            words = store.list_words()
            definition = store.entry_at(0).definition if words else ""
        except StoreLookupFailure as exc:
            store.close()
            raise StoreOpenFailure(path, str(exc)) from exc

        previous = self.store
        self.store = store
        self.active_dictionary = index
        self.word_index = words
        self.selection = 0
        self.definition = definition
        if previous is not None:
            previous.close()
        self.dirty = True

    def _refresh_definition(self) -> None:
        if not self.word_index or self.store is None:
            self.definition = ""
            return
        self.definition = self.store.entry_at(self.selection).definition

    def _clamp(self, candidate: int) -> int:
        return max(0, min(candidate, len(self.word_index) - 1))

    def move_by(self, delta: int) -> bool:
        """Move selection by ``delta`` rows, clamped to the word index."""
        if not self.word_index:
            return False
        candidate = self._clamp(self.selection + delta)
        changed = candidate != self.selection
        self.selection = candidate
        self._refresh_definition()
        self.dirty = True
        return changed

    def scroll_offset(self, viewport_height: int) -> int:
        return list_scroll_offset(self.selection, viewport_height)

    def select_at(self, row_offset: int, viewport_height: int) -> bool:
        """Select the word rendered at ``row_offset`` of the index viewport."""
        if not self.word_index or viewport_height <= 0:
            return False
        candidate = self._clamp(self.scroll_offset(viewport_height) + row_offset)
        changed = candidate != self.selection
        self.selection = candidate
        self._refresh_definition()
        self.dirty = True
        return changed

    def push_char(self, char: str) -> None:
        self.query.append(char)
        self.dirty = True

    def pop_char(self) -> None:
        if self.query:
            self.query.pop()
            self.dirty = True

    def submit_query(self) -> bool:
        """Look up the buffered query and clear the buffer.

        Returns ``True`` when a word matched. A miss shows the not-found text
        and keeps the current selection.
        """
        query = self.query_text
        self.query.clear()
        self.dirty = True
        if self.store is None:
            return False
        entry = self.store.lookup_prefix(query)
        self.definition = entry.definition
        if not entry.found or not self.word_index:
            return False
        self.selection = self._clamp(entry.position)
        return True

    def switch_dictionary(self, direction: Direction) -> None:
        """Activate the neighbouring dictionary, wrapping at both ends."""
        count = len(self.catalog)
        if count == 0:
            return
        target = (self.active_dictionary + direction.value) % count
        self.load_dictionary(target)

    def set_status(self, message: str, now: float, seconds: float) -> None:
        self.status_message = message
        self.status_message_until = now + seconds
        self.dirty = True

    def expire_status(self, now: float) -> None:
        if self.status_message and now >= self.status_message_until:
            self.status_message = ""
            self.status_message_until = 0.0
            self.dirty = True

    def close(self) -> None:
        if self.store is not None:
            self.store.close()
            self.store = None
