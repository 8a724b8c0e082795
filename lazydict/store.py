"""SQLite-backed dictionary stores and dictionary discovery.

A dictionary is one SQLite file holding a ``dictionary(word, definition)``
table. ROWID order is the canonical word order used for the index list,
prefix lookups, and positions reported back to navigation.
"""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from pathlib import Path

NOT_FOUND_TEXT = "Not found!"
DEFAULT_EXTENSION = ".db"


class LazyDictError(Exception):
    """Base class for dictionary browser errors."""


class StoreOpenFailure(LazyDictError):
    """Raised when a dictionary file is missing, unreadable, or malformed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class StoreLookupFailure(LazyDictError):
    """Raised when a query against an already-open store fails."""


def normalize_definition(text: str) -> str:
    """Convert carriage-return line breaks to plain newlines."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


@dataclass(frozen=True)
class WordEntry:
    position: int
    word: str
    definition: str
    found: bool = True

    @classmethod
    def not_found(cls) -> WordEntry:
        """Return the sentinel result for a query matching nothing."""
        return cls(position=0, word="", definition=NOT_FOUND_TEXT, found=False)


def _escape_uri_path(path: Path) -> str:
    return str(path).replace("%", "%25").replace("?", "%3f").replace("#", "%23")


class DictionaryStore:
    """Read-only handle on one dictionary file."""

    def __init__(self, path: Path, conn: sqlite3.Connection) -> None:
        self.path = path
        self._conn: sqlite3.Connection | None = conn

    @classmethod
    def open(cls, path: Path) -> DictionaryStore:
        """Open ``path`` read-only and verify it carries a dictionary table.

        The file is never created. Any SQLite error while connecting or
        probing is reported as ``StoreOpenFailure``.
        """
        path = Path(path)
        if not path.is_file():
            raise StoreOpenFailure(path, "no such dictionary file")
        try:
            conn = sqlite3.connect(f"file:{_escape_uri_path(path)}?mode=ro", uri=True)
        except sqlite3.Error as exc:
            raise StoreOpenFailure(path, str(exc)) from exc
        try:
            conn.execute("SELECT word, definition FROM dictionary LIMIT 1").fetchall()
        except sqlite3.Error as exc:
            conn.close()
            raise StoreOpenFailure(path, str(exc)) from exc
        return cls(path, conn)

    @property
    def name(self) -> str:
        return self.path.stem

    @property
    def closed(self) -> bool:
        return self._conn is None

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StoreLookupFailure(f"{self.path}: store is closed")
        return self._conn

    def _fetch(self, sql: str, params: tuple[object, ...] = ()) -> list[tuple]:
        try:
            return self._connection().execute(sql, params).fetchall()
        except sqlite3.Error as exc:
            raise StoreLookupFailure(f"{self.path}: {exc}") from exc

    def list_words(self) -> tuple[str, ...]:
        """Return every word in canonical (ROWID) order."""
        rows = self._fetch("SELECT word FROM dictionary ORDER BY ROWID")
        return tuple("" if row[0] is None else str(row[0]) for row in rows)

    def _position_of_rowid(self, rowid: int) -> int:
        rows = self._fetch("SELECT COUNT(*) FROM dictionary WHERE ROWID < ?", (rowid,))
        return int(rows[0][0])

    def lookup_prefix(self, query: str) -> WordEntry:
        """Return the first entry whose word starts with ``query``.

        Matching is case-sensitive and literal; characters such as ``%`` and
        ``_`` have no wildcard meaning. ``WordEntry.not_found()`` is returned
        when nothing matches.
        """
        rows = self._fetch(
            "SELECT ROWID, word, definition FROM dictionary "
            "WHERE substr(word, 1, length(?)) = ? "
            "ORDER BY ROWID LIMIT 1",
            (query, query),
        )
        if not rows:
            return WordEntry.not_found()
        rowid, word, definition = rows[0]
        return WordEntry(
            position=self._position_of_rowid(rowid),
            word=str(word),
            definition=normalize_definition(definition or ""),
        )

    def entry_at(self, position: int) -> WordEntry:
        """Return the entry at canonical ``position`` or the not-found entry."""
        if position < 0:
            return WordEntry.not_found()
        rows = self._fetch(
            "SELECT word, definition FROM dictionary ORDER BY ROWID LIMIT 1 OFFSET ?",
            (position,),
        )
        if not rows:
            return WordEntry.not_found()
        word, definition = rows[0]
        return WordEntry(
            position=position,
            word=str(word),
            definition=normalize_definition(definition or ""),
        )

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> DictionaryStore:
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()


@dataclass(frozen=True)
class DictionaryCatalog:
    """Ordered dictionaries discovered once at startup."""

    directory: Path
    names: tuple[str, ...]
    extension: str = DEFAULT_EXTENSION

    def __len__(self) -> int:
        return len(self.names)

    def path_for(self, index: int) -> Path:
        return self.directory / f"{self.names[index]}{self.extension}"

    def index_of(self, name: str) -> int | None:
        try:
            return self.names.index(name)
        except ValueError:
            return None


def discover_dictionaries(directory: Path, extension: str = DEFAULT_EXTENSION) -> DictionaryCatalog:
    """List dictionary files in ``directory`` sorted by name.

    Only regular files ending in ``extension`` are considered; names are
    reported without the extension.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise StoreOpenFailure(directory, "dictionary directory not found")
    names = sorted(
        child.name[: -len(extension)] if extension else child.name
        for child in directory.iterdir()
        if child.is_file() and child.name.endswith(extension) and child.name != extension
    )
    return DictionaryCatalog(directory=directory, names=tuple(names), extension=extension)
