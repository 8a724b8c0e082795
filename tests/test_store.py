"""Tests for SQLite dictionary stores and dictionary discovery.

Covers prefix-lookup semantics, canonical positions, definition line-break
normalization, and open failures for missing or malformed files.
"""

from __future__ import annotations

import sqlite3
import tempfile
import unittest
from pathlib import Path

from lazydict.store import (
    NOT_FOUND_TEXT,
    DictionaryStore,
    StoreOpenFailure,
    WordEntry,
    discover_dictionaries,
    normalize_definition,
)


def _make_dictionary(path: Path, rows: list[tuple[str, str]]) -> Path:
    conn = sqlite3.connect(path)
    try:
        conn.execute("CREATE TABLE dictionary (word TEXT, definition TEXT)")
        conn.executemany("INSERT INTO dictionary (word, definition) VALUES (?, ?)", rows)
        conn.commit()
    finally:
        conn.close()
    return path


class DictionaryStoreTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        self.path = _make_dictionary(
            self.root / "english.db",
            [
                ("apple", "a fruit"),
                ("catalog", "a list"),
                ("cat", "a feline"),
                ("Cattle", "bovines"),
                ("dog", "a canine\r\nloyal"),
                ("50%_off", "a discount"),
            ],
        )

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_list_words_preserves_insertion_order(self) -> None:
        with DictionaryStore.open(self.path) as store:
            self.assertEqual(
                store.list_words(),
                ("apple", "catalog", "cat", "Cattle", "dog", "50%_off"),
            )
            self.assertEqual(store.list_words(), store.list_words())

    def test_lookup_prefix_returns_first_match_in_store_order(self) -> None:
        with DictionaryStore.open(self.path) as store:
            entry = store.lookup_prefix("cat")

        self.assertTrue(entry.found)
        self.assertEqual(entry.word, "catalog")
        self.assertEqual(entry.position, 1)

    def test_lookup_prefix_exact_word_reports_its_position(self) -> None:
        with DictionaryStore.open(self.path) as store:
            entry = store.lookup_prefix("dog")

        self.assertEqual(entry.position, 4)
        self.assertEqual(entry.definition, "a canine\nloyal")

    def test_lookup_prefix_is_case_sensitive(self) -> None:
        with DictionaryStore.open(self.path) as store:
            upper = store.lookup_prefix("Cat")
            missing = store.lookup_prefix("APPLE")

        self.assertEqual(upper.word, "Cattle")
        self.assertFalse(missing.found)

    def test_lookup_prefix_treats_wildcard_characters_literally(self) -> None:
        with DictionaryStore.open(self.path) as store:
            literal = store.lookup_prefix("50%_")
            wildcard_like = store.lookup_prefix("%")

        self.assertEqual(literal.word, "50%_off")
        self.assertFalse(wildcard_like.found)

    def test_lookup_prefix_miss_returns_not_found_entry(self) -> None:
        with DictionaryStore.open(self.path) as store:
            entry = store.lookup_prefix("zebra")

        self.assertEqual(entry, WordEntry.not_found())
        self.assertEqual(entry.definition, NOT_FOUND_TEXT)
        self.assertEqual(entry.position, 0)
        self.assertFalse(entry.found)

    def test_position_counts_rows_not_rowids(self) -> None:
        conn = sqlite3.connect(self.path)
        try:
            conn.execute("DELETE FROM dictionary WHERE word = 'catalog'")
            conn.commit()
        finally:
            conn.close()

        with DictionaryStore.open(self.path) as store:
            entry = store.lookup_prefix("dog")
            self.assertEqual(store.list_words()[entry.position], "dog")

    def test_entry_at_returns_definition_for_exact_row(self) -> None:
        with DictionaryStore.open(self.path) as store:
            entry = store.entry_at(2)
            past_end = store.entry_at(99)
            negative = store.entry_at(-1)

        self.assertEqual((entry.word, entry.definition), ("cat", "a feline"))
        self.assertFalse(past_end.found)
        self.assertFalse(negative.found)

    def test_open_missing_file_raises_without_creating_it(self) -> None:
        missing = self.root / "missing.db"
        with self.assertRaises(StoreOpenFailure):
            DictionaryStore.open(missing)
        self.assertFalse(missing.exists())

    def test_open_file_without_dictionary_table_raises(self) -> None:
        path = self.root / "other.db"
        conn = sqlite3.connect(path)
        conn.execute("CREATE TABLE words (word TEXT)")
        conn.commit()
        conn.close()

        with self.assertRaises(StoreOpenFailure) as ctx:
            DictionaryStore.open(path)
        self.assertEqual(ctx.exception.path, path)

    def test_open_non_sqlite_file_raises(self) -> None:
        path = self.root / "garbage.db"
        path.write_bytes(b"this is not a database file at all" * 20)

        with self.assertRaises(StoreOpenFailure):
            DictionaryStore.open(path)

    def test_close_is_idempotent(self) -> None:
        store = DictionaryStore.open(self.path)
        store.close()
        store.close()
        self.assertTrue(store.closed)


class NormalizeDefinitionTests(unittest.TestCase):
    def test_carriage_returns_become_newlines(self) -> None:
        self.assertEqual(normalize_definition("a\rb\r\nc\nd"), "a\nb\nc\nd")


class DiscoverDictionariesTests(unittest.TestCase):
    def test_discovery_lists_sorted_names_without_extension(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "spanish.db").write_bytes(b"")
            (root / "english.db").write_bytes(b"")
            (root / "notes.txt").write_text("x", encoding="utf-8")
            (root / "nested.db").mkdir()

            catalog = discover_dictionaries(root)

        self.assertEqual(catalog.names, ("english", "spanish"))
        self.assertEqual(catalog.path_for(1), root / "spanish.db")
        self.assertEqual(catalog.index_of("spanish"), 1)
        self.assertIsNone(catalog.index_of("french"))

    def test_discovery_honors_custom_extension(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "a.sqlite").write_bytes(b"")
            (root / "b.db").write_bytes(b"")

            catalog = discover_dictionaries(root, ".sqlite")

        self.assertEqual(catalog.names, ("a",))

    def test_missing_directory_raises_store_open_failure(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(StoreOpenFailure):
                discover_dictionaries(Path(tmp) / "nope")


if __name__ == "__main__":
    unittest.main()
