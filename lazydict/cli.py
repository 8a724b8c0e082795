"""Command-line front door for lazydict.

Parses CLI options, discovers dictionaries, and opens the initial store.
Then either answers a one-shot query or dispatches into the interactive
browser runtime.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import (
    load_dictionary_dir,
    load_dictionary_extension,
    load_page_step,
    load_theme_name,
)
from .runtime import open_navigation_state, run_browser
from .store import DictionaryCatalog, DictionaryStore, StoreLookupFailure, StoreOpenFailure, discover_dictionaries
from .ui_theme import available_theme_names


def _resolve_catalog(directory: Path, extension: str) -> DictionaryCatalog:
    try:
        catalog = discover_dictionaries(directory, extension)
    except StoreOpenFailure as exc:
        raise SystemExit(f"Dictionary directory not found: {exc.path}") from exc
    if not catalog.names:
        raise SystemExit(f"No *{extension} dictionaries found in {directory}")
    return catalog


def _resolve_initial_index(catalog: DictionaryCatalog, name: str | None) -> int:
    if name is None:
        return 0
    index = catalog.index_of(name)
    if index is None:
        raise SystemExit(f"Unknown dictionary: {name} (available: {', '.join(catalog.names)})")
    return index


def lookup_definition(catalog: DictionaryCatalog, index: int, word: str) -> str:
    """Return the prefix-match definition for ``word`` in dictionary ``index``."""
    with DictionaryStore.open(catalog.path_for(index)) as store:
        return store.lookup_prefix(word).definition


def main(default_dir: Path | None = None) -> None:
    """Parse CLI arguments and launch lazydict on a dictionary directory.

    ``default_dir`` is primarily for tests; when omitted the configured
    ``dictionary_dir`` (or ``./dics``) is used.
    """
    parser = argparse.ArgumentParser(
        description="Browse SQLite word/definition dictionaries in the terminal."
    )
    parser.add_argument(
        "dictionary_dir",
        nargs="?",
        default=None,
        help="Directory holding dictionary files. Defaults to the configured directory or ./dics.",
    )
    parser.add_argument("--dictionary", "-d", default=None, help="Name of the dictionary to open first.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--list", action="store_true", help="List available dictionaries and exit.")
    parser.add_argument("--lookup", metavar="WORD", default=None, help="Print the definition of WORD and exit.")
    args = parser.parse_args()

    if default_dir is None:
        default_dir = load_dictionary_dir()
    directory = Path(args.dictionary_dir) if args.dictionary_dir is not None else default_dir
    catalog = _resolve_catalog(directory, load_dictionary_extension())

    if args.list:
        sys.stdout.write("".join(f"{name}\n" for name in catalog.names))
        return

    initial_index = _resolve_initial_index(catalog, args.dictionary)

    if args.lookup is not None:
        try:
            definition = lookup_definition(catalog, initial_index, args.lookup)
        except (StoreOpenFailure, StoreLookupFailure) as exc:
            raise SystemExit(f"Cannot read dictionary: {exc}") from exc
        sys.stdout.write(definition.rstrip("\n") + "\n")
        return

    try:
        state = open_navigation_state(catalog, initial_index)
    except (StoreOpenFailure, StoreLookupFailure) as exc:
        raise SystemExit(f"Cannot open dictionary: {exc}") from exc

    theme_name = args.theme if args.theme is not None else load_theme_name()
    run_browser(state, theme_name, args.no_color, load_page_step())


if __name__ == "__main__":
    main()
