"""UI theme definitions and selection helpers.

Themes are ANSI palettes for box chrome, the index highlight, the query
text, and the status/help line.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the renderer."""

    name: str
    reset: str
    border: str
    title: str
    help: str
    status: str
    query: str
    caret: str
    highlight: str
    definition: str
    not_found: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    border="\033[38;5;244m",
    title="\033[1;38;5;81m",
    help="\033[2;38;5;250m",
    status="\033[1;38;5;214m",
    query="\033[33m",
    caret="\033[7m",
    highlight="\033[1;34;47m",
    definition="\033[38;5;252m",
    not_found="\033[38;5;203m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    border="\033[2;38;5;31m",
    title="\033[1;38;5;45m",
    help="\033[2;38;5;110m",
    status="\033[1;38;5;215m",
    query="\033[38;5;153m",
    caret="\033[7m",
    highlight="\033[1;38;5;17;48;5;153m",
    definition="\033[38;5;252m",
    not_found="\033[38;5;210m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    border="",
    title="",
    help="",
    status="",
    query="",
    caret="",
    highlight="",
    definition="",
    not_found="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
