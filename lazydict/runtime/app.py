"""Runtime composition layer for lazydict.

Builds the navigation state, wires rendering, clipboard, and routing
callbacks, and starts the loop.
"""

from __future__ import annotations

import sys

from ..clipboard import copy_text_to_clipboard
from ..geometry import ViewportGeometry
from ..input import InputRouter, InputRouterCallbacks
from ..navigation import NavigationState
from ..render import render_frame, write_frame
from ..store import DictionaryCatalog
from ..terminal import TerminalController
from ..ui_theme import resolve_theme
from .loop import IndexViewportTracker, RuntimeLoopCallbacks, RuntimeLoopTiming, run_main_loop

POLL_TIMEOUT_MS = 120


def open_navigation_state(catalog: DictionaryCatalog, initial_index: int = 0) -> NavigationState:
    """Create navigation state with dictionary ``initial_index`` loaded.

    ``StoreOpenFailure`` propagates; a browser cannot start without a store.
    """
    state = NavigationState(catalog)
    state.load_dictionary(initial_index)
    return state


def run_browser(
    state: NavigationState,
    theme_name: str | None,
    no_color: bool,
    page_step: int,
) -> None:
    """Run the interactive browser on an already-loaded ``state``."""
    theme = resolve_theme(theme_name, no_color=no_color)
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)
    viewport_tracker = IndexViewportTracker()
    router = InputRouter(
        state,
        InputRouterCallbacks(
            index_viewport=viewport_tracker.get,
            copy_text_to_clipboard=copy_text_to_clipboard,
        ),
        page_step=page_step,
    )

    def draw(columns: int, rows: int) -> ViewportGeometry:
        frame = render_frame(state, theme, columns, rows)
        write_frame(frame, stdout_fd)
        return frame.index_viewport

    try:
        run_main_loop(
            state=state,
            terminal=terminal,
            stdin_fd=stdin_fd,
            router=router,
            viewport_tracker=viewport_tracker,
            timing=RuntimeLoopTiming(poll_timeout_ms=POLL_TIMEOUT_MS),
            callbacks=RuntimeLoopCallbacks(draw=draw),
        )
    finally:
        state.close()
