"""Main interactive event loop for the terminal UI.

Each cycle renders when state is dirty, reads one key token, decodes it to a
semantic event, and routes it into navigation. Feature logic lives in the
router and navigation state; this loop only wires them to the terminal.
"""

from __future__ import annotations

import os
import shutil
import time
from collections.abc import Callable
from dataclasses import dataclass

from ..geometry import EMPTY_VIEWPORT, ViewportGeometry
from ..input import InputRouter, decode_key, read_key
from ..navigation import NavigationState
from ..terminal import TerminalController


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    poll_timeout_ms: int = 120


class IndexViewportTracker:
    """Holds the index-list geometry reported by the most recent frame."""

    def __init__(self) -> None:
        self.current: ViewportGeometry = EMPTY_VIEWPORT

    def update(self, viewport: ViewportGeometry) -> None:
        self.current = viewport

    def get(self) -> ViewportGeometry:
        return self.current


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``."""

    draw: Callable[[int, int], ViewportGeometry]
    monotonic: Callable[[], float] = time.monotonic
    get_terminal_size: Callable[[tuple[int, int]], os.terminal_size] = shutil.get_terminal_size


def run_main_loop(
    state: NavigationState,
    terminal: TerminalController,
    stdin_fd: int,
    router: InputRouter,
    viewport_tracker: IndexViewportTracker,
    timing: RuntimeLoopTiming,
    callbacks: RuntimeLoopCallbacks,
) -> None:
    """Run the browser loop until a quit event is routed."""
    ops = callbacks
    last_size: tuple[int, int] | None = None
    skip_next_lf = False

    with terminal.raw_mode():
        terminal.set_title()
        while True:
            term = ops.get_terminal_size((80, 24))
            size = (term.columns, term.lines)
            if size != last_size:
                last_size = size
                state.dirty = True
            state.expire_status(ops.monotonic())

            if state.dirty:
                viewport_tracker.update(ops.draw(term.columns, term.lines))
                state.dirty = False

            try:
                key = read_key(stdin_fd, timeout_ms=timing.poll_timeout_ms)
            except KeyboardInterrupt:
                continue
            if key == "":
                continue
            if skip_next_lf and key == "ENTER_LF":
                skip_next_lf = False
                continue

            if key == "ENTER_CR":
                key = "ENTER"
                skip_next_lf = True
            elif key == "ENTER_LF":
                key = "ENTER"
                skip_next_lf = False
            else:
                skip_next_lf = False

            event = decode_key(key)
            if event is None:
                continue
            if router.route(event):
                break
