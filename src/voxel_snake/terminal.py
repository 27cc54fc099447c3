"""Curses host: frame loop, keyboard polling and screen output."""

from __future__ import annotations

import curses
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from voxel_snake.canvas import Canvas, render
from voxel_snake.config import GameConfig
from voxel_snake.direction import Key, resolve_input
from voxel_snake.engine import GameError
from voxel_snake.level import new_game

logger = logging.getLogger(__name__)

_ESCAPE = 27

_CURSES_KEYS: dict[int, Key] = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    ord(" "): Key.SPACE,
    _ESCAPE: Key.ESCAPE,
}


def translate_key(code: int) -> Key:
    """Map a curses key code to a :class:`Key`."""
    return _CURSES_KEYS.get(code, Key.OTHER)


class FPSCounter:
    """Counts frames and reports the rate over the last full second."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._window_start = clock()
        self._frames = 0
        self.fps = 0

    def update(self) -> None:
        """Record one frame."""
        self._frames += 1
        now = self._clock()
        elapsed = now - self._window_start
        if elapsed >= 1.0:
            self.fps = round(self._frames / elapsed)
            self._frames = 0
            self._window_start = now


@dataclass
class SessionResult:
    """How a terminal session ended."""

    ticks: int
    error: GameError | None = None

    @property
    def quit(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        return {
            "ticks": self.ticks,
            "error": self.error.to_dict() if self.error else None,
        }


def poll_keys(screen: curses.window) -> list[Key]:
    """Drain every key pressed since the previous frame, oldest first."""
    keys: list[Key] = []
    while True:
        code = screen.getch()
        if code == -1:
            return keys
        keys.append(translate_key(code))


def _blit(screen: curses.window, canvas: Canvas, status: str) -> None:
    screen.erase()
    for row, line in enumerate(canvas.lines()):
        try:
            screen.addstr(row, 0, line)
        except curses.error:
            # Writing the last cell of the window moves the cursor off-screen.
            pass
    try:
        screen.addstr(0, 2, status)
    except curses.error:
        pass
    screen.refresh()


def run(screen: curses.window, config: GameConfig) -> SessionResult:
    """Play one game in *screen* until Escape or game over."""
    try:
        curses.curs_set(0)
    except curses.error:
        logger.debug("Terminal cannot hide the cursor.")
    screen.nodelay(True)
    screen.keypad(True)

    rows, columns = screen.getmaxyx()
    game = new_game(config, window=(columns, rows))
    canvas = Canvas(columns - 1, rows - 1)
    frame_time = 1.0 / config.fps
    fps_counter = FPSCounter()
    ticks = 0

    while True:
        frame_start = time.monotonic()

        keys = poll_keys(screen)
        if Key.ESCAPE in keys:
            logger.info("Player quit after %d ticks.", ticks)
            return SessionResult(ticks=ticks)

        try:
            game.update(resolve_input(keys))
        except GameError as err:
            return SessionResult(ticks=ticks, error=err)
        ticks += 1

        fps_counter.update()
        render(game, canvas, skip_void=config.skip_void, border=config.border)
        status = f" {fps_counter.fps} fps | length {len(game.snake)} "
        _blit(screen, canvas, status)

        remaining = frame_time - (time.monotonic() - frame_start)
        if remaining > 0:
            time.sleep(remaining)


def play(config: GameConfig) -> SessionResult:
    """Run a game in the real terminal, restoring it afterwards."""
    return curses.wrapper(run, config)
