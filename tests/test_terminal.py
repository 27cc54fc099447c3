"""Tests for the curses host, driven through a fake screen."""

import curses

import pytest

from voxel_snake import terminal
from voxel_snake.config import GameConfig
from voxel_snake.direction import Key
from voxel_snake.engine import SnakeCollision
from voxel_snake.terminal import FPSCounter, SessionResult, poll_keys, run, translate_key


class FakeScreen:
    """Stands in for a curses window; each frame's keys end with -1."""

    def __init__(self, frames, size=(11, 21)):
        self._frames = [list(frame) for frame in frames]
        self._size = size
        self.written = []
        self.refreshes = 0

    def getch(self):
        if not self._frames:
            return -1
        frame = self._frames[0]
        if not frame:
            self._frames.pop(0)
            return -1
        return frame.pop(0)

    def getmaxyx(self):
        return self._size

    def nodelay(self, flag):
        pass

    def keypad(self, flag):
        pass

    def erase(self):
        self.written.clear()

    def addstr(self, row, col, text):
        self.written.append((row, col, text))

    def refresh(self):
        self.refreshes += 1


@pytest.fixture(autouse=True)
def _no_curses_setup(monkeypatch):
    monkeypatch.setattr(terminal.curses, "curs_set", lambda visibility: None)
    monkeypatch.setattr(terminal.time, "sleep", lambda seconds: None)


class TestTranslateKey:
    def test_arrows(self):
        assert translate_key(curses.KEY_UP) == Key.UP
        assert translate_key(curses.KEY_DOWN) == Key.DOWN
        assert translate_key(curses.KEY_LEFT) == Key.LEFT
        assert translate_key(curses.KEY_RIGHT) == Key.RIGHT

    def test_space_and_escape(self):
        assert translate_key(ord(" ")) == Key.SPACE
        assert translate_key(27) == Key.ESCAPE

    def test_unknown(self):
        assert translate_key(ord("q")) == Key.OTHER


class TestPollKeys:
    def test_drains_one_frame(self):
        screen = FakeScreen([[curses.KEY_UP, curses.KEY_LEFT], [curses.KEY_DOWN]])
        assert poll_keys(screen) == [Key.UP, Key.LEFT]
        assert poll_keys(screen) == [Key.DOWN]
        assert poll_keys(screen) == []


class TestFPSCounter:
    def test_reports_after_a_second(self):
        now = [0.0]
        counter = FPSCounter(clock=lambda: now[0])
        for _ in range(3):
            now[0] += 0.25
            counter.update()
        assert counter.fps == 0
        now[0] += 0.25
        counter.update()
        assert counter.fps == 4


class TestSessionResult:
    def test_quit(self):
        result = SessionResult(ticks=3)
        assert result.quit
        assert result.to_dict() == {"ticks": 3, "error": None}

    def test_game_over(self):
        result = SessionResult(ticks=1, error=SnakeCollision((0, 0, 1), (-1, 0, 1)))
        assert not result.quit
        assert result.to_dict()["error"]["kind"] == "collision"


class TestRun:
    def test_escape_quits_before_first_tick(self):
        screen = FakeScreen([[27]])
        result = run(screen, GameConfig())
        assert result.quit
        assert result.ticks == 0

    def test_frames_are_drawn_until_escape(self):
        screen = FakeScreen([[curses.KEY_RIGHT], [], [27]])
        result = run(screen, GameConfig())
        assert result.quit
        assert result.ticks == 2
        assert screen.refreshes == 2
        assert any("fps" in text for _, _, text in screen.written)

    def test_game_over_is_returned(self):
        screen = FakeScreen([[curses.KEY_LEFT]])
        result = run(screen, GameConfig(grid_x=3, grid_y=3, grid_z=2))
        assert result.ticks == 0
        assert isinstance(result.error, SnakeCollision)
