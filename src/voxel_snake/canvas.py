"""Off-screen character buffer the game is drawn onto."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

import numpy as np

from voxel_snake.coords import ScreenPos, Vec3

if TYPE_CHECKING:
    from voxel_snake.engine import GameState

# Double-line box characters: corners then edges.
_BOX = {
    "top_left": "╔",
    "top_right": "╗",
    "bottom_left": "╚",
    "bottom_right": "╝",
    "horizontal": "═",
    "vertical": "║",
}


class Canvas:
    """A fixed-size grid of characters with a movable origin.

    Projected screen positions can be negative, so every draw call is
    shifted by ``origin`` before it lands in the buffer. Anything that
    still falls outside is clipped.
    """

    def __init__(
        self,
        width: int,
        height: int,
        origin: ScreenPos | None = None,
    ) -> None:
        if width < 1 or height < 1:
            raise ValueError("Canvas dimensions must be positive.")
        self.width = width
        self.height = height
        self.origin = origin if origin is not None else (width // 4, height // 4)
        self._buf = np.full((height, width), " ", dtype="<U1")

    @classmethod
    def for_grid(cls, dims: Vec3) -> Canvas:
        """Size a canvas so a whole grid of *dims* projects inside a border."""
        mx, my, mz = dims
        # Projected x spans [-(my-1)*2, (mx-1)*2], y spans [-(mz-1), mx+my-2].
        width = (mx + my - 2) * 2 + 3
        height = mx + my + mz - 2 + 2
        return cls(width, height, origin=((my - 1) * 2 + 1, mz))

    def clear(self) -> None:
        self._buf[:] = " "

    def put(self, ch: str, col: int, row: int) -> bool:
        """Write *ch* at an absolute buffer position; False if clipped."""
        if 0 <= col < self.width and 0 <= row < self.height:
            self._buf[row, col] = ch
            return True
        return False

    def draw_char(self, ch: str, pos: ScreenPos) -> bool:
        """Write *ch* at *pos* relative to the origin."""
        ox, oy = self.origin
        return self.put(ch, pos[0] + ox, pos[1] + oy)

    def draw_all(self, primitives: Iterable[tuple[str, ScreenPos]]) -> int:
        """Draw ``(glyph, position)`` pairs in order; returns how many landed."""
        drawn = 0
        for ch, pos in primitives:
            if self.draw_char(ch, pos):
                drawn += 1
        return drawn

    def draw_arrays(
        self,
        glyphs: np.ndarray,
        xs: np.ndarray,
        ys: np.ndarray,
    ) -> int:
        """Bulk :meth:`draw_all` over parallel arrays; returns how many landed.

        Where several entries hit the same position the last one wins,
        exactly as drawing them one by one would.
        """
        ox, oy = self.origin
        cols = np.asarray(xs, dtype=np.int64) + ox
        rows = np.asarray(ys, dtype=np.int64) + oy
        inside = (cols >= 0) & (cols < self.width) & (rows >= 0) & (rows < self.height)
        order = np.flatnonzero(inside)
        if order.size == 0:
            return 0
        pixels = rows[order] * self.width + cols[order]
        winner = np.full(self.width * self.height, -1, dtype=np.int64)
        np.maximum.at(winner, pixels, order)
        hit = np.flatnonzero(winner >= 0)
        self._buf.flat[hit] = np.asarray(glyphs)[winner[hit]]
        return int(order.size)

    def draw_text(self, text: str, col: int, row: int) -> None:
        for offset, ch in enumerate(text):
            self.put(ch, col + offset, row)

    def draw_rect(self, col: int, row: int, width: int, height: int) -> None:
        """Draw a double-line box with its top-left corner at (col, row)."""
        if width < 2 or height < 2:
            return
        right = col + width - 1
        bottom = row + height - 1
        for c in range(col + 1, right):
            self.put(_BOX["horizontal"], c, row)
            self.put(_BOX["horizontal"], c, bottom)
        for r in range(row + 1, bottom):
            self.put(_BOX["vertical"], col, r)
            self.put(_BOX["vertical"], right, r)
        self.put(_BOX["top_left"], col, row)
        self.put(_BOX["top_right"], right, row)
        self.put(_BOX["bottom_left"], col, bottom)
        self.put(_BOX["bottom_right"], right, bottom)

    def lines(self) -> list[str]:
        """Return the buffer as one string per row."""
        return ["".join(row) for row in self._buf.tolist()]


def render(
    game: GameState,
    canvas: Canvas,
    skip_void: bool = True,
    border: bool = True,
) -> None:
    """Draw a game state onto *canvas*, replacing its previous contents."""
    canvas.clear()
    if border:
        canvas.draw_rect(0, 0, canvas.width, canvas.height)
    canvas.draw_arrays(*game.grid.draw_arrays(skip_void=skip_void))
    canvas.draw_all(game.snake.draw())
