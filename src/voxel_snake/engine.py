"""Step-based game engine composing the voxel grid and the snake."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import NoReturn

from voxel_snake.coords import ScreenPos, Vec3
from voxel_snake.direction import Direction
from voxel_snake.grid import Cell, Grid
from voxel_snake.snake import Snake

logger = logging.getLogger(__name__)


class GameError(Exception):
    """A tick outcome that ends the game.

    Carries the head position before the move and the destination the
    snake tried to reach.
    """

    kind = "game_over"

    def __init__(self, head: Vec3, attempted_move: Vec3) -> None:
        super().__init__(self.describe(head, attempted_move))
        self.head = head
        self.attempted_move = attempted_move

    @staticmethod
    def describe(head: Vec3, attempted_move: Vec3) -> str:
        return f"Game over moving from {head} to {attempted_move}"

    def to_dict(self) -> dict:
        """Serialize the outcome to a dictionary."""
        return {
            "kind": self.kind,
            "head": list(self.head),
            "attempted_move": list(self.attempted_move),
            "message": str(self),
        }


class SnakeCollision(GameError):
    """The destination is a wall, void, or off the grid."""

    kind = "collision"

    @staticmethod
    def describe(head: Vec3, attempted_move: Vec3) -> str:
        return (
            f"Snake collision when attempting to move head from {head} "
            f"to {attempted_move}"
        )


class SnakeCannibalism(GameError):
    """The snake moved onto its own body."""

    kind = "cannibalism"

    @staticmethod
    def describe(head: Vec3, attempted_move: Vec3) -> str:
        return f"Snake at {head} tried to eat itself at {attempted_move}"


class SnakeFell(GameError):
    """Nothing under the destination can catch the snake."""

    kind = "fell"

    @staticmethod
    def describe(head: Vec3, attempted_move: Vec3) -> str:
        return f"Snake fell at {attempted_move} from {head}"


class GameState:
    """Single-snake, step-based game engine.

    The state owns the level grid and the snake. Each call to
    :meth:`update` advances the game by one tick; a :class:`GameError`
    ends the session.
    """

    def __init__(self, starting_pos: Vec3, level: Grid) -> None:
        self.grid = level
        self.snake = Snake(starting_pos)

    def update(self, direction: Direction = Direction.NONE) -> None:
        """Advance the game by one tick using the held *direction*."""
        if direction is not Direction.NONE:
            self.snake.direction = direction
        heading = self.snake.direction

        head = self.snake.head
        next_head = heading.apply(head)

        # --- wall check ---
        cell = self.grid.get(next_head)
        if cell is None or cell == Cell.BLOCK:
            self._game_over(SnakeCollision(head, next_head))

        # --- gravity ---
        # Unsupported moves take the type of the cell below, but the head
        # still lands on next_head.
        below = self.grid.get(Direction.DOWN.apply(next_head))
        if below is None:
            self._game_over(SnakeFell(head, next_head))
        if below != Cell.BLOCK:
            cell = below

        # --- move ---
        if cell == Cell.EMPTY:
            self.snake.move_to(next_head, growing=False)
        elif cell == Cell.FOOD:
            self.snake.move_to(next_head, growing=True)
            self.grid.set(next_head, Cell.EMPTY)
            logger.debug("Snake ate at %s, length %d.", next_head, len(self.snake))
        else:
            raise RuntimeError(
                f"Unreachable cell {cell!r} resolved moving {head} -> {next_head}."
            )

        # --- self-collision check ---
        # The move is already committed when this fires.
        if self.snake.is_self_intersecting():
            self._game_over(SnakeCannibalism(head, next_head))

        logger.debug("Snake moved %s -> %s.", head, next_head)

    def draw(self, skip_void: bool = False) -> Iterator[tuple[str, ScreenPos]]:
        """Yield the grid's drawable primitives, then the snake's."""
        yield from self.grid.draw(skip_void=skip_void)
        yield from self.snake.draw()

    def to_dict(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "grid": self.grid.to_dict(),
            "snake": self.snake.to_dict(),
        }

    @staticmethod
    def _game_over(error: GameError) -> NoReturn:
        logger.info("Game over (%s): %s.", error.kind, error)
        raise error
