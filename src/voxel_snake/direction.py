"""Movement directions and keyboard input mapping."""

from __future__ import annotations

import enum
from collections.abc import Iterable

from voxel_snake.coords import Vec3


class Direction(enum.Enum):
    """Unit moves in grid space with (dx, dy, dz) values.

    ``NONE`` stands for "no input": the snake keeps its current heading.
    """

    NORTH = (0, -1, 0)
    SOUTH = (0, 1, 0)
    WEST = (-1, 0, 0)
    EAST = (1, 0, 0)
    UP = (0, 0, 1)
    DOWN = (0, 0, -1)
    NONE = (0, 0, 0)

    def apply(self, coord: Vec3) -> Vec3:
        """Return *coord* shifted one step in this direction."""
        dx, dy, dz = self.value
        x, y, z = coord
        return x + dx, y + dy, z + dz


class Key(enum.Enum):
    """Keys the game reacts to, independent of the terminal backend."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    SPACE = "space"
    ESCAPE = "escape"
    OTHER = "other"


_KEY_DIRECTIONS: dict[Key, Direction] = {
    Key.UP: Direction.NORTH,
    Key.DOWN: Direction.SOUTH,
    Key.LEFT: Direction.WEST,
    Key.RIGHT: Direction.EAST,
    # Jumping is not wired into gravity yet; the snake simply climbs.
    Key.SPACE: Direction.UP,
}


def from_key(key: Key) -> Direction:
    """Map a key press to a direction, ``NONE`` for non-directional keys."""
    return _KEY_DIRECTIONS.get(key, Direction.NONE)


def resolve_input(keys: Iterable[Key]) -> Direction:
    """Fold one tick's key presses into a single direction.

    The most recent directional key wins; with none pressed the result is
    ``Direction.NONE``.
    """
    resolved = Direction.NONE
    for key in keys:
        direction = from_key(key)
        if direction is not Direction.NONE:
            resolved = direction
    return resolved
