"""Snake representation and movement logic."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from voxel_snake.coords import ScreenPos, Vec3, to_screen
from voxel_snake.direction import Direction


class Snake:
    """A snake represented as an ordered deque of (x, y, z) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``. The snake is not
    painted onto the grid, so nothing stops it from passing over itself
    until :meth:`is_self_intersecting` is checked.
    """

    def __init__(self, pos: Vec3, direction: Direction = Direction.NONE) -> None:
        self.body: deque[Vec3] = deque([pos])
        self.direction = direction

    def __len__(self) -> int:
        return len(self.body)

    @property
    def head(self) -> Vec3:
        """Return the head coordinate."""
        if not self.body:
            raise RuntimeError("Snake body is empty; it has no head.")
        return self.body[0]

    def move_to(self, target: Vec3, growing: bool = False) -> Vec3 | None:
        """Push *target* as the new head and drop the tail unless growing.

        Returns the vacated tail cell, or ``None`` if the snake grew.
        """
        self.body.appendleft(target)
        if growing:
            return None
        return self.body.pop()

    def is_self_intersecting(self) -> bool:
        """Check whether any coordinate appears twice in the body."""
        seen: set[Vec3] = set()
        for segment in self.body:
            if segment in seen:
                return True
            seen.add(segment)
        return False

    def draw(self) -> Iterator[tuple[str, ScreenPos]]:
        """Yield an ``S`` glyph per segment, head first."""
        for segment in self.body:
            yield "S", to_screen(segment)

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(seg) for seg in self.body],
            "direction": self.direction.name.lower(),
        }
