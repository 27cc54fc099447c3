"""Voxel Snake: turn-based 3D snake simulation engine."""

from voxel_snake.config import GameConfig
from voxel_snake.coords import Vec3, in_bounds, to_screen
from voxel_snake.direction import Direction, Key, from_key, resolve_input
from voxel_snake.engine import (
    GameError,
    GameState,
    SnakeCannibalism,
    SnakeCollision,
    SnakeFell,
)
from voxel_snake.grid import Cell, Grid, OutOfBoundsError
from voxel_snake.level import build_demo_level, new_game
from voxel_snake.snake import Snake

__all__ = [
    "Cell",
    "Direction",
    "GameConfig",
    "GameError",
    "GameState",
    "Grid",
    "Key",
    "OutOfBoundsError",
    "Snake",
    "SnakeCannibalism",
    "SnakeCollision",
    "SnakeFell",
    "Vec3",
    "build_demo_level",
    "from_key",
    "in_bounds",
    "new_game",
    "resolve_input",
    "to_screen",
]
