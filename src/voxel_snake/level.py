"""Hand-built demo level and game setup."""

from __future__ import annotations

import logging

from voxel_snake.config import GameConfig
from voxel_snake.coords import Vec3
from voxel_snake.engine import GameState
from voxel_snake.grid import Cell, Grid

logger = logging.getLogger(__name__)


def level_dimensions(columns: int, rows: int) -> Vec3:
    """Size a level so its projection fits a terminal window.

    One column and one row are reserved for the border. Each grid step
    along x takes two screen columns, so x (and y) get half the width;
    every row can hold one layer of height.
    """
    usable_x = columns - 1
    usable_y = rows - 1
    mx = usable_x // 2
    mz = usable_y
    if mx < 1 or mz < 2:
        raise ValueError(
            f"Terminal of {columns}x{rows} is too small for a level."
        )
    return mx, mx, mz


def build_demo_level(dims: Vec3, food: Vec3 | None = None) -> Grid:
    """Build a grid with a solid floor at z=0 and one piece of food.

    Food defaults to the middle of the floor, one layer up.
    """
    mx, my, mz = dims
    if mz < 2:
        raise ValueError("Demo level needs at least two layers.")
    grid = Grid.empty(dims)
    grid.fill_layer(0, Cell.BLOCK)
    if food is None:
        food = (mx // 2, my // 2, 1)
    grid.set(food, Cell.FOOD)
    return grid


def new_game(config: GameConfig, window: tuple[int, int] | None = None) -> GameState:
    """Create a :class:`GameState` on the demo level.

    *window* is the terminal ``(columns, rows)`` and is used only when
    the config does not fix the grid dimensions.
    """
    dims = config.dims
    if dims is None:
        if window is None:
            raise ValueError("Grid dimensions or a window size are required.")
        dims = level_dimensions(*window)
    grid = build_demo_level(dims, food=config.food)
    if grid.get(config.start) is None:
        raise ValueError(f"Start {config.start} is not inside the level {dims}.")
    logger.info("Level %s ready, snake starts at %s.", dims, config.start)
    return GameState(config.start, grid)
