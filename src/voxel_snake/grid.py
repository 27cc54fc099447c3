"""Voxel grid representation for the snake game."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator

import numpy as np

from voxel_snake.coords import ScreenPos, Vec3, in_bounds, to_screen


class OutOfBoundsError(IndexError):
    """Raised when a coordinate falls outside the grid dimensions."""

    def __init__(self, coord: Vec3, dims: Vec3) -> None:
        super().__init__(f"Coordinate {coord} is outside a grid of size {dims}.")
        self.coord = coord
        self.dims = dims


class Cell(enum.IntEnum):
    """Integer codes stored in the grid array."""

    VOID = 0
    EMPTY = 1
    BLOCK = 2
    FOOD = 3


_GLYPHS: dict[Cell, str] = {
    Cell.VOID: "V",
    Cell.EMPTY: " ",
    Cell.BLOCK: "W",
    Cell.FOOD: "F",
}

# Glyph lookup indexed by cell code.
_GLYPH_TABLE = np.array([_GLYPHS[cell] for cell in sorted(Cell)])


class Grid:
    """NumPy-backed 3D voxel grid.

    Cells live in a flat array, x varying fastest, then y, then z, so the
    cell at ``(x, y, z)`` is stored at ``z*my*mx + y*mx + x``. ``VOID``
    marks space outside the playable level and reads back as ``None``,
    the same as a coordinate off the grid.
    """

    def __init__(self, dims: Vec3, cells: Iterable[Cell]) -> None:
        mx, my, mz = dims
        if mx < 1 or my < 1 or mz < 1:
            raise ValueError("Grid dimensions must be positive.")
        data = np.fromiter((int(c) for c in cells), dtype=np.int8)
        if data.size != mx * my * mz:
            raise ValueError(
                f"Expected {mx * my * mz} cells for a {dims} grid, "
                f"got {data.size}."
            )
        self.dims: Vec3 = (mx, my, mz)
        self.cells = data
        self._screen: tuple[np.ndarray, np.ndarray] | None = None

    @classmethod
    def empty(cls, dims: Vec3) -> Grid:
        """Create a grid whose every cell is ``EMPTY``."""
        mx, my, mz = dims
        return cls(dims, [Cell.EMPTY] * (mx * my * mz))

    @property
    def size(self) -> int:
        return int(self.cells.size)

    def in_bounds(self, coord: Vec3) -> bool:
        """Check whether a coordinate lies within the grid."""
        return in_bounds(coord, self.dims)

    def coord_to_index(self, coord: Vec3) -> int:
        """Return the flat index of an in-bounds coordinate."""
        if not self.in_bounds(coord):
            raise OutOfBoundsError(coord, self.dims)
        x, y, z = coord
        mx, my, _ = self.dims
        return z * my * mx + y * mx + x

    def index_to_coord(self, index: int) -> Vec3:
        """Return the coordinate stored at a flat index."""
        if not 0 <= index < self.size:
            raise IndexError(f"Cell index {index} out of range.")
        mx, my, _ = self.dims
        return index % mx, (index // mx) % my, index // (mx * my)

    def get(self, coord: Vec3) -> Cell | None:
        """Return the cell at *coord*, or ``None`` if off-grid or void."""
        if not self.in_bounds(coord):
            return None
        cell = Cell(int(self.cells[self.coord_to_index(coord)]))
        if cell == Cell.VOID:
            return None
        return cell

    def set(self, coord: Vec3, cell: Cell) -> None:
        """Set the cell at *coord*; the grid is untouched if out of bounds."""
        self.cells[self.coord_to_index(coord)] = cell

    def fill_layer(self, z: int, cell: Cell) -> None:
        """Set every cell of horizontal layer *z*."""
        mx, my, mz = self.dims
        if not 0 <= z < mz:
            raise OutOfBoundsError((0, 0, z), self.dims)
        layer = mx * my
        self.cells[z * layer:(z + 1) * layer] = cell

    def count(self, cell: Cell) -> int:
        """Return how many cells hold *cell*."""
        return int(np.count_nonzero(self.cells == cell))

    def screen_positions(self) -> tuple[np.ndarray, np.ndarray]:
        """Return the projected screen x and y of every cell, in storage order."""
        if self._screen is None:
            mx, my, _ = self.dims
            index = np.arange(self.size, dtype=np.int64)
            x = index % mx
            y = (index // mx) % my
            z = index // (mx * my)
            self._screen = to_screen((x, y, z))
        return self._screen

    def draw_arrays(
        self, skip_void: bool = False,
    ) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Return glyphs, screen x and screen y as parallel arrays.

        Entries follow storage order, so later cells are drawn over
        earlier ones that project to the same position.
        """
        sx, sy = self.screen_positions()
        glyphs = _GLYPH_TABLE[self.cells]
        if skip_void:
            keep = self.cells != Cell.VOID
            return glyphs[keep], sx[keep], sy[keep]
        return glyphs, sx, sy

    def draw(self, skip_void: bool = False) -> Iterator[tuple[str, ScreenPos]]:
        """Yield a ``(glyph, screen position)`` pair per stored cell."""
        glyphs, sx, sy = self.draw_arrays(skip_void=skip_void)
        return zip(glyphs.tolist(), zip(sx.tolist(), sy.tolist()))

    def to_dict(self) -> dict:
        """Serialize grid state to a dictionary."""
        return {
            "dims": list(self.dims),
            "cells": self.cells.tolist(),
        }
