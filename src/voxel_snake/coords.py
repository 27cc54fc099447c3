"""Voxel coordinates and the isometric screen projection."""

from __future__ import annotations

Vec3 = tuple[int, int, int]
ScreenPos = tuple[int, int]


def in_bounds(coord: Vec3, dims: Vec3) -> bool:
    """Check whether every axis of *coord* lies in ``[0, dim)``."""
    x, y, z = coord
    mx, my, mz = dims
    return 0 <= x < mx and 0 <= y < my and 0 <= z < mz


def to_screen(coord: Vec3) -> ScreenPos:
    """Project a voxel onto the terminal.

    Each step along x moves the glyph down-right, each step along y moves
    it down-left, and each level of z lifts it one row up.
    """
    x, y, z = coord
    return (x - y) * 2, (x + y) - z
