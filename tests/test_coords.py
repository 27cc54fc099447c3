"""Tests for coordinate helpers and the isometric projection."""

import pytest

from voxel_snake.coords import in_bounds, to_screen


class TestInBounds:
    def test_inside(self):
        assert in_bounds((0, 0, 0), (3, 3, 3))
        assert in_bounds((2, 2, 2), (3, 3, 3))

    @pytest.mark.parametrize(
        "coord", [(-1, 0, 0), (0, -1, 0), (0, 0, -1), (3, 0, 0), (0, 3, 0), (0, 0, 3)],
    )
    def test_outside(self, coord):
        assert not in_bounds(coord, (3, 3, 3))


class TestToScreen:
    def test_origin(self):
        assert to_screen((0, 0, 0)) == (0, 0)

    def test_x_moves_down_right(self):
        assert to_screen((1, 0, 0)) == (2, 1)

    def test_y_moves_down_left(self):
        assert to_screen((0, 1, 0)) == (-2, 1)

    def test_z_moves_up(self):
        assert to_screen((0, 0, 1)) == (0, -1)

    def test_combined(self):
        assert to_screen((3, 1, 2)) == (4, 2)
        assert to_screen((-1, 2, -3)) == (-6, 4)
