"""Tests for directions and input resolution."""

from voxel_snake.direction import Direction, Key, from_key, resolve_input


class TestDirection:
    def test_apply(self):
        assert Direction.NORTH.apply((2, 2, 2)) == (2, 1, 2)
        assert Direction.SOUTH.apply((2, 2, 2)) == (2, 3, 2)
        assert Direction.WEST.apply((2, 2, 2)) == (1, 2, 2)
        assert Direction.EAST.apply((2, 2, 2)) == (3, 2, 2)
        assert Direction.UP.apply((2, 2, 2)) == (2, 2, 3)
        assert Direction.DOWN.apply((2, 2, 2)) == (2, 2, 1)

    def test_none_is_identity(self):
        assert Direction.NONE.apply((4, 5, 6)) == (4, 5, 6)


class TestFromKey:
    def test_arrows(self):
        assert from_key(Key.UP) == Direction.NORTH
        assert from_key(Key.DOWN) == Direction.SOUTH
        assert from_key(Key.LEFT) == Direction.WEST
        assert from_key(Key.RIGHT) == Direction.EAST

    def test_space_climbs(self):
        assert from_key(Key.SPACE) == Direction.UP

    def test_other_keys(self):
        assert from_key(Key.ESCAPE) == Direction.NONE
        assert from_key(Key.OTHER) == Direction.NONE


class TestResolveInput:
    def test_no_keys(self):
        assert resolve_input([]) == Direction.NONE

    def test_last_pressed_wins(self):
        assert resolve_input([Key.UP, Key.LEFT]) == Direction.WEST

    def test_trailing_non_directional_key_ignored(self):
        assert resolve_input([Key.RIGHT, Key.OTHER]) == Direction.EAST

    def test_only_non_directional(self):
        assert resolve_input([Key.OTHER, Key.ESCAPE]) == Direction.NONE

    def test_accepts_any_iterable(self):
        assert resolve_input(iter([Key.DOWN, Key.SPACE])) == Direction.UP
