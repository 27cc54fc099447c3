"""Tests for the Snake module."""

import pytest

from voxel_snake.direction import Direction
from voxel_snake.snake import Snake


class TestSnakeInit:
    def test_default_creation(self):
        snake = Snake((1, 2, 3))
        assert snake.head == (1, 2, 3)
        assert len(snake) == 1
        assert snake.direction == Direction.NONE

    def test_empty_body_has_no_head(self):
        snake = Snake((0, 0, 0))
        snake.body.clear()
        with pytest.raises(RuntimeError, match="empty"):
            snake.head


class TestSnakeMovement:
    def test_move_without_growth(self):
        snake = Snake((0, 0, 1))
        snake.move_to((1, 0, 1), growing=True)
        vacated = snake.move_to((2, 0, 1))
        assert list(snake.body) == [(2, 0, 1), (1, 0, 1)]
        assert vacated == (0, 0, 1)

    def test_move_with_growth(self):
        snake = Snake((0, 0, 1))
        vacated = snake.move_to((1, 0, 1), growing=True)
        assert snake.head == (1, 0, 1)
        assert len(snake) == 2
        assert vacated is None

    def test_move_can_jump(self):
        # Nothing ties the new head to the old one.
        snake = Snake((0, 0, 0))
        snake.move_to((4, 4, 4))
        assert list(snake.body) == [(4, 4, 4)]


class TestSnakeSelfIntersection:
    def test_unique_body(self):
        snake = Snake((0, 0, 1))
        snake.move_to((1, 0, 1), growing=True)
        snake.move_to((1, 1, 1), growing=True)
        assert not snake.is_self_intersecting()

    def test_repeated_coordinate(self):
        snake = Snake((0, 0, 1))
        snake.move_to((1, 0, 1), growing=True)
        snake.move_to((0, 0, 1), growing=True)
        assert snake.is_self_intersecting()

    def test_repeat_away_from_head(self):
        snake = Snake((5, 5, 1))
        snake.body.extend([(5, 6, 1), (5, 7, 1), (5, 6, 1)])
        assert snake.is_self_intersecting()


class TestSnakeDrawing:
    def test_one_glyph_per_segment_head_first(self):
        snake = Snake((0, 0, 1))
        snake.move_to((1, 0, 1), growing=True)
        assert list(snake.draw()) == [("S", (2, 0)), ("S", (0, -1))]


class TestSnakeSerialization:
    def test_to_dict(self):
        snake = Snake((0, 0, 1))
        snake.direction = Direction.EAST
        snake.move_to((1, 0, 1), growing=True)
        d = snake.to_dict()
        assert d["body"] == [[1, 0, 1], [0, 0, 1]]
        assert d["direction"] == "east"
