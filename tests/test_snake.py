"""Tests for the Snake module."""

import pytest

from ai_snake.grid import Coordinate
from ai_snake.snake import Direction, Snake


class TestDirection:
    def test_unit_vectors(self):
        assert Direction.UP.value == (0, -1)
        assert Direction.DOWN.value == (0, 1)
        assert Direction.LEFT.value == (-1, 0)
        assert Direction.RIGHT.value == (1, 0)

    def test_opposites(self):
        for direction in Direction:
            dx, dy = direction.value
            assert direction.opposite.value == (-dx, -dy)
            assert direction.opposite.opposite is direction


class TestSnake:
    def test_single_segment(self):
        snake = Snake([(7, 7)])
        assert snake.head == (7, 7)
        assert len(snake) == 1
        assert isinstance(snake.head, Coordinate)

    def test_empty_rejected(self):
        with pytest.raises(ValueError, match="at least 1"):
            Snake([])

    def test_advance_without_growth(self):
        snake = Snake([(5, 5), (4, 5)])
        vacated = snake.advance(Coordinate(6, 5))
        assert snake.segments() == ((6, 5), (5, 5))
        assert vacated == (4, 5)

    def test_advance_with_growth(self):
        snake = Snake([(5, 5)])
        vacated = snake.advance(Coordinate(6, 5), grow=True)
        assert snake.segments() == ((6, 5), (5, 5))
        assert vacated is None

    def test_occupies(self):
        snake = Snake([(5, 5), (4, 5)])
        assert snake.occupies((4, 5))
        assert not snake.occupies((3, 5))

    def test_segments_is_a_copy(self):
        snake = Snake([(5, 5)])
        segments = snake.segments()
        snake.advance(Coordinate(6, 5), grow=True)
        assert segments == ((5, 5),)
