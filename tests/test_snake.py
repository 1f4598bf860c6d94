"""Tests for the Snake and Direction types."""

import pytest

from term_snake.snake import Direction, Snake


class TestDirection:
    def test_deltas(self):
        assert Direction.UP.step((2, 2)) == (2, 1)
        assert Direction.DOWN.step((2, 2)) == (2, 3)
        assert Direction.LEFT.step((2, 2)) == (1, 2)
        assert Direction.RIGHT.step((2, 2)) == (3, 2)

    def test_opposites(self):
        assert Direction.UP.opposite is Direction.DOWN
        assert Direction.DOWN.opposite is Direction.UP
        assert Direction.LEFT.opposite is Direction.RIGHT
        assert Direction.RIGHT.opposite is Direction.LEFT


class TestSnakeInit:
    def test_single_segment(self):
        snake = Snake([(3, 4)])
        assert len(snake) == 1
        assert snake.head == (3, 4)
        assert snake.tail == (3, 4)

    def test_empty_rejected(self):
        with pytest.raises(ValueError, match="at least 1"):
            Snake([])


class TestSnakeMovement:
    def test_advance_drops_tail(self):
        snake = Snake([(2, 2), (2, 3), (2, 4)])
        vacated = snake.advance((2, 1))
        assert vacated == (2, 4)
        assert list(snake) == [(2, 1), (2, 2), (2, 3)]

    def test_regrow_restores_tail(self):
        snake = Snake([(2, 2), (2, 3)])
        vacated = snake.advance((2, 1))
        snake.regrow(vacated)
        assert list(snake) == [(2, 1), (2, 2), (2, 3)]

    def test_body_without_head(self):
        snake = Snake([(1, 1), (1, 2), (2, 2)])
        assert snake.body_without_head() == {(1, 2), (2, 2)}

    def test_body_without_head_single(self):
        assert Snake([(1, 1)]).body_without_head() == set()


class TestSnakeSerialization:
    def test_to_dict(self):
        snake = Snake([(5, 5), (4, 5)])
        assert snake.to_dict() == {"body": [[5, 5], [4, 5]]}
