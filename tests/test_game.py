import random
from collections import deque

import pytest

from termsnake.game import (
    Cell,
    Coordinate,
    MESSAGES,
    Direction,
    Reason,
    SnakeGame,
    Status,
)


def set_body(game, *cells, direction=None):
    game.snake.body = deque(Coordinate(x, y) for x, y in cells)
    if direction is not None:
        game.change_direction(direction)


def test_opposite_is_an_involution_without_fixed_points():
    for d in Direction:
        assert d.opposite().opposite() == d
        assert d.opposite() != d
    assert Direction.UP.opposite() == Direction.DOWN
    assert Direction.LEFT.opposite() == Direction.RIGHT


def test_new_game_layout():
    game = SnakeGame(board_size=5, seed=1)
    assert list(game.snake.body) == [Coordinate(0, 0), Coordinate(1, 0)]
    assert game.snake.head() == Coordinate(0, 0)
    assert game.current_direction() == Direction.LEFT
    assert game.freeze_time_ms == 200
    assert game.food_pos not in game.snake


@pytest.mark.parametrize("size", [-1, 0, 1])
def test_board_too_small_is_rejected(size):
    with pytest.raises(ValueError):
        SnakeGame(board_size=size)


def test_first_step_left_leaves_the_board():
    game = SnakeGame(board_size=5, seed=3)
    food = game.food_pos
    result = game.step()
    assert result.status == Status.LOST
    assert result.reason == Reason.OUT_OF_BOUNDS
    assert list(game.snake.body) == [Coordinate(0, 0), Coordinate(1, 0)]
    assert game.food_pos == food


def test_turning_back_into_the_neck_collides():
    game = SnakeGame(board_size=5, seed=3)
    food = game.food_pos
    game.change_direction(Direction.RIGHT)
    result = game.step()
    assert result.status == Status.LOST
    assert result.reason == Reason.SELF_COLLISION
    assert list(game.snake.body) == [Coordinate(0, 0), Coordinate(1, 0)]
    assert game.food_pos == food


@pytest.mark.parametrize(
    "cells, direction",
    [
        (((4, 2), (3, 2)), Direction.RIGHT),
        (((0, 2), (1, 2)), Direction.LEFT),
        (((2, 4), (2, 3)), Direction.UP),
        (((2, 0), (2, 1)), Direction.DOWN),
    ],
)
def test_every_edge_is_out_of_bounds(cells, direction):
    game = SnakeGame(board_size=5, seed=0)
    set_body(game, *cells, direction=direction)
    food = game.food_pos
    result = game.step()
    assert result.reason == Reason.OUT_OF_BOUNDS
    assert result.done
    assert result.snake == [Coordinate(*c) for c in cells]
    assert game.food_pos == food


def test_move_right_slides_body():
    game = SnakeGame(board_size=5, seed=0)
    set_body(game, (1, 0), (0, 0), direction=Direction.RIGHT)
    game.food_pos = Coordinate(4, 4)
    result = game.step()
    assert result.status == Status.CONTINUE
    assert result.reason is None
    assert not result.ate_food
    assert list(game.snake.body) == [Coordinate(2, 0), Coordinate(1, 0)]


def test_up_increases_y():
    game = SnakeGame(board_size=5, seed=0)
    game.food_pos = Coordinate(4, 4)
    game.change_direction(Direction.UP)
    game.step()
    assert list(game.snake.body) == [Coordinate(0, 1), Coordinate(0, 0)]


def test_eating_grows_and_moves_food():
    game = SnakeGame(board_size=5, seed=7)
    set_body(game, (1, 0), (0, 0), direction=Direction.RIGHT)
    game.food_pos = Coordinate(2, 0)
    result = game.step()
    assert result.ate_food
    assert result.status == Status.CONTINUE
    assert list(game.snake.body) == [Coordinate(2, 0), Coordinate(1, 0), Coordinate(0, 0)]
    assert game.food_pos not in game.snake


def test_moving_onto_the_tail_counts_as_collision():
    game = SnakeGame(board_size=5, seed=0)
    set_body(game, (1, 1), (1, 0), (0, 0), (0, 1), direction=Direction.LEFT)
    game.food_pos = Coordinate(4, 4)
    result = game.step()
    assert result.status == Status.LOST
    assert result.reason == Reason.SELF_COLLISION
    assert not result.ate_food
    expected = [Coordinate(1, 1), Coordinate(1, 0), Coordinate(0, 0), Coordinate(0, 1)]
    assert list(game.snake.body) == expected
    assert result.snake == expected
    assert game.food_pos == Coordinate(4, 4)
    assert game.current_direction() == Direction.LEFT


def test_winning_bite_does_not_grow():
    game = SnakeGame(board_size=2, seed=0)
    set_body(game, (0, 1), (0, 0), (1, 0), direction=Direction.RIGHT)
    game.food_pos = Coordinate(1, 1)
    result = game.step()
    assert result.status == Status.WON
    assert result.reason == Reason.BOARD_FULL
    assert result.ate_food
    assert len(game.snake) == 3
    assert game.done


def test_no_mutation_after_game_over():
    game = SnakeGame(board_size=2, seed=0)
    set_body(game, (0, 1), (0, 0), (1, 0), direction=Direction.RIGHT)
    game.food_pos = Coordinate(1, 1)
    first = game.step()
    game.change_direction(Direction.DOWN)
    again = game.step()
    assert again is first
    assert list(game.snake.body) == [Coordinate(0, 1), Coordinate(0, 0), Coordinate(1, 0)]


def test_two_by_two_board_can_be_won():
    game = SnakeGame(board_size=2, seed=5)
    # The only free cells are (0, 1) and (1, 1).
    game.food_pos = Coordinate(0, 1)
    game.change_direction(Direction.UP)
    assert game.step().status == Status.CONTINUE
    assert game.snake.head() == Coordinate(0, 1)
    assert game.food_pos == Coordinate(1, 1)
    game.change_direction(Direction.RIGHT)
    assert game.step().status == Status.WON


def test_place_food_on_full_board_raises():
    game = SnakeGame(board_size=2, seed=0)
    set_body(game, (0, 0), (1, 0), (1, 1), (0, 1))
    with pytest.raises(RuntimeError):
        game.place_food()


def test_is_reversal():
    game = SnakeGame(board_size=5, seed=0)
    game.change_direction(Direction.DOWN)
    assert game.is_reversal(Direction.UP)
    assert not game.is_reversal(Direction.LEFT)
    assert not game.is_reversal(Direction.DOWN)


def test_food_never_on_snake_during_random_play():
    game = SnakeGame(board_size=6, seed=11)
    chooser = random.Random(99)
    for _ in range(500):
        options = [d for d in Direction if not game.is_reversal(d)]
        game.change_direction(chooser.choice(options))
        before = len(game.snake)
        result = game.step()
        if result.done:
            break
        assert game.food_pos not in game.snake
        assert len(game.snake) == before + (1 if result.ate_food else 0)
        assert len(set(game.snake.body)) == len(game.snake)


def test_snapshot_marks_cells():
    game = SnakeGame(board_size=4, seed=0)
    set_body(game, (2, 1), (1, 1), (1, 2))
    game.food_pos = Coordinate(3, 3)
    grid = game.snapshot()
    assert grid.shape == (4, 4)
    assert grid[2, 1] == Cell.HEAD
    assert grid[1, 1] == Cell.BODY
    assert grid[1, 2] == Cell.BODY
    assert grid[3, 3] == Cell.FOOD
    assert (grid == Cell.EMPTY).sum() == 12


def test_terminal_messages_are_distinct():
    game = SnakeGame(board_size=5, seed=0)
    lost = game.step()
    assert lost.message == "GAME OVER (out of bounds)"
    assert len(set(MESSAGES.values())) == 3
