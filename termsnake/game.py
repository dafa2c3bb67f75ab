from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Deque, List, Optional

import numpy as np


@dataclass(frozen=True)
class Coordinate:
    x: int
    y: int


class Direction(Enum):
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

# UP grows y, so y = 0 is the bottom row on screen.
OFFSETS = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


class Cell(IntEnum):
    EMPTY = 0
    BODY = 1
    HEAD = 2
    FOOD = 3


class Status(Enum):
    CONTINUE = "continue"
    LOST = "lost"
    WON = "won"


class Reason(Enum):
    OUT_OF_BOUNDS = "out of bounds"
    SELF_COLLISION = "collision with the snake"
    BOARD_FULL = "board full"


MESSAGES = {
    Reason.OUT_OF_BOUNDS: "GAME OVER (out of bounds)",
    Reason.SELF_COLLISION: "GAME OVER (collision with the snake)",
    Reason.BOARD_FULL: "WIN!",
}


@dataclass
class StepResult:
    status: Status
    reason: Optional[Reason]
    ate_food: bool
    snake: List[Coordinate]
    food: Coordinate

    @property
    def done(self) -> bool:
        return self.status is not Status.CONTINUE

    @property
    def message(self) -> Optional[str]:
        if self.reason is None:
            return None
        return MESSAGES[self.reason]


class Snake:
    """Body of the snake, head first, plus its heading."""

    def __init__(self, board_size: int) -> None:
        if board_size < 2:
            raise ValueError(f"board_size must be at least 2, got {board_size}")
        self.direction = Direction.LEFT
        self.body: Deque[Coordinate] = deque()
        self.body.append(Coordinate(0, 0))
        self.body.append(Coordinate(1, 0))

    def head(self) -> Coordinate:
        return self.body[0]

    def remove_tail(self) -> None:
        self.body.pop()

    def __len__(self) -> int:
        return len(self.body)

    def __contains__(self, pos: object) -> bool:
        return pos in self.body


class SnakeGame:
    def __init__(
        self,
        board_size: int = 5,
        freeze_time_ms: int = 200,
        seed: Optional[int] = None,
    ) -> None:
        self.board_size = board_size
        self.freeze_time_ms = freeze_time_ms
        self.random = random.Random(seed)

        self.snake = Snake(board_size)
        self.food_pos = Coordinate(0, 0)
        self._final: Optional[StepResult] = None
        self.place_food()

    @property
    def done(self) -> bool:
        return self._final is not None

    def current_direction(self) -> Direction:
        return self.snake.direction

    def change_direction(self, new_dir: Direction) -> None:
        self.snake.direction = new_dir

    def is_reversal(self, new_dir: Direction) -> bool:
        return new_dir.opposite() == self.snake.direction

    def place_food(self) -> None:
        available = [
            Coordinate(x, y)
            for x in range(self.board_size)
            for y in range(self.board_size)
            if Coordinate(x, y) not in self.snake
        ]
        if not available:
            raise RuntimeError("no free cell left for food")
        self.food_pos = self.random.choice(available)

    def _next_head(self) -> Optional[Coordinate]:
        head = self.snake.head()
        dx, dy = OFFSETS[self.snake.direction]
        x, y = head.x + dx, head.y + dy
        if x < 0 or x >= self.board_size or y < 0 or y >= self.board_size:
            return None
        return Coordinate(x, y)

    def step(self) -> StepResult:
        """Advance the game by one tick.

        Collisions are checked against the whole pre-move body, tail
        included. The winning bite ends the game without growing the snake.
        """
        if self._final is not None:
            return self._final

        next_head = self._next_head()
        if next_head is None:
            return self._finish(Status.LOST, Reason.OUT_OF_BOUNDS)
        if next_head in self.snake:
            return self._finish(Status.LOST, Reason.SELF_COLLISION)

        ate_food = next_head == self.food_pos
        if ate_food:
            if len(self.snake) + 1 >= self.board_size * self.board_size:
                return self._finish(Status.WON, Reason.BOARD_FULL, ate_food=True)
            self.snake.body.appendleft(next_head)
            self.place_food()
        else:
            self.snake.remove_tail()
            self.snake.body.appendleft(next_head)

        return self._result(Status.CONTINUE, None, ate_food)

    def snapshot(self) -> np.ndarray:
        grid = np.full((self.board_size, self.board_size), Cell.EMPTY, dtype=np.int8)
        for pos in self.snake.body:
            grid[pos.x, pos.y] = Cell.BODY
        head = self.snake.head()
        grid[head.x, head.y] = Cell.HEAD
        grid[self.food_pos.x, self.food_pos.y] = Cell.FOOD
        return grid

    def _finish(self, status: Status, reason: Reason, ate_food: bool = False) -> StepResult:
        self._final = self._result(status, reason, ate_food)
        return self._final

    def _result(self, status: Status, reason: Optional[Reason], ate_food: bool) -> StepResult:
        return StepResult(
            status=status,
            reason=reason,
            ate_food=ate_food,
            snake=list(self.snake.body),
            food=self.food_pos,
        )
