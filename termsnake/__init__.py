from termsnake.game import (
    Cell,
    Coordinate,
    Direction,
    Reason,
    Snake,
    SnakeGame,
    Status,
    StepResult,
)

__all__ = [
    "Cell",
    "Coordinate",
    "Direction",
    "Reason",
    "Snake",
    "SnakeGame",
    "Status",
    "StepResult",
]
