from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Optional

FRONTENDS = ("terminal", "window")


@dataclass
class GameConfig:
    board_size: int = 5
    freeze_time_ms: int = 200
    seed: Optional[int] = None
    frontend: str = "terminal"
    cell_size: int = 40  # pixels, window front-end only

    def validate(self) -> GameConfig:
        if self.board_size < 2:
            raise ValueError(f"board size must be at least 2, got {self.board_size}")
        if self.freeze_time_ms < 0:
            raise ValueError(f"freeze time must be non-negative, got {self.freeze_time_ms}")
        if self.frontend not in FRONTENDS:
            raise ValueError(f"unknown frontend {self.frontend!r}, expected one of {FRONTENDS}")
        if self.cell_size <= 0:
            raise ValueError(f"cell size must be positive, got {self.cell_size}")
        return self

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> GameConfig:
        return cls(
            board_size=args.size,
            freeze_time_ms=args.freeze_ms,
            seed=args.seed,
            frontend="window" if args.window else "terminal",
            cell_size=args.cell_size,
        ).validate()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Snake in the terminal")
    parser.add_argument(
        "--size",
        type=int,
        default=5,
        help="Board side length (>= 2, and the board must fit in the terminal)",
    )
    parser.add_argument(
        "--freeze-ms",
        type=int,
        default=200,
        help="Ignore key presses arriving sooner than this after the prompt",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement")
    parser.add_argument("--window", action="store_true", help="Play in a pygame window instead")
    parser.add_argument("--cell-size", type=int, default=40)
    return parser
