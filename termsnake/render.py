from __future__ import annotations

from typing import Optional, Protocol

import numpy as np

from termsnake.game import Cell

try:
    import pygame  # type: ignore
except ImportError:  # pragma: no cover - pygame not installed in some envs
    pygame = None

SYMBOLS = {
    Cell.EMPTY: "*",
    Cell.BODY: "S",
    Cell.HEAD: "H",
    Cell.FOOD: "F",
}

COLORS = {
    Cell.EMPTY: (20, 20, 20),
    Cell.BODY: (0, 150, 0),
    Cell.HEAD: (0, 200, 0),
    Cell.FOOD: (200, 50, 50),
}


def screen_rows(grid: np.ndarray) -> np.ndarray:
    """Turn an ``[x, y]`` grid into screen rows, highest y first."""
    return np.flipud(grid.T)


def render_text(grid: np.ndarray) -> str:
    lines = [" ".join(SYMBOLS[Cell(int(v))] for v in row) for row in screen_rows(grid)]
    return "\n".join(lines) + "\n"


class Renderer(Protocol):
    def draw(self, grid: np.ndarray) -> None: ...

    def show_message(self, text: str) -> None: ...


class CursesRenderer:
    """Draws frames on a curses window; messages appear under the next frame."""

    def __init__(self, screen) -> None:
        self.screen = screen
        self._notice: Optional[str] = None

    def draw(self, grid: np.ndarray) -> None:
        self.screen.erase()
        self.screen.addstr(0, 0, render_text(grid))
        if self._notice:
            self.screen.addstr(self._notice + "\n")
            self._notice = None
        self.screen.refresh()

    def show_message(self, text: str) -> None:
        self._notice = text


class PygameRenderer:
    def __init__(self, board_size: int, cell_size: int = 40) -> None:
        if pygame is None:
            raise ImportError("pygame is required for rendering")

        pygame.init()
        self.board_size = board_size
        self.cell_size = cell_size
        side = board_size * cell_size
        self._window = pygame.display.set_mode((side, side))
        pygame.display.set_caption("Snake")

    def draw(self, grid: np.ndarray) -> None:
        self._window.fill(COLORS[Cell.EMPTY])
        for row, cells in enumerate(screen_rows(grid)):
            for col, value in enumerate(cells):
                rect = pygame.Rect(
                    col * self.cell_size,
                    row * self.cell_size,
                    self.cell_size,
                    self.cell_size,
                )
                cell = Cell(int(value))
                if cell is Cell.EMPTY:
                    pygame.draw.rect(self._window, (30, 30, 30), rect, 1)
                else:
                    pygame.draw.rect(self._window, COLORS[cell], rect)
        pygame.display.flip()

    def show_message(self, text: str) -> None:
        print(text)
        pygame.display.set_caption(f"Snake - {text}")

    def close(self) -> None:
        if pygame:
            pygame.quit()
