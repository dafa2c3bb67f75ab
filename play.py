from __future__ import annotations

import curses
import sys
from typing import Optional, Sequence, Tuple

from termsnake.config import GameConfig, build_parser
from termsnake.controls import PROMPT, CursesInput, PygameInput
from termsnake.game import MESSAGES, SnakeGame, StepResult
from termsnake.render import CursesRenderer, PygameRenderer, render_text
from termsnake.session import OPPOSITE_MESSAGE, Interrupted, Session


class ScreenTooSmall(ValueError):
    pass


def new_game(config: GameConfig) -> SnakeGame:
    return SnakeGame(
        board_size=config.board_size,
        freeze_time_ms=config.freeze_time_ms,
        seed=config.seed,
    )


def screen_needed(board_size: int) -> Tuple[int, int]:
    """Rows and columns the terminal front-end writes to."""
    texts = [PROMPT, OPPOSITE_MESSAGE, *MESSAGES.values()]
    widest = max([2 * board_size - 1] + [len(text) for text in texts])
    # frame rows, a message line and the prompt line
    return board_size + 2, widest + 1


def play_terminal(config: GameConfig) -> StepResult:
    game = new_game(config)

    def run(screen) -> StepResult:
        rows, cols = screen.getmaxyx()
        need_rows, need_cols = screen_needed(game.board_size)
        if rows < need_rows or cols < need_cols:
            raise ScreenTooSmall(
                f"board size {game.board_size} needs a terminal of at least "
                f"{need_cols}x{need_rows}, this one is {cols}x{rows}"
            )
        curses.raw()
        session = Session(game, CursesInput(screen, game.freeze_time_ms), CursesRenderer(screen))
        return session.run()

    result = curses.wrapper(run)
    # curses clears the screen on exit, so repeat the last frame on stdout.
    print(render_text(game.snapshot()), end="")
    print(result.message)
    return result


def play_window(config: GameConfig) -> StepResult:
    game = new_game(config)
    renderer = PygameRenderer(game.board_size, cell_size=config.cell_size)
    try:
        session = Session(game, PygameInput(game.freeze_time_ms), renderer)
        return session.run()
    finally:
        renderer.close()


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = GameConfig.from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        if config.frontend == "window":
            play_window(config)
        else:
            play_terminal(config)
    except ScreenTooSmall as exc:
        parser.error(str(exc))
    except Interrupted:
        sys.exit(0)


if __name__ == "__main__":
    main()
