from __future__ import annotations

from termsnake.controls import InputAdapter, Intent
from termsnake.game import SnakeGame, StepResult
from termsnake.render import Renderer

OPPOSITE_MESSAGE = "Opposite direction!"


class Interrupted(Exception):
    """The player asked to quit mid-game."""


class Session:
    def __init__(self, game: SnakeGame, controls: InputAdapter, renderer: Renderer) -> None:
        self.game = game
        self.controls = controls
        self.renderer = renderer

    def run(self) -> StepResult:
        """Play until the game is won or lost.

        A reversal into the snake's own neck is ignored and the player is
        asked again; no tick happens for it. Raises ``Interrupted`` when the
        input adapter reports a quit.
        """
        while True:
            self.renderer.draw(self.game.snapshot())

            intent = self.controls.read()
            if intent is Intent.INTERRUPT:
                raise Interrupted()

            direction = intent.direction
            if self.game.is_reversal(direction):
                self.renderer.show_message(OPPOSITE_MESSAGE)
                continue
            self.game.change_direction(direction)

            result = self.game.step()
            if result.done:
                self.renderer.show_message(result.message)
                self.renderer.draw(self.game.snapshot())
                return result
