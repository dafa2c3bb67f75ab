from __future__ import annotations

import curses
import time
from enum import Enum
from typing import Callable, Optional, Protocol

from termsnake.game import Direction

try:
    import pygame  # type: ignore
except ImportError:  # pragma: no cover - pygame not installed in some envs
    pygame = None

PROMPT = "Please enter your move (w/a/s/d): "
POLL_MS = 10
CTRL_C = 3


class Intent(Enum):
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    INTERRUPT = "INTERRUPT"

    @property
    def direction(self) -> Optional[Direction]:
        if self is Intent.INTERRUPT:
            return None
        return Direction[self.value]


class InputAdapter(Protocol):
    def read(self) -> Intent: ...


class Debouncer:
    """Drops key events that arrive within ``freeze_time_ms`` of the last one.

    The window restarts on ``arm()`` (a new read begins) and on every event
    that gets through, whether or not the key means anything.
    """

    def __init__(self, freeze_time_ms: int, clock: Callable[[], float] = time.monotonic) -> None:
        self.freeze = freeze_time_ms / 1000.0
        self.clock = clock
        self.last = clock()

    def arm(self) -> None:
        self.last = self.clock()

    def accept(self) -> bool:
        now = self.clock()
        if now - self.last < self.freeze:
            return False
        self.last = now
        return True


CURSES_KEYS = {
    ord("w"): Intent.UP,
    ord("a"): Intent.LEFT,
    ord("s"): Intent.DOWN,
    ord("d"): Intent.RIGHT,
    curses.KEY_UP: Intent.UP,
    curses.KEY_LEFT: Intent.LEFT,
    curses.KEY_DOWN: Intent.DOWN,
    curses.KEY_RIGHT: Intent.RIGHT,
    CTRL_C: Intent.INTERRUPT,
}


class CursesInput:
    """Blocking key reader on a curses window.

    The window should be in raw mode so Ctrl+C arrives as a key code.
    """

    def __init__(
        self,
        screen,
        freeze_time_ms: int = 200,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.screen = screen
        self.debouncer = Debouncer(freeze_time_ms, clock)

    def read(self) -> Intent:
        self.screen.addstr(PROMPT)
        self.screen.refresh()
        self.screen.timeout(POLL_MS)
        self.debouncer.arm()

        while True:
            try:
                key = self.screen.getch()
            except KeyboardInterrupt:
                return Intent.INTERRUPT
            if key == -1:
                continue
            if not self.debouncer.accept():
                continue
            intent = CURSES_KEYS.get(key)
            if intent is None:
                continue
            self.screen.clear()
            return intent


def pygame_intent(key: int, mods: int = 0) -> Optional[Intent]:
    if pygame is None:
        raise ImportError("pygame is required for the window front-end")
    if key == pygame.K_c and mods & pygame.KMOD_CTRL:
        return Intent.INTERRUPT
    return {
        pygame.K_w: Intent.UP,
        pygame.K_a: Intent.LEFT,
        pygame.K_s: Intent.DOWN,
        pygame.K_d: Intent.RIGHT,
        pygame.K_UP: Intent.UP,
        pygame.K_LEFT: Intent.LEFT,
        pygame.K_DOWN: Intent.DOWN,
        pygame.K_RIGHT: Intent.RIGHT,
    }.get(key)


class PygameInput:
    def __init__(
        self,
        freeze_time_ms: int = 200,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if pygame is None:
            raise ImportError("pygame is required for the window front-end")
        self.debouncer = Debouncer(freeze_time_ms, clock)
        self._clock = pygame.time.Clock()

    def read(self) -> Intent:
        print(PROMPT, end="", flush=True)
        self.debouncer.arm()

        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return Intent.INTERRUPT
                if event.type != pygame.KEYDOWN:
                    continue
                if not self.debouncer.accept():
                    continue
                intent = pygame_intent(event.key, event.mod)
                if intent is not None:
                    print()
                    return intent
            self._clock.tick(1000 // POLL_MS)
