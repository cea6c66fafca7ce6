"""The screen that hosts one run of the game."""

from __future__ import annotations

import random
from pathlib import Path
from typing import Callable

import pygame

from muffet.game import Game

_EXIT = -1
_DEFEAT = 3

GameFactory = Callable[[Path, pygame.Surface], Game]


class GameScreen:
    """Runs a fresh game each time it is shown and remembers the final time."""

    def __init__(
        self,
        data_dir: str | Path,
        window: pygame.Surface,
        rng: random.Random | None = None,
        game_factory: GameFactory | None = None,
    ) -> None:
        self.data_dir = Path(data_dir)
        self.window = window
        self.rng = rng
        self._game_factory = game_factory
        self.game: Game | None = None
        self.time = ""
        self._held: set[int] = set()

    def _new_game(self) -> Game:
        if self._game_factory is not None:
            return self._game_factory(self.data_dir, self.window)
        return Game(self.data_dir, self.window, self.rng)

    def handle_key(self, key: int) -> int | None:
        """Return the next screen for a key press, or None to keep playing."""
        if key == pygame.K_ESCAPE:
            return _EXIT
        return None

    def run(self) -> int:
        """Play until the heart has vanished, the window closes or Escape is pressed."""
        self.game = self._new_game()
        self._held.clear()
        clock = pygame.time.Clock()
        with self.game as game:
            while True:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        return _EXIT
                    if event.type == pygame.KEYDOWN:
                        next_screen = self.handle_key(event.key)
                        if next_screen is not None:
                            return next_screen
                        self._held.add(event.key)
                    elif event.type == pygame.KEYUP:
                        self._held.discard(event.key)

                if game.switch_to_defeat_screen:
                    self.time = game.final_time
                    return _DEFEAT

                game.update(self._held)
                game.render()
                clock.tick(60)