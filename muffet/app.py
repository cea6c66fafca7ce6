"""The window and the loop switching between the screens."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Protocol

import pygame

from muffet.defeat_menu import DefeatMenu
from muffet.game_screen import GameScreen
from muffet.menu import Menu
from muffet.scores import ScoresScreen

WINDOW_SIZE = (1000, 750)
TITLE = "Muffet Game"

MENU_SCREEN = 0
GAME_SCREEN = 1
SCORES_SCREEN = 2
DEFEAT_SCREEN = 3


class Screen(Protocol):
    """A screen runs until it returns the index of the next one, or a negative number to quit."""

    def run(self) -> int: ...


def data_dir_from(program_path: str) -> str:
    """Return the data directory, one level above the directory holding the program."""
    cut = max(program_path.rfind("/"), program_path.rfind(os.sep))
    if cut < 0:
        raise ValueError(f"program path has no directory part: {program_path!r}")
    return program_path[:cut] + "/../"


def _default_data_dir() -> str:
    try:
        return data_dir_from(sys.argv[0])
    except ValueError:
        return "./"


def _set_window_icon(data_dir: Path) -> None:
    try:
        image = pygame.image.load(str(data_dir / "textures" / "game_icon.png"))
    except (pygame.error, OSError):
        print("IMAGE LOADING ERROR::MAIN::game_icon.png")
        return
    pygame.display.set_icon(image)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run the screens until one asks to quit."""
    parser = argparse.ArgumentParser(prog="muffet", description=TITLE)
    parser.add_argument("data_dir", nargs="?", help="directory holding textures, fonts and sounds")
    args = parser.parse_args(argv)
    data_dir = Path(args.data_dir if args.data_dir is not None else _default_data_dir())

    pygame.init()
    try:
        window = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(TITLE)
        _set_window_icon(data_dir)

        menu = Menu(data_dir, window)
        game_screen = GameScreen(data_dir, window)
        scores_screen = ScoresScreen(data_dir, window)
        defeat_menu = DefeatMenu(data_dir, window)
        screens: list[Screen] = [menu, game_screen, scores_screen, defeat_menu]

        current = MENU_SCREEN
        while current >= 0:
            if current == DEFEAT_SCREEN:
                latest = game_screen.time
                defeat_menu.set_time(latest)
                scores_screen.deliver_time(latest)
            current = screens[current].run()
    finally:
        pygame.quit()
    return 0