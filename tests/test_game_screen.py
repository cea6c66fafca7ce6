import os

import pygame
import pytest

from muffet.game import Game
from muffet.game_screen import GameScreen

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


@pytest.fixture
def window():
    pygame.display.init()
    pygame.font.init()
    surface = pygame.display.set_mode((1000, 750))
    pygame.event.clear()
    yield surface
    pygame.quit()


def test_time_is_empty_before_any_run(tmp_path):
    screen = GameScreen(tmp_path, pygame.Surface((1000, 750)))
    assert screen.time == ""


def test_escape_leaves_the_application(tmp_path):
    screen = GameScreen(tmp_path, pygame.Surface((1000, 750)))
    assert screen.handle_key(pygame.K_ESCAPE) == -1


@pytest.mark.parametrize("key", [pygame.K_a, pygame.K_w, pygame.K_RETURN])
def test_other_keys_keep_playing(tmp_path, key):
    screen = GameScreen(tmp_path, pygame.Surface((1000, 750)))
    assert screen.handle_key(key) is None


def test_run_returns_exit_on_close(tmp_path, window):
    screen = GameScreen(tmp_path, window)
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert screen.run() == -1


def test_run_returns_exit_on_escape(tmp_path, window):
    screen = GameScreen(tmp_path, window)
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    assert screen.run() == -1


def test_run_switches_to_defeat_screen_with_final_time(tmp_path, window):
    created = []

    def factory(data_dir, surface):
        game = Game(data_dir, surface)
        game.switch_to_defeat_screen = True
        created.append(game)
        return game

    screen = GameScreen(tmp_path, window, game_factory=factory)
    assert screen.run() == 3
    assert screen.time == created[0].final_time
    assert created[0].spawner.enemies == []


def test_each_run_starts_a_new_game(tmp_path, window):
    created = []

    def factory(data_dir, surface):
        game = Game(data_dir, surface)
        game.switch_to_defeat_screen = True
        created.append(game)
        return game

    screen = GameScreen(tmp_path, window, game_factory=factory)
    screen.run()
    screen.run()
    assert len(created) == 2
    assert created[0] is not created[1]
    assert screen.game is created[1]