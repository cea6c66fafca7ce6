import os

import pygame
import pytest

from muffet.defeat_menu import DefeatMenu, DefeatSelection

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


@pytest.fixture
def menu(tmp_path, window):
    return DefeatMenu(tmp_path, window)


def test_starts_on_retry(menu):
    assert menu.selected == DefeatSelection.RETRY


def test_down_selects_exit_and_stays_there(menu):
    assert menu.handle_key(pygame.K_s) is None
    assert menu.selected == DefeatSelection.EXIT
    menu.handle_key(pygame.K_DOWN)
    assert menu.selected == DefeatSelection.EXIT


def test_up_selects_retry_and_stays_there(menu):
    menu.handle_key(pygame.K_DOWN)
    assert menu.handle_key(pygame.K_w) is None
    assert menu.selected == DefeatSelection.RETRY
    menu.handle_key(pygame.K_UP)
    assert menu.selected == DefeatSelection.RETRY


def test_enter_on_retry_starts_game(menu):
    assert menu.handle_key(pygame.K_RETURN) == 1


def test_enter_on_exit_returns_to_menu(menu):
    menu.handle_key(pygame.K_DOWN)
    assert menu.handle_key(pygame.K_RETURN) == 0


def test_unrelated_key_changes_nothing(menu):
    assert menu.handle_key(pygame.K_x) is None
    assert menu.selected == DefeatSelection.RETRY


def test_set_time_shows_given_time(menu):
    menu.set_time("01:02:03")
    assert menu.final_time == "01:02:03"


def test_final_time_defaults_to_zero(menu):
    assert menu.final_time == "00:00:00"


def test_icon_follows_selection(menu):
    retry_y = menu.icon_position[1]
    menu.handle_key(pygame.K_DOWN)
    exit_y = menu.icon_position[1]
    assert exit_y > retry_y
    assert menu.icon_position[0] < menu.text_positions[DefeatSelection.EXIT][0]


def test_title_is_above_menu_entries(menu):
    bottom_title_y = menu.title_positions[1][1]
    assert menu.title_positions[0][1] < bottom_title_y
    assert bottom_title_y < menu.text_positions[DefeatSelection.RETRY][1]
    assert menu.text_positions[DefeatSelection.RETRY][1] < menu.text_positions[DefeatSelection.EXIT][1]


def test_run_returns_exit_on_close(menu):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert menu.run() == -1


def test_run_resets_selection_and_retries(menu):
    menu.selected = DefeatSelection.EXIT
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN))
    assert menu.run() == 1


def test_run_down_then_enter_returns_to_menu(menu):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_DOWN))
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN))
    assert menu.run() == 0
    assert menu.selected == DefeatSelection.EXIT