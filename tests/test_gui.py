import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from muffet.gui import Gui, format_time, hp_string

FRAME = 10
FRAMES = 4


@pytest.fixture
def data_dir(tmp_path):
    pygame.init()
    textures = tmp_path / "textures"
    textures.mkdir()
    sheet = pygame.Surface((FRAME * FRAMES, FRAME))
    sheet.fill((200, 50, 50))
    pygame.image.save(sheet, str(textures / "muffet_spriteSheet.png"))
    return tmp_path


@pytest.fixture
def window():
    pygame.init()
    return pygame.Surface((1000, 750))


@pytest.fixture
def gui(data_dir, window):
    return Gui(data_dir, window)


def test_format_time_zero():
    assert format_time(0) == "00:00:00"


@pytest.mark.parametrize("ms", [0, 9, 10, 999, 1000, 59999, 60000, 61234, 3599990])
def test_format_time_round_trip(ms):
    minutes, seconds, centis = (int(part) for part in format_time(ms).split(":"))
    assert 0 <= seconds < 60
    assert 0 <= centis < 100
    assert minutes * 60000 + seconds * 1000 + centis * 10 == ms - ms % 10


def test_format_time_has_two_digit_fields():
    parts = format_time(5).split(":")
    assert [len(p) for p in parts] == [2, 2, 2]


def test_hp_string_full():
    assert hp_string(20) == "20 / 20"


def test_hp_string_pads_single_digit():
    assert hp_string(8) == "08 / 20"


@pytest.mark.parametrize("hp", [0, 4, 10, 12, 16, 20])
def test_hp_string_suffix_and_value(hp):
    text = hp_string(hp)
    assert text.endswith(" / 20")
    assert int(text.split(" / ")[0]) == hp


def test_initial_hp_text_is_full(gui):
    assert gui.hp_text == hp_string(20)


def test_set_hp_updates_text(gui):
    gui.set_hp(12)
    assert gui.hp_text == hp_string(12)


def test_timer_starts_at_zero(gui):
    assert gui.final_time == "00:00:00"


def test_update_visual_timer(gui):
    gui.update_visual_timer(61234)
    assert gui.final_time == format_time(61234)


def test_sprite_size_is_scaled_frame(gui):
    assert gui.sprite_width == FRAME * 3
    assert gui.sprite_height == gui.sprite_width


def test_frame_count_from_sheet(gui):
    assert gui.num_frames == FRAMES
    assert gui.frame_rect == (0, 0, FRAME, FRAME)


def test_update_sprite_waits_for_frame_duration(gui):
    gui.update_sprite(0.01)
    assert gui.current_frame == 0


def test_update_sprite_advances_and_wraps(gui):
    seen = []
    for _ in range(FRAMES):
        gui.update_sprite(0.03)
        seen.append(gui.current_frame)
    assert seen == [1, 2, 3, 0]
    assert gui.frame_rect[0] == 0


def test_set_frame_moves_rect(gui):
    gui.set_frame(2)
    assert gui.frame_rect == (2 * FRAME, 0, FRAME, FRAME)


def test_hp_bar_position_moves_text(gui):
    gui.set_hp_bar_position(100.0, 200.0)
    assert gui.hp_bar_position == (100.0, 200.0)
    x, y = gui.hp_text_position
    assert x > 100.0 and y > 200.0


def test_hp_remaining_size(gui):
    gui.set_hp_remaining_size(17.5, 30.0)
    assert gui.hp_remaining_size == (17.5, 30.0)


def test_player_name_size_positive(gui):
    assert gui.player_name_width > 0
    assert gui.player_name_height > 0


def test_render_draws_sprite_and_hp_bar(gui, window):
    gui.set_sprite_position(10, 10)
    gui.set_hp_bar_position(100, 100)
    gui.render()
    half = int(gui.sprite_width) // 2
    assert window.get_at((10 + half, 10 + half))[:3] == (200, 50, 50)
    bar_x, bar_y = gui.hp_bar_position
    assert window.get_at((int(bar_x) + 5, int(bar_y) + 5))[:3] == (255, 255, 0)


def test_missing_assets_are_reported(tmp_path, window, capsys):
    gui = Gui(tmp_path, window)
    out = capsys.readouterr().out
    assert "TEXTURE LOADING ERROR::GUI" in out
    assert gui.num_frames == 1
    gui.play_hit_sound()
    gui.play_music()
    gui.update_sprite(0.05)
    assert gui.current_frame == 0