import pygame
import pytest

from muffet.scores import (
    ScoresScreen,
    ensure_score_file,
    merge_highscores,
    read_scores,
    write_scores,
)


def test_ensure_creates_default_file(tmp_path):
    path = tmp_path / "scores.txt"
    assert ensure_score_file(path) is True
    assert read_scores(path) == ["00:00:00"] * 6


def test_ensure_leaves_existing_file(tmp_path):
    path = tmp_path / "scores.txt"
    path.write_text("01:02:03\n")
    assert ensure_score_file(path) is False
    assert read_scores(path) == ["01:02:03"]


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_scores(tmp_path / "absent.txt")


def test_merge_inserts_better_time():
    result = merge_highscores(["00:00:00"] * 5, "00:12:34")
    assert result == ["00:12:34"] + ["00:00:00"] * 4


def test_merge_keeps_order_and_drops_lowest():
    scores = ["05:00:00", "04:00:00", "03:00:00", "02:00:00", "01:00:00"]
    result = merge_highscores(scores, "03:30:00")
    assert result == ["05:00:00", "04:00:00", "03:30:00", "03:00:00", "02:00:00"]


def test_merge_ignores_worse_time():
    scores = ["05:00:00", "04:00:00", "03:00:00", "02:00:00", "01:00:00"]
    assert merge_highscores(scores, "00:30:00") == scores


def test_merge_does_not_mutate_input():
    scores = ["00:00:00"] * 5
    merge_highscores(scores, "00:10:00")
    assert scores == ["00:00:00"] * 5


def test_write_read_round_trip(tmp_path):
    path = tmp_path / "scores.txt"
    highscores = ["00:09:00", "00:08:00", "00:07:00", "00:06:00", "00:05:00"]
    write_scores(path, "00:01:00", highscores)
    assert read_scores(path) == ["00:01:00", *highscores]


@pytest.fixture
def screen(tmp_path):
    return ScoresScreen(tmp_path, pygame.Surface((1000, 750)))


def test_screen_creates_score_file(screen, tmp_path):
    assert read_scores(tmp_path / "scores.txt") == ["00:00:00"] * 6
    assert screen.latest == "00:00:00"
    assert screen.highscores == ["00:00:00"] * 5


def test_screen_reads_existing_scores(tmp_path):
    highscores = ["00:09:00", "00:08:00", "00:07:00", "00:06:00", "00:05:00"]
    write_scores(tmp_path / "scores.txt", "00:01:00", highscores)
    screen = ScoresScreen(tmp_path, pygame.Surface((1000, 750)))
    assert screen.latest == "00:01:00"
    assert screen.highscores == highscores


def test_deliver_time_updates_and_saves(screen, tmp_path):
    screen.deliver_time("00:20:50")
    assert screen.latest == "00:20:50"
    assert screen.highscores[0] == "00:20:50"
    assert read_scores(tmp_path / "scores.txt") == ["00:20:50", "00:20:50"] + ["00:00:00"] * 4


def test_deliver_worse_time_only_updates_latest(tmp_path):
    highscores = ["00:09:00", "00:08:00", "00:07:00", "00:06:00", "00:05:00"]
    write_scores(tmp_path / "scores.txt", "00:01:00", highscores)
    screen = ScoresScreen(tmp_path, pygame.Surface((1000, 750)))
    screen.deliver_time("00:02:00")
    assert read_scores(tmp_path / "scores.txt") == ["00:02:00", *highscores]


def test_handle_key(screen):
    assert screen.handle_key(pygame.K_RETURN) == 0
    assert screen.handle_key(pygame.K_a) is None