"""The score file and the screen listing the best times."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pygame

DEFAULT_TIME = "00:00:00"
SCORE_LINES = 6
SCORES_FILE = "scores.txt"
SEPARATOR = "---Latest Time:---"

_CHAR_SIZE = 25
_EXIT_SIZE = 20
_ICON_SCALE = 0.035
_ICON_DISTANCE = 65.0
_RANK_DISTANCE = 65.0
_WHITE = (255, 255, 255)
_GRAY = (128, 128, 128)
_MENU = 0
_EXIT = -1


def ensure_score_file(path: str | Path) -> bool:
    """Create the score file filled with zero times if missing; return True if created."""
    path = Path(path)
    if path.exists():
        return False
    path.write_text("".join(f"{DEFAULT_TIME}\n" for _ in range(SCORE_LINES)))
    return True


def read_scores(path: str | Path) -> list[str]:
    """Return the lines of the score file: latest time first, then the highscores."""
    return Path(path).read_text().splitlines()


def merge_highscores(highscores: Iterable[str], time: str) -> list[str]:
    """Insert time into the highscores if it beats any of them, best first."""
    scores = list(highscores)
    if not any(score < time for score in scores):
        return scores
    return sorted([time, *scores], reverse=True)[: len(scores)]


def write_scores(path: str | Path, latest: str, highscores: Iterable[str]) -> None:
    Path(path).write_text("".join(f"{line}\n" for line in [latest, *highscores]))


def _load_font(path: Path, size: int) -> pygame.font.Font:
    try:
        return pygame.font.Font(str(path), size)
    except (pygame.error, OSError):
        print("FONT LOADING ERROR::SCORESSCREEN::fonts/ingame-hud-font.ttf")
        return pygame.font.Font(None, size)


def _load_icon(path: Path) -> pygame.Surface:
    try:
        texture = pygame.image.load(str(path))
    except (pygame.error, OSError):
        print("TEXTURE LOADING ERROR::SCORESSCREEN::textures/selection_icon.png")
        return pygame.Surface((0, 0), pygame.SRCALPHA)
    size = (round(texture.get_width() * _ICON_SCALE), round(texture.get_height() * _ICON_SCALE))
    return pygame.transform.scale(texture, size)


class ScoresScreen:
    """Shows the five best times and the latest run."""

    def __init__(self, data_dir: str | Path, window: pygame.Surface) -> None:
        data_dir = Path(data_dir)
        self.window = window
        self.path = data_dir / SCORES_FILE
        pygame.font.init()
        font_path = data_dir / "fonts" / "ingame-hud-font.ttf"
        self._font = _load_font(font_path, _CHAR_SIZE)
        self._exit_font = _load_font(font_path, _EXIT_SIZE)
        self._icon = _load_icon(data_dir / "textures" / "selection_icon.png")
        try:
            ensure_score_file(self.path)
        except OSError:
            print("Unable to create scores.txt")
        self.latest, self.highscores = self._load()
        self._layout()

    def _load(self) -> tuple[str, list[str]]:
        try:
            lines = read_scores(self.path)
        except OSError:
            print("Unable to open scores.txt")
            lines = []
        lines = (lines + [DEFAULT_TIME] * SCORE_LINES)[:SCORE_LINES]
        return lines[0], lines[1:]

    def _layout(self) -> None:
        width, height = self.window.get_size()
        top = height * 0.15
        offset = 0.0
        self._score_positions = []
        for score in self.highscores:
            score_width = self._font.size(score)[0]
            self._score_positions.append((width / 2 - score_width / 2, top + offset))
            offset += score_width / 3
        step = self._font.size(self.highscores[0])[0] / 3
        offset += step
        self._separator_position = (width / 2 - self._font.size(SEPARATOR)[0] / 2, top + offset)
        offset += step
        self._latest_position = (width / 2 - self._font.size(self.latest)[0] / 2, top + offset)
        self._rank_positions = [(x - _RANK_DISTANCE, y) for x, y in self._score_positions]
        exit_x = width / 2 - self._exit_font.size("EXIT")[0] / 2
        exit_y = height * 0.85
        self._exit_position = (exit_x, exit_y)
        icon_w, icon_h = self._icon.get_size()
        self._icon_position = (exit_x - _ICON_DISTANCE - icon_w / 2, exit_y - icon_h)

    def deliver_time(self, time: str) -> None:
        """Record the time of the latest run and save the scores."""
        self.latest = time
        self.highscores = merge_highscores(self.highscores, time)
        try:
            write_scores(self.path, self.latest, self.highscores)
        except OSError:
            print("Unable to overwrite scores.txt")

    def handle_key(self, key: int) -> int | None:
        """Return the next screen for a key press, or None to stay."""
        if key == pygame.K_RETURN:
            return _MENU
        return None

    def _blit_text(self, font: pygame.font.Font, text: str, color, position) -> None:
        x, y = position
        self.window.blit(font.render(text, True, color), (round(x), round(y)))

    def render(self) -> None:
        self.window.fill((0, 0, 0))
        for number, position in enumerate(self._rank_positions, start=1):
            self._blit_text(self._font, f"{number}.", _WHITE, position)
        for score, position in zip(self.highscores, self._score_positions):
            self._blit_text(self._font, score, _GRAY, position)
        self._blit_text(self._font, self.latest, _GRAY, self._latest_position)
        self._blit_text(self._font, SEPARATOR, _WHITE, self._separator_position)
        self._blit_text(self._exit_font, "EXIT", _WHITE, self._exit_position)
        x, y = self._icon_position
        self.window.blit(self._icon, (round(x), round(y)))
        if self.window is pygame.display.get_surface():
            pygame.display.flip()

    def run(self) -> int:
        """Show the screen until Enter is pressed or the window is closed."""
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return _EXIT
                if event.type == pygame.KEYDOWN:
                    next_screen = self.handle_key(event.key)
                    if next_screen is not None:
                        return next_screen
            self.render()
            clock.tick(60)