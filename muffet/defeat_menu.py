"""The Game Over screen offering to retry or to go back to the menu."""

from __future__ import annotations

from enum import IntEnum
from pathlib import Path

import pygame

from muffet.gui import START_TIME, Gui

TITLE_SIZE = 120
MENU_TEXT_SIZE = 30
TIME_TEXT_SIZE = 20
ICON_SCALE = 0.035
ICON_DISTANCE = 65.0

_WHITE = (255, 255, 255)
_GRAY = (128, 128, 128)

_MENU = 0
_RETRY_GAME = 1
_EXIT = -1

_UP_KEYS = (pygame.K_w, pygame.K_UP)
_DOWN_KEYS = (pygame.K_s, pygame.K_DOWN)


class DefeatSelection(IntEnum):
    RETRY = 0
    EXIT = 1


_LABELS = {DefeatSelection.RETRY: "RETRY", DefeatSelection.EXIT: "EXIT"}


def _load_font(path: Path, size: int) -> pygame.font.Font:
    try:
        return pygame.font.Font(str(path), size)
    except (pygame.error, OSError):
        print("FONT LOADING ERROR::DEFEATMENU::fonts/ingame-hud-font.ttf")
        return pygame.font.Font(None, size)


def _load_icon(path: Path) -> pygame.Surface:
    try:
        texture = pygame.image.load(str(path))
    except (pygame.error, OSError):
        print("TEXTURE LOADING ERROR::DEFEATMENU::textures/selection_icon.png")
        return pygame.Surface((0, 0), pygame.SRCALPHA)
    size = (round(texture.get_width() * ICON_SCALE), round(texture.get_height() * ICON_SCALE))
    return pygame.transform.scale(texture, size)


class DefeatMenu:
    """Shows "Game Over", the time of the last run and the two choices."""

    def __init__(self, data_dir: str | Path, window: pygame.Surface) -> None:
        data_dir = Path(data_dir)
        self.window = window
        self.selected = DefeatSelection.RETRY
        self.final_time = START_TIME
        pygame.font.init()

        font_path = data_dir / "fonts" / "ingame-hud-font.ttf"
        self._title_font = _load_font(font_path, TITLE_SIZE)
        self._menu_font = _load_font(font_path, MENU_TEXT_SIZE)
        self._time_font = _load_font(font_path, TIME_TEXT_SIZE)
        self._icon = _load_icon(data_dir / "textures" / "selection_icon.png")
        self._layout()

        self.gui = Gui(data_dir, window)

    def _layout(self) -> None:
        width, height = self.window.get_size()

        top_w, top_h = self._title_font.size("Game")
        bottom_w, bottom_h = self._title_font.size("Over")
        top_center_y = height / 5
        bottom_center_y = top_center_y + top_h + 10.0
        self.title_positions = (
            (width / 2 - top_w / 2, top_center_y - top_h / 2),
            (width / 2 - bottom_w / 2, bottom_center_y - bottom_h / 2),
        )

        heights = {DefeatSelection.RETRY: 0.725, DefeatSelection.EXIT: 0.85}
        self.text_positions: dict[DefeatSelection, tuple[float, float]] = {}
        self._text_sizes: dict[DefeatSelection, tuple[int, int]] = {}
        for choice, label in _LABELS.items():
            text_w, text_h = self._menu_font.size(label)
            self._text_sizes[choice] = (text_w, text_h)
            self.text_positions[choice] = (width / 2 - text_w / 2, height * heights[choice])

        time_w = self._time_font.size(START_TIME)[0]
        self.time_position = (width // 2 - time_w / 2, bottom_center_y + bottom_h + 35.0)

    @property
    def icon_position(self) -> tuple[float, float]:
        """Centre of the selection icon, left of the selected entry."""
        x, y = self.text_positions[self.selected]
        text_h = self._text_sizes[self.selected][1]
        return (x - ICON_DISTANCE, y + text_h / 2 - self._icon.get_height() / 2)

    def set_time(self, time: str) -> None:
        """Show the time of the run that was just lost."""
        self.final_time = time

    def handle_key(self, key: int) -> int | None:
        """Move the selection or choose an entry; return the next screen or None."""
        if key in _UP_KEYS:
            if self.selected == DefeatSelection.EXIT:
                self.selected = DefeatSelection.RETRY
        elif key in _DOWN_KEYS:
            if self.selected == DefeatSelection.RETRY:
                self.selected = DefeatSelection.EXIT
        elif key == pygame.K_RETURN:
            self.gui.stop_game_over_sound()
            if self.selected == DefeatSelection.RETRY:
                return _RETRY_GAME
            return _MENU
        return None

    def _blit_text(self, font: pygame.font.Font, text: str, color, position) -> None:
        x, y = position
        self.window.blit(font.render(text, True, color), (round(x), round(y)))

    def render(self) -> None:
        self.window.fill((0, 0, 0))
        for text, position in zip(("Game", "Over"), self.title_positions):
            self._blit_text(self._title_font, text, _WHITE, position)
        for choice, label in _LABELS.items():
            self._blit_text(self._menu_font, label, _WHITE, self.text_positions[choice])
        ix, iy = self.icon_position
        icon_w, icon_h = self._icon.get_size()
        self.window.blit(self._icon, (round(ix - icon_w / 2), round(iy - icon_h / 2)))
        self._blit_text(self._time_font, self.final_time, _GRAY, self.time_position)
        if self.window is pygame.display.get_surface():
            pygame.display.flip()

    def run(self) -> int:
        """Play the Game Over theme and wait for a choice or for the window to close."""
        self.selected = DefeatSelection.RETRY
        self.gui.play_game_over_sound()
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