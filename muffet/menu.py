"""The main menu with Play, Quit and Scores."""

from __future__ import annotations

from enum import IntEnum
from pathlib import Path

import pygame

VERSION_NUMBER = "1.0.1"
TEXT_SIZE = 40
ICON_SCALE = 0.035
ICON_DISTANCE = 65.0

_WHITE = (255, 255, 255)
_GRAY = (128, 128, 128)

_START_GAME = 1
_SCORES = 2
_EXIT = -1

_UP_KEYS = (pygame.K_w, pygame.K_UP)
_DOWN_KEYS = (pygame.K_s, pygame.K_DOWN)


class Selected(IntEnum):
    PLAY = 0
    QUIT = 1
    SCORES = 2


_LABELS = {Selected.PLAY: "Play", Selected.QUIT: "Quit", Selected.SCORES: "Scores"}


def _load_font(path: Path, size: int) -> pygame.font.Font:
    try:
        return pygame.font.Font(str(path), size)
    except (pygame.error, OSError):
        print("FONT LOADING ERROR::GUI::fonts/ingame-hud-font.ttf")
        return pygame.font.Font(None, size)


def _load_icon(path: Path) -> pygame.Surface:
    try:
        texture = pygame.image.load(str(path))
    except (pygame.error, OSError):
        print("TEXTURE LOADING ERROR::GUI::textures/selection_icon.png")
        return pygame.Surface((0, 0), pygame.SRCALPHA)
    size = (round(texture.get_width() * ICON_SCALE), round(texture.get_height() * ICON_SCALE))
    return pygame.transform.scale(texture, size)


class Menu:
    """The start screen; the selection icon points at the chosen entry."""

    def __init__(self, data_dir: str | Path, window: pygame.Surface) -> None:
        data_dir = Path(data_dir)
        self.window = window
        self.selected = Selected.PLAY
        self.version_number = VERSION_NUMBER
        pygame.font.init()

        font_path = data_dir / "fonts" / "ingame-hud-font.ttf"
        self._fonts = {
            Selected.PLAY: _load_font(font_path, TEXT_SIZE),
            Selected.QUIT: _load_font(font_path, TEXT_SIZE),
            Selected.SCORES: _load_font(font_path, TEXT_SIZE // 2),
        }
        self._version_font = _load_font(font_path, TEXT_SIZE // 4)
        self._icon = _load_icon(data_dir / "textures" / "selection_icon.png")
        self._layout()

    def _layout(self) -> None:
        width, height = self.window.get_size()
        heights = {Selected.PLAY: 0.4, Selected.QUIT: 0.6, Selected.SCORES: 0.85}
        self.text_positions: dict[Selected, tuple[float, float]] = {}
        self._text_sizes: dict[Selected, tuple[int, int]] = {}
        for choice, label in _LABELS.items():
            text_w, text_h = self._fonts[choice].size(label)
            self._text_sizes[choice] = (text_w, text_h)
            self.text_positions[choice] = (width // 2 - text_w / 2, height * heights[choice])
        version_w, version_h = self._version_font.size(self.version_number)
        self.version_position = (width - 1.5 * version_w, height - 2 * version_h)

    @property
    def icon_position(self) -> tuple[float, float]:
        """Centre of the selection icon, left of the selected entry."""
        x, y = self.text_positions[self.selected]
        text_h = self._text_sizes[self.selected][1]
        icon_h = self._icon.get_height()
        return (x - ICON_DISTANCE, y + text_h / 2 - icon_h / 2)

    def handle_key(self, key: int) -> int | None:
        """Move the selection or choose an entry; return the next screen or None."""
        if key in _UP_KEYS:
            if self.selected == Selected.QUIT:
                self.selected = Selected.PLAY
            elif self.selected == Selected.SCORES:
                self.selected = Selected.QUIT
        elif key in _DOWN_KEYS:
            if self.selected == Selected.PLAY:
                self.selected = Selected.QUIT
            elif self.selected == Selected.QUIT:
                self.selected = Selected.SCORES
        elif key == pygame.K_RETURN:
            return {
                Selected.PLAY: _START_GAME,
                Selected.QUIT: _EXIT,
                Selected.SCORES: _SCORES,
            }[self.selected]
        return None

    def render(self) -> None:
        self.window.fill((0, 0, 0))
        for choice, label in _LABELS.items():
            x, y = self.text_positions[choice]
            image = self._fonts[choice].render(label, True, _WHITE)
            self.window.blit(image, (round(x), round(y)))
        vx, vy = self.version_position
        version = self._version_font.render(self.version_number, True, _GRAY)
        self.window.blit(version, (round(vx), round(vy)))
        ix, iy = self.icon_position
        icon_w, icon_h = self._icon.get_size()
        self.window.blit(self._icon, (round(ix - icon_w / 2), round(iy - icon_h / 2)))
        if self.window is pygame.display.get_surface():
            pygame.display.flip()

    def run(self) -> int:
        """Show the menu until an entry is chosen or the window is closed."""
        self.selected = Selected.PLAY
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