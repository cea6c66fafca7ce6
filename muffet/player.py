"""The player's heart, moving left and right across three levels."""

from __future__ import annotations

from enum import IntEnum
from pathlib import Path

import pygame

from muffet.playfield import FloatRect

PLAYER_SCALE = 1.5
DEFEAT_SCALE = 1.4
MOVEMENT_SPEED = 4.0
HP_MAX = 20.0

_OPAQUE_WHITE = (255, 255, 255, 255)


class Level(IntEnum):
    TOP = 0
    MIDDLE = 1
    BOTTOM = 2


def _load_texture(path: Path) -> pygame.Surface:
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError):
        print(f"TEXTURE LOADING ERROR::PLAYER::textures/{path.name}")
        return pygame.Surface((0, 0), pygame.SRCALPHA)


def _channel(value: float) -> int:
    return int(max(0.0, min(255.0, value)))


class _Sprite:
    def __init__(self, texture: pygame.Surface, scale: float) -> None:
        self.texture = texture
        self.scale = scale
        self.x = 0.0
        self.y = 0.0
        self.color = _OPAQUE_WHITE

    @property
    def bounds(self) -> FloatRect:
        return FloatRect(
            self.x,
            self.y,
            self.texture.get_width() * self.scale,
            self.texture.get_height() * self.scale,
        )

    def render(self, target: pygame.Surface) -> None:
        bounds = self.bounds
        image = pygame.transform.scale(self.texture, (round(bounds.width), round(bounds.height)))
        if self.color != _OPAQUE_WHITE:
            r, g, b, alpha = self.color
            image.fill((r, g, b, 255), special_flags=pygame.BLEND_RGB_MULT)
            image.set_alpha(alpha)
        target.blit(image, (round(self.x), round(self.y)))


class Player:
    """The player's heart with its health, level and sprites."""

    def __init__(self, data_dir: str | Path) -> None:
        textures = Path(data_dir) / "textures"
        self._texture = _load_texture(textures / "player_sprite.png")
        self._sprite = _Sprite(self._texture, PLAYER_SCALE)
        self._defeat_sprite: _Sprite | None = _Sprite(
            _load_texture(textures / "defeated_player_sprite.png"), DEFEAT_SCALE
        )
        self.level = Level.MIDDLE
        self.movement_speed = MOVEMENT_SPEED
        self.hp_max = HP_MAX
        self.hp = self.hp_max

    @property
    def bounds(self) -> FloatRect:
        return self._sprite.bounds

    @property
    def width(self) -> float:
        return self.bounds.width

    @property
    def height(self) -> float:
        return self.bounds.height

    @property
    def color(self) -> tuple[int, int, int, int]:
        return self._sprite.color

    def set_position(self, x: float, y: float) -> None:
        self._sprite.x = float(x)
        self._sprite.y = float(y)

    def set_color(self, r: float, g: float, b: float, alpha: float) -> None:
        """Tint the sprite; channels are clamped to 0..255."""
        self._sprite.color = (_channel(r), _channel(g), _channel(b), _channel(alpha))

    def set_texture(self) -> None:
        """Show the whole heart on the current sprite."""
        self._sprite.texture = self._texture

    def set_defeat_texture(self) -> None:
        """Swap to the broken heart at the current position."""
        if self._defeat_sprite is None:
            raise RuntimeError("the defeat sprite is already in use")
        self._defeat_sprite.x = self._sprite.x
        self._defeat_sprite.y = self._sprite.y
        self._sprite, self._defeat_sprite = self._defeat_sprite, None

    def move(self, x: float, y: float) -> None:
        self._sprite.x += self.movement_speed * x
        self._sprite.y += self.movement_speed * y

    def take_damage(self, damage: float) -> None:
        self.hp -= damage

    def render(self, target: pygame.Surface) -> None:
        self._sprite.render(target)