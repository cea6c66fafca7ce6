"""The spider enemies that cross the playfield."""

from __future__ import annotations

import functools
from pathlib import Path

import pygame

from muffet.playfield import FloatRect

ENEMY_SIZE = 30.0
ENEMY_SCALE = 1.875
TEXTURE_NAME = "spiderEnemy_sprite.png"


@functools.lru_cache(maxsize=None)
def _scaled_texture(path: Path) -> tuple[pygame.Surface, float, float]:
    try:
        texture = pygame.image.load(str(path))
    except (pygame.error, OSError):
        print(f"TEXTURE LOADING ERROR::ENEMY::textures/{TEXTURE_NAME}")
        texture = pygame.Surface((0, 0), pygame.SRCALPHA)
    width = texture.get_width() * ENEMY_SCALE
    height = texture.get_height() * ENEMY_SCALE
    image = pygame.transform.scale(texture, (round(width), round(height)))
    return image, width, height


class Enemy:
    """An enemy moving horizontally from one of six spawn points."""

    size = ENEMY_SIZE

    def __init__(
        self,
        data_dir: str | Path,
        x: float,
        y: float,
        spawn_position: int,
        movement_speed: float,
    ) -> None:
        self.spawn_position = spawn_position
        self.speed = float(movement_speed)
        self.x = float(x)
        self.y = float(y)
        self._image, self._width, self._height = _scaled_texture(
            Path(data_dir) / "textures" / TEXTURE_NAME
        )

    @property
    def bounds(self) -> FloatRect:
        return FloatRect(self.x, self.y, self._width, self._height)

    def set_position(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)

    def move(self, x: float, y: float) -> None:
        """Move by the given direction scaled by the enemy's speed."""
        self.x += self.speed * x
        self.y += self.speed * y

    def render(self, target: pygame.Surface) -> None:
        target.blit(self._image, (round(self.x), round(self.y)))