"""The bordered playfield and the three horizontal levels drawn inside it."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

PLAYFIELD_SIZE = (325.0, 180.0)
BORDER_THICKNESS = 5.0
LEVEL_INSET = 25.0
LEVEL_OFFSET_X = 15.0

FILL_COLOR = (0, 0, 0)
BORDER_COLOR = (255, 255, 255)
LEVEL_COLOR = (100, 100, 100)


@dataclass
class FloatRect:
    """An axis-aligned rectangle with floating-point position and size."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def intersects(self, other: FloatRect) -> bool:
        """Return True if the two rectangles overlap with a non-empty area."""
        left = max(self.x, other.x)
        top = max(self.y, other.y)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        return left < right and top < bottom


def _pixel_rect(rect: FloatRect) -> pygame.Rect:
    return pygame.Rect(round(rect.x), round(rect.y), round(rect.width), round(rect.height))


class Playfield:
    """The box the player moves in, with a border and three level lines."""

    def __init__(self) -> None:
        self.x = 0.0
        self.y = 0.0
        self.size = PLAYFIELD_SIZE
        self.border_thickness = BORDER_THICKNESS
        level_width = PLAYFIELD_SIZE[0] - LEVEL_INSET
        self.levels = [FloatRect(0.0, 0.0, level_width, 1.0) for _ in range(3)]

    @property
    def bounds(self) -> FloatRect:
        """Outer bounds, border included."""
        t = self.border_thickness
        width, height = self.size
        return FloatRect(self.x - t, self.y - t, width + 2 * t, height + 2 * t)

    @property
    def width(self) -> float:
        return self.bounds.width

    @property
    def height(self) -> float:
        return self.bounds.height

    def set_position(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)

    def set_level_positions(self, x: float, y: float) -> None:
        """Place the three levels around the middle one, which sits at height y."""
        quarter = self.height / 4
        for level, dy in zip(self.levels, (-quarter, 0.0, quarter)):
            level.x = x + LEVEL_OFFSET_X
            level.y = y + dy

    def render(self, target: pygame.Surface) -> None:
        pygame.draw.rect(target, BORDER_COLOR, _pixel_rect(self.bounds))
        width, height = self.size
        pygame.draw.rect(target, FILL_COLOR, _pixel_rect(FloatRect(self.x, self.y, width, height)))
        for level in self.levels:
            pygame.draw.rect(target, LEVEL_COLOR, _pixel_rect(level))