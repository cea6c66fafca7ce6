"""Spawning of enemies in timed waves of random events."""

from __future__ import annotations

import random
from enum import IntEnum
from pathlib import Path

import pygame

from muffet.enemy import Enemy
from muffet.playfield import Playfield

EVENT_TIMER_MAX = 18
PLAYFIELD_CENTER_DIVISOR = 1.4


class Event(IntEnum):
    SINGLE = 0
    PAIR = 1
    LANE = 2
    SPEED = 3
    PATH = 4


class Spawner:
    """Creates enemies at the six spawn points around the playfield.

    Odd spawn positions start on the left and move right, even ones start
    on the right and move left. Positions 1-2 belong to the top level,
    3-4 to the middle and 5-6 to the bottom.
    """

    def __init__(
        self,
        data_dir: str | Path,
        window: pygame.Surface,
        playfield: Playfield,
        rng: random.Random | None = None,
    ) -> None:
        self.data_dir = data_dir
        self.window = window
        self.playfield = playfield
        self.rng = rng if rng is not None else random.Random()
        self.enemies: list[Enemy] = []

        self.event_timer_max = EVENT_TIMER_MAX
        self.event_timer = 0
        self.pen_timer = 0
        self.pen_timer_max = 1
        self.speed_timer_max = 1
        self.speed_timer = self.speed_timer_max
        self.random_event = Event.SINGLE
        self.latest_event = Event.SINGLE
        self.speed_increase = 0.0
        self.outside_spawn = True
        self.penalty = False
        self.path = 1
        self.direction_up = False

        self._init_spawn_positions()

    def _init_spawn_positions(self) -> None:
        bounds = self.playfield.bounds
        size = self.enemy_size
        center_y = self.window.get_height() / PLAYFIELD_CENTER_DIVISOR
        self.spawn_points_x = [
            bounds.x - bounds.width / 4 - size,
            bounds.x + bounds.width + bounds.width / 4,
        ]
        self.spawn_points_y = [
            center_y - bounds.height / 4 - size / 2,
            center_y - size / 2,
            center_y + bounds.height / 4 - size / 2,
        ]

    @property
    def enemy_size(self) -> float:
        return Enemy.size

    def _add_enemy(self, position: int, level: int, speed: float) -> None:
        x = self.spawn_points_x[0 if position % 2 == 1 else 1]
        y = self.spawn_points_y[level]
        self.enemies.append(Enemy(self.data_dir, x, y, position, speed))

    def delete_enemies(self) -> None:
        """Remove all enemies."""
        self.enemies.clear()

    def render(self, target: pygame.Surface) -> None:
        for enemy in self.enemies:
            enemy.render(target)

    def spawn(self) -> None:
        """Advance the spawn cycle by one step, spawning enemies of the current event."""
        if self.event_timer >= self.event_timer_max:
            self.event_timer = 0
            self.speed_increase += 0.1

            # Never pick the same event twice in a row.
            r = self.rng.randrange(len(Event) - 1)
            self.random_event = Event(r + 1 if r >= self.latest_event else r)

            latest = self.latest_event
            if latest == Event.SINGLE:
                self.pen_timer_max = 0
            elif latest == Event.PAIR:
                self.pen_timer_max = 2
            elif latest == Event.LANE:
                self.outside_spawn = True
                self.pen_timer_max = 3
            if latest == Event.SPEED:
                self.speed_timer = self.speed_timer_max
                self.pen_timer_max = 0
            if latest in (Event.SPEED, Event.PATH):
                self.path = 1
                self.direction_up = False
                self.pen_timer_max = 2

            self.latest_event = self.random_event
            self.penalty = True

        # A short pause after each change of event before enemies appear again.
        if not self.penalty:
            self.spawn_enemies(self.random_event)
        else:
            if self.pen_timer >= self.pen_timer_max:
                self.pen_timer = 0
                self.penalty = False
            self.pen_timer += 1

        self.event_timer += 1

    def spawn_enemies(self, event: Event | int) -> None:
        """Spawn enemies according to the given event."""
        actions = {
            Event.SINGLE: self.spawn_single_enemy,
            Event.PAIR: self.spawn_enemy_pair,
            Event.LANE: self.spawn_enemies_lane,
            Event.SPEED: self.spawn_speedy_enemy,
            Event.PATH: self.spawn_enemies_path,
        }
        action = actions.get(event)
        if action is not None:
            action()

    def spawn_single_enemy(self, position: int | None = None, speed: float | None = None) -> None:
        """Spawn one enemy at the given spawn position, or at a random one."""
        if position is None:
            position = self.rng.randrange(6) + 1
        if speed is None:
            speed = 8.0
        level = (position - 1) // 2 if position % 2 == 1 else position // 2 - 1
        self._add_enemy(position, level, speed + self.speed_increase)

    def spawn_enemy_pair(self) -> None:
        """Spawn two enemies on neighbouring levels from the same side."""
        position = self.rng.randrange(4) + 1
        speed = 5.0 + self.speed_increase / 2
        first = (position - 1) // 2 if position % 2 == 1 else position // 2 - 1
        for offset in range(2):
            self._add_enemy(position, first + offset, speed)

    def spawn_enemies_lane(self) -> None:
        """Alternate slow enemies on the outer levels with fast ones in the middle."""
        if self.outside_spawn:
            speed = 3.0 + self.speed_increase / 2
            self._add_enemy(2, 0, speed)
            self._add_enemy(6, 2, speed)
            self.outside_spawn = False
        else:
            self._add_enemy(3, 1, 8.0 + self.speed_increase)
            self.outside_spawn = True

    def spawn_speedy_enemy(self) -> None:
        """Spawn a very fast enemy every other call."""
        if self.speed_timer >= self.speed_timer_max:
            self.speed_timer = 0
            position = self.rng.randrange(6) + 1
            self.spawn_single_enemy(position, 11.0 + self.speed_increase / 2)
        else:
            self.speed_timer += 1

    def spawn_enemies_path(self) -> None:
        """Spawn two enemies leaving one level free, the free level wandering up and down."""
        speed = 6.0 + self.speed_increase / 2
        if self.path == 0:
            self._add_enemy(4, 1, speed)
            self._add_enemy(6, 2, speed)
            self.path = 1
            self.direction_up = False
        elif self.path == 1:
            self._add_enemy(2, 0, speed)
            self._add_enemy(6, 2, speed)
            self.path = 0 if self.direction_up else 2
        elif self.path == 2:
            self._add_enemy(2, 0, speed)
            self._add_enemy(4, 1, speed)
            self.path = 1
            self.direction_up = True