"""One round of the game: the player dodging spiders until the heart breaks."""

from __future__ import annotations

import random
import time
from enum import IntEnum
from pathlib import Path
from typing import Callable, Container

import pygame

from muffet.enemy import Enemy
from muffet.gui import HEALTH_BAR_SIZE, Gui
from muffet.player import Level, Player
from muffet.playfield import Playfield
from muffet.spawner import PLAYFIELD_CENTER_DIVISOR, Spawner

BUTTON_COOLDOWN_MAX = 5.5
BUTTON_COOLDOWN_STEP = 0.5
I_FRAMES_MAX = 60
SPAWN_TIMER_MAX = 30.0
ENEMY_DAMAGE = 4.0
SPRITE_HEIGHT_DIVISOR = 1.75

LEFT_KEYS = (pygame.K_a, pygame.K_LEFT)
RIGHT_KEYS = (pygame.K_d, pygame.K_RIGHT)
UP_KEYS = (pygame.K_w, pygame.K_UP)
DOWN_KEYS = (pygame.K_s, pygame.K_DOWN)


class DefeatFlag(IntEnum):
    NORMAL = 0
    BROKEN = 1
    VANISHED = 2


def _any_pressed(keys: Container[int], choices: tuple[int, ...]) -> bool:
    return any(key in keys for key in choices)


class Game:
    """The playfield, the player, the HUD and the spawner for one run.

    ``update`` takes the collection of key codes currently held down.
    ``clock`` returns the current time in seconds and drives the timer
    and the spider animation.
    """

    def __init__(
        self,
        data_dir: str | Path,
        window: pygame.Surface,
        rng: random.Random | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.data_dir = Path(data_dir)
        self.window = window
        self._clock = clock if clock is not None else time.perf_counter

        self.playfield = Playfield()
        self.gui = Gui(self.data_dir, window)
        self.player = Player(self.data_dir)

        self._init_variables()
        self._init_playfield()
        self._init_player()
        self._init_gui()

        self.spawner = Spawner(self.data_dir, window, self.playfield, rng)

        self._init_const()
        self.gui.play_music()

    # Initialization

    def _init_variables(self) -> None:
        self.window_size_x, self.window_size_y = self.window.get_size()
        self.playfield_center_x = 0.0
        self.playfield_center_y = 0.0
        self.playfield_pos_x = 0.0
        self.playfield_pos_y = 0.0
        self.border_thickness = self.playfield.border_thickness
        self.sprite_pos_x = 0.0
        self.sprite_pos_y = 0.0
        self.player_start_pos_x = 0.0
        self.player_start_pos_y = 0.0
        self.player_position_x = 0.0
        self.button_cooldown_max = BUTTON_COOLDOWN_MAX
        self.button_cooldown = self.button_cooldown_max
        self.i_frames_max = I_FRAMES_MAX
        self.i_frames = self.i_frames_max
        self.impact_frames = 0.0
        self.spawn_timer_max = SPAWN_TIMER_MAX
        self.spawn_timer = 0.0
        self.enemy_damage = ENEMY_DAMAGE
        self.defeat_flag = DefeatFlag.NORMAL
        self.game_over_timer = 0
        self.game_over = False
        self.switch_to_defeat_screen = False
        now = self._clock()
        self._start_time = now
        self._last_time = now

    def _init_playfield(self) -> None:
        self.playfield_center_x = self.window_size_x / 2
        self.playfield_center_y = self.window_size_y / PLAYFIELD_CENTER_DIVISOR
        t = self.border_thickness
        self.playfield_pos_x = self.playfield_center_x - (self.playfield.width / 2 - t)
        self.playfield_pos_y = self.playfield_center_y - (self.playfield.height / 2 - t)
        self.playfield.set_position(self.playfield_pos_x, self.playfield_pos_y)
        self.playfield.set_level_positions(self.playfield.bounds.x, self.playfield_center_y)

    def _init_player(self) -> None:
        self.player_start_pos_x = self.window_size_x / 2 - self.player.width / 2
        self.player_start_pos_y = (
            self.playfield.bounds.y + self.playfield.height / 2 - self.player.height / 2
        )
        self.player.set_position(self.player_start_pos_x, self.player_start_pos_y)

    def _init_gui(self) -> None:
        gui = self.gui
        self.sprite_pos_x = self.window_size_x / 2 - gui.sprite_width / 2
        self.sprite_pos_y = self.window_size_y / SPRITE_HEIGHT_DIVISOR - gui.sprite_height
        gui.set_sprite_position(self.sprite_pos_x, self.sprite_pos_y)

        below_field = self.player_start_pos_y + self.playfield.height / 2
        gui.set_hp_bar_position(
            self.playfield_pos_x + self.playfield.width / 4, below_field + 25.0
        )
        gui.set_player_name_position(
            self.playfield_pos_x - gui.player_name_width / 1.33,
            below_field + gui.player_name_height * 1.4,
        )
        gui.set_timer_position(self.window_size_x / 2, self.window_size_y - 30.0)

    def _init_const(self) -> None:
        bounds = self.playfield.bounds
        t = self.border_thickness
        self.left_playfield_border = bounds.x + t
        self.right_playfield_border = bounds.x + bounds.width - t
        self.odd_enemy_border = bounds.x + 1.25 * bounds.width
        self.even_enemy_border = bounds.x - bounds.width / 4 - self.spawner.enemy_size

    # Queries

    @property
    def final_time(self) -> str:
        """The time shown on the timer when the run ended."""
        return self.gui.final_time

    # Updates

    def _update_delta_time(self) -> None:
        now = self._clock()
        delta = now - self._last_time
        self._last_time = now
        self.gui.update_sprite(delta)

    def _update_timer(self) -> None:
        self.gui.update_visual_timer((self._clock() - self._start_time) * 1000)

    def _update_input(self, keys: Container[int]) -> None:
        self.player_position_x = self.player.bounds.x

        if self.player.hp > 0:
            if _any_pressed(keys, LEFT_KEYS):
                self.player.move(-1.0, 0.0)
            elif _any_pressed(keys, RIGHT_KEYS):
                self.player.move(1.0, 0.0)

            if _any_pressed(keys, UP_KEYS) and self._can_press_button():
                if self.player.level == Level.MIDDLE:
                    self._move_to_level(Level.TOP)
                elif self.player.level == Level.BOTTOM:
                    self._move_to_level(Level.MIDDLE)
            elif _any_pressed(keys, DOWN_KEYS) and self._can_press_button():
                if self.player.level == Level.TOP:
                    self._move_to_level(Level.MIDDLE)
                elif self.player.level == Level.MIDDLE:
                    self._move_to_level(Level.BOTTOM)

        self._update_collision_playfield()
        self._update_collision_enemy()

    def _move_to_level(self, level: Level) -> None:
        quarter = self.playfield.bounds.height / 4
        offset = {Level.TOP: -quarter, Level.MIDDLE: 0.0, Level.BOTTOM: quarter}[level]
        self.player.level = level
        self.player.set_position(
            self.player_position_x,
            self.playfield_center_y + offset - self.player.height / 2,
        )

    def _update_collision_playfield(self) -> None:
        bounds = self.player.bounds
        field = self.playfield.bounds
        t = self.border_thickness
        if bounds.x <= self.left_playfield_border:
            self.player.set_position(field.x + t, bounds.y)
        elif bounds.x + bounds.width > self.right_playfield_border:
            self.player.set_position(field.x + field.width - bounds.width - t, bounds.y)

    def _update_collision_enemy(self) -> None:
        if self.player.hp > 0 and self.i_frames <= self.i_frames_max:
            self.i_frames += 1
            blinking = self.i_frames_max - 5 > self.i_frames
            if blinking and self.i_frames % 10 == 0:
                self.player.set_color(255, 255, 255, 255)
            elif blinking and self.i_frames % 5 == 0:
                self.player.set_color(255, 255, 255, 150)
            if self.i_frames < 20:
                if self.i_frames % 8 == 0:
                    self._reset_screen()
                elif self.i_frames % 4 == 0:
                    self._shake_screen()

        if self.i_frames >= self.i_frames_max:
            for enemy in self.spawner.enemies:
                if self.player.bounds.intersects(enemy.bounds):
                    self._take_hit()

    def _take_hit(self) -> None:
        self.i_frames = 0
        self.player.take_damage(self.enemy_damage)
        width, height = HEALTH_BAR_SIZE
        self.gui.set_hp_remaining_size(width * self.player.hp / self.player.hp_max, height)
        self.gui.set_hp(self.player.hp)
        if self.player.hp <= 0:
            self.game_over = True
            self._death_action()
        self.gui.play_hit_sound()

    def _update_button_cooldown(self) -> None:
        if self.button_cooldown < self.button_cooldown_max:
            self.button_cooldown += BUTTON_COOLDOWN_STEP

    def _update_enemies(self) -> None:
        self.spawn_timer += 1.0
        if self.spawn_timer >= self.spawn_timer_max:
            self.spawn_timer = 0.0
            self.spawner.spawn()
        self._move_enemies()

    # Helpers

    def _can_press_button(self) -> bool:
        """Consume the cooldown if it has run out."""
        if self.button_cooldown >= self.button_cooldown_max:
            self.button_cooldown = 0.0
            return True
        return False

    def _shift_scene(self, dx: float, dy: float) -> None:
        player = self.player.bounds
        self.player.set_position(player.x + dx, player.y + dy)
        for enemy in self.spawner.enemies:
            enemy.set_position(enemy.x + dx, enemy.y + dy)

    def _shake_screen(self) -> None:
        if self.impact_frames == 0.0:
            self.impact_frames = 2.0
        impact = self.impact_frames
        self.playfield.set_position(self.playfield_pos_x - impact, self.playfield_pos_y - impact)
        self.playfield.set_level_positions(
            self.playfield.bounds.x - impact, self.playfield_center_y - impact
        )
        self.gui.set_sprite_position(self.sprite_pos_x - impact, self.sprite_pos_y - impact)
        self._shift_scene(-impact, -impact)

    def _reset_screen(self) -> None:
        impact = self.impact_frames
        self.playfield.set_position(self.playfield_pos_x, self.playfield_pos_y)
        self.playfield.set_level_positions(self.playfield.bounds.x, self.playfield_center_y)
        self.gui.set_sprite_position(self.sprite_pos_x, self.sprite_pos_y)
        self._shift_scene(impact, impact)
        self.impact_frames -= 1.0

    def _border_reached(self, enemy: Enemy) -> bool:
        if enemy.spawn_position % 2 == 1:
            return enemy.x >= self.odd_enemy_border
        return enemy.x <= self.even_enemy_border

    def _move_enemies(self) -> None:
        """Move odd enemies right and even ones left; drop those past their border."""
        survivors = []
        for enemy in self.spawner.enemies:
            if self._border_reached(enemy):
                continue
            enemy.move(1.0 if enemy.spawn_position % 2 == 1 else -1.0, 0.0)
            survivors.append(enemy)
        self.spawner.enemies[:] = survivors

    def _death_action(self) -> None:
        self.gui.stop_music()

    def _death_animation(self) -> None:
        if self.game_over_timer < 125:
            self.game_over_timer += 1

        if self.game_over_timer == 30 and self.defeat_flag == DefeatFlag.NORMAL:
            self.game_over_timer = 0
            self.player.set_defeat_texture()
            self.gui.play_defeat_sound()
            self.defeat_flag = DefeatFlag.BROKEN
        elif self.game_over_timer >= 80 and self.defeat_flag == DefeatFlag.BROKEN:
            self.player.set_color(255, 255, 255, 250 - self.game_over_timer * 2)

        if self.game_over_timer == 125 and self.defeat_flag == DefeatFlag.BROKEN:
            self.game_over_timer = 0
            self.defeat_flag = DefeatFlag.VANISHED

        if self.game_over_timer == 30 and self.defeat_flag == DefeatFlag.VANISHED:
            self.switch_to_defeat_screen = True

    # Public interface

    def update(self, keys: Container[int]) -> None:
        """Advance the game by one frame given the keys currently held down."""
        if self.game_over:
            return
        self._update_delta_time()
        self._update_timer()
        self._update_input(keys)
        self._update_button_cooldown()
        self._update_enemies()

    def render(self) -> None:
        """Draw one frame; after defeat this also drives the death animation."""
        self.window.fill((0, 0, 0))
        if not self.game_over:
            self.playfield.render(self.window)
            self.gui.render()
            self.spawner.render(self.window)
            self.player.render(self.window)
        else:
            self.player.render(self.window)
            self._death_animation()
        if self.window is pygame.display.get_surface():
            pygame.display.flip()

    def close(self) -> None:
        """Remove all enemies and stop the music."""
        self.spawner.delete_enemies()
        self.gui.stop_music()

    def __enter__(self) -> Game:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()