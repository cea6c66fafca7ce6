"""The in-game HUD: the animated spider, the health bar, the player name and the timer."""

from __future__ import annotations

from pathlib import Path

import pygame

FRAME_DURATION = 0.03
SPRITE_SCALE = 3.0
DEFAULT_CHAR_SIZE = 30
TEXT_SCALE = 0.7
HP_MAX_DISPLAY = 20
HEALTH_BAR_SIZE = (35.0, 30.0)
HP_TEXT_OFFSET = (60.0, 5.0)
VOLUME = 0.15
PLAYER_NAME = "FRISK    LV1"
START_TIME = "00:00:00"

_WHITE = (255, 255, 255)
_YELLOW = (255, 255, 0)
_RED = (255, 0, 0)


def format_time(milliseconds: int | float) -> str:
    """Format elapsed milliseconds as MM:SS:CC with leading zeros."""
    total = int(milliseconds)
    minutes = total // 60000
    seconds = (total // 1000) % 60
    centiseconds = (total // 10) % 100
    return f"{minutes:02d}:{seconds:02d}:{centiseconds:02d}"


def hp_string(current_hp: int | float) -> str:
    """Return the numerical health shown next to the bar, e.g. '08 / 20'."""
    hp = int(current_hp)
    if hp >= 10:
        return f"{hp} / {HP_MAX_DISPLAY}"
    return f"0{hp} / {HP_MAX_DISPLAY}"


def _load_texture(path: Path) -> pygame.Surface:
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError):
        print(f"TEXTURE LOADING ERROR::GUI::{path.name}")
        return pygame.Surface((0, 0), pygame.SRCALPHA)


def _load_font(path: Path, size: int) -> pygame.font.Font:
    try:
        return pygame.font.Font(str(path), size)
    except (pygame.error, OSError):
        print("FONT LOADING ERROR::GUI::fonts/ingame-hud-font.ttf")
        return pygame.font.Font(None, size)


def _load_sound(path: Path) -> pygame.mixer.Sound | None:
    try:
        sound = pygame.mixer.Sound(str(path))
    except (pygame.error, OSError):
        print(f"SOUND LOADING ERROR::GUI::{path.name}")
        return None
    sound.set_volume(VOLUME)
    return sound


def _init_mixer() -> bool:
    if pygame.mixer.get_init():
        return True
    try:
        pygame.mixer.init()
    except pygame.error:
        return False
    return True


class Gui:
    """Heads-up display drawn around the playfield, with its sounds and music."""

    def __init__(self, data_dir: str | Path, window: pygame.Surface) -> None:
        data_dir = Path(data_dir)
        self.window = window
        pygame.font.init()

        self._sheet = _load_texture(data_dir / "textures" / "muffet_spriteSheet.png")
        self._font = _load_font(
            data_dir / "fonts" / "ingame-hud-font.ttf", round(DEFAULT_CHAR_SIZE * TEXT_SCALE)
        )
        self._mixer = _init_mixer()
        sounds = data_dir / "sounds"
        self._hit_sound = _load_sound(sounds / "damaged.wav")
        self._defeat_sound = _load_sound(sounds / "death_sound.wav")
        self._game_over_theme = _load_sound(sounds / "game_over_theme.wav")
        self._music_loaded = self._load_music(sounds / "spider_dance_ost.wav")

        # Frames lie side by side and each one is a square as high as the sheet.
        self.frame_length = self._sheet.get_height()
        self.num_frames = max(1, self._sheet.get_width() // self.frame_length) if self.frame_length else 1
        self.current_frame = 0
        self._frame_x = 0
        self._total_time = 0.0

        self.sprite_position = (0.0, 0.0)
        self.hp_bar_position = (0.0, 0.0)
        self.hp_text_position = (0.0, 0.0)
        self.player_name_position = (0.0, 0.0)
        self.timer_position = (0.0, 0.0)
        self.hp_remaining_size = HEALTH_BAR_SIZE
        self.hp_lost_size = HEALTH_BAR_SIZE
        self.hp_text = ""
        self.set_hp(HP_MAX_DISPLAY)
        self.time_text = START_TIME

    def _load_music(self, path: Path) -> bool:
        if not self._mixer:
            print(f"MUSIC LOADING ERROR::GUI::{path.name}")
            return False
        try:
            pygame.mixer.music.load(str(path))
        except (pygame.error, OSError):
            print(f"MUSIC LOADING ERROR::GUI::{path.name}")
            return False
        pygame.mixer.music.set_volume(VOLUME)
        return True

    @property
    def frame_rect(self) -> tuple[int, int, int, int]:
        """The part of the sprite sheet currently shown: x, y, width, height."""
        return (self._frame_x, 0, self.frame_length, self.frame_length)

    @property
    def sprite_width(self) -> float:
        return self.frame_length * SPRITE_SCALE

    @property
    def sprite_height(self) -> float:
        return self.frame_length * SPRITE_SCALE

    @property
    def player_name_width(self) -> float:
        return float(self._font.size(PLAYER_NAME)[0])

    @property
    def player_name_height(self) -> float:
        return float(self._font.size(PLAYER_NAME)[1])

    @property
    def timer_width(self) -> float:
        return float(self._font.size(self.time_text)[0])

    @property
    def timer_height(self) -> float:
        return float(self._font.size(self.time_text)[1])

    @property
    def final_time(self) -> str:
        """The timer text as last shown."""
        return self.time_text

    def set_sprite_position(self, x: float, y: float) -> None:
        self.sprite_position = (float(x), float(y))

    def set_hp_bar_position(self, x: float, y: float) -> None:
        self.hp_bar_position = (float(x), float(y))
        self.hp_text_position = (x + HP_TEXT_OFFSET[0], y + HP_TEXT_OFFSET[1])

    def set_player_name_position(self, x: float, y: float) -> None:
        self.player_name_position = (float(x), float(y))

    def set_timer_position(self, x: float, y: float) -> None:
        """Place the centre of the timer text at (x, y)."""
        self.timer_position = (float(x), float(y))

    def set_frame(self, frame: int) -> None:
        """Show the given frame of the sprite sheet."""
        self._frame_x = frame * self.frame_length

    def set_hp(self, current_hp: int | float) -> None:
        self.hp_text = hp_string(current_hp)

    def set_hp_remaining_size(self, width: float, height: float) -> None:
        self.hp_remaining_size = (float(width), float(height))

    def play_music(self) -> None:
        if self._music_loaded:
            pygame.mixer.music.play(loops=-1)

    def stop_music(self) -> None:
        if self._music_loaded:
            pygame.mixer.music.stop()

    def play_game_over_sound(self) -> None:
        if self._game_over_theme is not None:
            self._game_over_theme.play()

    def stop_game_over_sound(self) -> None:
        if self._game_over_theme is not None:
            self._game_over_theme.stop()

    def play_hit_sound(self) -> None:
        if self._hit_sound is not None:
            self._hit_sound.play()

    def play_defeat_sound(self) -> None:
        if self._defeat_sound is not None:
            self._defeat_sound.play()

    def update_visual_timer(self, elapsed_ms: int | float) -> None:
        self.time_text = format_time(elapsed_ms)

    def update_sprite(self, delta_seconds: float) -> None:
        """Advance the animation by one frame whenever a frame's duration has passed."""
        self._total_time += delta_seconds
        if self._total_time >= FRAME_DURATION:
            self._total_time -= FRAME_DURATION
            self.current_frame = (self.current_frame + 1) % self.num_frames
            self.set_frame(self.current_frame)

    def _blit_text(self, text: str, position: tuple[float, float]) -> None:
        x, y = position
        self.window.blit(self._font.render(text, True, _WHITE), (round(x), round(y)))

    def render(self) -> None:
        if self.frame_length:
            x, y, w, h = self.frame_rect
            if x + w <= self._sheet.get_width():
                frame = self._sheet.subsurface(pygame.Rect(x, y, w, h))
                size = (round(self.sprite_width), round(self.sprite_height))
                image = pygame.transform.scale(frame, size)
                sx, sy = self.sprite_position
                self.window.blit(image, (round(sx), round(sy)))

        bx, by = self.hp_bar_position
        lw, lh = self.hp_lost_size
        pygame.draw.rect(self.window, _RED, pygame.Rect(round(bx), round(by), round(lw), round(lh)))
        rw, rh = self.hp_remaining_size
        if rw > 0 and rh > 0:
            pygame.draw.rect(
                self.window, _YELLOW, pygame.Rect(round(bx), round(by), round(rw), round(rh))
            )

        self._blit_text(self.hp_text, self.hp_text_position)
        self._blit_text(PLAYER_NAME, self.player_name_position)
        tx, ty = self.timer_position
        self._blit_text(self.time_text, (tx - self.timer_width / 2, ty - self.timer_height / 2))