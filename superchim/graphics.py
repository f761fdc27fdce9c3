"""Window, drawing and audio services built on pygame."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pygame

from .settings import (
    AUDIO_BUFFER,
    AUDIO_CHANNELS,
    AUDIO_FREQUENCY,
    ICON_PATH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    WINDOW_TITLE,
)

log = logging.getLogger(__name__)


class GraphicsError(RuntimeError):
    """Raised when the display cannot be set up or used."""


@dataclass
class ScrollingBackground:
    """A texture drawn twice side by side and shifted every frame."""

    texture: Optional[pygame.Surface] = None
    scrolling_offset: int = 0
    width: int = 0
    height: int = 0

    def set_texture(self, texture):
        """Use ``texture`` and take its size as the wrap-around width."""
        self.texture = texture
        if texture is None:
            self.width = self.height = 0
        else:
            self.width, self.height = texture.get_size()

    def scroll(self, distance):
        """Shift left by ``distance``, wrapping back to the texture width."""
        self.scrolling_offset -= distance
        if self.scrolling_offset < 0:
            self.scrolling_offset = self.width


class Graphics:
    """Owns the window and the mixer; loads and draws assets."""

    def __init__(self, asset_dir="."):
        self.asset_dir = Path(asset_dir)
        self.screen: Optional[pygame.Surface] = None
        self.audio_enabled = False
        self._music_playing = False
        self._music_paused = False

    def _resolve(self, path):
        return self.asset_dir / path

    def init(self):
        """Open the window and the audio device."""
        try:
            pygame.display.init()
            pygame.display.set_caption(WINDOW_TITLE)
            self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        except pygame.error as exc:
            pygame.quit()
            raise GraphicsError(f"could not create window: {exc}") from exc

        try:
            pygame.mixer.init(
                frequency=AUDIO_FREQUENCY, channels=AUDIO_CHANNELS, buffer=AUDIO_BUFFER
            )
            self.audio_enabled = True
        except pygame.error as exc:
            log.error("could not initialise audio: %s", exc)
            self.audio_enabled = False

        icon = self.load_texture(ICON_PATH)
        if icon is not None:
            pygame.display.set_icon(icon)

    def _require_screen(self) -> pygame.Surface:
        if self.screen is None:
            raise GraphicsError("graphics not initialised")
        return self.screen

    def prepare_scene(self):
        """Clear the frame."""
        self._require_screen().fill((0, 0, 0))

    def present_scene(self):
        """Show the frame that was drawn."""
        self._require_screen()
        pygame.display.flip()

    def load_texture(self, path):
        """Load an image; log and return None if it cannot be read."""
        full = self._resolve(path)
        log.info("Loading %s", full)
        try:
            texture = pygame.image.load(str(full))
        except (pygame.error, FileNotFoundError, OSError) as exc:
            log.error("Load texture %s: %s", full, exc)
            return None
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            texture = texture.convert_alpha()
        return texture

    def render_texture(self, texture, x, y, angle=0):
        """Draw ``texture`` with its top-left at (x, y), rotated clockwise by ``angle``."""
        screen = self._require_screen()
        if texture is None:
            return
        if angle:
            width, height = texture.get_size()
            rotated = pygame.transform.rotate(texture, -angle)
            rect = rotated.get_rect(center=(x + width / 2, y + height / 2))
            screen.blit(rotated, rect)
        else:
            screen.blit(texture, (x, y))

    def render_scrolling(self, background, y):
        """Draw a scrolling background as two copies at height ``y``."""
        self.render_texture(background.texture, background.scrolling_offset, y, 0)
        self.render_texture(
            background.texture, background.scrolling_offset - background.width, y, 0
        )

    def load_sound(self, path):
        """Load a sound effect; log and return None if it cannot be read."""
        if not self.audio_enabled:
            log.error("Could not load sound %s: audio is not available", path)
            return None
        try:
            return pygame.mixer.Sound(str(self._resolve(path)))
        except (pygame.error, FileNotFoundError, OSError) as exc:
            log.error("Could not load sound! mixer error: %s", exc)
            return None

    def play_sound(self, sound):
        """Play a sound effect on any free channel."""
        if sound is not None:
            sound.play()

    def load_music(self, path):
        """Return a handle for background music, or None if it is missing."""
        full = self._resolve(path)
        if not self.audio_enabled or not full.is_file():
            log.error("Could not load music %s", full)
            return None
        return str(full)

    def play_music(self, music):
        """Start looping ``music``, or resume it if it is paused."""
        if music is None or not self.audio_enabled:
            return
        if not self._music_playing:
            try:
                pygame.mixer.music.load(music)
                pygame.mixer.music.play(-1)
            except pygame.error as exc:
                log.error("Could not play music: %s", exc)
                return
            self._music_playing = True
            self._music_paused = False
        elif self._music_paused:
            pygame.mixer.music.unpause()
            self._music_paused = False

    def pause_music(self):
        """Pause the background music."""
        if self.audio_enabled and self._music_playing:
            pygame.mixer.music.pause()
            self._music_paused = True

    def quit(self):
        """Close the audio device and the window."""
        if self.audio_enabled:
            pygame.mixer.quit()
        self.audio_enabled = False
        self._music_playing = self._music_paused = False
        self.screen = None
        pygame.quit()

    def __enter__(self):
        self.init()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.quit()
        return False