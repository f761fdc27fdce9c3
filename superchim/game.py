"""Game state and the menu, play, pause and game-over loops."""

from __future__ import annotations

import logging
import random
from pathlib import Path

import pygame

from .bird import Bird
from .graphics import Graphics, ScrollingBackground
from .pipe import Pipe, PipeSprites
from .settings import (
    GAMEOVER_HEIGHT,
    GAMEOVER_WIDTH,
    LAND_HEIGHT,
    MESSAGE_HEIGHT,
    MESSAGE_WIDTH,
    PIPE_DISTANCE,
    PIPE_HEIGHT,
    PIPE_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)

log = logging.getLogger(__name__)

TARGET_FPS = 60
SCROLL_SPEED = 4
PIPE_COUNT = 4
LAND_Y = 500
GROUND_LIMIT = 475
BIRD_WIDTH = 29
BIRD_HEIGHT = 24
RESET_PIPE_X = 500

LARGE_DIGIT_WIDTH = 30
LARGE_DIGIT_Y = 10
SMALL_DIGIT_WIDTH = 21

SOUND_BUTTON = (10, 10, 32, 24)
LEFT_BUTTON = (0, 312, 13, 16)
RIGHT_BUTTON = (690, 312, 13, 16)
STATE_BUTTON = (630, 20, 50, 50)
REPLAY_BUTTON = (300, 360, 100, 56)

PAUSE_MESSAGE_SIZE = (400, 40)
PAUSE_MESSAGE_OFFSET = 260

_TEXTURES = {
    "left": "image/button/left.png",
    "right": "image/button/right.png",
    "sound_on": "image/button/soundon.png",
    "sound_off": "image/button/soundoff.png",
    "replay": "image/button/replay.png",
    "state": "image/button/state.png",
    "message": "image/message/message.png",
    "game_over": "image/message/gameOver.png",
    "pause_message": "image/message/pauseMessage.png",
}

_SOUNDS = {
    "click": "audio/click.mp3",
    "flap": "audio/flap.mp3",
    "dead": "audio/dead.mp3",
    "point": "audio/point.wav",
}

_MUSIC = "audio/music.mp3"


def _inside(pos, button):
    mouse_x, mouse_y = pos
    x, y, width, height = button
    return x <= mouse_x <= x + width and y <= mouse_y <= y + height


def _is_key(event, key):
    return event.type == pygame.KEYDOWN and event.key == key


class Game:
    """The whole game: assets, bird, pipes, score and the screens."""

    def __init__(self, graphics=None, score_path="score.txt", rng=None):
        self.graphics = graphics if graphics is not None else Graphics()
        self.score_path = Path(score_path)
        self.rng = rng if rng is not None else random.Random()

        self.bird = Bird()
        self.pipes: list[Pipe] = []
        self.pipe_sprites = PipeSprites(None, None)

        self.textures = dict.fromkeys(_TEXTURES)
        self.sounds = dict.fromkeys(_SOUNDS)
        self.music = None
        self.small_num = [None] * 10
        self.large_num = [None] * 10

        self.land = ScrollingBackground()
        self.day = ScrollingBackground()
        self.night = ScrollingBackground()

        self.playing = False
        self.should_quit = False
        self.die = False
        self.is_day = True
        self.is_sound = True
        self.score = 0
        self.best_score = 0

        self._clock = pygame.time.Clock()

    # ----------------------------------------------------------------- setup

    def _new_pipe(self, x):
        pipe = Pipe()
        pipe.set_pos(x, self.rng.randint(0, LAND_HEIGHT))
        return pipe

    def _load_best_score(self):
        try:
            return int(self.score_path.read_text().split()[0])
        except (OSError, ValueError, IndexError):
            return 0

    def init(self):
        """Open the window, load every asset and the saved best score."""
        graphics = self.graphics
        graphics.init()
        self.pipe_sprites = PipeSprites.load(graphics)
        self.pipes = [
            self._new_pipe(SCREEN_WIDTH + PIPE_DISTANCE * i) for i in range(PIPE_COUNT)
        ]

        self.large_num = [
            graphics.load_texture(f"image/bignum/{digit}.png") for digit in range(10)
        ]
        self.small_num = [
            graphics.load_texture(f"image/smallnum/{digit}.png") for digit in range(10)
        ]
        self.textures = {
            name: graphics.load_texture(path) for name, path in _TEXTURES.items()
        }

        self.land.set_texture(graphics.load_texture("image/background/land.png"))
        self.day.set_texture(graphics.load_texture("image/background/day.png"))
        self.night.set_texture(graphics.load_texture("image/background/night.png"))

        self.music = graphics.load_music(_MUSIC)
        self.sounds = {name: graphics.load_sound(path) for name, path in _SOUNDS.items()}

        graphics.play_music(self.music)
        self.bird.load(graphics)

        self.best_score = self._load_best_score()

        self.playing = self.die = self.should_quit = False
        self.score = 0
        self.is_day = self.is_sound = True

    def close(self):
        """Release the window and the audio device."""
        self.graphics.quit()

    # ------------------------------------------------------------ mechanics

    def collision(self, pipe):
        """True if the bird touches ``pipe`` or the land."""
        bird_x, bird_y = self.bird.x, self.bird.y
        if pipe.x - BIRD_WIDTH <= bird_x <= pipe.x + PIPE_WIDTH:
            if pipe.upper_y - BIRD_HEIGHT <= bird_y <= pipe.upper_y + PIPE_HEIGHT:
                return True
            if pipe.under_y - BIRD_HEIGHT <= bird_y <= pipe.under_y + PIPE_HEIGHT:
                return True
        return bird_y >= GROUND_LIMIT

    def update_high_score(self):
        """Make the current score the best one and save it."""
        self.best_score = self.score
        try:
            self.score_path.write_text(str(self.best_score))
        except OSError as exc:
            log.error("could not save best score to %s: %s", self.score_path, exc)

    def render_large_num(self, num):
        """Draw ``num`` centred at the top of the screen."""
        digits = str(num)
        x = (SCREEN_WIDTH - LARGE_DIGIT_WIDTH * len(digits)) // 2
        for char in digits:
            self.graphics.render_texture(self.large_num[int(char)], x, LARGE_DIGIT_Y, 0)
            x += LARGE_DIGIT_WIDTH

    def render_small_num(self, num, pos_x, pos_y):
        """Draw ``num`` right-aligned so that it ends at ``pos_x``."""
        digits = str(num)
        x = pos_x - SMALL_DIGIT_WIDTH * len(digits)
        for char in digits:
            self.graphics.render_texture(self.small_num[int(char)], x, pos_y, 0)
            x += SMALL_DIGIT_WIDTH

    def update_music_and_sound(self):
        """Toggle music and sound effects."""
        if self.is_sound:
            self.graphics.pause_music()
        else:
            self.graphics.play_music(self.music)
        self.is_sound = not self.is_sound

    def _click(self):
        if self.is_sound:
            self.graphics.play_sound(self.sounds["click"])

    def _background(self):
        return self.day if self.is_day else self.night

    def _render_pipes(self):
        for pipe in self.pipes:
            pipe.render(self.graphics, self.pipe_sprites)

    # --------------------------------------------------------------- screens

    def prepare(self):
        """Draw the start screen and handle one pending event."""
        graphics = self.graphics
        self.die = False

        self.day.scroll(SCROLL_SPEED)
        self.night.scroll(SCROLL_SPEED)
        self.land.scroll(SCROLL_SPEED)
        graphics.render_scrolling(self._background(), 0)
        graphics.render_scrolling(self.land, LAND_Y)

        graphics.render_texture(self.textures["left"], 0, SCREEN_HEIGHT // 2, 0)
        graphics.render_texture(
            self.textures["right"], SCREEN_WIDTH - 13, SCREEN_HEIGHT // 2, 0
        )
        graphics.render_texture(
            self.textures["message"],
            (SCREEN_WIDTH - MESSAGE_WIDTH) // 2,
            (SCREEN_HEIGHT - MESSAGE_HEIGHT - LAND_HEIGHT) // 2,
            0,
        )
        sound_icon = self.textures["sound_on" if self.is_sound else "sound_off"]
        graphics.render_texture(sound_icon, 10, 10, 0)

        self.bird.reset()
        self.bird.render(graphics)
        graphics.present_scene()

        event = pygame.event.poll()
        if event.type == pygame.QUIT:
            self.die = self.should_quit = True
        if _is_key(event, pygame.K_SPACE):
            self.playing = True
        if event.type == pygame.MOUSEBUTTONDOWN:
            log.debug("click at %s", event.pos)
            if _inside(event.pos, SOUND_BUTTON):
                self.update_music_and_sound()
                self._click()
            elif _inside(event.pos, LEFT_BUTTON) or _inside(event.pos, RIGHT_BUTTON):
                self.is_day = not self.is_day
                self._click()
            else:
                self.playing = True

    def play(self):
        """Run the game until the bird dies or the window is closed."""
        while not self.die:
            if self.collision(self.pipes[0]):
                if self.score > self.best_score:
                    self.update_high_score()
                self.dead()
                continue

            if self.pipes[0].x == self.bird.x:
                self.score += 1
                if self.is_sound:
                    self.graphics.play_sound(self.sounds["point"])

            while (event := pygame.event.poll()).type != pygame.NOEVENT:
                if event.type == pygame.QUIT:
                    self.die = self.should_quit = True

                keys = pygame.key.get_pressed()
                if keys[pygame.K_SPACE] or event.type == pygame.MOUSEBUTTONDOWN:
                    self.bird.up()
                    if self.is_sound:
                        self.graphics.play_sound(self.sounds["flap"])
                else:
                    self.bird.down()

                if event.type == pygame.MOUSEBUTTONDOWN and _inside(
                    event.pos, STATE_BUTTON
                ):
                    self._click()
                    self.pause()

                if _is_key(event, pygame.K_ESCAPE):
                    self.pause()

            self.update()
            self._clock.tick(TARGET_FPS)

    def update(self):
        """Advance and draw one frame of play."""
        graphics = self.graphics
        graphics.prepare_scene()
        self.day.scroll(SCROLL_SPEED)
        self.night.scroll(SCROLL_SPEED)
        graphics.render_scrolling(self._background(), 0)

        self.bird.move()
        self.bird.render(graphics)

        for pipe in self.pipes:
            pipe.scroll(SCROLL_SPEED)
            pipe.render(graphics, self.pipe_sprites)

        if self.pipes[0].out_of_screen():
            self.pipes.pop(0)
            self.pipes.append(self._new_pipe(self.pipes[-1].x + PIPE_DISTANCE))

        self.render_large_num(self.score)
        graphics.render_texture(self.textures["state"], *STATE_BUTTON[:2], 0)

        self.land.scroll(SCROLL_SPEED)
        graphics.render_scrolling(self.land, LAND_Y)
        graphics.present_scene()

    def pause(self):
        """Show the paused screen until the player resumes or quits."""
        graphics = self.graphics
        width, height = PAUSE_MESSAGE_SIZE
        while True:
            graphics.prepare_scene()
            graphics.render_scrolling(self._background(), 0)
            self._render_pipes()
            self.render_large_num(self.score)
            graphics.render_scrolling(self.land, LAND_Y)
            self.bird.render(graphics)
            graphics.render_texture(self.textures["state"], *STATE_BUTTON[:2], 0)
            graphics.render_texture(
                self.textures["pause_message"],
                SCREEN_WIDTH // 2 - width // 2,
                SCREEN_HEIGHT // 2 - height // 2 + PAUSE_MESSAGE_OFFSET,
                0,
            )
            graphics.present_scene()

            event = pygame.event.poll()
            if event.type == pygame.QUIT:
                self.should_quit = self.die = True
                return
            if event.type == pygame.MOUSEBUTTONDOWN and _inside(event.pos, STATE_BUTTON):
                self._click()
                return
            if _is_key(event, pygame.K_ESCAPE):
                return
            self._clock.tick(TARGET_FPS)

    def dead(self):
        """Show the game-over screen and wait for replay or quit."""
        graphics = self.graphics
        if self.is_sound:
            graphics.play_sound(self.sounds["dead"])

        graphics.render_texture(
            self.textures["game_over"],
            (SCREEN_WIDTH - GAMEOVER_WIDTH) // 2,
            (LAND_Y - GAMEOVER_HEIGHT) // 2,
            0,
        )
        graphics.present_scene()

        self.render_small_num(self.score, 370, 250)
        self.render_small_num(self.best_score, 370, 300)

        graphics.render_texture(self.textures["replay"], (SCREEN_WIDTH - 100) // 2, 360, 0)
        graphics.present_scene()

        self.die = True

        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                self.should_quit = True
                return
            replay = (
                event.type == pygame.MOUSEBUTTONDOWN and _inside(event.pos, REPLAY_BUTTON)
            ) or _is_key(event, pygame.K_SPACE)
            if replay:
                self._click()
                self.reset()
                self.playing = False
                return

    def reset(self):
        """Put the bird back and lay out a fresh row of pipes."""
        self.bird.reset()
        self.pipes = [
            self._new_pipe(RESET_PIPE_X + PIPE_DISTANCE * i) for i in range(PIPE_COUNT)
        ]
        self.score = 0