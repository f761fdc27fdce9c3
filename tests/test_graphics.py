import pygame
import pytest

from superchim.graphics import Graphics, GraphicsError, ScrollingBackground
from superchim.settings import SCREEN_HEIGHT, SCREEN_WIDTH

RED = (255, 0, 0)


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")


def _red_surface(width, height):
    surface = pygame.Surface((width, height))
    surface.fill(RED)
    return surface


def test_set_texture_takes_size():
    background = ScrollingBackground()
    background.set_texture(pygame.Surface((30, 10)))
    assert (background.width, background.height) == (30, 10)


def test_scroll_moves_left():
    background = ScrollingBackground()
    background.set_texture(pygame.Surface((30, 10)))
    background.scrolling_offset = 10
    background.scroll(4)
    assert background.scrolling_offset == 10 - 4


def test_scroll_wraps_to_width():
    background = ScrollingBackground()
    background.set_texture(pygame.Surface((30, 10)))
    background.scroll(4)
    assert background.scrolling_offset == background.width


def test_load_missing_texture_returns_none(tmp_path):
    graphics = Graphics(tmp_path)
    assert graphics.load_texture("nope.png") is None


def test_load_texture_reads_file(tmp_path):
    pygame.image.save(_red_surface(7, 5), str(tmp_path / "red.bmp"))
    graphics = Graphics(tmp_path)
    texture = graphics.load_texture("red.bmp")
    assert texture.get_size() == (7, 5)


def test_render_before_init_raises(tmp_path):
    graphics = Graphics(tmp_path)
    with pytest.raises(GraphicsError):
        graphics.render_texture(_red_surface(2, 2), 0, 0, 0)


def test_render_texture_draws_at_position(tmp_path, headless):
    with Graphics(tmp_path) as graphics:
        assert graphics.screen.get_size() == (SCREEN_WIDTH, SCREEN_HEIGHT)
        graphics.prepare_scene()
        graphics.render_texture(_red_surface(4, 4), 10, 20, 0)
        assert tuple(graphics.screen.get_at((11, 21)))[:3] == RED
        assert tuple(graphics.screen.get_at((9, 19)))[:3] == (0, 0, 0)


def test_render_scrolling_draws_two_copies(tmp_path, headless):
    with Graphics(tmp_path) as graphics:
        graphics.prepare_scene()
        background = ScrollingBackground()
        background.set_texture(_red_surface(50, 5))
        background.scrolling_offset = 60
        graphics.render_scrolling(background, 100)
        assert tuple(graphics.screen.get_at((60, 100)))[:3] == RED
        assert tuple(graphics.screen.get_at((10, 100)))[:3] == RED
        assert tuple(graphics.screen.get_at((55, 100)))[:3] == (0, 0, 0)


def test_load_missing_sound_returns_none(tmp_path, headless):
    with Graphics(tmp_path) as graphics:
        assert graphics.load_sound("missing.wav") is None
        assert graphics.load_music("missing.mp3") is None


def test_quit_clears_screen(tmp_path, headless):
    graphics = Graphics(tmp_path)
    graphics.init()
    graphics.quit()
    assert graphics.screen is None