from superchim.pipe import Pipe, PipeSprites
from superchim.settings import (
    PIPE_UNDER_OFFSET,
    PIPE_UNDER_TEXTURE,
    PIPE_UPPER_OFFSET,
    PIPE_UPPER_TEXTURE,
    PIPE_WIDTH,
)


class FakeGraphics:
    def __init__(self):
        self.loaded = []
        self.drawn = []

    def load_texture(self, path):
        self.loaded.append(path)
        return path

    def render_texture(self, texture, x, y, angle=0):
        self.drawn.append((texture, x, y, angle))


def test_set_pos_places_both_pipes():
    pipe = Pipe()
    pipe.set_pos(700, 40)
    assert pipe.x == 700
    assert pipe.upper_y == 40 + PIPE_UPPER_OFFSET
    assert pipe.under_y == 40 + PIPE_UNDER_OFFSET


def test_gap_is_independent_of_height():
    first, second = Pipe(), Pipe()
    first.set_pos(0, 0)
    second.set_pos(0, 140)
    assert first.under_y - first.upper_y == second.under_y - second.upper_y


def test_scroll_moves_left():
    pipe = Pipe()
    pipe.set_pos(100, 0)
    pipe.scroll(4)
    assert pipe.x == 96
    assert pipe.upper_y == PIPE_UPPER_OFFSET


def test_out_of_screen_boundary():
    pipe = Pipe()
    pipe.set_pos(-PIPE_WIDTH, 0)
    assert not pipe.out_of_screen()
    pipe.scroll(1)
    assert pipe.out_of_screen()


def test_sprites_load_both_textures():
    graphics = FakeGraphics()
    sprites = PipeSprites.load(graphics)
    assert graphics.loaded == [PIPE_UPPER_TEXTURE, PIPE_UNDER_TEXTURE]
    assert (sprites.upper, sprites.under) == (PIPE_UPPER_TEXTURE, PIPE_UNDER_TEXTURE)


def test_render_draws_upper_then_under():
    graphics = FakeGraphics()
    sprites = PipeSprites.load(graphics)
    pipe = Pipe()
    pipe.set_pos(300, 10)
    pipe.render(graphics, sprites)
    assert graphics.drawn == [
        (PIPE_UPPER_TEXTURE, 300, pipe.upper_y, 0),
        (PIPE_UNDER_TEXTURE, 300, pipe.under_y, 0),
    ]