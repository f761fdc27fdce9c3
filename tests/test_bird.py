from superchim.bird import Bird
from superchim.settings import BIRD_TEXTURES, SCREEN_HEIGHT, SCREEN_WIDTH


class FakeGraphics:
    def __init__(self):
        self.loaded = []
        self.drawn = []

    def load_texture(self, path):
        self.loaded.append(path)
        return path

    def render_texture(self, texture, x, y, angle=0):
        self.drawn.append((texture, x, y, angle))


def test_starts_at_reset_position():
    bird = Bird()
    assert (bird.x, bird.y) == (SCREEN_WIDTH // 7, SCREEN_HEIGHT // 2)
    assert bird.angle == 0


def test_load_requests_three_textures():
    graphics = FakeGraphics()
    bird = Bird()
    bird.load(graphics)
    assert graphics.loaded == list(BIRD_TEXTURES)


def test_up_sets_flap_state():
    bird = Bird()
    bird.up()
    assert (bird.dy, bird.angle, bird.gravity) == (-10, -45, 1)


def test_rising_keeps_angle():
    bird = Bird()
    start = bird.y
    bird.up()
    bird.move()
    assert bird.y == start - 10
    assert bird.angle == -45


def test_y_never_below_zero():
    bird = Bird()
    bird.y = 3
    bird.up()
    bird.move()
    assert bird.y == 0


def test_falling_tilts_and_moves_down():
    bird = Bird()
    start = bird.y
    bird.down()
    bird.move()
    assert bird.y == start + 5
    assert bird.angle == 5


def test_angle_capped_while_falling():
    bird = Bird()
    bird.down()
    for _ in range(30):
        bird.move()
    assert bird.angle == 45


def test_fall_speed_never_decreases():
    bird = Bird()
    bird.down()
    speeds = []
    for _ in range(15):
        bird.move()
        speeds.append(bird.dy)
    assert speeds == sorted(speeds)
    assert speeds[-1] > 5


def test_reset_restores_position_after_moves():
    bird = Bird()
    bird.down()
    for _ in range(5):
        bird.move()
    bird.reset()
    assert (bird.x, bird.y, bird.angle) == (SCREEN_WIDTH // 7, SCREEN_HEIGHT // 2, 0)


def test_render_animation_cycle():
    graphics = FakeGraphics()
    bird = Bird()
    bird.load(graphics)
    for _ in range(60):
        bird.render(graphics)
    up, mid, down = BIRD_TEXTURES
    textures = [entry[0] for entry in graphics.drawn]
    assert textures == [up] * 20 + [mid] * 20 + [down] * 19 + [up]


def test_render_uses_position_and_angle():
    graphics = FakeGraphics()
    bird = Bird()
    bird.load(graphics)
    bird.up()
    bird.render(graphics)
    assert graphics.drawn[0][1:] == (bird.x, bird.y, -45)