"""The player's bird: position, flapping physics and wing animation."""

from __future__ import annotations

from .settings import BIRD_TEXTURES, SCREEN_HEIGHT, SCREEN_WIDTH

_ANIMATION_PERIOD = 60
_MAX_ANGLE = 45
_FLAP_ANGLE = -45
_FLAP_SPEED = -10
_FALL_SPEED = 5
_TILT_STEP = 5


class Bird:
    """Bird state; ``dy`` is the vertical speed in pixels per frame."""

    def __init__(self):
        self.textures = (None, None, None)
        self.dy = 0
        self.reset()

    def load(self, graphics):
        """Load the up, mid and down wing textures."""
        self.textures = tuple(graphics.load_texture(path) for path in BIRD_TEXTURES)

    def render(self, graphics):
        """Advance the wing animation and draw the bird."""
        self.frame += 1
        if self.frame >= _ANIMATION_PERIOD:
            self.frame -= _ANIMATION_PERIOD
        up, mid, down = self.textures
        if self.frame <= 20:
            texture = up
        elif self.frame <= 40:
            texture = mid
        else:
            texture = down
        graphics.render_texture(texture, self.x, self.y, self.angle)

    def move(self):
        """Apply one frame of motion; falling speeds up with gravity."""
        self.y = max(self.y + self.dy, 0)
        falling = self.dy > 0
        self.angle = min(self.angle + (_TILT_STEP if falling else 0), _MAX_ANGLE)
        if falling:
            self.dy = int(self.dy + 0.1 * self.gravity)
            self.gravity += 1

    def up(self):
        """Flap: jump upwards and tilt the nose up."""
        self.dy = _FLAP_SPEED
        self.angle = _FLAP_ANGLE
        self.gravity = 1

    def down(self):
        """Start falling."""
        self.dy = _FALL_SPEED

    def reset(self):
        """Return to the starting position."""
        self.x = SCREEN_WIDTH // 7
        self.y = SCREEN_HEIGHT // 2
        self.angle = 0
        self.frame = 0
        self.gravity = 1