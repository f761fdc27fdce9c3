"""Pipe obstacles: an upper and an under pipe sharing one x position."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .settings import (
    PIPE_UNDER_OFFSET,
    PIPE_UNDER_TEXTURE,
    PIPE_UPPER_OFFSET,
    PIPE_UPPER_TEXTURE,
    PIPE_WIDTH,
)


@dataclass(frozen=True)
class PipeSprites:
    """Textures shared by all pipes."""

    upper: Any
    under: Any

    @classmethod
    def load(cls, graphics):
        """Load both pipe textures."""
        return cls(
            upper=graphics.load_texture(PIPE_UPPER_TEXTURE),
            under=graphics.load_texture(PIPE_UNDER_TEXTURE),
        )


@dataclass
class Pipe:
    """A pair of pipes with a gap between them."""

    x: int = 0
    upper_y: int = 0
    under_y: int = 0

    def set_pos(self, x, y):
        """Place the pair at ``x`` with the gap shifted down by ``y``."""
        self.x = x
        self.upper_y = y + PIPE_UPPER_OFFSET
        self.under_y = y + PIPE_UNDER_OFFSET

    def scroll(self, distance):
        """Move left by ``distance``."""
        self.x -= distance

    def out_of_screen(self):
        """True once the pipe has moved fully past the left edge."""
        return self.x + PIPE_WIDTH < 0

    def render(self, graphics, sprites):
        """Draw both pipes."""
        graphics.render_texture(sprites.upper, self.x, self.upper_y, 0)
        graphics.render_texture(sprites.under, self.x, self.under_y, 0)