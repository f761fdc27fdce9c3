"""Super Chim: a side-scrolling flappy-bird style arcade game on pygame."""

__version__ = "1.0.0"