"""Screen geometry, sprite sizes and asset locations used across the game."""

WINDOW_TITLE = "Super Chim 2025"

SCREEN_WIDTH = 700
SCREEN_HEIGHT = 625

PIPE_DISTANCE = 220
LAND_HEIGHT = 140

MESSAGE_WIDTH = 184
MESSAGE_HEIGHT = 267

GAMEOVER_WIDTH = 250
GAMEOVER_HEIGHT = 204

# Pipe sprite is 52 x 320 pixels.
PIPE_WIDTH = 52
PIPE_HEIGHT = 320
PIPE_UPPER_OFFSET = -220
PIPE_UNDER_OFFSET = 270

PIPE_UPPER_TEXTURE = "image/pipe/upper.png"
PIPE_UNDER_TEXTURE = "image/pipe/under.png"

BIRD_TEXTURES = ("image/bird/up.png", "image/bird/mid.png", "image/bird/down.png")

ICON_PATH = "image/icon.png"

AUDIO_FREQUENCY = 44100
AUDIO_CHANNELS = 2
AUDIO_BUFFER = 2048