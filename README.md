# superchim

Super Chim is a small side-scrolling arcade game built on pygame: guide
the bird through an endless stream of pipes, one flap at a time. Every
pipe you pass earns a point, and your best score is kept in a file
between sessions.

## Installing

```
pip install superchim
```

The game draws and plays its assets from an `image/` and an `audio/`
directory. By default these are looked for in the current directory.
When an image or sound cannot be loaded, the error is logged and the
game goes on without it. When no audio device can be opened, the game
runs silently.

## Playing

```
superchim
```

Options:

- `--assets DIR`: the directory that holds `image/` and `audio/`. The
  default is `.`.
- `--score FILE`: the file that keeps the best score. The default is
  `score.txt`.

On the start screen:

- press **Space** or click anywhere else on the screen to start;
- click the speaker icon in the top-left corner to switch music and
  sound effects on or off;
- click the arrow at the left or the right edge to switch between day
  and night.

While playing:

- press **Space** or click to flap. Without a flap, the bird falls
  faster and faster;
- press **Escape** or click the pause button in the top-right corner to
  pause. Do the same again to resume.

When the bird hits a pipe or the ground, the game is over. Your score
and your best score are shown. Press **Space** or click the replay
button to return to the start screen. A new best score is written to the
score file. Closing the window quits the game at any point.

## Using it from Python

```python
from superchim.main import main

main(["--assets", "path/to/assets"])
```

The parts of the game are in these modules:

- `superchim.game`: `Game`, which holds the game state and runs the
  start, play, pause and game-over screens.
- `superchim.bird`: `Bird`, which holds the bird's position, its
  flapping and falling, and its wing animation.
- `superchim.pipe`: `Pipe`, a pair of pipes with a gap between them, and
  `PipeSprites`, which holds their textures.
- `superchim.graphics`: `Graphics`, which owns the window and the mixer,
  and `ScrollingBackground`.
- `superchim.settings`: screen size, sprite sizes and asset paths.

`Graphics` can be used as a context manager. It opens the window on
entry and closes it on exit.

## Running the tests

```
pip install "superchim[test]"
pytest
```