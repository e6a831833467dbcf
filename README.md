# classicsnake

The classic Snake game. You steer the snake around a grid and eat the pulsing red food. Do not run into a wall or into your own tail. Each piece of food is worth 10 points. The snake speeds up as it grows. The best score is kept between sessions.

## Installing

```
pip install .
```

The game uses `pygame` for its window, drawing, text and sound.

## Playing

```
classicsnake
```

This opens an 800×600 window titled "Classic Snake". The command takes no options apart from `--help`.

| Key | Action |
| --- | --- |
| Enter | Start a game from the menu, or play again after a game over |
| Arrow keys or W A S D | Steer the snake |
| P or Esc | Pause or resume |

The snake cannot turn straight back on itself.

### High score

The best score is saved to `highscore.dat` in the current directory. It is written each time you beat it, and again when the game closes. It is read back at start-up. If the file is missing, the high score starts at 0.

### Assets

The game looks for optional assets relative to the current directory:

- `assets/fonts/ARCADE_I.TTF` is the font for on-screen text. If it cannot be loaded, pygame's default font is used.
- `assets/sounds/eat.wav`, `assets/sounds/game_over.wav` and `assets/sounds/move.wav` are the sound effects. If any are missing, those sounds stay silent. If no audio device can be opened, the game runs without sound.

## Using the pieces

The snake and food logic live in plain classes, so you can use them without a window:

```python
from classicsnake.snake import Direction, Snake

snake = Snake(10, 10, 40, 30)   # head at (10, 10) on a 40x30 grid, heading right
snake.change_direction(Direction.UP)
snake.update(0.1)               # enough time for one movement step
print(snake.head)               # (10, 9)
print(len(snake))               # 3
print(snake.check_collision())  # False
```

The modules are:

- `classicsnake.snake` has `Direction`, `Segment` and `Snake`. `Snake` provides `update`, `change_direction`, `grow`, `check_collision`, `eat_food` and `render`, along with the `head` and `body` properties.
- `classicsnake.food` has `Food`. It takes an optional `random.Random` for repeatable placement. `Food.reposition(snake)` raises `RuntimeError` when no free cell is left.
- `classicsnake.grid` has `Grid`, which draws the grid lines.
- `classicsnake.sound` has `SoundType` and `SoundManager`. `SoundManager.play_sound` returns whether a sound was played.
- `classicsnake.text` has `TextRenderer`, with `render` and `render_centered`.
- `classicsnake.game` has `GameState`, `Game` and `main`.

`Game(title, width, height, highscore_path)` opens a pygame display. It can be used as a context manager, and `close()` runs on exit. You can script a session with `handle_key(key)` and `update(delta_time)`, then inspect `state`, `score`, `high_score`, `snake` and `food`.

## Running the tests

```
pip install .[test]
pytest
```