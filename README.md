# blockfall

A small falling-block puzzle game. Pieces drop into a well that is 20 rows deep
and 10 columns wide. Each piece is one of the seven four-cell shapes (I, J, L,
O, S, T, Z). Full rows are cleared and earn points. The game ends when a new
piece has no room to enter the well.

## Installing

```
pip install .
```

This installs `pygame`, which draws the window and plays the sounds.

## Playing

```
blockfall
```

| Key    | Action                              |
|--------|-------------------------------------|
| Left   | move the piece one column left      |
| Right  | move the piece one column right     |
| Down   | drop the piece one row (+1 point)   |
| Up     | rotate the piece                    |
| Escape | quit                                |

Closing the window also quits. The piece falls one row on its own every
0.2 seconds. Once the game is over, any key (other than Escape) starts a new
game.

Pieces come from a shuffled bag: all seven shapes appear once before any shape
repeats. The panel on the right shows the score and the next piece.

### Scoring

| Rows cleared at once | Points |
|----------------------|--------|
| 1                    | 100    |
| 2                    | 300    |
| 3                    | 500    |

Each press of Down adds one more point.

### Assets

When the game starts it looks in the working directory for these optional files:

- `Sounds/music.mp3`, the background music, played on a loop
- `Sounds/rotate.mp3`, played when a piece rotates
- `Sounds/clear.mp3`, played when rows are cleared
- `Font/monogram.ttf`, the font for the side panel

The game still runs if any of them is missing; without the font file it uses
pygame's default font, and without audio it plays silently.

## Using the pieces in code

The game logic does not need a window, so you can drive it from a script:

```python
import random

from blockfall.block import TBlock
from blockfall.game import Game
from blockfall.grid import Grid

grid = Grid()
print(grid.render_text())

piece = TBlock()
piece.rotate()
print(piece.cell_positions())

game = Game(rng=random.Random(1), play_sound=print)
game.move_block_left()
game.rotate_block()
game.move_block_down()
print(game.score)
```

- `blockfall.position.Position` is a frozen row/column pair; `moved()` returns
  a shifted copy.
- `blockfall.block` holds `Block` and the seven shapes `IBlock`, `JBlock`,
  `LBlock`, `OBlock`, `SBlock`, `TBlock`, `ZBlock`, plus `all_blocks()`, which
  returns one fresh piece of every kind.
- `blockfall.grid.Grid` is the field. `is_cell_empty()` raises `IndexError` for
  a cell outside the field; `clear_full_rows()` returns the number of rows it
  cleared.
- `blockfall.game.Game` takes an optional `random.Random` for the piece bag and
  an optional `play_sound` callable, which receives `"rotate"` or `"clear"`.
  `handle_input()` takes a pygame key code.
- `blockfall.app.EventTimer` reports when a fixed interval has elapsed, and
  `blockfall.app.main()` runs the windowed game.

## Running the tests

```
pip install .[test]
pytest
```