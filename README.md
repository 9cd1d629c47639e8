# tetrix

tetrix is a compact falling-block puzzle game. The seven tetromino shapes I, J, L, O, S, T and Z drop onto a board 20 rows high and 10 columns wide. You move and rotate them to build complete rows. Each full row is cleared and earns points.

## Installation

```
pip install .
```

The game draws its window and reads the keyboard through pygame.

## Playing

```
tetrix
```

| Key         | Action                      |
|-------------|-----------------------------|
| Left arrow  | move the piece left         |
| Right arrow | move the piece right        |
| Down arrow  | soft drop (1 point per row) |
| Up arrow    | rotate the piece            |
| Escape      | quit                        |

The current piece falls one row every 0.2 seconds. The panel on the right shows the score and the next piece. When "GAME OVER" appears, press any key except Escape to start a new game. The window also closes when you close it the usual way.

The text uses the TrueType font at `Font/monogram.ttf`, relative to the working directory. You can name another font with `--font`:

```
tetrix --font path/to/font.ttf
```

If the font cannot be loaded, pygame's default font is used.

### Scoring

| Rows cleared at once | Points |
|----------------------|--------|
| 1                    | 100    |
| 2                    | 200    |
| 3                    | 500    |

Clearing four rows at once earns no points for the rows. Each soft-drop key press adds one point.

## Using the game logic

You can drive the rules from code without opening a window:

```python
import random

from tetrix.game import Action, Game

game = Game(rng=random.Random(1))  # the rng argument is optional
game.handle_input(Action.LEFT)
game.move_down()
print(game.score, game.game_over)
print(game.grid)            # one line of digits per row, 0 = empty
print(game.grid[19, 0])     # cell value at row 19, column 0
```

Modules:

- `tetrix.position`: `Position`, a frozen row/column coordinate.
- `tetrix.colors`: the colour constants and `cell_colors()`, the palette indexed by block id. Index 0 is an empty cell.
- `tetrix.block`: the base class `Block`, with `move`, `rotate`, `undo_rotate`, `cell_positions` and `draw`, and the seven shapes `LBlock`, `JBlock`, `IBlock`, `OBlock`, `SBlock`, `TBlock` and `ZBlock`.
- `tetrix.grid`: `Grid`, the playing field. It provides `reset`, `is_cell_outside`, `is_cell_empty`, `clear_full_rows` and `draw`. Cells are read and written as `grid[row, col]`, and an `IndexError` is raised for a cell outside the field.
- `tetrix.game`: `Game`, which applies the rules, and `Action`, the player inputs `LEFT`, `RIGHT`, `DOWN`, `ROTATE` and `OTHER`. Pieces are dealt from a bag that holds one of each shape and is refilled when it runs empty.
- `tetrix.app`: the pygame front end `main()` and `EventTimer`, the gravity timer.

## What it does not do

tetrix keeps no high scores and saves nothing between runs. It has no levels and no speed-up: the fall interval stays at 0.2 seconds. It has no hard drop, no hold piece and no pause.

## Running the tests

```
pip install ".[test]"
pytest
```