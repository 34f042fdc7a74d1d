# flocon

*Opération Flocon* is a small tower-defence game that runs in the terminal.
Its messages are in French.

Each game draws a random snowy mountain between 27 and 45 cells wide. A
flagged trail runs from the top row down to a crown on the bottom row.
Skiers, snowboarders and lugers enter the trail at the top one after another
and move one step at a time. Before each wave you may spend snowflakes on
defenders and place them on snow cells. If any attacker reaches the crown,
you lose. Hold out for 16 waves to win.

## Installing

```
pip install .
```

## Playing

```
flocon
flocon --seed 42
```

`--seed` fixes the random generator, so the same seed gives the same maps
and attackers.

The main menu offers three choices:

1. start a new game
2. resume a game (this also starts a new game; see below)
3. quit

Before each wave the game asks whether you want to place a defender. You
start with 120 snowflakes:

| Choice | Defender            | Price | Reach | Damage |
|--------|---------------------|-------|-------|--------|
| 1      | Pingu-Patrouilleur  | 100   | 5     | 30     |
| 2      | Flocon-Perce-Ciel   | 200   | 10    | 300    |
| 3      | Garde Polaire       | 150   | 2     | 70     |

To place a defender, give the column as a letter (`a`–`z` for the first 26
columns, then `A`, `B`, ...) and the row as a number from 1, both as shown
on the map's edges. Only plain snow cells (tile type 0) accept a defender;
some cells drawn as snow are other snow types and are refused.

The attackers, built in `flocon.units`:

- **Skieur Frénétique**: 250 life, 15 % dodge, reward 20
- **Snowboarder Acrobate**: 500 life, 30 % dodge, reward 30
- **Lugiste Barjo**: 2000 life, no dodge, reward 50

An attacker moves down when it can, otherwise right, otherwise left, and only
onto flag or crown cells. Up to 9 attackers enter per wave, each one only
once the top cell of the trail is free.

Ending input (Ctrl-D) or pressing Ctrl-C leaves the game with exit status 1.

## What the game does not do

- Defenders do not attack. Their reach, damage and fire rate are recorded
  but never used, so attackers are never stopped and the score stays at 0.
- Choosing "resume" does not load anything: there is no way to read a saved
  game back. It starts a new game like choice 1.
- `Board.save` writes a board's tile codes to a file, but nothing in the game
  calls it.

## Using the library

The game logic can be used without the terminal interface:

```python
import random
from flocon.board import Board

rng = random.Random(1)
board = Board.random(30, rng)
board.carve_path(rng)
print(board.render())
board.save("board.txt")
```

- `flocon.units` holds `TileType`, `Defender`, `Attacker`, `Enemy`, the
  factories for each defender and attacker, and `defender_for_choice`.
- `flocon.board` holds `Board` (random terrain, `carve_path`, `render`,
  `move_enemies`, `spawn_enemy`, `place_defender`, `save`) and
  `column_label`.
- `flocon.game.Game` runs a full game with `play()`. It takes the random
  generator and the `prompt`, `write` and `pause` functions as arguments, so
  scripts and tests can drive a game without a terminal.
- `flocon.cli.menu` shows the main menu and `flocon.cli.main` runs the
  command.

`Board.save` writes the size twice, then every tile code, separated by
spaces, on one line.

## Tests

```
pip install .[test]
pytest
```