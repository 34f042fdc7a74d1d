"""The square board: random terrain, the flagged path, movement and saving."""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike
from typing import Optional, Union

from flocon.units import (
    Defender,
    Enemy,
    TileType,
    lugiste_barjo,
    skieur_frenetique,
    snowboarder_acrobate,
)

_ATTACKER_FACTORIES = (skieur_frenetique, snowboarder_acrobate, lugiste_barjo)

# Down first, then right, then left.
_MOVES = ((1, 0), (0, 1), (0, -1))

_MIN_PATH_SIZE = 7


def column_label(index: int) -> str:
    """Letter heading a column: a-z for the first 26, then A, B, ..."""
    if index < 0:
        raise ValueError(f"negative column index {index}")
    if index < 26:
        return chr(ord("a") + index)
    return chr(ord("A") + index - 26)


@dataclass
class Cell:
    """One square of the board, possibly holding a defender."""

    tile: TileType
    defender: Optional[Defender] = None


class Board:
    """A square grid of cells."""

    def __init__(self, types: Iterable[Iterable[int]]) -> None:
        rows = [list(row) for row in types]
        if not rows:
            raise ValueError("a board needs at least one row")
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError("a board must be square")
        self._cells = [[Cell(TileType(value)) for value in row] for row in rows]

    @classmethod
    def random(cls, size: int, rng: Optional[random.Random] = None) -> "Board":
        """A board of the given size filled with random terrain (snow, rock, fir)."""
        if size < 1:
            raise ValueError(f"invalid board size {size}")
        rng = rng or random.Random()
        return cls([[rng.randrange(6) for _ in range(size)] for _ in range(size)])

    @property
    def size(self) -> int:
        return len(self._cells)

    @property
    def types(self) -> list[list[TileType]]:
        return [[cell.tile for cell in row] for row in self._cells]

    def __getitem__(self, position: tuple[int, int]) -> Cell:
        row, column = position
        if not (0 <= row < self.size and 0 <= column < self.size):
            raise IndexError(f"position {position} is off the board")
        return self._cells[row][column]

    def carve_path(self, rng: Optional[random.Random] = None) -> int:
        """Lay a winding flagged path from the top row down to a crown.

        Returns the column the path starts from.
        """
        size = self.size
        if size < _MIN_PATH_SIZE:
            raise ValueError(f"a path needs a board of at least {_MIN_PATH_SIZE} cells")
        rng = rng or random.Random()
        cells = self._cells
        start = rng.randrange(size - 6) + 3
        column = start
        cells[0][column].tile = TileType.FLAG
        cells[1][column].tile = TileType.FLAG
        previous = 0
        for row in range(2, size - 1):
            direction = rng.randrange(3) - 1
            while previous == -direction:
                direction = rng.randrange(3) - 1
            previous = direction
            new_column = min(max(column + direction, 0), size - 1)
            if direction != 0:
                cells[row - 1][new_column].tile = TileType.FLAG
            column = new_column
            cells[row][column].tile = TileType.FLAG
        cells[size - 1][column].tile = TileType.CROWN
        return start

    def render(self) -> str:
        """The board as text, with column letters and row numbers."""
        size = self.size
        lines = [
            "    " + "".join(f"{column_label(i)} " for i in range(size)),
            "    " + "__" * size,
        ]
        for number, row in enumerate(self._cells, start=1):
            glyphs = "".join(cell.tile.glyph for cell in row)
            lines.append(f"{number:02d} |{glyphs}|")
        lines.append("    " + "\u203e\u203e" * size)
        return "\n".join(lines) + "\n"

    def start_column(self) -> int:
        """Column of the first flag on the top row."""
        for column, cell in enumerate(self._cells[0]):
            if cell.tile is TileType.FLAG:
                return column
        raise ValueError("the top row holds no path start")

    def crown_column(self) -> int:
        """Column of the crown on the bottom row."""
        for column, cell in enumerate(self._cells[-1]):
            if cell.tile is TileType.CROWN:
                return column
        raise ValueError("the bottom row holds no crown")

    def crown_intact(self) -> bool:
        return any(cell.tile is TileType.CROWN for cell in self._cells[-1])

    def move_enemies(self, enemies: Iterable[Enemy]) -> None:
        """Move each enemy one step along the path: down, else right, else left."""
        size = self.size
        for enemy in enemies:
            row, column = enemy.position
            here = self._cells[row][column]
            for d_row, d_column in _MOVES:
                new_row, new_column = row + d_row, column + d_column
                if not (0 <= new_row < size and 0 <= new_column < size):
                    continue
                target = self._cells[new_row][new_column]
                if target.tile.is_path:
                    target.tile = here.tile
                    here.tile = TileType.FLAG
                    enemy.row, enemy.column = new_row, new_column
                    break

    def spawn_enemy(self, column: int, rng: Optional[random.Random] = None) -> Enemy:
        """Put a randomly chosen attacker on the top row at the given column."""
        rng = rng or random.Random()
        attacker = _ATTACKER_FACTORIES[rng.randrange(len(_ATTACKER_FACTORIES))]()
        self[0, column].tile = attacker.tile
        return Enemy(attacker, 0, column)

    def place_defender(self, row: int, column: int, choice: int, defender: Defender) -> None:
        """Put a defender on a plain snow cell; choice 1-3 selects its tile."""
        try:
            cell = self[row, column]
        except IndexError as error:
            raise ValueError(str(error)) from None
        try:
            tile = TileType(choice + 10)
        except (ValueError, TypeError):
            raise ValueError(f"no defender for choice {choice!r}") from None
        if not tile.is_defender:
            raise ValueError(f"no defender for choice {choice!r}")
        if cell.tile is not TileType.SNOW:
            raise ValueError(f"cell ({row}, {column}) holds no snow")
        cell.tile = tile
        cell.defender = defender
        defender.row = row
        defender.column = column

    def save(self, path: Union[str, PathLike]) -> None:
        """Write the dimensions followed by every tile code, space separated."""
        size = self.size
        parts = [f"{size} {size}"]
        parts.extend(f" {int(cell.tile)}" for row in self._cells for cell in row)
        with open(path, "w", encoding="ascii") as handle:
            handle.write("".join(parts))