"""Tile kinds, defenders, attackers and the enemies walking the path."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

SNOW = "\u25fb\ufe0f"
ROCK = "\U0001faa8"
FLAG = "\U0001f6a9"
FIR = "\U0001f332"
PENGUIN = "\U0001f427"
SNOWMAN = "\u26c4"
BEAR = "\U0001f43b"
SKIER = "\u26f7\ufe0f"
SNOWBOARDER = "\U0001f3c2"
LUGER = "\U0001f6f7"
CROWN = "\U0001f451"


class TileType(IntEnum):
    """What occupies a cell of the board."""

    SNOW = 0
    SNOW_DRIFT = 1
    SNOW_PACKED = 2
    SNOW_POWDER = 3
    ROCK = 4
    FIR = 5
    FLAG = 6
    CROWN = 7
    SKIER = 8
    SNOWBOARDER = 9
    LUGER = 10
    PENGUIN = 11
    SNOWMAN = 12
    BEAR = 13

    @property
    def emoji(self) -> str:
        return _EMOJIS[self]

    @property
    def glyph(self) -> str:
        """The text drawn for this tile; narrow emojis are padded by a space."""
        if self.is_snow or self is TileType.SKIER:
            return self.emoji + " "
        return self.emoji

    @property
    def is_snow(self) -> bool:
        return self <= TileType.SNOW_POWDER

    @property
    def is_path(self) -> bool:
        """True for tiles an attacker may step onto."""
        return self in (TileType.FLAG, TileType.CROWN)

    @property
    def is_attacker(self) -> bool:
        return TileType.SKIER <= self <= TileType.LUGER

    @property
    def is_defender(self) -> bool:
        return TileType.PENGUIN <= self <= TileType.BEAR


_EMOJIS = {
    TileType.SNOW: SNOW,
    TileType.SNOW_DRIFT: SNOW,
    TileType.SNOW_PACKED: SNOW,
    TileType.SNOW_POWDER: SNOW,
    TileType.ROCK: ROCK,
    TileType.FIR: FIR,
    TileType.FLAG: FLAG,
    TileType.CROWN: CROWN,
    TileType.SKIER: SKIER,
    TileType.SNOWBOARDER: SNOWBOARDER,
    TileType.LUGER: LUGER,
    TileType.PENGUIN: PENGUIN,
    TileType.SNOWMAN: SNOWMAN,
    TileType.BEAR: BEAR,
}


@dataclass
class Defender:
    """A tower the player places on snow."""

    name: str
    reach: int
    damage: int
    fire_rate: float
    price: int
    tile: TileType
    row: int = 0
    column: int = 0

    @property
    def emoji(self) -> str:
        return self.tile.emoji


@dataclass(frozen=True)
class Attacker:
    """The statistics of one kind of attacker."""

    name: str
    life: int
    dodge: float
    reward: int
    tile: TileType

    @property
    def emoji(self) -> str:
        return self.tile.emoji


@dataclass
class Enemy:
    """An attacker on the board at a given row and column."""

    attacker: Attacker
    row: int
    column: int

    @property
    def position(self) -> tuple[int, int]:
        return (self.row, self.column)


def pingu_patrouilleur() -> Defender:
    return Defender("Pingu-Patrouilleur", 5, 30, 0.5, 100, TileType.PENGUIN)


def flocon_perce_ciel() -> Defender:
    return Defender("Flocon-Perce-Ciel", 10, 300, 2.0, 200, TileType.SNOWMAN)


def garde_polaire() -> Defender:
    return Defender("Garde Polaire", 2, 70, 1.0, 150, TileType.BEAR)


def skieur_frenetique() -> Attacker:
    """Fast and weak, with a small chance to dodge."""
    return Attacker("Skieur Frénétique", 250, 0.15, 20, TileType.SKIER)


def snowboarder_acrobate() -> Attacker:
    """Average speed and life, but dodges well."""
    return Attacker("Snowboarder Acrobate", 500, 0.30, 30, TileType.SNOWBOARDER)


def lugiste_barjo() -> Attacker:
    """Slow and tough."""
    return Attacker("Lugiste Barjo", 2000, 0.0, 50, TileType.LUGER)


_DEFENDER_CHOICES = {
    1: pingu_patrouilleur,
    2: flocon_perce_ciel,
    3: garde_polaire,
}


def defender_for_choice(choice: int) -> Defender:
    """Build the defender for a menu choice 1, 2 or 3."""
    try:
        factory = _DEFENDER_CHOICES[choice]
    except (KeyError, TypeError):
        raise ValueError(f"no defender for choice {choice!r}") from None
    return factory()