"""One game: the board, the waves of attackers and the player's defenders."""

from __future__ import annotations

import random
import sys
import time
from collections.abc import Callable, Container
from dataclasses import dataclass, field
from typing import Optional

from flocon.board import Board, column_label
from flocon.units import Defender, Enemy, TileType, defender_for_choice

STARTING_MONEY = 120
WAVES = 16
MAX_SPAWNS_PER_WAVE = 8
MIN_SIZE = 27
MAX_SIZE = 45
TICK_DELAY = 0.4
MESSAGE_DELAY = 2

_DEFENDER_MENU = (
    "1 - Pingu-Patrouilleur(100 flocons)\n"
    "2 - Flocon-Perce-Ciel(200 flocons)\n"
    "3 - Garde Polaire(150 flocons)\n"
)
_BACK_TO_MENU = "\nRetour au menu principal...\n"


def defeat_message(score: int) -> str:
    """Text shown when an attacker takes the crown."""
    return f"\n \t== Vous avez perdu ! ==\n\n \tScore={score}\n"


def victory_message(score: int) -> str:
    """Text shown when every wave has been held off."""
    return f"\n \t== Vous avez gagné ! ==\n\n \tScore={score}\n"


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


@dataclass
class GameState:
    """Everything that changes while a game is played."""

    board: Optional[Board] = None
    defenders: list[Defender] = field(default_factory=list)
    enemies: list[Enemy] = field(default_factory=list)
    score: int = 0
    money: int = STARTING_MONEY
    wave: int = 0
    spawned: int = 0
    start_column: int = 0
    crown_column: int = 0


class Game:
    """Runs a game, talking to the player through prompt and write."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        prompt: Optional[Callable[[str], str]] = None,
        write: Optional[Callable[[str], None]] = None,
        pause: Optional[Callable[[float], None]] = None,
    ) -> None:
        self.rng = rng or random.Random()
        self.prompt = prompt or input
        self.write = write or _write_stdout
        self.pause = pause or time.sleep
        self.state = GameState()

    @property
    def board(self) -> Board:
        if self.state.board is None:
            raise RuntimeError("no board has been created yet")
        return self.state.board

    def new_board(self) -> Board:
        """Create a random board with its path and the first attacker."""
        state = self.state
        size = self.rng.randrange(MAX_SIZE - MIN_SIZE + 1) + MIN_SIZE
        board = Board.random(size, self.rng)
        board.carve_path(self.rng)
        state.board = board
        state.enemies = []
        state.defenders = []
        self.write(f"\nPour cette partie, la carte est de taille {size} x {size}\n")
        self.write(board.render())
        state.start_column = board.start_column()
        state.crown_column = board.crown_column()
        state.spawned = 0
        self._spawn()
        return board

    def _spawn(self) -> None:
        state = self.state
        state.enemies.append(self.board.spawn_enemy(state.start_column, self.rng))
        state.spawned += 1

    def _ask_int(self, question: str, valid: Container[int], error: str) -> int:
        text = question
        while True:
            answer = self.prompt(text).strip()
            try:
                value = int(answer)
            except ValueError:
                value = None
            if value is not None and value in valid:
                return value
            text = error

    def _ask_yes_no(self, question: str, error: str) -> bool:
        return self._ask_int(question, (0, 1), error) == 1

    def _ask_choice(self, question: str) -> int:
        return self._ask_int(
            question, range(1, 4), "Valeur incorrecte. Veuillez réessayer :\n"
        )

    def _letter_index(self, text: str) -> Optional[int]:
        if len(text) != 1 or not text.isascii() or not text.isalpha():
            return None
        if text.islower():
            index = ord(text) - ord("a")
        else:
            index = ord(text) - ord("A") + 26
        return index if index < self.board.size else None

    def _ask_position(self) -> tuple[int, int]:
        board = self.board
        size = board.size
        while True:
            question = (
                f"Choisissez une coordonnée x (lettre a-{column_label(size - 1)}) :\n"
            )
            column = self._letter_index(self.prompt(question).strip())
            while column is None:
                column = self._letter_index(
                    self.prompt("Lettre invalide, Réessayez.\n").strip()
                )
            row = self._ask_int(
                f"Choisissez une coordonnée y (entre 1 et {size}) :\n",
                range(1, size + 1),
                "Coordonnée y invalide, Réessayez.\n",
            ) - 1
            if board[row, column].tile is TileType.SNOW:
                return row, column
            self.write("Cette case ne contient pas de neige. Choisissez une autre case.\n")

    def place_defenders(self) -> None:
        """Let the player buy and place defenders until they decline."""
        state = self.state
        place = self._ask_yes_no(
            "Souhaitez-vous placer un défenseur ?\n1 pour oui ou 0 pour non\n",
            "Valeur incorrecte. Veuillez entrer 1 pour oui ou 0 pour non :\n",
        )
        while place:
            choice = self._ask_choice("Choisissez le défenseur à placer :\n" + _DEFENDER_MENU)
            defender = defender_for_choice(choice)
            while state.money < defender.price:
                self.write(
                    "Flocons insuffisants. Souhaitez-vous toujours placer un défenseur ?\n"
                )
                if not self._ask_yes_no(
                    "1 pour oui ou 0 pour non\n", "Valeur incorrecte. Réessayez :\n"
                ):
                    return
                choice = self._ask_choice(
                    "Choisissez un défenseur à placer :\n" + _DEFENDER_MENU
                )
                defender = defender_for_choice(choice)
            row, column = self._ask_position()
            self.board.place_defender(row, column, choice, defender)
            state.money -= defender.price
            state.defenders.append(defender)
            place = self._ask_yes_no(
                "Souhaitez-vous placer un autre défenseur ?\n1 pour oui ou 0 pour non\n",
                "Valeur incorrecte. Réessayez :\n",
            )

    def tick(self) -> bool:
        """Advance the attackers one step; True when one has reached the crown."""
        state = self.state
        board = self.board
        self.pause(TICK_DELAY)
        board.move_enemies(state.enemies)
        crown = (board.size - 1, state.crown_column)
        if any(enemy.position == crown for enemy in state.enemies):
            return True
        if (
            board[0, state.start_column].tile is TileType.FLAG
            and state.spawned <= MAX_SPAWNS_PER_WAVE
        ):
            self._spawn()
        self.write(board.render())
        return False

    def _finish(self, message: str) -> None:
        self.write(message)
        self.pause(MESSAGE_DELAY)
        self.write(_BACK_TO_MENU)
        self.pause(MESSAGE_DELAY)

    def play(self) -> bool:
        """Play a whole game; True on victory, False on defeat."""
        state = self.state
        self.new_board()
        while state.wave < WAVES:
            self.write(f"\n \tScore = {state.score}\n")
            self.write(f"\n \tFlocons = {state.money}\n\n")
            state.spawned = 0
            self.place_defenders()
            self.write(self.board.render())
            while self.board.crown_intact():
                if self.tick():
                    self._finish(defeat_message(state.score))
                    return False
            self.write(f"\n \tScore={state.score}\n")
            self.pause(MESSAGE_DELAY)
            state.wave += 1
        self._finish(victory_message(state.score))
        return True