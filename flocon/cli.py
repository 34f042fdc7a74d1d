"""Command-line entry point: the main menu and the game loop around it."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Sequence
from typing import Optional

from flocon.game import Game
from flocon.units import BEAR, LUGER, PENGUIN, SKIER, SNOWBOARDER, SNOWMAN

NEW_GAME = 1
RESUME_GAME = 2
QUIT = 3

GOODBYE = "A plus \U0001f44b\U0001f60a\n"

_CHOICE_PROMPT = "Votre choix : "


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _banner() -> str:
    return (
        f"\n \t=== {PENGUIN}{SNOWMAN}{BEAR} OPERATION FLOCON "
        f"{SKIER} {SNOWBOARDER}{LUGER} === \n"
        "\n \t=== MENU PRINCIPAL === \n"
        "\n \t Nouvelle Partie (1) \t \n"
        "\n \t Reprendre une partie (2) \t \n"
        "\n \t Quitter (3) \t \n\n"
    )


_RETRY = (
    "\n Veuillez entrer une valeur correcte : \n"
    "1 pour démarrer une nouvelle partie \n"
    "2 pour reprendre une ancienne partie \n"
    "3 pour quitter le jeu \n"
)


def menu(
    prompt: Optional[Callable[[str], str]] = None,
    write: Optional[Callable[[str], None]] = None,
) -> int:
    """Show the main menu and return the player's choice, 1, 2 or 3."""
    prompt = prompt or input
    write = write or _write_stdout
    write(_banner())
    while True:
        answer = prompt(_CHOICE_PROMPT).strip()
        try:
            choice = int(answer)
        except ValueError:
            choice = 0
        if NEW_GAME <= choice <= QUIT:
            return choice
        write(_RETRY)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="flocon", description="Opération Flocon, a snowy tower defence game."
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="seed for the random generator"
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the menu until the player quits; returns the exit status."""
    args = _parse_args(argv)
    rng = random.Random(args.seed)
    try:
        while True:
            choice = menu()
            if choice == QUIT:
                _write_stdout(GOODBYE)
                return 0
            Game(rng=rng).play()
    except (EOFError, KeyboardInterrupt):
        _write_stdout("\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())