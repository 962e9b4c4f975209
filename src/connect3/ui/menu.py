from __future__ import annotations

import time

from connect3.game.controller import run_game
from connect3.game.engine import GameEngine
from connect3.types import Difficulty, GameMode, GameVariant
from connect3.ui.prompts import parse_choice

_VARIANTS = {"1": GameVariant.CONNECT3.value, "2": GameVariant.CLASSIC.value}
_DIFFICULTIES = {"1": Difficulty.EASY.value, "2": Difficulty.MEDIUM.value, "3": Difficulty.HARD.value}


def _ask(prompt: str, options: dict[str, str], default: str) -> str:
    while True:
        try:
            return parse_choice(input(prompt), options, default)
        except ValueError as e:
            print(e)


def run_menu() -> None:
    print("Select variant:")
    print("1) Connect 3 (three in a row wins)")
    print("2) Classic (matches crown kings, three kings win)")
    variant = GameVariant(_ask("Choice [1]: ", _VARIANTS, GameVariant.CONNECT3.value))

    print("\nSelect mode:")
    print("1) Player vs Player")
    print("2) Player vs AI")
    print("3) Run AI League")
    choice = input("Choice: ").strip()

    if choice == "3":
        print("\nStarting AI League in 3 seconds...\n")
        time.sleep(3)
        from connect3.scripts.league import main as league_main
        league_main(["--variant", variant.value])
        return

    if choice == "2":
        print("\nAI difficulty:")
        print("1) Easy  2) Medium  3) Hard")
        difficulty = Difficulty(_ask("Choice [2]: ", _DIFFICULTIES, Difficulty.MEDIUM.value))
        mode = GameMode.ai(difficulty)
    else:
        if choice != "1":
            print("\nInvalid choice. Defaulting to Player vs Player.")
        mode = GameMode.pvp()

    engine = GameEngine(variant, mode)
    print(f"\nStarting {variant.value} game: {mode.label()}")
    print("Game will start in 3 seconds...\n")
    time.sleep(3)
    run_game(engine)
