"""
Session loop: menus, repeated rounds and the final tally report.
"""
from __future__ import annotations

import logging
import time
from typing import Callable, Optional

import numpy as np

from .config import GameConfig
from .console import Console
from .game import Mode, SessionTally, play_round
from .policies import Difficulty
from .render import Palette, clear_sequence

TITLE = "======== Ultimate Tic-Tac-Toe ========"
MENU_EXIT = 3


def ask_menu_choice(console: Console, palette: Palette, clear: bool = False) -> int:
    """Top menu; re-prompts until 1, 2 or 3 is entered."""
    while True:
        if clear:
            console.say(clear_sequence())
        console.say(palette.title(TITLE))
        console.say("1. Human vs Human")
        console.say("2. Human vs Computer")
        console.say("3. Exit")
        raw = console.ask("Choice: ").strip()
        if raw in ("1", "2", "3"):
            return int(raw)
        console.say(palette.error("Please enter 1, 2 or 3."))


def ask_difficulty(console: Console, palette: Palette) -> Difficulty:
    """Difficulty menu; integers outside 1-3 are clamped, non-numbers re-prompt."""
    while True:
        console.say("Select Difficulty:")
        for tier in Difficulty:
            console.say(f"{tier.value}. {tier.label}")
        raw = console.ask("Choice: ").strip()
        try:
            choice = int(raw)
        except ValueError:
            console.say(palette.error("Please enter a number."))
            continue
        return Difficulty.from_choice(choice)


def ask_play_again(console: Console) -> bool:
    return console.ask("\nPlay again? (y/n): ").strip().lower() == "y"


def report(console: Console, tally: SessionTally) -> None:
    console.say()
    console.say("Final Results:")
    console.say(f"X Wins: {tally.x_wins}")
    console.say(f"O Wins: {tally.o_wins}")
    console.say(f"Draws: {tally.draws}")


def run_session(
    console: Console,
    config: Optional[GameConfig] = None,
    rng: Optional[np.random.Generator] = None,
    tally: Optional[SessionTally] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> SessionTally:
    """Run rounds until the player exits or declines another; report and return the tally.

    End of input ends the session like an exit.
    """
    if config is None:
        config = GameConfig()
    if rng is None:
        rng = config.make_rng()
    if tally is None:
        tally = SessionTally()
    palette = Palette(color=config.color)

    try:
        while True:
            choice = ask_menu_choice(console, palette, clear=config.clear_screen)
            if choice == MENU_EXIT:
                break
            mode = Mode(choice)
            difficulty = Difficulty.EASY
            if mode is Mode.HUMAN_VS_COMPUTER:
                difficulty = ask_difficulty(console, palette)
            play_round(console, tally, mode, difficulty, rng=rng, config=config, sleep=sleep)
            if not ask_play_again(console):
                break
    except EOFError:
        logging.info("Input closed; ending session")

    report(console, tally)
    return tally
