"""
Computer move policies and the difficulty tiers that select them.

The policy set is closed: `choose_move` dispatches on `Policy` directly.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Sequence

import numpy as np

from .game_basics import empty_positions, opponent, symbol
from .solver import search_move
from .tactics import first_winning_move


class Policy(Enum):
    RANDOM = "random"
    HEURISTIC = "heuristic"
    SEARCH = "search"


class Difficulty(Enum):
    EASY = 1
    MEDIUM = 2
    HARD = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def policy(self) -> Policy:
        return DIFFICULTY_POLICIES[self]

    @classmethod
    def from_choice(cls, choice: int) -> "Difficulty":
        """Map a menu number to a tier, clamping into [1, 3]."""
        return cls(min(max(choice, 1), 3))


DIFFICULTY_POLICIES = {
    Difficulty.EASY: Policy.RANDOM,
    Difficulty.MEDIUM: Policy.HEURISTIC,
    Difficulty.HARD: Policy.SEARCH,
}


def random_move(board: Sequence[int], rng: np.random.Generator) -> Optional[int]:
    open_spots = empty_positions(board)
    if not open_spots:
        return None
    return open_spots[int(rng.integers(len(open_spots)))]


def heuristic_move(board: Sequence[int], mark: int, rng: np.random.Generator) -> Optional[int]:
    """Win if possible, else block, else play randomly."""
    win = first_winning_move(board, mark)
    if win is not None:
        return win
    block = first_winning_move(board, opponent(mark))
    if block is not None:
        return block
    return random_move(board, rng)


def choose_move(
    policy: Policy,
    board: Sequence[int],
    mark: int,
    rng: Optional[np.random.Generator] = None,
) -> Optional[int]:
    if rng is None:
        rng = np.random.default_rng()
    if policy is Policy.RANDOM:
        move = random_move(board, rng)
    elif policy is Policy.HEURISTIC:
        move = heuristic_move(board, mark, rng)
    elif policy is Policy.SEARCH:
        move = search_move(board, mark)
    else:
        raise ValueError(f"Unknown policy: {policy}")
    logging.debug("policy=%s mark=%s move=%s", policy.value, symbol(mark), move)
    return move
