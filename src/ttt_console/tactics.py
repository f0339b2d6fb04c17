"""
Tactics and simple motifs: immediate wins/blocks and forks.
Scans run over positions 1..9 in order, so results are ordered and the first
entry is the one a "first found" rule would pick.
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from .game_basics import EMPTY, is_win, opponent


def immediate_winning_moves(board: Sequence[int], mark: int) -> List[int]:
    wins: List[int] = []
    for i, v in enumerate(board):
        if v != EMPTY:
            continue
        b = list(board)
        b[i] = mark
        if is_win(b, mark):
            wins.append(i + 1)
    return wins


def first_winning_move(board: Sequence[int], mark: int) -> Optional[int]:
    wins = immediate_winning_moves(board, mark)
    return wins[0] if wins else None


def blocking_moves(board: Sequence[int], mark: int) -> List[int]:
    """Positions where `mark` must play to stop the opponent winning next turn."""
    return immediate_winning_moves(board, opponent(mark))


def fork_moves(board: Sequence[int], mark: int) -> List[int]:
    forks: List[int] = []
    for i, v in enumerate(board):
        if v != EMPTY:
            continue
        b = list(board)
        b[i] = mark
        if len(immediate_winning_moves(b, mark)) >= 2:
            forks.append(i + 1)
    return forks


def gives_opponent_immediate_win(board: Sequence[int], mark: int, position: int) -> bool:
    if board[position - 1] != EMPTY:
        return False
    b = list(board)
    b[position - 1] = mark
    return len(immediate_winning_moves(b, opponent(mark))) > 0
