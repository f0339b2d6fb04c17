"""
Exhaustive minimax search, from the perspective of the mark choosing a move.
Scoring:
- +1 when the searching mark completes a line, -1 when its opponent does,
  0 for a full board without a line.
- No pruning and no depth limit: every continuation is scored. Results are
  memoized per (board, side to move, maximizer), which leaves scores unchanged.
- Ties between equally scored positions go to the first one in scan order.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import List, Optional, Sequence

from .game_basics import EMPTY, Board, is_draw, is_win, opponent

WIN_SCORE = 1
LOSS_SCORE = -1
DRAW_SCORE = 0


def evaluate(board: Sequence[int], me: int) -> int:
    if is_win(board, me):
        return WIN_SCORE
    if is_win(board, opponent(me)):
        return LOSS_SCORE
    return DRAW_SCORE


@lru_cache(maxsize=None)
def minimax(board_t: Board, to_move: int, me: int) -> int:
    score = evaluate(board_t, me)
    if score != DRAW_SCORE:
        return score
    if is_draw(board_t):
        return DRAW_SCORE
    maximizing = to_move == me
    best = -1000 if maximizing else 1000
    for i, v in enumerate(board_t):
        if v != EMPTY:
            continue
        lst = list(board_t)
        lst[i] = to_move
        current = minimax(tuple(lst), opponent(to_move), me)
        best = max(best, current) if maximizing else min(best, current)
    return best


def move_scores(board: Sequence[int], mark: int) -> List[Optional[int]]:
    """Minimax score of each position for `mark` (None for occupied cells)."""
    board_t = tuple(board)
    scores: List[Optional[int]] = [None] * 9
    for i, v in enumerate(board_t):
        if v != EMPTY:
            continue
        lst = list(board_t)
        lst[i] = mark
        scores[i] = minimax(tuple(lst), opponent(mark), mark)
    return scores


def search_move(board: Sequence[int], mark: int) -> Optional[int]:
    """Position (1-9) with the highest minimax score, or None on a full board."""
    best_val: Optional[int] = None
    best_move: Optional[int] = None
    for i, score in enumerate(move_scores(board, mark)):
        if score is None:
            continue
        if best_val is None or score > best_val:
            best_val = score
            best_move = i + 1
    logging.debug("search mark=%d best=%s score=%s cache=%s", mark, best_move, best_val, minimax.cache_info())
    return best_move


def optimal_moves(board: Sequence[int], mark: int) -> List[int]:
    """Every position sharing the best score, in scan order."""
    scores = move_scores(board, mark)
    legal = [s for s in scores if s is not None]
    if not legal:
        return []
    top = max(legal)
    return [i + 1 for i, s in enumerate(scores) if s == top]
