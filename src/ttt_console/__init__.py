"""ttt_console package.

Terminal tic-tac-toe: rules model, computer move policies (random, heuristic,
exhaustive minimax) and the interactive session.

Convenience imports are exposed for common workflows.
"""

from .game import Mode, RoundState, SessionTally, play_round
from .game_basics import IllegalMoveError, apply_move, is_draw, is_legal_move, is_win
from .policies import Difficulty, Policy, choose_move
from .session import run_session

__all__ = [
    "apply_move",
    "is_win",
    "is_draw",
    "is_legal_move",
    "IllegalMoveError",
    "Policy",
    "Difficulty",
    "choose_move",
    "Mode",
    "RoundState",
    "SessionTally",
    "play_round",
    "run_session",
]
