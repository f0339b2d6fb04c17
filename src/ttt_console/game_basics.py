"""
Game basics: board representation, rules, winner/draw checks, validity.
Notes:
- A board is a tuple of 9 cells: 0=empty, 1=X, 2=O. X always starts.
- Positions are the 1-9 labels players type, read left-to-right, top-to-bottom.
  Index i on the board is position i + 1.
- Occupancy lives in the cell code only. The label of an empty cell is derived
  from its index when rendering; it is never stored on the board.
"""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

EMPTY = 0
X = 1
O = 2

MARKS = (X, O)
MARK_SYMBOLS = {X: "X", O: "O"}

POSITIONS = range(1, 10)

WIN_PATTERNS = [
    [0, 1, 2], [3, 4, 5], [6, 7, 8],
    [0, 3, 6], [1, 4, 7], [2, 5, 8],
    [0, 4, 8], [2, 4, 6],
]

Board = Tuple[int, ...]


class IllegalMoveError(ValueError):
    """Raised when a move targets an occupied or out-of-range cell."""


def empty_board() -> Board:
    return (EMPTY,) * 9


def opponent(mark: int) -> int:
    return O if mark == X else X


def symbol(mark: int) -> str:
    return MARK_SYMBOLS[mark]


def serialize_board(board: Sequence[int]) -> str:
    return ''.join(str(cell) for cell in board)


def deserialize_board(board_str: str) -> Board:
    return tuple(int(cell) for cell in board_str)


def empty_positions(board: Sequence[int]) -> List[int]:
    return [i + 1 for i, v in enumerate(board) if v == EMPTY]


def is_win(board: Sequence[int], mark: int) -> bool:
    return any(all(board[i] == mark for i in pattern) for pattern in WIN_PATTERNS)


def get_winner(board: Sequence[int]) -> int:
    for pattern in WIN_PATTERNS:
        a, b, c = pattern
        v = board[a]
        if v != EMPTY and v == board[b] and v == board[c]:
            return v
    return EMPTY


def is_draw(board: Sequence[int]) -> bool:
    """True when no cell is empty. Check `is_win` first: a full board may hold a line."""
    return EMPTY not in board


def is_full_draw(board: Sequence[int]) -> bool:
    return is_draw(board) and get_winner(board) == EMPTY


def is_legal_move(board: Sequence[int], position: int) -> bool:
    if not isinstance(position, int) or isinstance(position, bool):
        return False
    if position not in POSITIONS:
        return False
    return board[position - 1] == EMPTY


def apply_move(board: Sequence[int], position: int, mark: int) -> Board:
    """Return a new board with `mark` placed at `position`.

    Raises IllegalMoveError instead of overwriting an occupied cell.
    """
    if mark not in MARKS:
        raise IllegalMoveError(f"Unknown mark: {mark!r}")
    if not is_legal_move(board, position):
        if isinstance(position, int) and position in POSITIONS:
            raise IllegalMoveError(f"Position {position} is already occupied")
        raise IllegalMoveError(f"Position out of range: {position!r}")
    lst = list(board)
    lst[position - 1] = mark
    return tuple(lst)


def get_piece_counts(board: Sequence[int]) -> Tuple[int, int]:
    return board.count(X), board.count(O)


def current_player(board: Sequence[int]) -> int:
    x, o = get_piece_counts(board)
    return X if x == o else O


def is_valid_state(board: Sequence[int]) -> bool:
    if len(board) != 9 or any(v not in (EMPTY, X, O) for v in board):
        return False
    x_count, o_count = get_piece_counts(board)
    if not (x_count == o_count or x_count == o_count + 1):
        return False
    if is_win(board, X) and is_win(board, O):
        return False
    w = get_winner(board)
    if w == X and x_count != o_count + 1:
        return False
    if w == O and x_count != o_count:
        return False
    return True


def parse_position(text: str) -> Optional[int]:
    """Parse a typed position; None unless it is an integer in 1..9."""
    raw = text.strip()
    try:
        value = int(raw)
    except ValueError:
        return None
    if value not in POSITIONS:
        return None
    return value
