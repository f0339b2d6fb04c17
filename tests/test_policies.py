from collections import Counter

import numpy as np
import pytest

from ttt_console.game_basics import O, X, deserialize_board, empty_board, empty_positions
from ttt_console.policies import (
    Difficulty,
    Policy,
    choose_move,
    heuristic_move,
    random_move,
)
from ttt_console.tactics import (
    blocking_moves,
    first_winning_move,
    fork_moves,
    gives_opponent_immediate_win,
    immediate_winning_moves,
)


def test_difficulty_maps_to_policy():
    assert Difficulty.EASY.policy is Policy.RANDOM
    assert Difficulty.MEDIUM.policy is Policy.HEURISTIC
    assert Difficulty.HARD.policy is Policy.SEARCH
    assert [d.label for d in Difficulty] == ["Easy", "Medium", "Hard"]


@pytest.mark.parametrize("choice,expected", [
    (-5, Difficulty.EASY), (0, Difficulty.EASY), (1, Difficulty.EASY),
    (2, Difficulty.MEDIUM), (3, Difficulty.HARD), (4, Difficulty.HARD), (99, Difficulty.HARD),
])
def test_difficulty_choice_is_clamped(choice, expected):
    assert Difficulty.from_choice(choice) is expected


def test_random_single_empty_cell():
    b = deserialize_board("121212210")
    rng = np.random.default_rng(0)
    for _ in range(20):
        assert random_move(b, rng) == 9
        assert choose_move(Policy.RANDOM, b, X, rng) == 9


def test_random_full_board_returns_none():
    b = deserialize_board("112221112")
    rng = np.random.default_rng(0)
    for policy in Policy:
        assert choose_move(policy, b, X, rng) is None


def test_random_only_picks_empty_cells_and_covers_them():
    b = deserialize_board("100020000")
    rng = np.random.default_rng(42)
    seen = Counter(random_move(b, rng) for _ in range(400))
    assert set(seen) == set(empty_positions(b))


def test_random_is_reproducible_with_seed():
    b = empty_board()
    a = [random_move(b, np.random.default_rng(7)) for _ in range(5)]
    c = [random_move(b, np.random.default_rng(7)) for _ in range(5)]
    assert a == c


def test_choose_move_without_rng_still_legal():
    b = deserialize_board("100020000")
    assert choose_move(Policy.RANDOM, b, X) in empty_positions(b)


def test_heuristic_takes_win_before_block():
    # O can win at 3 (top row) while X threatens 6 (middle row)
    b = (O, O, 0, X, X, 0, 0, 0, X)
    assert immediate_winning_moves(b, O) == [3]
    assert immediate_winning_moves(b, X) == [6]
    rng = np.random.default_rng(0)
    assert heuristic_move(b, O, rng) == 3


def test_heuristic_blocks_row_threat():
    # X holds 1 and 2, O holds 5: O must take 3
    b = (X, X, 0, 0, O, 0, 0, 0, 0)
    rng = np.random.default_rng(0)
    assert choose_move(Policy.HEURISTIC, b, O, rng) == 3


def test_heuristic_blocks_on_nearly_full_board():
    # every cell but 3 filled, no O line available through 3
    b = (X, X, 0, O, O, X, X, O, O)
    assert immediate_winning_moves(b, O) == []
    rng = np.random.default_rng(0)
    assert choose_move(Policy.HEURISTIC, b, O, rng) == 3


def test_heuristic_first_in_scan_order():
    # X threatens both 3 (top row) and 7 (left column); lower position blocks first
    b = (X, X, 0, X, O, 0, 0, 0, O)
    assert blocking_moves(b, O) == [3, 7]
    rng = np.random.default_rng(0)
    assert heuristic_move(b, O, rng) == 3


def test_heuristic_is_deterministic_when_tactic_applies():
    b = (X, X, 0, 0, O, 0, 0, 0, 0)
    picks = {choose_move(Policy.HEURISTIC, b, O, np.random.default_rng(s)) for s in range(10)}
    assert picks == {3}


def test_heuristic_falls_back_to_random():
    b = deserialize_board("100000000")
    rng = np.random.default_rng(3)
    for _ in range(20):
        assert heuristic_move(b, O, rng) in empty_positions(b)


def test_tactics_helpers():
    b = (X, 0, 0, 0, O, 0, 0, 0, X)
    assert first_winning_move(b, X) is None
    # X at 3 or 7 threatens two lines at once
    assert fork_moves(b, X) == [3, 7]
    assert not gives_opponent_immediate_win(b, O, 3)
    assert not gives_opponent_immediate_win(b, O, 5)  # occupied
    b2 = (X, X, 0, 0, O, 0, 0, 0, 0)
    assert gives_opponent_immediate_win(b2, O, 6)
    assert not gives_opponent_immediate_win(b2, O, 3)
