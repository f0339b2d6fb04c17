"""
Round state machine and the controller that plays one round.

InProgress(turn=X) -> InProgress(turn=O) -> ... -> Terminal(winner) | Terminal(draw)
Each move is applied, then the mover's win is checked, then the draw, then the
turn flips. A terminal round accepts no further moves.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

import numpy as np

from .config import GameConfig
from .console import Console
from .game_basics import (
    EMPTY,
    O,
    X,
    Board,
    IllegalMoveError,
    apply_move,
    empty_board,
    is_draw,
    is_win,
    opponent,
    parse_position,
    symbol,
)
from .policies import Difficulty, choose_move
from .render import Palette, clear_sequence, render_board


class Mode(Enum):
    HUMAN_VS_HUMAN = 1
    HUMAN_VS_COMPUTER = 2


@dataclass
class RoundState:
    board: Board = field(default_factory=empty_board)
    turn: int = X
    winner: Optional[int] = None
    terminal: bool = False

    @property
    def is_draw(self) -> bool:
        return self.terminal and self.winner is None

    def play(self, position: int) -> None:
        if self.terminal:
            raise IllegalMoveError("Round is already over")
        mark = self.turn
        self.board = apply_move(self.board, position, mark)
        if is_win(self.board, mark):
            self.winner = mark
            self.terminal = True
        elif is_draw(self.board):
            self.terminal = True
        else:
            self.turn = opponent(mark)


@dataclass
class SessionTally:
    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0

    def record(self, state: RoundState) -> None:
        if not state.terminal:
            raise ValueError("Cannot record a round that is still in progress")
        if state.winner == X:
            self.x_wins += 1
        elif state.winner == O:
            self.o_wins += 1
        else:
            self.draws += 1

    @property
    def rounds(self) -> int:
        return self.x_wins + self.o_wins + self.draws


def read_human_move(console: Console, board: Board, mark: int, palette: Palette) -> int:
    """Prompt until a legal position is typed. Bad input is reported and discarded."""
    while True:
        text = console.ask(palette.prompt(f"Player {symbol(mark)} enter move (1-9): "))
        position = parse_position(text)
        if position is None:
            logging.debug("rejected input %r", text)
            console.say(palette.error("Invalid input!"))
            continue
        if board[position - 1] != EMPTY:
            logging.debug("rejected occupied position %d", position)
            console.say(palette.error("Cell occupied!"))
            continue
        return position


def show_board(console: Console, board: Board, palette: Palette, clear: bool) -> None:
    if clear:
        console.say(clear_sequence())
    for line in render_board(board, palette):
        console.say(line)


def announce(console: Console, state: RoundState, palette: Palette) -> None:
    if state.winner is not None:
        console.say(palette.success(f"Player {symbol(state.winner)} wins!"))
    else:
        console.say(palette.notice("Game is a draw!"))


def play_round(
    console: Console,
    tally: SessionTally,
    mode: Mode,
    difficulty: Difficulty = Difficulty.EASY,
    rng: Optional[np.random.Generator] = None,
    config: Optional[GameConfig] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> RoundState:
    """Play one round to its terminal state and record the result in `tally`.

    In computer mode the human plays X and the computer plays O.
    """
    if config is None:
        config = GameConfig()
    if rng is None:
        rng = config.make_rng()
    palette = Palette(color=config.color)
    computer_mark = O if mode is Mode.HUMAN_VS_COMPUTER else None
    policy = difficulty.policy
    logging.debug("round start mode=%s difficulty=%s", mode.name, difficulty.name)

    state = RoundState()
    while not state.terminal:
        show_board(console, state.board, palette, config.clear_screen)
        if state.turn == computer_mark:
            console.say(palette.thinking("Computer is thinking..."))
            if config.ai_delay > 0:
                sleep(config.ai_delay)
            position = choose_move(policy, state.board, state.turn, rng)
            if position is None:
                raise IllegalMoveError("Computer found no empty cell on a non-terminal board")
        else:
            position = read_human_move(console, state.board, state.turn, palette)
        state.play(position)

    show_board(console, state.board, palette, config.clear_screen)
    announce(console, state, palette)
    tally.record(state)
    logging.debug("round over winner=%s tally=%s", state.winner, tally)
    return state
