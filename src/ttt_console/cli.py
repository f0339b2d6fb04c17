from __future__ import annotations

import argparse
import csv
import logging
import sys
from typing import List, Optional

import colorama

from .config import resolve_config
from .console import TerminalConsole
from .game import SessionTally
from .game_basics import (
    EMPTY,
    current_player,
    deserialize_board,
    empty_positions,
    get_winner,
    is_full_draw,
    is_valid_state,
    symbol,
)
from .session import report, run_session
from .solver import move_scores, optimal_moves, search_move
from .tactics import blocking_moves, fork_moves, gives_opponent_immediate_win, immediate_winning_moves


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt", description="Terminal tic-tac-toe")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument("--seed", type=int, default=None, help="Seed for the computer's random choices")
    p.add_argument(
        "--delay",
        type=float,
        default=None,
        help="Seconds the computer pauses before moving (default: 1.0, env TTT_AI_DELAY)",
    )
    p.add_argument("--no-color", action="store_true", help="Disable colored output")
    p.add_argument("--no-clear", action="store_true", help="Do not clear the screen between turns")

    sub.add_parser("play", help="Play interactively (default)")

    p_sol = sub.add_parser(
        "solve",
        help="Score every move for the side to move (board: 9 digits, 0=empty,1=X,2=O)",
    )
    p_sol.add_argument("--board", help="Board string, e.g., 100020000 (omit with --stdin)")
    p_sol.add_argument(
        "--stdin", action="store_true", help="Read many boards from stdin and stream CSV output"
    )

    p_tac = sub.add_parser("tactics", help="List immediate wins, blocks and forks for side-to-move")
    p_tac.add_argument("--board", required=True, help="Board string, e.g., 100020000")

    return p


def _parse_board(raw: str) -> Optional[tuple]:
    raw = raw.strip()
    if len(raw) != 9 or any(c not in "012" for c in raw):
        return None
    return deserialize_board(raw)


def _board_or_error(raw: Optional[str]) -> Optional[tuple]:
    b = _parse_board(raw or "")
    if b is None:
        logging.error("Invalid board string. Must be 9 chars of 0/1/2.")
        return None
    if not is_valid_state(b):
        logging.error("Board is not a valid reachable state.")
        return None
    return b


def _is_terminal(b: tuple) -> bool:
    return get_winner(b) != EMPTY or is_full_draw(b)


def _format_scores(scores: List[Optional[int]]) -> str:
    return " ".join("." if s is None else f"{s:+d}" for s in scores)


def _cmd_solve(ns: argparse.Namespace) -> int:
    if ns.stdin:
        w = csv.writer(sys.stdout)
        w.writerow(["board", "to_move", "move", "optimal_moves", "scores"])
        for line in sys.stdin:
            raw = line.strip()
            if not raw:
                continue
            b = _parse_board(raw)
            if b is None or not is_valid_state(b) or _is_terminal(b):
                logging.debug("skipping board %r", raw)
                continue
            p = current_player(b)
            w.writerow([
                raw,
                symbol(p),
                search_move(b, p),
                " ".join(map(str, optimal_moves(b, p))),
                _format_scores(move_scores(b, p)),
            ])
        return 0

    b = _board_or_error(ns.board)
    if b is None:
        return 2
    if _is_terminal(b):
        logging.error("Board is already terminal; nothing to solve.")
        return 2
    p = current_player(b)
    logging.info(
        "to_move=%s move=%s optimal=%s scores=%s",
        symbol(p),
        search_move(b, p),
        optimal_moves(b, p),
        _format_scores(move_scores(b, p)),
    )
    return 0


def _cmd_tactics(ns: argparse.Namespace) -> int:
    b = _board_or_error(ns.board)
    if b is None:
        return 2
    p = current_player(b)
    empties = empty_positions(b)
    logging.info(
        "to_move=%s wins=%s blocks=%s forks=%s unsafe=%s",
        symbol(p),
        immediate_winning_moves(b, p),
        blocking_moves(b, p),
        fork_moves(b, p),
        [pos for pos in empties if gives_opponent_immediate_win(b, p, pos)],
    )
    return 0


def _cmd_play(ns: argparse.Namespace) -> int:
    try:
        config = resolve_config(
            seed=ns.seed,
            ai_delay=ns.delay,
            no_color=ns.no_color,
            no_clear=ns.no_clear,
        )
    except ValueError as exc:
        logging.error("%s", exc)
        return 2
    colorama.just_fix_windows_console()
    console = TerminalConsole()
    tally = SessionTally()
    try:
        run_session(console, config=config, rng=config.make_rng(), tally=tally)
    except KeyboardInterrupt:
        report(console, tally)
        return 130
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if getattr(ns, "version", False):
        from importlib.metadata import PackageNotFoundError, version as _ver

        try:
            print(_ver("ttt-console"))
        except PackageNotFoundError:
            print("unknown")
        return 0

    if ns.cmd == "solve":
        return _cmd_solve(ns)
    if ns.cmd == "tactics":
        return _cmd_tactics(ns)
    return _cmd_play(ns)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
