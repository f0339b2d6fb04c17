"""
Colored terminal rendering of boards and game messages (colorama).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

import colorama
from colorama import Fore, Style

from .game_basics import EMPTY, X, symbol

RULE = "-------------"


@dataclass(frozen=True)
class Palette:
    color: bool = True

    def _wrap(self, codes: str, text: str) -> str:
        if not self.color:
            return text
        return codes + text + Style.RESET_ALL

    def grid(self, text: str) -> str:
        return self._wrap(Fore.CYAN, text)

    def title(self, text: str) -> str:
        return self._wrap(Fore.CYAN + Style.BRIGHT, text)

    def mark(self, mark: int) -> str:
        codes = Fore.RED if mark == X else Fore.GREEN
        return self._wrap(codes + Style.BRIGHT, symbol(mark))

    def label(self, text: str) -> str:
        return self._wrap(Fore.YELLOW, text)

    def error(self, text: str) -> str:
        return self._wrap(Fore.RED, text)

    def success(self, text: str) -> str:
        return self._wrap(Fore.GREEN + Style.BRIGHT, text)

    def notice(self, text: str) -> str:
        return self._wrap(Fore.YELLOW + Style.BRIGHT, text)

    def thinking(self, text: str) -> str:
        return self._wrap(Fore.MAGENTA, text)

    def prompt(self, text: str) -> str:
        return self._wrap(Style.BRIGHT, text)


def cell_text(board: Sequence[int], index: int, palette: Palette) -> str:
    v = board[index]
    if v == EMPTY:
        return palette.label(str(index + 1))
    return palette.mark(v)


def render_board(board: Sequence[int], palette: Palette) -> List[str]:
    lines = [palette.title(RULE)]
    for r in range(3):
        row = palette.grid("| ")
        for c in range(3):
            row += cell_text(board, r * 3 + c, palette) + palette.grid(" | ")
        lines.append(row.rstrip())
        lines.append(RULE)
    return lines


def clear_sequence() -> str:
    return colorama.ansi.clear_screen() + colorama.Cursor.POS(1, 1)
