"""
Input/output seam for the interactive game.

`TerminalConsole` talks to the live terminal; `ScriptedConsole` replays a fixed
list of answers and records everything written, so rounds and sessions can be
driven from tests.
"""
from __future__ import annotations

import sys
from typing import Iterable, List, TextIO


class Console:
    def ask(self, prompt: str) -> str:
        """Show `prompt` and return one line of input. Raises EOFError when input ends."""
        raise NotImplementedError

    def say(self, text: str = "") -> None:
        raise NotImplementedError


class TerminalConsole(Console):
    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def ask(self, prompt: str) -> str:
        self.stream.write(prompt)
        self.stream.flush()
        line = sys.stdin.readline()
        if not line:
            raise EOFError("input closed")
        return line.rstrip("\n")

    def say(self, text: str = "") -> None:
        print(text, file=self.stream)


class ScriptedConsole(Console):
    def __init__(self, answers: Iterable[str]) -> None:
        self.answers: List[str] = list(answers)
        self.prompts: List[str] = []
        self.lines: List[str] = []

    def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError("script exhausted")
        return self.answers.pop(0)

    def say(self, text: str = "") -> None:
        self.lines.append(text)

    @property
    def output(self) -> str:
        return "\n".join(self.lines)
