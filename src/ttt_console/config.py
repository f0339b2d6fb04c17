"""Runtime configuration for the interactive game.

Flag-first, then environment (TTT_SEED, TTT_AI_DELAY, TTT_NO_COLOR,
TTT_NO_CLEAR), then defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

import numpy as np

DEFAULT_AI_DELAY = 1.0

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class GameConfig:
    seed: Optional[int] = None
    ai_delay: float = DEFAULT_AI_DELAY
    color: bool = True
    clear_screen: bool = True

    def make_rng(self) -> np.random.Generator:
        return np.random.default_rng(self.seed)


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def _env_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


def resolve_config(
    seed: Optional[int] = None,
    ai_delay: Optional[float] = None,
    no_color: bool = False,
    no_clear: bool = False,
) -> GameConfig:
    if seed is None:
        seed = _env_int("TTT_SEED")
    if ai_delay is None:
        ai_delay = _env_float("TTT_AI_DELAY")
    if ai_delay is None:
        ai_delay = DEFAULT_AI_DELAY
    if ai_delay < 0:
        raise ValueError(f"AI delay must be >= 0, got {ai_delay}")
    return GameConfig(
        seed=seed,
        ai_delay=ai_delay,
        color=not (no_color or _env_flag("TTT_NO_COLOR")),
        clear_screen=not (no_clear or _env_flag("TTT_NO_CLEAR")),
    )
