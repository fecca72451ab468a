"""Tournament configuration and environment-driven defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Optional, Type

from .engine import Payoffs
from .strategies import ALL_STRATEGIES, BaseStrategy

# Match length is drawn uniformly from [min_rounds, max_rounds] per match
DEFAULT_MIN_ROUNDS = 90
DEFAULT_MAX_ROUNDS = 110

# Worker processes used to play matches; 1 plays them in-process
DEFAULT_WORKERS = 1


def env_int(name: str, default: int) -> int:
    """Read an integer override from the environment, when it is used."""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class TournamentConfig:
    """Everything a tournament run needs; no module-level mutable state."""
    strategy_classes: List[Type[BaseStrategy]] = field(default_factory=lambda: list(ALL_STRATEGIES))
    payoffs: Payoffs = field(default_factory=Payoffs)
    min_rounds: int = field(default_factory=lambda: env_int("THREEPD_MIN_ROUNDS", DEFAULT_MIN_ROUNDS))
    max_rounds: int = field(default_factory=lambda: env_int("THREEPD_MAX_ROUNDS", DEFAULT_MAX_ROUNDS))
    seed: Optional[int] = None
    workers: int = field(default_factory=lambda: env_int("THREEPD_WORKERS", DEFAULT_WORKERS))

    def __post_init__(self):
        self.strategy_classes = list(self.strategy_classes)
        if self.min_rounds < 1:
            raise ValueError(f"min_rounds must be at least 1, got {self.min_rounds}")
        if self.min_rounds > self.max_rounds:
            raise ValueError(
                f"min_rounds ({self.min_rounds}) must not exceed max_rounds ({self.max_rounds})"
            )
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")
