from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ..engine import Payoffs


class BaseStrategy(ABC):
    """
    Base class for strategies. Implement decide and optionally reset.
    decide should return "C" or "D".

    A fresh instance is built for every match, so reset only has to describe
    the state at the start of a match. Strategies that need randomness must
    draw from self.rng, which the tournament seeds per match. Strategies
    that reason about payoffs must read self.payoffs, the table the match
    is scored with.
    """
    def __init__(self, rng: Optional[random.Random] = None, payoffs: Optional[Payoffs] = None):
        self.rng = rng if rng is not None else random.Random()
        self.payoffs = payoffs if payoffs is not None else Payoffs()
        self.reset()

    def name(self) -> str:
        return self.__class__.__name__

    def reset(self):
        # Per-match state goes here
        pass

    @abstractmethod
    def decide(
        self,
        round_index: int,
        my_history: Sequence[str],
        opp1_history: Sequence[str],
        opp2_history: Sequence[str],
    ) -> str:
        ...

    def __repr__(self):
        return f"{self.name()}"
