"""Three-player iterated Prisoner's Dilemma tournament."""

from .engine import COOPERATE, DEFECT, InvalidMoveError, Payoffs, play_match
from .tournament import rank_totals, run_tournament

__all__ = [
    "COOPERATE",
    "DEFECT",
    "InvalidMoveError",
    "Payoffs",
    "play_match",
    "rank_totals",
    "run_tournament",
]
