from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

logger = logging.getLogger(__name__)

Move = str  # "C" or "D"

COOPERATE: Move = "C"
DEFECT: Move = "D"
MOVES: Tuple[Move, Move] = (COOPERATE, DEFECT)

_INDEX = {COOPERATE: 0, DEFECT: 1}

Table = Tuple[Tuple[Tuple[int, int], Tuple[int, int]], Tuple[Tuple[int, int], Tuple[int, int]]]

DEFAULT_TABLE: Table = (
    ((6, 3),   # I cooperate, first opponent cooperates
     (3, 0)),  # I cooperate, first opponent defects
    ((8, 5),   # I defect, first opponent cooperates
     (5, 2)),  # I defect, first opponent defects
)


class InvalidMoveError(ValueError):
    """A strategy produced something other than "C" or "D"."""

    def __init__(self, strategy: str, round_index: int, move: object):
        self.strategy = strategy
        self.round_index = round_index
        self.move = move
        super().__init__(
            f"{strategy} returned invalid move {move!r} in round {round_index}; expected 'C' or 'D'"
        )

    def __reduce__(self):
        # Worker processes send this back through pickle
        return (type(self), (self.strategy, self.round_index, self.move))


def move_index(move: Move) -> int:
    if not isinstance(move, str) or move not in _INDEX:
        raise ValueError(f"invalid move {move!r}; expected 'C' or 'D'")
    return _INDEX[move]


@dataclass(frozen=True)
class Payoffs:
    """Payoff to the scoring player, ``table[me][opp1][opp2]`` with C=0, D=1.

    The three-player game has to reduce to an ordinary two-player dilemma
    whenever one opponent's move is held fixed, and it must not matter which
    opponent made which move. That leaves a single ordering:

        U(DCC) > U(CCC) > U(DDC) > U(CDC) > U(DDD) > U(CDD)
    """

    table: Table = field(default=DEFAULT_TABLE)

    def __post_init__(self):
        try:
            table = tuple(
                tuple(tuple(int(v) for v in row) for row in plane)
                for plane in self.table
            )
            shape_ok = len(table) == 2 and all(
                len(plane) == 2 and all(len(row) == 2 for row in plane) for plane in table
            )
        except (TypeError, ValueError):
            raise ValueError("Payoff table must be a 2x2x2 nested sequence of integers") from None
        if not shape_ok:
            raise ValueError("Payoff table must be a 2x2x2 nested sequence of integers")
        object.__setattr__(self, "table", table)
        self._validate()

    def _validate(self) -> None:
        t = self.table
        for me in (0, 1):
            if t[me][0][1] != t[me][1][0]:
                raise ValueError(
                    "Payoff table must not depend on the order of the two opponents"
                )
        ordering = [t[1][0][0], t[0][0][0], t[1][1][0], t[0][1][0], t[1][1][1], t[0][1][1]]
        if any(a <= b for a, b in zip(ordering, ordering[1:])):
            raise ValueError(
                "Payoff table must satisfy U(DCC) > U(CCC) > U(DDC) > U(CDC) > U(DDD) > U(CDD), "
                f"got {ordering}"
            )

    @classmethod
    def from_rows(cls, rows: Sequence) -> "Payoffs":
        return cls(table=rows)

    def to_dict(self) -> Dict[str, List]:
        return {"table": [[list(row) for row in plane] for plane in self.table]}

    def payoff_for(self, me: Move, opp1: Move, opp2: Move) -> int:
        return self.table[move_index(me)][move_index(opp1)][move_index(opp2)]


def _checked(player, move, round_index: int) -> Move:
    if not isinstance(move, str) or move not in _INDEX:
        raise InvalidMoveError(player.name(), round_index, move)
    return move


def play_match(playerA, playerB, playerC, rounds: int, payoffs: Payoffs | None = None):
    """Play one match of ``rounds`` rounds and return per-round averages.

    Seats rotate so each player sees itself first, then the next two seats
    in order: A sees (A, B, C), B sees (B, C, A), C sees (C, A, B).
    """
    if isinstance(rounds, bool) or not isinstance(rounds, int) or rounds <= 0:
        raise ValueError(f"rounds must be a positive integer, got {rounds!r}")
    if payoffs is None:
        payoffs = Payoffs()

    a_hist: List[Move] = []
    b_hist: List[Move] = []
    c_hist: List[Move] = []
    total_a = 0
    total_b = 0
    total_c = 0
    for r in range(rounds):
        ha, hb, hc = tuple(a_hist), tuple(b_hist), tuple(c_hist)
        a_move = _checked(playerA, playerA.decide(r, ha, hb, hc), r)
        b_move = _checked(playerB, playerB.decide(r, hb, hc, ha), r)
        c_move = _checked(playerC, playerC.decide(r, hc, ha, hb), r)
        total_a += payoffs.payoff_for(a_move, b_move, c_move)
        total_b += payoffs.payoff_for(b_move, c_move, a_move)
        total_c += payoffs.payoff_for(c_move, a_move, b_move)
        a_hist.append(a_move)
        b_hist.append(b_move)
        c_hist.append(c_move)

    logger.debug(
        "%s/%s/%s played %d rounds: %d/%d/%d",
        playerA.name(), playerB.name(), playerC.name(), rounds, total_a, total_b, total_c,
    )
    return {
        "rounds": rounds,
        "history": {"A": "".join(a_hist), "B": "".join(b_hist), "C": "".join(c_hist)},
        "scores": {"A": total_a, "B": total_b, "C": total_c},
        "avg": {"A": total_a / rounds, "B": total_b / rounds, "C": total_c / rounds},
    }
