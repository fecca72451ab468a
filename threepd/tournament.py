"""Shared tournament helpers used by both CLI and the web UI."""

from __future__ import annotations

import logging
import math
import random
from concurrent.futures import ProcessPoolExecutor
from itertools import combinations_with_replacement
from typing import Any, Callable, Dict, Iterator, List, Sequence, Tuple, Type

from .config import TournamentConfig
from .engine import Payoffs, play_match
from . import strategies as S
from .strategies import BaseStrategy

logger = logging.getLogger(__name__)

StrategyClass = Type[BaseStrategy]
Triple = Tuple[int, int, int]


def _canon(name: str) -> str:
    """Normalize a strategy name for comparisons."""
    return name.lower().strip().replace("-", "").replace("_", "")


def list_available_strategies() -> List[Dict[str, str]]:
    """Return metadata about all built-in strategies."""
    items: List[Dict[str, str]] = []
    for cls in S.ALL_STRATEGIES:
        items.append({
            "name": cls.__name__,
            "description": (cls.__doc__ or "").strip(),
        })
    return items


def resolve_strategies(only: Sequence[str] | None = None, exclude: Sequence[str] | None = None) -> List[StrategyClass]:
    """Select strategies based on optional inclusion/exclusion lists.

    Roster order always follows ALL_STRATEGIES, whatever order the names
    were given in. Unknown names in ``only`` raise ValueError.
    """
    only_canon = {_canon(x) for x in only} if only else None
    exclude_canon = {_canon(x) for x in exclude} if exclude else set()

    if only_canon is not None:
        known = {_canon(cls.__name__) for cls in S.ALL_STRATEGIES}
        unknown = sorted(only_canon - known)
        if unknown:
            raise ValueError(f"Unknown strategies: {', '.join(unknown)}")

    selected: List[StrategyClass] = []
    for cls in S.ALL_STRATEGIES:
        name = _canon(cls.__name__)
        if only_canon is not None and name not in only_canon:
            continue
        if name in exclude_canon:
            continue
        selected.append(cls)
    return selected


def iter_triples(n: int) -> Iterator[Triple]:
    """Yield every (i, j, k) with 0 <= i <= j <= k < n in lexicographic order."""
    return combinations_with_replacement(range(n), 3)


def num_matches(n: int) -> int:
    """Number of matches for a roster of n strategies, C(n + 2, 3)."""
    return math.comb(n + 2, 3) if n > 0 else 0


def draw_rounds(rng: random.Random, min_rounds: int = 90, max_rounds: int = 110) -> int:
    return rng.randint(min_rounds, max_rounds)


def rank_totals(totals: Sequence[float]) -> List[int]:
    """Roster indices by descending total; equal totals keep roster order."""
    return sorted(range(len(totals)), key=lambda i: -totals[i])


def _play_scheduled(task) -> Dict[str, Any]:
    # Module level so worker processes can unpickle it
    classes, match_seed, min_rounds, max_rounds, payoffs = task
    match_rng = random.Random(match_seed)
    rounds = draw_rounds(match_rng, min_rounds, max_rounds)
    players = [cls(rng=random.Random(match_rng.getrandbits(64)), payoffs=payoffs) for cls in classes]
    return play_match(*players, rounds=rounds, payoffs=payoffs)


def _match_results(tasks: List[tuple], workers: int) -> Iterator[Dict[str, Any]]:
    if workers <= 1:
        for task in tasks:
            yield _play_scheduled(task)
        return
    chunksize = max(1, len(tasks) // (workers * 8))
    with ProcessPoolExecutor(max_workers=workers) as executor:
        # map keeps schedule order regardless of completion order
        yield from executor.map(_play_scheduled, tasks, chunksize=chunksize)


def run_tournament(
    *,
    strategy_classes: Sequence[StrategyClass] | None = None,
    only: Sequence[str] | None = None,
    exclude: Sequence[str] | None = None,
    payoffs: Payoffs | None = None,
    min_rounds: int | None = None,
    max_rounds: int | None = None,
    seed: int | None = None,
    workers: int | None = None,
    record_history: bool = False,
    on_match: Callable[[Dict[str, Any]], None] | None = None,
    rng: random.Random | None = None,
    config: TournamentConfig | None = None,
) -> Dict[str, Any]:
    """Play every combination with repetition of three roster entries once.

    Each match gets fresh strategy instances and a private generator seeded
    from the tournament generator, so a seeded run is reproducible whether
    matches are played in-process or across ``workers`` processes. Any
    error raised while playing a match is logged with its triple and aborts
    the whole tournament.

    Settings come either from ``config`` or from the keyword arguments,
    never both; mixing them raises ValueError. ``rng`` and the output
    options may be combined with either.
    """
    if config is not None:
        given = [
            name for name, value in (
                ("strategy_classes", strategy_classes),
                ("only", only),
                ("exclude", exclude),
                ("payoffs", payoffs),
                ("min_rounds", min_rounds),
                ("max_rounds", max_rounds),
                ("seed", seed),
                ("workers", workers),
            )
            if value is not None
        ]
        if given:
            raise ValueError(f"Pass either config or {', '.join(given)}, not both")
    else:
        if strategy_classes is None:
            strategy_classes = resolve_strategies(only=only, exclude=exclude)
        overrides: Dict[str, Any] = {"strategy_classes": strategy_classes, "seed": seed}
        if payoffs is not None:
            overrides["payoffs"] = payoffs
        if min_rounds is not None:
            overrides["min_rounds"] = min_rounds
        if max_rounds is not None:
            overrides["max_rounds"] = max_rounds
        if workers is not None:
            overrides["workers"] = workers
        config = TournamentConfig(**overrides)

    classes = list(config.strategy_classes)
    names = [cls.__name__ for cls in classes]
    n = len(classes)

    if rng is None:
        rng = random.Random(config.seed)
    else:
        if config.seed is not None:
            rng.seed(config.seed)

    triples = list(iter_triples(n))
    tasks = [
        (
            (classes[i], classes[j], classes[k]),
            rng.getrandbits(64),
            config.min_rounds,
            config.max_rounds,
            config.payoffs,
        )
        for i, j, k in triples
    ]

    logger.info("Running %d matches among %d strategies (workers=%d)", len(tasks), n, config.workers)

    totals: List[float] = [0.0] * n
    matches: List[Dict[str, Any]] = []
    results = _match_results(tasks, config.workers)

    for number, (i, j, k) in enumerate(triples):
        try:
            result = next(results)
        except Exception as exc:
            logger.error("Match %d (%s, %s, %s) failed: %s", number, names[i], names[j], names[k], exc)
            raise

        totals[i] += result["avg"]["A"]
        totals[j] += result["avg"]["B"]
        totals[k] += result["avg"]["C"]

        row = {
            "match": number,
            "i": i,
            "j": j,
            "k": k,
            "A": names[i],
            "B": names[j],
            "C": names[k],
            "rounds": result["rounds"],
            "avg_A": result["avg"]["A"],
            "avg_B": result["avg"]["B"],
            "avg_C": result["avg"]["C"],
        }
        if record_history:
            row["history_A"] = result["history"]["A"]
            row["history_B"] = result["history"]["B"]
            row["history_C"] = result["history"]["C"]
        matches.append(row)
        if on_match is not None:
            on_match(row)

    standings = [
        {
            "rank": rank,
            "index": index,
            "strategy": names[index],
            "total_score": totals[index],
        }
        for rank, index in enumerate(rank_totals(totals), 1)
    ]
    if standings:
        logger.info("Tournament finished; leader %s with %.3f", standings[0]["strategy"], standings[0]["total_score"])

    return {
        "params": {
            "min_rounds": config.min_rounds,
            "max_rounds": config.max_rounds,
            "seed": config.seed,
            "workers": config.workers,
            "payoffs": config.payoffs.to_dict(),
        },
        "strategies": names,
        "matches": matches,
        "totals": totals,
        "standings": standings,
    }
