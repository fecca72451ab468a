from __future__ import annotations

import argparse
import csv
import datetime
import json
import logging
import os
from typing import Any, Dict, List, Sequence

from .engine import DEFAULT_TABLE, Payoffs
from .tournament import list_available_strategies, run_tournament

def write_csv(path: str, rows: List[Dict[str, Any]], fieldnames: Sequence[str] | None = None):
    keys = {k for row in rows for k in row.keys()}
    if fieldnames is None:
        field_list = sorted(keys)
    else:
        field_list = list(fieldnames)
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=field_list)
        w.writeheader()
        for row in rows:
            w.writerow({name: row.get(name, "") for name in field_list})

def format_match(row: Dict[str, Any]) -> str:
    return (
        f"{row['A']} scored {row['avg_A']:.4f} points, {row['B']} scored {row['avg_B']:.4f} points, "
        f"and {row['C']} scored {row['avg_C']:.4f} points."
    )

def format_leaderboard(standings: List[Dict[str, Any]]) -> str:
    lines = ["Tournament Results"]
    for row in standings:
        lines.append(f"{row['rank']:>3}. {row['strategy']}: {row['total_score']:.4f} points.")
    return "\n".join(lines)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Three-Player Prisoner's Dilemma Tournament")
    parser.add_argument("--min-rounds", type=int, default=None, help="Fewest rounds in a match (default 90, or THREEPD_MIN_ROUNDS)")
    parser.add_argument("--max-rounds", type=int, default=None, help="Most rounds in a match (default 110, or THREEPD_MAX_ROUNDS)")
    parser.add_argument("--workers", type=int, default=None, help="Worker processes for playing matches (default 1, or THREEPD_WORKERS)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--payoffs", type=str, default=json.dumps(DEFAULT_TABLE), help="JSON 2x2x2 payoff table")
    parser.add_argument("--only", type=str, default="", help="Comma separated strategy names to include")
    parser.add_argument("--exclude", type=str, default="", help="Comma separated strategy names to exclude")
    parser.add_argument("--format", type=str, default="csv", choices=["csv","json"], help="Output format")
    parser.add_argument("--verbose", action="store_true", help="Print a line for every match")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level",
    )
    parser.add_argument("--labels", action="store_true", help="List strategy names and exit")
    return parser

def main(argv: Sequence[str] | None = None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    if args.labels:
        for info in list_available_strategies():
            print(info["name"])
        return

    only_list = [x for x in args.only.split(",") if x.strip()] if args.only else []
    exclude_list = [x for x in args.exclude.split(",") if x.strip()] if args.exclude else []

    try:
        payoffs = Payoffs.from_rows(json.loads(args.payoffs))
        result = run_tournament(
            min_rounds=args.min_rounds,
            max_rounds=args.max_rounds,
            workers=args.workers,
            seed=args.seed,
            payoffs=payoffs,
            only=only_list,
            exclude=exclude_list,
            on_match=(lambda row: print(format_match(row))) if args.verbose else None,
        )
    except ValueError as exc:
        raise SystemExit(str(exc))

    if args.verbose:
        print()
    print(format_leaderboard(result["standings"]))

    timestamp = datetime.datetime.now(datetime.timezone.utc).strftime("%Y%m%d-%H%M%S")
    out_dir = os.environ.get("OUT_DIR", "/out")
    os.makedirs(out_dir, exist_ok=True)
    tag = f"pd3_{timestamp}"
    matches = result["matches"]
    standings = result["standings"]
    strategies = result["strategies"]

    if args.format == "csv":
        match_fields = ["match", "i", "j", "k", "A", "B", "C", "rounds", "avg_A", "avg_B", "avg_C"]
        write_csv(os.path.join(out_dir, f"{tag}_matches.csv"), matches, fieldnames=match_fields)
        write_csv(
            os.path.join(out_dir, f"{tag}_standings.csv"),
            standings,
            fieldnames=["rank", "index", "strategy", "total_score"],
        )
        with open(os.path.join(out_dir, f"{tag}_summary.json"), "w", encoding="utf-8") as f:
            json.dump({
                "params": vars(args),
                "strategies": strategies,
                "matches": len(matches),
                "standings": standings[:5],
            }, f, indent=2)
        print(f"Done. See CSVs and JSON in {out_dir}")
    else:
        with open(os.path.join(out_dir, f"{tag}_results.json"), "w", encoding="utf-8") as f:
            json.dump({
                "params": vars(args),
                "strategies": strategies,
                "matches": matches,
                "standings": standings,
            }, f, indent=2)
        print(f"Done. See JSON in {out_dir}")

if __name__ == "__main__":
    main()
