#!/usr/bin/env python3
"""
Disc Golf Fantasy League Standings CLI

Scores every team from the live DGPT MPO and FPO rankings: a team's
total is its best 4 MPO players plus its best 2 FPO players.
Rosters come from teams.json: {"<owner>": {"mpo": [...], "fpo": [...]}}

Usage:
    python autoscorer.py --teams teams.json
    python autoscorer.py --teams teams.json --output standings.json --verbose
    python autoscorer.py --teams teams.json --check
"""

import argparse
import sys
from pathlib import Path

from dgfl import DGFLError, RosterStore, StandingsScorer, format_standings, save_standings
from dgfl.config import get_config
from dgfl.logging_config import setup_logging
from dgfl.validators import validate_all


def main(argv=None):
    parser = argparse.ArgumentParser(description="Disc Golf Fantasy League standings")
    parser.add_argument(
        "--teams", "-t",
        default="teams.json",
        help="Path to teams.json roster file",
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="Path to league config JSON (defaults to data/league_config.json if present)",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Also write ranked standings as JSON to this path",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Validate rosters only, without fetching rankings",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show each team's player breakdown",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log errors",
    )
    parser.add_argument(
        "--log-dir",
        default=None,
        help="Also write a timestamped log file to this directory",
    )

    args = parser.parse_args(argv)

    logger = setup_logging(
        log_dir=Path(args.log_dir) if args.log_dir else None,
        quiet=args.quiet,
    )

    try:
        config = get_config(args.config)
        store = RosterStore.load(args.teams)

        problems = validate_all(store.teams)
        for problem in problems:
            logger.warning(problem)

        if args.check:
            if problems:
                print(f"❌ {len(problems)} roster problem(s) found", file=sys.stderr)
                return 1
            print(f"✓ {len(store)} teams valid")
            return 0

        ranked = StandingsScorer(config).run(store, verbose=args.verbose)
    except DGFLError as e:
        logger.debug("Standings run failed", exc_info=True)
        print(f"❌ {e}", file=sys.stderr)
        return 1

    for line in format_standings(ranked):
        print(line)

    if args.output:
        save_standings(args.output, ranked)
        logger.info(f"Standings saved to {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
