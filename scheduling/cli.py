"""
Command-Line Interface for the Scheduling System.

Builds schedules for one preference profile against the local catalog and
prints them, or dumps the result as JSON for other tools.

NOTE: Don't run this file directly. Run from the project root:
    python3 -m scheduling --term 202420 --profile data/example_profile.json
"""

import argparse
import json
import logging
import sys

from .config import CATALOG_FILE, MAX_SCHEDULES, MAX_SEARCH_NODES
from .engines import FixedOrdering, ShuffleOrdering
from .exceptions import EXIT_CODES, SchedulingError
from .logger import logger
from .models import PreferenceProfile
from .planner import SchedulePlanner
from .ui import TerminalDisplay


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="schedule-planner",
        description="Generate ranked, conflict-free class schedules from a course catalog.",
    )
    parser.add_argument("--term", required=True, help="catalog term code, e.g. 202420")
    parser.add_argument("--profile", required=True, help="path to a preference profile JSON file")
    parser.add_argument("--catalog", default=None, help=f"catalog JSON file (default: {CATALOG_FILE})")
    parser.add_argument("--top", type=_positive_int, default=5, help="number of schedules to show (default: 5)")
    parser.add_argument(
        "--max-schedules", type=_positive_int, default=MAX_SCHEDULES,
        help=f"stop searching after this many schedules (default: {MAX_SCHEDULES})",
    )
    parser.add_argument(
        "--max-nodes", type=_positive_int, default=MAX_SEARCH_NODES,
        help=f"stop searching after this many search steps (default: {MAX_SEARCH_NODES})",
    )
    order = parser.add_mutually_exclusive_group()
    order.add_argument("--seed", type=int, default=None, help="seed the option shuffle for repeatable output")
    order.add_argument("--fixed-order", action="store_true", help="do not shuffle options at all")
    parser.add_argument("--json", action="store_true", help="print the result as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def _load_profile(path: str) -> PreferenceProfile:
    with open(path, "r", encoding="utf-8") as f:
        return PreferenceProfile.from_dict(json.load(f))


def main(argv=None) -> int:
    """
    Entry point for ``python -m scheduling`` and the ``schedule-planner`` script.

    Exit codes:
        0  schedules generated with no problems
        1  the result carries errors (bad request or infeasible constraints)
        2  the catalog could not be loaded
    """
    args = build_parser().parse_args(argv)

    if args.verbose:
        logger.setLevel(logging.DEBUG)
    elif args.json:
        # Keep stdout clean for the JSON document
        logger.setLevel(logging.ERROR)

    try:
        profile = _load_profile(args.profile)
    except (OSError, ValueError, KeyError, TypeError) as e:
        print(f"Could not read profile {args.profile}: {e}", file=sys.stderr)
        return 1

    if args.fixed_order:
        ordering = FixedOrdering()
    else:
        ordering = ShuffleOrdering(args.seed)

    planner = SchedulePlanner(
        catalog_path=args.catalog,
        ordering=ordering,
        max_schedules=args.max_schedules,
        max_nodes=args.max_nodes,
    )

    try:
        result = planner.plan(args.term, profile)
    except SchedulingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CODES.get(type(e), 1)

    if args.json:
        payload = result.to_dict()
        payload["schedules"] = payload["schedules"][:args.top]
        print(json.dumps(payload, indent=2))
    else:
        TerminalDisplay.print_result(result, args.term, profile, limit=args.top)

    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
