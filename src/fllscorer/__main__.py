"""Command line entry point for the scorer.

Reads a missions state as JSON and prints its score:

    python -m fllscorer match.json
    python -m fllscorer --demolish --breakdown match.json
    echo '{"penalties": 1}' | python -m fllscorer -
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from .core.config import ScorerConfig
from .core.errors import ScoringError
from .core.missions_state import MissionsState
from .core.rules import get_rule_book
from .scoring import apply_demolition, has_leniency_bonus, score_breakdown
from .utils.logger import setup_logger


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="fllscorer", description="Score a TRASH TREK robot game match"
    )
    parser.add_argument("state", help="Missions state JSON file, or - for stdin")
    parser.add_argument(
        "--demolish", action="store_true", help="Demolish the building before scoring"
    )
    parser.add_argument(
        "--breakdown", action="store_true", help="Print the points of each mission"
    )
    parser.add_argument("--rule-set", default=None, help="Rule book to score with")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the scorer."""
    load_dotenv()

    args = build_parser().parse_args(argv)
    config = ScorerConfig.from_env()
    if args.verbose:
        config.verbose = True
    if args.rule_set:
        config.rule_set = args.rule_set

    setup_logger(
        verbose=config.verbose, save_to_file=config.save_to_file, log_dir=config.log_dir
    )
    logger = logging.getLogger(__name__)

    try:
        rules = get_rule_book(config.rule_set)
    except KeyError as e:
        logger.error(e.args[0])
        return 2

    try:
        if args.state == "-":
            data = json.load(sys.stdin)
        else:
            with open(args.state, "r", encoding="utf-8") as f:
                data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Cannot read missions state: {e}")
        return 2

    if not isinstance(data, dict):
        logger.error("Missions state must be a JSON object")
        return 2

    try:
        state = MissionsState.from_dict(data)
        if args.demolish:
            state = apply_demolition(state, rules)
        breakdown = score_breakdown(state, rules)
    except ScoringError as e:
        print(f"Invalid missions state: {e}", file=sys.stderr)
        return 1

    if args.breakdown:
        for group, points in breakdown.items():
            print(f"{group.value:>9}  {points:+5d}")
        if has_leniency_bonus(state):
            print("Leniency bonus earned (M05)")
    print(sum(breakdown.values()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
