#!/usr/bin/env python3
"""
Fantasy MVP CLI

Ranks historical (1970-2024) NFL player-seasons by fantasy points under a
configurable scoring rule set. Filters and scoring rules are remembered in a
settings file between runs.

Usage:
    python fantasy_mvp_cli.py --position RB --year 1990s
    python fantasy_mvp_cli.py --preset ppr --limit 25
    python fantasy_mvp_cli.py --set passingTD=6 --set interception=-1
    python fantasy_mvp_cli.py --reset --show-config
"""

import argparse
import logging
import sys
from pathlib import Path

from fantasy_mvp import (
    ConfigValidationError,
    FantasyApp,
    FantasyState,
    ScoringSettings,
    parse_position_filter,
    parse_year_filter,
    render_table,
)
from fantasy_mvp.constants import (
    DEFAULT_DATA_PATH,
    DEFAULT_SETTINGS_PATH,
    MAX_RESULTS,
    POSITION_FILTERS,
    SCORING_PRESETS,
    YEAR_FILTERS,
)
from fantasy_mvp.logging_config import get_logger, setup_logging
from fantasy_mvp.utils import save_json
from fantasy_mvp.validators import validate_scoring_config

logger = get_logger('fantasy_mvp.cli')


def parse_assignment(text: str) -> tuple[str, float]:
    """Parse a 'field=value' scoring override."""
    if '=' not in text:
        raise argparse.ArgumentTypeError(f"Expected field=value, got '{text}'")
    key, value = text.split('=', 1)
    try:
        return key.strip(), float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Value for '{key}' is not a number: '{value}'")


def build_parser() -> argparse.ArgumentParser:
    year_choices = ', '.join(value for value, _ in YEAR_FILTERS)
    parser = argparse.ArgumentParser(description="Historical NFL fantasy football rankings")
    parser.add_argument(
        "--data", "-d",
        default=str(DEFAULT_DATA_PATH),
        help="Path or URL of fantasy_data.json",
    )
    parser.add_argument(
        "--settings", "-s",
        default=str(DEFAULT_SETTINGS_PATH),
        help="Settings file (scoring rules and filters)",
    )
    parser.add_argument(
        "--position", "-p",
        default=None,
        help=f"Position filter: {', '.join(POSITION_FILTERS)}",
    )
    parser.add_argument(
        "--year", "-y",
        default=None,
        help=f"Year filter: {year_choices}, or a single season (e.g., 2007)",
    )
    parser.add_argument(
        "--limit", "-n",
        type=int,
        default=MAX_RESULTS,
        help=f"Maximum rows to show (default: {MAX_RESULTS})",
    )
    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        type=parse_assignment,
        default=[],
        metavar="FIELD=VALUE",
        help="Override a scoring rule (e.g., reception=0.5); repeatable",
    )
    parser.add_argument(
        "--preset",
        choices=sorted(SCORING_PRESETS),
        default=None,
        help="Apply a scoring preset",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Restore default scoring rules before applying other changes",
    )
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Print the active scoring rules",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Also write the ranked rows as JSON to this path",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Debug logging",
    )
    return parser


def apply_changes(state: FantasyState, args: argparse.Namespace) -> None:
    """
    Apply CLI-requested filter and scoring changes.

    Every change is validated before any is kept, so a rejected change
    leaves the saved settings untouched.
    """
    if not (args.reset or args.preset or args.overrides
            or args.position is not None or args.year is not None):
        return

    scoring = ScoringSettings(state.scoring_config)
    if args.reset:
        scoring.reset()
    if args.preset:
        scoring.apply_preset(args.preset)
    if args.overrides:
        scoring.set(dict(args.overrides))
    position_filter = state.position_filter
    if args.position is not None:
        position_filter = parse_position_filter(args.position)
    year_filter = state.year_filter
    if args.year is not None:
        year_filter = parse_year_filter(args.year)

    state.scoring = scoring
    state.position_filter = position_filter
    state.year_filter = year_filter
    state.save()


def print_config(state: FantasyState) -> None:
    print("Scoring rules:")
    for key, value in state.scoring_config.model_dump(by_alias=True).items():
        print(f"  {key}: {value:g}")
    for warning in validate_scoring_config(state.scoring_config):
        print(f"  ⚠️  {warning}")


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.limit < 0:
        parser.error("--limit must be zero or more")

    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO)

    state = FantasyState.load(Path(args.settings))
    try:
        apply_changes(state, args)
    except (ConfigValidationError, ValueError) as e:
        print(f"❌ {e}")
        return 2

    if args.show_config:
        print_config(state)

    app = FantasyApp(state, max_results=args.limit)
    if not app.load_data(args.data):
        print(f"❌ Error loading data: {app.error}")
        return 1

    rows = app.rows()
    print(f"\nTop {len(rows)} | position={state.position_filter} | years={state.year_filter}\n")
    if rows:
        print(render_table(rows, state.position_filter))
    else:
        print("No data found for the selected filters.")

    if args.output:
        save_json(args.output, [row.to_dict() for row in rows])
        logger.info(f"Wrote {len(rows)} rows to {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
