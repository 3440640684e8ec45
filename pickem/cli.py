"""
Pick'em command line

Make picks, enter results and view the leaderboard from a terminal. State
is kept in the configured data directory (default: ./data).

Usage:
    pickem weeks
    pickem show 1
    pickem pick 1 0 home
    pickem tiebreaker 1 45
    pickem leaderboard --import friends/Sam_picks.json
    pickem export --output-dir exports
    pickem admin results new_results.json --passphrase letmein
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

from .admin import AdminSession
from .app import PickemApp
from .config import get_config
from .exceptions import PickemError
from .logging_config import setup_logging
from .models import LeaderboardEntry
from .storage import JsonFileStore, PickemStorage


def print_week(app: PickemApp, week: str) -> None:
    """Print a week's games with the local pick and any decided winner."""
    games = app.schedule.get_week(week)
    if not games:
        print('No games scheduled for this week.')
        return

    locked = ' (locked)' if app.is_week_locked(week) else ''
    print(f'Week {week}{locked}')
    for position, game in enumerate(games):
        pick = app.picks.get_pick(week, position)
        picked = f' -> {game.team(pick)}' if pick in ('home', 'away') else ''
        winner_side = app.results.winner_side(week, position)
        winner = f'  [winner: {game.team(winner_side)}]' if winner_side else ''
        print(f'  {position}. {game.away} at {game.home}{picked}{winner}')

    tiebreaker = app.picks.get_tiebreaker(week)
    print(f'  Tiebreaker (total points for Monday game): {tiebreaker or "-"}')


def print_leaderboard(board: list[LeaderboardEntry]) -> None:
    if not board:
        print('No results yet; leaderboard hidden.')
        return

    print('=' * 40)
    print('LEADERBOARD')
    print('=' * 40)
    for entry in board:
        print(f'  {entry.rank}. {entry.name}: {entry.correct} correct')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Weekly pick'em game")
    parser.add_argument(
        "--data-dir", "-d",
        default=None,
        help="Directory holding saved state (defaults to the configured data_dir)",
    )
    parser.add_argument(
        "--name",
        default=None,
        help="Your leaderboard name, used on first run",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logging",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("weeks", help="List scheduled weeks")

    show = sub.add_parser("show", help="Show a week's games and your picks")
    show.add_argument("week")

    pick = sub.add_parser("pick", help="Pick the winner of a game")
    pick.add_argument("week")
    pick.add_argument("position", type=int, help="Game number within the week (from 0)")
    pick.add_argument("side", choices=["home", "away"])

    tiebreaker = sub.add_parser("tiebreaker", help="Set a week's tiebreaker")
    tiebreaker.add_argument("week")
    tiebreaker.add_argument("value")

    board = sub.add_parser("leaderboard", help="Show the leaderboard")
    board.add_argument(
        "--import", "-i",
        dest="imports",
        action="append",
        default=[],
        metavar="FILE",
        help="Include another player's exported picks (repeatable)",
    )
    board.add_argument(
        "--breakdown",
        action="store_true",
        help="Show correct picks per week",
    )

    export = sub.add_parser("export", help="Export your picks for sharing")
    export.add_argument("--output-dir", "-o", default=".")

    sub.add_parser("check", help="Report picks/results that don't match the schedule")

    admin = sub.add_parser("admin", help="Replace the schedule or results")
    admin.add_argument("document", choices=["schedule", "results"])
    admin.add_argument("file", help="JSON file with the new document")
    admin.add_argument("--passphrase", "-p", required=True)

    return parser


def run(args: argparse.Namespace) -> int:
    config = get_config()
    data_dir = Path(args.data_dir) if args.data_dir else Path(config.data_dir)
    app = PickemApp.initialize(
        storage=PickemStorage(JsonFileStore(data_dir)),
        config=config,
        user_name=args.name,
    )

    if args.command == "weeks":
        for week in app.weeks():
            games = app.schedule.get_week(week)
            print(f"Week {week}: {len(games)} games")

    elif args.command == "show":
        print_week(app, args.week)

    elif args.command == "pick":
        app.set_pick(args.week, args.position, args.side)
        print_week(app, args.week)

    elif args.command == "tiebreaker":
        app.set_tiebreaker(args.week, args.value)
        print(f"Tiebreaker for week {args.week} saved")

    elif args.command == "leaderboard":
        for path in args.imports:
            participant = asyncio.run(app.import_file(path))
            print(f"Imported picks for {participant.name}")
        print_leaderboard(app.leaderboard())
        if args.breakdown and app.leaderboard():
            for name, weeks in app.breakdown():
                per_week = ", ".join(f"week {w}: {n}" for w, n in weeks.items())
                print(f"  {name}: {per_week}")

    elif args.command == "export":
        path = app.export_picks(args.output_dir)
        print(f"Picks exported to {path}")

    elif args.command == "check":
        warnings = app.warnings()
        for warning in warnings:
            print(f"⚠️  {warning}")
        if not warnings:
            print("Picks and results line up with the schedule")

    elif args.command == "admin":
        session = AdminSession(app)
        session.unlock(args.passphrase)
        text = Path(args.file).read_text(encoding="utf-8")
        if args.document == "schedule":
            session.save_schedule_text(text)
            print("Schedule saved successfully")
        else:
            session.save_results_text(text)
            print("Results saved successfully")
            print_leaderboard(app.leaderboard())

    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        log_to_file=get_config().log_to_file,
    )

    try:
        return run(args)
    except (PickemError, OSError) as e:
        print(f"❌ {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
