#!/usr/bin/env python3
"""League Tracker - Main Entry Point.

Console front end for the two dashboard views:
- Champions: browse champions with search, role filter and sort
- Tracker: look up a player's rank, win rate and recent matches

Usage:
    python main.py champions [--query TEXT] [--role ROLE] [--sort Default|A-Z|Z-A]
    python main.py tracker <GameName#TagLine> [--update] [--region PLATFORM] [--matches N]
"""

import locale
import logging
import sys
from typing import List, Optional

from league_tracker.api.config import Config, setup_logging
from league_tracker.api.riot_api import RiotAPIClient
from league_tracker.data.champions import ChampionCatalog
from league_tracker.data.player_lookup import PlayerLookupPipeline
from league_tracker.ui.state import AppState, Page, TrackerState
from league_tracker.ui.tracker import TrackerController
from league_tracker.utils.console import ConsoleManager
from league_tracker.utils.formatters import OutputFormatter


class UsageError(Exception):
    """Raised for malformed command-line arguments."""


def show_help(console: ConsoleManager):
    """Display help information."""
    console.print("""
League Tracker v1.0.0

USAGE:
    python main.py <command> [arguments]

COMMANDS:
    champions [--query TEXT] [--role ROLE] [--sort ORDER]
        Browse champions. ROLE is one of All, ADC, Support, Jungle, Top, Mid.
        ORDER is one of Default, A-Z, Z-A.
        Example: python main.py champions --role Mid --sort A-Z

    tracker <GameName#TagLine> [--update] [--region PLATFORM] [--matches N]
        Look up a player's ranked stats. --update bypasses cached data.
        Example: python main.py tracker "Faker#KR1" --region kr

    help
        Show this help message

SETUP:
    1. Create a .env file in the project root
    2. Add your Riot API key: RIOT_API_KEY=your_key_here
    3. Optionally set RIOT_PLATFORM (default na1)
""")


def _take_option(args: List[str], name: str) -> Optional[str]:
    """Remove ``name VALUE`` from args and return VALUE."""
    if name not in args:
        return None
    index = args.index(name)
    if index + 1 >= len(args):
        raise UsageError(f"{name} requires a value")
    value = args[index + 1]
    del args[index:index + 2]
    return value


def _take_flag(args: List[str], name: str) -> bool:
    if name in args:
        args.remove(name)
        return True
    return False


def cmd_champions(args: List[str], console: ConsoleManager) -> bool:
    """Handle champions command."""
    args = list(args)
    state = AppState().navigate(Page.CHAMPIONS).champions

    try:
        query = _take_option(args, "--query")
        role = _take_option(args, "--role")
        sort_order = _take_option(args, "--sort")
        if args:
            raise UsageError(f"Unexpected arguments: {' '.join(args)}")
        if query is not None:
            state = state.set_query(query)
        if role is not None:
            state = state.set_role(role)
        if sort_order is not None:
            state = state.set_sort(sort_order)
    except (UsageError, ValueError) as e:
        console.print(OutputFormatter.format_error_message(
            str(e), "Use 'python main.py help' for usage information"))
        return False

    catalog = ChampionCatalog.load()
    champions = catalog.derive(state.criteria)
    console.print(OutputFormatter.format_champion_grid(champions, state.criteria, total=len(catalog)))
    return True


def cmd_tracker(args: List[str], console: ConsoleManager,
                api_client: Optional[RiotAPIClient] = None) -> bool:
    """Handle tracker command."""
    args = list(args)
    try:
        force = _take_flag(args, "--update")
        region = _take_option(args, "--region")
        matches = _take_option(args, "--matches")
        match_count = int(matches) if matches is not None else None
        if len(args) != 1:
            raise UsageError("tracker requires exactly one Riot ID (GameName#TagLine)")
    except (UsageError, ValueError) as e:
        console.print(OutputFormatter.format_error_message(
            str(e), "Usage: python main.py tracker <GameName#TagLine> [--update] [--region PLATFORM] [--matches N]"))
        return False

    identifier = args[0]

    try:
        api_client = api_client or RiotAPIClient(Config())
    except ValueError as e:
        console.print(OutputFormatter.format_error_message(
            f"Configuration error: {e}", "Set RIOT_API_KEY in your .env file"))
        return False

    pipeline = PlayerLookupPipeline(api_client, region=region, match_count=match_count)
    controller = TrackerController(pipeline, TrackerState().set_input(identifier))

    def show_progress(state: TrackerState):
        if state.loading:
            verb = "Updating" if force else "Searching"
            console.show_status(f"🔍 {verb} {state.pending_identifier} on {pipeline.region.upper()}...")
        else:
            console.clear_status()

    controller.subscribe(show_progress)
    result = controller.update() if force else controller.search()

    state = controller.state
    if state.error is not None:
        console.print(OutputFormatter.format_lookup_error(state.error))
        return False

    console.print(OutputFormatter.format_snapshot(state.snapshot))
    return result is not None and result.ok


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    setup_logging(level='WARNING')  # Reduce noise for CLI usage
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        logging.getLogger(__name__).warning(f"Falling back to default collation: {e}")
    console = ConsoleManager()

    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        show_help(console)
        sys.exit(0)

    command = argv[0].lower()
    args = argv[1:]

    if command in ['help', '-h', '--help']:
        show_help(console)
        success = True
    elif command == 'champions':
        success = cmd_champions(args, console)
    elif command == 'tracker':
        try:
            success = cmd_tracker(args, console)
        except KeyboardInterrupt:
            console.print("\n⚠️  Lookup cancelled by user")
            success = False
    else:
        console.print(f"❌ Unknown command: {command}")
        console.print("Use 'python main.py help' for usage information")
        success = False

    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
