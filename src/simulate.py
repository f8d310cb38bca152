# Command line entry point for running a simulated tournament

import argparse
import logging
import os
import sys

import yaml

from engine.config import load_players, load_settings, make_players, validate_settings
from engine.models import TournamentType
from engine.oracle import RandomOracle
from engine.reporting import ConsoleReporter, TournamentObserver, format_leaderboard, format_match_log
from engine.tournament import Tournament

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DATA_DIR = os.environ.get('TOURNAMENT_DATA_DIR', os.path.join(BASE_DIR, 'data'))


def build_parser():
    formats = ', '.join(t.value for t in TournamentType)
    parser = argparse.ArgumentParser(description="Simulate a tournament with random match outcomes.")
    parser.add_argument('players_file', nargs='?', default=os.path.join(DATA_DIR, 'players.yaml'),
                        help="YAML roster file (default: data/players.yaml)")
    parser.add_argument('--settings', default=os.path.join(DATA_DIR, 'settings.yaml'),
                        help="YAML settings file (default: data/settings.yaml)")
    parser.add_argument('--format', dest='tournament_type', help=f"Tournament format: {formats}")
    parser.add_argument('--seed', type=int, help="Random seed for reproducible results")
    parser.add_argument('--players', type=int, dest='player_count',
                        help="Use N generated players instead of the roster file")
    parser.add_argument('--quiet', action='store_true', help="Do not print round-by-round progress")
    parser.add_argument('--show-matches', action='store_true',
                        help="Print each match as it is decided")
    parser.add_argument('--verbose', action='store_true', help="Enable debug logging")
    return parser


def run(args):
    settings = load_settings(args.settings)
    if args.tournament_type:
        settings['tournament_type'] = args.tournament_type
    if args.seed is not None:
        settings['random_seed'] = args.seed
    settings = validate_settings(settings)

    if args.player_count is not None:
        players = make_players(args.player_count)
    else:
        players = load_players(args.players_file)

    if args.quiet:
        observer = TournamentObserver()
    else:
        observer = ConsoleReporter(show_matches=args.show_matches)
    tournament = Tournament(settings['tournament_type'], players,
                            oracle=RandomOracle(settings['random_seed']), observer=observer)
    winner = tournament.start()

    print(f"\n--- {tournament.tournament_type.value.replace('_', ' ').title()} ---")
    print(f"Players: {len(players)}  Matches: {len(tournament.matches)}")
    if tournament.matches:
        print("\nMatches:")
        for line in format_match_log(tournament.matches):
            print(f"  {line}")
        print()
        for line in format_leaderboard(tournament.standings()):
            print(line)

    if winner is None:
        print("\nNo winner: the roster is empty.")
    else:
        print(f"\nWinner: {winner}")
    return winner


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )
    try:
        run(args)
    except (ValueError, OSError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
