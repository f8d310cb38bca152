"""
Reporting collaborators for tournament runs.

Drivers notify an observer when a round starts, when each match is decided
and when a round ends. Observers only render; they never influence results.
"""
import logging
import sys
from typing import Iterable, List, Optional, Sequence, Tuple

from .models import Match, Player

Standings = Sequence[Tuple[Player, int]]


def format_leaderboard(standings: Standings) -> List[str]:
    """Render standings as leaderboard lines, in the order given."""
    lines = ["Leaderboard:"]
    for player, score in standings:
        lines.append(f"{player} - {score} points")
    return lines


def format_match_log(matches: Iterable[Match]) -> List[str]:
    """One line per match, prefixed with its round when known."""
    lines = []
    for match in matches:
        if match.round_name:
            lines.append(f"[{match.round_name}] {match}")
        else:
            lines.append(str(match))
    return lines


class TournamentObserver:
    """Observer with no-op hooks. Subclass and override what you need."""

    def round_started(self, round_name: str):
        pass

    def match_decided(self, match: Match):
        pass

    def round_completed(self, round_name: str, standings: Optional[Standings] = None):
        pass


class ConsoleReporter(TournamentObserver):
    """Print round headers and leaderboards."""

    def __init__(self, stream=None, show_matches: bool = False):
        self.stream = stream
        self.show_matches = show_matches

    def _print(self, text: str):
        print(text, file=self.stream or sys.stdout)

    def round_started(self, round_name):
        self._print(f"{round_name}:")

    def match_decided(self, match):
        if self.show_matches:
            self._print(f"  {match}")

    def round_completed(self, round_name, standings=None):
        if standings is None:
            return
        for line in format_leaderboard(standings):
            self._print(line)


class LoggingReporter(TournamentObserver):
    """Send tournament progress to a logger."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def round_started(self, round_name):
        self.logger.info('%s started', round_name)

    def match_decided(self, match):
        self.logger.debug('%s: %s', match.round_name, match)

    def round_completed(self, round_name, standings=None):
        if standings:
            leader, score = standings[0]
            self.logger.info('%s finished, leader: %s with %d points', round_name, leader, score)
        else:
            self.logger.info('%s finished', round_name)
