"""
Tournament facade: holds the roster, the format and the match log.
"""
import logging
from typing import Iterable, List, Optional, Tuple, Union

from .double_elimination import run_double_elimination
from .elimination import run_single_elimination
from .models import Match, Player, TournamentType
from .oracle import RandomOracle
from .reporting import TournamentObserver
from .swiss import get_standings, run_swiss

logger = logging.getLogger(__name__)

_DRIVERS = {
    TournamentType.SINGLE_ELIMINATION: run_single_elimination,
    TournamentType.DOUBLE_ELIMINATION: run_double_elimination,
    TournamentType.SWISS: run_swiss,
}


class Tournament:
    """
    A tournament among a fixed roster.

    ``start()`` runs the selected format to completion and returns the winner.
    Every decided match is appended to ``matches`` in the order it was played.
    The roster in ``players`` is never modified by a run.

    Args:
        tournament_type: A TournamentType or a name accepted by TournamentType.from_string
        players: The roster, in bracket order
        oracle: Callable deciding each match; defaults to a fair coin flip
        observer: Receives round and match notifications; defaults to a no-op
    """

    def __init__(self, tournament_type: Union[TournamentType, str], players: Iterable[Player],
                 oracle=None, observer: Optional[TournamentObserver] = None):
        self.tournament_type = TournamentType.from_string(tournament_type)
        self.players: List[Player] = list(players)
        self.matches: List[Match] = []
        self.oracle = oracle if oracle is not None else RandomOracle()
        self.observer = observer if observer is not None else TournamentObserver()

    def start(self) -> Optional[Player]:
        """Run the tournament. Returns None only when the roster is empty."""
        driver = _DRIVERS[self.tournament_type]
        logger.info("Starting %s tournament with %d players", self.tournament_type, len(self.players))
        matches_before = len(self.matches)
        winner = driver(list(self.players), self.oracle, self.matches, self.observer)
        logger.info("%s tournament finished after %d matches, winner: %s",
                    self.tournament_type, len(self.matches) - matches_before, winner)
        return winner

    def play_match(self, player1: Player, player2: Player, winner: Player,
                   round_name: Optional[str] = None) -> Match:
        """Record a match whose winner was decided outside the tournament run."""
        match = Match(player1=player1, player2=player2, winner=winner, round_name=round_name)
        self.matches.append(match)
        return match

    def standings(self) -> List[Tuple[Player, int]]:
        """Wins per player from the match log, most wins first, ties in roster order."""
        wins = {player: 0 for player in self.players}
        for match in self.matches:
            if match.is_decided:
                wins[match.winner] = wins.get(match.winner, 0) + 1
        return get_standings(wins)

    def __repr__(self):
        return (f"Tournament(type={self.tournament_type.value}, players={len(self.players)}, "
                f"matches={len(self.matches)})")
