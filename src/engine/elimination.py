"""
Single elimination bracket simulation.
"""
import logging
import math
from typing import List, Optional

from .models import Match, Player
from .reporting import TournamentObserver
from .rounds import play_round

logger = logging.getLogger(__name__)


def get_round_name(players_in_round: int) -> str:
    """Get the name of a round based on the bracket size it is played at."""
    if players_in_round == 2:
        return "Final"
    elif players_in_round == 4:
        return "Semifinal"
    elif players_in_round == 8:
        return "Quarterfinal"
    else:
        return f"Round of {players_in_round}"


def calculate_bracket_size(num_players: int) -> int:
    """Calculate the bracket size (next power of 2)."""
    if num_players <= 0:
        return 0
    return 2 ** math.ceil(math.log2(num_players))


def calculate_total_rounds(num_players: int) -> int:
    """Number of rounds needed to reduce num_players to a single survivor."""
    bracket_size = calculate_bracket_size(num_players)
    if bracket_size == 0:
        return 0
    return int(math.log2(bracket_size))


def run_single_elimination(players: List[Player], oracle, matches: List[Match],
                           observer: Optional[TournamentObserver] = None) -> Optional[Player]:
    """
    Run a single elimination bracket to completion.

    Each round pairs the surviving players by position and keeps only the
    winners; losers are out for good. Returns the last player standing, or
    None if there were no players.
    """
    observer = observer or TournamentObserver()
    round_players = list(players)
    logger.debug("Single elimination with %d players over %d rounds",
                 len(round_players), calculate_total_rounds(len(round_players)))

    while len(round_players) > 1:
        round_name = get_round_name(calculate_bracket_size(len(round_players)))
        observer.round_started(round_name)
        result = play_round(round_players, oracle, matches, round_name, observer)
        observer.round_completed(round_name)
        round_players = result.winners

    champion = round_players[0] if round_players else None
    logger.info("Single elimination champion: %s", champion)
    return champion
