"""
Swiss-system tournament simulation.

Every round players are ranked by score and paired with their neighbour in
the ranking. Nobody is eliminated; after ceil(log2(n)) rounds the highest
score wins. Ties, both in pairing and in the final ranking, keep roster order.
"""
import logging
from typing import Dict, List, Optional, Tuple

from .elimination import calculate_total_rounds
from .models import Match, Player
from .reporting import TournamentObserver
from .rounds import decide_match

logger = logging.getLogger(__name__)


def calculate_swiss_rounds(num_players: int) -> int:
    """Number of Swiss rounds: 0 for one player, 1 for two, 2 for 3-4, 3 for 5-8..."""
    return calculate_total_rounds(num_players)


def get_standings(scores: Dict[Player, int]) -> List[Tuple[Player, int]]:
    """Players sorted by score, highest first. Equal scores keep insertion order."""
    return sorted(scores.items(), key=lambda item: -item[1])


def pair_players_swiss(scores: Dict[Player, int]) -> List[Tuple[Player, Player]]:
    """Pair adjacent players in the standings. An odd player out sits the round out."""
    ranked = [player for player, _ in get_standings(scores)]
    return [(ranked[i], ranked[i + 1]) for i in range(0, len(ranked) - 1, 2)]


def run_swiss(players: List[Player], oracle, matches: List[Match],
              observer: Optional[TournamentObserver] = None) -> Optional[Player]:
    """Run every Swiss round and return the player with the most wins."""
    observer = observer or TournamentObserver()
    scores = {player: 0 for player in players}
    total_rounds = calculate_swiss_rounds(len(players))
    logger.debug("Swiss tournament with %d players over %d rounds", len(players), total_rounds)

    for round_num in range(total_rounds):
        round_name = f"Round {round_num + 1}"
        observer.round_started(round_name)
        for player1, player2 in pair_players_swiss(scores):
            winner = decide_match(player1, player2, oracle, matches, round_name, observer)
            scores[winner] += 1
        observer.round_completed(round_name, get_standings(scores))

    if not scores:
        return None
    leader, top_score = get_standings(scores)[0]
    logger.info("Swiss winner: %s with %d points", leader, top_score)
    return leader
