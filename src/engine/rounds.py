"""
Round execution shared by every tournament format.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .models import Match, Player

logger = logging.getLogger(__name__)


@dataclass
class RoundResult:
    """Players advancing from a round and players who lost in it."""
    winners: List[Player] = field(default_factory=list)
    losers: List[Player] = field(default_factory=list)


def decide_match(player1: Player, player2: Player, oracle, matches: List[Match],
                 round_name: Optional[str] = None, observer=None) -> Player:
    """Ask the oracle for a winner, append the match to the log and return the winner."""
    winner = oracle(player1, player2)
    # Match validates that the oracle picked one of the two players
    match = Match(player1=player1, player2=player2, winner=winner, round_name=round_name)
    matches.append(match)
    logger.debug("%s: %s", round_name or 'Match', match)
    if observer is not None:
        observer.match_decided(match)
    return winner


def play_round(players: List[Player], oracle, matches: List[Match],
               round_name: Optional[str] = None, observer=None) -> RoundResult:
    """
    Play one round over a pool of players.

    Players are paired by position (0 vs 1, 2 vs 3, ...). An odd player out
    advances with a bye and no match is recorded for them.
    """
    result = RoundResult()
    for i in range(0, len(players), 2):
        if i + 1 < len(players):
            player1, player2 = players[i], players[i + 1]
            winner = decide_match(player1, player2, oracle, matches, round_name, observer)
            result.winners.append(winner)
            result.losers.append(player2 if winner == player1 else player1)
        else:
            logger.debug("%s: %s advances with a bye", round_name or 'Round', players[i])
            result.winners.append(players[i])
    return result
