"""
Double elimination bracket simulation.

In double elimination:
- Players must lose twice to be eliminated
- Winners Bracket: Players that haven't lost yet
- Losers Bracket: Players that have lost once
- Grand Final: Winners bracket champion vs Losers bracket champion
- Bracket Reset: If losers bracket winner wins Grand Final, a final match decides the champion
"""
import logging
from typing import List, Optional

from .elimination import calculate_bracket_size
from .models import Match, Player
from .reporting import TournamentObserver
from .rounds import decide_match, play_round

logger = logging.getLogger(__name__)

GRAND_FINAL = "Grand Final"
BRACKET_RESET = "Bracket Reset"


def get_winners_round_name(players_in_round: int) -> str:
    """Get the name for a winners bracket round."""
    bracket_size = calculate_bracket_size(players_in_round)
    if bracket_size == 2:
        return "Winners Final"
    elif bracket_size == 4:
        return "Winners Semifinal"
    elif bracket_size == 8:
        return "Winners Quarterfinal"
    else:
        return f"Winners Round of {bracket_size}"


def get_losers_round_name(round_num: int) -> str:
    """Get the name for a losers bracket round (0-indexed)."""
    return f"Losers Round {round_num + 1}"


def play_grand_final(winners_finalist: Player, losers_finalist: Player, oracle,
                     matches: List[Match], observer: TournamentObserver) -> Player:
    """
    Decide the Grand Final between the two bracket champions.

    The losers bracket champion has already lost once, so beating the winners
    bracket champion forces one more match and that match decides the title.
    """
    observer.round_started(GRAND_FINAL)
    winner = decide_match(winners_finalist, losers_finalist, oracle, matches, GRAND_FINAL, observer)
    observer.round_completed(GRAND_FINAL)
    if winner != losers_finalist:
        return winner

    logger.debug("%s won the Grand Final from the losers bracket, bracket reset", losers_finalist)
    observer.round_started(BRACKET_RESET)
    winner = decide_match(winners_finalist, losers_finalist, oracle, matches, BRACKET_RESET, observer)
    observer.round_completed(BRACKET_RESET)
    return winner


def run_double_elimination(players: List[Player], oracle, matches: List[Match],
                           observer: Optional[TournamentObserver] = None) -> Optional[Player]:
    """
    Run a double elimination tournament to completion.

    Each cycle plays a winners bracket round, sends its losers to the losers
    bracket, then plays a losers bracket round whose losers are eliminated.
    Once each bracket is down to one player the Grand Final is played.
    Players never move back from the losers bracket to the winners bracket.
    """
    observer = observer or TournamentObserver()
    winners_bracket = list(players)
    losers_bracket: List[Player] = []
    champion = None
    losers_round = 0

    while len(winners_bracket) > 1 or len(losers_bracket) > 1:
        if len(winners_bracket) > 1:
            round_name = get_winners_round_name(len(winners_bracket))
            observer.round_started(round_name)
            result = play_round(winners_bracket, oracle, matches, round_name, observer)
            observer.round_completed(round_name)
            winners_bracket = result.winners
            losers_bracket.extend(result.losers)

        if len(losers_bracket) > 1:
            round_name = get_losers_round_name(losers_round)
            observer.round_started(round_name)
            result = play_round(losers_bracket, oracle, matches, round_name, observer)
            observer.round_completed(round_name)
            # Losing in the losers bracket is a second loss
            losers_bracket = result.winners
            logger.debug("%s eliminated: %s", round_name, ', '.join(str(p) for p in result.losers))
            losers_round += 1

        if len(winners_bracket) == 1 and len(losers_bracket) == 1:
            champion = play_grand_final(winners_bracket[0], losers_bracket[0], oracle, matches, observer)
            break

    if champion is None and winners_bracket:
        champion = winners_bracket[0]
    logger.info("Double elimination champion: %s", champion)
    return champion
