"""
Tests for double elimination bracket simulation.
"""
import pytest
import sys
import os
from collections import Counter

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from engine.config import make_players
from engine.double_elimination import (
    BRACKET_RESET,
    GRAND_FINAL,
    get_losers_round_name,
    get_winners_round_name,
    run_double_elimination,
)
from engine.oracle import RandomOracle, ScriptedOracle, first_player_wins


def _pairs(matches):
    return [(m.player1, m.player2, m.winner) for m in matches]


class TestLosersRoundName:
    """Tests for get_losers_round_name."""

    def test_numbered_rounds(self):
        """Losers rounds are numbered from 1."""
        assert get_losers_round_name(0) == "Losers Round 1"
        assert get_losers_round_name(1) == "Losers Round 2"
        assert get_losers_round_name(4) == "Losers Round 5"


class TestWinnersRoundName:
    """Tests for get_winners_round_name."""

    def test_winners_final(self):
        """Two players means Winners Final."""
        assert get_winners_round_name(2) == "Winners Final"

    def test_winners_semifinal(self):
        """Three or four players means Winners Semifinal."""
        assert get_winners_round_name(4) == "Winners Semifinal"
        assert get_winners_round_name(3) == "Winners Semifinal"

    def test_winners_quarterfinal(self):
        """Eight players means Winners Quarterfinal."""
        assert get_winners_round_name(8) == "Winners Quarterfinal"

    def test_winners_round_of_n(self):
        """Larger counts are Round of N."""
        assert get_winners_round_name(16) == "Winners Round of 16"
        assert get_winners_round_name(20) == "Winners Round of 32"


class TestDoubleElimination:
    """Tests for running a double elimination tournament."""

    def test_two_player_scenario(self):
        """A beats B, B drops to the losers bracket, A wins the Grand Final."""
        a, b = make_players(2)
        matches = []
        winner = run_double_elimination([a, b], first_player_wins, matches)
        assert winner == a
        assert _pairs(matches) == [(a, b, a), (a, b, a)]
        assert [m.round_name for m in matches] == ["Winners Final", GRAND_FINAL]

    def test_four_player_flow(self, four_players):
        """Winners and losers rounds alternate, Grand Final comes last."""
        a, b, c, d = four_players
        matches = []
        winner = run_double_elimination(four_players, first_player_wins, matches)
        assert winner == a
        assert _pairs(matches) == [
            (a, b, a),  # winners round 1
            (c, d, c),
            (b, d, b),  # losers round 1, D eliminated
            (a, c, a),  # winners final, C drops
            (b, c, b),  # losers round 2, C eliminated
            (a, b, a),  # grand final
        ]
        assert [m.round_name for m in matches] == [
            "Winners Semifinal", "Winners Semifinal", "Losers Round 1",
            "Winners Final", "Losers Round 2", GRAND_FINAL,
        ]

    def test_bracket_reset_losers_champion_wins_twice(self):
        """If the losers bracket champion wins the Grand Final one more match is played."""
        a, b = make_players(2)
        matches = []
        winner = run_double_elimination([a, b], ScriptedOracle([0, 1, 1]), matches)
        assert winner == b
        assert _pairs(matches) == [(a, b, a), (a, b, b), (a, b, b)]
        assert matches[-1].round_name == BRACKET_RESET

    def test_bracket_reset_winners_champion_recovers(self):
        """The winners bracket champion can still win the reset match."""
        a, b = make_players(2)
        matches = []
        winner = run_double_elimination([a, b], ScriptedOracle([0, 1, 0]), matches)
        assert winner == a
        assert len(matches) == 3

    def test_no_reset_when_winners_champion_wins(self):
        """Exactly one Grand Final match when the unbeaten player wins it."""
        a, b = make_players(2)
        oracle = ScriptedOracle([0, 0])
        matches = []
        run_double_elimination([a, b], oracle, matches)
        assert oracle.remaining == 0
        assert [m.round_name for m in matches].count(BRACKET_RESET) == 0

    def test_single_player(self):
        """One player wins without playing."""
        players = make_players(1)
        matches = []
        assert run_double_elimination(players, first_player_wins, matches) == players[0]
        assert matches == []

    def test_empty_roster(self):
        """No players, no winner."""
        matches = []
        assert run_double_elimination([], first_player_wins, matches) is None
        assert matches == []

    def test_observer_sees_grand_final(self, four_players, observer):
        """Round notifications follow the order matches are played in."""
        run_double_elimination(four_players, first_player_wins, [], observer)
        assert observer.rounds() == [
            "Winners Semifinal", "Losers Round 1", "Winners Final", "Losers Round 2", GRAND_FINAL,
        ]

    @pytest.mark.parametrize("count", [2, 3, 4, 5, 6, 7, 8, 12, 16])
    def test_nobody_loses_three_times(self, count):
        """A player is out after a second loss, so no one has more than two."""
        players = make_players(count)
        for seed in range(10):
            matches = []
            winner = run_double_elimination(players, RandomOracle(seed=seed), matches)
            assert winner in players
            assert all(m.winner in (m.player1, m.player2) for m in matches)
            losses = Counter(m.loser for m in matches)
            assert max(losses.values()) <= 2

    @pytest.mark.parametrize("count", [4, 8, 9])
    def test_losers_bracket_entered_once(self, count):
        """A player who has lost never plays a winners bracket match again."""
        players = make_players(count)
        for seed in range(10):
            matches = []
            run_double_elimination(players, RandomOracle(seed=seed), matches)
            lost = set()
            for match in matches:
                if match.round_name.startswith("Winners"):
                    assert match.player1 not in lost
                    assert match.player2 not in lost
                if match.round_name != BRACKET_RESET:
                    lost.add(match.loser)

    def test_eight_players_minimum_matches(self, eight_players):
        """Eight players need at least the seven single elimination matches."""
        matches = []
        winner = run_double_elimination(eight_players, RandomOracle(seed=3), matches)
        assert winner in eight_players
        assert len(matches) >= 7
        assert matches[-1].round_name in (GRAND_FINAL, BRACKET_RESET)
