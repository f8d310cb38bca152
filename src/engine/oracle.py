"""
Outcome oracles decide who wins a match.

An oracle is any callable taking two players and returning one of them.
Drivers never pick winners themselves, so tests can swap in a deterministic
oracle without touching bracket logic.
"""
import random
from typing import Iterable, Optional

from .models import Player


class RandomOracle:
    """Pick either player with equal probability."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def __call__(self, player1: Player, player2: Player) -> Player:
        return player1 if self._rng.random() < 0.5 else player2

    def __repr__(self):
        return f"RandomOracle(seed={self.seed})"


def first_player_wins(player1: Player, player2: Player) -> Player:
    """Always pick the first-listed player."""
    return player1


class ScriptedOracle:
    """
    Replay a fixed sequence of decisions.

    Each pick is 0 (first-listed player wins) or 1 (second-listed player wins).
    Running out of picks raises RuntimeError.
    """

    def __init__(self, picks: Iterable[int]):
        self.picks = list(picks)
        self.calls = 0

    def __call__(self, player1: Player, player2: Player) -> Player:
        if self.calls >= len(self.picks):
            raise RuntimeError(
                f"Scripted oracle has no decision left for {player1} vs {player2} "
                f"(used all {len(self.picks)})"
            )
        pick = self.picks[self.calls]
        if pick not in (0, 1):
            raise ValueError(f"Scripted pick must be 0 or 1, got {pick!r}")
        self.calls += 1
        return player1 if pick == 0 else player2

    @property
    def remaining(self) -> int:
        return len(self.picks) - self.calls
