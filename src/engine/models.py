"""
Entity model for bracket simulation: players, matches and tournament formats.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Player:
    """A tournament participant. Equality and hashing use both id and name."""
    id: int
    name: str

    def __str__(self) -> str:
        return f"{self.name} (ID: {self.id})"

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'name': self.name}


@dataclass(frozen=True)
class Match:
    """
    A contest between two players.

    Matches are snapshots: once created they are never modified. If a winner
    is given it must be one of the two players. The round name is a label for
    reporting and does not take part in equality.
    """
    player1: Player
    player2: Player
    winner: Optional[Player] = None
    round_name: Optional[str] = field(default=None, compare=False)

    def __post_init__(self):
        if self.winner is not None and self.winner not in (self.player1, self.player2):
            raise ValueError(
                f"Winner {self.winner} is not a player in {self.player1} vs {self.player2}"
            )

    @property
    def is_decided(self) -> bool:
        return self.winner is not None

    @property
    def loser(self) -> Optional[Player]:
        """The player who did not win, or None while the match is undecided."""
        if self.winner is None:
            return None
        return self.player2 if self.winner == self.player1 else self.player1

    def __str__(self) -> str:
        if self.winner is None:
            return f"{self.player1} vs {self.player2} - No winner yet"
        return f"{self.player1} vs {self.player2} - Winner: {self.winner}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'player1': self.player1.to_dict(),
            'player2': self.player2.to_dict(),
            'winner': self.winner.to_dict() if self.winner else None,
            'round': self.round_name,
        }


# Short names used in settings files and the API
_TYPE_ALIASES = {
    'single': 'single_elimination',
    'double': 'double_elimination',
}


class TournamentType(Enum):
    SINGLE_ELIMINATION = 'single_elimination'
    DOUBLE_ELIMINATION = 'double_elimination'
    SWISS = 'swiss'

    @classmethod
    def from_string(cls, value: str) -> 'TournamentType':
        """Parse a tournament type name such as 'swiss', 'double' or 'single-elimination'."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Tournament type must be a string, got {value!r}")
        key = value.strip().lower().replace('-', '_').replace(' ', '_')
        key = _TYPE_ALIASES.get(key, key)
        for member in cls:
            if member.value == key:
                return member
        choices = ', '.join(member.value for member in cls)
        raise ValueError(f"Unknown tournament type '{value}'. Expected one of: {choices}")

    def __str__(self) -> str:
        return self.value
