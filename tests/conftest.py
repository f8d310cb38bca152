"""
Shared pytest fixtures for bracket simulator tests.

Running tests:
    pytest tests/                  - full suite
    pytest tests/ -m "not slow"   - skip the large randomized runs
"""
import pytest
import sys
import os

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from engine.config import make_players
from engine.models import Player
from engine.oracle import first_player_wins
from engine.reporting import TournamentObserver


class RecordingObserver(TournamentObserver):
    """Observer that keeps every notification for later assertions."""

    def __init__(self):
        self.events = []

    def round_started(self, round_name):
        self.events.append(('start', round_name))

    def match_decided(self, match):
        self.events.append(('match', match))

    def round_completed(self, round_name, standings=None):
        self.events.append(('end', round_name, standings))

    def rounds(self):
        return [event[1] for event in self.events if event[0] == 'start']


@pytest.fixture
def four_players():
    """Players A, B, C, D in roster order."""
    return [
        Player(id=1, name="A"),
        Player(id=2, name="B"),
        Player(id=3, name="C"),
        Player(id=4, name="D"),
    ]


@pytest.fixture
def eight_players():
    """Eight generated players, 'Player 1' .. 'Player 8'."""
    return make_players(8)


@pytest.fixture
def first_wins():
    """Oracle that always picks the first-listed player."""
    return first_player_wins


@pytest.fixture
def observer():
    """Observer recording every round and match notification."""
    return RecordingObserver()


@pytest.fixture
def client():
    """Create a test client."""
    from app import app
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


@pytest.fixture
def temp_data_dir(tmp_path, monkeypatch):
    """Point the app at an empty temporary data directory."""
    import app as app_module

    data_dir = tmp_path / "data"
    data_dir.mkdir()
    monkeypatch.setattr(app_module, 'DATA_DIR', str(data_dir))
    return str(data_dir)
