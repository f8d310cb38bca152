"""
Settings and roster files.

Both are YAML. Settings are merged over defaults so a partial file is fine.
A roster is a list of ``{id, name}`` mappings or bare names.
"""
import os
from typing import Any, Dict, List

import yaml

from .models import Player, TournamentType


def get_default_settings() -> Dict[str, Any]:
    """Return default simulation settings."""
    return {
        'tournament_type': TournamentType.SINGLE_ELIMINATION.value,
        'random_seed': None,
    }


def validate_settings(settings: Dict[str, Any]) -> Dict[str, Any]:
    """Normalize settings values, raising ValueError for anything unusable."""
    settings = dict(settings)
    settings['tournament_type'] = TournamentType.from_string(settings['tournament_type']).value
    seed = settings.get('random_seed')
    # bool is an int subclass but never a sensible seed
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise ValueError(f"random_seed must be an integer or null, got {seed!r}")
    return settings


def load_settings(path: str) -> Dict[str, Any]:
    """Load settings from YAML file, merging with defaults."""
    defaults = get_default_settings()
    if not os.path.exists(path):
        return defaults
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)
    if not data:
        return defaults
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must contain a mapping")
    for key, value in defaults.items():
        if key not in data:
            data[key] = value
    return validate_settings(data)


def save_settings(settings: Dict[str, Any], path: str):
    """Save settings to YAML file."""
    with open(path, 'w', encoding='utf-8') as f:
        yaml.dump(validate_settings(settings), f, default_flow_style=False)


def make_players(count: int) -> List[Player]:
    """Build placeholder players 'Player 1' .. 'Player N'."""
    if count < 0:
        raise ValueError("Player count cannot be negative.")
    return [Player(id=i, name=f"Player {i}") for i in range(1, count + 1)]


def parse_players(data) -> List[Player]:
    """
    Build a roster from decoded YAML/JSON data.

    Entries may be mappings with 'id' and 'name' or plain names. Plain names
    get their 1-based position as id. Ids must be unique.
    """
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError("Players must be a list.")

    players = []
    for position, entry in enumerate(data, start=1):
        if isinstance(entry, dict):
            if 'name' not in entry:
                raise ValueError(f"Player entry {position} is missing a name.")
            player_id = entry.get('id', position)
            if isinstance(player_id, bool) or not isinstance(player_id, int):
                raise ValueError(f"Player entry {position} has a non-integer id: {player_id!r}")
            name = str(entry['name']).strip()
        elif isinstance(entry, (str, int)) and not isinstance(entry, bool):
            player_id = position
            name = str(entry).strip()
        else:
            raise ValueError(f"Player entry {position} must be a name or a mapping, got {entry!r}")
        if not name:
            raise ValueError(f"Player entry {position} has an empty name.")
        players.append(Player(id=player_id, name=name))

    seen = set()
    for player in players:
        if player.id in seen:
            raise ValueError(f"Duplicate player id {player.id}.")
        seen.add(player.id)
    return players


def load_players(path: str) -> List[Player]:
    """Load the roster from a YAML file. A missing file is an empty roster."""
    if not os.path.exists(path):
        return []
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)
    if isinstance(data, dict):
        data = data.get('players')
    return parse_players(data)


def save_players(players: List[Player], path: str):
    """Save the roster to a YAML file."""
    with open(path, 'w', encoding='utf-8') as f:
        yaml.dump({'players': [player.to_dict() for player in players]}, f,
                  default_flow_style=False, sort_keys=False)
