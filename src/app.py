"""
Flask web application for the bracket simulator.
"""
import os
import logging
import yaml
from filelock import FileLock
from flask import Flask, request, jsonify
from engine.config import (
    load_players,
    save_players,
    parse_players,
    load_settings,
    save_settings,
    validate_settings,
)
from engine.models import TournamentType
from engine.oracle import RandomOracle
from engine.reporting import LoggingReporter
from engine.tournament import Tournament

app = Flask(__name__)

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DATA_DIR = os.environ.get('TOURNAMENT_DATA_DIR', os.path.join(BASE_DIR, 'data'))

PLAYERS_FILENAME = 'players.yaml'
SETTINGS_FILENAME = 'settings.yaml'


def _file_path(filename: str) -> str:
    """Return full path to a file in the data directory."""
    return os.path.join(DATA_DIR, filename)


def _data_lock() -> FileLock:
    """Lock guarding writes to the data directory."""
    os.makedirs(DATA_DIR, exist_ok=True)
    return FileLock(_file_path('.lock'), timeout=10)


def _error(message: str, status: int = 400):
    return jsonify({'success': False, 'error': message}), status


def _json_body():
    """Return the request's JSON object, {} when there is no body, None when it is not an object."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        return None
    return data


@app.route('/api/players', methods=['GET'])
def get_players():
    """Return the stored roster."""
    try:
        players = load_players(_file_path(PLAYERS_FILENAME))
    except (ValueError, yaml.YAMLError) as e:
        app.logger.warning(f'Failed to parse {PLAYERS_FILENAME}: {e}')
        return _error(f'Stored roster is invalid: {e}', 500)
    return jsonify({'players': [player.to_dict() for player in players]})


@app.route('/api/players', methods=['POST'])
def update_players():
    """Replace the stored roster."""
    data = _json_body()
    if data is None:
        return _error("Request body must be a JSON object")
    try:
        players = parse_players(data.get('players'))
    except ValueError as e:
        return _error(str(e))

    with _data_lock():
        save_players(players, _file_path(PLAYERS_FILENAME))
    app.logger.info(f'Saved roster with {len(players)} players')
    return jsonify({'success': True, 'count': len(players)})


@app.route('/api/settings', methods=['GET'])
def get_settings():
    """Return the stored simulation settings."""
    try:
        settings = load_settings(_file_path(SETTINGS_FILENAME))
    except (ValueError, yaml.YAMLError) as e:
        app.logger.warning(f'Failed to parse {SETTINGS_FILENAME}: {e}')
        return _error(f'Stored settings are invalid: {e}', 500)
    return jsonify(settings)


@app.route('/api/settings', methods=['POST'])
def update_settings():
    """Update some or all simulation settings."""
    data = _json_body()
    if data is None:
        return _error("Request body must be a JSON object")
    with _data_lock():
        try:
            settings = load_settings(_file_path(SETTINGS_FILENAME))
            for key in ('tournament_type', 'random_seed'):
                if key in data:
                    settings[key] = data[key]
            settings = validate_settings(settings)
        except (ValueError, yaml.YAMLError) as e:
            return _error(str(e))
        save_settings(settings, _file_path(SETTINGS_FILENAME))
    return jsonify({'success': True, 'settings': settings})


@app.route('/api/formats', methods=['GET'])
def get_formats():
    """List the accepted tournament types."""
    return jsonify({'formats': [t.value for t in TournamentType]})


@app.route('/api/simulate', methods=['POST'])
def simulate():
    """
    Run a tournament and return its match log and winner.

    The request may override the stored format, seed and roster:
    {'tournament_type': 'swiss', 'seed': 42, 'players': [...]}
    """
    data = _json_body()
    if data is None:
        return _error("Request body must be a JSON object")
    try:
        settings = load_settings(_file_path(SETTINGS_FILENAME))
        if 'tournament_type' in data:
            settings['tournament_type'] = data['tournament_type']
        if 'seed' in data:
            settings['random_seed'] = data['seed']
        settings = validate_settings(settings)

        if 'players' in data:
            players = parse_players(data['players'])
        else:
            players = load_players(_file_path(PLAYERS_FILENAME))
    except (ValueError, yaml.YAMLError) as e:
        return _error(str(e))

    tournament = Tournament(
        settings['tournament_type'],
        players,
        oracle=RandomOracle(settings['random_seed']),
        observer=LoggingReporter(app.logger),
    )
    winner = tournament.start()
    app.logger.info(f'Simulated {tournament.tournament_type.value} with {len(players)} players, '
                    f'winner: {winner}')

    return jsonify({
        'success': True,
        'tournament_type': tournament.tournament_type.value,
        'winner': winner.to_dict() if winner else None,
        'matches': [match.to_dict() for match in tournament.matches],
        'match_count': len(tournament.matches),
        'standings': [
            {'player': player.to_dict(), 'score': score}
            for player, score in tournament.standings()
        ],
    })


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    app.run(debug=True, port=5000)
