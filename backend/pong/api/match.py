from flask import Blueprint, jsonify
from pong import engine

match = Blueprint('match', __name__)


@match.route('/state', methods=['GET'])
def get_state():
    """Current board plus the number of connected viewers."""
    snapshot = engine.get_snapshot()
    data = snapshot.game.to_dict()
    data['players'] = snapshot.players
    return jsonify(data), 200
