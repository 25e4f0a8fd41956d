from flask import Blueprint, jsonify, render_template, request
from pong import engine
from pong.inputs import InputError, parse_click, parse_key_press

main = Blueprint('main', __name__)


def _payload():
    return request.get_json(silent=True) or request.form


@main.route('/')
def index():
    snapshot = engine.get_snapshot()
    return render_template('game.html', game=snapshot.game, players=snapshot.players)


@main.route('/keypress', methods=['POST'])
def keypress():
    try:
        key = parse_key_press(_payload())
    except InputError as exc:
        return jsonify({'error': str(exc)}), 400
    engine.on_key_press(key)
    return '', 204


@main.route('/click', methods=['POST'])
def click():
    try:
        x, y = parse_click(_payload())
    except InputError as exc:
        return jsonify({'error': str(exc)}), 400
    engine.on_click(x, y)
    return '', 204
