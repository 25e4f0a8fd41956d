from flask import request
from flask_socketio import emit
from pong import NAMESPACE, engine, socketio
from pong.inputs import InputError, parse_click, parse_key_press


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def handle_connect(auth=None):
    emit('connected', {'sid': _get_sid()})
    engine.on_subscribe(_get_sid())


def handle_disconnect(*args):
    engine.on_unsubscribe(_get_sid())


def handle_keypress(data):
    try:
        key = parse_key_press(data)
    except InputError as exc:
        emit('error', {'message': str(exc)})
        return
    engine.on_key_press(key)


def handle_click(data):
    try:
        x, y = parse_click(data)
    except InputError as exc:
        emit('error', {'message': str(exc)})
        return
    engine.on_click(x, y)


def handle_ping(data=None):
    emit('pong', data or {})


def register_socketio_handlers() -> None:
    """Register Socket.IO event handlers.

    Every connection on the game namespace is a subscriber of the match.
    """
    socketio.on_event('connect', handle_connect, namespace=NAMESPACE)
    socketio.on_event('disconnect', handle_disconnect, namespace=NAMESPACE)
    socketio.on_event('keypress', handle_keypress, namespace=NAMESPACE)
    socketio.on_event('click', handle_click, namespace=NAMESPACE)
    socketio.on_event('ping', handle_ping, namespace=NAMESPACE)
