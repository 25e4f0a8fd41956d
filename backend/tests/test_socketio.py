from pong import NAMESPACE, socketio


def _names(received):
    return [pkt['name'] for pkt in received]


def _last(received, name):
    return [pkt['args'][0] for pkt in received if pkt['name'] == name][-1]


def test_connect_subscribes_and_sends_scoreboard(sio_client, match_engine):
    assert sio_client.is_connected(NAMESPACE)
    received = sio_client.get_received(NAMESPACE)
    assert _names(received) == ['connected', 'scoreboard']
    assert '1 player watching' in _last(received, 'scoreboard')
    assert match_engine.broadcaster.count == 1


def test_keypress_event_publishes_scoreboard(sio_client):
    sio_client.get_received(NAMESPACE)
    sio_client.emit('keypress', {'last_key': 'p'}, namespace=NAMESPACE)
    received = sio_client.get_received(NAMESPACE)
    assert _names(received) == ['scoreboard']
    assert 'Running' in _last(received, 'scoreboard')


def test_paddle_move_publishes_only_that_paddle(sio_client):
    sio_client.emit('keypress', {'last_key': 'p'}, namespace=NAMESPACE)
    sio_client.get_received(NAMESPACE)
    sio_client.emit('keypress', {'last_key': 'l'}, namespace=NAMESPACE)
    received = sio_client.get_received(NAMESPACE)
    assert _names(received) == ['paddle_right']
    assert 'top: 25.0%' in _last(received, 'paddle_right')


def test_http_input_reaches_socket_subscribers(client, sio_client):
    sio_client.get_received(NAMESPACE)
    client.post('/click', data={'x': '0.9', 'y': '0.9'})
    received = sio_client.get_received(NAMESPACE)
    assert _names(received) == ['scoreboard']


def test_invalid_click_event_reports_error(sio_client):
    sio_client.get_received(NAMESPACE)
    sio_client.emit('click', {'x': 3, 'y': 0}, namespace=NAMESPACE)
    received = sio_client.get_received(NAMESPACE)
    assert _names(received) == ['error']
    assert 'x' in received[0]['args'][0]['message']


def test_ping(sio_client):
    sio_client.get_received(NAMESPACE)
    sio_client.emit('ping', {'n': 1}, namespace=NAMESPACE)
    received = sio_client.get_received(NAMESPACE)
    assert received[0]['name'] == 'pong'
    assert received[0]['args'][0] == {'n': 1}


def test_late_joiner_gets_no_replay(flask_app, sio_client, match_engine):
    sio_client.emit('keypress', {'last_key': 'p'}, namespace=NAMESPACE)
    late = socketio.test_client(flask_app, namespace=NAMESPACE)
    try:
        received = late.get_received(NAMESPACE)
        assert _names(received) == ['connected', 'scoreboard']
        assert '2 players watching' in _last(received, 'scoreboard')
        assert match_engine.broadcaster.count == 2
    finally:
        late.disconnect(namespace=NAMESPACE)
    assert match_engine.broadcaster.count == 1
