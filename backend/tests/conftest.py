import os
import sys
import pytest

# Ensure the backend root (containing the `pong` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from pong import NAMESPACE, create_app, engine, socketio
from pong.models import MatchState, RenderSignal


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    TICK_INTERVAL_MS = 1
    RENDER_QUEUE_SIZE = 50
    CORS_ORIGINS = []


class RecordingBroadcaster:
    """Stands in for the Socket.IO fan-out; remembers what was published."""

    def __init__(self):
        self.published = []
        self.subscribers = set()

    @property
    def count(self):
        return len(self.subscribers)

    def subscribe(self, key):
        self.subscribers.add(key)
        return key

    def unsubscribe(self, key):
        self.subscribers.discard(key)

    def publish(self, event, payload):
        if not self.subscribers:
            return False
        self.published.append((event, payload))
        return True


class StubRenderer:
    def render(self, signal, game, players=0):
        if signal is RenderSignal.SCOREBOARD:
            return f"{signal.value}:{game.status}:{players}"
        return f"{signal.value}:{game.ball.position}"


@pytest.fixture()
def game():
    return MatchState()


@pytest.fixture()
def broadcaster():
    return RecordingBroadcaster()


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace=NAMESPACE
    )
    yield test_client
    try:
        test_client.disconnect(namespace=NAMESPACE)
    except Exception:
        pass


@pytest.fixture()
def match_engine(flask_app):
    return engine
