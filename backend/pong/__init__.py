from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config
from pong.services.match.engine import MatchEngine

NAMESPACE = '/ws'

socketio = SocketIO(async_mode=None)
engine = MatchEngine()


def _deliver(event, payload):
    socketio.emit(event, payload, namespace=NAMESPACE)


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    allowed_origins = flask_app.config.get('CORS_ORIGINS') or []
    CORS(flask_app, origins=allowed_origins)
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # Fragment templates are compiled here; a broken template aborts start.
    engine.init_app(flask_app, deliver=_deliver, sleep=socketio.sleep)

    from pong.main import main
    flask_app.register_blueprint(main)

    from pong.api.match import match
    flask_app.register_blueprint(match, url_prefix='/api/match')

    from pong.socketio_events import register_socketio_handlers
    register_socketio_handlers()

    engine.start_workers(socketio)

    return flask_app
