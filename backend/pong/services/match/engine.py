from typing import Callable, Hashable, NamedTuple, Optional

from pong.models import MatchState, RenderSignal
from . import controls
from .broadcast import Broadcaster, Deliver
from .dispatcher import RenderDispatcher
from .driver import SimulationDriver, Wakeup
from .fragments import FragmentRenderer
from .store import GameStore


class Snapshot(NamedTuple):
    game: MatchState
    players: int


class MatchEngine:
    """The single global match, wired for a Flask app.

    Built empty at import time and bound with :meth:`init_app`, like the
    other extensions in :mod:`pong`.
    """

    def __init__(self):
        self.app = None
        self.store: Optional[GameStore] = None
        self.broadcaster: Optional[Broadcaster] = None
        self.dispatcher: Optional[RenderDispatcher] = None
        self.driver: Optional[SimulationDriver] = None
        self.wakeup: Optional[Wakeup] = None
        self.inline = False
        self._workers_started = False

    def init_app(self, app, deliver: Deliver, sleep: Callable[[float], None]) -> None:
        self.app = app
        logger = app.logger
        self.store = GameStore()
        self.wakeup = Wakeup()
        self.broadcaster = Broadcaster(deliver, logger=logger)
        self.dispatcher = RenderDispatcher(
            self.store,
            FragmentRenderer(app.jinja_env),
            self.broadcaster,
            maxsize=int(app.config.get('RENDER_QUEUE_SIZE', 50)),
            logger=logger,
        )
        self.driver = SimulationDriver(
            self.store,
            self.broadcaster,
            self.submit,
            self.wakeup,
            interval=int(app.config.get('TICK_INTERVAL_MS', 32)) / 1000.0,
            sleep=sleep,
            logger=logger,
        )
        # Without workers (tests), fragments are rendered in the caller's thread.
        self.inline = bool(app.config.get('TESTING')) and not app.config.get('ENABLE_WORKERS_IN_TESTS')
        self._workers_started = False
        app.extensions['pong'] = self

    def start_workers(self, socketio) -> None:
        if self.inline or self._workers_started:
            return
        self._workers_started = True
        socketio.start_background_task(self.dispatcher.run)
        socketio.start_background_task(self.driver.run)
        self.app.logger.info(f"[workers-start] tick={self.driver.interval}s")

    def submit(self, *signals: RenderSignal) -> None:
        self.dispatcher.submit(*signals)
        if self.inline:
            self.dispatcher.drain()

    def _apply(self, transition, *args) -> None:
        # Signals are queued only after the write lock is released.
        signals, wake = self.store.mutate(lambda game: transition(game, *args))
        if wake:
            self.wakeup.notify()
        if signals:
            self.submit(*signals)

    def on_key_press(self, key: str) -> None:
        self._apply(controls.press_key, key)

    def on_click(self, x: float, y: float) -> None:
        self._apply(controls.click, x, y)

    def on_subscribe(self, sid: Hashable) -> Hashable:
        handle = self.broadcaster.subscribe(sid)
        self.submit(RenderSignal.SCOREBOARD)
        return handle

    def on_unsubscribe(self, sid: Hashable) -> None:
        self.broadcaster.unsubscribe(sid)

    def get_snapshot(self) -> Snapshot:
        return Snapshot(self.store.snapshot(), self.broadcaster.count)
