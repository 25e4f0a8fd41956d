import logging
import threading
import time
from typing import Callable, List, Optional

from pong.models import RENDER_ALL, MatchState, RenderSignal
from .broadcast import Broadcaster
from .physics import advance
from .store import GameStore


class Wakeup:
    """Single-slot notification: repeated notifies before a wait coalesce."""

    def __init__(self):
        self._event = threading.Event()

    @property
    def pending(self) -> bool:
        return self._event.is_set()

    def notify(self) -> None:
        self._event.set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        woken = self._event.wait(timeout)
        if woken:
            self._event.clear()
        return woken


class SimulationDriver:
    """Ticks the physics while the match runs and somebody is watching.

    Idle until :meth:`Wakeup.notify`; then loops ``advance`` every
    ``interval`` seconds. The loop condition is re-checked under the write
    lock on every tick, and the lock is never held across the sleep.
    """

    def __init__(self, store: GameStore, broadcaster: Broadcaster,
                 submit: Callable[..., None], wakeup: Wakeup,
                 interval: float = 0.032, sleep: Callable[[float], None] = time.sleep,
                 logger: Optional[logging.Logger] = None):
        self.store = store
        self.broadcaster = broadcaster
        self.submit = submit
        self.wakeup = wakeup
        self.interval = interval
        self.sleep = sleep
        self.logger = logger or logging.getLogger(__name__)

    def _reset_if_lost(self, game: MatchState) -> List[RenderSignal]:
        if not game.is_lost:
            return []
        requested = game.is_running
        game.reset()
        # Keep the start request that woke us up.
        game.is_running = requested
        return list(RENDER_ALL)

    def _park(self, game: MatchState) -> None:
        game.is_running = False

    def _tick(self, game: MatchState) -> Optional[List[RenderSignal]]:
        if game.is_running and not game.is_lost and self.broadcaster.count > 0:
            return advance(game)
        self._park(game)
        return None

    def run_once(self, timeout: Optional[float] = None) -> bool:
        """One Idle -> Active -> Idle cycle. Returns False if no wake arrived."""
        if not self.wakeup.wait(timeout):
            return False

        signals = self.store.mutate(self._reset_if_lost)
        if signals:
            self.logger.info("[match-reset] board restored after a miss")
            self.submit(*signals)
        self.logger.info(f"[driver-wake] players={self.broadcaster.count}")

        ticks = 0
        while True:
            signals = self.store.mutate(self._tick)
            if signals is None:
                break
            ticks += 1
            self.submit(*signals)
            self.sleep(self.interval)

        with self.store.read() as game:
            if game.is_lost:
                self.logger.info(f"[match-lost] left={game.left.score} right={game.right.score}")
        self.logger.info(f"[driver-idle] ticks={ticks}")
        return True

    def run(self) -> None:
        while True:
            try:
                self.run_once()
            except Exception:
                self.logger.exception("[driver-error] cycle aborted, waiting for the next wake")
                self.store.mutate(self._park)
