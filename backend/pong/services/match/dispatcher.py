import logging
import queue
from typing import Optional

from jinja2 import TemplateError

from pong.models import RenderSignal
from .broadcast import Broadcaster
from .fragments import FragmentRenderer
from .store import GameStore


class RenderDispatcher:
    """Turns render signals into published fragments, one at a time, FIFO."""

    def __init__(self, store: GameStore, renderer: FragmentRenderer, broadcaster: Broadcaster,
                 maxsize: int = 50, logger: Optional[logging.Logger] = None):
        self.store = store
        self.renderer = renderer
        self.broadcaster = broadcaster
        self.logger = logger or logging.getLogger(__name__)
        self._queue: 'queue.Queue[RenderSignal]' = queue.Queue(maxsize=maxsize)

    @property
    def pending(self) -> int:
        return self._queue.qsize()

    def submit(self, *signals: RenderSignal) -> None:
        # Blocks while the queue is full.
        for signal in signals:
            self._queue.put(signal)

    def process(self, signal: RenderSignal) -> bool:
        players = self.broadcaster.count
        if not players:
            return False
        try:
            with self.store.read() as game:
                markup = self.renderer.render(signal, game, players=players)
        except TemplateError:
            self.logger.exception(f"[render-error] fragment={signal.value}")
            return False
        return self.broadcaster.publish(signal.value, markup)

    def drain(self) -> int:
        """Process everything queued right now without blocking."""
        processed = 0
        while True:
            try:
                signal = self._queue.get_nowait()
            except queue.Empty:
                return processed
            self.process(signal)
            processed += 1

    def run(self) -> None:
        while True:
            signal = self._queue.get()
            try:
                self.process(signal)
            except Exception:
                # Drop this fragment only; the worker must keep draining.
                self.logger.exception(f"[dispatch-error] fragment={signal.value}")
