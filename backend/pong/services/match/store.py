import copy
import threading
from contextlib import contextmanager
from typing import Callable, Optional, TypeVar

from pong.models import MatchState

R = TypeVar('R')


class ReadWriteLock:
    """Many readers or a single writer.

    Writers are preferred: as soon as one is waiting, new readers queue up
    behind it so a stream of short reads cannot starve the simulation tick.
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer or self._waiting_writers:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if not self._readers:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._waiting_writers -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def reading(self):
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def writing(self):
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()


class GameStore:
    """Owner of the single process-wide :class:`MatchState`."""

    def __init__(self, state: Optional[MatchState] = None):
        self._state = state if state is not None else MatchState()
        self._lock = ReadWriteLock()

    @contextmanager
    def read(self):
        # Yields the live object; callers must not mutate it.
        with self._lock.reading():
            yield self._state

    def snapshot(self) -> MatchState:
        with self._lock.reading():
            return copy.deepcopy(self._state)

    def mutate(self, fn: Callable[[MatchState], R]) -> R:
        with self._lock.writing():
            return fn(self._state)
