import logging
from typing import Callable, Hashable, Optional

Deliver = Callable[[str, str], None]


class Broadcaster:
    """Registry of live subscribers plus a best-effort fan-out hook.

    ``deliver(event, payload)`` reaches everyone connected at the moment of
    the call; nothing is buffered for subscribers who join later.
    """

    def __init__(self, deliver: Deliver, logger: Optional[logging.Logger] = None):
        self._deliver = deliver
        self._subscribers = set()
        self.logger = logger or logging.getLogger(__name__)

    @property
    def count(self) -> int:
        return len(self._subscribers)

    def subscribe(self, key: Hashable) -> Hashable:
        self._subscribers.add(key)
        self.logger.info(f"[subscribe] sid={key} players={self.count}")
        return key

    def unsubscribe(self, key: Hashable) -> None:
        self._subscribers.discard(key)
        self.logger.info(f"[unsubscribe] sid={key} players={self.count}")

    def publish(self, event: str, payload: str) -> bool:
        if not self._subscribers:
            return False
        self._deliver(event, payload)
        return True
