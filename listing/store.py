# listing/store.py
"""
Thin observable store shared by the list-state engines.

Engines keep their state in an immutable snapshot. Mutations are pure
functions ``snapshot -> snapshot`` applied under a lock; subscribers are
notified with the new snapshot after the lock is released.
"""

import itertools
import logging
import threading
from typing import Any, Callable, Generic, List, Optional, TypeVar

from logger import LoggingConstants

logger = logging.getLogger(__name__)

S = TypeVar("S")
Subscriber = Callable[[Any], None]


Scheduler = Callable[[float, Callable[[], None]], Any]


def start_timer(delay: float, callback: Callable[[], None]) -> threading.Timer:
    """
    Default scheduler: run ``callback`` on a daemon timer thread.
    """
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    timer.start()
    return timer


class SnapshotStore(Generic[S]):
    """
    Holds one snapshot, applies updates atomically and fans out changes.
    """

    name = "store"

    def __init__(self, initial: S):
        self._snapshot = initial
        self._lock = threading.Lock()
        self._subscribers: List[Subscriber] = []
        self._sequence = itertools.count(1)
        self._latest_token = 0

    @property
    def snapshot(self) -> S:
        return self._snapshot

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a change listener.

        Args:
            callback: Called with each new snapshot

        Returns:
            Function removing the listener
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _apply(self, update: Callable[..., S], *args, **kwargs) -> S:
        with self._lock:
            self._snapshot = update(self._snapshot, *args, **kwargs)
            snapshot = self._snapshot
        self._notify(snapshot)
        return snapshot

    def _apply_if_latest(self, token: int, update: Callable[..., S], *args, **kwargs) -> bool:
        """
        Apply ``update`` only when ``token`` belongs to the newest request.
        """
        with self._lock:
            latest = self._latest_token
            if token != latest:
                logger.debug(LoggingConstants.STALE_RESPONSE_MSG, self.name, token, latest)
                return False
            self._snapshot = update(self._snapshot, *args, **kwargs)
            snapshot = self._snapshot
        self._notify(snapshot)
        return True

    def _notify(self, snapshot: S) -> None:
        for callback in list(self._subscribers):
            callback(snapshot)

    def _next_token(self) -> int:
        with self._lock:
            self._latest_token = next(self._sequence)
            return self._latest_token

    def _cancel(self, handle: Optional[Any]) -> None:
        if handle is not None and hasattr(handle, "cancel"):
            handle.cancel()
