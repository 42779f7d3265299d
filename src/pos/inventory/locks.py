"""Per-item mutual exclusion for stock changes.

Every path that reads an item's stock and writes it back (checkout, direct
purchase, administrative stock edits) runs inside ``item_locks.hold(...)``
so that two requests for the same item never interleave between the read and
the commit. Requests for different items proceed in parallel.

Locks are taken in sorted id order, so two carts that share several items
cannot deadlock. Entries are reference counted and dropped once no thread
holds or waits on them.

The registry is process local. Deployments running several replicas rely on
the database provider for cross-process safety.
"""

import threading
from contextlib import contextmanager

from pos.utils.logging import get_logger

logger = get_logger(__name__)


class ItemLocks:
    def __init__(self):
        self._guard = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}
        self._users: dict[str, int] = {}

    def _checkout(self, key: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = self._locks[key] = threading.Lock()
            self._users[key] = self._users.get(key, 0) + 1
            return lock

    def _checkin(self, key: str) -> None:
        with self._guard:
            self._users[key] -= 1
            if self._users[key] == 0:
                del self._users[key]
                del self._locks[key]

    @contextmanager
    def hold(self, item_ids):
        """Hold the locks for every id in ``item_ids`` for the block's duration.

        Blank ids are ignored and duplicates collapse to one lock.
        """
        keys = sorted({str(item_id) for item_id in item_ids if item_id})
        held = []
        try:
            for key in keys:
                lock = self._checkout(key)
                try:
                    lock.acquire()
                except BaseException:
                    self._checkin(key)
                    raise
                held.append((key, lock))
            yield keys
        finally:
            for key, lock in reversed(held):
                lock.release()
                self._checkin(key)

    def __len__(self):
        with self._guard:
            return len(self._locks)


item_locks = ItemLocks()
