"""Per-location mutation locks."""

import threading
from collections import defaultdict
from contextlib import contextmanager


class LocationLocks:
    """One lock per location id.

    Every read-modify-write of a location (and the fan-out that reads its
    contributors) must hold that location's lock; mutations on different
    locations proceed independently.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: defaultdict[str, threading.RLock] = defaultdict(threading.RLock)

    def get(self, location_id: str) -> threading.RLock:
        with self._guard:
            return self._locks[location_id]

    @contextmanager
    def hold(self, location_id: str):
        lock = self.get(location_id)
        with lock:
            yield
