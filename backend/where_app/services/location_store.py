"""Location store contract and the in-memory implementation."""

import copy
import logging
import threading
from typing import Protocol

from where_app.models.location import Location

logger = logging.getLogger(__name__)


class LocationStore(Protocol):
    """Persistence collaborator. The core only ever reads and saves whole aggregates."""

    def get_location(self, location_id: str) -> Location | None: ...

    def save_location(self, location: Location) -> None: ...

    def list_locations(self) -> list[Location]: ...


class InMemoryLocationStore:
    """Process-local store.

    Keeps deep copies on both save and read, so a caller that mutates a
    location without saving it leaves the stored version untouched.
    """

    def __init__(self, locations: list[Location] | None = None):
        self._locations: dict[str, Location] = {}
        self._lock = threading.Lock()
        for location in locations or []:
            self.save_location(location)

    def get_location(self, location_id: str) -> Location | None:
        with self._lock:
            location = self._locations.get(location_id)
            return copy.deepcopy(location) if location else None

    def save_location(self, location: Location) -> None:
        with self._lock:
            self._locations[location.id] = copy.deepcopy(location)
        logger.debug("Saved location %s", location.id)

    def list_locations(self) -> list[Location]:
        with self._lock:
            return [copy.deepcopy(loc) for loc in self._locations.values()]

    def __len__(self) -> int:
        return len(self._locations)
