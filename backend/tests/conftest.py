"""Shared fixtures: an in-memory store, ledger and a session for alice."""

import pytest

from where_app.config import Settings
from where_app.models.location import Contributor, Location
from where_app.models.user import SessionUser
from where_app.services.location_service import LocationService
from where_app.services.location_store import InMemoryLocationStore
from where_app.services.points_ledger import PointsLedger
from where_app.services.points_service import PointsService
from where_app.services.session import StaticSession


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def store() -> InMemoryLocationStore:
    return InMemoryLocationStore()


@pytest.fixture
def ledger() -> PointsLedger:
    return PointsLedger()


@pytest.fixture
def alice() -> SessionUser:
    return SessionUser(id="alice", username="Alice")


@pytest.fixture
def session(alice) -> StaticSession:
    return StaticSession(alice)


@pytest.fixture
def points(ledger, store, session, settings) -> PointsService:
    return PointsService(ledger, store, session, settings=settings)


@pytest.fixture
def locations(points, settings) -> LocationService:
    return LocationService(points, settings=settings)


def make_contributor(user_id: str, kind: str) -> Contributor:
    return Contributor(user_id=user_id, username=user_id.title(), is_anonymous=False, contribution=kind)


@pytest.fixture
def park(store) -> Location:
    """Alice's location with contributions from bob and carol."""
    location = Location(
        id="loc_park",
        created_by="alice",
        name="Park",
        contributors=[
            make_contributor("alice", "image"),
            make_contributor("bob", "comment"),
            make_contributor("carol", "rating"),
        ],
    )
    store.save_location(location)
    return location
