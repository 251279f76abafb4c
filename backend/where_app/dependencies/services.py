"""Service wiring for FastAPI routes.

Stores, the ledger and locks live for the whole process; the session and
the services bound to it are built per request.
"""

from functools import lru_cache

from fastapi import Depends, Request

from where_app.config import get_settings
from where_app.services.location_service import LocationService
from where_app.services.location_store import InMemoryLocationStore
from where_app.services.locks import LocationLocks
from where_app.services.points_ledger import PointsLedger
from where_app.services.points_service import PointsService
from where_app.services.referral_service import ReferralRegistry, ReferralService
from where_app.services.session import RequestSession


@lru_cache
def get_store() -> InMemoryLocationStore:
    return InMemoryLocationStore()


@lru_cache
def get_ledger() -> PointsLedger:
    return PointsLedger()


@lru_cache
def get_locks() -> LocationLocks:
    return LocationLocks()


@lru_cache
def get_referral_registry() -> ReferralRegistry:
    return ReferralRegistry()


def get_session(request: Request) -> RequestSession:
    return RequestSession(request.session)


def get_points_service(
    session: RequestSession = Depends(get_session),
    store: InMemoryLocationStore = Depends(get_store),
    ledger: PointsLedger = Depends(get_ledger),
    locks: LocationLocks = Depends(get_locks),
) -> PointsService:
    return PointsService(ledger, store, session, settings=get_settings(), locks=locks)


def get_location_service(points: PointsService = Depends(get_points_service)) -> LocationService:
    return LocationService(points, settings=get_settings())


def get_referral_service(
    points: PointsService = Depends(get_points_service),
    registry: ReferralRegistry = Depends(get_referral_registry),
) -> ReferralService:
    return ReferralService(points, registry, settings=get_settings())
