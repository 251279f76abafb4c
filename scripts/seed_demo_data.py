#!/usr/bin/env python3
"""Seed a demo set of locations and print the resulting points table.

Runs entirely in memory; nothing is persisted.

Usage:
    python scripts/seed_demo_data.py
"""

import logging
import sys
from pathlib import Path

# Add backend to path for imports when run from a checkout
backend_dir = Path(__file__).resolve().parent.parent / "backend"
if backend_dir.exists():
    sys.path.insert(0, str(backend_dir))

from where_app.config import get_settings
from where_app.models.rating import RATING_AXES
from where_app.models.user import SessionUser
from where_app.services.location_service import LocationService
from where_app.services.location_store import InMemoryLocationStore
from where_app.services.points_ledger import PointsLedger
from where_app.services.points_service import PointsService
from where_app.services.referral_service import ReferralService
from where_app.services.session import StaticSession

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
logger = logging.getLogger(__name__)

USERS = [
    SessionUser(id="alice", username="Alice"),
    SessionUser(id="bob", username="Bob"),
    SessionUser(id="carol", username="Carol"),
    SessionUser(id="dave", username=None, is_anonymous=True),
]

DEMO_LOCATIONS = [
    {
        "name": "Old Town Square",
        "description": "Busy main square with food stalls",
        "latitude": 50.0614,
        "longitude": 19.9372,
        "images": ["https://example.com/old-town-1.jpg"],
    },
    {
        "name": "Riverside Market",
        "description": "Night market by the river",
        "latitude": 50.0490,
        "longitude": 19.9445,
        "images": ["https://example.com/riverside-1.jpg"],
    },
]


def _rating(seed: int) -> dict[str, float]:
    return {axis: float((seed * 3 + i) % 11) for i, axis in enumerate(RATING_AXES)}


def main():
    settings = get_settings()
    session = StaticSession()
    points = PointsService(PointsLedger(), InMemoryLocationStore(), session, settings=settings)
    locations = LocationService(points, settings=settings)
    referrals = ReferralService(points, settings=settings)

    alice, bob, carol, dave = USERS

    session.login(alice)
    created = [locations.add_location(**data) for data in DEMO_LOCATIONS]
    code = referrals.generate_referral_code(alice.id)
    referrals.claim_referral(code, bob.id)

    for seed, user in enumerate([bob, carol, dave], start=1):
        session.login(user)
        for location in created:
            locations.rate_location(location.id, _rating(seed))
        locations.add_comment(created[0].id, f"Visited with {user.username or 'friends'}")

    session.login(carol)
    locations.verify_location(created[1].id)
    locations.add_image(created[1].id, "https://example.com/riverside-2.jpg")

    points.like_image(dave.id, created[1].id, "https://example.com/riverside-2.jpg")

    for location in locations.list_locations():
        logger.info(
            "%s: %d ratings, %d contributor records, security avg %.2f",
            location.name,
            location.rating_count,
            len(location.contributors),
            location.ratings["security"],
        )

    print(f"\n{'user':<12}{'points':>10}{'activities':>12}")
    for user in USERS:
        print(f"{user.id:<12}{points.get_user_points(user.id):>10.3f}{len(points.get_user_activities(user.id)):>12}")


if __name__ == "__main__":
    main()
