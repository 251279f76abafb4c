"""Points distribution: awards, engagement fan-out and image likes."""

import logging

from where_app.config import Settings, get_settings
from where_app.models.point_activity import PointActivity
from where_app.services.location_store import LocationStore
from where_app.services.locks import LocationLocks
from where_app.services.points_ledger import PointsLedger
from where_app.services.session import SessionProvider

logger = logging.getLogger(__name__)


class PointsService:
    """Writes to the ledger on behalf of engagement actions.

    Ledger appends never touch the session's cached points figure; callers
    invoke ``refresh_cached_total`` when they want it brought up to date.
    """

    def __init__(
        self,
        ledger: PointsLedger,
        store: LocationStore,
        session: SessionProvider,
        settings: Settings | None = None,
        locks: LocationLocks | None = None,
    ):
        self.ledger = ledger
        self.store = store
        self.session = session
        self.settings = settings or get_settings()
        self.locks = locks or LocationLocks()

    def add_points(self, user_id: str, location_id: str, activity_type: str, points: float) -> PointActivity:
        return self.ledger.append_activity(user_id, location_id, activity_type, points)

    def refresh_cached_total(self, user_id: str) -> float | None:
        """Recompute the session user's cached total from the ledger.

        Returns the new total, or None if ``user_id`` isn't the session user.
        """
        user = self.session.current_user()
        if not user or user.id != user_id:
            return None
        total = self.ledger.get_user_points(user_id)
        self.session.store_points(total)
        return total

    def distribute_engagement_points(self, location_id: str, total_points: float) -> list[PointActivity]:
        """Split an engagement budget between the creator and other contributors.

        The creator always receives ``creator_share`` of the budget. The rest
        is divided equally among contributor records whose user isn't the
        creator; a user with several contribution kinds gets one share per
        record. With no such records the remainder is not attributed.
        An unknown location is a silent no-op.
        """
        with self.locks.hold(location_id):
            location = self.store.get_location(location_id)
            if not location:
                logger.debug("Skipping engagement distribution, location %s not found", location_id)
                return []

            creator_points = total_points * self.settings.creator_share
            remaining_points = total_points * (1 - self.settings.creator_share)

            created = [
                self.ledger.append_activity(location.created_by, location_id, "receive_engagement", creator_points)
            ]

            contributors = location.other_contributors()
            if contributors:
                per_contributor = remaining_points / len(contributors)
                for contributor in contributors:
                    created.append(
                        self.ledger.append_activity(
                            contributor.user_id, location_id, "receive_engagement", per_contributor
                        )
                    )
            else:
                logger.debug("No other contributors on %s, %s points unattributed", location_id, remaining_points)

        logger.info(
            "Distributed %s engagement points on %s to %d recipients", total_points, location_id, len(created)
        )
        return created

    # --- Image likes ---

    def like_image(self, user_id: str, location_id: str, image_url: str) -> bool:
        """Record a like and pay out engagement for the location.

        The liker earns nothing. A repeat like is a no-op. Returns whether
        the like was recorded.
        """
        if not self.ledger.append_like_if_absent(user_id, location_id, image_url):
            logger.debug("User %s already liked %s", user_id, image_url)
            return False
        self.distribute_engagement_points(location_id, self.settings.engagement_points)
        return True

    def unlike_image(self, user_id: str, location_id: str, image_url: str) -> bool:
        """Drop the like marker. Points already distributed for it stay put."""
        with self.locks.hold(location_id):
            removed = self.ledger.remove_likes(user_id, image_url)
        return removed > 0

    def is_image_liked_by_user(self, user_id: str, image_url: str) -> bool:
        return self.ledger.find_like(user_id, image_url) is not None

    def get_image_likes(self, image_url: str) -> int:
        return self.ledger.count_image_likes(image_url)

    # --- Queries ---

    def get_user_points(self, user_id: str) -> float:
        return self.ledger.get_user_points(user_id)

    def get_user_activities(self, user_id: str) -> list[PointActivity]:
        return self.ledger.get_user_activities(user_id)
