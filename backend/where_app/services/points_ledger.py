"""Append-only ledger of point-earning activities."""

import logging
import threading
from typing import Any, Mapping

from where_app.models.point_activity import ACTIVITY_TYPES, PointActivity

logger = logging.getLogger(__name__)


class PointsLedger:
    """System of record for every point ever awarded.

    Totals are always derived by summing the ledger. The only removal is
    ``remove_likes``, which drops zero-point ``like_image`` markers.
    """

    def __init__(self, activities: list[PointActivity] | None = None):
        self._activities: list[PointActivity] = list(activities or [])
        self._lock = threading.Lock()

    def append_activity(
        self,
        user_id: str,
        location_id: str,
        activity_type: str,
        points: float,
        metadata: Mapping[str, Any] | None = None,
    ) -> PointActivity:
        """Append one activity unconditionally (no dedup)."""
        if activity_type not in ACTIVITY_TYPES:
            raise ValueError(f"Unknown activity type: {activity_type}")

        activity = PointActivity(
            user_id=user_id,
            location_id=location_id,
            activity_type=activity_type,
            points=points,
            metadata=metadata or {},
        )
        with self._lock:
            self._activities.append(activity)
        logger.debug("Ledger +%s %s for %s on %s", points, activity_type, user_id, location_id)
        return activity

    @property
    def activities(self) -> list[PointActivity]:
        with self._lock:
            return list(self._activities)

    def __len__(self) -> int:
        return len(self._activities)

    def get_user_points(self, user_id: str) -> float:
        return sum(a.points for a in self.activities if a.user_id == user_id)

    def get_user_activities(self, user_id: str) -> list[PointActivity]:
        return [a for a in self.activities if a.user_id == user_id]

    # --- Image likes ---

    @staticmethod
    def _is_like(activity: PointActivity, image_url: str, user_id: str | None = None) -> bool:
        return (
            activity.activity_type == "like_image"
            and activity.image_url == image_url
            and (user_id is None or activity.user_id == user_id)
        )

    def find_like(self, user_id: str, image_url: str) -> PointActivity | None:
        return next((a for a in self.activities if self._is_like(a, image_url, user_id)), None)

    def append_like_if_absent(self, user_id: str, location_id: str, image_url: str) -> PointActivity | None:
        """Append a zero-point like marker unless the user already liked the image.

        The lookup and the append happen under one ledger lock, whatever
        location the like names.
        """
        with self._lock:
            if any(self._is_like(a, image_url, user_id) for a in self._activities):
                return None
            activity = PointActivity(
                user_id=user_id,
                location_id=location_id,
                activity_type="like_image",
                points=0,
                metadata={"image_url": image_url},
            )
            self._activities.append(activity)
        return activity

    def count_image_likes(self, image_url: str) -> int:
        return sum(1 for a in self.activities if self._is_like(a, image_url))

    def remove_likes(self, user_id: str, image_url: str) -> int:
        """Filter out the user's like markers for an image. Returns how many were removed."""
        with self._lock:
            before = len(self._activities)
            self._activities = [a for a in self._activities if not self._is_like(a, image_url, user_id)]
            return before - len(self._activities)
