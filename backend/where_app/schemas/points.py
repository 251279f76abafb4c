"""Pydantic schemas for the points ledger."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel

from where_app.models.point_activity import PointActivity


class PointActivityRead(BaseModel):
    id: str
    user_id: str
    location_id: str
    activity_type: str
    points: float
    created_at: datetime
    metadata: dict[str, Any] = {}

    @classmethod
    def from_activity(cls, activity: PointActivity) -> "PointActivityRead":
        return cls(
            id=activity.id,
            user_id=activity.user_id,
            location_id=activity.location_id,
            activity_type=activity.activity_type,
            points=activity.points,
            created_at=activity.created_at,
            metadata=dict(activity.metadata),
        )


class UserPoints(BaseModel):
    user_id: str
    total_points: float
    activities: list[PointActivityRead]


class LikeRequest(BaseModel):
    location_id: str
    image_url: str


class ImageLikes(BaseModel):
    image_url: str
    likes: int
    liked_by_me: bool = False
