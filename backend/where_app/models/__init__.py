"""Domain models package."""

from where_app.models.location import (
    CONTRIBUTION_KINDS,
    Comment,
    ContributionKind,
    Contributor,
    Location,
)
from where_app.models.point_activity import ACTIVITY_TYPES, ActivityType, PointActivity
from where_app.models.rating import NEGATIVE_AXES, POSITIVE_AXES, RATING_AXES, empty_ratings
from where_app.models.referral import Referral
from where_app.models.user import SessionUser

__all__ = [
    # Location
    "CONTRIBUTION_KINDS",
    "Comment",
    "ContributionKind",
    "Contributor",
    "Location",
    # Ledger
    "ACTIVITY_TYPES",
    "ActivityType",
    "PointActivity",
    # Ratings
    "NEGATIVE_AXES",
    "POSITIVE_AXES",
    "RATING_AXES",
    "empty_ratings",
    # Users
    "Referral",
    "SessionUser",
]
