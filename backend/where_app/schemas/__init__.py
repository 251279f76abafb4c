"""Pydantic schemas package."""

from where_app.schemas.location import (
    CommentCreate,
    CommentRead,
    ContributorRead,
    ImageCreate,
    LocationCreate,
    LocationRead,
    LocationSummary,
    RatingInput,
)
from where_app.schemas.points import ImageLikes, LikeRequest, PointActivityRead, UserPoints
from where_app.schemas.session import (
    LoginRequest,
    ReferralClaim,
    ReferralCode,
    ReferralRead,
    SessionRead,
    UserReferrals,
)

__all__ = [
    # Location
    "CommentCreate",
    "CommentRead",
    "ContributorRead",
    "ImageCreate",
    "LocationCreate",
    "LocationRead",
    "LocationSummary",
    "RatingInput",
    # Points
    "ImageLikes",
    "LikeRequest",
    "PointActivityRead",
    "UserPoints",
    # Session / referrals
    "LoginRequest",
    "ReferralClaim",
    "ReferralCode",
    "ReferralRead",
    "SessionRead",
    "UserReferrals",
]
