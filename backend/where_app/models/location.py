"""Location aggregate: ratings, contributors, comments and images."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal

from where_app.models.rating import empty_ratings

ContributionKind = Literal["image", "verification", "rating", "comment"]
CONTRIBUTION_KINDS = ("image", "verification", "rating", "comment")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Contributor:
    """A user credited with one kind of participation on a location."""

    user_id: str
    username: str | None
    is_anonymous: bool
    contribution: ContributionKind
    created_at: datetime = field(default_factory=_utcnow)


@dataclass
class Comment:
    id: str
    user_id: str
    username: str | None
    is_anonymous: bool
    text: str
    created_at: datetime = field(default_factory=_utcnow)


@dataclass
class Location:
    """A pinned place.

    ``ratings`` holds the running average per axis over ``rating_count``
    submissions. ``created_by`` never changes after creation.
    """

    id: str
    created_by: str
    name: str = "Unnamed Location"
    description: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    images: list[str] = field(default_factory=list)
    all_images: list[str] = field(default_factory=list)
    ratings: dict[str, float] = field(default_factory=empty_ratings)
    rating_count: int = 0
    comments: list[Comment] = field(default_factory=list)
    created_at: datetime = field(default_factory=_utcnow)
    verified: bool = False
    verification_count: int = 0
    contributors: list[Contributor] = field(default_factory=list)

    def has_contribution(self, user_id: str, kind: str) -> bool:
        return any(c.user_id == user_id and c.contribution == kind for c in self.contributors)

    def other_contributors(self) -> list[Contributor]:
        """Contributor records not belonging to the creator, one entry per record."""
        return [c for c in self.contributors if c.user_id != self.created_by]


def new_location_id() -> str:
    return f"loc_{uuid.uuid4().hex[:12]}"


def new_comment_id() -> str:
    return f"comment_{uuid.uuid4().hex[:12]}"
