"""Pydantic schemas for Location and its parts."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class RatingInput(BaseModel):
    """A full rating vector. Values are expected in [0, 10] but not enforced."""

    security: float
    violence: float
    welcoming: float
    street_food: float
    restaurants: float
    pickpocketing: float
    quality_of_life: float
    solicitation: float


class LocationCreate(BaseModel):
    """Fields for creating a location."""

    name: str | None = None
    description: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    images: list[str] = []
    ratings: RatingInput | None = None


class CommentCreate(BaseModel):
    """The author is always the session user (or anonymous)."""

    text: str


class ImageCreate(BaseModel):
    image_url: str


class ContributorRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: str
    username: str | None = None
    is_anonymous: bool
    contribution: str
    created_at: datetime


class CommentRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    username: str | None = None
    is_anonymous: bool
    text: str
    created_at: datetime


class LocationSummary(BaseModel):
    """Minimal location info for list views."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    latitude: float
    longitude: float
    rating_count: int
    verified: bool


class LocationRead(LocationSummary):
    """Full location output."""

    description: str
    images: list[str]
    all_images: list[str]
    ratings: dict[str, float]
    comments: list[CommentRead]
    created_by: str
    created_at: datetime
    verification_count: int
    contributors: list[ContributorRead]
