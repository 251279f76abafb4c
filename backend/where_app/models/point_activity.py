"""Point ledger entries."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Literal, Mapping

ActivityType = Literal[
    "create_location",
    "add_image",
    "verify_location",
    "rate_location",
    "comment",
    "receive_engagement",
    "like_image",
    "referral",
]
ACTIVITY_TYPES = (
    "create_location",
    "add_image",
    "verify_location",
    "rate_location",
    "comment",
    "receive_engagement",
    "like_image",
    "referral",
)


def new_activity_id() -> str:
    return f"activity_{uuid.uuid4().hex}"


@dataclass(frozen=True)
class PointActivity:
    """One immutable ledger record. Never mutated after creation."""

    user_id: str
    location_id: str
    activity_type: ActivityType
    points: float
    id: str = field(default_factory=new_activity_id)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        # Freeze metadata so callers can't edit a recorded activity through it
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @property
    def image_url(self) -> str | None:
        return self.metadata.get("image_url")
