"""Referral record."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Referral:
    id: str
    referrer_id: str
    referred_id: str
    code: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    claimed: bool = True
